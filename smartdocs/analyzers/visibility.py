"""Export and public-visibility heuristics."""

from __future__ import annotations

import re

from tree_sitter import Node

from .utils import ancestors, node_text

# Textual match over the initializer; re-exports and computed members are not resolved.
_COMMONJS_EXPORT = re.compile(r"module\.exports|exports\.")


def is_python_exported(node: Node, source_bytes: bytes) -> bool:
    """Only definitions placed directly in the module body are public."""
    parent = node.parent
    if parent is not None and parent.type == "decorated_definition":
        parent = parent.parent
    return parent is not None and parent.type == "module"


def is_c_family_exported(node: Node, source_bytes: bytes) -> bool:
    """Detect ES module exports, CommonJS assignments and bare export keywords."""
    for current in ancestors(node, include_self=True):
        if current.type.startswith("export"):
            return True

    if node.type == "variable_declarator":
        value = node.child_by_field_name("value")
        if value is not None and _COMMONJS_EXPORT.search(node_text(value, source_bytes)):
            return True

    preceding = node.prev_sibling
    return preceding is not None and preceding.type == "export"


__all__ = ["is_c_family_exported", "is_python_exported"]
