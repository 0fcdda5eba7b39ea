"""Documentation presence checks for each language family."""

from __future__ import annotations

from typing import Optional

from tree_sitter import Node

from .utils import node_text, previous_named_siblings

_DOC_BLOCK_PREFIX = "/**"
_LINE_COMMENT_PREFIX = "//"
_COMMENT_TYPES = frozenset({"comment", "html_comment"})
# Nodes that may sit between a doc block and the entity it documents.
_DECLARATION_WRAPPERS = frozenset({"lexical_declaration", "variable_declaration"})
_PYTHON_STRING_TYPES = frozenset({"string", "concatenated_string"})


def has_jsdoc(node: Node, source_bytes: bytes) -> bool:
    """Return True when a ``/** ... */`` block precedes ``node``.

    The entity itself is checked first. When it is wrapped by an export
    statement or a variable declaration, the same scan runs again from each
    wrapper, so ``/** doc */ export const run = () => {}`` is documented.
    """
    target: Optional[Node] = node
    while target is not None:
        if _scan_for_doc_block(target, source_bytes):
            return True
        target = _doc_wrapper(target)
    return False


def _doc_wrapper(node: Node) -> Optional[Node]:
    parent = node.parent
    if parent is None:
        return None
    if parent.type.startswith("export") or parent.type in _DECLARATION_WRAPPERS:
        return parent
    return None


def _scan_for_doc_block(node: Node, source_bytes: bytes) -> bool:
    for sibling in previous_named_siblings(node):
        if sibling.type in _COMMENT_TYPES:
            text = node_text(sibling, source_bytes).strip()
            if text.startswith(_DOC_BLOCK_PREFIX):
                return True
            if text.startswith(_LINE_COMMENT_PREFIX):
                # Line comments directly above are skipped; a doc block may sit above them.
                continue
            return False
        if sibling.is_missing:
            continue
        return False
    return False


def has_python_docstring(node: Node, source_bytes: bytes) -> bool:
    """Return True when the first statement of the body is a string literal."""
    body = node.child_by_field_name("body")
    if body is None:
        return False

    for statement in body.named_children:
        if statement.type == "comment":
            continue
        if statement.type != "expression_statement" or len(statement.named_children) != 1:
            return False
        return statement.named_children[0].type in _PYTHON_STRING_TYPES
    return False


__all__ = ["has_jsdoc", "has_python_docstring"]
