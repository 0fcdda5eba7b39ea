"""Shared helpers for walking tree-sitter nodes."""

from __future__ import annotations

from typing import Iterator

from tree_sitter import Node


def node_text(node: Node, source_bytes: bytes) -> str:
    """Return the raw source text covered by ``node``."""
    return source_bytes[node.start_byte : node.end_byte].decode("utf-8", errors="ignore")


def previous_named_siblings(node: Node) -> Iterator[Node]:
    """Yield named siblings before ``node``, nearest first."""
    current = node.prev_named_sibling
    while current is not None:
        yield current
        current = current.prev_named_sibling


def ancestors(node: Node, *, include_self: bool = False) -> Iterator[Node]:
    """Yield ``node``'s ancestors from the innermost outwards."""
    current = node if include_self else node.parent
    while current is not None:
        yield current
        current = current.parent


__all__ = ["ancestors", "node_text", "previous_named_siblings"]
