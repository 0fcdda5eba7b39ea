"""Syntax providers backed by tree-sitter grammars."""

from .registry import GrammarRegistry

__all__ = ["GrammarRegistry"]
