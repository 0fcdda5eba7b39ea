"""Markdown report rendering."""

from .markdown import MarkdownReportBuilder
from .toc import TableOfContentsBuilder

__all__ = ["MarkdownReportBuilder", "TableOfContentsBuilder"]
