"""Automatic table-of-contents generation for markdown reports."""

from __future__ import annotations

import re
from typing import List


class TableOfContentsBuilder:
    """Builds ToC blocks for level two and three headings."""

    PLACEHOLDER = "<!-- smartdocs:toc -->"

    def build(self, markdown: str) -> str:
        toc_block = self._build_block(markdown)
        if self.PLACEHOLDER not in markdown:
            return markdown
        return markdown.replace(self.PLACEHOLDER, toc_block, 1)

    def _build_block(self, markdown: str) -> str:
        headings: List[tuple[int, str, str]] = []
        in_code = False
        for line in markdown.splitlines():
            stripped = line.strip()
            if stripped.startswith("```"):
                in_code = not in_code
                continue
            if in_code:
                continue
            match = re.match(r"^(#{2,3})\s+(.*)$", stripped)
            if match:
                level = len(match.group(1))
                title = match.group(2).strip()
                headings.append((level, title, self._slugify(title)))

        if not headings:
            return ""

        output: List[str] = ["## Table of Contents", ""]
        for level, title, anchor in headings:
            indent = "  " * (level - 2)
            output.append(f"{indent}- [{title}](#{anchor})")
        return "\n".join(output)

    @staticmethod
    def _slugify(title: str) -> str:
        slug = title.lower()
        slug = re.sub(r"[^a-z0-9\s_-]", "", slug)
        slug = re.sub(r"\s+", "-", slug)
        slug = re.sub(r"-+", "-", slug)
        return slug.strip("-")


__all__ = ["TableOfContentsBuilder"]
