"""Tree-sitter powered entity extraction."""

from __future__ import annotations

import re
from typing import List, Mapping, Optional, Tuple

from tree_sitter import Node, Tree

from ..errors import UnsupportedLanguageError
from ..models import CodeEntity, CodeLocation, SupportedLanguage
from .languages import IDENTIFIER_TYPES, LANGUAGE_PROFILES, EntityRule, LanguageProfile
from .utils import node_text

# Lexical approximation: keywords inside strings and comments are counted too.
_BRANCH_PATTERN = re.compile(r"if\s*\(|if\s+[^(]|switch\s*\(|for\s*\(|while\s*\(|case\s+")
_LINE_BREAK = re.compile(r"\r?\n")
BRANCH_WEIGHT = 3


def estimate_complexity(text: str) -> int:
    """Return ``line span + 3 * branch keyword count`` for a source snippet."""
    lines = len(_LINE_BREAK.split(text))
    branches = len(_BRANCH_PATTERN.findall(text))
    return lines + branches * BRANCH_WEIGHT


class EntityExtractor:
    """Walks a syntax tree and emits documentable entities in pre-order."""

    def __init__(self, profiles: Mapping[SupportedLanguage, LanguageProfile] | None = None) -> None:
        self._profiles = dict(profiles) if profiles is not None else dict(LANGUAGE_PROFILES)

    def supports(self, language: SupportedLanguage) -> bool:
        return language in self._profiles

    def extract(
        self,
        tree: Tree,
        language: SupportedLanguage,
        source: str | bytes,
        relative_path: str = "",
    ) -> List[CodeEntity]:
        profile = self._profiles.get(language)
        if profile is None:
            raise UnsupportedLanguageError(language)
        source_bytes = source.encode("utf-8") if isinstance(source, str) else source

        entities: List[CodeEntity] = []
        stack: List[Tuple[Node, Optional[Node]]] = [(tree.root_node, None)]
        while stack:
            node, parent = stack.pop()
            entity = self._build_entity(profile, node, parent, source_bytes, relative_path)
            if entity is not None:
                entities.append(entity)
            for child in reversed(node.named_children):
                stack.append((child, node))
        return entities

    def _build_entity(
        self,
        profile: LanguageProfile,
        node: Node,
        parent: Optional[Node],
        source_bytes: bytes,
        relative_path: str,
    ) -> Optional[CodeEntity]:
        match = profile.identify(node, parent)
        if match is None:
            return None
        rule, entity_type = match

        name = self._extract_name(rule, node, source_bytes)
        if not name:
            return None

        row, column = node.start_point
        location = CodeLocation(line=row + 1, column=column + 1)
        return CodeEntity(
            name=name,
            type=entity_type,
            language=profile.language,
            location=location,
            has_doc=profile.has_documentation(node, source_bytes),
            exported=profile.is_exported(node, source_bytes),
            complexity_score=estimate_complexity(node_text(node, source_bytes)),
            summary=f"{relative_path}:{location.line}" if relative_path else None,
        )

    @staticmethod
    def _extract_name(rule: EntityRule, node: Node, source_bytes: bytes) -> Optional[str]:
        for field_name in rule.name_fields:
            name_node = node.child_by_field_name(field_name)
            if name_node is not None:
                return node_text(name_node, source_bytes).strip() or None
        for child in node.named_children:
            if child.type in IDENTIFIER_TYPES:
                return node_text(child, source_bytes).strip() or None
        return None


__all__ = ["BRANCH_WEIGHT", "EntityExtractor", "estimate_complexity"]
