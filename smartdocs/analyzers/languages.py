"""Per-language node-type rule tables for entity extraction.

Each supported language registers a :class:`LanguageProfile`: an ordered list
of :class:`EntityRule` entries plus the documentation and visibility checks
for that language. The extractor walk stays language-agnostic; adding a
language means registering another profile here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, FrozenSet, Optional, Tuple

from tree_sitter import Node

from ..models import CodeEntityType, SupportedLanguage
from .documentation import has_jsdoc, has_python_docstring
from .visibility import is_c_family_exported, is_python_exported

EntityResolver = Callable[[Node, Optional[Node]], Optional[CodeEntityType]]
NodeCheck = Callable[[Node, bytes], bool]

IDENTIFIER_TYPES: FrozenSet[str] = frozenset(
    {"identifier", "property_identifier", "private_property_identifier", "type_identifier"}
)

_FUNCTION_VALUE_TYPES = frozenset(
    {"arrow_function", "function", "function_expression", "generator_function"}
)


@dataclass(frozen=True)
class EntityRule:
    """Maps a set of node types to an entity type resolver."""

    node_types: FrozenSet[str]
    resolve: EntityResolver
    name_fields: Tuple[str, ...] = ("name",)

    def matches(self, node: Node) -> bool:
        return node.type in self.node_types


@dataclass(frozen=True)
class LanguageProfile:
    """Extraction rules and documentation conventions for one language."""

    language: SupportedLanguage
    rules: Tuple[EntityRule, ...]
    has_documentation: NodeCheck
    is_exported: NodeCheck

    def identify(
        self, node: Node, parent: Optional[Node]
    ) -> Optional[Tuple[EntityRule, CodeEntityType]]:
        """Return the first rule that resolves ``node`` to an entity type."""
        for rule in self.rules:
            if not rule.matches(node):
                continue
            entity_type = rule.resolve(node, parent)
            if entity_type is not None:
                return rule, entity_type
        return None


def _always(entity_type: CodeEntityType) -> EntityResolver:
    def _resolve(node: Node, parent: Optional[Node]) -> Optional[CodeEntityType]:
        return entity_type

    return _resolve


def _member(node: Node, parent: Optional[Node]) -> Optional[CodeEntityType]:
    if parent is not None and parent.type == "class_body":
        return CodeEntityType.METHOD
    return CodeEntityType.FUNCTION


def _function_valued(node: Node, parent: Optional[Node]) -> Optional[CodeEntityType]:
    value = node.child_by_field_name("value")
    if value is None or value.type not in _FUNCTION_VALUE_TYPES:
        return None
    return _member(node, parent)


def _python_callable(node: Node, parent: Optional[Node]) -> Optional[CodeEntityType]:
    scope = parent
    if scope is not None and scope.type == "decorated_definition":
        scope = scope.parent
    if scope is not None and scope.type == "block":
        scope = scope.parent
    if scope is not None and scope.type == "class_definition":
        return CodeEntityType.METHOD
    return CodeEntityType.FUNCTION


C_FAMILY_RULES: Tuple[EntityRule, ...] = (
    EntityRule(
        frozenset({"function_declaration", "generator_function_declaration"}),
        _always(CodeEntityType.FUNCTION),
    ),
    EntityRule(
        frozenset({"class_declaration", "abstract_class_declaration"}),
        _always(CodeEntityType.CLASS),
    ),
    EntityRule(
        frozenset({"method_definition"}),
        _member,
        name_fields=("name", "property"),
    ),
    EntityRule(
        frozenset({"public_field_definition", "field_definition"}),
        _function_valued,
        name_fields=("name", "property"),
    ),
    EntityRule(frozenset({"variable_declarator"}), _function_valued),
)

PYTHON_RULES: Tuple[EntityRule, ...] = (
    EntityRule(
        frozenset({"function_definition", "async_function_definition"}),
        _python_callable,
    ),
    EntityRule(frozenset({"class_definition"}), _always(CodeEntityType.CLASS)),
)


def _c_family_profile(language: SupportedLanguage) -> LanguageProfile:
    return LanguageProfile(
        language=language,
        rules=C_FAMILY_RULES,
        has_documentation=has_jsdoc,
        is_exported=is_c_family_exported,
    )


LANGUAGE_PROFILES: Dict[SupportedLanguage, LanguageProfile] = {
    SupportedLanguage.TYPESCRIPT: _c_family_profile(SupportedLanguage.TYPESCRIPT),
    SupportedLanguage.JAVASCRIPT: _c_family_profile(SupportedLanguage.JAVASCRIPT),
    SupportedLanguage.PYTHON: LanguageProfile(
        language=SupportedLanguage.PYTHON,
        rules=PYTHON_RULES,
        has_documentation=has_python_docstring,
        is_exported=is_python_exported,
    ),
}


__all__ = [
    "C_FAMILY_RULES",
    "EntityRule",
    "IDENTIFIER_TYPES",
    "LANGUAGE_PROFILES",
    "LanguageProfile",
    "PYTHON_RULES",
]
