"""Entity extraction: rule tables, documentation and visibility checks."""

from __future__ import annotations

from .extractor import EntityExtractor, estimate_complexity
from .languages import LANGUAGE_PROFILES, EntityRule, LanguageProfile

__all__ = [
    "EntityExtractor",
    "EntityRule",
    "LANGUAGE_PROFILES",
    "LanguageProfile",
    "estimate_complexity",
]
