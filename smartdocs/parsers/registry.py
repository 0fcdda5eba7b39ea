"""Grammar registry wrapping tree-sitter parsers."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

import tree_sitter_javascript
import tree_sitter_python
import tree_sitter_typescript
from tree_sitter import Language, Parser, Tree

from ..errors import UnsupportedLanguageError
from ..models import SupportedLanguage


class GrammarRegistry:
    """Read-only mapping of languages to tree-sitter grammars.

    The registry is built once and handed to whoever needs to parse. Every
    call to :meth:`parse` creates its own ``Parser`` so independent analysis
    runs can share a registry across threads.
    """

    def __init__(self, grammars: Mapping[SupportedLanguage, Language]) -> None:
        self._grammars: Mapping[SupportedLanguage, Language] = MappingProxyType(dict(grammars))

    @classmethod
    def default(cls) -> "GrammarRegistry":
        """Return a registry with every bundled grammar."""
        return cls(
            {
                SupportedLanguage.JAVASCRIPT: Language(tree_sitter_javascript.language()),
                SupportedLanguage.TYPESCRIPT: Language(tree_sitter_typescript.language_typescript()),
                SupportedLanguage.PYTHON: Language(tree_sitter_python.language()),
            }
        )

    @property
    def languages(self) -> Tuple[SupportedLanguage, ...]:
        return tuple(self._grammars)

    def supports(self, language: SupportedLanguage) -> bool:
        return language in self._grammars

    def grammar(self, language: SupportedLanguage) -> Language:
        try:
            return self._grammars[language]
        except KeyError:
            raise UnsupportedLanguageError(language) from None

    def parse(self, source: str | bytes, language: SupportedLanguage) -> Tree:
        """Parse ``source`` with the grammar registered for ``language``."""
        parser = Parser(self.grammar(language))
        source_bytes = source.encode("utf-8") if isinstance(source, str) else source
        return parser.parse(source_bytes)


__all__ = ["GrammarRegistry"]
