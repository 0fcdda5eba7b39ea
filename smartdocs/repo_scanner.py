"""Repository scanning for analyzable source files."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from .logging import get_logger
from .models import SupportedLanguage

ExcludePredicate = Callable[[str], bool]

_EXCLUDED_DIRS = {
    ".git",
    ".hg",
    ".svn",
    "node_modules",
    "dist",
    "build",
    ".next",
    ".cache",
    ".venv",
    "__pycache__",
    ".pytest_cache",
    ".mypy_cache",
}

LANGUAGE_BY_SUFFIX = {
    ".ts": SupportedLanguage.TYPESCRIPT,
    ".tsx": SupportedLanguage.TYPESCRIPT,
    ".js": SupportedLanguage.JAVASCRIPT,
    ".jsx": SupportedLanguage.JAVASCRIPT,
    ".mjs": SupportedLanguage.JAVASCRIPT,
    ".cjs": SupportedLanguage.JAVASCRIPT,
    ".py": SupportedLanguage.PYTHON,
}


@dataclass(frozen=True)
class SourceFile:
    """A discovered source file with its decoded contents."""

    path: str
    relative_path: str
    language: SupportedLanguage
    content: str


def detect_language(path: Path | str) -> SupportedLanguage | None:
    suffix = Path(path).suffix.lower()
    return LANGUAGE_BY_SUFFIX.get(suffix)


def glob_to_regex(pattern: str) -> re.Pattern[str]:
    """Translate a glob-like pattern: ``**`` spans directories, ``*`` does not."""
    escaped = re.sub(r"([.+?^${}()|\[\]\\])", r"\\\1", pattern)
    normalized = (
        escaped.replace("**", "\0").replace("*", "[^/]*").replace("\0", ".*")
    )
    return re.compile(f"^{normalized}$")


def build_exclude_matcher(patterns: Iterable[str] | None) -> Optional[ExcludePredicate]:
    """Return a predicate over absolute paths, or None when no patterns are given."""
    regexes = [glob_to_regex(pattern) for pattern in patterns or () if pattern]
    if not regexes:
        return None

    def _matches(file_path: str) -> bool:
        return any(regex.match(file_path) for regex in regexes)

    return _matches


class RepoScanner:
    """Walks a directory tree and loads every supported source file."""

    def __init__(self) -> None:
        self.logger = get_logger("scanner")

    def scan(
        self,
        root: str | Path,
        *,
        max_files: int | None = None,
        exclude: ExcludePredicate | None = None,
    ) -> List[SourceFile]:
        """Return source files in deterministic depth-first order."""
        root_path = Path(root).expanduser().resolve()
        if not root_path.exists():
            raise FileNotFoundError(f"Repository path not found: {root}")
        if not root_path.is_dir():
            raise NotADirectoryError(f"Repository path is not a directory: {root}")

        files: List[SourceFile] = []
        self._collect(root_path, root_path, files, max_files=max_files, exclude=exclude)
        self.logger.debug("Discovered %d source files under %s", len(files), root_path)
        return files

    def _collect(
        self,
        directory: Path,
        root: Path,
        results: List[SourceFile],
        *,
        max_files: int | None,
        exclude: ExcludePredicate | None,
    ) -> bool:
        """Append files below ``directory``; return True once ``max_files`` is reached."""
        with os.scandir(directory) as iterator:
            entries = sorted(iterator, key=lambda entry: entry.name)

        for entry in entries:
            absolute = Path(entry.path)
            if exclude is not None and exclude(absolute.as_posix()):
                continue

            if entry.is_dir(follow_symlinks=False):
                if entry.name in _EXCLUDED_DIRS:
                    continue
                if self._collect(absolute, root, results, max_files=max_files, exclude=exclude):
                    return True
                continue

            if not entry.is_file():
                continue
            language = detect_language(absolute)
            if language is None:
                continue

            content = absolute.read_bytes().decode("utf-8", errors="replace")
            results.append(
                SourceFile(
                    path=absolute.as_posix(),
                    relative_path=absolute.relative_to(root).as_posix(),
                    language=language,
                    content=content,
                )
            )
            if max_files and len(results) >= max_files:
                return True
        return False


__all__ = [
    "ExcludePredicate",
    "LANGUAGE_BY_SUFFIX",
    "RepoScanner",
    "SourceFile",
    "build_exclude_matcher",
    "detect_language",
    "glob_to_regex",
]
