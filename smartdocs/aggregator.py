"""Per-file and run-level documentation metrics."""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, Sequence

from .models import (
    AnalysisSummary,
    CodeEntity,
    CodeEntityType,
    EntityMetrics,
    FileAnalysis,
    SupportedLanguage,
)

_LINE_BREAK = re.compile(r"\r?\n")
_HUNDREDTHS = Decimal("0.01")


def coverage_percentage(documented: int, total: int) -> float:
    """Return the documented share rounded to 2 places; 100 when nothing is documentable."""
    if total == 0:
        return 100.0
    # Ties round up: 1 of 800 is 0.13.
    share = Decimal(documented * 100) / Decimal(total)
    return float(share.quantize(_HUNDREDTHS, rounding=ROUND_HALF_UP))


def count_lines(content: str) -> int:
    return len(_LINE_BREAK.split(content))


def build_entity_metrics(entities: Sequence[CodeEntity]) -> EntityMetrics:
    documented = sum(1 for entity in entities if entity.has_doc)
    return EntityMetrics(
        total=len(entities),
        documented=documented,
        undocumented=len(entities) - documented,
        functions=sum(1 for entity in entities if entity.type is CodeEntityType.FUNCTION),
        classes=sum(1 for entity in entities if entity.type is CodeEntityType.CLASS),
        methods=sum(1 for entity in entities if entity.type is CodeEntityType.METHOD),
    )


def build_file_analysis(
    path: str,
    relative_path: str,
    language: SupportedLanguage,
    content: str,
    entities: Sequence[CodeEntity],
) -> FileAnalysis:
    """Bundle the entities of one file with its metrics."""
    return FileAnalysis(
        path=path,
        relative_path=relative_path,
        language=language,
        lines_of_code=count_lines(content),
        entity_metrics=build_entity_metrics(entities),
        entities=list(entities),
    )


def file_coverage(analysis: FileAnalysis) -> float:
    metrics = analysis.entity_metrics
    return coverage_percentage(metrics.documented, metrics.total)


def aggregate(root_path: str, files: Iterable[FileAnalysis]) -> AnalysisSummary:
    """Roll per-file metrics up into a run summary in a single pass."""
    languages: Dict[SupportedLanguage, int] = {language: 0 for language in SupportedLanguage}
    total_files = 0
    total_entities = 0
    documented = 0
    undocumented = 0

    for analysis in files:
        total_files += 1
        languages[analysis.language] += 1
        total_entities += analysis.entity_metrics.total
        documented += analysis.entity_metrics.documented
        undocumented += analysis.entity_metrics.undocumented

    return AnalysisSummary(
        root_path=root_path,
        total_files=total_files,
        languages=languages,
        total_entities=total_entities,
        documented_entities=documented,
        undocumented_entities=undocumented,
        documentation_coverage=coverage_percentage(documented, total_entities),
    )


__all__ = [
    "aggregate",
    "build_entity_metrics",
    "build_file_analysis",
    "count_lines",
    "coverage_percentage",
    "file_coverage",
]
