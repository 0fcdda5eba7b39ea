"""Tests for smartdocs.aggregator."""

from __future__ import annotations

from typing import List

from smartdocs.aggregator import (
    aggregate,
    build_file_analysis,
    count_lines,
    coverage_percentage,
    file_coverage,
)
from smartdocs.models import CodeEntity, CodeEntityType, CodeLocation, SupportedLanguage


def _entities(*specs: tuple[CodeEntityType, bool]) -> List[CodeEntity]:
    return [
        CodeEntity(
            name=f"entity{index}",
            type=entity_type,
            language=SupportedLanguage.PYTHON,
            location=CodeLocation(line=index + 1, column=1),
            has_doc=has_doc,
            exported=False,
            complexity_score=1,
        )
        for index, (entity_type, has_doc) in enumerate(specs)
    ]


def test_coverage_percentage_rounds_and_handles_empty() -> None:
    assert coverage_percentage(0, 0) == 100.0
    assert coverage_percentage(1, 3) == 33.33
    assert coverage_percentage(2, 3) == 66.67
    assert coverage_percentage(4, 4) == 100.0


def test_coverage_percentage_rounds_ties_up() -> None:
    assert coverage_percentage(1, 800) == 0.13
    assert coverage_percentage(3, 800) == 0.38
    assert coverage_percentage(1, 8) == 12.5


def test_count_lines_splits_on_any_newline() -> None:
    assert count_lines("") == 1
    assert count_lines("a\r\nb\n") == 3


def test_build_file_analysis_counts_entities() -> None:
    entities = _entities(
        (CodeEntityType.CLASS, True),
        (CodeEntityType.METHOD, False),
        (CodeEntityType.METHOD, True),
        (CodeEntityType.FUNCTION, False),
    )

    analysis = build_file_analysis("/repo/a.py", "a.py", SupportedLanguage.PYTHON, "x\ny\n", entities)

    metrics = analysis.entity_metrics
    assert (metrics.total, metrics.documented, metrics.undocumented) == (4, 2, 2)
    assert (metrics.functions, metrics.classes, metrics.methods) == (1, 1, 2)
    assert analysis.lines_of_code == 3
    assert file_coverage(analysis) == 50.0


def test_aggregate_rolls_up_every_file() -> None:
    first = build_file_analysis(
        "/repo/a.py",
        "a.py",
        SupportedLanguage.PYTHON,
        "",
        _entities((CodeEntityType.FUNCTION, True), (CodeEntityType.FUNCTION, False)),
    )
    second = build_file_analysis(
        "/repo/b.ts",
        "b.ts",
        SupportedLanguage.TYPESCRIPT,
        "",
        _entities((CodeEntityType.CLASS, False)),
    )
    empty = build_file_analysis("/repo/c.py", "c.py", SupportedLanguage.PYTHON, "", [])

    summary = aggregate("/repo", [first, second, empty])

    assert summary.root_path == "/repo"
    assert summary.total_files == 3
    assert summary.languages == {
        SupportedLanguage.TYPESCRIPT: 1,
        SupportedLanguage.JAVASCRIPT: 0,
        SupportedLanguage.PYTHON: 2,
    }
    assert summary.total_entities == 3
    assert summary.documented_entities == 1
    assert summary.undocumented_entities == 2
    assert summary.documentation_coverage == 33.33


def test_aggregate_without_files_reports_full_coverage() -> None:
    summary = aggregate("/repo", [])

    assert summary.total_files == 0
    assert summary.documentation_coverage == 100.0
    assert summary.to_dict()["languages"] == {"typescript": 0, "javascript": 0, "python": 0}
