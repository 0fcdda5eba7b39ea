"""Tests for smartdocs.suggestions."""

from __future__ import annotations

from typing import List

from smartdocs.models import (
    AnalysisSummary,
    CodeEntityType,
    CodeLocation,
    MissingDocIssue,
    SeverityLevel,
    SupportedLanguage,
)
from smartdocs.suggestions import MAX_SUGGESTION_TARGETS, format_target, synthesize


def _summary(coverage: float) -> AnalysisSummary:
    return AnalysisSummary(
        root_path="/repo",
        total_files=1,
        languages={language: 0 for language in SupportedLanguage},
        total_entities=10,
        documented_entities=0,
        undocumented_entities=10,
        documentation_coverage=coverage,
    )


def _issues(count: int, severity: SeverityLevel, prefix: str = "item") -> List[MissingDocIssue]:
    return [
        MissingDocIssue(
            name=f"{prefix}{index}",
            type=CodeEntityType.FUNCTION,
            language=SupportedLanguage.JAVASCRIPT,
            location=CodeLocation(line=index + 1, column=1),
            has_doc=False,
            exported=severity is SeverityLevel.CRITICAL,
            complexity_score=1,
            severity=severity,
            rationale="missing docs",
        )
        for index in range(count)
    ]


def test_format_target_uses_name_and_line() -> None:
    issue = _issues(1, SeverityLevel.LOW, prefix="parse")[0]
    assert format_target(issue) == "parse0 (line 1)"


def test_critical_targets_are_capped() -> None:
    suggestions = synthesize(_summary(90.0), _issues(12, SeverityLevel.CRITICAL))

    assert len(suggestions) == 1
    critical = suggestions[0]
    assert critical.impact is SeverityLevel.CRITICAL
    assert len(critical.targets) == MAX_SUGGESTION_TARGETS
    assert critical.targets[0] == "item0 (line 1)"
    assert critical.targets[-1] == "item9 (line 10)"


def test_suggestions_are_ordered_by_rule() -> None:
    issues = _issues(2, SeverityLevel.MEDIUM, "helper") + _issues(1, SeverityLevel.CRITICAL, "api")

    suggestions = synthesize(_summary(20.0), issues)

    assert [suggestion.title for suggestion in suggestions] == [
        "Document the exported API surface first",
        "Summarize complex logic",
        "Establish a documentation baseline",
    ]
    assert suggestions[0].targets == ["api0 (line 1)"]
    assert suggestions[1].targets == ["helper0 (line 1)", "helper1 (line 2)"]
    assert suggestions[2].targets == []


def test_low_only_issues_skip_targeted_rules() -> None:
    suggestions = synthesize(_summary(75.0), _issues(3, SeverityLevel.LOW))
    assert suggestions == []


def test_healthy_codebase_gets_single_low_impact_note() -> None:
    suggestions = synthesize(_summary(100.0), [])

    assert len(suggestions) == 1
    assert suggestions[0].title == "Documentation is healthy"
    assert suggestions[0].impact is SeverityLevel.LOW
    assert suggestions[0].to_dict() == {
        "title": "Documentation is healthy",
        "description": "No missing documentation was found. Keep the current process in place.",
        "impact": "low",
        "targets": [],
    }
