"""Tests for smartdocs.classifier."""

from __future__ import annotations

import pytest

from smartdocs.classifier import build_issue, build_rationale, classify, collect_issues
from smartdocs.models import (
    CodeEntity,
    CodeEntityType,
    CodeLocation,
    SeverityLevel,
    SupportedLanguage,
)


def _entity(
    name: str = "run",
    entity_type: CodeEntityType = CodeEntityType.FUNCTION,
    *,
    exported: bool = False,
    complexity: int = 5,
    has_doc: bool = False,
) -> CodeEntity:
    return CodeEntity(
        name=name,
        type=entity_type,
        language=SupportedLanguage.TYPESCRIPT,
        location=CodeLocation(line=3, column=1),
        has_doc=has_doc,
        exported=exported,
        complexity_score=complexity,
        summary="src/app.ts:3",
    )


@pytest.mark.parametrize(
    ("entity", "expected"),
    [
        (_entity(exported=True), SeverityLevel.CRITICAL),
        (_entity(entity_type=CodeEntityType.CLASS), SeverityLevel.CRITICAL),
        (_entity(entity_type=CodeEntityType.METHOD, complexity=31), SeverityLevel.CRITICAL),
        (_entity(entity_type=CodeEntityType.METHOD, complexity=30), SeverityLevel.MEDIUM),
        (_entity(complexity=41), SeverityLevel.MEDIUM),
        (_entity(complexity=40), SeverityLevel.LOW),
        (_entity(exported=True, entity_type=CodeEntityType.METHOD, complexity=1), SeverityLevel.CRITICAL),
    ],
)
def test_severity_rules(entity: CodeEntity, expected: SeverityLevel) -> None:
    severity, _ = classify(entity)
    assert severity is expected


def test_rationale_mentions_visibility_and_high_complexity() -> None:
    assert build_rationale(_entity()) == "missing docs: function run"
    assert (
        build_rationale(_entity(exported=True, complexity=31))
        == "missing docs: function run, externally visible, complexity score 31"
    )
    assert (
        build_rationale(_entity("parse", CodeEntityType.METHOD, complexity=30))
        == "missing docs: method parse"
    )


def test_build_issue_copies_entity_fields() -> None:
    entity = _entity("Client", CodeEntityType.CLASS)
    issue = build_issue(entity)

    assert issue.name == "Client"
    assert issue.type is CodeEntityType.CLASS
    assert issue.location == entity.location
    assert issue.summary == "src/app.ts:3"
    assert issue.severity is SeverityLevel.CRITICAL
    assert issue.rationale == "missing docs: class Client"
    assert entity.has_doc is False


def test_collect_issues_skips_documented_and_keeps_order() -> None:
    entities = [
        _entity("first"),
        _entity("documented", has_doc=True),
        _entity("second", CodeEntityType.METHOD),
    ]

    issues = collect_issues(entities)

    assert [issue.name for issue in issues] == ["first", "second"]
    assert [issue.severity for issue in issues] == [SeverityLevel.LOW, SeverityLevel.MEDIUM]
