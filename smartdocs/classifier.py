"""Severity classification for undocumented entities."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from .models import CodeEntity, CodeEntityType, MissingDocIssue, SeverityLevel

METHOD_COMPLEXITY_THRESHOLD = 30
FUNCTION_COMPLEXITY_THRESHOLD = 40
RATIONALE_COMPLEXITY_THRESHOLD = 30


def classify(entity: CodeEntity) -> Tuple[SeverityLevel, str]:
    """Return the severity and rationale for an undocumented entity."""
    return calculate_severity(entity), build_rationale(entity)


def calculate_severity(entity: CodeEntity) -> SeverityLevel:
    if entity.exported or entity.type is CodeEntityType.CLASS:
        return SeverityLevel.CRITICAL

    if entity.type is CodeEntityType.METHOD:
        if entity.complexity_score > METHOD_COMPLEXITY_THRESHOLD:
            return SeverityLevel.CRITICAL
        return SeverityLevel.MEDIUM

    if entity.complexity_score > FUNCTION_COMPLEXITY_THRESHOLD:
        return SeverityLevel.MEDIUM
    return SeverityLevel.LOW


def build_rationale(entity: CodeEntity) -> str:
    parts: List[str] = [f"missing docs: {entity.type.value} {entity.name}"]
    if entity.exported:
        parts.append("externally visible")
    if entity.complexity_score > RATIONALE_COMPLEXITY_THRESHOLD:
        parts.append(f"complexity score {entity.complexity_score}")
    return ", ".join(parts)


def build_issue(entity: CodeEntity) -> MissingDocIssue:
    """Derive a new issue from ``entity``; the entity itself is left untouched."""
    severity, rationale = classify(entity)
    return MissingDocIssue.from_entity(entity, severity, rationale)


def collect_issues(entities: Iterable[CodeEntity]) -> List[MissingDocIssue]:
    """Return one issue per undocumented entity, preserving traversal order."""
    return [build_issue(entity) for entity in entities if not entity.has_doc]


__all__ = [
    "FUNCTION_COMPLEXITY_THRESHOLD",
    "METHOD_COMPLEXITY_THRESHOLD",
    "build_issue",
    "build_rationale",
    "calculate_severity",
    "classify",
    "collect_issues",
]
