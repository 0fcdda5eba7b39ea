"""Prioritized documentation suggestions."""

from __future__ import annotations

from typing import List, Sequence

from .models import AnalysisSummary, MissingDocIssue, SeverityLevel, Suggestion

# Not configurable.
MAX_SUGGESTION_TARGETS = 10
COVERAGE_BASELINE = 70


def format_target(issue: MissingDocIssue) -> str:
    return f"{issue.name} (line {issue.location.line})"


def _targets(missing_docs: Sequence[MissingDocIssue], severity: SeverityLevel) -> List[str]:
    matching = [issue for issue in missing_docs if issue.severity is severity]
    return [format_target(issue) for issue in matching[:MAX_SUGGESTION_TARGETS]]


def synthesize(
    summary: AnalysisSummary, missing_docs: Sequence[MissingDocIssue]
) -> List[Suggestion]:
    """Derive suggestions from the issues in discovery and traversal order."""
    suggestions: List[Suggestion] = []

    critical_targets = _targets(missing_docs, SeverityLevel.CRITICAL)
    if critical_targets:
        suggestions.append(
            Suggestion(
                title="Document the exported API surface first",
                description=(
                    "Add JSDoc comments or docstrings to exported functions and classes "
                    "before anything else; they are what other modules depend on."
                ),
                impact=SeverityLevel.CRITICAL,
                targets=critical_targets,
            )
        )

    medium_targets = _targets(missing_docs, SeverityLevel.MEDIUM)
    if medium_targets:
        suggestions.append(
            Suggestion(
                title="Summarize complex logic",
                description=(
                    "Write a short summary plus parameter and return notes for complex "
                    "methods so they stay maintainable."
                ),
                impact=SeverityLevel.MEDIUM,
                targets=medium_targets,
            )
        )

    if summary.documentation_coverage < COVERAGE_BASELINE:
        suggestions.append(
            Suggestion(
                title="Establish a documentation baseline",
                description=(
                    "Overall coverage is low. Agree on minimum documentation guidelines "
                    "and check them during code review."
                ),
                impact=SeverityLevel.MEDIUM,
                targets=[],
            )
        )

    if not missing_docs:
        suggestions.append(
            Suggestion(
                title="Documentation is healthy",
                description="No missing documentation was found. Keep the current process in place.",
                impact=SeverityLevel.LOW,
                targets=[],
            )
        )

    return suggestions


__all__ = ["COVERAGE_BASELINE", "MAX_SUGGESTION_TARGETS", "format_target", "synthesize"]
