"""Renders analysis results into markdown documents."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List

from jinja2 import Environment, FileSystemLoader

from ..aggregator import file_coverage
from ..config import DEFAULT_REPORT_TITLE
from ..models import AnalysisResult, FileAnalysis, MissingDocIssue, SeverityLevel
from .toc import TableOfContentsBuilder

SEVERITY_ORDER = (SeverityLevel.CRITICAL, SeverityLevel.MEDIUM, SeverityLevel.LOW)
TOP_FILES_LIMIT = 5


def _format_percent(value: float) -> str:
    return f"{value:g}"


def _table_cell(value: object) -> str:
    return str(value).replace("|", "\\|").replace("\n", " ")


class MarkdownReportBuilder:
    """Turns an :class:`AnalysisResult` into human-readable markdown."""

    def __init__(
        self,
        templates_dir: Path | None = None,
        toc_builder: TableOfContentsBuilder | None = None,
    ) -> None:
        self.templates_dir = templates_dir or Path(__file__).with_name("templates")
        self.toc_builder = toc_builder or TableOfContentsBuilder()
        self._env = self._create_env(self.templates_dir)

    def render_documentation(self, result: AnalysisResult, *, title: str | None = None) -> str:
        """Full report: overview, missing docs, suggestions and per-file details."""
        markdown = self._render(
            "documentation.md.j2",
            title=title or DEFAULT_REPORT_TITLE,
            toc_placeholder=TableOfContentsBuilder.PLACEHOLDER,
            summary=result.summary,
            missing_docs=result.missing_docs,
            suggestions=result.suggestions,
            files=result.files,
            file_coverage=file_coverage,
        )
        return self.toc_builder.build(markdown)

    def render_summary(self, result: AnalysisResult) -> str:
        return self._render(
            "summary.md.j2",
            summary=result.summary,
            top_files=self._top_files(result.files),
        )

    def render_missing_docs(self, result: AnalysisResult) -> str:
        return self._render(
            "missing_docs.md.j2",
            missing_docs=result.missing_docs,
            groups=self._group_by_severity(result.missing_docs),
        )

    def render_suggestions(self, result: AnalysisResult) -> str:
        return self._render("suggestions.md.j2", suggestions=result.suggestions)

    def _render(self, template_name: str, **context: object) -> str:
        template = self._env.get_template(template_name)
        return template.render(**context).strip() + "\n"

    @staticmethod
    def _top_files(files: List[FileAnalysis]) -> List[FileAnalysis]:
        ranked = sorted(files, key=lambda item: item.entity_metrics.undocumented, reverse=True)
        return ranked[:TOP_FILES_LIMIT]

    @staticmethod
    def _group_by_severity(issues: List[MissingDocIssue]) -> Dict[SeverityLevel, List[MissingDocIssue]]:
        groups: Dict[SeverityLevel, List[MissingDocIssue]] = {}
        for severity in SEVERITY_ORDER:
            matching = [issue for issue in issues if issue.severity is severity]
            if matching:
                groups[severity] = matching
        return groups

    @staticmethod
    def _create_env(templates_dir: Path) -> Environment:
        env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        env.filters["percent"] = _format_percent
        env.filters["cell"] = _table_cell
        return env


__all__ = ["MarkdownReportBuilder", "SEVERITY_ORDER"]
