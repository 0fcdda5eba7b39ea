"""Pipeline orchestration: discovery, parsing, extraction, classification."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from .aggregator import aggregate, build_file_analysis
from .analyzers import EntityExtractor
from .classifier import collect_issues
from .errors import ParseFailure
from .logging import get_logger
from .models import (
    AnalysisResult,
    CodeEntityType,
    CodeLocation,
    FileAnalysis,
    MissingDocIssue,
    SeverityLevel,
)
from .parsers import GrammarRegistry
from .repo_scanner import ExcludePredicate, RepoScanner, SourceFile
from .suggestions import synthesize

PARSER_FAILURE_NAME = "ParserFailure"


@dataclass(frozen=True)
class FileOutcome:
    """Result of running one file through parse, extract and classify."""

    source: SourceFile
    analysis: Optional[FileAnalysis]
    issues: List[MissingDocIssue]


def parser_failure_issue(source: SourceFile, failure: ParseFailure) -> MissingDocIssue:
    """Build the synthetic issue that stands in for a file that failed to parse."""
    return MissingDocIssue(
        name=PARSER_FAILURE_NAME,
        type=CodeEntityType.FUNCTION,
        language=source.language,
        location=CodeLocation(line=0, column=0),
        has_doc=False,
        exported=False,
        complexity_score=0,
        severity=SeverityLevel.MEDIUM,
        rationale=f"parse failure: {failure.reason}",
        summary=f"{source.relative_path} failed to parse",
    )


class Orchestrator:
    """Coordinates a single analysis run over a directory tree."""

    def __init__(
        self,
        registry: GrammarRegistry | None = None,
        extractor: EntityExtractor | None = None,
        scanner: RepoScanner | None = None,
    ) -> None:
        self.registry = registry or GrammarRegistry.default()
        self.extractor = extractor or EntityExtractor()
        self.scanner = scanner or RepoScanner()
        self.logger = get_logger("orchestrator")

    def analyze(
        self,
        root: str | Path,
        *,
        max_files: int | None = None,
        exclude: ExcludePredicate | None = None,
        workers: int = 1,
    ) -> AnalysisResult:
        """Analyze every supported file under ``root``."""
        root_path = Path(root).expanduser().resolve()
        self.logger.info("Starting analysis of %s", root_path)
        sources = self.scanner.scan(root_path, max_files=max_files, exclude=exclude)
        outcomes = self.analyze_sources(sources, workers=workers)

        files: List[FileAnalysis] = []
        missing_docs: List[MissingDocIssue] = []
        for outcome in outcomes:
            if outcome.analysis is not None:
                files.append(outcome.analysis)
            missing_docs.extend(outcome.issues)

        summary = aggregate(str(root_path), files)
        suggestions = synthesize(summary, missing_docs)
        self.logger.info(
            "Analyzed %d files: %d entities, %.2f%% documented",
            summary.total_files,
            summary.total_entities,
            summary.documentation_coverage,
        )
        return AnalysisResult(
            summary=summary,
            files=files,
            missing_docs=missing_docs,
            suggestions=suggestions,
        )

    def analyze_sources(
        self, sources: Sequence[SourceFile], *, workers: int = 1
    ) -> List[FileOutcome]:
        """Run each file through the pipeline, keeping discovery order."""
        if workers <= 1 or len(sources) <= 1:
            return [self.analyze_file(source) for source in sources]
        with ThreadPoolExecutor(max_workers=workers) as executor:
            # map() yields results in input order regardless of completion order.
            return list(executor.map(self.analyze_file, sources))

    def analyze_file(self, source: SourceFile) -> FileOutcome:
        """Analyze one file; failures become a single synthetic issue."""
        if not (self.registry.supports(source.language) and self.extractor.supports(source.language)):
            self.logger.debug(
                "Skipping %s: no grammar for %s", source.relative_path, source.language.value
            )
            return FileOutcome(source=source, analysis=None, issues=[])

        try:
            analysis = self._analyze(source)
        except ParseFailure as failure:
            self.logger.warning("Skipping %s: %s", source.relative_path, failure.reason)
            return FileOutcome(source=source, analysis=None, issues=[parser_failure_issue(source, failure)])

        self.logger.debug(
            "%s: %d entities (%d undocumented)",
            source.relative_path,
            analysis.entity_metrics.total,
            analysis.entity_metrics.undocumented,
        )
        return FileOutcome(source=source, analysis=analysis, issues=collect_issues(analysis.entities))

    def _analyze(self, source: SourceFile) -> FileAnalysis:
        try:
            tree = self.registry.parse(source.content, source.language)
            entities = self.extractor.extract(
                tree, source.language, source.content, relative_path=source.relative_path
            )
        except Exception as exc:
            raise ParseFailure(source.relative_path, str(exc) or exc.__class__.__name__) from exc
        return build_file_analysis(
            source.path, source.relative_path, source.language, source.content, entities
        )


__all__ = ["FileOutcome", "Orchestrator", "PARSER_FAILURE_NAME", "parser_failure_issue"]
