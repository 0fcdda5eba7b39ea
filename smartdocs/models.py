"""Core data models shared across smartdocs components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class SupportedLanguage(str, Enum):
    """Languages with a registered grammar and extraction rules."""

    TYPESCRIPT = "typescript"
    JAVASCRIPT = "javascript"
    PYTHON = "python"


class CodeEntityType(str, Enum):
    """Kinds of documentable code entities."""

    FUNCTION = "function"
    CLASS = "class"
    METHOD = "method"


class SeverityLevel(str, Enum):
    """Urgency assigned to an undocumented entity."""

    CRITICAL = "critical"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class CodeLocation:
    """1-based position of an entity's defining node."""

    line: int
    column: int

    def to_dict(self) -> Dict[str, int]:
        return {"line": self.line, "column": self.column}


@dataclass(frozen=True)
class CodeEntity:
    """A function, class or method found while walking one file."""

    name: str
    type: CodeEntityType
    language: SupportedLanguage
    location: CodeLocation
    has_doc: bool
    exported: bool
    complexity_score: int
    summary: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "name": self.name,
            "type": self.type.value,
            "language": self.language.value,
            "location": self.location.to_dict(),
            "hasDoc": self.has_doc,
            "exported": self.exported,
            "complexityScore": self.complexity_score,
        }
        if self.summary is not None:
            data["summary"] = self.summary
        return data


@dataclass(frozen=True)
class MissingDocIssue:
    """An undocumented entity together with its derived severity."""

    name: str
    type: CodeEntityType
    language: SupportedLanguage
    location: CodeLocation
    has_doc: bool
    exported: bool
    complexity_score: int
    severity: SeverityLevel
    rationale: str
    summary: Optional[str] = None

    @classmethod
    def from_entity(
        cls, entity: CodeEntity, severity: SeverityLevel, rationale: str
    ) -> "MissingDocIssue":
        return cls(
            name=entity.name,
            type=entity.type,
            language=entity.language,
            location=entity.location,
            has_doc=entity.has_doc,
            exported=entity.exported,
            complexity_score=entity.complexity_score,
            severity=severity,
            rationale=rationale,
            summary=entity.summary,
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "name": self.name,
            "type": self.type.value,
            "language": self.language.value,
            "location": self.location.to_dict(),
            "hasDoc": self.has_doc,
            "exported": self.exported,
            "complexityScore": self.complexity_score,
            "severity": self.severity.value,
            "rationale": self.rationale,
        }
        if self.summary is not None:
            data["summary"] = self.summary
        return data


@dataclass(frozen=True)
class EntityMetrics:
    """Per-file entity counts."""

    total: int = 0
    documented: int = 0
    undocumented: int = 0
    functions: int = 0
    classes: int = 0
    methods: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "total": self.total,
            "documented": self.documented,
            "undocumented": self.undocumented,
            "functions": self.functions,
            "classes": self.classes,
            "methods": self.methods,
        }


@dataclass(frozen=True)
class FileAnalysis:
    """Entities and metrics for one analyzed file."""

    path: str
    relative_path: str
    language: SupportedLanguage
    lines_of_code: int
    entity_metrics: EntityMetrics
    entities: List[CodeEntity] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "relativePath": self.relative_path,
            "language": self.language.value,
            "linesOfCode": self.lines_of_code,
            "entityMetrics": self.entity_metrics.to_dict(),
            "entities": [entity.to_dict() for entity in self.entities],
        }


@dataclass(frozen=True)
class AnalysisSummary:
    """Run-level rollup over every analyzed file."""

    root_path: str
    total_files: int
    languages: Dict[SupportedLanguage, int]
    total_entities: int
    documented_entities: int
    undocumented_entities: int
    documentation_coverage: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rootPath": self.root_path,
            "totalFiles": self.total_files,
            "languages": {language.value: count for language, count in self.languages.items()},
            "totalEntities": self.total_entities,
            "documentedEntities": self.documented_entities,
            "undocumentedEntities": self.undocumented_entities,
            "documentationCoverage": self.documentation_coverage,
        }


@dataclass(frozen=True)
class Suggestion:
    """Actionable improvement derived from the missing-documentation list."""

    title: str
    description: str
    impact: SeverityLevel
    targets: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "impact": self.impact.value,
            "targets": list(self.targets),
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Everything produced by one analysis run."""

    summary: AnalysisSummary
    files: List[FileAnalysis]
    missing_docs: List[MissingDocIssue]
    suggestions: List[Suggestion]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "summary": self.summary.to_dict(),
            "files": [analysis.to_dict() for analysis in self.files],
            "missingDocs": [issue.to_dict() for issue in self.missing_docs],
            "suggestions": [suggestion.to_dict() for suggestion in self.suggestions],
        }


__all__ = [
    "AnalysisResult",
    "AnalysisSummary",
    "CodeEntity",
    "CodeEntityType",
    "CodeLocation",
    "EntityMetrics",
    "FileAnalysis",
    "MissingDocIssue",
    "SeverityLevel",
    "Suggestion",
    "SupportedLanguage",
]
