"""Request validation shared by the CLI, HTTP service and tool server."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import InvalidArgumentError

MAX_FILES_LIMIT = 5000


class AnalysisRequest(BaseModel):
    """Arguments accepted by every analysis operation."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    root_path: str = Field(alias="rootPath", description="Root directory to analyze.")
    max_files: Optional[int] = Field(
        default=None,
        alias="maxFiles",
        gt=0,
        le=MAX_FILES_LIMIT,
        strict=True,
        description="Maximum number of files to analyze (default: unlimited).",
    )
    exclude_patterns: Optional[List[str]] = Field(
        default=None,
        alias="excludePatterns",
        description="Glob-like patterns matched against absolute paths to skip.",
    )

    @field_validator("root_path")
    @classmethod
    def _require_root_path(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("rootPath must not be empty")
        return stripped


def parse_request(payload: Mapping[str, Any] | None) -> AnalysisRequest:
    """Validate raw arguments, raising :class:`InvalidArgumentError` on failure."""
    try:
        return AnalysisRequest.model_validate(dict(payload or {}))
    except ValidationError as exc:
        errors = exc.errors()
        first = errors[0] if errors else {}
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = first.get("msg", str(exc))
        detail = f"{location}: {message}" if location else message
        raise InvalidArgumentError(f"Invalid request - {detail}", field=location or None) from exc


__all__ = ["AnalysisRequest", "MAX_FILES_LIMIT", "parse_request"]
