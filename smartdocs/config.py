"""Configuration loading for smartdocs (.smartdocs.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .errors import ConfigError

CONFIG_FILENAME = ".smartdocs.yml"
DEFAULT_REPORT_TITLE = "Smart Docs Report"


@dataclass
class SmartDocsConfig:
    """Represents the settings defined in .smartdocs.yml."""

    root: Path
    exclude_paths: List[str] = field(default_factory=list)
    max_files: Optional[int] = None
    workers: int = 1
    report_title: str = DEFAULT_REPORT_TITLE


def load_config(config_path: Path) -> SmartDocsConfig:
    """Load configuration from disk, returning defaults when the file is absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return SmartDocsConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    max_files = _as_int(data.get("max_files"))
    if max_files is not None and max_files <= 0:
        max_files = None

    workers = _as_int(data.get("workers")) or 1
    report_data = _as_dict(data.get("report"))
    title = _as_str(report_data.get("title")) if report_data else None

    return SmartDocsConfig(
        root=root,
        exclude_paths=_as_str_list(data.get("exclude_paths")),
        max_files=max_files,
        workers=max(workers, 1),
        report_title=title or DEFAULT_REPORT_TITLE,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = ["CONFIG_FILENAME", "DEFAULT_REPORT_TITLE", "SmartDocsConfig", "load_config"]
