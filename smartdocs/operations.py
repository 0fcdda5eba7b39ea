"""The four documentation operations exposed to clients."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Tuple

from .config import SmartDocsConfig, load_config
from .logging import get_logger
from .models import AnalysisResult
from .orchestrator import Orchestrator
from .reports import MarkdownReportBuilder
from .repo_scanner import build_exclude_matcher
from .requests import AnalysisRequest


class DocsService:
    """Runs analyses for validated requests and renders their reports."""

    def __init__(
        self,
        orchestrator: Orchestrator | None = None,
        report_builder: MarkdownReportBuilder | None = None,
        config_loader: Callable[[Path], SmartDocsConfig] = load_config,
        workers: int | None = None,
    ) -> None:
        self.orchestrator = orchestrator or Orchestrator()
        self.report_builder = report_builder or MarkdownReportBuilder()
        self._config_loader = config_loader
        self.workers = workers
        self.logger = get_logger("service")

    def run(self, request: AnalysisRequest) -> Tuple[AnalysisResult, SmartDocsConfig]:
        """Analyze ``request.root_path`` merging request options over the config file."""
        root = Path(request.root_path).expanduser().resolve()
        # An invalid root is reported by the scanner; never read a config from its parent.
        config = self._config_loader(root) if root.is_dir() else SmartDocsConfig(root=root)

        patterns = [*config.exclude_paths, *(request.exclude_patterns or [])]
        max_files = request.max_files if request.max_files is not None else config.max_files
        result = self.orchestrator.analyze(
            root,
            max_files=max_files,
            exclude=build_exclude_matcher(patterns),
            workers=self.workers or config.workers,
        )
        return result, config

    def analyze(self, request: AnalysisRequest) -> Tuple[AnalysisResult, str]:
        result, _ = self.run(request)
        return result, self.report_builder.render_summary(result)

    def generate_documentation(self, request: AnalysisRequest) -> str:
        result, config = self.run(request)
        return self.report_builder.render_documentation(result, title=config.report_title)

    def detect_missing_docs(self, request: AnalysisRequest) -> str:
        result, _ = self.run(request)
        return self.report_builder.render_missing_docs(result)

    def suggest_improvements(self, request: AnalysisRequest) -> str:
        result, _ = self.run(request)
        return self.report_builder.render_suggestions(result)


__all__ = ["DocsService"]
