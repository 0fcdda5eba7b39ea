"""FastAPI application entrypoint for smartdocs service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, List, TypeVar

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .. import __version__
from ..errors import ConfigError, InvalidArgumentError
from ..operations import DocsService
from ..requests import AnalysisRequest

T = TypeVar("T")


class AnalyzeResponse(BaseModel):
    text: str
    analysis: Dict[str, Any]


class DocumentResponse(BaseModel):
    markdown: str


class HealthResponse(BaseModel):
    status: str
    version: str
    languages: List[str]


def _default_service() -> DocsService:
    return DocsService()


async def _run_blocking(func: Callable[[], T]) -> T:
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, func)


def create_app(service_factory: Callable[[], DocsService] = _default_service) -> FastAPI:
    """Create the FastAPI application exposing the documentation operations."""

    app = FastAPI(title="Smart Docs Service", version=__version__)
    shared: Dict[str, DocsService] = {}

    async def get_service() -> DocsService:
        # Grammars are loaded once; every request still runs an independent analysis.
        if "service" not in shared:
            shared["service"] = service_factory()
        return shared["service"]

    @app.get("/health", response_model=HealthResponse)
    async def health(service: DocsService = Depends(get_service)) -> HealthResponse:
        languages = [language.value for language in service.orchestrator.registry.languages]
        return HealthResponse(status="ok", version=__version__, languages=languages)

    @app.post("/analyze", response_model=AnalyzeResponse)
    async def analyze(
        payload: AnalysisRequest, service: DocsService = Depends(get_service)
    ) -> AnalyzeResponse:
        result, text = await _run_blocking(lambda: service.analyze(payload))
        return AnalyzeResponse(text=text, analysis=result.to_dict())

    @app.post("/documentation", response_model=DocumentResponse)
    async def documentation(
        payload: AnalysisRequest, service: DocsService = Depends(get_service)
    ) -> DocumentResponse:
        markdown = await _run_blocking(lambda: service.generate_documentation(payload))
        return DocumentResponse(markdown=markdown)

    @app.post("/missing-docs", response_model=DocumentResponse)
    async def missing_docs(
        payload: AnalysisRequest, service: DocsService = Depends(get_service)
    ) -> DocumentResponse:
        markdown = await _run_blocking(lambda: service.detect_missing_docs(payload))
        return DocumentResponse(markdown=markdown)

    @app.post("/suggestions", response_model=DocumentResponse)
    async def suggestions(
        payload: AnalysisRequest, service: DocsService = Depends(get_service)
    ) -> DocumentResponse:
        markdown = await _run_blocking(lambda: service.suggest_improvements(payload))
        return DocumentResponse(markdown=markdown)

    @app.exception_handler(InvalidArgumentError)
    async def invalid_argument_handler(_: Any, exc: InvalidArgumentError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.exception_handler(NotADirectoryError)
    async def not_a_directory_handler(_: Any, exc: NotADirectoryError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(FileNotFoundError)
    async def file_not_found_handler(_: Any, exc: FileNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(ConfigError)
    async def config_error_handler(_: Any, exc: ConfigError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(host: str = "127.0.0.1", port: int = 8000) -> None:  # pragma: no cover - integration path
    import uvicorn

    uvicorn.run(create_app(), host=host, port=port)


__all__ = ["create_app", "run_service"]
