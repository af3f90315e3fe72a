"""FastAPI application entrypoint for gowire service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, List

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..config import ConfigError
from ..models import DomainInfo
from ..orchestrator import Orchestrator
from ..project import ProjectError


class DomainsRequest(BaseModel):
    path: str


class DomainSummary(BaseModel):
    name: str
    components: List[str]
    dependencies: List[str]


class DomainsResponse(BaseModel):
    domains: List[DomainSummary]


class DescribeRequest(BaseModel):
    path: str
    format: str = "mermaid"
    type: str = "all"


class DescribeResponse(BaseModel):
    diagram: str


class HealthResponse(BaseModel):
    status: str


def _default_orchestrator() -> Orchestrator:
    return Orchestrator()


def _summarise(domain: DomainInfo) -> DomainSummary:
    return DomainSummary(
        name=domain.name,
        components=domain.component_kinds(),
        dependencies=list(domain.dependencies),
    )


def create_app(
    orchestrator_factory: Callable[[], Orchestrator] = _default_orchestrator,
) -> FastAPI:
    """Create the FastAPI application exposing gowire discovery operations."""

    app = FastAPI(title="gowire Service", version="1.0.0")

    async def get_orchestrator() -> Orchestrator:
        return orchestrator_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/domains", response_model=DomainsResponse)
    async def domains(
        payload: DomainsRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> DomainsResponse:
        loop = asyncio.get_running_loop()
        found = await loop.run_in_executor(None, orchestrator.discover_domains, payload.path)
        return DomainsResponse(domains=[_summarise(domain) for domain in found])

    @app.post("/describe", response_model=DescribeResponse)
    async def describe(
        payload: DescribeRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> DescribeResponse:
        def _run_describe() -> str:
            return orchestrator.run_describe(payload.path, fmt=payload.format, kind=payload.type)

        loop = asyncio.get_running_loop()
        diagram = await loop.run_in_executor(None, _run_describe)
        return DescribeResponse(diagram=diagram)

    @app.exception_handler(FileNotFoundError)
    async def file_not_found_handler(_: Any, exc: FileNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(NotADirectoryError)
    async def not_a_directory_handler(_: Any, exc: NotADirectoryError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(ProjectError)
    async def project_error_handler(_: Any, exc: ProjectError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(ConfigError)
    async def config_error_handler(_: Any, exc: ConfigError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(host: str = "127.0.0.1", port: int = 8000) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app()
    uvicorn.run(app, host=host, port=port)
