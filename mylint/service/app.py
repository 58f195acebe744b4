"""FastAPI application entrypoint for mylint service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, List, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..linter import MarkdownLinter
from ..models import FileOutcome, LintOptions
from ..orchestrator import Orchestrator


class LintRequest(BaseModel):
    text: str
    rewrite_math: bool = True
    normalize_spacing: bool = True


class LintResponse(BaseModel):
    text: str
    changed: bool


class FixRequest(BaseModel):
    path: str
    dry_run: bool = False


class OutcomeModel(BaseModel):
    path: str
    status: str
    diff: Optional[str] = None
    dry_run: bool = False


class FixResponse(BaseModel):
    outcomes: List[OutcomeModel]


class HealthResponse(BaseModel):
    status: str


def _default_orchestrator() -> Orchestrator:
    return Orchestrator()


def create_app(
    orchestrator_factory: Callable[[], Orchestrator] = _default_orchestrator,
) -> FastAPI:
    """Create the FastAPI application exposing mylint operations."""

    app = FastAPI(title="mylint Service", version="1.0.0")

    async def get_orchestrator() -> Orchestrator:
        return orchestrator_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/lint", response_model=LintResponse)
    async def lint_text(payload: LintRequest) -> LintResponse:
        linter = MarkdownLinter(
            LintOptions(
                rewrite_math=payload.rewrite_math,
                normalize_spacing=payload.normalize_spacing,
            )
        )
        loop = asyncio.get_running_loop()
        result = await loop.run_in_executor(None, linter.apply, payload.text)
        return LintResponse(text=result.text, changed=result.changed)

    @app.post("/fix", response_model=FixResponse)
    async def fix_path(
        payload: FixRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> FixResponse:
        def _run_fix() -> List[FileOutcome]:
            return orchestrator.run_fix([payload.path], dry_run=payload.dry_run)

        loop = asyncio.get_running_loop()
        outcomes = await loop.run_in_executor(None, _run_fix)
        return FixResponse(
            outcomes=[
                OutcomeModel(
                    path=str(outcome.path),
                    status=outcome.status,
                    diff=outcome.diff or None,
                    dry_run=outcome.dry_run,
                )
                for outcome in outcomes
            ]
        )

    @app.exception_handler(FileNotFoundError)
    async def file_not_found_handler(
        _: Any, exc: FileNotFoundError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(RuntimeError)
    async def runtime_error_handler(
        _: Any, exc: RuntimeError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 8000
) -> None:  # pragma: no cover - integration path
    import uvicorn

    uvicorn.run(create_app(), host=host, port=port)
