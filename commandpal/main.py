"""FastAPI application entrypoint."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import Depends, FastAPI

from commandpal import __version__
from commandpal.command_handlers import explain_command, generate_command
from commandpal.config import Settings, get_settings
from commandpal.logging import configure_logging
from commandpal.models import CommandResponse, ErrorResponse, ExplanationResponse
from commandpal.operations import EXPLAIN_COMMAND, GENERATE_COMMAND

_ERROR_RESPONSES = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create application resources during startup and clean up on shutdown."""

    async with httpx.AsyncClient() as client:
        app.state.http_client = client
        yield
        del app.state.http_client


def create_app() -> FastAPI:
    """Application factory."""

    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="CommandPal",
        version=__version__,
        lifespan=lifespan,
    )

    @app.get("/healthz")
    async def healthz() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/version")
    async def version(settings: Settings = Depends(get_settings)) -> dict[str, str]:
        return {"version": __version__, "environment": settings.environment}

    app.add_api_route(
        GENERATE_COMMAND.path,
        generate_command,
        methods=["POST"],
        response_model=CommandResponse,
        responses=_ERROR_RESPONSES,
    )
    app.add_api_route(
        EXPLAIN_COMMAND.path,
        explain_command,
        methods=["POST"],
        response_model=ExplanationResponse,
        responses=_ERROR_RESPONSES,
    )

    return app


app = create_app()
