"""HTTP handlers for command generation and explanation."""

from __future__ import annotations

import logging
from typing import Annotated, Any

from fastapi import Depends, Request, status
from fastapi.responses import JSONResponse

from commandpal.dependencies import get_command_gateway
from commandpal.exceptions import ServiceError
from commandpal.gateway import CommandGateway
from commandpal.models import CommandResponse, ErrorResponse, ExplanationResponse
from commandpal.operations import EXPLAIN_COMMAND, GENERATE_COMMAND, Operation

logger = logging.getLogger(__name__)

GatewayDep = Annotated[CommandGateway, Depends(get_command_gateway)]


async def generate_command(request: Request, gateway: GatewayDep) -> CommandResponse | JSONResponse:
    """Turn ``{"query": ...}`` into ``{"command": ...}``."""

    return await handle_operation(request, gateway, GENERATE_COMMAND)


async def explain_command(request: Request, gateway: GatewayDep) -> ExplanationResponse | JSONResponse:
    """Turn ``{"command": ...}`` into ``{"explanation": ...}``."""

    return await handle_operation(request, gateway, EXPLAIN_COMMAND)


async def handle_operation(
    request: Request, gateway: CommandGateway, operation: Operation
) -> Any:
    """Run ``operation`` and map every failure onto a fixed error body."""

    try:
        body = await read_json_body(request)
        return await gateway.run(operation, body)
    except ServiceError as exc:
        logger.warning(
            "Request failed",
            extra={"path": operation.path, "code": exc.code, "status_code": exc.status_code},
        )
        return _error_response(exc.status_code, operation.error_message(exc))
    except Exception:
        logger.exception(operation.failure_log, extra={"path": operation.path})
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


async def read_json_body(request: Request) -> dict[str, Any]:
    """Decode the request body, treating anything but a JSON object as ``{}``."""

    try:
        body = await request.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content=ErrorResponse(error=message).model_dump()
    )
