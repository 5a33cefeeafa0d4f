"""Request pipeline shared by both endpoints: validate, compose, invoke, unwrap."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Protocol

from pydantic import BaseModel, ValidationError

from commandpal.exceptions import EmptyFieldError, MissingFieldError
from commandpal.models import GenerationConfig
from commandpal.operations import Operation
from commandpal.prompts import compose_prompt

logger = logging.getLogger(__name__)


class TextProvider(Protocol):
    async def generate(self, prompt: str, generation_config: GenerationConfig) -> str: ...


def validate_input(operation: Operation, body: Mapping[str, Any]) -> str:
    """Return the trimmed request text or raise a 400-class error."""

    try:
        payload = operation.request_model.model_validate(body)
    except ValidationError as exc:
        logger.error(
            "Invalid request payload",
            extra={"path": operation.path, "errors": exc.errors(include_url=False)},
        )
        raise MissingFieldError() from exc

    text = getattr(payload, operation.request_field).strip()
    if not text:
        raise EmptyFieldError()
    return text


class CommandGateway:
    """Runs one operation against the text provider."""

    def __init__(self, provider: TextProvider) -> None:
        self._provider = provider

    async def run(self, operation: Operation, body: Mapping[str, Any]) -> BaseModel:
        text = validate_input(operation, body)
        prompt = compose_prompt(operation.template, text)
        generated = await self._provider.generate(prompt, operation.generation_config)
        logger.info(
            "Provider generation succeeded",
            extra={"path": operation.path, "chars": len(generated)},
        )
        return operation.build_response(generated)
