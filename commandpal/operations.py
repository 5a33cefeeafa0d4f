"""Definitions of the two provider-backed endpoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from pydantic import BaseModel

from commandpal.exceptions import ServiceError
from commandpal.models import (
    CommandRequest,
    CommandResponse,
    ExplanationRequest,
    ExplanationResponse,
    GenerationConfig,
    SafetySetting,
)
from commandpal.prompts import COMMAND_PROMPT, EXPLANATION_PROMPT

SAFETY_SETTINGS: tuple[SafetySetting, ...] = tuple(
    SafetySetting(category=category, threshold="BLOCK_MEDIUM_AND_ABOVE")
    for category in (
        "HARM_CATEGORY_HARASSMENT",
        "HARM_CATEGORY_HATE_SPEECH",
        "HARM_CATEGORY_SEXUALLY_EXPLICIT",
        "HARM_CATEGORY_DANGEROUS_CONTENT",
    )
)


@dataclass(frozen=True)
class Operation:
    """Everything that differs between the generator and the explainer."""

    path: str
    request_model: type[BaseModel]
    request_field: str
    response_model: type[BaseModel]
    response_field: str
    template: str
    generation_config: GenerationConfig
    failure_log: str
    messages: Mapping[str, str] = field(default_factory=dict)

    def build_response(self, text: str) -> BaseModel:
        return self.response_model(**{self.response_field: text})

    def error_message(self, exc: ServiceError) -> str:
        """Caller-facing message for ``exc``; falls back to the exception's own."""

        return self.messages.get(exc.code, exc.message)


GENERATE_COMMAND = Operation(
    path="/generate-command",
    request_model=CommandRequest,
    request_field="query",
    response_model=CommandResponse,
    response_field="command",
    template=COMMAND_PROMPT,
    generation_config=GenerationConfig(
        temperature=0.1, top_k=1, top_p=0.8, max_output_tokens=200
    ),
    failure_log="Error generating command",
    messages={
        "missing_field": "Invalid query provided",
        "empty_field": "Query cannot be empty",
        "malformed_provider_response": "No command generated",
        "empty_generation": "Empty command generated",
    },
)

EXPLAIN_COMMAND = Operation(
    path="/explain-command",
    request_model=ExplanationRequest,
    request_field="command",
    response_model=ExplanationResponse,
    response_field="explanation",
    template=EXPLANATION_PROMPT,
    generation_config=GenerationConfig(
        temperature=0.2, top_k=1, top_p=0.8, max_output_tokens=300
    ),
    failure_log="Error explaining command",
    messages={
        "missing_field": "Invalid command provided",
        "empty_field": "Command cannot be empty",
        "malformed_provider_response": "No explanation generated",
        "empty_generation": "Empty explanation generated",
    },
)
