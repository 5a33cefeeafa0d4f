"""Pydantic models shared across application layers."""

from pydantic import BaseModel, ConfigDict, Field, StrictStr
from pydantic.alias_generators import to_camel


class CommandRequest(BaseModel):
    """Body of ``POST /generate-command``."""

    query: StrictStr = Field(description="Natural-language instruction.")


class ExplanationRequest(BaseModel):
    """Body of ``POST /explain-command``."""

    command: StrictStr = Field(description="Command line to explain.")


class CommandResponse(BaseModel):
    command: str


class ExplanationResponse(BaseModel):
    explanation: str


class ErrorResponse(BaseModel):
    """Error body returned to HTTP clients."""

    error: str


class _ProviderModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class GenerationConfig(_ProviderModel):
    """Sampling parameters forwarded to Gemini as ``generationConfig``."""

    temperature: float
    top_k: int
    top_p: float
    max_output_tokens: int


class SafetySetting(_ProviderModel):
    category: str
    threshold: str
