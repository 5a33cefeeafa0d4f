"""Shared pytest fixtures."""

from __future__ import annotations

import json
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import httpx
import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("GEMINI_API_KEY", "test-key")
os.environ.setdefault("ENVIRONMENT", "test")

from commandpal.dependencies import get_http_client  # noqa: E402
from commandpal.main import create_app  # noqa: E402


def gemini_payload(text: Any) -> dict[str, Any]:
    """A successful generateContent body carrying ``text``."""

    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


@dataclass
class FakeGemini:
    """Records requests and answers with a fixed response."""

    status_code: int = 200
    body: Any = field(default_factory=lambda: gemini_payload("echo ok"))
    requests: list[httpx.Request] = field(default_factory=list)

    @property
    def calls(self) -> int:
        return len(self.requests)

    def payloads(self) -> list[dict[str, Any]]:
        return [json.loads(request.content.decode()) for request in self.requests]

    def last_payload(self) -> dict[str, Any]:
        return self.payloads()[-1]

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.body, bytes):
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(self.status_code, json=self.body)


@pytest.fixture(autouse=True)
def configure_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure required environment variables are present during tests."""

    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    monkeypatch.setenv("ENVIRONMENT", "test")


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def gemini() -> FakeGemini:
    return FakeGemini()


@pytest.fixture
def client(app, gemini: FakeGemini) -> TestClient:
    async def _mock_http_client():
        async with httpx.AsyncClient(transport=httpx.MockTransport(gemini)) as http_client:
            yield http_client

    app.dependency_overrides[get_http_client] = _mock_http_client
    return TestClient(app)
