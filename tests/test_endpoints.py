import pytest
from fastapi.testclient import TestClient

from commandpal import __version__
from commandpal.prompts import COMMAND_PROMPT, EXPLANATION_PROMPT

from .conftest import FakeGemini, gemini_payload


def test_generate_command_happy_path(client: TestClient, gemini: FakeGemini) -> None:
    gemini.body = gemini_payload("git checkout -b feature-login\n")

    response = client.post(
        "/generate-command", json={"query": "Create a new Git branch called feature-login"}
    )

    assert response.status_code == 200
    assert response.json() == {"command": "git checkout -b feature-login"}
    assert gemini.calls == 1
    sent = gemini.last_payload()
    assert sent["contents"][0]["parts"][0]["text"] == (
        COMMAND_PROMPT + "Create a new Git branch called feature-login"
    )
    assert sent["generationConfig"]["temperature"] == 0.1
    assert sent["generationConfig"]["maxOutputTokens"] == 200
    assert gemini.requests[0].url.params["key"] == "test-key"


def test_explain_command_happy_path(client: TestClient, gemini: FakeGemini) -> None:
    gemini.body = gemini_payload("  Lists all files, including hidden ones, in long format.  ")

    response = client.post("/explain-command", json={"command": "ls -la"})

    assert response.status_code == 200
    assert response.json() == {
        "explanation": "Lists all files, including hidden ones, in long format."
    }
    sent = gemini.last_payload()
    assert sent["contents"][0]["parts"][0]["text"] == EXPLANATION_PROMPT + "ls -la"
    assert sent["generationConfig"]["temperature"] == 0.2
    assert sent["generationConfig"]["maxOutputTokens"] == 300


def test_same_request_twice_is_stable(client: TestClient, gemini: FakeGemini) -> None:
    first = client.post("/generate-command", json={"query": "print working directory"})
    second = client.post("/generate-command", json={"query": "print working directory"})

    assert first.status_code == second.status_code == 200
    assert first.json() == second.json() == {"command": "echo ok"}
    assert gemini.payloads()[0] == gemini.payloads()[1]


@pytest.mark.parametrize(
    ("path", "body", "message"),
    [
        ("/generate-command", {"query": ""}, "Query cannot be empty"),
        ("/generate-command", {"query": "   \n"}, "Query cannot be empty"),
        ("/generate-command", {}, "Invalid query provided"),
        ("/generate-command", {"query": 12}, "Invalid query provided"),
        ("/generate-command", {"query": None}, "Invalid query provided"),
        ("/explain-command", {"command": "\t"}, "Command cannot be empty"),
        ("/explain-command", {"command": {"cmd": "ls"}}, "Invalid command provided"),
        ("/explain-command", {"query": "ls"}, "Invalid command provided"),
    ],
)
def test_invalid_input_is_rejected_without_provider_call(
    client: TestClient, gemini: FakeGemini, path: str, body: dict, message: str
) -> None:
    response = client.post(path, json=body)

    assert response.status_code == 400
    assert response.json() == {"error": message}
    assert gemini.calls == 0


@pytest.mark.parametrize(
    ("path", "content", "message"),
    [
        ("/generate-command", b"not-json", "Invalid query provided"),
        ("/generate-command", b"", "Invalid query provided"),
        ("/explain-command", b'["ls"]', "Invalid command provided"),
    ],
)
def test_unparseable_body_is_treated_as_empty(
    client: TestClient, gemini: FakeGemini, path: str, content: bytes, message: str
) -> None:
    response = client.post(path, content=content, headers={"Content-Type": "application/json"})

    assert response.status_code == 400
    assert response.json() == {"error": message}
    assert gemini.calls == 0


@pytest.mark.parametrize(
    ("path", "body"),
    [("/generate-command", {"query": "list files"}), ("/explain-command", {"command": "ls"})],
)
def test_missing_api_key(
    client: TestClient,
    gemini: FakeGemini,
    monkeypatch: pytest.MonkeyPatch,
    tmp_path,
    path: str,
    body: dict,
) -> None:
    monkeypatch.delenv("GEMINI_API_KEY")
    monkeypatch.chdir(tmp_path)

    response = client.post(path, json=body)

    assert response.status_code == 500
    assert response.json() == {"error": "Gemini API key not configured"}
    assert gemini.calls == 0


@pytest.mark.parametrize(
    ("path", "body"),
    [("/generate-command", {"query": "list files"}), ("/explain-command", {"command": "ls"})],
)
def test_provider_error_status(
    client: TestClient, gemini: FakeGemini, path: str, body: dict
) -> None:
    gemini.status_code = 429
    gemini.body = {"error": {"message": "quota exceeded", "status": "RESOURCE_EXHAUSTED"}}

    response = client.post(path, json=body)

    assert response.status_code == 500
    assert response.json() == {"error": "API Error: 429 Too Many Requests"}
    assert "quota" not in response.text
    assert gemini.calls == 1


@pytest.mark.parametrize(
    ("path", "body", "message"),
    [
        ("/generate-command", {"query": "list files"}, "No command generated"),
        ("/explain-command", {"command": "ls"}, "No explanation generated"),
    ],
)
def test_malformed_provider_response(
    client: TestClient, gemini: FakeGemini, path: str, body: dict, message: str
) -> None:
    gemini.body = {"candidates": [{"finishReason": "SAFETY"}]}

    response = client.post(path, json=body)

    assert response.status_code == 500
    assert response.json() == {"error": message}


@pytest.mark.parametrize(
    ("path", "body", "message"),
    [
        ("/generate-command", {"query": "list files"}, "Empty command generated"),
        ("/explain-command", {"command": "ls"}, "Empty explanation generated"),
    ],
)
def test_empty_generation(
    client: TestClient, gemini: FakeGemini, path: str, body: dict, message: str
) -> None:
    gemini.body = gemini_payload("  \n ")

    response = client.post(path, json=body)

    assert response.status_code == 500
    assert response.json() == {"error": message}


def test_unexpected_failure_maps_to_internal_error(app, client: TestClient) -> None:
    from commandpal.dependencies import get_command_gateway

    class ExplodingGateway:
        async def run(self, operation, body):
            raise RuntimeError("boom")

    app.dependency_overrides[get_command_gateway] = lambda: ExplodingGateway()

    response = client.post("/generate-command", json={"query": "list files"})

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
    assert "boom" not in response.text


def test_healthz_and_version(client: TestClient) -> None:
    assert client.get("/healthz").json() == {"status": "ok"}
    assert client.get("/version").json() == {"version": __version__, "environment": "test"}
