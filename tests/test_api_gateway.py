import httpx
from fastapi.testclient import TestClient

from services.api_gateway.app.main import app
from services.api_gateway.app.routers.suggestions import get_webhook_transport
from services.prompt_composer.app.prompts import TEXT_SYSTEM_PROMPT, URL_SYSTEM_PROMPT
from shared.models import CATEGORIES, TONES
from shared.settings import Settings, get_settings

client = TestClient(app)

HOOK = "https://hooks.example.test/ask-ai"


def _use_webhook(handler, url: str | None = HOOK) -> None:
    app.dependency_overrides[get_settings] = lambda: Settings(ask_ai_webhook_url=url)
    app.dependency_overrides[get_webhook_transport] = lambda: httpx.MockTransport(
        handler
    )


def teardown_function() -> None:
    app.dependency_overrides.clear()


def test_health() -> None:
    assert client.get("/health").json() == {"status": "ok"}
    assert client.get("/").json()["service"] == "api-gateway"


def test_options_lists_form_choices() -> None:
    data = client.get("/options").json()
    assert data["categories"] == CATEGORIES
    assert data["tones"] == TONES
    assert data["topic_types"] == ["text", "url", "askai"]


def test_compose_text_scenario() -> None:
    resp = client.post(
        "/compose",
        json={
            "category": "Skool Community/Educational",
            "topic": "time management",
            "topic_type": "text",
            "tone": "Casual",
        },
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["model"] == "general-purpose text model"
    assert data["system_prompt"] == TEXT_SYSTEM_PROMPT
    for value in ("Skool Community/Educational", "time management", "Casual"):
        assert value in data["user_prompt"]
    assert data["combined_prompt"] == (
        f"System Prompt:\n{data['system_prompt']}\n\n"
        f"User Prompt:\n{data['user_prompt']}"
    )


def test_compose_url_scenario_accepts_camel_case_topic_type() -> None:
    resp = client.post(
        "/compose",
        json={
            "category": "Case studies/Testimonials/Results",
            "topic": "youtube.com/watch?v=abc",
            "topicType": "url",
            "tone": "Authoritative",
        },
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["model"] == "video-capable model"
    assert data["provider"] == "Google Gemini"
    assert data["system_prompt"] == URL_SYSTEM_PROMPT
    assert "Timestamp References" in data["system_prompt"]


def test_compose_rejects_invalid_url() -> None:
    resp = client.post(
        "/compose",
        json={"category": "c", "topic": "http://", "topic_type": "url", "tone": "Casual"},
    )
    assert resp.status_code == 422
    msgs = " ".join(err["msg"] for err in resp.json()["detail"])
    assert "Please enter a valid URL" in msgs


def test_compose_rejects_missing_fields() -> None:
    resp = client.post("/compose", json={"topic_type": "text"})
    assert resp.status_code == 422
    locs = {tuple(err["loc"]) for err in resp.json()["detail"]}
    assert ("body", "category") in locs
    assert ("body", "topic") in locs
    assert ("body", "tone") in locs


def test_suggest_without_webhook_is_config_error() -> None:
    calls = []
    _use_webhook(lambda r: calls.append(r) or httpx.Response(200, json={}), url=None)
    resp = client.post(
        "/suggest_topics", json={"category": "c", "description": "ideas please"}
    )
    assert resp.status_code == 503
    assert "not configured" in resp.json()["detail"]
    assert calls == []


def test_suggest_returns_ideas() -> None:
    _use_webhook(
        lambda r: httpx.Response(
            200, json={"ideas": [{"title": "A", "topic": "B", "tone": "Casual"}]}
        )
    )
    resp = client.post(
        "/suggest_topics", json={"category": "c", "description": "ideas please"}
    )
    assert resp.status_code == 200
    assert resp.json() == {"ideas": [{"title": "A", "topic": "B", "tone": "Casual"}]}


def test_suggest_empty_reply_is_not_an_error() -> None:
    _use_webhook(lambda r: httpx.Response(200, json={}))
    resp = client.post(
        "/suggest_topics", json={"category": "c", "description": "ideas please"}
    )
    assert resp.status_code == 200
    assert resp.json() == {"ideas": []}


def test_suggest_remote_failure_is_bad_gateway() -> None:
    _use_webhook(lambda r: httpx.Response(500, text="boom"))
    resp = client.post(
        "/suggest_topics", json={"category": "c", "description": "ideas please"}
    )
    assert resp.status_code == 502
    assert resp.json()["detail"] == "Failed to get AI suggestions"


def test_suggest_transport_error_detail_is_generic() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused to 10.0.0.7", request=request)

    _use_webhook(handler)
    resp = client.post(
        "/suggest_topics", json={"category": "c", "description": "ideas please"}
    )
    assert resp.status_code == 502
    assert resp.json() == {"detail": "Failed to get AI suggestions"}


def test_suggest_blank_query_is_validation_error() -> None:
    _use_webhook(lambda r: httpx.Response(200, json={}))
    resp = client.post("/suggest_topics", json={"category": "c", "description": " "})
    assert resp.status_code == 422
