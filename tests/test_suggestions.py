"""Tests for the Ask AI webhook client."""

import asyncio
import json

import httpx
import pytest

from services.suggestions.app.webhook import (
    MissingWebhook,
    SuggestionClient,
    SuggestionError,
    WebhookEndpoint,
    parse_ideas,
    resolve_webhook,
)
from shared.settings import Settings

HOOK = "https://hooks.example.test/ask-ai"


def _client(handler) -> SuggestionClient:
    return SuggestionClient(
        WebhookEndpoint(url=HOOK), transport=httpx.MockTransport(handler)
    )


def test_parse_ideas_single_record() -> None:
    ideas = parse_ideas({"ideas": [{"title": "A", "topic": "B", "tone": "Casual"}]})
    assert len(ideas) == 1
    assert (ideas[0].title, ideas[0].topic, ideas[0].tone) == ("A", "B", "Casual")


def test_parse_ideas_missing_key_is_empty() -> None:
    assert parse_ideas({}) == []
    assert parse_ideas({"ideas": None}) == []


def test_parse_ideas_rejects_unexpected_shapes() -> None:
    with pytest.raises(SuggestionError):
        parse_ideas([{"title": "A"}])
    with pytest.raises(SuggestionError):
        parse_ideas({"ideas": [{"title": "A"}]})


def test_resolve_webhook_missing_is_distinct_variant() -> None:
    assert isinstance(resolve_webhook(Settings(ask_ai_webhook_url=None)), MissingWebhook)
    assert isinstance(resolve_webhook(Settings(ask_ai_webhook_url="  ")), MissingWebhook)
    target = resolve_webhook(
        Settings(ask_ai_webhook_url=HOOK, ask_ai_timeout_seconds=12.5)
    )
    assert target == WebhookEndpoint(url=HOOK, timeout_seconds=12.5)


def test_suggest_posts_expected_body() -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return httpx.Response(
            200, json={"ideas": [{"title": "T", "topic": "Focus", "tone": "Narrative"}]}
        )

    ideas = asyncio.run(
        _client(handler).suggest("Skool Community/Educational", "productivity tips")
    )
    assert seen["method"] == "POST"
    assert seen["url"] == HOOK
    assert seen["body"] == {
        "action": "suggest_topics",
        "category": "Skool Community/Educational",
        "description": "productivity tips",
    }
    assert [i.topic for i in ideas] == ["Focus"]


def test_suggest_empty_object_yields_no_ideas() -> None:
    ideas = asyncio.run(
        _client(lambda r: httpx.Response(200, json={})).suggest("c", "d")
    )
    assert ideas == []


@pytest.mark.parametrize("status", [400, 404, 500, 503])
def test_non_2xx_is_failure(status: int) -> None:
    with pytest.raises(SuggestionError):
        asyncio.run(
            _client(lambda r: httpx.Response(status, json={"ideas": []})).suggest(
                "c", "d"
            )
        )


def test_invalid_json_is_failure() -> None:
    with pytest.raises(SuggestionError):
        asyncio.run(
            _client(lambda r: httpx.Response(200, content=b"<html>oops")).suggest(
                "c", "d"
            )
        )


def test_transport_error_is_failure() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(SuggestionError):
        asyncio.run(_client(handler).suggest("c", "d"))


def _capture_timeout(endpoint: WebhookEndpoint) -> dict:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen.update(request.extensions["timeout"])
        return httpx.Response(200, json={})

    client = SuggestionClient(endpoint, transport=httpx.MockTransport(handler))
    asyncio.run(client.suggest("c", "d"))
    return seen


def test_configured_timeout_reaches_request() -> None:
    timeout = _capture_timeout(WebhookEndpoint(url=HOOK, timeout_seconds=2.5))
    assert timeout["read"] == 2.5
    assert timeout["connect"] == 2.5


def test_default_endpoint_has_no_timeout() -> None:
    timeout = _capture_timeout(WebhookEndpoint(url=HOOK))
    assert timeout["read"] is None
    assert timeout["connect"] is None
