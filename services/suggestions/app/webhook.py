"""Ask AI suggestion client.

Posts the user's free-text query and the selected category to an external
webhook and parses the topic ideas it returns. The webhook address comes
from configuration; a missing address is represented by ``MissingWebhook``
so callers can report it before any network call is made.

There is exactly one request per call: no retry, no backoff, no
cancellation. Every failure (non-2xx, transport error, malformed JSON or an
unexpected shape) is raised as ``SuggestionError``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Union

import httpx
from pydantic import ValidationError

from shared.models import Suggestion, SuggestTopicsResponse, WebhookPayload
from shared.settings import Settings
from shared.tracing import log_event, span


class SuggestionError(Exception):
    """The webhook could not produce a usable list of suggestions."""


@dataclass(frozen=True)
class WebhookEndpoint:
    url: str
    timeout_seconds: Optional[float] = None


@dataclass(frozen=True)
class MissingWebhook:
    reason: str = "Ask AI Webhook URL is not configured"


def resolve_webhook(settings: Settings) -> Union[WebhookEndpoint, MissingWebhook]:
    """Turn configuration into a usable endpoint or the missing-config variant."""
    url = (settings.ask_ai_webhook_url or "").strip()
    if not url:
        return MissingWebhook()
    return WebhookEndpoint(url=url, timeout_seconds=settings.ask_ai_timeout_seconds)


def parse_ideas(payload: Any) -> List[Suggestion]:
    """Extract suggestions from a webhook reply; a missing ``ideas`` key means none."""
    if not isinstance(payload, dict):
        raise SuggestionError(f"unexpected response type: {type(payload).__name__}")
    ideas = payload.get("ideas")
    try:
        return SuggestTopicsResponse.model_validate({"ideas": ideas or []}).ideas
    except ValidationError as e:
        raise SuggestionError(f"malformed ideas: {e.error_count()} error(s)") from e


class SuggestionClient:
    """Thin async wrapper around the webhook POST."""

    def __init__(
        self,
        endpoint: WebhookEndpoint,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._endpoint = endpoint
        self._transport = transport

    async def suggest(self, category: str, description: str) -> List[Suggestion]:
        body = WebhookPayload(category=category, description=description)
        with span("suggestions.webhook", category=category):
            try:
                async with httpx.AsyncClient(
                    timeout=httpx.Timeout(self._endpoint.timeout_seconds),
                    transport=self._transport,
                ) as client:
                    r = await client.post(self._endpoint.url, json=body.model_dump())
                    r.raise_for_status()
                    payload = r.json()
            except httpx.HTTPStatusError as e:
                log_event(
                    "SuggestionsFailed", {"status": e.response.status_code}
                )
                raise SuggestionError(
                    f"webhook returned {e.response.status_code}"
                ) from e
            except httpx.HTTPError as e:
                log_event("SuggestionsFailed", {"error": str(e)[:200]})
                raise SuggestionError(f"webhook request failed: {e}") from e
            except ValueError as e:
                log_event("SuggestionsFailed", {"error": "invalid json"})
                raise SuggestionError("webhook returned invalid JSON") from e

            ideas = parse_ideas(payload)
        log_event("Suggestions", {"category": category, "count": len(ideas)})
        return ideas
