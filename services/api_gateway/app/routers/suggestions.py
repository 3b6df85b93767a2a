"""Ask AI suggestion router for the API gateway.

Relays the user's query to the configured webhook and returns the parsed
ideas. Failures are mapped to HTTP errors without retrying:
- blank query or category -> 422
- webhook not configured -> 503 (checked before any network call)
- webhook failure of any kind -> 502
"""

from __future__ import annotations

from typing import Optional

import httpx
from fastapi import APIRouter, Depends, HTTPException

from services.suggestions.app.webhook import (
    MissingWebhook,
    SuggestionClient,
    SuggestionError,
    resolve_webhook,
)
from shared.models import SuggestTopicsRequest, SuggestTopicsResponse
from shared.settings import Settings, get_settings
from shared.tracing import log_event

router = APIRouter(tags=["suggestions"])


def get_webhook_transport() -> Optional[httpx.AsyncBaseTransport]:
    """Transport for the webhook client; None selects httpx's network transport."""
    return None


@router.post("/suggest_topics", response_model=SuggestTopicsResponse)
async def suggest_topics(
    req: SuggestTopicsRequest,
    settings: Settings = Depends(get_settings),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_webhook_transport),
) -> SuggestTopicsResponse:
    """Fetch topic ideas for a free-text query within a category."""
    target = resolve_webhook(settings)
    if isinstance(target, MissingWebhook):
        log_event("SuggestionsUnconfigured")
        raise HTTPException(503, target.reason)

    client = SuggestionClient(target, transport=transport)
    try:
        ideas = await client.suggest(req.category, req.description)
    except SuggestionError as e:
        log_event("SuggestionsRelayFailed", {"error": str(e)[:200]})
        raise HTTPException(502, "Failed to get AI suggestions")
    return SuggestTopicsResponse(ideas=ideas)
