"""Prompt composition router for the API gateway.

Validates the submitted form, normalises URL topics and runs the composer
in-process. Composition is deterministic and cheap, so nothing is cached.
"""

from __future__ import annotations

from fastapi import APIRouter

from services.prompt_composer.app.composer import compose
from shared.models import (
    CATEGORIES,
    FORM_TOPIC_TYPES,
    TONES,
    ComposeForm,
    GeneratedPrompts,
    OptionsResponse,
)
from shared.tracing import log_event, span

router = APIRouter(tags=["prompts"])


@router.get("/options", response_model=OptionsResponse)
def options() -> OptionsResponse:
    """Choices for the form's category, tone and topic type widgets."""
    return OptionsResponse(
        categories=CATEGORIES, tones=TONES, topic_types=FORM_TOPIC_TYPES
    )


@router.post("/compose", response_model=GeneratedPrompts)
def compose_prompts(form: ComposeForm) -> GeneratedPrompts:
    """
    Build the system and user prompts for a validated form submission.

    Flow:
      - ComposeForm validation (422 on missing fields or a bad URL)
      - URL normalisation, "askai" composed as text
      - compose()
    """
    inputs = form.to_prompt_inputs()
    with span("compose", topic_type=inputs.topic_type.value):
        prompts = compose(inputs)
    log_event(
        "Compose",
        {
            "topic_type": inputs.topic_type.value,
            "category": inputs.category,
            "model": prompts.model.value,
        },
    )
    return prompts
