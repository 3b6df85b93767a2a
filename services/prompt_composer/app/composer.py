"""Prompt composer: maps form inputs to a system/user prompt pair.

Composition is a lookup followed by a substitution. The topic type picks a
template family (system prompt, user prompt template, model label) and the
user-supplied fields are formatted into the family's user template. No
validation happens here; unknown categories or tones surface verbatim.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from shared.models import (
    MODEL_PROVIDERS,
    GeneratedPrompts,
    ModelLabel,
    PromptInputs,
    TopicType,
)

from .prompts import (
    TEXT_SYSTEM_PROMPT,
    TEXT_USER_PROMPT_TEMPLATE,
    TRANSCRIPT_PLACEHOLDER,
    URL_SYSTEM_PROMPT,
    URL_USER_PROMPT_TEMPLATE,
)


@dataclass(frozen=True)
class PromptFamily:
    """Fixed text and model label used for one topic type."""

    system_prompt: str
    user_template: str
    model: ModelLabel

    def render_user_prompt(self, inputs: PromptInputs) -> str:
        return self.user_template.format(
            category=inputs.category,
            topic=inputs.topic,
            tone=inputs.tone,
            transcript_placeholder=TRANSCRIPT_PLACEHOLDER,
        )


FAMILIES: Dict[TopicType, PromptFamily] = {
    TopicType.TEXT: PromptFamily(
        system_prompt=TEXT_SYSTEM_PROMPT,
        user_template=TEXT_USER_PROMPT_TEMPLATE,
        model=ModelLabel.GENERAL_TEXT,
    ),
    TopicType.URL: PromptFamily(
        system_prompt=URL_SYSTEM_PROMPT,
        user_template=URL_USER_PROMPT_TEMPLATE,
        model=ModelLabel.VIDEO,
    ),
}


def compose(inputs: PromptInputs) -> GeneratedPrompts:
    """Build the prompt pair for ``inputs``.

    Deterministic and side-effect free: the same inputs always give
    byte-identical output.
    """
    family = FAMILIES[inputs.topic_type]
    return GeneratedPrompts(
        system_prompt=family.system_prompt,
        user_prompt=family.render_user_prompt(inputs),
        model=family.model,
        provider=MODEL_PROVIDERS[family.model],
    )
