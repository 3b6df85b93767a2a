"""Pydantic data models shared across services.

These models define the records passed between the UI, the API gateway,
the prompt composer and the suggestion client. By centralising them in a
shared module every component agrees on the shape of the data it sends and
receives.

``PromptInputs`` and ``GeneratedPrompts`` are immutable values: the composer
builds one from the other in a single call and nothing is retained.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Literal

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    computed_field,
    field_validator,
)

from shared.urls import is_valid_url, normalize_url

CATEGORIES: List[str] = [
    "Storytelling/Thought Leadership/Authority",
    "Lead Magnets & YT Video-based content",
    "Case studies/Testimonials/Results",
    "Skool Community/Educational",
]

TONES: List[str] = ["Authoritative", "Descriptive", "Casual", "Narrative", "Humorous"]


class TopicType(str, Enum):
    """Whether the topic is free text or a link to video content."""

    TEXT = "text"
    URL = "url"


# "askai" is a form mode only: the topic comes from a picked suggestion and is
# composed as plain text.
FormTopicType = Literal["text", "url", "askai"]
FORM_TOPIC_TYPES: List[str] = ["text", "url", "askai"]


class ModelLabel(str, Enum):
    """Downstream model family the generated prompts are written for."""

    GENERAL_TEXT = "general-purpose text model"
    VIDEO = "video-capable model"


# Concrete providers the labels stand for, shown next to the prompts in the UI.
MODEL_PROVIDERS = {
    ModelLabel.GENERAL_TEXT: "OpenAI GPT-4.1",
    ModelLabel.VIDEO: "Google Gemini",
}


class PromptInputs(BaseModel):
    """Composer input.

    Category and tone are free-form here; the UI restricts them to
    ``CATEGORIES`` and ``TONES`` but unknown values are passed through.
    When ``topic_type`` is ``url`` the topic is expected to be an absolute
    URL already (see ``shared.urls.normalize_url``).
    """

    model_config = ConfigDict(frozen=True)

    category: str
    topic: str
    topic_type: TopicType
    tone: str


class GeneratedPrompts(BaseModel):
    """Composer output: the prompt pair plus the model family it targets."""

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    system_prompt: str
    user_prompt: str
    model: ModelLabel
    provider: str

    @computed_field  # type: ignore[prop-decorator]
    @property
    def combined_prompt(self) -> str:
        return combined_prompt_text(self)


def combined_prompt_text(prompts: GeneratedPrompts) -> str:
    """Both prompts in one block, for a single copy into an LLM workflow."""
    return (
        f"System Prompt:\n{prompts.system_prompt}\n\n"
        f"User Prompt:\n{prompts.user_prompt}"
    )


class Suggestion(BaseModel):
    """A single topic idea returned by the Ask AI webhook."""

    title: str
    topic: str
    tone: str


class ComposeForm(BaseModel):
    """Form submission as the UI sends it.

    Validation mirrors the form: all three fields are required and a URL
    topic must normalise to an absolute http(s) URL.
    """

    model_config = ConfigDict(populate_by_name=True, validate_default=True)

    category: str = ""
    # Declared before ``topic`` so the topic validator can see it.
    topic_type: FormTopicType = Field(
        default="text", validation_alias=AliasChoices("topic_type", "topicType")
    )
    topic: str = ""
    tone: str = ""

    @field_validator("category")
    @classmethod
    def _category_required(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Please select a post category")
        return v

    @field_validator("topic")
    @classmethod
    def _topic_required(cls, v: str, info: ValidationInfo) -> str:
        if not v.strip():
            raise ValueError("Please enter a topic")
        if info.data.get("topic_type") == "url" and not is_valid_url(v):
            raise ValueError("Please enter a valid URL")
        return v

    @field_validator("tone")
    @classmethod
    def _tone_required(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Please select a post tone")
        return v

    def to_prompt_inputs(self) -> PromptInputs:
        """Normalise the submission into composer input."""
        if self.topic_type == "url":
            return PromptInputs(
                category=self.category,
                topic=normalize_url(self.topic),
                topic_type=TopicType.URL,
                tone=self.tone,
            )
        return PromptInputs(
            category=self.category,
            topic=self.topic,
            topic_type=TopicType.TEXT,
            tone=self.tone,
        )

    def with_suggestion(self, suggestion: Suggestion) -> "ComposeForm":
        """Return a copy with topic and tone taken from a picked suggestion."""
        return self.model_copy(update={"topic": suggestion.topic, "tone": suggestion.tone})


class SuggestTopicsRequest(BaseModel):
    """Request body for the gateway's suggestion endpoint."""

    description: str
    category: str

    @field_validator("description")
    @classmethod
    def _description_required(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Please enter your AI query")
        return v

    @field_validator("category")
    @classmethod
    def _category_required(cls, v: str) -> str:
        if not v:
            raise ValueError("Please select a post category first")
        return v


class WebhookPayload(BaseModel):
    """JSON body posted to the Ask AI webhook."""

    action: Literal["suggest_topics"] = "suggest_topics"
    category: str
    description: str


class SuggestTopicsResponse(BaseModel):
    """Suggestions list; a webhook reply without ``ideas`` yields an empty list."""

    ideas: List[Suggestion] = Field(default_factory=list)


class OptionsResponse(BaseModel):
    """Choices the form offers for its select widgets."""

    categories: List[str]
    tones: List[str]
    topic_types: List[str]
