"""URL helpers for the topic field.

Users type bare domains ("example.com") as often as full links, so the form
normalises the input before validating it and before handing it to the
composer. The composer itself never touches URLs.
"""

from __future__ import annotations

import re

from pydantic import AnyHttpUrl, TypeAdapter, ValidationError

_WHITESPACE = re.compile(r"\s+")
_SCHEME = re.compile(r"^https?://", re.IGNORECASE)
_URL_ADAPTER = TypeAdapter(AnyHttpUrl)

DEFAULT_SCHEME = "https://"


def normalize_url(raw: str) -> str:
    """Strip all whitespace and prepend ``https://`` when no http(s) scheme is present.

    An empty (or whitespace-only) input stays empty.
    """
    formatted = _WHITESPACE.sub("", raw or "")
    if formatted and not _SCHEME.match(formatted):
        formatted = f"{DEFAULT_SCHEME}{formatted}"
    return formatted


def is_valid_url(raw: str) -> bool:
    """Return True when the normalised input is an absolute http(s) URL with a host."""
    formatted = normalize_url(raw)
    if not formatted:
        return False
    try:
        url = _URL_ADAPTER.validate_python(formatted)
    except ValidationError:
        return False
    return bool(url.host)
