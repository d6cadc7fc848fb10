# scamcheck/ai/response_normalizer.py

"""
Turns a raw service reply into the assistant's text.

The configured base URL may point at the native Messages API or at an
OpenAI-compatible proxy, so the text is looked up by a fixed, ordered list
of extraction strategies; the first non-empty hit wins.
"""

from __future__ import annotations

import json
from typing import Any, Callable, Optional, Sequence

from ..errors import EnvelopeError, ServiceError
from .anthropic_client import RawReply

HTML_MARKERS = ("<html", "<!DOCTYPE")
EXCERPT_CHARS = 200


def decode_body(body: str) -> Any:
    if not body:
        raise EnvelopeError("Empty response from API")
    try:
        return json.loads(body)
    except ValueError:
        if any(marker in body for marker in HTML_MARKERS):
            raise EnvelopeError("API returned HTML instead of JSON. Check your configuration.") from None
        raise EnvelopeError(f"Invalid JSON response: {body[:EXCERPT_CHARS]}") from None


def _service_error_message(data: Any) -> Optional[str]:
    if not isinstance(data, dict):
        return None
    error = data.get("error")
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return None


# ---------------------------------------------------------
# Extraction strategies
# ---------------------------------------------------------

def _first(items: Any) -> Any:
    if isinstance(items, list) and items:
        return items[0]
    return None


def native_content(data: Any) -> Optional[str]:
    """Messages API: content[0].text"""
    block = _first(data.get("content")) if isinstance(data, dict) else None
    text = block.get("text") if isinstance(block, dict) else None
    return text if isinstance(text, str) and text else None


def openai_content(data: Any) -> Optional[str]:
    """OpenAI-compatible proxies: choices[0].message.content"""
    choice = _first(data.get("choices")) if isinstance(data, dict) else None
    message = choice.get("message") if isinstance(choice, dict) else None
    text = message.get("content") if isinstance(message, dict) else None
    return text if isinstance(text, str) and text else None


CONTENT_EXTRACTORS: Sequence[Callable[[Any], Optional[str]]] = (
    native_content,
    openai_content,
)


def extract_content(data: Any) -> str:
    for extractor in CONTENT_EXTRACTORS:
        text = extractor(data)
        if text:
            return text
    raise EnvelopeError("No content in API response")


def normalize_reply(reply: RawReply) -> str:
    """Decode the envelope, surface service errors, return the assistant text."""
    data = decode_body(reply.body)

    if not reply.ok:
        message = _service_error_message(data) or f"API request failed with status {reply.status}"
        raise ServiceError(message, status_code=reply.status)

    return extract_content(data)
