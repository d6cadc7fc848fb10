# scamcheck/ai/result_parser.py

from __future__ import annotations

import json
import re

from pydantic import ValidationError

from ..errors import ContentParseError, ResultValidationError
from ..models import AnalysisResult

# ```json / ``` markers, each with an optional trailing newline
FENCE_RE = re.compile(r"```(?:json)?\n?")


def strip_fences(text: str) -> str:
    """Remove markdown code-fence markers and surrounding whitespace. Idempotent."""
    return FENCE_RE.sub("", text).strip()


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors()[:5]:
        loc = ".".join(str(p) for p in err.get("loc", ())) or "response"
        parts.append(f"{loc}: {err.get('msg', 'invalid')}")
    return "; ".join(parts)


def parse_result(text: str) -> AnalysisResult:
    """
    Parse the model's text into a validated AnalysisResult.

    Undecodable JSON raises ContentParseError; JSON that does not match the
    result schema (unknown risk_level, confidence out of 0-100, missing
    fields) raises ResultValidationError.
    """
    try:
        data = json.loads(strip_fences(text))
    except ValueError:
        raise ContentParseError("Failed to parse analysis response") from None

    if not isinstance(data, dict):
        raise ResultValidationError("Analysis response has an unexpected format: expected a JSON object")

    try:
        return AnalysisResult.model_validate(data)
    except ValidationError as exc:
        raise ResultValidationError(f"Analysis response has an unexpected format: {_describe(exc)}") from None
