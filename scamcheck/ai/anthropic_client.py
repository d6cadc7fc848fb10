# scamcheck/ai/anthropic_client.py

from __future__ import annotations

import json
import logging
from dataclasses import dataclass

import requests

from ..config import ANTHROPIC_VERSION, MAX_TOKENS, MODEL, ServiceConfig
from ..errors import TransportError
from .request_builder import AnalysisRequest

logger = logging.getLogger("scamcheck")


@dataclass(frozen=True)
class RawReply:
    status: int
    body: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


def build_payload(request: AnalysisRequest) -> dict:
    return {
        "model": MODEL,
        "max_tokens": MAX_TOKENS,
        "messages": request.messages(),
    }


def build_headers(config: ServiceConfig) -> dict:
    return {
        "Content-Type": "application/json",
        "x-api-key": config.api_key,
        "anthropic-version": ANTHROPIC_VERSION,
    }


def send_request(request: AnalysisRequest, config: ServiceConfig) -> RawReply:
    """
    POST one analysis request to {base_url}/v1/messages.

    The body is returned as text; decoding is the normalizer's job.
    One attempt only, no retry and no timeout beyond the transport's own.
    """
    url = config.endpoint
    try:
        resp = requests.post(url, headers=build_headers(config), json=build_payload(request))
    except requests.RequestException as exc:
        logger.warning(json.dumps({"event": "transport_error", "modality": request.modality, "error": type(exc).__name__}))
        raise TransportError(f"Network error contacting analysis service: {exc}") from exc

    return RawReply(status=resp.status_code, body=resp.text or "")
