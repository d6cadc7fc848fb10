# scamcheck/analyzer.py

"""
Content analysis orchestrator.

Public interface:

    analyze(item: TextInput | ImageInput | UrlInput, config: ServiceConfig) -> AnalysisResult
    analyze_text(text, config)
    analyze_image(data, media_type, config)
    analyze_url(url, config)

Each call builds a fresh request, makes exactly one round trip to the
reasoning service and returns a schema-validated AnalysisResult. Every
failure is raised as an AnalysisError subclass whose message is safe to
show to the user; nothing is retried.
"""

from __future__ import annotations

import json
import logging
import time

from .ai import build_request, normalize_reply, parse_result, send_request
from .config import ServiceConfig
from .errors import AnalysisError
from .models import AnalysisResult, ImageInput, TextInput, UrlInput

logger = logging.getLogger("scamcheck")


def analyze(item, config: ServiceConfig) -> AnalysisResult:
    start = time.time()
    request = build_request(item)
    logger.info(json.dumps({"event": "analysis_started", "modality": request.modality}))

    try:
        reply = send_request(request, config)
        text = normalize_reply(reply)
        result = parse_result(text)
    except AnalysisError as exc:
        logger.warning(
            json.dumps(
                {
                    "event": "analysis_failed",
                    "modality": request.modality,
                    "error_type": type(exc).__name__,
                    "error": str(exc)[:300],
                    "duration_ms": round((time.time() - start) * 1000, 2),
                }
            )
        )
        raise

    logger.info(
        json.dumps(
            {
                "event": "analysis_completed",
                "modality": request.modality,
                "status": reply.status,
                "risk_level": result.risk_level,
                "confidence": result.confidence,
                "red_flags": len(result.red_flags),
                "duration_ms": round((time.time() - start) * 1000, 2),
            }
        )
    )
    return result


def analyze_text(text: str, config: ServiceConfig) -> AnalysisResult:
    return analyze(TextInput(text=text), config)


def analyze_image(data: bytes, media_type: str, config: ServiceConfig) -> AnalysisResult:
    return analyze(ImageInput(data=data, media_type=media_type), config)


def analyze_url(url: str, config: ServiceConfig) -> AnalysisResult:
    return analyze(UrlInput(url=url), config)
