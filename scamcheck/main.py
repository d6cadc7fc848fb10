# scamcheck/main.py

from __future__ import annotations

import dataclasses
import json
import logging
import os
import secrets
import time
from typing import Optional

import sentry_sdk
from fastapi import FastAPI, File, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from scamcheck.analyzer import analyze
from scamcheck.config import ALLOWED_IMAGE_TYPES, MAX_IMAGE_BYTES, ServiceConfig
from scamcheck.errors import AnalysisError, ServiceError
from scamcheck.models import AnalysisResult, ImageInput, TextInput, UrlInput
from scamcheck.utils.image_utils import sniff_media_type

FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:5173").rstrip("/")
SENTRY_DSN = os.getenv("SENTRY_DSN", "")
API_KEY_HEADER = "x-api-key"

# Loaded once; per-request X-Api-Key headers derive a copy, never mutate this
SERVICE_CONFIG = ServiceConfig.from_env()

if SENTRY_DSN:
    sentry_sdk.init(dsn=SENTRY_DSN, traces_sample_rate=0.2)

logger = logging.getLogger("scamcheck")
logging.basicConfig(level=logging.INFO, format="%(message)s")

app = FastAPI(title="Scam Check API")

ALLOWED_ORIGINS = list(
    {
        FRONTEND_URL,
        FRONTEND_URL.replace("www.", ""),
    }
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------
# Error handlers
# ---------------------------------------------------------
@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    logger.error(json.dumps({"event": "error", "path": request.url.path, "error": str(exc)}))
    return JSONResponse({"error": "Internal server error."}, status_code=500)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse({"error": "Invalid request.", "detail": jsonable_errors(exc.errors())}, status_code=422)


@app.exception_handler(AnalysisError)
async def analysis_error_handler(request: Request, exc: AnalysisError):
    payload = {"error": str(exc)}
    if isinstance(exc, ServiceError) and exc.status_code is not None:
        payload["upstream_status"] = exc.status_code
    return JSONResponse(payload, status_code=502)


def jsonable_errors(errors) -> list:
    # pydantic error dicts can carry exception objects under "ctx"
    out = []
    for err in errors:
        item = {k: v for k, v in err.items() if k != "ctx"}
        if "input" in item and isinstance(item["input"], bytes):
            item["input"] = f"<{len(item['input'])} bytes>"
        out.append(item)
    return out


# ---------------------------------------------------------
# Request id + access log + security headers
# ---------------------------------------------------------
@app.middleware("http")
async def security_headers(request: Request, call_next):
    request_id = secrets.token_hex(8)
    request.state.request_id = request_id
    start_time = time.time()
    response = await call_next(request)
    duration = round((time.time() - start_time) * 1000, 2)
    logger.info(
        json.dumps(
            {
                "event": "request",
                "request_id": request_id,
                "path": request.url.path,
                "method": request.method,
                "status": response.status_code,
                "duration_ms": duration,
            }
        )
    )
    response.headers["X-Request-ID"] = request_id
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["Referrer-Policy"] = "no-referrer"
    return response


# ---------------------------------------------------------
# Helpers
# ---------------------------------------------------------
def _service_config(request: Request) -> Optional[ServiceConfig]:
    """Server config, with the credential overridden by an X-Api-Key header if sent."""
    header_key = (request.headers.get(API_KEY_HEADER) or "").strip()
    config = SERVICE_CONFIG
    if header_key:
        config = dataclasses.replace(config, api_key=header_key)
    if not config.api_key:
        return None
    return config


def _missing_credentials():
    return JSONResponse(
        {"error": "Please enter your API credentials first. Set ANTHROPIC_API_KEY or send an X-Api-Key header."},
        status_code=401,
    )


# ---------------------------------------------------------
# Routes
# ---------------------------------------------------------
@app.get("/health")
def health():
    return {"status": "ok"}


# sync routes: analyze() blocks on the upstream call and runs in the threadpool
@app.post("/analyze/text", response_model=AnalysisResult)
def analyze_text_endpoint(body: TextInput, request: Request):
    config = _service_config(request)
    if config is None:
        return _missing_credentials()
    return analyze(body, config)


@app.post("/analyze/url", response_model=AnalysisResult)
def analyze_url_endpoint(body: UrlInput, request: Request):
    config = _service_config(request)
    if config is None:
        return _missing_credentials()
    return analyze(body, config)


@app.post("/analyze/image", response_model=AnalysisResult)
def analyze_image_endpoint(request: Request, image: UploadFile = File(...)):
    content_length = request.headers.get("content-length")
    if content_length and content_length.isdigit() and int(content_length) > MAX_IMAGE_BYTES + 64 * 1024:
        return JSONResponse({"error": "Image must be less than 10MB"}, status_code=413)

    config = _service_config(request)
    if config is None:
        return _missing_credentials()

    img_bytes = image.file.read()
    if not img_bytes:
        return JSONResponse({"error": "Image is empty."}, status_code=400)
    if len(img_bytes) > MAX_IMAGE_BYTES:
        return JSONResponse({"error": "Image must be less than 10MB"}, status_code=413)

    # the bytes decide the media type; the declared content type is only logged
    media_type = sniff_media_type(img_bytes)
    logger.info(
        json.dumps(
            {
                "event": "image_received",
                "size": len(img_bytes),
                "declared_type": image.content_type,
                "detected_type": media_type,
            }
        )
    )
    if media_type is None:
        return JSONResponse({"error": "Could not read image file."}, status_code=400)
    if media_type not in ALLOWED_IMAGE_TYPES:
        return JSONResponse({"error": "Please upload a JPG, PNG, WEBP, or GIF image"}, status_code=415)

    return analyze(ImageInput(data=img_bytes, media_type=media_type), config)
