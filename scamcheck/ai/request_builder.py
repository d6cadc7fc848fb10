# scamcheck/ai/request_builder.py

"""
Builds the single user-role message sent to the reasoning service.

Every modality shares SCAM_ANALYSIS_PROMPT, which pins the exact JSON shape
the result parser expects. Text and URL requests are plain strings; image
requests carry the picture as a base64 content part ahead of the text part.
"""

from __future__ import annotations

import base64
import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from ..models import ImageInput, TextInput, UrlInput
from ..url_scanner import extract_url_features


SCAM_ANALYSIS_PROMPT = """You are a scam detection expert. Analyze the provided content for scam indicators.

Respond ONLY with a valid JSON object in this exact format (no markdown, no code blocks):
{
  "risk_level": "safe" | "suspicious" | "likely_scam" | "confirmed_scam",
  "confidence": <number 0-100>,
  "scam_type": "<type or null if safe>",
  "red_flags": [
    {
      "type": "<flag_type>",
      "description": "<brief description>",
      "evidence": "<quoted text or description>"
    }
  ],
  "recommendations": ["<action 1>", "<action 2>"],
  "explanation": "<2-3 sentence summary>"
}

Risk level criteria:
- safe: No scam indicators detected
- suspicious: Some concerning elements but not definitive
- likely_scam: Multiple strong scam indicators
- confirmed_scam: Matches known scam patterns exactly

Common scam types: phishing, advance_fee, romance_scam, tech_support, investment_fraud, employment_scam, lottery_scam, impersonation, fake_ecommerce

Be thorough but avoid false positives. Legitimate businesses can have urgent messaging."""

IMAGE_DIRECTIVE = (
    "Analyze this image for scam indicators. Look for fake logos, suspicious text, "
    "manipulated screenshots, QR codes to unknown destinations, or other red flags."
)

URL_DIRECTIVE = (
    "Consider: typosquatting, suspicious TLDs, unusual subdomains, known phishing patterns, "
    "impersonation of legitimate brands."
)


@dataclass(frozen=True)
class ImageAttachment:
    data: bytes
    media_type: str

    def to_part(self) -> Dict[str, Any]:
        return {
            "type": "image",
            "source": {
                "type": "base64",
                "media_type": self.media_type,
                "data": base64.b64encode(self.data).decode("ascii"),
            },
        }


@dataclass(frozen=True)
class AnalysisRequest:
    modality: str
    instruction: str
    attachment: Optional[ImageAttachment] = None

    def content(self) -> Union[str, List[Dict[str, Any]]]:
        """Message content in wire form: a string, or [image part, text part]."""
        if self.attachment is None:
            return self.instruction
        return [self.attachment.to_part(), {"type": "text", "text": self.instruction}]

    def messages(self) -> List[Dict[str, Any]]:
        return [{"role": "user", "content": self.content()}]


# ---------------------------------------------------------
# Builders
# ---------------------------------------------------------

def build_text_request(item: TextInput) -> AnalysisRequest:
    instruction = f"{SCAM_ANALYSIS_PROMPT}\n\nAnalyze this text for scam indicators:\n\n{item.text}"
    return AnalysisRequest(modality="text", instruction=instruction)


def build_url_request(item: UrlInput, features: Optional[Dict[str, Any]] = None) -> AnalysisRequest:
    if features is None:
        features = extract_url_features(item.url)
    instruction = (
        f"{SCAM_ANALYSIS_PROMPT}\n\n"
        f"Analyze this URL for scam indicators:\n\n"
        f"URL: {item.url}\n\n"
        f"Preliminary URL analysis:\n{json.dumps(features, indent=2)}\n\n"
        f"{URL_DIRECTIVE}"
    )
    return AnalysisRequest(modality="url", instruction=instruction)


def build_image_request(item: ImageInput) -> AnalysisRequest:
    return AnalysisRequest(
        modality="image",
        instruction=f"{SCAM_ANALYSIS_PROMPT}\n\n{IMAGE_DIRECTIVE}",
        attachment=ImageAttachment(data=item.data, media_type=item.media_type),
    )


_BUILDERS = {
    "text": build_text_request,
    "url": build_url_request,
    "image": build_image_request,
}


def build_request(item) -> AnalysisRequest:
    """Dispatch on the input's kind tag."""
    return _BUILDERS[item.kind](item)
