from __future__ import annotations

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .config import MAX_IMAGE_BYTES, MAX_TEXT_CHARS
from .utils.url_utils import split_absolute_url

RiskLevel = Literal["safe", "suspicious", "likely_scam", "confirmed_scam"]
ImageMediaType = Literal["image/jpeg", "image/png", "image/webp", "image/gif"]

SCAM_TYPES = (
    "phishing",
    "advance_fee",
    "romance_scam",
    "tech_support",
    "investment_fraud",
    "employment_scam",
    "lottery_scam",
    "impersonation",
    "fake_ecommerce",
)


# ---------------------------------------------------------
# Inputs
# ---------------------------------------------------------
class TextInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    text: str = Field(..., max_length=MAX_TEXT_CHARS, description="Message, email or SMS to analyze.")

    @field_validator("text")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Please enter some text to analyze")
        return v


class ImageInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["image"] = "image"
    data: bytes
    media_type: ImageMediaType

    @field_validator("data")
    @classmethod
    def _size(cls, v: bytes) -> bytes:
        if not v:
            raise ValueError("Image is empty")
        if len(v) > MAX_IMAGE_BYTES:
            raise ValueError("Image must be less than 10MB")
        return v


class UrlInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["url"] = "url"
    url: str = Field(..., min_length=1, description="Website or link; https:// is assumed when missing.")

    @field_validator("url")
    @classmethod
    def _normalize(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Please enter a URL to analyze")
        if not v.startswith(("http://", "https://")):
            v = "https://" + v
        try:
            split_absolute_url(v)
        except ValueError:
            raise ValueError("Please enter a valid URL") from None
        return v


AnalysisInput = Annotated[Union[TextInput, ImageInput, UrlInput], Field(discriminator="kind")]


# ---------------------------------------------------------
# URL structural features
# ---------------------------------------------------------
class UrlFeatures(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    domain: str
    tld: str
    has_https: bool = Field(alias="hasHttps")
    has_subdomain: bool = Field(alias="hasSubdomain")
    path_length: int = Field(alias="pathLength")
    has_query_params: bool = Field(alias="hasQueryParams")
    suspicious_tld: bool = Field(alias="suspiciousTLD")
    is_trusted_domain: bool = Field(alias="isTrustedDomain")
    domain_length: int = Field(alias="domainLength")
    has_numbers: bool = Field(alias="hasNumbers")
    has_hyphens: bool = Field(alias="hasHyphens")


# ---------------------------------------------------------
# Result
# ---------------------------------------------------------
class RedFlag(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str
    description: str
    evidence: str


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    risk_level: RiskLevel
    # strict: no bool / "85" / 85.0 coercion
    confidence: int = Field(..., ge=0, le=100, strict=True)
    scam_type: Optional[str] = None
    red_flags: List[RedFlag]
    recommendations: List[str]
    explanation: str

    @field_validator("scam_type")
    @classmethod
    def _empty_scam_type(cls, v: Optional[str]) -> Optional[str]:
        # models sometimes echo the template's "null" literally
        if v is None or v.strip().lower() in {"", "null", "none"}:
            return None
        return v.strip()
