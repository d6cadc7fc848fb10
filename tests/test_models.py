"""Tests for input models: constraints checked before anything is dispatched."""
import pytest
from pydantic import TypeAdapter, ValidationError

from scamcheck.config import MAX_IMAGE_BYTES, ServiceConfig
from scamcheck.models import AnalysisInput, ImageInput, TextInput, UrlInput


# ── Text ──────────────────────────────────────────────────────────

def test_text_kept_verbatim():
    assert TextInput(text="  hi  ").text == "  hi  "


def test_text_limits():
    TextInput(text="a" * 5000)
    with pytest.raises(ValidationError):
        TextInput(text="a" * 5001)
    with pytest.raises(ValidationError):
        TextInput(text=" \n\t ")


# ── Image ─────────────────────────────────────────────────────────

@pytest.mark.parametrize("media_type", ["image/jpeg", "image/png", "image/webp", "image/gif"])
def test_supported_media_types(media_type):
    assert ImageInput(data=b"x", media_type=media_type).media_type == media_type


def test_image_rejections():
    with pytest.raises(ValidationError):
        ImageInput(data=b"x", media_type="image/bmp")
    with pytest.raises(ValidationError):
        ImageInput(data=b"", media_type="image/png")
    with pytest.raises(ValidationError):
        ImageInput(data=b"\0" * (MAX_IMAGE_BYTES + 1), media_type="image/png")


# ── URL ───────────────────────────────────────────────────────────

@pytest.mark.parametrize("raw, expected", [
    ("example.com", "https://example.com"),
    ("  example.com/path?q=1 ", "https://example.com/path?q=1"),
    ("http://example.com", "http://example.com"),
    ("https://accounts.google.com", "https://accounts.google.com"),
    ("localhost", "https://localhost"),
    ("intranet/login", "https://intranet/login"),
    ("paypal-login", "https://paypal-login"),
    ("my_site.example.com", "https://my_site.example.com"),
])
def test_url_normalized(raw, expected):
    assert UrlInput(url=raw).url == expected


@pytest.mark.parametrize("raw", ["", "   ", "not a url", "https://", "exa mple.com", "a.com:99999", "http://a.com:notaport/"])
def test_url_rejected(raw):
    with pytest.raises(ValidationError):
        UrlInput(url=raw)


# ── Union / immutability ──────────────────────────────────────────

def test_discriminated_union():
    adapter = TypeAdapter(AnalysisInput)
    assert isinstance(adapter.validate_python({"kind": "url", "url": "example.com"}), UrlInput)
    assert isinstance(adapter.validate_python({"kind": "text", "text": "hi"}), TextInput)
    with pytest.raises(ValidationError):
        adapter.validate_python({"kind": "audio", "data": "x"})


def test_inputs_frozen():
    item = TextInput(text="hi")
    with pytest.raises(ValidationError):
        item.text = "changed"


# ── Config ────────────────────────────────────────────────────────

def test_config_from_env(monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", " sk-env ")
    monkeypatch.setenv("ANTHROPIC_BASE_URL", "https://proxy.example/")
    config = ServiceConfig.from_env()
    assert config.api_key == "sk-env"
    assert config.endpoint == "https://proxy.example/v1/messages"


def test_config_auth_token_fallback(monkeypatch):
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    monkeypatch.delenv("ANTHROPIC_BASE_URL", raising=False)
    monkeypatch.setenv("ANTHROPIC_AUTH_TOKEN", "sk-token")
    config = ServiceConfig.from_env()
    assert config.api_key == "sk-token"
    assert config.endpoint == "https://api.anthropic.com/v1/messages"
