import json

import pytest
import requests

SCAM_RESULT = {
    "risk_level": "likely_scam",
    "confidence": 85,
    "scam_type": "phishing",
    "red_flags": [
        {
            "type": "urgency",
            "description": "urgent threat language",
            "evidence": "verify immediately",
        }
    ],
    "recommendations": ["Do not click the link"],
    "explanation": "Urgent phishing language with a suspicious link.",
}

SAFE_RESULT = {
    "risk_level": "safe",
    "confidence": 92,
    "scam_type": None,
    "red_flags": [],
    "recommendations": ["No action needed"],
    "explanation": "Ordinary message with no scam indicators.",
}


def native_envelope(text: str) -> str:
    return json.dumps({"id": "msg_01", "type": "message", "content": [{"type": "text", "text": text}]})


def openai_envelope(text: str) -> str:
    return json.dumps({"choices": [{"message": {"role": "assistant", "content": text}}]})


class FakeResponse:
    def __init__(self, status_code: int = 200, text: str = ""):
        self.status_code = status_code
        self.text = text


class FakePost:
    """Stands in for requests.post; records every call and replays one canned reply."""

    def __init__(self):
        self.calls = []
        self.response = FakeResponse(200, native_envelope(json.dumps(SCAM_RESULT)))
        self.exc = None

    def reply(self, status_code: int = 200, text: str = ""):
        self.response = FakeResponse(status_code, text)

    def __call__(self, url, headers=None, json=None, **kwargs):
        self.calls.append({"url": url, "headers": headers, "json": json, "kwargs": kwargs})
        if self.exc is not None:
            raise self.exc
        return self.response

    @property
    def last(self):
        return self.calls[-1]


@pytest.fixture
def fake_post(monkeypatch):
    fake = FakePost()
    monkeypatch.setattr(requests, "post", fake)
    return fake
