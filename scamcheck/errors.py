# scamcheck/errors.py

from __future__ import annotations

from typing import Optional


class AnalysisError(RuntimeError):
    """Base for every failure of a single analysis attempt. str(exc) is user-facing."""
    pass


class TransportError(AnalysisError):
    pass


class ServiceError(AnalysisError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class EnvelopeError(AnalysisError):
    pass


class ContentParseError(AnalysisError):
    pass


class ResultValidationError(ContentParseError):
    pass
