# scamcheck/__init__.py

"""
Scam Check: scam-risk assessment of text, images and URLs by a remote
reasoning service.

Exposes:
    analyze(item, config) -> AnalysisResult
    analyze_text / analyze_image / analyze_url
"""

from .analyzer import analyze, analyze_image, analyze_text, analyze_url
from .config import ServiceConfig
from .errors import AnalysisError
from .models import AnalysisResult, ImageInput, TextInput, UrlInput
