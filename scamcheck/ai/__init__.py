# scamcheck/ai/__init__.py

"""
Reasoning-service plumbing.

    build_request(item) -> AnalysisRequest
    send_request(request, config) -> RawReply
    normalize_reply(reply) -> str
    parse_result(text) -> AnalysisResult
"""

from .request_builder import AnalysisRequest, build_request
from .anthropic_client import RawReply, send_request
from .response_normalizer import normalize_reply
from .result_parser import parse_result
