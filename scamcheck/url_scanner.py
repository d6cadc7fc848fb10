# ---------------------------------------------------------
# URL Scanner: structural features only (no network)
# ---------------------------------------------------------

from __future__ import annotations

import re
from typing import Any, Dict

import idna

from .models import UrlFeatures
from .utils.url_utils import split_absolute_url

INVALID_URL = {"error": "Invalid URL format"}


# ---------------------------------------------------------
# TRUST LISTS
# ---------------------------------------------------------

TRUSTED_DOMAINS = (
    "google.com", "microsoft.com", "apple.com",
    "amazon.com", "paypal.com", "facebook.com",
)

SUSPICIOUS_TLDS = {
    "xyz", "top", "click", "link", "tk", "ml",
    "ga", "cf", "gq", "buzz", "work",
}


# ---------------------------------------------------------
# HELPERS
# ---------------------------------------------------------

def _ascii_host(host: str) -> str:
    """Punycode-encode unicode hostnames the way a browser URL parser does."""
    if all(ord(c) < 128 for c in host):
        return host
    return idna.encode(host, uts46=True).decode("ascii")


def is_trusted_domain(domain: str) -> bool:
    # suffix match: sub.google.com is trusted, so is notgoogle.com
    return any(domain.endswith(d) for d in TRUSTED_DOMAINS)


# ---------------------------------------------------------
# FEATURE EXTRACTION
# ---------------------------------------------------------

def extract_url_features(url: str) -> Dict[str, Any]:
    """Structural hints for a URL, or the INVALID_URL record. Never raises."""
    try:
        parts = split_absolute_url(url)
        domain = _ascii_host(parts.hostname)
    except (ValueError, idna.IDNAError):
        return dict(INVALID_URL)

    tld = domain.split(".")[-1]

    features = UrlFeatures(
        domain=domain,
        tld=tld,
        has_https=parts.scheme.lower() == "https",
        has_subdomain=len(domain.split(".")) > 2,
        path_length=len(parts.path or "/"),
        has_query_params=bool(parts.query),
        suspicious_tld=tld.lower() in SUSPICIOUS_TLDS,
        is_trusted_domain=is_trusted_domain(domain),
        domain_length=len(domain),
        has_numbers=bool(re.search(r"\d", domain)),
        has_hyphens="-" in domain,
    )
    return features.model_dump(by_alias=True)
