# scamcheck/utils/url_utils.py

from __future__ import annotations

from urllib.parse import SplitResult, urlsplit

# characters a browser URL parser refuses inside a domain host
FORBIDDEN_HOST_CHARS = set(" #%/:<>?@[\\]^|")


def _bad_host_char(c: str) -> bool:
    return c in FORBIDDEN_HOST_CHARS or ord(c) < 0x20 or ord(c) == 0x7F


def split_absolute_url(url: str) -> SplitResult:
    """urlsplit() that raises ValueError unless the URL has a scheme, a clean host and a valid port."""
    parts = urlsplit(url.strip())
    host = parts.hostname or ""
    if not parts.scheme or not host:
        raise ValueError("URL needs a scheme and a host")

    # non-numeric or out-of-range ports raise here
    parts.port

    if "[" in parts.netloc:
        # bracketed IPv6 literal, already checked by urlsplit
        return parts
    if any(_bad_host_char(c) for c in host):
        raise ValueError(f"Invalid character in host {host!r}")
    return parts
