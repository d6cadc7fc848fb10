"""Tests for url_scanner.extract_url_features: structural hints only, never raises."""
import pytest

from scamcheck.url_scanner import extract_url_features, is_trusted_domain


# ── Suspicious TLDs ───────────────────────────────────────────────

@pytest.mark.parametrize("url", [
    "https://paypal-secure.xyz/login",
    "http://win-a-prize.click",
    "https://bank.top/?id=1",
    "https://EXAMPLE.TK",
])
def test_suspicious_tld_flagged(url):
    assert extract_url_features(url)["suspiciousTLD"] is True


def test_dot_com_not_suspicious():
    features = extract_url_features("https://example.com")
    assert features["tld"] == "com"
    assert features["suspiciousTLD"] is False


# ── Trusted domains (suffix match) ────────────────────────────────

def test_subdomain_of_trusted_domain_is_trusted():
    assert extract_url_features("https://accounts.google.com/signin")["isTrustedDomain"] is True


def test_lookalike_with_hyphen_is_not_trusted():
    assert extract_url_features("https://google.com-verify.net")["isTrustedDomain"] is False


def test_suffix_check_is_loose():
    # known imprecision: only the suffix is compared
    assert is_trusted_domain("notpaypal.com") is True
    assert is_trusted_domain("evil-google.co") is False


# ── Full feature record ───────────────────────────────────────────

def test_feature_record_shape():
    features = extract_url_features("http://secure-login2.bank.example.xyz/a/b?token=1")
    assert features == {
        "domain": "secure-login2.bank.example.xyz",
        "tld": "xyz",
        "hasHttps": False,
        "hasSubdomain": True,
        "pathLength": 4,
        "hasQueryParams": True,
        "suspiciousTLD": True,
        "isTrustedDomain": False,
        "domainLength": len("secure-login2.bank.example.xyz"),
        "hasNumbers": True,
        "hasHyphens": True,
    }


def test_bare_host_reports_root_path():
    features = extract_url_features("https://example.com")
    assert features["pathLength"] == 1
    assert features["hasQueryParams"] is False
    assert features["hasSubdomain"] is False
    assert features["hasHttps"] is True


def test_hostname_is_lowercased():
    assert extract_url_features("https://WWW.Example.COM/")["domain"] == "www.example.com"


def test_unicode_hostname_punycoded():
    features = extract_url_features("https://bücher.example/")
    assert features["domain"] == "xn--bcher-kva.example"


# ── Malformed input ───────────────────────────────────────────────

@pytest.mark.parametrize("url", [
    "",
    "not a url",
    "example.com",
    "https://",
    "http://[::1",
    "https://exa mple.com",
    "http://a.com:notaport/",
    "http://a.com:99999/",
    "https://a<b>.com/",
])
def test_malformed_url_returns_error_record(url):
    assert extract_url_features(url) == {"error": "Invalid URL format"}


def test_explicit_port_and_underscore_host_accepted():
    features = extract_url_features("https://my_site.example.com:8443/x")
    assert features["domain"] == "my_site.example.com"
    assert features["pathLength"] == 2
