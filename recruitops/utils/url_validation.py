"""URL checks for links stored on records (JD files, resumes)."""

from __future__ import annotations

from urllib.parse import urlsplit

ALLOWED_SCHEMES = ("http", "https")


def is_http_url(value: str) -> bool:
    """True when value parses as an absolute http:// or https:// URL with a host."""
    if not value or not value.strip():
        return False

    try:
        parsed = urlsplit(value.strip())
        host = parsed.hostname
    except ValueError:
        return False

    return parsed.scheme.lower() in ALLOWED_SCHEMES and bool(host)
