from __future__ import annotations

import re

from yommy.models import RawShareInput, ShareKind


# scheme "://" followed by unreserved / pct-encoded / sub-delims / gen-delims
_URL_RE = re.compile(r"https?://[\w\-._~:/?#\[\]@!$&'()*+,;=%]+")


def extract(raw: RawShareInput | None) -> str | None:
    if raw is None or not raw.value:
        return None
    if raw.kind == ShareKind.URL:
        return extract_from_url(raw.value)
    return extract_from_text(raw.value)


def extract_from_url(value: str | None) -> str | None:
    return value or None


def extract_from_text(text: str | None) -> str | None:
    """Return the leftmost http(s) URL in ``text``.

    Text without a URL but starting with "http" comes back unmodified. That
    fallback is over-broad and also accepts strings such as "httpnotaurl".
    """
    if not text:
        return None
    m = _URL_RE.search(text)
    if m:
        return m.group(0)
    if text.strip().startswith("http"):
        return text
    return None


def extract_urls(text: str | None) -> list[str]:
    """All distinct http(s) URLs in ``text``, in order of first appearance."""
    return list(dict.fromkeys(_URL_RE.findall(text or "")))
