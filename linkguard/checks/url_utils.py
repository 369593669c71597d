from __future__ import annotations

import re
from typing import Iterable
from urllib.parse import urlsplit

from .homoglyph import normalize_domain

SCOPE_LINKS = "links"
SCOPE_ALL_LINKS = "all-links"
SCOPES = (SCOPE_LINKS, SCOPE_ALL_LINKS)

TELEGRAM_HOSTS = frozenset({"t.me", "telegram.me", "telegram.org"})

URL_REGEX = re.compile(r"(https?://[^\s]+)", re.IGNORECASE)
DOMAIN_REGEX = re.compile(r"\b(?:[\w-]+\.)+[^\W\d_]{2,}(?:/[^\s]*)?", re.IGNORECASE)
TRAILING_PUNCT = ".,;:!?)]}>'\""


def decode_idn(host: str) -> str:
    if not host:
        return host
    try:
        if "xn--" in host:
            return host.encode("ascii").decode("idna")
        return host
    except UnicodeError:
        return host


def _with_scheme(href: str) -> str:
    href = href.strip()
    if "://" not in href:
        href = "https://" + href
    return href


def extract_domain(href: str) -> str:
    """Hostname of ``href`` as the analyzer expects it, or "" if unparsable.

    Punycode labels are decoded so that look-alike characters reach the
    homoglyph check in their visible form.
    """
    if not href or not href.strip():
        return ""
    try:
        host = urlsplit(_with_scheme(href)).hostname or ""
    except ValueError:
        return ""
    return normalize_domain(decode_idn(host))


def should_inspect(href: str, scope: str, origin_hosts: Iterable[str] = TELEGRAM_HOSTS) -> bool:
    if not href:
        return False
    try:
        parts = urlsplit(_with_scheme(href))
        host = (parts.hostname or "").lower()
    except ValueError:
        return False

    is_http = parts.scheme.lower() in {"http", "https"}
    if not is_http or not host:
        return False
    if scope == SCOPE_LINKS:
        return normalize_domain(host) not in {normalize_domain(h) for h in origin_hosts}
    return True


def _clean_url(value: str) -> str:
    return value.strip().rstrip(TRAILING_PUNCT)


def extract_links(text: str) -> list[str]:
    found: list[str] = []
    url_spans: list[tuple[int, int]] = []
    for match in URL_REGEX.finditer(text):
        url_spans.append(match.span())
        value = _clean_url(match.group())
        if value not in found:
            found.append(value)
    for match in DOMAIN_REGEX.finditer(text):
        if any(start <= match.start() < end for start, end in url_spans):
            continue
        value = _clean_url(match.group())
        if value not in found:
            found.append(value)
    return found
