from __future__ import annotations

import re
import unicodedata

COMBINING_MARKS = re.compile("[\u0300-\u036f]")
NON_ASCII = re.compile(r"[^\x00-\x7f]")


def normalize_domain(domain: str | None) -> str:
    if not domain:
        return ""
    domain = domain.lower()
    if domain.startswith("www."):
        return domain[4:]
    return domain


def strip_homoglyphs(value: str) -> str:
    """Fold a hostname to its bare ASCII skeleton.

    Marks that NFKD splits off (``é`` -> ``e`` + U+0301) are removed, then
    every code point outside 7-bit ASCII is dropped. Look-alikes with no
    compatibility decomposition, like Cyrillic ``а``, are dropped instead of
    being mapped to their Latin twin.
    """
    decomposed = unicodedata.normalize("NFKD", value)
    return NON_ASCII.sub("", COMBINING_MARKS.sub("", decomposed))
