from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .homoglyph import strip_homoglyphs

TYPO_DISTANCE_THRESHOLD = 2
TYPO_MAX_DISTANCE = 6
MAX_COMPARE_LENGTH = 253


@dataclass(frozen=True)
class SimilarityResult:
    is_suspicious: bool
    distance: int | None = None
    matched_domain: str | None = None
    reason: str | None = None


def levenshtein(a: str, b: str) -> int:
    prev_row = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        row = [i] + [0] * len(b)
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            row[j] = min(
                prev_row[j] + 1,
                row[j - 1] + 1,
                prev_row[j - 1] + cost,
            )
        prev_row = row
    return prev_row[-1]


def find_similarity(
    domain: str,
    trusted_domains: Iterable[str],
    distance_threshold: int = TYPO_DISTANCE_THRESHOLD,
    max_distance: int = TYPO_MAX_DISTANCE,
) -> SimilarityResult:
    """Scan trusted domains in order and stop at the first close match.

    A domain is close when it is within ``distance_threshold`` edits or when
    both sides fold to the same homoglyph skeleton. Without a close match the
    nearest domain seen is reported, with its distance only when it does not
    exceed ``max_distance``.
    """
    candidate = domain[:MAX_COMPARE_LENGTH]
    folded = strip_homoglyphs(candidate)
    best_distance: int | None = None
    closest_domain: str | None = None

    for safe in trusted_domains:
        distance = levenshtein(candidate, safe)
        if best_distance is None or distance < best_distance:
            best_distance = distance
            closest_domain = safe
        if distance <= distance_threshold:
            return SimilarityResult(
                is_suspicious=True,
                distance=distance,
                matched_domain=safe,
                reason=f"Подозрительно похоже на {safe} (расстояние {distance}).",
            )
        if folded == strip_homoglyphs(safe):
            return SimilarityResult(
                is_suspicious=True,
                distance=distance,
                matched_domain=safe,
                reason=f"Возможен омоглиф: выглядит как {safe}.",
            )

    if best_distance is None:
        return SimilarityResult(is_suspicious=False)

    return SimilarityResult(
        is_suspicious=False,
        distance=best_distance if best_distance <= max_distance else None,
        matched_domain=closest_domain,
    )
