from __future__ import annotations

from dataclasses import asdict, dataclass
import logging
import math
from typing import Any, Iterable, Sequence

from .checks.homoglyph import normalize_domain
from .checks.typosquat import (
    TYPO_DISTANCE_THRESHOLD,
    TYPO_MAX_DISTANCE,
    SimilarityResult,
    find_similarity,
)

DEFAULT_TRUSTED_DOMAINS = (
    "google.com",
    "facebook.com",
    "youtube.com",
    "twitter.com",
    "instagram.com",
    "linkedin.com",
    "microsoft.com",
    "apple.com",
    "amazon.com",
    "netflix.com",
    "github.com",
)

REASON_UNKNOWN = "Не удалось определить домен."
REASON_SAFE = "Домен найден в белом списке."
REASON_WARNING = "Домен не найден в белом списке. Проявите осторожность."


@dataclass(frozen=True)
class CheckItem:
    label: str
    value: str
    severity: str


@dataclass(frozen=True)
class TypoRisk:
    score: int
    severity: str
    matched: str


@dataclass(frozen=True)
class Verdict:
    status: str
    reason: str
    domain: str
    checks: tuple[CheckItem, ...]
    typo: TypoRisk

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["checks"] = list(data["checks"])
        return data


def trusted_domains(values: Iterable[str]) -> tuple[str, ...]:
    """Normalize and deduplicate trusted domains, keeping declaration order.

    The order matters: the similarity scan stops at the first close domain,
    so on ties the earlier entry is reported.
    """
    result: list[str] = []
    for value in values:
        domain = normalize_domain(value.strip())
        if domain and domain not in result:
            result.append(domain)
    return tuple(result)


def compute_typo_score(distance: int | None, max_distance: int = TYPO_MAX_DISTANCE) -> int:
    if distance is None:
        return 0
    clamped = min(distance, max_distance)
    normalized = 1 - clamped / max_distance
    return max(0, math.floor(normalized * 100 + 0.5))


def classify(
    domain: str,
    trusted: Sequence[str],
    distance_threshold: int = TYPO_DISTANCE_THRESHOLD,
    max_distance: int = TYPO_MAX_DISTANCE,
) -> tuple[str, str, bool, SimilarityResult]:
    if not domain:
        return "unknown", REASON_UNKNOWN, False, SimilarityResult(is_suspicious=False)

    if domain in trusted:
        return "safe", REASON_SAFE, True, SimilarityResult(is_suspicious=False)

    similarity = find_similarity(domain, trusted, distance_threshold, max_distance)
    if similarity.is_suspicious:
        return "danger", similarity.reason or REASON_WARNING, False, similarity
    return "warning", REASON_WARNING, False, similarity


def build_verdict(
    status: str,
    reason: str,
    domain: str,
    whitelist: bool,
    similarity: SimilarityResult,
    distance_threshold: int = TYPO_DISTANCE_THRESHOLD,
    max_distance: int = TYPO_MAX_DISTANCE,
) -> Verdict:
    suspicious = not whitelist and similarity.is_suspicious
    distance = None if whitelist else similarity.distance

    if suspicious:
        score = 100
    elif distance is not None:
        score = compute_typo_score(distance, max_distance)
    else:
        score = 0

    if suspicious:
        typo_severity = "danger"
    elif score >= 50:
        typo_severity = "warning"
    else:
        typo_severity = "safe"

    if whitelist:
        typo_value = "Рисков нет"
    elif distance is not None:
        typo_value = f"Расст. {distance}"
    else:
        typo_value = "Нет совпадений"

    if suspicious:
        typo_check_severity = "danger"
    elif distance is not None and distance <= distance_threshold:
        typo_check_severity = "warning"
    else:
        typo_check_severity = "muted"

    checks = (
        CheckItem(
            label="Проверка по белому списку",
            value="Доверенный" if whitelist else "Не найден",
            severity="success" if whitelist else "warning",
        ),
        CheckItem(
            label="Анализ угроз",
            value="Есть риск" if status == "danger" else "Угроз не найдено",
            severity="danger" if status == "danger" else "success",
        ),
        CheckItem(
            label="Риск тайпсквотинга",
            value=typo_value,
            severity=typo_check_severity,
        ),
    )

    matched = ""
    if not whitelist and similarity.matched_domain:
        matched = similarity.matched_domain

    return Verdict(
        status=status,
        reason=reason,
        domain=domain,
        checks=checks,
        typo=TypoRisk(score=score, severity=typo_severity, matched=matched),
    )


def analyze_domain(
    raw_domain: str | None,
    trusted: Sequence[str],
    distance_threshold: int = TYPO_DISTANCE_THRESHOLD,
    max_distance: int = TYPO_MAX_DISTANCE,
) -> Verdict:
    """Classify one hostname against the trusted domains.

    ``trusted`` is expected to be normalized already (see ``trusted_domains``).
    Never raises for string input; an empty hostname yields ``unknown``.
    """
    domain = normalize_domain(raw_domain)
    status, reason, whitelist, similarity = classify(domain, trusted, distance_threshold, max_distance)
    logging.debug("Domain %r classified as %s", domain, status)
    return build_verdict(
        status,
        reason,
        domain,
        whitelist,
        similarity,
        distance_threshold=distance_threshold,
        max_distance=max_distance,
    )
