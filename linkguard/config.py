from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
import os

from dotenv import load_dotenv

from .checks.typosquat import TYPO_DISTANCE_THRESHOLD, TYPO_MAX_DISTANCE
from .checks.url_utils import SCOPE_LINKS, SCOPES
from .risk_engine import DEFAULT_TRUSTED_DOMAINS, trusted_domains

UI_PRESETS = ("minimal", "balanced", "full")
DEFAULT_UI_PRESET = "full"


@dataclass(frozen=True)
class Settings:
    bot_token: str
    trusted_domains: tuple[str, ...]
    typo_distance_threshold: int
    typo_max_distance: int
    default_scope: str
    default_ui_preset: str


def _load_env() -> None:
    root = Path(__file__).resolve().parents[1]
    load_dotenv(root / ".env")


def _parse_domains(raw: str) -> tuple[str, ...]:
    return trusted_domains(part for part in raw.split(",") if part.strip())


def _parse_positive_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        value = 0
    if value <= 0:
        logging.warning("%s=%r is not a positive integer, using %d", name, raw, default)
        return default
    return value


def _parse_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    value = os.getenv(name, default).strip().lower()
    if value not in choices:
        logging.warning("%s=%r is not one of %s, using %s", name, value, ", ".join(choices), default)
        return default
    return value


def get_settings() -> Settings:
    _load_env()
    token = os.getenv("BOT_TOKEN", "").strip()
    if not token:
        raise RuntimeError("BOT_TOKEN is missing. Create .env and set BOT_TOKEN.")

    raw_domains = os.getenv("TRUSTED_DOMAINS", "").strip()
    domains = _parse_domains(raw_domains) if raw_domains else DEFAULT_TRUSTED_DOMAINS

    threshold = _parse_positive_int("TYPO_DISTANCE_THRESHOLD", TYPO_DISTANCE_THRESHOLD)
    max_distance = _parse_positive_int("TYPO_MAX_DISTANCE", TYPO_MAX_DISTANCE)
    if threshold > max_distance:
        logging.warning(
            "TYPO_DISTANCE_THRESHOLD=%d exceeds TYPO_MAX_DISTANCE=%d, using %d/%d",
            threshold,
            max_distance,
            TYPO_DISTANCE_THRESHOLD,
            TYPO_MAX_DISTANCE,
        )
        threshold, max_distance = TYPO_DISTANCE_THRESHOLD, TYPO_MAX_DISTANCE

    return Settings(
        bot_token=token,
        trusted_domains=domains,
        typo_distance_threshold=threshold,
        typo_max_distance=max_distance,
        default_scope=_parse_choice("DEFAULT_SCOPE", SCOPES, SCOPE_LINKS),
        default_ui_preset=_parse_choice("DEFAULT_UI_PRESET", UI_PRESETS, DEFAULT_UI_PRESET),
    )
