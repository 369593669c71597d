from __future__ import annotations

from aiogram.types import InlineKeyboardButton, InlineKeyboardMarkup

SCOPE_LABELS = {
    "links": "Только внешние ссылки",
    "all-links": "Все ссылки",
}

UI_PRESET_LABELS = {
    "minimal": "Минималистичный вид",
    "balanced": "Стандартный вид",
    "full": "Полная панель",
}


def _option_row(kind: str, value: str, label: str, current: str) -> list[InlineKeyboardButton]:
    text = f"• {label}" if value == current else label
    return [InlineKeyboardButton(text=text, callback_data=f"pref:{kind}:{value}")]


def settings_keyboard(scope: str, ui_preset: str) -> InlineKeyboardMarkup:
    buttons = [_option_row("scope", value, label, scope) for value, label in SCOPE_LABELS.items()]
    buttons += [_option_row("view", value, label, ui_preset) for value, label in UI_PRESET_LABELS.items()]
    return InlineKeyboardMarkup(inline_keyboard=buttons)
