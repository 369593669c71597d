from __future__ import annotations

import logging

from aiogram import F, Router
from aiogram.filters import Command, CommandObject
from aiogram.types import CallbackQuery, Message

from ..checks import url_utils
from ..config import UI_PRESETS, get_settings
from ..risk_engine import analyze_domain
from .formatters import render_verdict
from .keyboards import SCOPE_LABELS, UI_PRESET_LABELS, settings_keyboard
from .preferences_store import get_preferences, set_scope, set_ui_preset

router = Router()
settings = get_settings()

MAX_AUTO_URLS = 3


async def _user_preferences(user_id: int) -> tuple[str, str]:
    prefs = await get_preferences(user_id)
    return prefs.resolve(settings.default_scope, settings.default_ui_preset)


async def _send_verdict(message: Message, href: str, ui_preset: str) -> None:
    domain = url_utils.extract_domain(href)
    logging.info("Checking domain: %s", domain or href)
    try:
        verdict = analyze_domain(
            domain,
            settings.trusted_domains,
            distance_threshold=settings.typo_distance_threshold,
            max_distance=settings.typo_max_distance,
        )
    except Exception:
        logging.exception("Check failed")
        await message.answer("Не удалось проверить ссылку.")
        return
    await message.answer(render_verdict(verdict, ui_preset))


@router.message(Command("start"))
async def cmd_start(message: Message) -> None:
    text = (
        "LinkGuard предупреждает о ссылках, которые выдают себя за известные сайты.\n"
        "Отправь ссылку или используй /check. Домен сравнивается с белым списком, "
        "ищутся опечатки и омоглифы.\n"
        "Настройки: /settings"
    )
    await message.answer(text)


@router.message(Command("help"))
async def cmd_help(message: Message) -> None:
    text = (
        "Команды:\n"
        "/start - кратко о боте\n"
        "/help - список команд\n"
        "/check URL - проверка домена ссылки\n"
        "/scope links|all-links - какие ссылки проверять автоматически\n"
        "/view minimal|balanced|full - подробность ответа\n"
        "/settings - настройки кнопками"
    )
    await message.answer(text)


@router.message(Command("check"))
async def cmd_check(message: Message, command: CommandObject) -> None:
    if message.from_user is None:
        return
    if not command.args:
        await message.answer("Использование: /check URL\nПример: /check https://github.com")
        return
    _, ui_preset = await _user_preferences(message.from_user.id)
    await _send_verdict(message, command.args.strip(), ui_preset)


@router.message(Command("scope"))
async def cmd_scope(message: Message, command: CommandObject) -> None:
    if message.from_user is None:
        return
    arg = (command.args or "").strip().lower()
    if not arg:
        scope, _ = await _user_preferences(message.from_user.id)
        await message.answer(f"Текущий режим: {SCOPE_LABELS[scope]}. Используй /scope links|all-links")
        return
    if arg not in url_utils.SCOPES:
        await message.answer("Допустимые значения: " + ", ".join(url_utils.SCOPES))
        return
    await set_scope(message.from_user.id, arg)
    await message.answer(f"{SCOPE_LABELS[arg]} (активно)")


@router.message(Command("view"))
async def cmd_view(message: Message, command: CommandObject) -> None:
    if message.from_user is None:
        return
    arg = (command.args or "").strip().lower()
    if not arg:
        _, ui_preset = await _user_preferences(message.from_user.id)
        await message.answer(f"Текущий вид: {UI_PRESET_LABELS[ui_preset]}. Используй /view minimal|balanced|full")
        return
    if arg not in UI_PRESETS:
        await message.answer("Допустимые значения: " + ", ".join(UI_PRESETS))
        return
    await set_ui_preset(message.from_user.id, arg)
    await message.answer(f"{UI_PRESET_LABELS[arg]} (активно)")


@router.message(Command("settings"))
async def cmd_settings(message: Message) -> None:
    if message.from_user is None:
        return
    scope, ui_preset = await _user_preferences(message.from_user.id)
    await message.answer("Настройки LinkGuard:", reply_markup=settings_keyboard(scope, ui_preset))


@router.callback_query(F.data.startswith("pref:"))
async def preference_chosen(callback: CallbackQuery) -> None:
    try:
        _, kind, value = callback.data.split(":")
    except ValueError:
        await callback.answer("Некорректные данные.", show_alert=True)
        return

    try:
        if kind == "scope" and value in url_utils.SCOPES:
            await set_scope(callback.from_user.id, value)
            label = SCOPE_LABELS[value]
        elif kind == "view" and value in UI_PRESETS:
            await set_ui_preset(callback.from_user.id, value)
            label = UI_PRESET_LABELS[value]
        else:
            await callback.answer("Некорректные данные.", show_alert=True)
            return
    except Exception:
        logging.exception("Failed to save preference")
        await callback.answer("Не удалось сохранить", show_alert=True)
        return

    scope, ui_preset = await _user_preferences(callback.from_user.id)
    await callback.answer(f"{label} (активно)")
    if callback.message:
        await callback.message.edit_reply_markup(reply_markup=settings_keyboard(scope, ui_preset))


@router.message(F.text)
async def auto_check(message: Message) -> None:
    if not message.text or message.text.startswith("/") or message.from_user is None:
        return

    scope, ui_preset = await _user_preferences(message.from_user.id)
    links = [
        link
        for link in url_utils.extract_links(message.text)
        if url_utils.should_inspect(link, scope)
    ]
    if not links:
        return

    if len(links) > MAX_AUTO_URLS:
        await message.answer("Нашел много ссылок, проверю первые три.")
    for href in links[:MAX_AUTO_URLS]:
        await _send_verdict(message, href, ui_preset)
