"""HTML cards for domain verdicts."""

from __future__ import annotations

from html import escape

from ..risk_engine import TypoRisk, Verdict

METER_CELLS = 10

STATUS_LABELS = {
    "safe": "Безопасно",
    "warning": "Внимание",
    "danger": "Опасно",
}

STATUS_EMOJI = {
    "safe": "✅",
    "warning": "⚠️",
    "danger": "\U0001F6A8",
}

SEVERITY_MARKS = {
    "success": "\U0001F7E2",
    "warning": "\U0001F7E1",
    "danger": "\U0001F534",
    "muted": "⚪",
}


def status_label(status: str) -> str:
    return STATUS_LABELS.get(status, "Неизвестно")


def status_emoji(status: str) -> str:
    return STATUS_EMOJI.get(status, "❔")


def typo_caption(typo: TypoRisk) -> str:
    if typo.severity == "danger":
        return f"Высокий риск: похоже на {typo.matched}" if typo.matched else "Высокий риск тайпсквотинга"
    if typo.severity == "warning":
        return f"Возможна подмена: {typo.matched}" if typo.matched else "Обнаружено сходство с доверенными доменами"
    return "Риск не обнаружен"


def typo_meter(score: int) -> str:
    score = min(100, max(score, 0))
    filled = (score * METER_CELLS + 50) // 100
    return "█" * filled + "░" * (METER_CELLS - filled) + f" {score}/100"


def render_verdict(verdict: Verdict, preset: str = "full") -> str:
    """Render a verdict as Telegram HTML.

    ``minimal`` shows only the status, domain and reason; ``balanced`` adds
    the checks and a one-line typosquatting note; ``full`` adds the meter and
    a footer.
    """
    show_details = preset != "minimal"
    show_meter = preset == "full"

    lines = [
        f"{status_emoji(verdict.status)} <b>{escape(status_label(verdict.status))}</b>",
        f"<code>{escape(verdict.domain or '-')}</code>",
        escape(verdict.reason or "Проверяем ссылку..."),
    ]

    if show_details and verdict.checks:
        lines.append("")
        lines.append("<b>Детали анализа</b>")
        for check in verdict.checks:
            mark = SEVERITY_MARKS.get(check.severity, SEVERITY_MARKS["muted"])
            lines.append(f"{mark} {escape(check.label)}: {escape(check.value)}")

    if show_meter:
        lines.append("")
        lines.append("<b>Риск тайпсквотинга</b>")
        lines.append(typo_meter(verdict.typo.score))
        lines.append(escape(typo_caption(verdict.typo)))
        lines.append("")
        lines.append("<i>Пожаловаться на эту ссылку</i>")
    elif preset == "balanced":
        lines.append("")
        lines.append(f"<i>{escape(typo_caption(verdict.typo))}</i>")

    return "\n".join(lines)
