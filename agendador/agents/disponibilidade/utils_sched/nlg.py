"""
nlg.py — Textos de preview da disponibilidade.

Monta as linhas mostradas ao usuário: o que foi detectado no texto
(antes de aplicar) e a semana completa (depois de aplicar).
Sem LLM: o texto é sempre o mesmo para a mesma disponibilidade.
"""
from __future__ import annotations

from typing import Optional

from agendador.core.weekdays import DAY_FULL_LABELS, DAY_LABELS, DAY_ORDER
from agendador.agents.disponibilidade.utils_sched.schemas import (
    DailyAvailability,
    PartialWeeklyAvailability,
    TimeSlot,
    WeeklyAvailability,
)


def format_slot(start: Optional[str], end: Optional[str]) -> Optional[str]:
    if not start and not end:
        return None
    if start and not end:
        return f"{start} em diante"
    if not start and end:
        return f"Até {end}"
    return f"{start} às {end}"


def _format_daily(daily: DailyAvailability) -> Optional[str]:
    parts = [
        text for text in (_format_time_slot(daily.slot1), _format_time_slot(daily.slot2))
        if text
    ]
    return " | ".join(parts) if parts else None


def _format_time_slot(slot: TimeSlot) -> Optional[str]:
    return format_slot(slot.start, slot.end)


def describe_detected(partial: PartialWeeklyAvailability) -> str:
    """Linhas do que foi detectado (só dias presentes), na ordem da semana."""
    lines = []
    for day in DAY_ORDER:
        if day not in partial:
            continue
        lines.append(f"{DAY_LABELS[day]}: {_format_daily(partial[day]) or 'Livre'}")
    return "\n".join(lines)


def describe_week(week: WeeklyAvailability) -> str:
    """Semana completa, um dia por linha; dia sem horário -> Indisponível."""
    return "\n".join(
        f"{DAY_FULL_LABELS[day]}: {_format_daily(week.day(day)) or 'Indisponível'}"
        for day in DAY_ORDER
    )
