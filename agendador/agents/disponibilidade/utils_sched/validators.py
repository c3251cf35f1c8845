"""
validators.py — Regras determinísticas sobre a disponibilidade montada

O extrator é "best effort" e não valida nada: "das 23 as 20" vira slot 23:00 -> 20:00.
Quem consome (formulário, fluxo do grafo) usa este módulo antes de aceitar a semana.

Regras:
- horário preenchido deve estar em HH:MM (24h) e ser válido.
- se início e fim estão preenchidos, fim deve ser depois do início.
- slot só com início ("20:00 em diante") ou só com fim ("Até 23:00") é aceito.

O que este módulo NÃO faz:
- Não interpreta texto.
- Não altera a semana.
Ele apenas retorna um resultado de validação (ok/erro) com código estável.
"""


from __future__ import annotations
from typing import Optional
from pydantic import BaseModel
import datetime as dt
import re

from agendador.core.weekdays import DAY_ORDER
from agendador.agents.disponibilidade.utils_sched.schemas import TimeSlot, WeeklyAvailability

_HHMM_RE = re.compile(r"^[0-9]{2}:[0-9]{2}$")


class ValidationResult(BaseModel):
    ok: bool
    error: Optional[str] = None
    day: Optional[str] = None
    slot: Optional[str] = None


def is_iso_time_hhmm(s: str) -> bool:
    if not isinstance(s, str) or not _HHMM_RE.match(s):
        return False
    try:
        dt.time.fromisoformat(s)
        return True
    except ValueError:
        return False


def validate_slot(slot: TimeSlot) -> ValidationResult:
    for value in (slot.start, slot.end):
        if value and not is_iso_time_hhmm(value):
            return ValidationResult(ok=False, error="invalid_time_format")

    if slot.start and slot.end and slot.end <= slot.start:
        return ValidationResult(ok=False, error="end_before_start")

    return ValidationResult(ok=True)


def validate_week(week: WeeklyAvailability) -> ValidationResult:
    """Primeiro erro encontrado (na ordem da semana, slot1 antes de slot2)."""
    for day in DAY_ORDER:
        daily = week.day(day)
        for name in ("slot1", "slot2"):
            res = validate_slot(getattr(daily, name))
            if not res.ok:
                return ValidationResult(ok=False, error=res.error, day=day.value, slot=name)
    return ValidationResult(ok=True)
