"""
availability.py — Operações do lado do formulário sobre a semana completa.

Chamado pelos nós do subgrafo (nodes.py) e por quem consome o extrator.

O que faz:
- cria a semana vazia (todos os dias, slots vazios)
- faz o merge raso do resultado parcial do extrator sobre a semana atual
  (dia presente no parcial substitui o dia inteiro; dia ausente fica intocado)
- edita um campo de um slot, limpando o fim quando o novo início passa dele
- converte o resultado parcial de/para dict (estado do grafo é JSON puro)

O que NÃO faz:
- Não interpreta texto (extractor.py).
- Não valida formato/ordem dos horários (validators.py).
"""
from __future__ import annotations

from typing import Any, Dict

from agendador.core.weekdays import DAY_ORDER, Weekday
from agendador.agents.disponibilidade.utils_sched.schemas import (
    DailyAvailability,
    PartialWeeklyAvailability,
    SlotField,
    SlotName,
    WeeklyAvailability,
)

SLOT_NAMES = ("slot1", "slot2")
SLOT_FIELDS = ("start", "end")


def empty_week() -> WeeklyAvailability:
    return WeeklyAvailability()


def merge_availability(base: WeeklyAvailability, partial: PartialWeeklyAvailability) -> WeeklyAvailability:
    """
    Merge raso por dia: devolve uma nova semana. `base` não é alterada.
    Aplicar o mesmo parcial duas vezes dá o mesmo resultado que aplicar uma vez.
    """
    update = {Weekday(day).value: daily.model_copy(deep=True) for day, daily in partial.items()}
    return base.model_copy(deep=True, update=update)


def update_slot(
    week: WeeklyAvailability,
    day: Weekday | str,
    slot: SlotName,
    field: SlotField,
    value: str,
) -> WeeklyAvailability:
    """
    Altera um campo (start/end) de um slot de um dia e devolve nova semana.

    Regra do formulário: ao mudar o início para um horário >= fim atual,
    o fim é limpo (o usuário escolhe de novo).

    Raises:
        ValueError: dia, slot ou campo desconhecido.
    """
    day = Weekday(day)
    if slot not in SLOT_NAMES:
        raise ValueError(f"Slot inválido: {slot}")
    if field not in SLOT_FIELDS:
        raise ValueError(f"Campo inválido: {field}")

    new_week = week.model_copy(deep=True)
    target = getattr(new_week.day(day), slot)
    setattr(target, field, value)

    if field == "start" and target.end and value and value >= target.end:
        target.end = ""
    return new_week


def partial_to_dict(partial: PartialWeeklyAvailability) -> Dict[str, Any]:
    """{Weekday: DailyAvailability} -> {"monday": {"slot1": {...}, "slot2": {...}}} em ordem da semana."""
    return {
        day.value: partial[day].model_dump()
        for day in DAY_ORDER
        if day in partial
    }


def partial_from_dict(data: Dict[str, Any] | None) -> PartialWeeklyAvailability:
    if not data:
        return {}
    return {Weekday(day): DailyAvailability.model_validate(daily) for day, daily in data.items()}


def week_from_dict(data: Dict[str, Any] | None) -> WeeklyAvailability:
    if not data:
        return empty_week()
    return WeeklyAvailability.model_validate(data)
