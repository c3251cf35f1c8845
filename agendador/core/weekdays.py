"""
weekdays.py — Vocabulário de dias da semana compartilhado entre módulos.

Fornece a ordem fixa da semana (segunda primeiro), a tabela de sinônimos
em português (nomes completos e abreviações) e os rótulos usados nas
mensagens de preview.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class Weekday(str, Enum):
    monday = "monday"
    tuesday = "tuesday"
    wednesday = "wednesday"
    thursday = "thursday"
    friday = "friday"
    saturday = "saturday"
    sunday = "sunday"


# Ordem do calendário, usada na expansão de intervalos ("de segunda a sexta")
DAY_ORDER: tuple[Weekday, ...] = tuple(Weekday)

DAY_SYNONYMS: Mapping[str, Weekday] = MappingProxyType({
    "segunda": Weekday.monday,
    "seg": Weekday.monday,
    "terça": Weekday.tuesday,
    "terca": Weekday.tuesday,
    "ter": Weekday.tuesday,
    "quarta": Weekday.wednesday,
    "qua": Weekday.wednesday,
    "quinta": Weekday.thursday,
    "qui": Weekday.thursday,
    "sexta": Weekday.friday,
    "sex": Weekday.friday,
    "sábado": Weekday.saturday,
    "sabado": Weekday.saturday,
    "sab": Weekday.saturday,
    "sáb": Weekday.saturday,
    "domingo": Weekday.sunday,
    "dom": Weekday.sunday,
})

DAY_LABELS: Mapping[Weekday, str] = MappingProxyType({
    Weekday.monday: "Segunda",
    Weekday.tuesday: "Terça",
    Weekday.wednesday: "Quarta",
    Weekday.thursday: "Quinta",
    Weekday.friday: "Sexta",
    Weekday.saturday: "Sábado",
    Weekday.sunday: "Domingo",
})

DAY_FULL_LABELS: Mapping[Weekday, str] = MappingProxyType({
    Weekday.monday: "Segunda-feira",
    Weekday.tuesday: "Terça-feira",
    Weekday.wednesday: "Quarta-feira",
    Weekday.thursday: "Quinta-feira",
    Weekday.friday: "Sexta-feira",
    Weekday.saturday: "Sábado",
    Weekday.sunday: "Domingo",
})


def resolve_day(token: str) -> Optional[Weekday]:
    """Converte um token ('seg', 'Terça', ...) em Weekday. None se não reconhecido."""
    return DAY_SYNONYMS.get(token.strip().lower())


def day_index(day: Weekday) -> int:
    return DAY_ORDER.index(day)


def days_between(start: Weekday, end: Weekday) -> list[Weekday]:
    """
    Dias do intervalo inclusivo [start, end] na ordem da semana.
    Intervalo invertido (ex: sexta → segunda) retorna lista vazia: não há "volta" na semana.
    """
    start_idx, end_idx = day_index(start), day_index(end)
    if start_idx > end_idx:
        return []
    return list(DAY_ORDER[start_idx:end_idx + 1])
