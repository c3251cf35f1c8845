"""
schemas.py — Contratos de dados da disponibilidade semanal

Este módulo define os modelos (Pydantic) trocados entre:
1) o extrator de texto livre (extractor.py) e
2) quem consome o resultado (formulário de agendamento / fluxo do grafo).

Princípios:
- Horário é sempre "HH:MM" (24h). String vazia = não informado.
- Cada dia tem exatamente dois slots (slot1, slot2).
- O resultado do extrator é PARCIAL: só os dias mencionados no texto aparecem.
  Dia ausente significa "não mexer", diferente de dia presente com slots vazios.
  Quem consome faz merge raso por dia sobre uma semana completa (WeeklyAvailability).
"""

from __future__ import annotations

from typing import Dict, Literal

from pydantic import BaseModel, Field

from agendador.core.weekdays import Weekday

SlotName = Literal["slot1", "slot2"]
SlotField = Literal["start", "end"]


class TimeSlot(BaseModel):
    start: str = Field(default="", description="Início no formato HH:MM (24h). Vazio se não informado.")
    end: str = Field(default="", description="Fim no formato HH:MM (24h). Vazio se não informado.")

    def is_empty(self) -> bool:
        return not self.start and not self.end


class DailyAvailability(BaseModel):
    slot1: TimeSlot = Field(default_factory=TimeSlot, description="Primeira faixa do dia.")
    slot2: TimeSlot = Field(default_factory=TimeSlot, description="Segunda faixa do dia.")

    def is_empty(self) -> bool:
        return self.slot1.is_empty() and self.slot2.is_empty()


#--- Semana completa (lado do formulário): todos os dias sempre presentes
class WeeklyAvailability(BaseModel):
    monday: DailyAvailability = Field(default_factory=DailyAvailability)
    tuesday: DailyAvailability = Field(default_factory=DailyAvailability)
    wednesday: DailyAvailability = Field(default_factory=DailyAvailability)
    thursday: DailyAvailability = Field(default_factory=DailyAvailability)
    friday: DailyAvailability = Field(default_factory=DailyAvailability)
    saturday: DailyAvailability = Field(default_factory=DailyAvailability)
    sunday: DailyAvailability = Field(default_factory=DailyAvailability)

    def day(self, day: Weekday) -> DailyAvailability:
        return getattr(self, Weekday(day).value)


# Resultado do extrator: só os dias mencionados (ordem de inserção)
PartialWeeklyAvailability = Dict[Weekday, DailyAvailability]
