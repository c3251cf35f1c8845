"""
extractor.py — Camada única de extração de horários a partir de texto livre

Este módulo é o "único lugar" onde o texto do usuário vira estrutura:
  "Segunda e Terça das 20h às 23h, Sexta livre"  ->  {Weekday.tuesday: DailyAvailability(...)}

Objetivo:
- Transformar texto livre -> PartialWeeklyAvailability (Pydantic) de forma determinística.
- Sem LLM: o vocabulário é fixo (dias em português + "das ... às ...").

Como funciona:
- tokeniza o texto (lexer.py)
- aplica as regras na ordem fixa range -> single_day -> continuation (rules.py)
- cada regra varre o texto inteiro e escreve no mesmo resultado

O que este módulo NÃO faz:
- Não valida regra de negócio (ex: fim depois do início) -> validators.py.
- Não faz merge com a semana existente -> availability.py.
- Não lança exceção: o que não for entendido simplesmente não aparece no resultado.
"""

from __future__ import annotations

import logging

from agendador.agents.disponibilidade.utils_sched.lexer import tokenize
from agendador.agents.disponibilidade.utils_sched.rules import RULES, run_rule
from agendador.agents.disponibilidade.utils_sched.schemas import PartialWeeklyAvailability

logger = logging.getLogger(__name__)


def extract_schedule(text: str) -> PartialWeeklyAvailability:
    """
    Extrai a disponibilidade semanal (parcial) de um texto em português.

    Só os dias mencionados aparecem como chave. Texto vazio, só espaços
    ou sem nenhuma frase reconhecida -> dict vazio.
    """
    result: PartialWeeklyAvailability = {}
    if not isinstance(text, str) or not text.strip():
        return result

    tokens = tokenize(text)
    for rule in RULES:
        run_rule(rule, tokens, result)

    logger.debug("extract_schedule: %d dia(s) detectado(s) em %r", len(result), text)
    return result
