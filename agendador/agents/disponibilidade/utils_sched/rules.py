"""
rules.py — Regras de extração (tabela ordenada) sobre os tokens do lexer.

Três regras, sempre nesta ordem (RULES):
  1) range:        "de <dia> a <dia> das H1 às H2"  -> slot1 de todos os dias do intervalo
  2) single_day:   "<dia> das H1 às H2"             -> slot1 (se vazio) senão slot2
  3) continuation: "e das H1 às H2"                 -> slot2 do último dia citado antes

Cada regra varre a lista de tokens inteira, da esquerda para a direita, sem
sobreposição entre os próprios matches, e escreve no mesmo resultado parcial.
Regras posteriores podem sobrescrever o que as anteriores escreveram.

Observação:
- "single_day" também casa com o trecho final de uma frase de intervalo
  ("... a quarta das 20 as 23"). Como roda depois de "range", o último dia
  do intervalo recebe a mesma faixa também no slot2.
- Nenhuma regra lança exceção: o que não é reconhecido é ignorado (log em DEBUG).
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator, NamedTuple, Optional

from pydantic import BaseModel

from agendador.core.weekdays import Weekday, days_between, resolve_day
from agendador.agents.disponibilidade.utils_sched.lexer import Token, format_time
from agendador.agents.disponibilidade.utils_sched.schemas import (
    DailyAvailability,
    PartialWeeklyAvailability,
    TimeSlot,
)

logger = logging.getLogger(__name__)

# Separadores aceitos entre início e fim (tolera falta de acento)
SEPARATORS = frozenset({"às", "as", "a"})


class RuleMatch(BaseModel):
    rule: str
    start: int                  # índice do primeiro token do match
    end: int                    # índice logo após o último token
    position: int               # posição (caractere) do início do match no texto
    days: tuple[str, ...] = ()  # tokens de dia como escritos no texto
    slot: TimeSlot


# -------------------------
# Helpers de casamento
# -------------------------

def _is_word(tokens: list[Token], i: int, text: str, *, spaced: bool = True) -> bool:
    if i >= len(tokens):
        return False
    tok = tokens[i]
    return tok.kind == "word" and tok.text == text and (tok.spaced or not spaced)


def _ends_with(tokens: list[Token], i: int, suffix: str) -> bool:
    """Conectivo colado no fim de uma palavra também vale ('desde' -> 'de', 'noite' -> 'e')."""
    if i >= len(tokens):
        return False
    tok = tokens[i]
    return tok.kind in ("word", "day") and tok.text.endswith(suffix)


def _is_name(tokens: list[Token], i: int) -> bool:
    """Qualquer palavra serve como candidata a dia; a resolução vem depois."""
    return i < len(tokens) and tokens[i].kind in ("day", "word") and tokens[i].spaced


def _match_time_range(tokens: list[Token], i: int) -> Optional[tuple[TimeSlot, int]]:
    """Casa 'H1 (às|as|a) H2' a partir de tokens[i] (que precisa vir após espaço)."""
    if i + 2 >= len(tokens):
        return None
    start, sep, end = tokens[i], tokens[i + 1], tokens[i + 2]
    if start.kind != "time" or not start.spaced:
        return None
    if sep.kind != "word" or sep.text not in SEPARATORS:
        return None
    if end.kind != "time":
        return None
    slot = TimeSlot(start=format_time(start.hour, start.minute), end=format_time(end.hour, end.minute))
    return slot, i + 3


# -------------------------
# Matchers
# -------------------------

def match_range(tokens: list[Token], i: int) -> Optional[RuleMatch]:
    if not _ends_with(tokens, i, "de"):
        return None
    if not (_is_name(tokens, i + 1) and _is_word(tokens, i + 2, "a")
            and _is_name(tokens, i + 3) and _is_word(tokens, i + 4, "das")):
        return None
    times = _match_time_range(tokens, i + 5)
    if times is None:
        return None
    slot, end = times
    return RuleMatch(
        rule="range", start=i, end=end, position=tokens[i].start,
        days=(tokens[i + 1].text, tokens[i + 3].text), slot=slot,
    )


def match_single_day(tokens: list[Token], i: int) -> Optional[RuleMatch]:
    if i >= len(tokens) or tokens[i].kind != "day":
        return None
    if not _is_word(tokens, i + 1, "das"):
        return None
    times = _match_time_range(tokens, i + 2)
    if times is None:
        return None
    slot, end = times
    return RuleMatch(
        rule="single_day", start=i, end=end, position=tokens[i].start,
        days=(tokens[i].text,), slot=slot,
    )


def match_continuation(tokens: list[Token], i: int) -> Optional[RuleMatch]:
    if not _ends_with(tokens, i, "e"):
        return None
    if not _is_word(tokens, i + 1, "das"):
        return None
    times = _match_time_range(tokens, i + 2)
    if times is None:
        return None
    slot, end = times
    return RuleMatch(rule="continuation", start=i, end=end, position=tokens[i].start, slot=slot)


# -------------------------
# Aplicação no resultado parcial
# -------------------------

def _day_entry(result: PartialWeeklyAvailability, day: Weekday) -> DailyAvailability:
    if day not in result:
        result[day] = DailyAvailability()
    return result[day]


def apply_range(result: PartialWeeklyAvailability, match: RuleMatch, tokens: list[Token]) -> None:
    first, last = (resolve_day(d) for d in match.days)
    if first is None or last is None:
        logger.debug("range ignorado (dia desconhecido): %s", match.days)
        return
    days = days_between(first, last)
    if not days:
        logger.debug("range ignorado (intervalo invertido): %s", match.days)
        return
    for day in days:
        _day_entry(result, day).slot1 = match.slot.model_copy()


def apply_single_day(result: PartialWeeklyAvailability, match: RuleMatch, tokens: list[Token]) -> None:
    day = resolve_day(match.days[0])
    if day is None:
        return
    daily = _day_entry(result, day)
    if not daily.slot1.start:
        daily.slot1 = match.slot.model_copy()
    else:
        daily.slot2 = match.slot.model_copy()


def last_day_before(tokens: list[Token], position: int) -> Optional[Weekday]:
    """Último dia citado (maior posição) que começa antes de `position`, em qualquer parte do texto."""
    for tok in reversed(tokens):
        if tok.kind == "day" and tok.start < position:
            return resolve_day(tok.text)
    return None


def apply_continuation(result: PartialWeeklyAvailability, match: RuleMatch, tokens: list[Token]) -> None:
    day = last_day_before(tokens, match.position)
    if day is None:
        logger.debug("continuação ignorada (nenhum dia antes da posição %d)", match.position)
        return
    _day_entry(result, day).slot2 = match.slot.model_copy()


# -------------------------
# Tabela de regras
# -------------------------

Matcher = Callable[[list[Token], int], Optional[RuleMatch]]
# Todo applier recebe os tokens; só a continuação usa (busca do último dia citado)
Applier = Callable[[PartialWeeklyAvailability, RuleMatch, list[Token]], None]


class Rule(NamedTuple):
    name: str
    match: Matcher
    apply: Applier


RULES: tuple[Rule, ...] = (
    Rule("range", match_range, apply_range),
    Rule("single_day", match_single_day, apply_single_day),
    Rule("continuation", match_continuation, apply_continuation),
)


def find_matches(tokens: list[Token], matcher: Matcher) -> Iterator[RuleMatch]:
    """Todos os matches sem sobreposição, da esquerda para a direita."""
    i = 0
    while i < len(tokens):
        match = matcher(tokens, i)
        if match is None:
            i += 1
            continue
        yield match
        i = match.end


def run_rule(rule: Rule, tokens: list[Token], result: PartialWeeklyAvailability) -> PartialWeeklyAvailability:
    for match in find_matches(tokens, rule.match):
        rule.apply(result, match, tokens)
    return result
