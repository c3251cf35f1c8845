"""
lexer.py — Tokenizador do texto de disponibilidade

Quebra o texto (já em minúsculas) em tokens com posição:
- day:    palavra que está na tabela de sinônimos (segunda, seg, terça, dom...)
- word:   qualquer outra palavra (inclui os conectivos de / a / as / às / das / e)
- time:   hora com 1-2 dígitos, com ":MM" ou "h" opcional (20, 20h, 20:30)
- symbol: qualquer outro caractere que não seja espaço (vírgula, hífen...)

Sequências longas de dígitos são quebradas em blocos de até 2 ("123" -> "12", "3"),
então "das 123 as 14" não vira horário, mas "as 123" ainda lê "12" como fim.

Cada token guarda `spaced`: se havia espaço em branco logo antes dele.
As regras (rules.py) usam isso onde a frase exige pelo menos um espaço
entre as partes (ex: "das 20", e não "das20").
"""

from __future__ import annotations

import re
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

from agendador.core.weekdays import DAY_SYNONYMS

TokenKind = Literal["day", "word", "time", "symbol"]

_TOKEN_RE = re.compile(
    r"""
      (?P<space>\s+)
    | (?P<time>(?P<hour>[0-9]{1,2})(?::(?P<minute>[0-9]{2})|h)?)
    | (?P<word>[^\W\d_]+)
    | (?P<symbol>.)
    """,
    re.VERBOSE | re.DOTALL,
)


class Token(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: TokenKind
    text: str
    start: int
    end: int
    spaced: bool = False
    hour: Optional[str] = None
    minute: Optional[str] = None


def format_time(hour: str, minute: Optional[str] = None) -> str:
    """'8' -> '08:00', ('20', '30') -> '20:30'."""
    return f"{hour.zfill(2)}:{minute or '00'}"


def tokenize(text: str) -> list[Token]:
    """Tokeniza o texto em minúsculas. Texto vazio -> lista vazia."""
    tokens: list[Token] = []
    spaced = False
    for m in _TOKEN_RE.finditer(text.lower()):
        if m.group("space"):
            spaced = True
            continue

        if m.group("time"):
            tokens.append(Token(
                kind="time", text=m.group("time"), start=m.start(), end=m.end(), spaced=spaced,
                hour=m.group("hour"), minute=m.group("minute"),
            ))
        elif m.group("word"):
            word = m.group("word")
            kind = "day" if word in DAY_SYNONYMS else "word"
            tokens.append(Token(kind=kind, text=word, start=m.start(), end=m.end(), spaced=spaced))
        else:
            tokens.append(Token(kind="symbol", text=m.group(), start=m.start(), end=m.end(), spaced=spaced))
        spaced = False
    return tokens
