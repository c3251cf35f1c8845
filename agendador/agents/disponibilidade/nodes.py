"""
nodes.py — Nós do subgrafo de Disponibilidade (agendamento inteligente)

Estratégia:
- Cada nó controla uma etapa do fluxo (stage) e é responsável por:
  1) chamar o extrator (texto -> PartialWeeklyAvailability) quando há texto novo
  2) fazer merge na semana completa só quando o usuário manda aplicar
  3) validar a semana resultante (validators.py)
  4) definir stage e output (a mensagem do turno)

Fluxo (espelha o diálogo "Processar Texto" -> "Aplicar Horários" / "Limpar"):
  awaiting_text --texto--> preview --aplicar--> applied
                              |--limpar--> awaiting_text
                              |--outro texto--> preview (novo preview)
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict

from langchain_core.runnables import RunnableConfig

from agendador.core.state import GlobalState
from agendador.core.weekdays import DAY_LABELS, Weekday
from agendador.agents.disponibilidade.utils_sched.extractor import extract_schedule
from agendador.agents.disponibilidade.utils_sched.availability import (
    empty_week,
    merge_availability,
    partial_from_dict,
    partial_to_dict,
    week_from_dict,
)
from agendador.agents.disponibilidade.utils_sched.nlg import describe_detected, describe_week
import agendador.agents.disponibilidade.utils_sched.validators as v

logger = logging.getLogger(__name__)


# -------------------------
# Helpers (state + comandos)
# -------------------------

DEFAULT_STAGE = "awaiting_text"

APPLY_COMMANDS = {"aplicar", "aplica", "sim", "confirmo", "ok"}
CLEAR_COMMANDS = {"limpar", "limpa", "cancelar", "não", "nao"}

HINT_MESSAGE = (
    "Não identifiquei horários nesse texto. Digite sua disponibilidade de forma natural. "
    'Ex: "Segunda e Terça das 20h as 23h" ou "de segunda a sexta das 19 às 22".'
)


def ensure_sched_defaults(state: GlobalState) -> Dict[str, Any]:
    """Cópia de state['disponibilidade'] com defaults mínimos (não altera o state recebido)."""
    sched = dict(state.get("disponibilidade") or {})
    sched.setdefault("stage", DEFAULT_STAGE)
    sched.setdefault("availability", empty_week().model_dump())
    sched.setdefault("output", None)
    return sched


def _normalize_command(text: str) -> str:
    return re.sub(r"[^\w\s]", "", (text or "").lower()).strip()


def is_apply_command(text: str) -> bool:
    return _normalize_command(text) in APPLY_COMMANDS


def is_clear_command(text: str) -> bool:
    return _normalize_command(text) in CLEAR_COMMANDS


# Padroniza a saída do especialista: sub-estado + specialists_outputs['disponibilidade']
def export_sched_output(sched: Dict[str, Any]) -> Dict[str, Any]:
    update: Dict[str, Any] = {"disponibilidade": sched}
    out = (sched.get("output") or "").strip()
    if out:
        update["specialists_outputs"] = {"disponibilidade": out}
    return update


# Roteador simples: não altera estado (roteamento em workflow.py)
def sched_router(state: GlobalState, config: RunnableConfig) -> Dict[str, Any]:
    return {}


# -------------------------
# Nó 1: Processar texto
# -------------------------

def sched_process(state: GlobalState, config: RunnableConfig) -> Dict[str, Any]:
    sched = ensure_sched_defaults(state)
    text = state.get("client_input", "") or ""

    partial = extract_schedule(text)
    sched["text"] = text

    if not partial:
        sched["stage"] = "awaiting_text"
        sched["parsed"] = None
        sched["output"] = HINT_MESSAGE
        logger.info("sched_process: nada detectado, stage=awaiting_text")
        return export_sched_output(sched)

    sched["stage"] = "preview"
    sched["parsed"] = partial_to_dict(partial)
    sched["output"] = (
        "Detectado:\n"
        + describe_detected(partial)
        + '\n\nResponda "aplicar" para usar estes horários ou "limpar" para descartar.'
    )
    logger.info("sched_process: %d dia(s) detectado(s), stage=preview", len(partial))
    return export_sched_output(sched)


# -------------------------
# Nó 2: Aplicar horários na semana
# -------------------------

def sched_apply(state: GlobalState, config: RunnableConfig) -> Dict[str, Any]:
    sched = ensure_sched_defaults(state)

    partial = partial_from_dict(sched.get("parsed"))
    week = merge_availability(week_from_dict(sched.get("availability")), partial)
    res = v.validate_week(week)

    sched["availability"] = week.model_dump()
    sched["parsed"] = None
    sched["stage"] = "applied"
    sched["validation_error"] = res.error

    output = "Horários aplicados!\n\nDisponibilidade:\n" + describe_week(week)
    if not res.ok:
        label = DAY_LABELS[Weekday(res.day)]
        if res.error == "end_before_start":
            output += f"\n\nAtenção: na {label} o horário final não é depois do inicial. Confira esse dia."
        else:
            output += f"\n\nAtenção: na {label} há um horário em formato inválido. Confira esse dia."
        logger.info("sched_apply: semana com erro %s em %s/%s", res.error, res.day, res.slot)

    sched["output"] = output
    logger.info("sched_apply: %d dia(s) aplicado(s), stage=applied", len(partial))
    return export_sched_output(sched)


# -------------------------
# Nó 3: Limpar preview
# -------------------------

def sched_clear(state: GlobalState, config: RunnableConfig) -> Dict[str, Any]:
    sched = ensure_sched_defaults(state)
    sched["parsed"] = None
    sched["text"] = None
    sched["stage"] = "awaiting_text"
    sched["output"] = "Ok, descartei os horários detectados. Pode digitar sua disponibilidade novamente."
    logger.info("sched_clear: preview descartado, stage=awaiting_text")
    return export_sched_output(sched)
