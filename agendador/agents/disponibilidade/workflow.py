"""
workflow.py — Subgrafo LangGraph do agente de Disponibilidade

Este subgrafo opera sobre o GlobalState, mas somente lê/escreve os campos:
  - state["disponibilidade"] (DisponibilidadeState)
  - state["specialists_outputs"]["disponibilidade"]

Estratégia:
- nós por etapa
- roteamento interno baseado em disponibilidade.stage + comando do usuário
"""

from __future__ import annotations

from langgraph.graph import StateGraph, END

from agendador.core.state import GlobalState
from agendador.agents.disponibilidade.nodes import (
    ensure_sched_defaults,
    is_apply_command,
    is_clear_command,
    sched_apply,
    sched_clear,
    sched_process,
    sched_router,
)


def sched_route(state: GlobalState) -> str:
    """
    Decide o próximo nó do subgrafo com base no stage atual.
    Só existe comando (aplicar/limpar) quando há preview pendente;
    fora disso, toda mensagem é texto a processar.
    """
    sched = ensure_sched_defaults(state)
    text = state.get("client_input", "") or ""

    if sched.get("stage") == "preview":
        if is_apply_command(text):
            return "sched_apply"
        if is_clear_command(text):
            return "sched_clear"
    return "sched_process"


def build_disponibilidade_graph():
    """Constrói e compila o subgrafo."""
    g = StateGraph(GlobalState)

    g.add_node("sched_router", sched_router)
    g.add_node("sched_process", sched_process)
    g.add_node("sched_apply", sched_apply)
    g.add_node("sched_clear", sched_clear)

    # Entrada sempre cai no roteador por stage:
    g.set_entry_point("sched_router")

    g.add_conditional_edges(
        "sched_router",
        sched_route,
        {
            "sched_process": "sched_process",
            "sched_apply": "sched_apply",
            "sched_clear": "sched_clear",
        },
    )

    g.add_edge("sched_process", END)
    g.add_edge("sched_apply", END)
    g.add_edge("sched_clear", END)

    return g.compile()
