"""
graph.py — Grafo core (principal) do agendador.

Fluxo:
  input_node → disponibilidade → merge → END

- input_node: extrai client_input da ultima HumanMessage
- disponibilidade: subgrafo de agendamento inteligente (texto → preview → aplicar)
- merge: compoe resposta final a partir de specialists_outputs
"""
from __future__ import annotations

from langgraph.graph import StateGraph, END
from langchain_core.messages import HumanMessage
from langchain_core.runnables import RunnableConfig

from agendador.core.state import GlobalState
from agendador.core.merge import merge
from agendador.agents.disponibilidade.workflow import build_disponibilidade_graph


def input_node(state: GlobalState, config: RunnableConfig) -> dict:
    """
    No de entrada: extrai o texto da ultima mensagem do usuario
    e seta client_input para os nos especialistas consumirem.

    Se nao houver HumanMessage, mantem o client_input recebido.
    """
    messages = state.get("messages", [])
    for msg in reversed(messages):
        if isinstance(msg, HumanMessage):
            content = msg.content
            # content pode vir como lista de blocos (multimodal)
            # Ex: [{"type": "text", "text": "..."}]
            if isinstance(content, list):
                content = " ".join(
                    block.get("text", "") for block in content
                    if isinstance(block, dict) and block.get("type") == "text"
                )
            return {"client_input": content}
    return {}


def build_core_graph(config: RunnableConfig | None = None):
    """
    Factory do grafo principal.

    Aceita RunnableConfig (padrao LangGraph CLI/Studio); nao ha dependencias a injetar.
    """
    g = StateGraph(GlobalState)

    # --- nos ---
    g.add_node("input_node", input_node)
    g.add_node("disponibilidade", build_disponibilidade_graph())   # subgrafo compilado
    g.add_node("merge", merge)

    # --- fluxo ---
    g.set_entry_point("input_node")
    g.add_edge("input_node", "disponibilidade")
    g.add_edge("disponibilidade", "merge")
    g.add_edge("merge", END)

    return g.compile()
