"""
merge.py — Nó do grafo core que unifica as saídas dos especialistas.

Responsabilidades:
1. Lê specialists_outputs (dict com saídas de cada especialista)
2. Se nenhum especialista produziu saída, retorna mensagem fixa
3. Junta as saídas na resposta final (sem LLM: o texto já vem pronto)
4. Escreve final_answer e adiciona AIMessage em messages
"""
from __future__ import annotations

from langchain_core.messages import AIMessage
from langchain_core.runnables import RunnableConfig

from agendador.core.state import GlobalState

EMPTY_ANSWER = "Especialistas não produziram nada."


def merge(state: GlobalState, config: RunnableConfig) -> dict:
    outputs = state.get("specialists_outputs") or {}
    parts = [v for v in outputs.values() if v]

    # Nenhum especialista produziu saída
    if not parts:
        return {
            "final_answer": EMPTY_ANSWER,
            "messages": [AIMessage(content=EMPTY_ANSWER)],
        }

    final = "\n\n---\n\n".join(parts)
    return {
        "final_answer": final,
        "messages": [AIMessage(content=final)],
    }
