from __future__ import annotations

import argparse
import os
import sys

ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.append(ROOT)

from langchain_core.messages import HumanMessage

from agendador.core.graph import build_core_graph
from agendador.core.logging_utils import configure_logging

DEFAULT_TURNS = [
    "de segunda a quarta das 20 as 23",
    "aplicar",
    "domingo das 8 as 12 e das 18 as 23, sexta livre",
    "limpar",
    "Seg das 9h às 11h",
    "ok",
]


def main() -> None:
    parser = argparse.ArgumentParser(description="Roda uma conversa de teste no grafo core")
    parser.add_argument("turns", nargs="*", help="Mensagens do usuário (uma por turno)")
    parser.add_argument("--log-level", default=None, help="Sobrescreve LOG_LEVEL")
    args = parser.parse_args()

    configure_logging(args.log_level)
    graph = build_core_graph()

    state = {"client_id": "teste_001", "messages": []}

    for i, msg in enumerate(args.turns or DEFAULT_TURNS, start=1):
        state["messages"] = list(state.get("messages") or []) + [HumanMessage(content=msg)]
        state = graph.invoke(state)
        stage = (state.get("disponibilidade") or {}).get("stage")

        print(f"\n# Turno {i}")
        print("USER:", msg)
        print("BOT:", state.get("final_answer", ""))
        print("STATE.stage:", stage)
        print("-" * 40)


if __name__ == "__main__":
    main()
