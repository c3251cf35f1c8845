"""Estado global compartilhado pelo grafo."""
from __future__ import annotations

import operator
from typing import Dict, List, TypedDict

from typing_extensions import Annotated

from langgraph.graph.message import AnyMessage, add_messages

from agendador.agents.disponibilidade.state import DisponibilidadeState


class GlobalState(TypedDict, total=False):
    # entrada
    client_input: str
    client_id: int | str

    # histórico da conversa
    messages: Annotated[List[AnyMessage], add_messages]

    # saídas dos especialistas
    specialists_outputs: Annotated[Dict[str, str], operator.or_]

    # sub-estados
    disponibilidade: DisponibilidadeState

    # resposta final
    final_answer: str
