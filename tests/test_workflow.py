import pytest
from langchain_core.messages import AIMessage, HumanMessage

from agendador.core.graph import build_core_graph, input_node
from agendador.agents.disponibilidade.nodes import HINT_MESSAGE, is_apply_command, is_clear_command
from agendador.agents.disponibilidade.utils_sched.availability import empty_week
from agendador.agents.disponibilidade.utils_sched.schemas import DailyAvailability, TimeSlot
from agendador.agents.disponibilidade.workflow import sched_route


@pytest.fixture
def graph():
    return build_core_graph()


def _next_turn(graph, state: dict, text: str) -> dict:
    state = dict(state)
    state["messages"] = list(state.get("messages") or []) + [HumanMessage(content=text)]
    return graph.invoke(state)


# -------------------------
# Roteamento
# -------------------------

@pytest.mark.parametrize(
    "stage, text, expected",
    [
        ("preview", "Aplicar!", "sched_apply"),
        ("preview", "ok", "sched_apply"),
        ("preview", "limpar", "sched_clear"),
        ("preview", "Não.", "sched_clear"),
        ("preview", "seg das 9 as 10", "sched_process"),
        ("awaiting_text", "aplicar", "sched_process"),
        ("applied", "sim", "sched_process"),
    ],
)
def test_sched_route(stage, text, expected) -> None:
    state = {"disponibilidade": {"stage": stage}, "client_input": text}

    assert sched_route(state) == expected


def test_sched_route_sem_estado() -> None:
    assert sched_route({"client_input": "aplicar"}) == "sched_process"


def test_comandos() -> None:
    assert is_apply_command("  Sim ")
    assert not is_apply_command("sim, mas seg das 9 as 10")
    assert is_clear_command("nao")


def test_input_node_pega_ultima_mensagem_humana() -> None:
    state = {"messages": [HumanMessage(content="primeira"), AIMessage(content="ok"), HumanMessage(content="segunda")]}

    assert input_node(state, {}) == {"client_input": "segunda"}
    assert input_node({"messages": []}, {}) == {}


# -------------------------
# Conversa completa
# -------------------------

def test_processar_e_aplicar(graph) -> None:
    first = _next_turn(graph, {}, "de segunda a quarta das 20 as 23")

    sched = first["disponibilidade"]
    assert sched["stage"] == "preview"
    assert list(sched["parsed"]) == ["monday", "tuesday", "wednesday"]
    assert "Segunda: 20:00 às 23:00" in first["final_answer"]
    # disponibilidade ainda não foi aplicada
    assert sched["availability"] == empty_week().model_dump()

    second = _next_turn(graph, first, "aplicar")

    sched = second["disponibilidade"]
    assert sched["stage"] == "applied"
    assert sched["parsed"] is None
    assert sched["validation_error"] is None
    assert sched["availability"]["monday"]["slot1"] == {"start": "20:00", "end": "23:00"}
    assert "Segunda-feira: 20:00 às 23:00" in second["final_answer"]
    assert "Domingo: Indisponível" in second["final_answer"]
    assert isinstance(second["messages"][-1], AIMessage)


def test_texto_sem_horario(graph) -> None:
    result = _next_turn(graph, {}, "sexta livre")

    assert result["disponibilidade"]["stage"] == "awaiting_text"
    assert result["final_answer"] == HINT_MESSAGE


def test_limpar_preview(graph) -> None:
    first = _next_turn(graph, {}, "domingo das 8 as 12 e das 18 as 23")
    second = _next_turn(graph, first, "limpar")

    sched = second["disponibilidade"]
    assert sched["stage"] == "awaiting_text"
    assert sched["parsed"] is None
    assert sched["availability"] == empty_week().model_dump()


def test_novo_texto_no_preview_substitui_preview(graph) -> None:
    first = _next_turn(graph, {}, "seg das 9 as 10")
    second = _next_turn(graph, first, "ter das 9 as 10")

    assert second["disponibilidade"]["stage"] == "preview"
    assert list(second["disponibilidade"]["parsed"]) == ["tuesday"]


def test_aplicar_preserva_dias_nao_mencionados(graph) -> None:
    week = empty_week()
    week.friday = DailyAvailability(slot1=TimeSlot(start="18:00", end="22:00"))
    state = {"disponibilidade": {"stage": "awaiting_text", "availability": week.model_dump()}}

    first = _next_turn(graph, state, "seg das 9 as 10")
    second = _next_turn(graph, first, "ok")

    availability = second["disponibilidade"]["availability"]
    assert availability["friday"]["slot1"] == {"start": "18:00", "end": "22:00"}
    assert availability["monday"]["slot1"] == {"start": "09:00", "end": "10:00"}


def test_aplicar_semana_invalida_avisa(graph) -> None:
    first = _next_turn(graph, {}, "seg das 23 as 20")
    second = _next_turn(graph, first, "ok")

    assert second["disponibilidade"]["stage"] == "applied"
    assert second["disponibilidade"]["validation_error"] == "end_before_start"
    assert "Atenção" in second["final_answer"]
