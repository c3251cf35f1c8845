from agendador.core.weekdays import Weekday
from agendador.agents.disponibilidade.utils_sched.lexer import tokenize
from agendador.agents.disponibilidade.utils_sched.rules import (
    RULES,
    find_matches,
    last_day_before,
    match_continuation,
    match_range,
    match_single_day,
    run_rule,
)
from agendador.agents.disponibilidade.utils_sched.schemas import DailyAvailability, TimeSlot

RANGE, SINGLE_DAY, CONTINUATION = RULES


def _day(s1=("", ""), s2=("", "")) -> DailyAvailability:
    return DailyAvailability(
        slot1=TimeSlot(start=s1[0], end=s1[1]),
        slot2=TimeSlot(start=s2[0], end=s2[1]),
    )


def test_ordem_das_regras() -> None:
    assert [r.name for r in RULES] == ["range", "single_day", "continuation"]


# -------------------------
# Matchers
# -------------------------

def test_match_range() -> None:
    tokens = tokenize("de segunda a sexta das 9 as 18")
    match = match_range(tokens, 0)

    assert match is not None
    assert match.days == ("segunda", "sexta")
    assert match.slot == TimeSlot(start="09:00", end="18:00")
    assert match.end == len(tokens)


def test_match_range_exige_espaco_antes_da_hora() -> None:
    assert match_range(tokenize("de segunda a sexta das9 as 18"), 0) is None


def test_match_range_aceita_palavra_qualquer_como_dia() -> None:
    match = match_range(tokenize("de fulano a sexta das 9 as 18"), 0)

    assert match is not None
    assert match.days == ("fulano", "sexta")


def test_match_single_day() -> None:
    match = match_single_day(tokenize("quarta das 20 a 23"), 0)

    assert match is not None
    assert match.days == ("quarta",)
    assert match.slot == TimeSlot(start="20:00", end="23:00")


def test_match_single_day_rejeita_palavra_desconhecida() -> None:
    assert match_single_day(tokenize("fulano das 9 as 10"), 0) is None


def test_match_single_day_sem_separador() -> None:
    assert match_single_day(tokenize("seg das 9 ate 10"), 0) is None


def test_match_continuation() -> None:
    match = match_continuation(tokenize("e das 18h às 23h"), 0)

    assert match is not None
    assert match.position == 0
    assert match.slot == TimeSlot(start="18:00", end="23:00")


def test_match_range_aceita_de_no_fim_da_palavra() -> None:
    match = match_range(tokenize("desde segunda a sexta das 9 as 18"), 0)

    assert match is not None
    assert match.days == ("segunda", "sexta")


def test_match_continuation_aceita_e_no_fim_da_palavra() -> None:
    tokens = tokenize("sexta à noite das 20 às 23")
    match = match_continuation(tokens, 2)

    assert tokens[2].text == "noite"
    assert match is not None
    assert match.position == tokens[2].start
    assert match.slot == TimeSlot(start="20:00", end="23:00")


def test_find_matches_sem_sobreposicao() -> None:
    tokens = tokenize("seg das 8 as 9 ter das 10 as 11")
    matches = list(find_matches(tokens, match_single_day))

    assert [m.days for m in matches] == [("seg",), ("ter",)]


# -------------------------
# Regras isoladas
# -------------------------

def test_range_invertido_nao_escreve_nada() -> None:
    assert run_rule(RANGE, tokenize("de sexta a segunda das 9 as 10"), {}) == {}


def test_range_com_dia_desconhecido_nao_escreve_nada() -> None:
    assert run_rule(RANGE, tokenize("de fulano a sexta das 9 as 10"), {}) == {}


def test_range_mesmo_dia() -> None:
    result = run_rule(RANGE, tokenize("de sab a sab das 10 as 12"), {})

    assert result == {Weekday.saturday: _day(("10:00", "12:00"))}


def test_range_sobrescreve_slot1_dentro_da_mesma_regra() -> None:
    text = "de segunda a quarta das 8 as 9 e de terça a quinta das 10 as 11"
    result = run_rule(RANGE, tokenize(text), {})

    assert result[Weekday.monday] == _day(("08:00", "09:00"))
    assert result[Weekday.tuesday] == _day(("10:00", "11:00"))
    assert result[Weekday.wednesday] == _day(("10:00", "11:00"))
    assert result[Weekday.thursday] == _day(("10:00", "11:00"))


def test_single_day_preenche_slot1_depois_slot2() -> None:
    text = "seg das 8 as 9, seg das 10 as 11, seg das 12 as 13"
    result = run_rule(SINGLE_DAY, tokenize(text), {})

    # terceira faixa do mesmo dia sobrescreve o slot2
    assert result == {Weekday.monday: _day(("08:00", "09:00"), ("12:00", "13:00"))}


def test_continuation_sozinha_cria_dia_so_com_slot2() -> None:
    result = run_rule(CONTINUATION, tokenize("domingo das 8 as 12 e das 18 as 23"), {})

    assert result == {Weekday.sunday: _day(s2=("18:00", "23:00"))}


def test_continuation_sem_dia_anterior() -> None:
    assert run_rule(CONTINUATION, tokenize("e das 18 as 23, domingo"), {}) == {}


def test_last_day_before_usa_mencao_mais_recente() -> None:
    tokens = tokenize("segunda das 8 as 9, terça livre e das 18 as 20")
    position = tokens[-5].start  # token "e"

    assert tokens[-5].text == "e"
    assert last_day_before(tokens, position) == Weekday.tuesday
    assert last_day_before(tokens, 0) is None
