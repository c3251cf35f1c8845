from typing import Any, Dict, Optional, TypedDict, Literal


class DisponibilidadeState(TypedDict, total=False):
    # --- controle do fluxo ---
    stage: Literal[
        "awaiting_text",            # espera o texto livre com os horários
        "preview",                  # mostrou o que foi detectado, espera aplicar/limpar
        "applied",                  # horários aplicados na semana
    ]

    # --- texto processado e resultado parcial do extrator ---
    text: Optional[str]                      # último texto processado
    parsed: Optional[Dict[str, Any]]         # {"monday": {"slot1": {...}, "slot2": {...}}}

    # --- semana completa do formulário ---
    availability: Dict[str, Any]             # WeeklyAvailability.model_dump()

    # --- validação da semana após aplicar ---
    validation_error: Optional[str]          # código do ValidationResult (ex: end_before_start)

    # --- saída do especialista (pra merge) ---
    output: Optional[str]                    # mensagem pronta do agente de disponibilidade
