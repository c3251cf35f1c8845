"""Configuração do logging para os pontos de entrada (scripts, avaliação)."""
from __future__ import annotations

import logging

from agendador.core.config import get_settings


def configure_logging(level: str | None = None) -> None:
    """Aplica nível/formato do Settings. `level` sobrescreve LOG_LEVEL."""
    settings = get_settings()
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=settings.log_format,
    )
