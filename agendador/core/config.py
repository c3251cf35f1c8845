"""
config.py — Configuração via variáveis de ambiente (.env suportado).

Instancia Settings uma única vez e reutiliza nas chamadas seguintes.
O extrator de horários não lê configuração: só logging e scripts usam isto.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseModel):
    log_level: str = Field(default="INFO", description="Nível do logging (DEBUG, INFO, WARNING...).")
    log_format: str = Field(default=DEFAULT_LOG_FORMAT, description="Formato das linhas de log.")


_settings = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        load_dotenv()
        _settings = Settings(
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_format=os.getenv("LOG_FORMAT", DEFAULT_LOG_FORMAT),
        )
    return _settings


def reset_settings() -> None:
    """Descarta o singleton (usado em testes que alteram o ambiente)."""
    global _settings
    _settings = None
