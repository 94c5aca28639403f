"""Configurações da aplicação via variáveis de ambiente.

Todas as variáveis usam o prefixo PLAYER_SESSION_ (ex: PLAYER_SESSION_LOG_LEVEL).
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from player_session.observability.logging import LOG_FORMATS


class Settings(BaseSettings):
    """Configurações lidas do ambiente."""

    model_config = SettingsConfigDict(
        env_prefix="PLAYER_SESSION_",
        case_sensitive=False,
    )

    # Aplicação
    service_name: str = "player_session"
    environment: str = "development"

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"  # json | text

    # Histórico de transições por sessão
    history_limit: int = 100  # 0 = sem limite

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment.lower() in ("production", "prod")

    @property
    def is_development(self) -> bool:
        """Retorna True se ambiente é desenvolvimento."""
        return self.environment.lower() in ("development", "dev", "local")

    def validate_logging_config(self) -> list[str]:
        """Valida nível e formato de log.

        Retorna lista de erros (vazia = OK).
        """
        errors: list[str] = []
        level = self.log_level.upper()
        if not isinstance(logging.getLevelName(level), int):
            errors.append(f"LOG_LEVEL '{self.log_level}' inválido")

        fmt = self.log_format.lower()
        if fmt not in LOG_FORMATS:
            errors.append(
                f"LOG_FORMAT '{self.log_format}' inválido. Valores válidos: {sorted(LOG_FORMATS)}"
            )
        return errors

    def validate_history_limit(self) -> list[str]:
        """Valida limite do histórico (0 = ilimitado, negativo é proibido)."""
        errors: list[str] = []
        if self.history_limit < 0:
            errors.append("HISTORY_LIMIT deve ser >= 0")
        return errors

    def validate_all(self) -> list[str]:
        """Agrega todos os validadores."""
        return [*self.validate_logging_config(), *self.validate_history_limit()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Retorna uma instância cacheada de Settings.

    A cache garante que mesmo múltiplas injeções não criam novos objetos.
    """
    return Settings()
