"""Settings de runtime do processo (ambiente, nome do servico, nivel de log)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

_ENVIRONMENT_ALIASES: dict[str, Environment] = {
    "dev": "development",
    "development": "development",
    "local": "development",
    "stage": "staging",
    "staging": "staging",
    "prod": "production",
    "production": "production",
}
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class BaseSettings:
    """Configuracao compartilhada por todos os casos de uso.

    Attributes:
        environment: development|staging|production (staging/production validam estrito)
        service_name: Valor do campo `service` nos logs
        log_level: Nivel do root logger
        debug: Forca log_level DEBUG quando LOG_LEVEL nao e informado
    """

    environment: Environment = "development"
    service_name: str = "school_calendar_sync"
    log_level: str = "INFO"
    debug: bool = False

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    def validate(self) -> list[str]:
        """Lista problemas de configuracao; vazia quando tudo ok."""
        errors: list[str] = []
        if self.environment not in _ENVIRONMENT_ALIASES.values():
            errors.append(f"ENVIRONMENT inválido: {self.environment}")
        if not self.service_name.strip():
            errors.append("SERVICE_NAME não pode ser vazio")
        if self.log_level.upper() not in _LOG_LEVELS:
            errors.append(f"LOG_LEVEL inválido: {self.log_level}")
        return errors


def _load_base_from_env() -> BaseSettings:
    debug = os.getenv("DEBUG", "").strip().lower() in ("true", "1", "yes")
    raw_environment = os.getenv("ENVIRONMENT", "development").strip().lower()
    return BaseSettings(
        environment=_ENVIRONMENT_ALIASES.get(raw_environment, "development"),
        service_name=os.getenv("SERVICE_NAME", "school_calendar_sync"),
        log_level=os.getenv("LOG_LEVEL") or ("DEBUG" if debug else "INFO"),
        debug=debug,
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
