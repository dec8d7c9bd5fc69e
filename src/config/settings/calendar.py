"""Settings do calendario alvo: credencial, fuso, janela de leitura e concorrencia."""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field


class CalendarSettings(BaseModel):
    """Configuracoes de calendar usadas pelo pipeline de sincronizacao."""

    model_config = ConfigDict(extra="ignore")

    google_calendar_id: str = Field(
        default="primary",
        description="ID do calendario alvo no Google Calendar.",
    )
    google_service_account_json: str | None = Field(
        default=None,
        description="Credencial JSON da service account em formato texto.",
    )
    calendar_timezone: str = Field(
        default="America/New_York",
        description="Fuso em que datas/horas extraidas sao interpretadas.",
    )
    calendar_lookahead_days: int = Field(
        default=365,
        ge=1,
        description="Janela (dias a partir de agora) de eventos existentes lidos.",
    )
    calendar_sync_max_concurrency: int = Field(
        default=1,
        ge=1,
        description="Criacoes simultaneas por lote; 1 = sequencial.",
    )
    calendar_enabled: bool = Field(
        default=False,
        description="Feature flag para habilitar integracao real com calendario.",
    )


def _read_optional_env(key: str) -> str | None:
    """Retorna valor opcional da env sem propagar string vazia."""
    raw_value = os.getenv(key)
    if raw_value is None:
        return None
    stripped_value = raw_value.strip()
    return stripped_value or None


def _parse_bool(value: str) -> bool:
    """Converte texto de env em bool com o mesmo padrao dos outros settings."""
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _load_calendar_from_env() -> CalendarSettings:
    """Carrega CalendarSettings a partir de variaveis de ambiente."""
    return CalendarSettings(
        google_calendar_id=os.getenv("GOOGLE_CALENDAR_ID", "primary"),
        google_service_account_json=_read_optional_env("GOOGLE_SERVICE_ACCOUNT_JSON"),
        calendar_timezone=os.getenv("CALENDAR_TIMEZONE", "America/New_York"),
        calendar_lookahead_days=int(os.getenv("CALENDAR_LOOKAHEAD_DAYS", "365")),
        calendar_sync_max_concurrency=int(os.getenv("CALENDAR_SYNC_MAX_CONCURRENCY", "1")),
        calendar_enabled=_parse_bool(os.getenv("CALENDAR_ENABLED", "false")),
    )


@lru_cache(maxsize=1)
def get_calendar_settings() -> CalendarSettings:
    """Retorna instancia cacheada de CalendarSettings."""
    return _load_calendar_from_env()


__all__ = ["CalendarSettings", "get_calendar_settings"]
