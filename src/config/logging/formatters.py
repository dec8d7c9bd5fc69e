"""Formatters de logging estruturado.

Define o formatter JSON com campos obrigatórios:
- correlation_id
- service
- timestamp (asctime)
- level
- logger (name)
- message

Campos passados via `extra` (component, action, result, contagens)
saem como chaves adicionais do JSON.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem estável facilita leitura nos agregadores
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2025-10-20T10:30:00",
            "level": "INFO",
            "logger": "app.services.sync_orchestrator",
            "message": "event_sync_completed",
            "correlation_id": "abc-123",
            "service": "school_calendar_sync",
            "created_count": 2
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
