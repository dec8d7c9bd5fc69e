"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="school_calendar_sync")
    logger = get_logger(__name__)

Campos obrigatórios em todo log:
- correlation_id
- service
- level
- logger
- message
- asctime
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import (
    REDACTED,
    SENSITIVE_LOG_FIELDS,
    CorrelationIdFilter,
    SensitiveFieldsFilter,
)
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REDACTED",
    "REQUIRED_LOG_FIELDS",
    "SENSITIVE_LOG_FIELDS",
    "CorrelationIdFilter",
    "SensitiveFieldsFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
]
