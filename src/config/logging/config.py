"""Configuração centralizada de logging JSON.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (app/bootstrap/)
    configure_logging(level="INFO", service_name="school_calendar_sync")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("event_sync_completed", extra={"created_count": 2})
"""

from __future__ import annotations

import logging
import sys
from typing import IO, TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter, SensitiveFieldsFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "school_calendar_sync"

# SDKs que logam cada request HTTP em INFO
NOISY_LOGGERS = ("googleapiclient.discovery_cache", "httpx", "openai")


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    *,
    stream: IO[str] | None = None,
    redact_sensitive: bool = True,
) -> None:
    """Instala um único handler JSON no root logger.

    Args:
        level: DEBUG, INFO, WARNING, ERROR ou CRITICAL (case insensitive).
        service_name: Valor do campo `service`.
        correlation_id_getter: Fonte do correlation_id do lote
            (ex: app.observability.get_correlation_id).
        stream: Destino do handler; padrão stderr.
        redact_sensitive: Mascara títulos, descrições e nomes passados em `extra`.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    if redact_sensitive:
        handler.addFilter(SensitiveFieldsFilter())

    root = logging.getLogger()
    root.setLevel(level_upper)
    root.handlers = [handler]

    quiet_level = max(logging.WARNING, logging.getLevelName(level_upper))
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
    elapsed_ms: float | None = None,
) -> None:
    """Marca nos logs que um caminho degradado foi usado.

    Ex.: extrator indisponível tratado como zero candidatos. `reason` é um
    código curto, nunca conteúdo do aviso.
    """
    extra: dict[str, object] = {
        "fallback_used": True,
        "component": component,
    }
    if reason:
        extra["reason"] = reason
    if elapsed_ms is not None:
        extra["elapsed_ms"] = elapsed_ms

    logger.info("Fallback applied for %s", component, extra=extra)
