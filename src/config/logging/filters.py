"""Filters de logging para injeção de contexto e proteção de PII.

Campos injetados:
- correlation_id: ID de rastreamento do lote
- service: Nome do serviço (ex: school_calendar_sync)

Campos redigidos: conteúdo de avisos e eventos (título, descrição, nome
da criança, texto bruto) nunca deve sair nos logs.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

REDACTED = "[redacted]"

# Atributos de `extra` que carregam dados de família/escola
SENSITIVE_LOG_FIELDS = frozenset(
    {
        "title",
        "description",
        "child_name",
        "notice_text",
        "summary",
    }
)


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia como fallback.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona correlation_id e service ao record.

        Se correlation_id já foi passado via `extra`, preserva o valor.
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class SensitiveFieldsFilter(logging.Filter):
    """Substitui valores de campos sensíveis passados via `extra`.

    Não filtra records; apenas mascara os atributos listados.
    """

    def __init__(self, fields: Iterable[str] = SENSITIVE_LOG_FIELDS) -> None:
        super().__init__()
        self._fields = frozenset(fields)

    def filter(self, record: logging.LogRecord) -> bool:
        for field in self._fields:
            if getattr(record, field, None):
                setattr(record, field, REDACTED)
        return True
