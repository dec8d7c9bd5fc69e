"""Registro de métricas via structured logging.

As métricas são registradas como logs estruturados e podem ser agregadas
posteriormente (BigQuery, CloudWatch Insights, etc.).

Métricas suportadas:
- Latência: tempo de execução por componente/operação
- Resultado de sync: contagem de criados/duplicados/falhas por lote

Uso:
    from app.observability import record_latency, record_sync_outcome

    start = time.perf_counter()
    # ... operação ...
    latency_ms = (time.perf_counter() - start) * 1000
    record_latency("sync_orchestrator", "synchronize", latency_ms, correlation_id)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "sync_orchestrator")
        operation: Nome da operação (ex: "synchronize")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_sync_outcome(
    *,
    created: int,
    duplicates: int,
    failed: int,
    correlation_id: str | None = None,
) -> None:
    """Registra contadores de um lote de sincronização.

    Args:
        created: Eventos criados no calendário
        duplicates: Candidatos descartados por duplicidade
        failed: Candidatos cuja criação falhou
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_sync_outcome",
        extra={
            "metric_type": "sync_outcome",
            "component": "calendar_sync",
            "created_count": created,
            "duplicate_count": duplicates,
            "failed_count": failed,
            "correlation_id": correlation_id,
        },
    )
