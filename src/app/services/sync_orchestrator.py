"""Sincronizacao em lote de candidatos com o calendario alvo.

Fluxo por candidato (ordem de entrada preservada):
- duplicado contra o snapshot inicial e sem `force_create` -> skipped("duplicate")
- senao tenta criar no provider; falha vira skipped(mensagem do erro)

Duplicados sao resolvidos apenas contra o estado do calendario lido no
inicio do lote: eventos criados no mesmo lote nao sao comparados entre si.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import TYPE_CHECKING

from app.domain.sync_report import SKIP_REASON_DUPLICATE, SkippedEvent, SyncReport
from app.observability import get_correlation_id, record_latency, record_sync_outcome
from app.services.duplicate_matcher import is_duplicate

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain.school_event import EventRecord
    from app.protocols.calendar_client import CalendarClientProtocol

logger = logging.getLogger(__name__)

_COMPONENT = "sync_orchestrator"

_Outcome = tuple["EventRecord | None", "SkippedEvent | None"]


class EventSyncOrchestrator:
    """Classifica candidatos, cria os nao duplicados e agrega resultados."""

    __slots__ = ("_calendar_client", "_calendar_id", "_max_concurrency")

    def __init__(
        self,
        calendar_client: CalendarClientProtocol,
        calendar_id: str,
        *,
        max_concurrency: int = 1,
    ) -> None:
        if max_concurrency < 1:
            raise ValueError("max_concurrency deve ser >= 1")
        self._calendar_client = calendar_client
        self._calendar_id = calendar_id
        self._max_concurrency = max_concurrency

    async def synchronize(
        self,
        candidates: Sequence[EventRecord],
        existing: Sequence[EventRecord],
    ) -> SyncReport:
        """Executa o lote e retorna relatorio com `created` e `skipped`."""
        started = time.perf_counter()
        snapshot = tuple(existing)

        if self._max_concurrency == 1:
            outcomes = [await self._process(candidate, snapshot) for candidate in candidates]
        else:
            semaphore = asyncio.Semaphore(self._max_concurrency)

            async def _bounded(candidate: EventRecord) -> _Outcome:
                async with semaphore:
                    return await self._process(candidate, snapshot)

            outcomes = await asyncio.gather(*(_bounded(candidate) for candidate in candidates))

        report = SyncReport()
        for created, skipped in outcomes:
            if created is not None:
                report.created.append(created)
            if skipped is not None:
                report.skipped.append(skipped)

        latency_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "event_sync_completed",
            extra={
                "component": _COMPONENT,
                "action": "synchronize",
                "result": "completed",
                "candidates": len(candidates),
                "existing": len(snapshot),
                "created_count": report.created_count,
                "skipped_count": report.skipped_count,
                "duplicate_count": report.duplicate_count,
                "correlation_id": get_correlation_id(),
            },
        )
        record_latency(_COMPONENT, "synchronize", latency_ms, get_correlation_id())
        record_sync_outcome(
            created=report.created_count,
            duplicates=report.duplicate_count,
            failed=report.skipped_count - report.duplicate_count,
            correlation_id=get_correlation_id(),
        )
        return report

    async def _process(
        self,
        candidate: EventRecord,
        snapshot: tuple[EventRecord, ...],
    ) -> _Outcome:
        if is_duplicate(candidate, snapshot) and not candidate.force_create:
            logger.info(
                "event_sync_skipped_duplicate",
                extra={
                    "component": _COMPONENT,
                    "action": "classify",
                    "result": SKIP_REASON_DUPLICATE,
                    "event_type": candidate.event_type.value,
                    "correlation_id": get_correlation_id(),
                },
            )
            return None, SkippedEvent(candidate=candidate, reason=SKIP_REASON_DUPLICATE)

        try:
            created = await self._calendar_client.create_event(self._calendar_id, candidate)
        except Exception as exc:
            logger.warning(
                "event_create_failed",
                extra={
                    "component": _COMPONENT,
                    "action": "create_event",
                    "result": "error",
                    "error_type": type(exc).__name__,
                    "correlation_id": get_correlation_id(),
                },
            )
            return None, SkippedEvent(candidate=candidate, reason=_failure_reason(exc))
        return created, None


def _failure_reason(exc: Exception) -> str:
    return str(exc).strip() or type(exc).__name__


__all__ = ["EventSyncOrchestrator"]
