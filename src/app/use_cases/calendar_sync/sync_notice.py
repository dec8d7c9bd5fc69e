"""Use case de sincronizacao: aviso -> eventos criados no calendario.

Ordem das etapas:
1. extrai e normaliza (falha do extrator = zero candidatos)
2. le o snapshot de eventos existentes (falha aborta o lote inteiro)
3. sincroniza: duplicados sao pulados, falhas por item sao isoladas
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain.sync_report import SyncReport
from app.observability import correlation_scope
from app.services.sync_orchestrator import EventSyncOrchestrator
from app.use_cases.calendar_sync._common import (
    extract_and_normalize,
    fetch_existing_events,
    utc_now,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from datetime import datetime

    from app.domain.school_event import EventRecord
    from app.protocols.calendar_client import CalendarClientProtocol
    from app.protocols.event_extractor import EventExtractorProtocol

logger = logging.getLogger(__name__)


class SyncNoticeUseCase:
    """Orquestra extracao, leitura do calendario e sincronizacao em lote."""

    def __init__(
        self,
        *,
        extractor: EventExtractorProtocol,
        calendar_client: CalendarClientProtocol,
        timezone: str,
        lookahead_days: int = 365,
        max_concurrency: int = 1,
        now: Callable[[], datetime] = utc_now,
    ) -> None:
        self._extractor = extractor
        self._calendar_client = calendar_client
        self._timezone = timezone
        self._lookahead_days = lookahead_days
        self._max_concurrency = max_concurrency
        self._now = now

    async def execute(
        self,
        text: str,
        child_name: str,
        calendar_id: str,
        *,
        correlation_id: str | None = None,
    ) -> SyncReport:
        """Processa um aviso de ponta a ponta.

        Raises:
            CollaboratorUnavailableError: calendario inacessivel (nada e criado).
        """
        with correlation_scope(correlation_id):
            candidates = await extract_and_normalize(
                self._extractor,
                text=text,
                child_name=child_name,
                timezone=self._timezone,
            )
            return await self._sync(calendar_id, candidates)

    async def sync_candidates(
        self,
        calendar_id: str,
        candidates: Sequence[EventRecord],
        *,
        correlation_id: str | None = None,
    ) -> SyncReport:
        """Confirma candidatos ja revisados (ex.: apos preview/edicao)."""
        with correlation_scope(correlation_id):
            return await self._sync(calendar_id, candidates)

    async def _sync(self, calendar_id: str, candidates: Sequence[EventRecord]) -> SyncReport:
        if not candidates:
            logger.info(
                "event_sync_no_candidates",
                extra={"component": "calendar_sync", "action": "sync", "result": "empty"},
            )
            return SyncReport()
        existing = await fetch_existing_events(
            self._calendar_client,
            calendar_id=calendar_id,
            lookahead_days=self._lookahead_days,
            now=self._now,
        )
        orchestrator = EventSyncOrchestrator(
            self._calendar_client,
            calendar_id,
            max_concurrency=self._max_concurrency,
        )
        return await orchestrator.synchronize(candidates, existing)
