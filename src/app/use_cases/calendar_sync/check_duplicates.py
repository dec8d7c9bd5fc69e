"""Use case que marca candidatos ja presentes no calendario."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.services.duplicate_matcher import check_duplicates
from app.use_cases.calendar_sync._common import fetch_existing_events, utc_now

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from datetime import datetime

    from app.domain.school_event import EventRecord
    from app.domain.sync_report import DuplicateCheck
    from app.protocols.calendar_client import CalendarClientProtocol


class CheckDuplicatesUseCase:
    """Consulta eventos existentes e anota duplicidade por candidato."""

    def __init__(
        self,
        calendar_client: CalendarClientProtocol,
        *,
        lookahead_days: int = 365,
        now: Callable[[], datetime] = utc_now,
    ) -> None:
        self._calendar_client = calendar_client
        self._lookahead_days = lookahead_days
        self._now = now

    async def execute(
        self,
        calendar_id: str,
        candidates: Sequence[EventRecord],
    ) -> list[DuplicateCheck]:
        """Retorna uma marcacao por candidato, na ordem de entrada.

        Raises:
            CollaboratorUnavailableError: calendario inacessivel.
        """
        if not candidates:
            return []
        existing = await fetch_existing_events(
            self._calendar_client,
            calendar_id=calendar_id,
            lookahead_days=self._lookahead_days,
            now=self._now,
        )
        return check_duplicates(candidates, existing)
