"""Calendario em memoria - apenas para desenvolvimento e testes.

ATENCAO: Nao usar em staging/production. Sem persistencia entre reinicios.
"""

from __future__ import annotations

from datetime import datetime, time, timedelta
from typing import TYPE_CHECKING
from uuid import uuid4

from app.domain.calendar_info import CalendarInfo
from app.domain.school_event import AllDayEvent
from app.protocols.calendar_client import CalendarClientProtocol

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import tzinfo

    from app.domain.school_event import EventRecord

PRIMARY_CALENDAR_ID = "primary"


class MemoryCalendarClient(CalendarClientProtocol):
    """Calendario em memoria por calendar_id - apenas para dev/test.

    A listagem segue a semantica do Google: entra todo evento que termina
    depois de `time_min` e comeca antes de `time_max`.
    """

    def __init__(self, initial: dict[str, Iterable[EventRecord]] | None = None) -> None:
        self._calendars: dict[str, list[EventRecord]] = {
            calendar_id: list(events) for calendar_id, events in (initial or {}).items()
        }

    async def list_calendars(self) -> list[CalendarInfo]:
        calendar_ids = [PRIMARY_CALENDAR_ID]
        calendar_ids.extend(cid for cid in self._calendars if cid != PRIMARY_CALENDAR_ID)
        return [
            CalendarInfo(id=cid, summary=cid, primary=cid == PRIMARY_CALENDAR_ID)
            for cid in calendar_ids
        ]

    async def list_events(
        self,
        calendar_id: str,
        time_min: datetime,
        time_max: datetime,
    ) -> list[EventRecord]:
        events: list[EventRecord] = []
        for event in self._calendars.get(calendar_id, []):
            start, end = _event_bounds(event, time_min.tzinfo)
            if (end > time_min or start >= time_min) and start < time_max:
                events.append(event)
        return events

    async def create_event(self, calendar_id: str, event: EventRecord) -> EventRecord:
        created = event.with_source_id(uuid4().hex[:12])
        self._calendars.setdefault(calendar_id, []).append(created)
        return created

    def events(self, calendar_id: str) -> list[EventRecord]:
        """Copia dos eventos guardados (inspecao em testes)."""
        return list(self._calendars.get(calendar_id, []))


def _event_bounds(event: EventRecord, zone: tzinfo | None) -> tuple[datetime, datetime]:
    if isinstance(event, AllDayEvent):
        # Fim exclusivo: meia-noite do dia seguinte ao ultimo dia.
        start = datetime.combine(event.start_date, time.min, tzinfo=zone)
        end = datetime.combine(event.end_date + timedelta(days=1), time.min, tzinfo=zone)
        return start, end
    return event.start, event.end
