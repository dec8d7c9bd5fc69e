"""Testes do calendario em memoria (dev/test)."""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from app.domain.school_event import AllDayEvent, TimedEvent
from app.infra.calendar.memory_calendar_client import MemoryCalendarClient

NY = ZoneInfo("America/New_York")
WINDOW_START = datetime(2025, 10, 1, tzinfo=NY)
WINDOW_END = datetime(2025, 11, 1, tzinfo=NY)


def _timed(title: str, start: datetime) -> TimedEvent:
    return TimedEvent(title=title, start=start, end=start + timedelta(hours=1))


@pytest.mark.asyncio
async def test_create_assigns_source_id_and_stores_per_calendar() -> None:
    client = MemoryCalendarClient()
    event = _timed("Emma - Math Test", datetime(2025, 10, 20, 8, 0, tzinfo=NY))

    created = await client.create_event("family", event)

    assert created.source_id
    assert created.title == event.title
    assert client.events("family") == [created]
    assert client.events("other") == []


@pytest.mark.asyncio
async def test_list_events_filters_by_window() -> None:
    inside = _timed("Inside", datetime(2025, 10, 20, 8, 0, tzinfo=NY))
    before = _timed("Before", datetime(2025, 9, 30, 8, 0, tzinfo=NY))
    all_day = AllDayEvent(title="Book Fair", start_date=date(2025, 10, 14), end_date=date(2025, 10, 16))
    client = MemoryCalendarClient({"family": [inside, before, all_day]})

    events = await client.list_events("family", WINDOW_START, WINDOW_END)

    assert [event.title for event in events] == ["Inside", "Book Fair"]


@pytest.mark.asyncio
async def test_list_unknown_calendar_is_empty() -> None:
    assert await MemoryCalendarClient().list_events("missing", WINDOW_START, WINDOW_END) == []


@pytest.mark.asyncio
async def test_list_events_includes_events_in_progress_at_window_start() -> None:
    now = datetime(2025, 10, 20, 15, 0, tzinfo=UTC)
    picture_day = AllDayEvent(title="Picture Day", start_date=date(2025, 10, 20), end_date=date(2025, 10, 20))
    book_fair = TimedEvent(
        title="Book Fair",
        start=datetime(2025, 10, 20, 14, 0, tzinfo=UTC),
        end=datetime(2025, 10, 20, 18, 0, tzinfo=UTC),
    )
    finished = _timed("Drop-off", datetime(2025, 10, 20, 13, 0, tzinfo=UTC))
    client = MemoryCalendarClient({"family": [picture_day, book_fair, finished]})

    events = await client.list_events("family", now, now + timedelta(days=30))

    assert [event.title for event in events] == ["Picture Day", "Book Fair"]


@pytest.mark.asyncio
async def test_list_events_excludes_all_day_event_ending_before_window() -> None:
    yesterday = AllDayEvent(title="Spirit Day", start_date=date(2025, 10, 19), end_date=date(2025, 10, 19))
    client = MemoryCalendarClient({"family": [yesterday]})

    start = datetime(2025, 10, 20, 0, 0, tzinfo=UTC)
    assert await client.list_events("family", start, start + timedelta(days=30)) == []


@pytest.mark.asyncio
async def test_list_calendars_puts_primary_first() -> None:
    client = MemoryCalendarClient({"family": [], "primary": []})

    calendars = await client.list_calendars()

    assert [info.id for info in calendars] == ["primary", "family"]
    assert [info.primary for info in calendars] == [True, False]
