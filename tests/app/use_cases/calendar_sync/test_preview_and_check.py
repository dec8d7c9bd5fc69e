"""Testes dos casos de uso de preview e checagem de duplicados."""

from __future__ import annotations

from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo

import pytest

from app.domain.school_event import AllDayEvent, RawCandidate, TimedEvent
from app.use_cases.calendar_sync import CheckDuplicatesUseCase, PreviewNoticeUseCase
from tests.fakes.fake_calendar_service import FakeCalendarClient, FakeEventExtractor
from utils.errors import CollaboratorUnavailableError

NY = ZoneInfo("America/New_York")
NOW = datetime(2025, 10, 1, 12, 0, tzinfo=UTC)


@pytest.mark.asyncio
async def test_preview_returns_normalized_events() -> None:
    extractor = FakeEventExtractor(
        [
            RawCandidate(title="Half Day", date="2025-11-26", eventType="halfday"),
            RawCandidate(title="Spring Concert", date="2025-11-02", time="18:30", endTime="20:00"),
        ]
    )

    events = await PreviewNoticeUseCase(extractor, timezone="America/New_York").execute(
        "notice", "Liam"
    )

    assert [event.title for event in events] == ["Liam - Half Day", "Liam - Spring Concert"]
    assert events[0].all_day is True
    assert [r.minutes for r in events[0].reminders] == [60]
    assert isinstance(events[1], TimedEvent)
    assert events[1].end == datetime(2025, 11, 2, 20, 0, tzinfo=NY)


@pytest.mark.asyncio
async def test_preview_degrades_to_empty_on_extractor_error() -> None:
    extractor = FakeEventExtractor(error=TimeoutError())

    events = await PreviewNoticeUseCase(extractor, timezone="America/New_York").execute("notice")

    assert events == []


@pytest.mark.asyncio
async def test_check_duplicates_marks_each_candidate() -> None:
    existing = [
        AllDayEvent(
            title="Liam - Book Fair",
            start_date=date(2025, 10, 14),
            end_date=date(2025, 10, 16),
        )
    ]
    calendar = FakeCalendarClient(existing)
    candidates = [
        AllDayEvent(title="Liam - Book Fair", start_date=date(2025, 10, 15), end_date=date(2025, 10, 15)),
        AllDayEvent(title="Liam - Picture Day", start_date=date(2025, 10, 15), end_date=date(2025, 10, 15)),
    ]

    checks = await CheckDuplicatesUseCase(calendar, now=lambda: NOW).execute("family", candidates)

    assert [check.is_duplicate for check in checks] == [True, False]
    assert [check.candidate for check in checks] == candidates
    assert calendar.create_calls == []


@pytest.mark.asyncio
async def test_check_duplicates_empty_does_not_list() -> None:
    calendar = FakeCalendarClient()

    assert await CheckDuplicatesUseCase(calendar).execute("family", []) == []
    assert calendar.list_calls == []


@pytest.mark.asyncio
async def test_check_duplicates_propagates_unavailable_calendar() -> None:
    calendar = FakeCalendarClient(unavailable=True)
    candidate = AllDayEvent(title="Liam - Book Fair", start_date=date(2025, 10, 15), end_date=date(2025, 10, 15))

    with pytest.raises(CollaboratorUnavailableError):
        await CheckDuplicatesUseCase(calendar).execute("family", [candidate])
