"""Testes de serializacao/parsing da Google Calendar API."""

from __future__ import annotations

from datetime import date, datetime
from zoneinfo import ZoneInfo

from app.domain.school_event import AllDayEvent, EventType, Reminder, TimedEvent
from app.infra.calendar.google_calendar_parsers import (
    SYNC_MARKER_KEY,
    build_event_body,
    map_calendar_event,
    map_calendar_list_entry,
    parse_google_datetime,
)

NY = ZoneInfo("America/New_York")


def test_all_day_body_uses_exclusive_end_date() -> None:
    event = AllDayEvent(
        title="Liam - Book Fair",
        child_name="Liam",
        event_type="event",
        start_date=date(2025, 10, 14),
        end_date=date(2025, 10, 16),
    )

    body = build_event_body(event, "America/New_York")

    assert body["start"] == {"date": "2025-10-14"}
    assert body["end"] == {"date": "2025-10-17"}
    assert body["summary"] == "Liam - Book Fair"


def test_body_carries_sync_marker_and_reminders() -> None:
    event = AllDayEvent(
        title="Liam - Field Trip",
        child_name="Liam",
        event_type="fieldtrip",
        start_date=date(2025, 10, 25),
        end_date=date(2025, 10, 25),
        reminders=(Reminder(minutes=2880), Reminder(minutes=720)),
    )

    body = build_event_body(event, "America/New_York")

    assert body["extendedProperties"]["private"] == {
        SYNC_MARKER_KEY: "true",
        "childName": "Liam",
        "eventType": "fieldtrip",
    }
    assert body["reminders"]["overrides"] == [
        {"method": "popup", "minutes": 2880},
        {"method": "popup", "minutes": 720},
    ]


def test_map_timed_event_converts_to_zone() -> None:
    event = map_calendar_event(
        {
            "id": "g-1",
            "summary": "Math Test",
            "start": {"dateTime": "2025-10-20T12:00:00Z"},
            "end": {"dateTime": "2025-10-20T13:00:00Z"},
            "extendedProperties": {"private": {"childName": "Emma", "eventType": "test"}},
        },
        NY,
    )

    assert isinstance(event, TimedEvent)
    assert event.start == datetime(2025, 10, 20, 8, 0, tzinfo=NY)
    assert event.child_name == "Emma"
    assert event.event_type is EventType.TEST


def test_map_all_day_event_converts_exclusive_end() -> None:
    event = map_calendar_event(
        {"id": "g-2", "summary": "Holiday", "start": {"date": "2025-11-27"}, "end": {"date": "2025-11-28"}},
        NY,
    )

    assert isinstance(event, AllDayEvent)
    assert event.start_date == event.end_date == date(2025, 11, 27)
    assert event.event_type is EventType.EVENT


def test_map_skips_items_without_title_or_start() -> None:
    assert map_calendar_event({"id": "g-3", "start": {"date": "2025-11-27"}}, NY) is None
    assert map_calendar_event({"id": "g-4", "summary": "No start"}, NY) is None
    assert (
        map_calendar_event(
            {"id": "g-5", "summary": "Gone", "status": "cancelled", "start": {"date": "2025-11-27"}},
            NY,
        )
        is None
    )


def test_map_end_before_start_is_clamped() -> None:
    event = map_calendar_event(
        {
            "summary": "Odd",
            "start": {"dateTime": "2025-10-20T10:00:00-04:00"},
            "end": {"dateTime": "2025-10-20T09:00:00-04:00"},
        },
        NY,
    )

    assert isinstance(event, TimedEvent)
    assert event.end == event.start


def test_parse_google_datetime_handles_naive_and_invalid() -> None:
    assert parse_google_datetime("2025-10-20T08:00:00", NY) == datetime(2025, 10, 20, 8, 0, tzinfo=NY)
    assert parse_google_datetime("not-a-date", NY) is None
    assert parse_google_datetime(None, NY) is None


def test_map_calendar_list_entry_prefers_summary_override() -> None:
    info = map_calendar_list_entry(
        {
            "id": "family@group.calendar.google.com",
            "summary": "Family",
            "summaryOverride": "Kids",
            "backgroundColor": "#16a765",
        }
    )

    assert info is not None
    assert info.summary == "Kids"
    assert info.background_color == "#16a765"
    assert info.primary is False


def test_map_calendar_list_entry_requires_id() -> None:
    assert map_calendar_list_entry({"summary": "Orphan"}) is None
    assert map_calendar_list_entry({"id": "  "}) is None
