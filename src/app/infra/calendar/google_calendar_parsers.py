"""Helpers internos de parsing/serializacao para a Google Calendar API."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import TYPE_CHECKING, Any

from app.domain.calendar_info import CalendarInfo
from app.domain.school_event import AllDayEvent, TimedEvent

if TYPE_CHECKING:
    from zoneinfo import ZoneInfo

    from googleapiclient.errors import HttpError

    from app.domain.school_event import EventRecord

SYNC_MARKER_KEY = "schoolCalendarSync"


def build_event_body(event: EventRecord, timezone: str) -> dict[str, Any]:
    """Monta o corpo de `events.insert` a partir do EventRecord."""
    if isinstance(event, AllDayEvent):
        # Google trata `end.date` como exclusivo.
        start: dict[str, Any] = {"date": event.start_date.isoformat()}
        end: dict[str, Any] = {"date": (event.end_date + timedelta(days=1)).isoformat()}
    else:
        start = {"dateTime": event.start.isoformat(), "timeZone": timezone}
        end = {"dateTime": event.end.isoformat(), "timeZone": timezone}
    return {
        "summary": event.title,
        "description": event.description,
        "start": start,
        "end": end,
        "reminders": {
            "useDefault": False,
            "overrides": [
                {"method": reminder.method, "minutes": reminder.minutes}
                for reminder in event.reminders
            ],
        },
        "extendedProperties": {
            "private": {
                SYNC_MARKER_KEY: "true",
                "childName": event.child_name,
                "eventType": event.event_type.value,
            }
        },
    }


def map_calendar_event(payload: dict[str, Any], zone: ZoneInfo) -> EventRecord | None:
    """Converte item da API em EventRecord; None se faltar titulo ou inicio."""
    if not isinstance(payload, dict) or payload.get("status") == "cancelled":
        return None
    title = str(payload.get("summary") or "").strip()
    if not title:
        return None

    private = _private_properties(payload)
    common: dict[str, Any] = {
        "title": title,
        "description": str(payload.get("description") or ""),
        "child_name": private.get("childName", ""),
        "event_type": private.get("eventType"),
        "source_id": str(payload.get("id") or "") or None,
        "html_link": payload.get("htmlLink") or None,
    }

    start_value = payload.get("start")
    end_value = payload.get("end")
    if start_dt := _extract_datetime(start_value, zone):
        end_dt = _extract_datetime(end_value, zone)
        if end_dt is None or end_dt < start_dt:
            end_dt = start_dt
        return TimedEvent(start=start_dt, end=end_dt, **common)

    if start_day := _extract_date(start_value):
        end_exclusive = _extract_date(end_value)
        end_day = end_exclusive - timedelta(days=1) if end_exclusive else start_day
        return AllDayEvent(start_date=start_day, end_date=max(end_day, start_day), **common)
    return None


def map_calendar_list_entry(payload: dict[str, Any]) -> CalendarInfo | None:
    """Converte item de `calendarList.list`; None se faltar id."""
    if not isinstance(payload, dict):
        return None
    calendar_id = str(payload.get("id") or "").strip()
    if not calendar_id:
        return None
    return CalendarInfo(
        id=calendar_id,
        summary=str(payload.get("summaryOverride") or payload.get("summary") or ""),
        background_color=payload.get("backgroundColor") or None,
        primary=bool(payload.get("primary", False)),
    )


def parse_google_datetime(value: Any, zone: ZoneInfo) -> datetime | None:
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    return parsed.replace(tzinfo=zone) if parsed.tzinfo is None else parsed.astimezone(zone)


def http_status(exc: HttpError) -> int | None:
    response = getattr(exc, "resp", None)
    return int(response.status) if response and getattr(response, "status", None) else None


def http_error_message(exc: HttpError) -> str:
    reason = str(getattr(exc, "reason", "") or "").strip()
    status = http_status(exc)
    if reason and status:
        return f"{reason} (HTTP {status})"
    return reason or (f"HTTP {status}" if status else "google_calendar_error")


def _extract_datetime(value: Any, zone: ZoneInfo) -> datetime | None:
    if isinstance(value, dict):
        return parse_google_datetime(value.get("dateTime"), zone)
    return None


def _extract_date(value: Any) -> date | None:
    if isinstance(value, dict) and isinstance(value.get("date"), str):
        try:
            return date.fromisoformat(value["date"])
        except ValueError:
            return None
    return None


def _private_properties(payload: dict[str, Any]) -> dict[str, str]:
    extended = payload.get("extendedProperties")
    private = extended.get("private") if isinstance(extended, dict) else None
    if not isinstance(private, dict):
        return {}
    return {str(key): str(value) for key, value in private.items() if value is not None}
