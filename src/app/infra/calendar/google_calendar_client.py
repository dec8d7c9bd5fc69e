"""Client concreto de Google Calendar para o pipeline de sincronizacao."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import TYPE_CHECKING, Any
from zoneinfo import ZoneInfo

from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from app.infra.calendar.google_calendar_parsers import (
    build_event_body,
    http_error_message,
    http_status,
    map_calendar_event,
    map_calendar_list_entry,
)
from app.observability import get_correlation_id
from app.protocols.calendar_client import CalendarClientProtocol
from utils.errors import CollaboratorUnavailableError, CreationFailedError

if TYPE_CHECKING:
    from datetime import datetime

    from app.domain.calendar_info import CalendarInfo
    from app.domain.school_event import EventRecord

logger = logging.getLogger(__name__)

_COMPONENT = "google_calendar_client"
_CALENDAR_SCOPE = "https://www.googleapis.com/auth/calendar"
_PAGE_SIZE = 250


class GoogleCalendarClient(CalendarClientProtocol):
    """Implementacao do protocolo de calendario usando API v3 do Google."""

    __slots__ = ("_service", "_timezone", "_zone")

    def __init__(self, *, credentials_json: str, timezone: str) -> None:
        credentials = service_account.Credentials.from_service_account_info(
            json.loads(credentials_json),
            scopes=[_CALENDAR_SCOPE],
        )
        self._timezone = timezone
        self._zone = ZoneInfo(timezone)
        self._service = build("calendar", "v3", credentials=credentials, cache_discovery=False)

    async def list_calendars(self) -> list[CalendarInfo]:
        try:
            items = await asyncio.to_thread(self._list_calendars_sync)
        except HttpError as exc:
            self._log_error(action="list_calendars", result="error", exc=exc)
            raise CollaboratorUnavailableError("calendar", http_error_message(exc)) from exc
        except Exception as exc:
            self._log_error(action="list_calendars", result="error")
            raise CollaboratorUnavailableError("calendar", str(exc)) from exc

        calendars = [
            info for item in items if (info := map_calendar_list_entry(item)) is not None
        ]
        logger.info(
            "google_calendars_listed",
            extra={
                "component": _COMPONENT,
                "action": "list_calendars",
                "result": "ok",
                "items": len(calendars),
                "correlation_id": get_correlation_id(),
            },
        )
        return calendars

    async def list_events(
        self,
        calendar_id: str,
        time_min: datetime,
        time_max: datetime,
    ) -> list[EventRecord]:
        try:
            items = await asyncio.to_thread(
                self._list_events_sync,
                calendar_id,
                time_min.isoformat(),
                time_max.isoformat(),
            )
        except HttpError as exc:
            self._log_error(action="list_events", result="error", exc=exc)
            raise CollaboratorUnavailableError("calendar", http_error_message(exc)) from exc
        except Exception as exc:
            self._log_error(action="list_events", result="error")
            raise CollaboratorUnavailableError("calendar", str(exc)) from exc

        events = [
            event for item in items if (event := map_calendar_event(item, self._zone)) is not None
        ]
        logger.info(
            "google_calendar_events_listed",
            extra={
                "component": _COMPONENT,
                "action": "list_events",
                "result": "ok",
                "items": len(items),
                "mapped": len(events),
                "correlation_id": get_correlation_id(),
            },
        )
        return events

    async def create_event(self, calendar_id: str, event: EventRecord) -> EventRecord:
        body = build_event_body(event, self._timezone)
        try:
            response = await asyncio.to_thread(self._insert_event_sync, calendar_id, body)
        except HttpError as exc:
            self._log_error(action="create_event", result="error", exc=exc)
            raise CreationFailedError(
                http_error_message(exc),
                status_code=http_status(exc),
            ) from exc
        except Exception:
            self._log_error(action="create_event", result="error")
            raise
        return event.with_source_id(
            str(response.get("id") or ""),
            html_link=response.get("htmlLink") or None,
        )

    def _list_calendars_sync(self) -> list[dict[str, Any]]:
        items: list[dict[str, Any]] = []
        page_token: str | None = None
        while True:
            response = (
                self._service.calendarList()
                .list(maxResults=_PAGE_SIZE, pageToken=page_token)
                .execute()
            )
            items.extend(item for item in response.get("items", []) if isinstance(item, dict))
            page_token = response.get("nextPageToken")
            if not page_token:
                return items

    def _list_events_sync(
        self,
        calendar_id: str,
        time_min: str,
        time_max: str,
    ) -> list[dict[str, Any]]:
        items: list[dict[str, Any]] = []
        page_token: str | None = None
        while True:
            response = (
                self._service.events()
                .list(
                    calendarId=calendar_id,
                    timeMin=time_min,
                    timeMax=time_max,
                    singleEvents=True,
                    orderBy="startTime",
                    maxResults=_PAGE_SIZE,
                    pageToken=page_token,
                )
                .execute()
            )
            items.extend(item for item in response.get("items", []) if isinstance(item, dict))
            page_token = response.get("nextPageToken")
            if not page_token:
                return items

    def _insert_event_sync(self, calendar_id: str, body: dict[str, Any]) -> dict[str, Any]:
        return self._service.events().insert(calendarId=calendar_id, body=body).execute()

    def _log_error(self, *, action: str, result: str, exc: HttpError | None = None) -> None:
        extra = {
            "component": _COMPONENT,
            "action": action,
            "result": result,
            "correlation_id": get_correlation_id(),
        }
        if exc is not None:
            extra["status_code"] = http_status(exc)
            extra["error_type"] = type(exc).__name__
            logger.error("google_calendar_http_error", extra=extra)
            return
        logger.exception("google_calendar_unexpected_error", extra=extra)
