"""Factories de casos de uso - wiring de protocolos e settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.bootstrap.clients import create_calendar_client, create_event_extractor
from app.use_cases.calendar_sync import (
    CheckDuplicatesUseCase,
    ListCalendarsUseCase,
    PreviewNoticeUseCase,
    SyncNoticeUseCase,
)
from config.settings import get_calendar_settings

if TYPE_CHECKING:
    from app.protocols.calendar_client import CalendarClientProtocol
    from app.protocols.event_extractor import EventExtractorProtocol


def create_preview_use_case(
    extractor: EventExtractorProtocol | None = None,
) -> PreviewNoticeUseCase:
    settings = get_calendar_settings()
    return PreviewNoticeUseCase(
        extractor or create_event_extractor(),
        timezone=settings.calendar_timezone,
    )


def create_check_duplicates_use_case(
    calendar_client: CalendarClientProtocol | None = None,
) -> CheckDuplicatesUseCase:
    settings = get_calendar_settings()
    return CheckDuplicatesUseCase(
        calendar_client or create_calendar_client(settings),
        lookahead_days=settings.calendar_lookahead_days,
    )


def create_sync_use_case(
    *,
    extractor: EventExtractorProtocol | None = None,
    calendar_client: CalendarClientProtocol | None = None,
) -> SyncNoticeUseCase:
    """Monta SyncNoticeUseCase com clients padrao quando nao injetados."""
    settings = get_calendar_settings()
    return SyncNoticeUseCase(
        extractor=extractor or create_event_extractor(),
        calendar_client=calendar_client or create_calendar_client(settings),
        timezone=settings.calendar_timezone,
        lookahead_days=settings.calendar_lookahead_days,
        max_concurrency=settings.calendar_sync_max_concurrency,
    )


def create_list_calendars_use_case(
    calendar_client: CalendarClientProtocol | None = None,
) -> ListCalendarsUseCase:
    return ListCalendarsUseCase(calendar_client or create_calendar_client())
