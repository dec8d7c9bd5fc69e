"""Casos de uso de sincronizacao de avisos escolares com o calendario."""

from app.use_cases.calendar_sync.check_duplicates import CheckDuplicatesUseCase
from app.use_cases.calendar_sync.list_calendars import ListCalendarsUseCase
from app.use_cases.calendar_sync.preview_notice import PreviewNoticeUseCase
from app.use_cases.calendar_sync.sync_notice import SyncNoticeUseCase

__all__ = [
    "CheckDuplicatesUseCase",
    "ListCalendarsUseCase",
    "PreviewNoticeUseCase",
    "SyncNoticeUseCase",
]
