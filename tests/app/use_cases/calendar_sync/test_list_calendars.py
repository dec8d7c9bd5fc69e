"""Testes do caso de uso de listagem de calendarios."""

from __future__ import annotations

import pytest

from app.domain.calendar_info import CalendarInfo
from app.use_cases.calendar_sync import ListCalendarsUseCase
from tests.fakes.fake_calendar_service import FakeCalendarClient
from utils.errors import CollaboratorUnavailableError


class _BrokenCalendarClient(FakeCalendarClient):
    async def list_calendars(self) -> list[CalendarInfo]:
        raise RuntimeError("socket closed")


@pytest.mark.asyncio
async def test_primary_calendar_comes_first() -> None:
    calendar_client = FakeCalendarClient(
        calendars=[
            CalendarInfo(id="family", summary="Family", backgroundColor="#9fe1e7"),
            CalendarInfo(id="parent@example.com", summary="Parent", primary=True),
            CalendarInfo(id="school", summary="School"),
        ]
    )

    calendars = await ListCalendarsUseCase(calendar_client).execute()

    assert [info.id for info in calendars] == ["parent@example.com", "family", "school"]
    assert calendars[1].background_color == "#9fe1e7"


@pytest.mark.asyncio
async def test_unavailable_calendar_propagates() -> None:
    with pytest.raises(CollaboratorUnavailableError):
        await ListCalendarsUseCase(FakeCalendarClient(unavailable=True)).execute()


@pytest.mark.asyncio
async def test_unexpected_error_is_wrapped_as_unavailable() -> None:
    with pytest.raises(CollaboratorUnavailableError) as exc_info:
        await ListCalendarsUseCase(_BrokenCalendarClient()).execute()

    assert exc_info.value.collaborator == "calendar"
    assert "socket closed" in str(exc_info.value)
