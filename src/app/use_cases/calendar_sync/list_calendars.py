"""Use case que lista calendarios disponiveis para escolha do alvo."""

from __future__ import annotations

from typing import TYPE_CHECKING

from utils.errors import CollaboratorUnavailableError

if TYPE_CHECKING:
    from app.domain.calendar_info import CalendarInfo
    from app.protocols.calendar_client import CalendarClientProtocol


class ListCalendarsUseCase:
    """Retorna calendarios com o principal primeiro."""

    def __init__(self, calendar_client: CalendarClientProtocol) -> None:
        self._calendar_client = calendar_client

    async def execute(self) -> list[CalendarInfo]:
        """Lista calendarios acessiveis.

        Raises:
            CollaboratorUnavailableError: calendario inacessivel.
        """
        try:
            calendars = await self._calendar_client.list_calendars()
        except CollaboratorUnavailableError:
            raise
        except Exception as exc:
            raise CollaboratorUnavailableError("calendar", str(exc)) from exc
        return sorted(calendars, key=lambda info: not info.primary)
