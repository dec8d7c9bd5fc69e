"""Contrato de calendario usado pelo pipeline de sincronizacao."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from datetime import datetime

    from app.domain.calendar_info import CalendarInfo
    from app.domain.school_event import EventRecord


@runtime_checkable
class CalendarClientProtocol(Protocol):
    """Contrato para listagem de calendarios e listagem/criacao de eventos."""

    async def list_calendars(self) -> list[CalendarInfo]:
        """Calendarios acessiveis pela credencial, para escolha do alvo.

        Raises:
            CollaboratorUnavailableError: provider inacessivel.
        """
        ...

    async def list_events(
        self,
        calendar_id: str,
        time_min: datetime,
        time_max: datetime,
    ) -> list[EventRecord]:
        """Retorna eventos existentes na janela, ja com `source_id`.

        Raises:
            CollaboratorUnavailableError: provider inacessivel.
        """
        ...

    async def create_event(self, calendar_id: str, event: EventRecord) -> EventRecord:
        """Cria o evento e retorna copia com `source_id` atribuido.

        Raises:
            CreationFailedError: provider recusou o evento.
        """
        ...
