"""Exceções do pipeline de sincronização de eventos escolares."""

from __future__ import annotations


class CalendarSyncError(RuntimeError):
    """Base para falhas do pipeline de sincronização."""


class MalformedCandidateError(CalendarSyncError, ValueError):
    """Candidato extraído sem título/data ou com data/hora inválida.

    Falha por item: o candidato é descartado e o lote segue.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class CreationFailedError(CalendarSyncError):
    """Provider recusou a criação de um evento específico."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class CollaboratorUnavailableError(CalendarSyncError):
    """Extrator ou calendário inacessível como um todo (falha de lote)."""

    def __init__(self, collaborator: str, message: str = "") -> None:
        super().__init__(message or f"{collaborator}_unavailable")
        self.collaborator = collaborator
