"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    CalendarSyncError,
    CollaboratorUnavailableError,
    CreationFailedError,
    MalformedCandidateError,
)

__all__ = [
    "CalendarSyncError",
    "CollaboratorUnavailableError",
    "CreationFailedError",
    "MalformedCandidateError",
]
