"""Implementacoes concretas do protocolo de calendario."""

from app.infra.calendar.memory_calendar_client import MemoryCalendarClient

__all__ = ["MemoryCalendarClient"]
