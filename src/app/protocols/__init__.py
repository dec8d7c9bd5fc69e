"""Protocolos e contratos do core da aplicação."""

from .calendar_client import CalendarClientProtocol
from .event_extractor import EventExtractorProtocol

__all__ = [
    "CalendarClientProtocol",
    "EventExtractorProtocol",
]
