"""Factories de clientes externos - calendario e extrator LLM."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.settings import (
    CalendarSettings,
    OpenAISettings,
    get_base_settings,
    get_calendar_settings,
    get_openai_settings,
)

if TYPE_CHECKING:
    from app.protocols.calendar_client import CalendarClientProtocol
    from app.protocols.event_extractor import EventExtractorProtocol

logger = logging.getLogger(__name__)


def create_calendar_client(settings: CalendarSettings | None = None) -> CalendarClientProtocol:
    """Cria client de calendario baseado na configuracao.

    - CALENDAR_ENABLED=true: GoogleCalendarClient (exige service account)
    - caso contrario: MemoryCalendarClient (dev only)

    Raises:
        ValueError: calendario habilitado sem GOOGLE_SERVICE_ACCOUNT_JSON.
    """
    cfg = settings or get_calendar_settings()

    if cfg.calendar_enabled:
        if not cfg.google_service_account_json:
            msg = "GOOGLE_SERVICE_ACCOUNT_JSON não configurado com CALENDAR_ENABLED=true"
            raise ValueError(msg)
        from app.infra.calendar.google_calendar_client import GoogleCalendarClient

        client = GoogleCalendarClient(
            credentials_json=cfg.google_service_account_json,
            timezone=cfg.calendar_timezone,
        )
        logger.info("calendar_client_created", extra={"backend": "google"})
        return client

    from app.infra.calendar.memory_calendar_client import MemoryCalendarClient

    environment = get_base_settings().environment
    if environment != "development":
        logger.warning(
            "memory_calendar_in_non_dev",
            extra={"backend": "memory", "environment": environment},
        )
    logger.info("calendar_client_created", extra={"backend": "memory"})
    return MemoryCalendarClient()


def create_event_extractor(settings: OpenAISettings | None = None) -> EventExtractorProtocol:
    """Cria extrator de eventos via OpenAI.

    Raises:
        ValueError: OPENAI_ENABLED=false ou configuracao invalida.
    """
    cfg = settings or get_openai_settings()
    if not cfg.enabled:
        msg = "OPENAI_ENABLED=false: extrator de eventos indisponível"
        raise ValueError(msg)
    errors = cfg.validate()
    if errors:
        raise ValueError("; ".join(errors))

    from app.infra.ai.event_extractor_client import EventExtractorClient

    logger.info("event_extractor_created", extra={"model": cfg.model})
    return EventExtractorClient(
        settings=cfg,
        timezone=get_calendar_settings().calendar_timezone,
    )
