"""Helpers compartilhados pelos casos de uso de sincronizacao."""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from app.services.event_normalizer import normalize_candidates
from config.logging import log_fallback
from utils.errors import CollaboratorUnavailableError

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.domain.school_event import EventRecord
    from app.protocols.calendar_client import CalendarClientProtocol
    from app.protocols.event_extractor import EventExtractorProtocol

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(tz=UTC)


async def extract_and_normalize(
    extractor: EventExtractorProtocol,
    *,
    text: str,
    child_name: str,
    timezone: str,
) -> list[EventRecord]:
    """Extrai e normaliza candidatos; falha do extrator vira lista vazia."""
    if not text or not text.strip():
        return []
    try:
        raws = await extractor.extract(text, child_name)
    except Exception as exc:
        logger.warning(
            "event_extraction_failed",
            extra={
                "component": "calendar_sync",
                "action": "extract",
                "result": "error",
                "error_type": type(exc).__name__,
            },
        )
        log_fallback(logger, "event_extractor", reason="extractor_unavailable")
        return []
    return normalize_candidates(raws, child_name, timezone=timezone)


async def fetch_existing_events(
    calendar_client: CalendarClientProtocol,
    *,
    calendar_id: str,
    lookahead_days: int,
    now: Callable[[], datetime] = utc_now,
) -> list[EventRecord]:
    """Le o snapshot de eventos existentes (agora ate agora + lookahead).

    Raises:
        CollaboratorUnavailableError: calendario inacessivel.
    """
    time_min = now()
    time_max = time_min + timedelta(days=lookahead_days)
    try:
        return await calendar_client.list_events(calendar_id, time_min, time_max)
    except CollaboratorUnavailableError:
        raise
    except Exception as exc:
        raise CollaboratorUnavailableError("calendar", str(exc)) from exc
