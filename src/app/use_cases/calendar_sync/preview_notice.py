"""Use case de preview: texto do aviso -> eventos normalizados."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.use_cases.calendar_sync._common import extract_and_normalize

if TYPE_CHECKING:
    from app.domain.school_event import EventRecord
    from app.protocols.event_extractor import EventExtractorProtocol


class PreviewNoticeUseCase:
    """Extrai e normaliza eventos sem tocar no calendario."""

    def __init__(self, extractor: EventExtractorProtocol, *, timezone: str) -> None:
        self._extractor = extractor
        self._timezone = timezone

    async def execute(self, text: str, child_name: str = "") -> list[EventRecord]:
        return await extract_and_normalize(
            self._extractor,
            text=text,
            child_name=child_name,
            timezone=self._timezone,
        )
