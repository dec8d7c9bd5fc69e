"""Contrato do extrator de eventos a partir de texto livre."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from app.domain.school_event import RawCandidate


@runtime_checkable
class EventExtractorProtocol(Protocol):
    """Transforma um aviso em candidatos brutos; a qualidade nao e garantida."""

    async def extract(self, text: str, child_name: str) -> list[RawCandidate]: ...
