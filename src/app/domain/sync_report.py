"""Resultado agregado de um lote de sincronizacao."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from app.domain.school_event import AllDayEvent, TimedEvent

SKIP_REASON_DUPLICATE = "duplicate"


class SkippedEvent(BaseModel):
    """Candidato nao criado, com motivo legivel."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    candidate: AllDayEvent | TimedEvent
    reason: str = Field(..., min_length=1, description="Motivo do descarte.")

    @property
    def is_duplicate(self) -> bool:
        return self.reason == SKIP_REASON_DUPLICATE


class DuplicateCheck(BaseModel):
    """Marcacao de duplicidade de um candidato (preview antes do sync)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    candidate: AllDayEvent | TimedEvent
    is_duplicate: bool


class SyncReport(BaseModel):
    """Relatorio por item de um lote; listas vazias sao validas."""

    model_config = ConfigDict(extra="ignore")

    created: list[AllDayEvent | TimedEvent] = Field(default_factory=list)
    skipped: list[SkippedEvent] = Field(default_factory=list)

    @property
    def created_count(self) -> int:
        return len(self.created)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    @property
    def duplicate_count(self) -> int:
        return sum(1 for item in self.skipped if item.is_duplicate)


__all__ = ["SKIP_REASON_DUPLICATE", "DuplicateCheck", "SkippedEvent", "SyncReport"]
