"""Modelos de dominio para eventos escolares sincronizados com calendario.

EventRecord e uma uniao discriminada por `all_day`: eventos de dia inteiro
carregam apenas datas, eventos com horario carregam apenas instantes com
offset. Assim o invariante "ou par de datas ou par de instantes" fica
garantido pela propria estrutura dos modelos.
"""

from __future__ import annotations

from datetime import date  # noqa: TC003 - usado em runtime pelo schema do Pydantic
from enum import Enum
from typing import Any, Literal

from pydantic import (
    AliasChoices,
    AwareDatetime,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)


class EventType(str, Enum):
    """Categorias de evento reconhecidas pelo pipeline."""

    TEST = "test"
    ASSIGNMENT = "assignment"
    FIELDTRIP = "fieldtrip"
    HOLIDAY = "holiday"
    HALFDAY = "halfday"
    CONFERENCE = "conference"
    PERFORMANCE = "performance"
    EVENT = "event"

    @classmethod
    def coerce(cls, value: Any) -> EventType:
        """Converte valor livre em EventType; desconhecidos viram EVENT."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return cls.EVENT
        return cls.EVENT


class Reminder(BaseModel):
    """Lembrete do evento, em minutos antes do inicio."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    minutes: int = Field(..., ge=0, description="Antecedencia do lembrete em minutos.")
    method: Literal["popup"] = Field(default="popup", description="Canal do lembrete.")


class _EventBase(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    title: str = Field(..., min_length=1, description="Titulo do evento.")
    description: str = Field(default="", description="Detalhes livres do evento.")
    child_name: str = Field(default="", description="Crianca associada ao evento.")
    event_type: EventType = Field(default=EventType.EVENT, description="Categoria do evento.")
    reminders: tuple[Reminder, ...] = Field(
        default=(),
        description="Lembretes ordenados derivados do tipo do evento.",
    )
    force_create: bool = Field(
        default=False,
        description="Ignora supressao de duplicados quando True.",
    )
    source_id: str | None = Field(
        default=None,
        description="ID no provider; presente apenas em eventos ja existentes.",
    )
    html_link: str | None = Field(default=None, description="URL do evento no provider.")

    @field_validator("title")
    @classmethod
    def _strip_title(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("title_empty")
        return stripped

    @field_validator("event_type", mode="before")
    @classmethod
    def _coerce_event_type(cls, value: Any) -> EventType:
        return EventType.coerce(value)

    @field_validator("description", "child_name", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    def with_source_id(self, source_id: str, html_link: str | None = None) -> EventRecord:
        """Retorna copia do evento com identificador do provider."""
        update: dict[str, Any] = {"source_id": source_id}
        if html_link is not None:
            update["html_link"] = html_link
        return self.model_copy(update=update)  # type: ignore[return-value]


class AllDayEvent(_EventBase):
    """Evento de dia inteiro; `end_date` e inclusivo."""

    all_day: Literal[True] = True
    start_date: date = Field(..., description="Primeiro dia do evento.")
    end_date: date = Field(..., description="Ultimo dia do evento (inclusivo).")

    @model_validator(mode="after")
    def _check_range(self) -> AllDayEvent:
        if self.end_date < self.start_date:
            raise ValueError("end_date_before_start_date")
        return self


class TimedEvent(_EventBase):
    """Evento com horario; instantes sempre com offset explicito."""

    all_day: Literal[False] = False
    start: AwareDatetime = Field(..., description="Inicio do evento.")
    end: AwareDatetime = Field(..., description="Fim do evento.")

    @model_validator(mode="after")
    def _check_range(self) -> TimedEvent:
        if self.end < self.start:
            raise ValueError("end_before_start")
        return self


EventRecord = AllDayEvent | TimedEvent


class RawCandidate(BaseModel):
    """Candidato bruto emitido pelo extrator, ainda sem validacao de negocio.

    Campos ausentes ficam None para que o normalizador decida o que e
    malformado; aceita chaves camelCase (formato do LLM) e snake_case.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    title: str | None = None
    date: str | None = None
    time: str | None = None
    end_time: str | None = Field(
        default=None,
        validation_alias=AliasChoices("endTime", "end_time"),
    )
    event_type: str | None = Field(
        default=None,
        validation_alias=AliasChoices("eventType", "event_type"),
    )
    description: str | None = None
    is_all_day: bool = Field(
        default=False,
        validation_alias=AliasChoices("isAllDay", "is_all_day"),
    )

    @field_validator("title", "date", "time", "end_time", "event_type", "description", mode="before")
    @classmethod
    def _blank_as_none(cls, value: Any) -> Any:
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @field_validator("is_all_day", mode="before")
    @classmethod
    def _none_as_false(cls, value: Any) -> Any:
        return False if value is None else value


__all__ = [
    "AllDayEvent",
    "EventRecord",
    "EventType",
    "RawCandidate",
    "Reminder",
    "TimedEvent",
]
