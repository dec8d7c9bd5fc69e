"""Resumo de um calendario disponivel para sincronizacao."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class CalendarInfo(BaseModel):
    """Entrada da lista de calendarios; usada para escolher o calendario alvo.

    `model_dump(by_alias=True)` produz `{id, summary, backgroundColor, primary}`.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str = Field(..., min_length=1, description="ID usado em list_events/create_event.")
    summary: str = Field(default="", description="Nome exibido do calendario.")
    background_color: str | None = Field(
        default=None,
        validation_alias=AliasChoices("background_color", "backgroundColor"),
        serialization_alias="backgroundColor",
        description="Cor no provider (#rrggbb).",
    )
    primary: bool = Field(default=False, description="Calendario principal da conta.")


__all__ = ["CalendarInfo"]
