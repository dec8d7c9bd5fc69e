"""Deteccao de duplicados entre candidatos e eventos ja existentes.

Regra par-a-par (simetrica):
1. Datas de inicio a no maximo 1 dia de distancia (inclusivo).
2. Similaridade de titulo estritamente maior que 85.
3. Se algum lado e de dia inteiro, data + titulo bastam.
4. Senao, inicios a no maximo 120 minutos de distancia (inclusivo).

Nos limites a regra prefere falso negativo a falso positivo.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import TYPE_CHECKING

from app.domain.school_event import AllDayEvent, TimedEvent
from app.domain.sync_report import DuplicateCheck
from app.services.title_similarity import title_similarity

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from app.domain.school_event import EventRecord

MAX_DATE_DISTANCE = timedelta(days=1)
MIN_TITLE_SIMILARITY = 85
MAX_START_DISTANCE = timedelta(minutes=120)


def start_date_of(event: EventRecord) -> date | None:
    """Data de inicio do evento, qualquer que seja a variante."""
    if isinstance(event, AllDayEvent):
        return event.start_date
    if isinstance(event, TimedEvent):
        return event.start.date()
    return None


def start_instant_of(event: EventRecord) -> datetime | None:
    """Instante de inicio; eventos de dia inteiro nao tem."""
    return event.start if isinstance(event, TimedEvent) else None


def events_match(a: EventRecord, b: EventRecord) -> bool:
    """Decide se dois registros representam o mesmo evento real."""
    date_a = start_date_of(a)
    date_b = start_date_of(b)
    if date_a is None or date_b is None:
        return False
    if abs(date_a - date_b) > MAX_DATE_DISTANCE:
        return False

    if title_similarity(a.title, b.title) <= MIN_TITLE_SIMILARITY:
        return False

    if a.all_day or b.all_day:
        return True

    instant_a = start_instant_of(a)
    instant_b = start_instant_of(b)
    if instant_a is None or instant_b is None:
        return False
    return abs(instant_a - instant_b) <= MAX_START_DISTANCE


def is_duplicate(candidate: EventRecord, existing: Iterable[EventRecord]) -> bool:
    """True se algum evento existente casa com o candidato."""
    return any(events_match(candidate, event) for event in existing)


def check_duplicates(
    candidates: Sequence[EventRecord],
    existing: Sequence[EventRecord],
) -> list[DuplicateCheck]:
    """Marca cada candidato (na ordem de entrada) como duplicado ou nao."""
    snapshot = tuple(existing)
    return [
        DuplicateCheck(candidate=candidate, is_duplicate=is_duplicate(candidate, snapshot))
        for candidate in candidates
    ]


__all__ = [
    "MAX_DATE_DISTANCE",
    "MAX_START_DISTANCE",
    "MIN_TITLE_SIMILARITY",
    "check_duplicates",
    "events_match",
    "is_duplicate",
    "start_date_of",
    "start_instant_of",
]
