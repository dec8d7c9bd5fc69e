"""Normalizacao deterministica de candidatos extraidos (sem LLM).

Converte o output solto do extrator (data, hora, hora de fim, flag de dia
inteiro) em EventRecord com inicio/fim resolvidos no fuso configurado.

Regras:
- `date` e sempre data local (YYYY-MM-DD), sem conversao de fuso.
- Com `time` e sem `is_all_day`: evento com horario; fim = `end_time` ou +1h.
- Caso contrario: evento de dia inteiro na propria data.
- Nome da crianca prefixa o titulo uma unica vez, se ainda nao presente.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime, time, timedelta
from typing import TYPE_CHECKING, Any
from zoneinfo import ZoneInfo

from pydantic import ValidationError

from app.domain.school_event import (
    AllDayEvent,
    EventRecord,
    EventType,
    RawCandidate,
    Reminder,
    TimedEvent,
)
from utils.errors import MalformedCandidateError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE = "America/New_York"
DEFAULT_DURATION = timedelta(hours=1)

_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
_TIME_PATTERN = re.compile(r"(?P<hour>\d{1,2}):(?P<minute>\d{2})(?::[0-5]\d)?", re.ASCII)

_HOUR = 60
_DAY = 24 * _HOUR

_REMINDER_MINUTES: dict[EventType, tuple[int, ...]] = {
    EventType.TEST: (_DAY, 2 * _DAY),
    EventType.ASSIGNMENT: (2 * _DAY,),
    EventType.FIELDTRIP: (2 * _DAY, 12 * _HOUR),
    EventType.HALFDAY: (_HOUR,),
    EventType.CONFERENCE: (_DAY,),
    EventType.PERFORMANCE: (_DAY, 2 * _HOUR),
    EventType.HOLIDAY: (_DAY,),
}
_DEFAULT_REMINDER_MINUTES: tuple[int, ...] = (_DAY,)


def get_reminders(event_type: EventType | str | None) -> tuple[Reminder, ...]:
    """Retorna lembretes popup para o tipo; tipos sem mapa recebem 24h."""
    minutes = _REMINDER_MINUTES.get(EventType.coerce(event_type), _DEFAULT_REMINDER_MINUTES)
    return tuple(Reminder(minutes=value) for value in minutes)


def disambiguate_title(title: str, child_name: str) -> str:
    """Prefixa `"{child_name} - "` quando o nome ainda nao aparece no titulo."""
    name = (child_name or "").strip()
    if not name or name.lower() in title.lower():
        return title
    return f"{name} - {title}"


def normalize(
    raw: RawCandidate | Mapping[str, Any],
    child_name: str = "",
    *,
    timezone: str | ZoneInfo = DEFAULT_TIMEZONE,
) -> EventRecord:
    """Converte candidato bruto em EventRecord.

    Raises:
        MalformedCandidateError: titulo/data ausentes ou data/hora invalidas.
    """
    candidate = _coerce_raw(raw)
    if candidate.title is None:
        raise MalformedCandidateError("missing_title")
    if candidate.date is None:
        raise MalformedCandidateError("missing_date")

    day = _parse_date(candidate.date)
    event_type = EventType.coerce(candidate.event_type)
    common: dict[str, Any] = {
        "title": disambiguate_title(candidate.title, child_name),
        "description": candidate.description or "",
        "child_name": (child_name or "").strip(),
        "event_type": event_type,
        "reminders": get_reminders(event_type),
    }

    if candidate.time is None or candidate.is_all_day:
        return AllDayEvent(start_date=day, end_date=day, **common)

    zone = timezone if isinstance(timezone, ZoneInfo) else ZoneInfo(timezone)
    start = datetime.combine(day, _parse_time(candidate.time), tzinfo=zone)
    end = start + DEFAULT_DURATION
    if candidate.end_time is not None:
        explicit_end = datetime.combine(day, _parse_time(candidate.end_time), tzinfo=zone)
        # Fim anterior ao inicio quebraria o invariante; mantemos a duracao padrao.
        if explicit_end >= start:
            end = explicit_end
    return TimedEvent(start=start, end=end, **common)


def normalize_candidates(
    raws: Iterable[RawCandidate | Mapping[str, Any]],
    child_name: str = "",
    *,
    timezone: str | ZoneInfo = DEFAULT_TIMEZONE,
) -> list[EventRecord]:
    """Normaliza um lote, descartando (e logando) candidatos malformados."""
    events: list[EventRecord] = []
    for index, raw in enumerate(raws):
        try:
            events.append(normalize(raw, child_name, timezone=timezone))
        except MalformedCandidateError as exc:
            logger.warning(
                "event_candidate_malformed",
                extra={
                    "component": "event_normalizer",
                    "action": "normalize",
                    "result": "discarded",
                    "index": index,
                    "reason": exc.reason,
                },
            )
    return events


def _coerce_raw(raw: RawCandidate | Mapping[str, Any]) -> RawCandidate:
    if isinstance(raw, RawCandidate):
        return raw
    try:
        return RawCandidate.model_validate(dict(raw))
    except (TypeError, ValueError, ValidationError) as exc:
        raise MalformedCandidateError("invalid_candidate_payload") from exc


def _parse_date(value: str) -> date:
    # Apenas YYYY-MM-DD: semana ISO e formato basico sao rejeitados.
    if not _DATE_PATTERN.fullmatch(value):
        raise MalformedCandidateError("invalid_date")
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise MalformedCandidateError("invalid_date") from exc


def _parse_time(value: str) -> time:
    match = _TIME_PATTERN.fullmatch(value)
    if match is None:
        raise MalformedCandidateError("invalid_time")
    try:
        # Segundos opcionais ("08:00:00") sao ignorados.
        return time(hour=int(match.group("hour")), minute=int(match.group("minute")))
    except ValueError as exc:
        raise MalformedCandidateError("invalid_time") from exc
