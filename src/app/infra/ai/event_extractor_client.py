"""Cliente OpenAI para extracao de eventos de avisos escolares.

Implementacao de IO - pertence a app/infra; prompt e parsing ficam em ai/.
Qualquer falha do provider vira lista vazia (zero candidatos).
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from openai import AsyncOpenAI
from pydantic import ValidationError

from ai.prompts import EVENT_EXTRACTION_SYSTEM, format_event_extraction_prompt
from ai.utils import extract_event_items
from app.domain.school_event import RawCandidate
from config.logging import log_fallback
from config.settings.ai.openai import OpenAISettings, get_openai_settings
from config.settings.calendar import get_calendar_settings

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

_COMPONENT = "event_extractor"


class EventExtractorClient:
    """Cliente LLM que transforma texto livre em candidatos brutos."""

    __slots__ = ("_client", "_clock", "_max_tokens", "_model", "_today", "_timeout_seconds", "_zone")

    def __init__(
        self,
        *,
        settings: OpenAISettings | None = None,
        api_key: str | None = None,
        model: str | None = None,
        timeout_seconds: float | None = None,
        client: AsyncOpenAI | None = None,
        today: Callable[[], str] | None = None,
        timezone: str | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        cfg = settings or get_openai_settings()
        self._model = model or cfg.model or "gpt-4o-mini"
        self._max_tokens = cfg.max_tokens
        self._timeout_seconds = float(timeout_seconds or cfg.timeout_seconds)
        self._today = today
        self._zone = ZoneInfo(timezone or get_calendar_settings().calendar_timezone)
        self._clock = clock or _utc_now
        if client is not None:
            self._client = client
        else:
            self._client = AsyncOpenAI(
                api_key=api_key or cfg.api_key,
                timeout=self._timeout_seconds,
                max_retries=cfg.max_retries,
            )

    async def extract(self, text: str, child_name: str) -> list[RawCandidate]:
        """Executa chamada OpenAI e retorna candidatos parseados."""
        if not text or not text.strip():
            return []

        user_prompt = format_event_extraction_prompt(
            notice_text=text,
            child_name=child_name,
            today=self._current_date(),
        )
        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": EVENT_EXTRACTION_SYSTEM},
                    {"role": "user", "content": user_prompt},
                ],
                response_format={"type": "json_object"},
                temperature=0.0,
                max_tokens=self._max_tokens,
            )
        except Exception as exc:
            logger.warning(
                "event_extractor_openai_error",
                extra={"component": _COMPONENT, "error_type": type(exc).__name__},
            )
            log_fallback(logger, _COMPONENT, reason="openai_error")
            return []

        content = None
        try:
            content = response.choices[0].message.content if response.choices else None
        except (AttributeError, IndexError):
            content = None

        if not content:
            logger.warning("event_extractor_empty_response", extra={"component": _COMPONENT})
            return []

        items = extract_event_items(content)
        if items is None:
            logger.warning("event_extractor_parse_failed", extra={"component": _COMPONENT})
            log_fallback(logger, _COMPONENT, reason="parse_failed")
            return []

        candidates: list[RawCandidate] = []
        for index, item in enumerate(items):
            try:
                candidates.append(RawCandidate.model_validate(item))
            except ValidationError:
                logger.warning(
                    "event_extractor_item_invalid",
                    extra={"component": _COMPONENT, "index": index},
                )
        logger.info(
            "event_extractor_completed",
            extra={"component": _COMPONENT, "result": "ok", "candidates": len(candidates)},
        )
        return candidates

    def _current_date(self) -> str:
        # Datas relativas do aviso sao resolvidas no fuso do calendario.
        if self._today is not None:
            return self._today()
        return self._clock().astimezone(self._zone).date().isoformat()


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)
