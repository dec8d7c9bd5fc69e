"""Módulo AI do School Calendar Sync.

Prompt e parsing para extração de eventos de avisos escolares via LLM.
O client concreto fica em app/infra/ai.
"""

from ai.prompts import EVENT_EXTRACTION_SYSTEM, format_event_extraction_prompt
from ai.utils import extract_event_items, extract_json_from_response

__all__ = [
    "EVENT_EXTRACTION_SYSTEM",
    "extract_event_items",
    "extract_json_from_response",
    "format_event_extraction_prompt",
]
