"""Prompts do módulo AI.

Arquivos:
- event_extraction_prompt.py: prompt do extrator de eventos escolares

Parsers: ai/utils/_json_extractor.py
"""

from ai.prompts.event_extraction_prompt import (
    EVENT_EXTRACTION_SYSTEM,
    EVENT_EXTRACTION_USER_TEMPLATE,
    format_event_extraction_prompt,
)

__all__ = [
    "EVENT_EXTRACTION_SYSTEM",
    "EVENT_EXTRACTION_USER_TEMPLATE",
    "format_event_extraction_prompt",
]
