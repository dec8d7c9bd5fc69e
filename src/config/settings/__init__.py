"""Agregador de settings do School Calendar Sync.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# AI/LLM settings
from config.settings.ai import (
    OpenAISettings,
    get_openai_settings,
)

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Calendar settings
from config.settings.calendar import (
    CalendarSettings,
    get_calendar_settings,
)

__all__ = [
    "BaseSettings",
    "CalendarSettings",
    "Environment",
    "OpenAISettings",
    "get_base_settings",
    "get_calendar_settings",
    "get_openai_settings",
]
