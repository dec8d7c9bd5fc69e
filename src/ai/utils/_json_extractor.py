"""Extrator de JSON de respostas de LLM.

Extrai JSON de respostas brutas que podem conter markdown ou texto adicional.
"""

from __future__ import annotations

import json
import re
from typing import Any

_ARRAY_PATTERN = re.compile(r"\[[\s\S]*\]")


def _strip_code_fences(response: str) -> str:
    text = response.strip()
    if text.startswith("```json"):
        text = text[7:]
    elif text.startswith("```"):
        text = text[3:]
    if text.endswith("```"):
        text = text[:-3]
    return text.strip()


def extract_json_from_response(response: str) -> dict[str, Any] | None:
    """Extrai e valida objeto JSON de resposta de LLM.

    Trata casos comuns:
    - Resposta envolvida em markdown code blocks
    - Whitespace extra
    - JSON embutido em texto

    Args:
        response: Resposta bruta da LLM

    Returns:
        Dict extraído do JSON ou None se não encontrado
    """
    if not response or not isinstance(response, str):
        return None

    text = _strip_code_fences(response)
    try:
        data = json.loads(text)
        if isinstance(data, dict):
            return data
    except json.JSONDecodeError:
        pass

    start, end = text.find("{"), text.rfind("}")
    if start == -1 or end <= start:
        return None
    try:
        data = json.loads(text[start : end + 1])
    except json.JSONDecodeError:
        return None
    return data if isinstance(data, dict) else None


def extract_event_items(response: str) -> list[dict[str, Any]] | None:
    """Extrai a lista de eventos de uma resposta de LLM.

    Aceita `{"events": [...]}` ou um array JSON solto (com ou sem texto
    ao redor). Itens que nao sao objetos sao ignorados.

    Returns:
        Lista de dicts ou None se nenhum JSON utilizavel for encontrado.
    """
    if not response or not isinstance(response, str):
        return None

    text = _strip_code_fences(response)
    array_at, object_at = text.find("["), text.find("{")
    if array_at != -1 and (object_at == -1 or array_at < object_at):
        return _extract_array(text)

    data = extract_json_from_response(text)
    if data is None:
        return None
    events = data.get("events")
    return [item for item in events if isinstance(item, dict)] if isinstance(events, list) else None


def _extract_array(text: str) -> list[dict[str, Any]] | None:
    match = _ARRAY_PATTERN.search(text)
    if not match:
        return None
    try:
        loaded = json.loads(match.group(0))
    except json.JSONDecodeError:
        return None
    if not isinstance(loaded, list):
        return None
    return [item for item in loaded if isinstance(item, dict)]
