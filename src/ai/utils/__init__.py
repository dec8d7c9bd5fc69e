"""Utilitários de IA.

Re-exporta parsers de resposta de LLM.
"""

from ai.utils._json_extractor import extract_event_items, extract_json_from_response

__all__ = [
    "extract_event_items",
    "extract_json_from_response",
]
