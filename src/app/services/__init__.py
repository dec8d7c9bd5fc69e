"""Serviços de aplicação.

Unidades reutilizáveis de orquestração (sem IO direto).
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.duplicate_matcher import check_duplicates, events_match, is_duplicate
from app.services.event_normalizer import get_reminders, normalize, normalize_candidates
from app.services.sync_orchestrator import EventSyncOrchestrator
from app.services.title_similarity import title_similarity

__all__ = [
    "EventSyncOrchestrator",
    "check_duplicates",
    "events_match",
    "get_reminders",
    "is_duplicate",
    "normalize",
    "normalize_candidates",
    "title_similarity",
]
