"""Implementações concretas de IO para IA.

app/infra: implementações de IO; ai/ não faz IO direto.
"""

from app.infra.ai.event_extractor_client import EventExtractorClient

__all__ = ["EventExtractorClient"]
