"""correlation_id por lote de sincronizacao.

Cada execucao de caso de uso roda dentro de `correlation_scope`, de modo
que todos os logs do lote (extracao, listagem, criacoes) compartilham o
mesmo id. ContextVar garante isolamento entre tasks asyncio.

Uso:
    from app.observability import correlation_scope, get_correlation_id

    with correlation_scope(batch_id):
        report = await orchestrator.synchronize(candidates, existing)
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do lote atual ou string vazia fora de um lote."""
    return _correlation_id.get()


def generate_correlation_id() -> str:
    return uuid.uuid4().hex


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id; None gera um novo id.

    Returns:
        Token para `reset_correlation_id`.
    """
    return _correlation_id.set(correlation_id or generate_correlation_id())


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Escopo de um lote: define o id na entrada e restaura o anterior na saida."""
    token = set_correlation_id(correlation_id)
    try:
        yield _correlation_id.get()
    finally:
        reset_correlation_id(token)
