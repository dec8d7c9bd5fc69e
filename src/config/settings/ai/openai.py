"""Settings do extrator de eventos via OpenAI (chat completions, saida JSON)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

_TRUTHY = ("true", "1", "yes")


@dataclass(frozen=True)
class OpenAISettings:
    """Parametros da chamada de extracao.

    Attributes:
        api_key: OPENAI_API_KEY
        model: Modelo de chat usado na extracao
        timeout_seconds: Timeout por chamada
        max_retries: Retentativas do SDK antes de cair no fallback (zero eventos)
        max_tokens: Teto da resposta; avisos longos geram listas grandes
        enabled: Desligado, o bootstrap recusa montar o extrator
    """

    api_key: str = ""
    model: str = "gpt-4o-mini"
    timeout_seconds: float = 30.0
    max_retries: int = 3
    max_tokens: int = 4096
    enabled: bool = True

    def validate(self) -> list[str]:
        """Lista problemas de configuracao; vazia quando tudo ok."""
        errors: list[str] = []
        if self.enabled and not self.api_key:
            errors.append("OPENAI_API_KEY não configurado mas OPENAI_ENABLED=true")
        if not self.model:
            errors.append("OPENAI_MODEL não pode ser vazio")
        if self.timeout_seconds <= 0:
            errors.append("OPENAI_TIMEOUT_SECONDS deve ser > 0")
        if self.max_retries < 0:
            errors.append("OPENAI_MAX_RETRIES deve ser >= 0")
        if self.max_tokens <= 0:
            errors.append("OPENAI_MAX_TOKENS deve ser > 0")
        return errors


def _load_openai_from_env() -> OpenAISettings:
    return OpenAISettings(
        api_key=os.getenv("OPENAI_API_KEY", "").strip(),
        model=os.getenv("OPENAI_MODEL", "gpt-4o-mini").strip(),
        timeout_seconds=float(os.getenv("OPENAI_TIMEOUT_SECONDS", "30")),
        max_retries=int(os.getenv("OPENAI_MAX_RETRIES", "3")),
        max_tokens=int(os.getenv("OPENAI_MAX_TOKENS", "4096")),
        enabled=os.getenv("OPENAI_ENABLED", "true").strip().lower() in _TRUTHY,
    )


@lru_cache(maxsize=1)
def get_openai_settings() -> OpenAISettings:
    """Retorna instância cacheada de OpenAISettings."""
    return _load_openai_from_env()
