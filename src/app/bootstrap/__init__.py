"""Bootstrap da aplicação - inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings
e conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, get_sync_use_case

    # Na inicialização do serviço
    initialize_app()

    report = await get_sync_use_case().execute(text, "Emma", "primary")
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_openai_settings

if TYPE_CHECKING:
    from app.use_cases.calendar_sync import (
        CheckDuplicatesUseCase,
        ListCalendarsUseCase,
        PreviewNoticeUseCase,
        SyncNoticeUseCase,
    )

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação com logging estruturado e validação de settings.

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )
    validate_runtime_settings()


def initialize_test_app() -> None:
    """Inicializa a aplicação para testes (DEBUG, sem validação estrita)."""
    configure_logging(
        level="DEBUG",
        service_name=f"{get_base_settings().service_name}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    from config.settings import get_calendar_settings

    base = get_base_settings()
    environment = base.environment
    errors: list[str] = [f"base: {error}" for error in base.validate()]

    openai_errors = get_openai_settings().validate()
    errors.extend(f"openai: {error}" for error in openai_errors)

    calendar = get_calendar_settings()
    if calendar.calendar_enabled and not calendar.google_service_account_json:
        errors.append("calendar: GOOGLE_SERVICE_ACCOUNT_JSON não configurado")

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


# ──────────────────────────────────────────────────────────────────────────────
# Use case getters (lazy initialization com cache)
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_preview_use_case() -> PreviewNoticeUseCase:
    """Obtém use case de preview (singleton)."""
    from app.bootstrap.dependencies import create_preview_use_case
    return create_preview_use_case()


@lru_cache(maxsize=1)
def get_check_duplicates_use_case() -> CheckDuplicatesUseCase:
    """Obtém use case de checagem de duplicados (singleton)."""
    from app.bootstrap.dependencies import create_check_duplicates_use_case
    return create_check_duplicates_use_case()


@lru_cache(maxsize=1)
def get_sync_use_case() -> SyncNoticeUseCase:
    """Obtém use case de sincronização (singleton)."""
    from app.bootstrap.dependencies import create_sync_use_case
    return create_sync_use_case()


@lru_cache(maxsize=1)
def get_list_calendars_use_case() -> ListCalendarsUseCase:
    """Obtém use case de listagem de calendários (singleton)."""
    from app.bootstrap.dependencies import create_list_calendars_use_case
    return create_list_calendars_use_case()
