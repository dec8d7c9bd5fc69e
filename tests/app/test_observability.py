"""Testes de correlation_id e metricas via log estruturado."""

from __future__ import annotations

import logging

import pytest

from app.observability import correlation_scope, get_correlation_id, record_sync_outcome


def test_correlation_scope_sets_and_restores() -> None:
    assert get_correlation_id() == ""
    with correlation_scope("batch-1") as outer:
        assert outer == "batch-1"
        with correlation_scope() as inner:
            assert inner
            assert inner != "batch-1"
            assert get_correlation_id() == inner
        assert get_correlation_id() == "batch-1"
    assert get_correlation_id() == ""


def test_record_sync_outcome_logs_counters(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="app.observability.metrics"):
        record_sync_outcome(created=2, duplicates=1, failed=1, correlation_id="batch-9")

    record = next(r for r in caplog.records if r.getMessage() == "metric_sync_outcome")
    assert record.created_count == 2
    assert record.duplicate_count == 1
    assert record.failed_count == 1
    assert record.correlation_id == "batch-9"
