from __future__ import annotations

"""
Unit tests for result models and their factories.
"""

from mkstruct.domain.result_models import (
    MaterializationResult,
    create_error_result,
    create_success_result,
    summarize,
)


def _result(kind: str, status: str) -> MaterializationResult:
    return MaterializationResult(kind=kind, relative_path="p", path="/b/p", status=status)


def test_summarize_counts_status_and_kind() -> None:
    """TC-01: Rejected entries are counted once and not attributed to a kind."""
    results = [
        _result("dir", "created"),
        _result("file", "created"),
        _result("file", "exists"),
        _result("file", "rejected"),
    ]

    assert summarize(results) == {
        "created": 2,
        "existing": 1,
        "rejected": 1,
        "directories": 1,
        "files": 2,
    }


def test_factories_set_status() -> None:
    """TC-02: Success and error factories differ only in status and message."""
    results = [_result("dir", "created")]

    ok = create_success_result("/b", False, results)
    failed = create_error_result("boom", "/b", True, results)

    assert ok.ok is True and ok.error == ""
    assert failed.ok is False and failed.error == "boom"
    assert failed.dry_run is True
    assert ok.summary == failed.summary

