"""Tests for the error hierarchy."""

from __future__ import annotations

import pytest

from docdelta.errors import (
    DocDeltaAuthError,
    DocDeltaConflictError,
    DocDeltaError,
    DocDeltaNetworkError,
    DocDeltaNotFoundError,
    DocDeltaPermissionError,
    DocDeltaPersistenceError,
    DocDeltaReplayError,
    DocDeltaServerError,
    DocDeltaValidationError,
    ErrorCode,
)


class TestErrorHierarchy:
    @pytest.mark.parametrize(
        ("error_cls", "code"),
        [
            (DocDeltaValidationError, ErrorCode.VALIDATION_ERROR),
            (DocDeltaAuthError, ErrorCode.AUTH_ERROR),
            (DocDeltaPermissionError, ErrorCode.PERMISSION_ERROR),
            (DocDeltaNotFoundError, ErrorCode.NOT_FOUND),
            (DocDeltaConflictError, ErrorCode.CONFLICT),
            (DocDeltaServerError, ErrorCode.SERVER_ERROR),
            (DocDeltaNetworkError, ErrorCode.NETWORK_ERROR),
        ],
    )
    def test_persistence_subclasses(self, error_cls, code):
        err = error_cls(message="failed", context={"status_code": 500})
        assert isinstance(err, DocDeltaPersistenceError)
        assert isinstance(err, DocDeltaError)
        assert err.code == code
        assert err.message == "failed"
        assert str(err) == "failed"
        assert err.context == {"status_code": 500}

    def test_persistence_error_defaults(self):
        err = DocDeltaPersistenceError()
        assert err.code == ErrorCode.PERSISTENCE_ERROR
        assert err.message == "Persistence error"
        assert err.context == {}

    def test_replay_error_is_not_a_persistence_error(self):
        err = DocDeltaReplayError(message="cannot locate section")
        assert err.code == ErrorCode.REPLAY_ERROR
        assert not isinstance(err, DocDeltaPersistenceError)

    def test_cause_is_chained(self):
        cause = OSError("reset")
        err = DocDeltaNetworkError(message="network", cause=cause)
        assert err.cause is cause
        assert err.__cause__ is cause

    def test_repr_includes_context(self):
        err = DocDeltaConflictError(message="stale", context={"status_code": 409})
        text = repr(err)
        assert text.startswith("DocDeltaConflictError(")
        assert "'status_code': 409" in text

    def test_error_code_is_string_enum(self):
        assert ErrorCode.NOT_FOUND == "NOT_FOUND"
