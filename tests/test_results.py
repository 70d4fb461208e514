# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for execution results and the failure taxonomy."""

from __future__ import annotations

import signal
from pathlib import Path

import pytest

from localbin import (
    ExecutionResult,
    FailureReason,
    NonZeroExitError,
    SignalTerminatedError,
    SpawnError,
    UnresolvedCommandError,
)


def test_success_result() -> None:
    result = ExecutionResult.success("eslint")

    assert result.ok
    assert result.reason is None
    assert result.message == ""
    result.unwrap()


@pytest.mark.parametrize(
    ("failure", "reason", "fragment"),
    [
        (UnresolvedCommandError("eslint", Path("/srv/app")), FailureReason.UNRESOLVED, "Could not resolve eslint"),
        (SpawnError("eslint", PermissionError("denied")), FailureReason.SPAWN_ERROR, "failed to start"),
        (
            SignalTerminatedError("eslint", signal.SIGTERM),
            FailureReason.SIGNAL_TERMINATED,
            "unexpected signal: SIGTERM.",
        ),
        (NonZeroExitError("eslint", 2), FailureReason.NON_ZERO_EXIT, "unexpected code: 2."),
    ],
)
def test_failure_results(failure: Exception, reason: FailureReason, fragment: str) -> None:
    result = ExecutionResult.failed(failure)  # type: ignore[arg-type]

    assert not result.ok
    assert result.command == "eslint"
    assert result.reason is reason
    assert fragment in result.message
    with pytest.raises(type(failure)):
        result.unwrap()


def test_unknown_signal_number_has_fallback_name() -> None:
    error = SignalTerminatedError("tool", 999)

    assert error.signal_name == "SIG999"
    assert "SIG999" in str(error)
