# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Terminal outcome of a launched command."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from .errors import (
    ExecutionFailure,
    NonZeroExitError,
    SignalTerminatedError,
    SpawnError,
    UnresolvedCommandError,
)


class FailureReason(StrEnum):
    """Tag describing why a command did not succeed."""

    UNRESOLVED = "unresolved"
    SPAWN_ERROR = "spawn-error"
    SIGNAL_TERMINATED = "signal-terminated"
    NON_ZERO_EXIT = "non-zero-exit"


_REASONS: dict[type[ExecutionFailure], FailureReason] = {
    UnresolvedCommandError: FailureReason.UNRESOLVED,
    SpawnError: FailureReason.SPAWN_ERROR,
    SignalTerminatedError: FailureReason.SIGNAL_TERMINATED,
    NonZeroExitError: FailureReason.NON_ZERO_EXIT,
}


@dataclass(frozen=True, slots=True)
class ExecutionResult:
    """Either a success or a failure carrying the typed reason.

    Attributes:
        command: Logical command name that was launched.
        failure: ``None`` on success, otherwise the failure describing the outcome.
    """

    command: str
    failure: ExecutionFailure | None = None

    @classmethod
    def success(cls, command: str) -> ExecutionResult:
        """Return a successful result for ``command``."""

        return cls(command=command)

    @classmethod
    def failed(cls, failure: ExecutionFailure) -> ExecutionResult:
        """Return a failed result wrapping ``failure``."""

        return cls(command=failure.command, failure=failure)

    @property
    def ok(self) -> bool:
        """Return ``True`` when the command exited cleanly."""

        return self.failure is None

    @property
    def reason(self) -> FailureReason | None:
        """Return the failure tag, or ``None`` for a success."""

        if self.failure is None:
            return None
        for failure_type, reason in _REASONS.items():
            if isinstance(self.failure, failure_type):
                return reason
        raise TypeError(f"Unknown failure type: {type(self.failure).__name__}")

    @property
    def message(self) -> str:
        """Return the failure message, or an empty string for a success."""

        return str(self.failure) if self.failure is not None else ""

    def unwrap(self) -> None:
        """Raise the stored failure when the result is not a success.

        Raises:
            ExecutionFailure: The failure describing why the command did not succeed.
        """

        if self.failure is not None:
            raise self.failure


__all__ = ["ExecutionResult", "FailureReason"]
