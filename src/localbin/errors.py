# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Failure taxonomy for launched tools."""

from __future__ import annotations

import signal as _signal
from pathlib import Path


class ExecutionFailure(RuntimeError):
    """Base class for every way a launched command can fail."""

    def __init__(self, command: str, message: str) -> None:
        """Initialise the failure with the logical command name.

        Args:
            command: Logical command name requested by the caller.
            message: Human-readable description of the failure.
        """

        super().__init__(message)
        self.command = command


class UnresolvedCommandError(ExecutionFailure):
    """Raised when no binary exists for the command along the ancestor chain."""

    def __init__(self, command: str, bin_root: Path) -> None:
        super().__init__(command, f"Could not resolve {command} relative to {bin_root}")
        self.bin_root = bin_root


class SpawnError(ExecutionFailure):
    """The operating system refused to create the child process."""

    def __init__(self, command: str, cause: OSError) -> None:
        super().__init__(command, f"{command} failed to start: {cause}")
        self.cause = cause


class SignalTerminatedError(ExecutionFailure):
    """The child process was killed by a signal instead of exiting."""

    def __init__(self, command: str, signum: int) -> None:
        super().__init__(command, f"{command} exited with an unexpected signal: {signal_name(signum)}.")
        self.signal = signum

    @property
    def signal_name(self) -> str:
        """Return the symbolic name of the terminating signal."""

        return signal_name(self.signal)


class NonZeroExitError(ExecutionFailure):
    """The child process exited normally with a failing status."""

    def __init__(self, command: str, returncode: int) -> None:
        super().__init__(command, f"{command} exited with an unexpected code: {returncode}.")
        self.returncode = returncode


def signal_name(signum: int) -> str:
    """Return the symbolic name for ``signum`` (``SIGTERM`` for ``15``).

    Args:
        signum: Numeric signal identifier.

    Returns:
        str: Symbolic signal name, or ``SIG<n>`` when the platform does not know it.
    """

    try:
        return _signal.Signals(signum).name
    except ValueError:
        return f"SIG{signum}"


__all__ = [
    "ExecutionFailure",
    "NonZeroExitError",
    "SignalTerminatedError",
    "SpawnError",
    "UnresolvedCommandError",
    "signal_name",
]
