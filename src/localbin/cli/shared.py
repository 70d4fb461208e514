# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (errors, exit codes, config loading)."""

from __future__ import annotations

from pathlib import Path

from ..config import LauncherConfig, LauncherConfigError, load_launcher_config
from ..constants import EXIT_SIGNAL_BASE, EXIT_SPAWN_ERROR, EXIT_UNRESOLVED
from ..errors import NonZeroExitError, SignalTerminatedError, SpawnError, UnresolvedCommandError
from ..logging import configure_logging
from ..results import ExecutionResult


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


def load_cli_config(root: Path, *, verbose: bool) -> LauncherConfig:
    """Load configuration for ``root`` and configure package logging.

    Raises:
        CLIError: If the configuration is invalid.
    """

    try:
        config = load_launcher_config(root)
    except LauncherConfigError as exc:
        raise CLIError(str(exc), exit_code=2) from exc
    configure_logging("DEBUG" if verbose else config.log_level)
    return config


def parse_env_pairs(pairs: list[str] | None) -> dict[str, str]:
    """Return ``KEY=VALUE`` pairs as a mapping.

    Raises:
        CLIError: If a pair lacks ``=`` or has an empty key.
    """

    env: dict[str, str] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise CLIError(f"Invalid --env value '{pair}'; expected KEY=VALUE", exit_code=2)
        env[key] = value
    return env


def exit_code_for(result: ExecutionResult) -> int:
    """Map ``result`` onto a shell-style exit status."""

    failure = result.failure
    if failure is None:
        return 0
    if isinstance(failure, NonZeroExitError):
        return failure.returncode
    if isinstance(failure, SignalTerminatedError):
        return EXIT_SIGNAL_BASE + failure.signal
    if isinstance(failure, UnresolvedCommandError):
        return EXIT_UNRESOLVED
    if isinstance(failure, SpawnError):
        return EXIT_SPAWN_ERROR
    return 1


__all__ = ["CLIError", "exit_code_for", "load_cli_config", "parse_env_pairs"]
