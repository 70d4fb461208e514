# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve and run tools installed in a project's ``node_modules/.bin``."""

from __future__ import annotations

from .completion import CompletionPromisifier
from .config import LauncherConfig, LauncherConfigError, load_launcher_config
from .errors import (
    ExecutionFailure,
    NonZeroExitError,
    SignalTerminatedError,
    SpawnError,
    UnresolvedCommandError,
)
from .handle import ProcessHandle
from .launcher import Command, ProcessLauncher
from .options import ExecutionContext, LaunchOptions
from .resolver import BinaryResolver, resolve_bin
from .results import ExecutionResult, FailureReason
from .sinks import ConsoleSink, LoggingSink, OutputSink, RecordingSink

__all__ = [
    "BinaryResolver",
    "Command",
    "CompletionPromisifier",
    "ConsoleSink",
    "ExecutionContext",
    "ExecutionFailure",
    "ExecutionResult",
    "FailureReason",
    "LaunchOptions",
    "LauncherConfig",
    "LauncherConfigError",
    "LoggingSink",
    "NonZeroExitError",
    "OutputSink",
    "ProcessHandle",
    "ProcessLauncher",
    "RecordingSink",
    "SignalTerminatedError",
    "SpawnError",
    "UnresolvedCommandError",
    "load_launcher_config",
    "resolve_bin",
]
