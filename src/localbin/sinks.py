# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Destinations for output streamed from child processes."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Literal, Protocol, runtime_checkable

from rich.console import Console

from .constants import OUTPUT_LOGGER_NAME

StreamName = Literal["stdout", "stderr"]


@runtime_checkable
class OutputSink(Protocol):
    """Receive text produced by a child process as it arrives."""

    def info(self, text: str) -> None:
        """Handle one line of standard output."""
        ...

    def error(self, text: str) -> None:
        """Handle one line of standard error or a fatal message."""
        ...


class LoggingSink:
    """Forward output lines to a :mod:`logging` logger."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(OUTPUT_LOGGER_NAME)

    def info(self, text: str) -> None:
        self._logger.info("%s", text)

    def error(self, text: str) -> None:
        self._logger.error("%s", text)


class ConsoleSink:
    """Render output lines on Rich consoles, errors highlighted on stderr."""

    def __init__(self, out: Console | None = None, err: Console | None = None) -> None:
        self._out = out or Console(soft_wrap=True, highlight=False)
        self._err = err or Console(stderr=True, soft_wrap=True, highlight=False)

    def info(self, text: str) -> None:
        self._out.print(text, markup=False, emoji=False)

    def error(self, text: str) -> None:
        self._err.print(text, style="red", markup=False, emoji=False)


@dataclass(slots=True)
class RecordingSink:
    """Keep every received line in memory, preserving arrival order."""

    lines: list[tuple[StreamName, str]] = field(default_factory=list)

    def info(self, text: str) -> None:
        self.lines.append(("stdout", text))

    def error(self, text: str) -> None:
        self.lines.append(("stderr", text))

    @property
    def stdout(self) -> list[str]:
        """Return the lines received on the info channel."""

        return [text for stream, text in self.lines if stream == "stdout"]

    @property
    def stderr(self) -> list[str]:
        """Return the lines received on the error channel."""

        return [text for stream, text in self.lines if stream == "stderr"]


__all__ = ["ConsoleSink", "LoggingSink", "OutputSink", "RecordingSink", "StreamName"]
