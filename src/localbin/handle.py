# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Ownership wrapper around one started child process."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(slots=True)
class ProcessHandle:
    """A child process, or the OS error raised while trying to create it.

    Exactly one of ``process`` and ``spawn_error`` is set. The handle is owned
    by the caller that started it until its terminal event has been consumed.
    """

    argv: tuple[str, ...]
    process: asyncio.subprocess.Process | None = None
    spawn_error: OSError | None = None

    def __post_init__(self) -> None:
        if (self.process is None) == (self.spawn_error is None):
            raise ValueError("ProcessHandle requires exactly one of process or spawn_error")

    @classmethod
    def started(cls, argv: Sequence[str], process: asyncio.subprocess.Process) -> ProcessHandle:
        """Return a handle owning ``process``."""

        return cls(argv=tuple(argv), process=process)

    @classmethod
    def failed(cls, argv: Sequence[str], error: OSError) -> ProcessHandle:
        """Return a handle recording that ``argv`` could not be started."""

        return cls(argv=tuple(argv), spawn_error=error)

    @property
    def pid(self) -> int | None:
        """Return the child's process id, or ``None`` when it never started."""

        return self.process.pid if self.process is not None else None

    @property
    def stdout(self) -> asyncio.StreamReader | None:
        """Return the child's standard output reader, if a child was started."""

        return self.process.stdout if self.process is not None else None

    @property
    def stderr(self) -> asyncio.StreamReader | None:
        """Return the child's standard error reader, if a child was started."""

        return self.process.stderr if self.process is not None else None

    async def wait(self) -> int:
        """Wait for the terminal event and return the raw return code.

        Raises:
            RuntimeError: If the process never started.
        """

        if self.process is None:
            raise RuntimeError(f"process {self.argv[0] if self.argv else '<empty>'} was never started")
        return await self.process.wait()


__all__ = ["ProcessHandle"]
