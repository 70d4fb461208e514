# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Turn a child process lifecycle into a single :class:`ExecutionResult`."""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Callable
from typing import Final

from .errors import ExecutionFailure, NonZeroExitError, SignalTerminatedError, SpawnError
from .handle import ProcessHandle
from .results import ExecutionResult
from .sinks import OutputSink

LOGGER = logging.getLogger(__name__)

_LINE_ENDINGS: Final[str] = "\r\n"
_READ_SIZE: Final[int] = 64 * 1024
# Longer lines are forwarded in pieces of this size.
_MAX_LINE: Final[int] = 1024 * 1024


def _decode(chunk: bytes | bytearray) -> str:
    """Return ``chunk`` as text without its trailing line break."""

    return chunk.decode(errors="replace").rstrip(_LINE_ENDINGS)


class _Completion:
    """Single-assignment outcome for one wait call; later resolutions are ignored."""

    def __init__(self, command: str) -> None:
        """Bind the outcome to ``command`` and the running event loop."""

        self.command = command
        self._future: asyncio.Future[ExecutionResult] = asyncio.get_running_loop().create_future()

    @property
    def done(self) -> bool:
        """Return ``True`` once a result has been recorded."""

        return self._future.done()

    def resolve(self, result: ExecutionResult) -> None:
        """Record ``result`` unless an earlier one was already recorded."""

        if self._future.done():
            LOGGER.debug("ignoring second resolution for %s: %s", self.command, result)
            return
        self._future.set_result(result)

    async def result(self) -> ExecutionResult:
        """Wait for and return the recorded result."""

        return await self._future


class CompletionPromisifier:
    """Stream a child's output to a sink and classify how it ended."""

    def __init__(self, sink: OutputSink) -> None:
        self._sink = sink

    async def wait(self, command: str, handle: ProcessHandle) -> ExecutionResult:
        """Wait for ``handle`` to finish and return its outcome.

        Standard output lines go to ``sink.info`` and standard error lines to
        ``sink.error`` while the process runs. A spawn failure short-circuits to
        :class:`SpawnError`; otherwise the terminal event fires only after both
        streams are drained.

        Args:
            command: Logical command name used in failure messages.
            handle: Handle returned by one of the launcher's spawn operations.

        Returns:
            ExecutionResult: Success, or the typed failure.
        """

        completion = _Completion(command)
        if handle.spawn_error is not None:
            self._on_spawn_error(completion, handle.spawn_error)
            return await completion.result()

        try:
            await asyncio.gather(
                self._pump(handle.stdout, self._on_stdout),
                self._pump(handle.stderr, self._on_stderr),
            )
        finally:
            returncode = await handle.wait()
        self._on_exit(completion, returncode)
        return await completion.result()

    def _on_stdout(self, text: str) -> None:
        self._sink.info(text)

    def _on_stderr(self, text: str) -> None:
        self._sink.error(text)

    def _on_spawn_error(self, completion: _Completion, error: OSError) -> None:
        LOGGER.debug("%s failed to start: %s", completion.command, error)
        completion.resolve(ExecutionResult.failed(SpawnError(completion.command, error)))

    def _on_exit(self, completion: _Completion, returncode: int) -> None:
        failure: ExecutionFailure | None
        if returncode < 0 and os.name != "nt":
            failure = SignalTerminatedError(completion.command, -returncode)
        elif returncode == 0:
            failure = None
        else:
            failure = NonZeroExitError(completion.command, returncode)
        LOGGER.debug("%s finished with return code %s", completion.command, returncode)
        if failure is None:
            completion.resolve(ExecutionResult.success(completion.command))
        else:
            completion.resolve(ExecutionResult.failed(failure))

    @staticmethod
    async def _pump(stream: asyncio.StreamReader | None, handler: Callable[[str], None]) -> None:
        if stream is None:
            return
        pending = bytearray()
        while chunk := await stream.read(_READ_SIZE):
            pending.extend(chunk)
            *lines, rest = pending.split(b"\n")
            for line in lines:
                handler(_decode(line))
            pending = bytearray(rest)
            while len(pending) >= _MAX_LINE:
                handler(_decode(pending[:_MAX_LINE]))
                del pending[:_MAX_LINE]
        if pending:
            handler(_decode(pending))


__all__ = ["CompletionPromisifier"]
