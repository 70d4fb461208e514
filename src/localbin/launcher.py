# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Launch project-local tools and report how they finished."""

from __future__ import annotations

import asyncio
import logging
import os
import shlex
import subprocess
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from .completion import CompletionPromisifier
from .config import LauncherConfig
from .constants import PYTHON_SCRIPT_SUFFIX, WINDOWS_PLATFORM
from .errors import UnresolvedCommandError
from .handle import ProcessHandle
from .options import ExecutionContext, LaunchOptions, LaunchOverrideMapping
from .resolver import BinaryResolver
from .results import ExecutionResult
from .sinks import OutputSink

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Command:
    """A logical command name with its arguments and per-call overrides."""

    name: str
    arguments: tuple[str, ...] = ()
    overrides: LaunchOverrideMapping = field(default_factory=dict)


def shell_command(executable: str, args: Sequence[str] = (), *, platform: str | None = None) -> str:
    """Build the command line handed to the host shell.

    Only ``executable`` is quoted. Arguments are joined with spaces and left to
    the shell, so variables, globs and redirections in them are interpreted.
    """

    if (platform or sys.platform) == WINDOWS_PLATFORM:
        program = subprocess.list2cmdline([executable])
    else:
        program = shlex.quote(executable)
    return " ".join([program, *args])


class ProcessLauncher:
    """Start child processes with a shared working directory and environment.

    The execution context is captured once at construction; per-call overrides
    are merged over it field by field.
    """

    def __init__(
        self,
        config: LauncherConfig,
        sink: OutputSink,
        *,
        environ: Mapping[str, str] | None = None,
        resolver: BinaryResolver | None = None,
    ) -> None:
        """Initialise the launcher.

        Args:
            config: Launcher configuration naming the project and binary roots.
            sink: Destination for streamed child output.
            environ: Environment inherited by children. ``None`` snapshots
                ``os.environ`` at construction time.
            resolver: Binary resolver override; defaults to one built from ``config``.
        """

        self._config = config
        self._resolver = resolver or BinaryResolver(config.bin_dir, windows_suffix=config.windows_suffix)
        self._completion = CompletionPromisifier(sink)
        self._context = ExecutionContext.build(config.project_root, environ)

    @property
    def config(self) -> LauncherConfig:
        return self._config

    @property
    def context(self) -> ExecutionContext:
        """Return the execution context shared by every launch."""

        return self._context

    def refresh_environment(self, environ: Mapping[str, str] | None = None) -> ExecutionContext:
        """Rebuild the execution context from ``environ`` (``os.environ`` when omitted).

        Returns:
            ExecutionContext: The newly installed context.
        """

        self._context = ExecutionContext.build(self._context.working_directory, environ)
        return self._context

    def resolve(self, command: str) -> Path | None:
        """Return the binary that :meth:`spawn_resolved` would launch for ``command``."""

        return self._resolver.resolve(self._config.search_root, command)

    def candidates(self, command: str) -> list[Path]:
        """Return every path checked for ``command``, closest first."""

        return list(self._resolver.candidates(self._config.search_root, command))

    def can_run(self, command: str) -> bool:
        """Return ``True`` when ``command`` resolves to an existing binary."""

        binary = self.resolve(command)
        return binary is not None and binary.exists()

    async def spawn_interactive(
        self,
        executable: str | Path,
        args: Sequence[str] = (),
        overrides: LaunchOverrideMapping | None = None,
    ) -> ProcessHandle:
        """Start ``executable`` through the host shell.

        Shell interpretation is always requested so ``PATH`` lookups and shell
        built-ins work.

        Args:
            executable: Path or bare name of the program to run.
            args: Arguments passed after the executable.
            overrides: Per-call ``cwd``/``env`` overrides.

        Returns:
            ProcessHandle: Handle owning the child, or recording the spawn error.

        Raises:
            ValueError: If ``overrides`` tries to disable the shell.
            TypeError: If ``overrides`` contains unknown keys or invalid values.
        """

        return await self._spawn_shell(str(executable), args, overrides, replace_shell=False)

    async def spawn_module(
        self,
        module: str | Path,
        args: Sequence[str] = (),
        overrides: LaunchOverrideMapping | None = None,
    ) -> ProcessHandle:
        """Run ``module`` in a fresh Python interpreter without a shell.

        ``module`` is executed as a script when it names a ``.py`` file or an
        existing path, and with ``-m`` otherwise.

        Args:
            module: Script path or dotted module name.
            args: Arguments passed to the module.
            overrides: Per-call ``cwd``/``env`` overrides.

        Returns:
            ProcessHandle: Handle owning the child, or recording the spawn error.
        """

        options = LaunchOptions.from_context(self._context, shell=False).with_overrides(overrides or {})
        target = Path(module)
        if not target.is_absolute():
            target = options.cwd / target
        if target.suffix == PYTHON_SCRIPT_SUFFIX or target.exists():
            argv = [sys.executable, str(target), *args]
        else:
            argv = [sys.executable, "-m", str(module), *args]
        LOGGER.debug("spawning module %s in %s", argv, options.cwd)
        try:
            process = await asyncio.create_subprocess_exec(
                *argv,
                cwd=str(options.cwd),
                env=dict(options.env),
                stdin=subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            return ProcessHandle.failed(argv, exc)
        return ProcessHandle.started(argv, process)

    async def spawn_resolved(
        self,
        command: str,
        args: Sequence[str] = (),
        overrides: LaunchOverrideMapping | None = None,
    ) -> ProcessHandle:
        """Resolve ``command`` below the configured binary root and start it.

        Raises:
            UnresolvedCommandError: If no ancestor provides the binary. No process
                is started in that case.
        """

        binary = self.resolve(command)
        if binary is None:
            raise UnresolvedCommandError(command, self._config.search_root)
        return await self._spawn_shell(str(binary), args, overrides, replace_shell=True)

    async def run(
        self,
        command: str,
        args: Sequence[str] = (),
        overrides: LaunchOverrideMapping | None = None,
    ) -> ExecutionResult:
        """Resolve, start and wait for ``command``.

        Args:
            command: Logical command name, e.g. ``eslint``.
            args: Arguments passed to the tool.
            overrides: Per-call ``cwd``/``env`` overrides.

        Returns:
            ExecutionResult: Success, or the typed failure (an unresolved command
            is reported as a failure without starting any process).
        """

        try:
            handle = await self.spawn_resolved(command, args, overrides)
        except UnresolvedCommandError as exc:
            return ExecutionResult.failed(exc)
        return await self._completion.wait(command, handle)

    async def run_command(self, command: Command) -> ExecutionResult:
        """Run a :class:`Command` value."""

        return await self.run(command.name, command.arguments, command.overrides)

    async def run_many(self, commands: Sequence[Command]) -> list[ExecutionResult]:
        """Run ``commands`` concurrently and return their results in input order."""

        return list(await asyncio.gather(*(self.run_command(command) for command in commands)))

    def run_sync(
        self,
        command: str,
        args: Sequence[str] = (),
        overrides: LaunchOverrideMapping | None = None,
    ) -> ExecutionResult:
        """Blocking variant of :meth:`run` for callers without an event loop."""

        return asyncio.run(self.run(command, args, overrides))

    async def _spawn_shell(
        self,
        executable: str,
        args: Sequence[str],
        overrides: LaunchOverrideMapping | None,
        *,
        replace_shell: bool,
    ) -> ProcessHandle:
        options = LaunchOptions.from_context(self._context).with_overrides(overrides or {})
        if not options.shell:
            raise ValueError("interactive launches always run through the shell")
        argv = [executable, *args]
        command_line = shell_command(executable, args)
        if replace_shell and os.name != "nt":
            # The tool replaces the shell, so exit codes and signals are its own.
            command_line = f"exec {command_line}"
        LOGGER.debug("spawning %s in %s", command_line, options.cwd)
        try:
            process = await asyncio.create_subprocess_shell(
                command_line,
                cwd=str(options.cwd),
                env=dict(options.env),
                stdin=subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            return ProcessHandle.failed(argv, exc)
        return ProcessHandle.started(argv, process)


__all__ = ["Command", "ProcessLauncher", "shell_command"]
