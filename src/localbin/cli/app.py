# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer application exposing ``run``, ``which`` and ``can-run``."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ..launcher import ProcessLauncher
from ..logging import fail, ok
from ..options import LaunchOptionKey, LaunchOverrideValue
from ..sinks import ConsoleSink
from .shared import CLIError, exit_code_for, load_cli_config, parse_env_pairs

app = typer.Typer(
    help="Run tools installed in a project's node_modules/.bin.",
    no_args_is_help=True,
    add_completion=False,
)

RootOption = Annotated[
    Path,
    typer.Option("--root", "-r", help="Project root used for configuration and resolution."),
]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Emit debug logging.")]
EmojiOption = Annotated[bool, typer.Option("--emoji/--no-emoji", help="Decorate status lines with emoji.")]


def _launcher(root: Path, *, verbose: bool) -> ProcessLauncher:
    config = load_cli_config(root, verbose=verbose)
    return ProcessLauncher(config, ConsoleSink())


@app.command(
    "run",
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def run_command(
    command: Annotated[str, typer.Argument(..., help="Tool name, e.g. eslint.")],
    args: Annotated[list[str] | None, typer.Argument(help="Arguments passed to the tool.")] = None,
    root: RootOption = Path.cwd(),
    cwd: Annotated[
        Path | None,
        typer.Option("--cwd", help="Working directory for the tool (defaults to the project root)."),
    ] = None,
    env: Annotated[
        list[str] | None,
        typer.Option("--env", "-e", help="Extra KEY=VALUE environment entries."),
    ] = None,
    verbose: VerboseOption = False,
    use_emoji: EmojiOption = True,
) -> None:
    """Resolve ``COMMAND`` and run it, exiting with its status."""

    try:
        launcher = _launcher(root, verbose=verbose)
        overrides: dict[LaunchOptionKey, LaunchOverrideValue] = {}
        if cwd is not None:
            overrides["cwd"] = cwd
        if env:
            overrides["env"] = parse_env_pairs(env)
    except CLIError as exc:
        fail(str(exc), use_emoji=use_emoji)
        raise typer.Exit(code=exc.exit_code) from exc

    result = launcher.run_sync(command, args or [], overrides)
    if result.ok:
        if verbose:
            ok(f"{command} finished successfully", use_emoji=use_emoji)
        raise typer.Exit(code=0)
    fail(result.message, use_emoji=use_emoji)
    raise typer.Exit(code=exit_code_for(result))


@app.command("which")
def which_command(
    command: Annotated[str, typer.Argument(..., help="Tool name to resolve.")],
    root: RootOption = Path.cwd(),
    show_all: Annotated[
        bool,
        typer.Option("--all", "-a", help="List every candidate path in search order."),
    ] = False,
    verbose: VerboseOption = False,
) -> None:
    """Print the binary ``run`` would launch for ``COMMAND``."""

    try:
        launcher = _launcher(root, verbose=verbose)
    except CLIError as exc:
        fail(str(exc), use_emoji=False)
        raise typer.Exit(code=exc.exit_code) from exc

    if show_all:
        for candidate in launcher.candidates(command):
            marker = "*" if candidate.exists() else " "
            typer.echo(f"{marker} {candidate}")
    resolved = launcher.resolve(command)
    if resolved is None:
        if not show_all:
            fail(f"Could not resolve {command} relative to {launcher.config.search_root}", use_emoji=False)
        raise typer.Exit(code=1)
    if not show_all:
        typer.echo(str(resolved))
    raise typer.Exit(code=0)


@app.command("can-run")
def can_run_command(
    command: Annotated[str, typer.Argument(..., help="Tool name to check.")],
    root: RootOption = Path.cwd(),
) -> None:
    """Exit 0 when ``COMMAND`` resolves, 1 otherwise."""

    try:
        launcher = _launcher(root, verbose=False)
    except CLIError as exc:
        fail(str(exc), use_emoji=False)
        raise typer.Exit(code=exc.exit_code) from exc
    raise typer.Exit(code=0 if launcher.can_run(command) else 1)


__all__ = ["app"]
