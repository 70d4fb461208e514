# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Execution context and per-launch option overrides."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Final, Literal

LaunchOverrideValue = Path | str | Mapping[str, str] | bool | None
LaunchOptionKey = Literal["cwd", "env", "shell"]
LaunchOverrideMapping = Mapping[LaunchOptionKey, LaunchOverrideValue]

_LAUNCH_KEYS: Final[frozenset[LaunchOptionKey]] = frozenset({"cwd", "env", "shell"})
_CWD_KEY: Final[LaunchOptionKey] = "cwd"
_ENV_KEY: Final[LaunchOptionKey] = "env"
_SHELL_KEY: Final[LaunchOptionKey] = "shell"


@dataclass(frozen=True, slots=True)
class ExecutionContext:
    """Working directory and environment applied to every launch of a launcher."""

    working_directory: Path
    environment: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def build(cls, project_root: Path, environ: Mapping[str, str] | None = None) -> ExecutionContext:
        """Return a context rooted at ``project_root`` with a frozen environment snapshot.

        Args:
            project_root: Directory used as the default working directory.
            environ: Environment mapping to inherit. ``None`` snapshots ``os.environ``.

        Returns:
            ExecutionContext: Immutable context shared by all launches.
        """

        source = os.environ if environ is None else environ
        snapshot = {str(key): str(value) for key, value in source.items()}
        return cls(working_directory=Path(project_root), environment=MappingProxyType(snapshot))


@dataclass(frozen=True, slots=True)
class LaunchOptions:
    """Resolved options for a single process launch."""

    cwd: Path
    env: Mapping[str, str]
    shell: bool = True

    @classmethod
    def from_context(cls, context: ExecutionContext, *, shell: bool = True) -> LaunchOptions:
        """Return options seeded from ``context``."""

        return cls(cwd=context.working_directory, env=context.environment, shell=shell)

    def with_overrides(self, overrides: LaunchOverrideMapping) -> LaunchOptions:
        """Return a new options instance with ``overrides`` applied field by field.

        ``env`` overrides are layered over the inherited environment rather than
        replacing it.

        Args:
            overrides: Mapping of option names to replacement values.

        Returns:
            LaunchOptions: Updated options instance.

        Raises:
            TypeError: If ``overrides`` names an unknown option or carries a value
                of the wrong type.
        """

        unknown = [key for key in overrides if key not in _LAUNCH_KEYS]
        if unknown:
            message = ", ".join(sorted(unknown))
            raise TypeError(f"Unknown launch option(s): {message}")
        cwd = self.cwd if _CWD_KEY not in overrides else self._coerce_cwd_override(overrides[_CWD_KEY])
        env = dict(self.env)
        if _ENV_KEY in overrides:
            env.update(self._coerce_env_override(overrides[_ENV_KEY]))
        shell = self.shell
        if _SHELL_KEY in overrides:
            value = overrides[_SHELL_KEY]
            if not isinstance(value, bool):
                raise TypeError("shell override must be a boolean value")
            shell = value
        return LaunchOptions(cwd=cwd, env=MappingProxyType(env), shell=shell)

    def _coerce_cwd_override(self, value: LaunchOverrideValue) -> Path:
        """Return a validated working directory override.

        Relative paths are interpreted against the current working directory option.

        Raises:
            TypeError: If ``value`` is not a path-like string.
        """

        if value is None:
            return self.cwd
        if isinstance(value, (str, Path)):
            candidate = Path(value)
            return candidate if candidate.is_absolute() else self.cwd / candidate
        raise TypeError("cwd override must be a pathlib.Path, str or None")

    @staticmethod
    def _coerce_env_override(value: LaunchOverrideValue) -> dict[str, str]:
        """Return validated environment overrides.

        Raises:
            TypeError: If the override is not a mapping of strings to strings.
        """

        if value is None:
            return {}
        if not isinstance(value, Mapping):
            raise TypeError("env override must be a mapping of strings to strings")
        validated: dict[str, str] = {}
        for key, entry in value.items():
            if not isinstance(key, str) or not isinstance(entry, str):
                raise TypeError("env override must map strings to strings")
            validated[key] = entry
        return validated


__all__ = [
    "ExecutionContext",
    "LaunchOptionKey",
    "LaunchOptions",
    "LaunchOverrideMapping",
    "LaunchOverrideValue",
]
