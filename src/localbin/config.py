# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Launcher configuration sourced from ``pyproject.toml`` and the environment."""

from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .constants import (
    BIN_ROOT_ENV,
    DEFAULT_BIN_DIR,
    LOG_LEVEL_ENV,
    PYPROJECT_FILENAME,
    PYPROJECT_SECTION_KEY,
    PYPROJECT_TOOL_KEY,
    WINDOWS_BIN_SUFFIX,
)

LOGGER = logging.getLogger(__name__)

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class LauncherConfigError(ValueError):
    """Raised when launcher configuration cannot be loaded or validated."""


class LauncherConfig(BaseModel):
    """Settings controlling where tools are resolved and how they run."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    project_root: Path
    bin_root: Path | None = None
    bin_dir: tuple[str, ...] = Field(default=DEFAULT_BIN_DIR)
    windows_suffix: str = WINDOWS_BIN_SUFFIX
    log_level: str = "INFO"

    @field_validator("bin_dir", mode="before")
    @classmethod
    def _split_bin_dir(cls, value: Any) -> Any:
        if isinstance(value, str):
            return tuple(part for part in Path(value).parts if part)
        return value

    @field_validator("bin_dir")
    @classmethod
    def _require_bin_dir(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("bin_dir must name at least one directory")
        return value

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level '{value}'")
        return level

    @property
    def search_root(self) -> Path:
        """Return the directory the binary search starts from."""

        return self.bin_root if self.bin_root is not None else self.project_root


def _read_pyproject_section(pyproject: Path) -> dict[str, Any]:
    """Return the ``[tool.localbin]`` table from ``pyproject`` (empty when absent)."""

    if not pyproject.is_file():
        return {}
    try:
        with pyproject.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise LauncherConfigError(f"Invalid TOML in {pyproject}: {exc}") from exc
    tool_section = data.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return {}
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if not isinstance(section, Mapping):
        return {}
    return {key.replace("-", "_"): value for key, value in section.items()}


def _anchor(value: Any, base: Path) -> Any:
    if isinstance(value, str):
        candidate = Path(value).expanduser()
        return candidate if candidate.is_absolute() else base / candidate
    return value


def load_launcher_config(
    project_root: Path,
    *,
    environ: Mapping[str, str] | None = None,
) -> LauncherConfig:
    """Load configuration for ``project_root``.

    Layering order is built-in defaults, ``[tool.localbin]`` in the project's
    ``pyproject.toml``, then ``LOCALBIN_*`` environment variables.

    Args:
        project_root: Project directory containing the optional ``pyproject.toml``.
        environ: Environment used for overrides. ``None`` reads ``os.environ``.

    Returns:
        LauncherConfig: Validated configuration.

    Raises:
        LauncherConfigError: If the TOML is malformed or a value fails validation.
    """

    root = Path(project_root).absolute()
    env = os.environ if environ is None else environ
    payload: dict[str, Any] = _read_pyproject_section(root / PYPROJECT_FILENAME)
    payload.pop("project_root", None)
    if "bin_root" in payload:
        payload["bin_root"] = _anchor(payload["bin_root"], root)
    if bin_root := env.get(BIN_ROOT_ENV):
        payload["bin_root"] = _anchor(bin_root, root)
    if log_level := env.get(LOG_LEVEL_ENV):
        payload["log_level"] = log_level
    try:
        config = LauncherConfig(project_root=root, **payload)
    except ValidationError as exc:
        raise LauncherConfigError(f"Invalid localbin configuration for {root}: {exc}") from exc
    LOGGER.debug("loaded configuration for %s: %s", root, config)
    return config


__all__ = ["LauncherConfig", "LauncherConfigError", "load_launcher_config"]
