# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Filesystem and environment constants shared by the launcher."""

from __future__ import annotations

from typing import Final

NODE_MODULES_DIRNAME: Final[str] = "node_modules"
BIN_DIRNAME: Final[str] = ".bin"
DEFAULT_BIN_DIR: Final[tuple[str, ...]] = (NODE_MODULES_DIRNAME, BIN_DIRNAME)
WINDOWS_PLATFORM: Final[str] = "win32"
WINDOWS_BIN_SUFFIX: Final[str] = ".cmd"
PYTHON_SCRIPT_SUFFIX: Final[str] = ".py"

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "localbin"
BIN_ROOT_ENV: Final[str] = "LOCALBIN_BIN_ROOT"
LOG_LEVEL_ENV: Final[str] = "LOCALBIN_LOG_LEVEL"

OUTPUT_LOGGER_NAME: Final[str] = "localbin.output"

# Exit statuses used by the CLI, following shell conventions.
EXIT_UNRESOLVED: Final[int] = 127
EXIT_SPAWN_ERROR: Final[int] = 126
EXIT_SIGNAL_BASE: Final[int] = 128

__all__ = [
    "BIN_DIRNAME",
    "BIN_ROOT_ENV",
    "DEFAULT_BIN_DIR",
    "EXIT_SIGNAL_BASE",
    "EXIT_SPAWN_ERROR",
    "EXIT_UNRESOLVED",
    "LOG_LEVEL_ENV",
    "NODE_MODULES_DIRNAME",
    "OUTPUT_LOGGER_NAME",
    "PYPROJECT_FILENAME",
    "PYPROJECT_SECTION_KEY",
    "PYPROJECT_TOOL_KEY",
    "PYTHON_SCRIPT_SUFFIX",
    "WINDOWS_BIN_SUFFIX",
    "WINDOWS_PLATFORM",
]
