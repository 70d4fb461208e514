# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Locate project-local tool executables by walking the ancestor chain."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterator, Sequence
from pathlib import Path

from .constants import DEFAULT_BIN_DIR, WINDOWS_BIN_SUFFIX, WINDOWS_PLATFORM

LOGGER = logging.getLogger(__name__)


class BinaryResolver:
    """Find ``<ancestor>/node_modules/.bin/<command>`` closest to a start directory."""

    def __init__(
        self,
        bin_dir: Sequence[str] = DEFAULT_BIN_DIR,
        *,
        platform: str | None = None,
        windows_suffix: str = WINDOWS_BIN_SUFFIX,
    ) -> None:
        """Initialise the resolver.

        Args:
            bin_dir: Path components of the dependency binary directory relative
                to each ancestor.
            platform: Platform identifier in ``sys.platform`` form. ``None`` uses
                the host platform.
            windows_suffix: Suffix appended to binary names on Windows.
        """

        self._bin_dir = tuple(bin_dir)
        self._platform = platform or sys.platform
        self._windows_suffix = windows_suffix

    def binary_name(self, command: str) -> str:
        """Return the on-disk file name for ``command`` on the configured platform."""

        if self._platform == WINDOWS_PLATFORM:
            return command + self._windows_suffix
        return command

    def candidates(self, root: Path, command: str) -> Iterator[Path]:
        """Yield candidate paths for ``command`` from ``root`` up to the filesystem root.

        Args:
            root: Directory the search starts from.
            command: Logical command name.

        Yields:
            Path: Candidate binary path for each ancestor, closest first.
        """

        name = self.binary_name(command)
        # Lexical normalisation: ".." means the parent, symlinks are kept.
        current = Path(os.path.abspath(root))
        # At most one step per path component.
        max_depth = len(current.parts)
        depth = 0
        while depth <= max_depth:
            yield current.joinpath(*self._bin_dir, name)
            parent = current.parent
            if parent == current:
                return
            current = parent
            depth += 1

    def resolve(self, root: Path, command: str) -> Path | None:
        """Return the closest existing binary for ``command`` or ``None``.

        Args:
            root: Directory the search starts from.
            command: Logical command name.

        Returns:
            Path | None: Absolute path to the binary, or ``None`` when no ancestor
            provides it.
        """

        for candidate in self.candidates(root, command):
            if candidate.exists():
                LOGGER.debug("resolved %s -> %s", command, candidate)
                return candidate
        LOGGER.debug("could not resolve %s from %s", command, root)
        return None


def resolve_bin(
    root: Path,
    command: str,
    *,
    platform: str | None = None,
    bin_dir: Sequence[str] = DEFAULT_BIN_DIR,
) -> Path | None:
    """Return the closest ``bin_dir`` executable for ``command`` above ``root``."""

    return BinaryResolver(bin_dir, platform=platform).resolve(root, command)


__all__ = ["BinaryResolver", "resolve_bin"]
