# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from localbin import LauncherConfig, ProcessLauncher, RecordingSink


@pytest.fixture(autouse=True)
def _clear_localbin_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LOCALBIN_BIN_ROOT", raising=False)
    monkeypatch.delenv("LOCALBIN_LOG_LEVEL", raising=False)


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Return an empty project directory."""
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def write_tool() -> Callable[..., Path]:
    """Return a helper that installs a ``/bin/sh`` script as a local tool."""

    def _write(root: Path, name: str, body: str) -> Path:
        bin_dir = root / "node_modules" / ".bin"
        bin_dir.mkdir(parents=True, exist_ok=True)
        path = bin_dir / name
        path.write_text(f"#!/bin/sh\n{body}\n", encoding="utf-8")
        path.chmod(0o755)
        return path

    return _write


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def launcher(project: Path, sink: RecordingSink) -> ProcessLauncher:
    """Return a launcher rooted at ``project`` recording output in ``sink``."""
    environ = {"PATH": os.environ.get("PATH", os.defpath), "LB_BASE": "base"}
    return ProcessLauncher(LauncherConfig(project_root=project), sink, environ=environ)


@pytest.fixture(autouse=True)
def _isolate_package_logger() -> Iterator[None]:
    """Undo handler and level changes made by ``configure_logging``."""
    logger = logging.getLogger("localbin")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    configured = getattr(logger, "_localbin_configured", False)
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
    setattr(logger, "_localbin_configured", configured)
