# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for launcher configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from localbin import LauncherConfig, LauncherConfigError, load_launcher_config


def _pyproject(root: Path, body: str) -> None:
    (root / "pyproject.toml").write_text(body, encoding="utf-8")


def test_defaults_without_pyproject(project: Path) -> None:
    config = load_launcher_config(project, environ={})

    assert config.project_root == project
    assert config.bin_root is None
    assert config.search_root == project
    assert config.bin_dir == ("node_modules", ".bin")
    assert config.windows_suffix == ".cmd"
    assert config.log_level == "INFO"


def test_pyproject_section_is_applied(project: Path) -> None:
    _pyproject(
        project,
        """
[project]
name = "demo"

[tool.localbin]
bin-root = "frontend"
bin-dir = "vendor/bin"
log-level = "debug"
""",
    )

    config = load_launcher_config(project, environ={})

    assert config.bin_root == project / "frontend"
    assert config.search_root == project / "frontend"
    assert config.bin_dir == ("vendor", "bin")
    assert config.log_level == "DEBUG"


def test_environment_overrides_pyproject(project: Path, tmp_path: Path) -> None:
    _pyproject(project, '[tool.localbin]\nbin-root = "frontend"\n')
    elsewhere = tmp_path / "elsewhere"

    config = load_launcher_config(
        project,
        environ={"LOCALBIN_BIN_ROOT": str(elsewhere), "LOCALBIN_LOG_LEVEL": "warning"},
    )

    assert config.bin_root == elsewhere
    assert config.log_level == "WARNING"


def test_unrelated_tool_sections_are_ignored(project: Path) -> None:
    _pyproject(project, '[tool.ruff]\nline-length = 100\n')

    assert load_launcher_config(project, environ={}).bin_root is None


def test_unknown_key_is_rejected(project: Path) -> None:
    _pyproject(project, '[tool.localbin]\nbinroot = "typo"\n')

    with pytest.raises(LauncherConfigError, match="Invalid localbin configuration"):
        load_launcher_config(project, environ={})


def test_invalid_toml_is_rejected(project: Path) -> None:
    _pyproject(project, "[tool.localbin\n")

    with pytest.raises(LauncherConfigError, match="Invalid TOML"):
        load_launcher_config(project, environ={})


def test_invalid_log_level_is_rejected(project: Path) -> None:
    with pytest.raises(LauncherConfigError):
        load_launcher_config(project, environ={"LOCALBIN_LOG_LEVEL": "chatty"})


def test_config_is_frozen(project: Path) -> None:
    config = LauncherConfig(project_root=project)

    with pytest.raises(ValidationError):
        config.log_level = "DEBUG"  # type: ignore[misc]
