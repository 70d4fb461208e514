# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the execution context and launch option overrides."""

from __future__ import annotations

from pathlib import Path

import pytest

from localbin import ExecutionContext, LaunchOptions


def _options(tmp_path: Path) -> LaunchOptions:
    context = ExecutionContext.build(tmp_path, {"PATH": "/usr/bin", "HOME": "/home/dev"})
    return LaunchOptions.from_context(context)


def test_context_snapshots_process_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LB_SNAPSHOT", "before")
    context = ExecutionContext.build(tmp_path)
    monkeypatch.setenv("LB_SNAPSHOT", "after")

    assert context.working_directory == tmp_path
    assert context.environment["LB_SNAPSHOT"] == "before"


def test_context_environment_is_read_only(tmp_path: Path) -> None:
    context = ExecutionContext.build(tmp_path, {"A": "1"})

    with pytest.raises(TypeError):
        context.environment["A"] = "2"  # type: ignore[index]


def test_env_override_is_layered_over_context(tmp_path: Path) -> None:
    base = _options(tmp_path)

    merged = base.with_overrides({"env": {"NODE_ENV": "test", "HOME": "/tmp/home"}})

    assert merged.env == {"PATH": "/usr/bin", "HOME": "/tmp/home", "NODE_ENV": "test"}
    assert base.env["HOME"] == "/home/dev"
    assert merged.cwd == tmp_path


def test_cwd_override_resolves_relative_paths(tmp_path: Path) -> None:
    base = _options(tmp_path)

    assert base.with_overrides({"cwd": "packages/web"}).cwd == tmp_path / "packages" / "web"
    assert base.with_overrides({"cwd": Path("/srv/app")}).cwd == Path("/srv/app")
    assert base.with_overrides({"cwd": None}).cwd == tmp_path


def test_shell_defaults_to_true_and_accepts_bool_override(tmp_path: Path) -> None:
    base = _options(tmp_path)

    assert base.shell is True
    assert base.with_overrides({"shell": False}).shell is False


@pytest.mark.parametrize(
    ("overrides", "message"),
    [
        ({"timeout": 5}, "Unknown launch option"),
        ({"cwd": 42}, "cwd override"),
        ({"env": ["A=1"]}, "env override"),
        ({"env": {"A": 1}}, "env override must map strings"),
        ({"shell": "yes"}, "shell override"),
    ],
)
def test_invalid_overrides_raise_type_error(tmp_path: Path, overrides: dict[str, object], message: str) -> None:
    with pytest.raises(TypeError, match=message):
        _options(tmp_path).with_overrides(overrides)  # type: ignore[arg-type]
