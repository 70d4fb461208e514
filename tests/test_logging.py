# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for status helpers and logger configuration."""

from __future__ import annotations

import logging

import pytest

from localbin.logging import configure_logging, emoji, fail, ok


def test_configure_logging_installs_handler_once() -> None:
    logger = logging.getLogger("localbin")
    before = len(logger.handlers)

    configure_logging("info")
    configure_logging("DEBUG")

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == before + 1
    assert logger.propagate is False


def test_status_helpers_write_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    ok("done", use_emoji=False)
    fail("broken", use_emoji=True)

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.splitlines() == ["done", "❌ broken"]


def test_emoji_is_blank_when_disabled() -> None:
    assert emoji("✅", False) == ""
    assert emoji("✅", True) == "✅"
