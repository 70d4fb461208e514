# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing status helpers and logger configuration."""

from __future__ import annotations

import logging
import sys

_CONFIGURED_FLAG = "_localbin_configured"


def emoji(symbol: str, enable: bool) -> str:
    """Return *symbol* when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def ok(msg: str, *, use_emoji: bool) -> None:
    """Emit a success status line on stderr."""

    print(f"{emoji('✅ ', use_emoji)}{msg}", file=sys.stderr)


def fail(msg: str, *, use_emoji: bool) -> None:
    """Emit an error status line on stderr."""

    print(f"{emoji('❌ ', use_emoji)}{msg}", file=sys.stderr)


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a stderr handler to the ``localbin`` logger once and set ``level``.

    Args:
        level: Logging level name applied to the package logger.

    Returns:
        logging.Logger: The configured package logger.
    """

    logger = logging.getLogger("localbin")
    if not getattr(logger, _CONFIGURED_FLAG, False):
        handler = logging.StreamHandler(stream=sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
        setattr(logger, _CONFIGURED_FLAG, True)
    logger.setLevel(level.upper())
    return logger


__all__ = ["configure_logging", "emoji", "fail", "ok"]
