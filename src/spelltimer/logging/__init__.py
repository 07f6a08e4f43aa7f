# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging layer for spelltimer."""

from __future__ import annotations

from spelltimer.logging.config import LOG_LEVELS, configure_logging, get_logger

__all__ = ["LOG_LEVELS", "configure_logging", "get_logger"]
