# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Utility functions and helpers for the reversi engine.

This package contains cross-cutting utilities:
- logging: Structured logging with structlog
- datetime: Timezone-aware datetime operations
"""

from reversi.utils.datetime import epoch_millis, utc_from_millis, utc_now
from reversi.utils.logging import (
    bind_context,
    clear_context,
    get_logger,
    session_context,
    setup_logging,
)

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    "bind_context",
    "clear_context",
    "session_context",
    # Datetime
    "utc_now",
    "utc_from_millis",
    "epoch_millis",
]
