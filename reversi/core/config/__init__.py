# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Configuration package for the reversi engine.

Example:
    >>> from reversi.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.othello.hard_search_depth
    4
"""

from reversi.core.config.settings import (
    OthelloSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "Settings",
    "OthelloSettings",
    "get_settings",
    "clear_settings_cache",
]
