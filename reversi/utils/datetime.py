# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""DateTime utilities for the reversi engine.

All datetimes are timezone-aware UTC. Move log timestamps are stored as
integer epoch milliseconds so that logs serialize compactly.

Usage:
------
    from reversi.utils.datetime import epoch_millis

    timestamp = epoch_millis()
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Get current UTC time as timezone-aware datetime.

    Returns:
        Timezone-aware datetime representing current UTC time.
    """
    return datetime.now(timezone.utc)


def utc_from_millis(millis: int) -> datetime:
    """Create a timezone-aware UTC datetime from epoch milliseconds.

    Args:
        millis: Milliseconds since the Unix epoch.

    Returns:
        Timezone-aware UTC datetime.

    Example:
        >>> utc_from_millis(0).year
        1970
    """
    return datetime.fromtimestamp(millis / 1000, tz=timezone.utc)


def epoch_millis(not_before: int | None = None) -> int:
    """Get the current time in epoch milliseconds.

    Args:
        not_before: Lower bound for the returned value. Passing the previous
            timestamp of a sequence keeps the sequence non-decreasing even if
            the wall clock steps backwards.

    Returns:
        Milliseconds since the Unix epoch.
    """
    millis = int(utc_now().timestamp() * 1000)
    if not_before is not None and millis < not_before:
        return not_before
    return millis
