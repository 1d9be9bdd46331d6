# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Enums shared by configuration and the Othello domain.

Kept outside the domain package so settings can use them without importing
the engines.
"""

from enum import Enum


class Difficulty(str, Enum):
    """AI opponent difficulty tiers.

    - EASY: Uniform random legal move
    - MEDIUM: Greedy capture count, takes corners, avoids danger cells
    - HARD: Minimax search with alpha-beta pruning
    """

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
