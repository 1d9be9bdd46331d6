"""Reversi engine.

Othello rules engine, replay reconstruction and a difficulty-tiered
AI opponent built on depth-limited minimax with alpha-beta pruning.

Copyright (C) 2025 Global Digital Labs (gdlabs.io)
SPDX-License-Identifier: LGPL-3.0-or-later
"""

__version__ = "1.0.0"
