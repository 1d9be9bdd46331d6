# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Domain layer for the reversi engine.

Domains:
    othello: Rules engine, AI opponent, replay and game sessions.
"""
