# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Core package for the reversi engine.

This package contains shared infrastructure:
- config: Application configuration and settings
- enums: Enums shared by configuration and the domain
"""
