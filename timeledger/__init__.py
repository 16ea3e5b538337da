# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Time and entitlement accounting for workforce time tracking."""

__version__ = "0.1.0"
