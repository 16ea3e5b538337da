# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Main API router for v1 endpoints."""

from fastapi import APIRouter

from timeledger.api.v1 import accounting

api_router = APIRouter()

# Accounting routes
api_router.include_router(accounting.router, prefix="/employees", tags=["accounting"])
