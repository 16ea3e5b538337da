# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Collision checks for new or edited work periods."""

import uuid
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from timeledger.models.enums import AbsenceStatus
from timeledger.schemas.absence import AbsenceRequest
from timeledger.schemas.time_entry import TimeEntry


@dataclass
class Collision:
    """A record blocking a work period."""

    kind: str  # "entry" or "absence"
    item: TimeEntry | AbsenceRequest


def check_collision(
    start: datetime,
    end: datetime,
    entries: Iterable[TimeEntry],
    absence_requests: Iterable[AbsenceRequest],
    entry_id_to_ignore: uuid.UUID | None = None,
) -> Collision | None:
    """Find the first record a work period would collide with.

    Entries collide when they start on the same calendar day and their
    intervals overlap. Absence requests collide when their date range
    touches the period; rejected requests never block.

    Args:
        start: Start of the new period.
        end: End of the new period.
        entries: The employee's existing time entries.
        absence_requests: The employee's absence requests.
        entry_id_to_ignore: Entry being edited, excluded from the check.

    Returns:
        The collision, or None if the period is free.
    """
    for entry in entries:
        if entry_id_to_ignore is not None and entry.id == entry_id_to_ignore:
            continue
        if entry.start.date() != start.date():
            continue
        if start < entry.end and end > entry.start:
            return Collision(kind="entry", item=entry)

    first_day, last_day = start.date(), end.date()
    for request in absence_requests:
        if request.status == AbsenceStatus.REJECTED:
            continue
        if request.start_date <= last_day and request.end_date >= first_day:
            return Collision(kind="absence", item=request)

    return None
