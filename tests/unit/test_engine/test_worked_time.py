# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for worked-time aggregation, automatic breaks and collision checks."""

import uuid
from datetime import date, datetime, timedelta, timezone

import pytest

from timeledger.engine.collisions import check_collision
from timeledger.engine.worked_time import (
    apply_automatic_breaks,
    entry_net_hours,
    required_break_minutes,
    worked_hours,
)
from timeledger.models.enums import AbsenceStatus
from timeledger.schemas.accounting import DiagnosticCode


class TestWorkedHours:
    """Tests for summing net hours over a half-open range."""

    def test_net_of_breaks(self, make_entry):
        """Breaks are subtracted from the gross duration."""
        entries = [
            make_entry(datetime(2025, 2, 3, 8, 0), 8.5, break_minutes=30),
            make_entry(datetime(2025, 2, 4, 9, 0), 4),
        ]
        assert worked_hours(entries, date(2025, 2, 1), date(2025, 3, 1)) == 12.0

    def test_range_is_half_open(self, make_entry):
        """Entries starting exactly at the range end are excluded."""
        entries = [
            make_entry(datetime(2025, 2, 1, 0, 0), 2),
            make_entry(datetime(2025, 3, 1, 0, 0), 3),
        ]
        assert worked_hours(entries, date(2025, 2, 1), date(2025, 3, 1)) == 2.0

    def test_entry_counted_by_start(self, make_entry):
        """An overnight entry belongs to the day it starts on."""
        entries = [make_entry(datetime(2025, 2, 28, 22, 0), 4)]
        assert worked_hours(entries, date(2025, 2, 1), date(2025, 3, 1)) == 4.0
        assert worked_hours(entries, date(2025, 3, 1), date(2025, 4, 1)) == 0.0

    def test_datetime_bounds(self, make_entry):
        """Datetime bounds are honored to the minute."""
        entries = [make_entry(datetime(2025, 2, 3, 12, 0), 1)]
        assert worked_hours(entries, datetime(2025, 2, 3, 12, 0), datetime(2025, 2, 3, 13, 0)) == 1.0
        assert worked_hours(entries, datetime(2025, 2, 3, 12, 1), datetime(2025, 2, 4)) == 0.0

    def test_employee_filter(self, make_entry, employee_id):
        """Only the given employee's entries count when filtered."""
        entries = [
            make_entry(datetime(2025, 2, 3, 8, 0), 2),
            make_entry(datetime(2025, 2, 3, 8, 0), 5, employee_id=uuid.uuid4()),
        ]
        assert worked_hours(entries, date(2025, 2, 1), date(2025, 3, 1)) == 7.0
        assert (
            worked_hours(entries, date(2025, 2, 1), date(2025, 3, 1), employee_id=employee_id)
            == 2.0
        )

    def test_break_longer_than_entry_counts_zero(self, make_entry):
        """A break exceeding the duration yields 0 hours and a diagnostic."""
        entries = [
            make_entry(datetime(2025, 2, 3, 8, 0), 1, break_minutes=90),
            make_entry(datetime(2025, 2, 4, 8, 0), 2),
        ]
        diagnostics = []
        total = worked_hours(
            entries, date(2025, 2, 1), date(2025, 3, 1), diagnostics=diagnostics
        )
        assert total == 2.0
        assert len(diagnostics) == 1
        assert diagnostics[0].code == DiagnosticCode.NEGATIVE_BREAK_DURATION
        assert diagnostics[0].date == date(2025, 2, 3)

    def test_timezone_aware_entries(self, make_entry):
        """Aware timestamps are bucketed by their local wall-clock time."""
        cet = timezone(timedelta(hours=1))
        entries = [
            make_entry(datetime(2025, 2, 3, 8, 0, tzinfo=cet), 8),
            make_entry(datetime(2025, 3, 1, 0, 30, tzinfo=cet), 2),
        ]
        assert worked_hours(entries, date(2025, 2, 1), date(2025, 3, 1)) == 8.0
        assert worked_hours(entries, date(2025, 3, 1), date(2025, 4, 1)) == 2.0

    def test_net_hours_without_diagnostics(self, make_entry):
        """Diagnostics collection is optional."""
        entry = make_entry(datetime(2025, 2, 3, 8, 0), 0.5, break_minutes=45)
        assert entry_net_hours(entry) == 0.0


class TestAutomaticBreaks:
    """Tests for the statutory break deduction."""

    @pytest.mark.parametrize(
        "gross_hours,expected",
        [(5.0, 0), (6.0, 0), (6.5, 30), (9.0, 30), (9.5, 45)],
    )
    def test_required_break_minutes(self, gross_hours, expected):
        """Breaks are required after 6 and 9 hours."""
        assert required_break_minutes(gross_hours) == expected

    def test_applied_when_enabled(self, make_entry, make_employee):
        """A short break is raised to the statutory minimum."""
        employee = make_employee(automatic_break_deduction=True)
        entry = make_entry(datetime(2025, 2, 3, 8, 0), 10, break_minutes=15)
        adjusted = apply_automatic_breaks(entry, employee)
        assert adjusted.break_minutes == 45
        assert entry.break_minutes == 15

    def test_longer_manual_break_kept(self, make_entry, make_employee):
        """A manual break above the minimum is not reduced."""
        employee = make_employee(automatic_break_deduction=True)
        entry = make_entry(datetime(2025, 2, 3, 8, 0), 7, break_minutes=60)
        assert apply_automatic_breaks(entry, employee) is entry

    def test_disabled_leaves_entry_untouched(self, make_entry, make_employee):
        """Without the opt-in no break is added."""
        employee = make_employee()
        entry = make_entry(datetime(2025, 2, 3, 8, 0), 10)
        assert apply_automatic_breaks(entry, employee).break_minutes == 0


class TestCheckCollision:
    """Tests for detecting conflicting work periods."""

    def test_free_period(self, make_entry, make_absence):
        """No collision when nothing overlaps."""
        entries = [make_entry(datetime(2025, 2, 3, 8, 0), 4)]
        absences = [make_absence(date(2025, 2, 10))]
        assert (
            check_collision(
                datetime(2025, 2, 3, 12, 0), datetime(2025, 2, 3, 16, 0), entries, absences
            )
            is None
        )

    def test_overlapping_entry(self, make_entry):
        """An overlapping entry on the same day collides."""
        existing = make_entry(datetime(2025, 2, 3, 8, 0), 4)
        collision = check_collision(
            datetime(2025, 2, 3, 11, 0), datetime(2025, 2, 3, 15, 0), [existing], []
        )
        assert collision is not None
        assert collision.kind == "entry"
        assert collision.item == existing

    def test_edited_entry_ignored(self, make_entry):
        """The entry being edited does not collide with itself."""
        existing = make_entry(datetime(2025, 2, 3, 8, 0), 4)
        assert (
            check_collision(
                datetime(2025, 2, 3, 9, 0),
                datetime(2025, 2, 3, 13, 0),
                [existing],
                [],
                entry_id_to_ignore=existing.id,
            )
            is None
        )

    def test_absence_collides(self, make_absence):
        """Work on a day with a pending or approved absence collides."""
        absence = make_absence(date(2025, 2, 3), status=AbsenceStatus.PENDING)
        collision = check_collision(
            datetime(2025, 2, 3, 8, 0), datetime(2025, 2, 3, 12, 0), [], [absence]
        )
        assert collision is not None
        assert collision.kind == "absence"

    def test_rejected_absence_ignored(self, make_absence):
        """Rejected absences never block work."""
        absence = make_absence(date(2025, 2, 3), status=AbsenceStatus.REJECTED)
        assert (
            check_collision(
                datetime(2025, 2, 3, 8, 0), datetime(2025, 2, 3, 12, 0), [], [absence]
            )
            is None
        )
