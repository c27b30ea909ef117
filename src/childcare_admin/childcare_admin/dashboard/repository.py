from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Protocol, Sequence

from .model import AttendanceStats, EnrollmentActivity


class StatisticsRepository(Protocol):
    """Read-only aggregate queries behind the dashboard."""

    def list_enrollment_activity(self) -> Sequence[EnrollmentActivity]:
        """Every enrollment, each paired with "has at least one completed payment"."""

        raise NotImplementedError

    def sum_completed_payments(self, *, start: datetime, end: datetime) -> Decimal:
        """Sum of completed payment amounts with ``start <= payment_date < end``."""

        raise NotImplementedError

    def attendance_counts(self, day: date) -> AttendanceStats:
        raise NotImplementedError
