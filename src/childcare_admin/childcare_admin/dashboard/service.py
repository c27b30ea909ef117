from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import month_bounds, now_local
from ..common.serialization import TWO_PLACES
from ..core.constants import DASHBOARD_ACTIVE_PROGRAMS_LIMIT, DASHBOARD_UPCOMING_PROGRAMS_LIMIT
from ..core.enums import ProgramStatus
from ..programs.repository import ProgramRepository
from .model import AttendanceStats, DashboardData, DashboardStats
from .repository import StatisticsRepository

log = logging.getLogger(__name__)


class DashboardService:
    """Use case: headline numbers for the admin home page.

    "Active" means an enrollment that is confirmed or has at least one completed
    payment; a child (or program) is active when any of its enrollments is.
    "Today" and "this month" are evaluated in ``tz_name``.
    """

    def __init__(self, stats: StatisticsRepository, programs: ProgramRepository, *, tz_name: Optional[str] = None):
        self._stats = stats
        self._programs = programs
        self._tz_name = tz_name

    def _today(self, today: Optional[date]) -> date:
        if today is None:
            return now_local(self._tz_name).date()
        if isinstance(today, datetime):
            return today.date()
        return today

    def active_children_count(self) -> int:
        return len({row.child_id for row in self._stats.list_enrollment_activity() if row.is_active})

    def active_programs_count(self) -> int:
        return len({row.program_id for row in self._stats.list_enrollment_activity() if row.is_active})

    def monthly_income(self, *, today: Optional[date] = None) -> str:
        start, end = month_bounds(self._today(today))
        total = self._stats.sum_completed_payments(start=start, end=end)
        return str(total.quantize(TWO_PLACES))

    def today_attendance_stats(self, *, today: Optional[date] = None) -> AttendanceStats:
        return self._stats.attendance_counts(self._today(today)) or AttendanceStats()

    def stats(self, *, today: Optional[date] = None) -> DashboardStats:
        day = self._today(today)
        activity = self._stats.list_enrollment_activity()
        active = [row for row in activity if row.is_active]
        return DashboardStats(
            children_count=len({row.child_id for row in active}),
            active_programs=len({row.program_id for row in active}),
            monthly_income=self.monthly_income(today=day),
            today_attendance=self.today_attendance_stats(today=day),
        )

    def dashboard(self, *, today: Optional[date] = None) -> DashboardData:
        stats = self.stats(today=today)
        log.debug("Dashboard stats %s", stats)
        return DashboardData(
            stats=stats,
            active_programs=self._programs.list_by_status(ProgramStatus.ACTIVE, DASHBOARD_ACTIVE_PROGRAMS_LIMIT),
            upcoming_programs=self._programs.list(DASHBOARD_UPCOMING_PROGRAMS_LIMIT),
        )
