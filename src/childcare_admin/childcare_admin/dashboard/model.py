from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from ..core.enums import EnrollmentStatus
from ..programs.model import Program


@dataclass(frozen=True)
class EnrollmentActivity:
    """Read-model: one enrollment with its payment signal (for "active" counts)."""

    enrollment_id: int
    program_id: int
    child_id: int
    status: EnrollmentStatus
    has_completed_payment: bool

    @property
    def is_active(self) -> bool:
        # Inclusive OR: either signal is enough.
        return self.status == EnrollmentStatus.CONFIRMED or self.has_completed_payment


@dataclass(frozen=True)
class AttendanceStats:
    present: int = 0
    total: int = 0

    def to_dict(self) -> dict:
        return {"present": self.present, "total": self.total}


@dataclass(frozen=True)
class DashboardStats:
    children_count: int
    active_programs: int
    monthly_income: str
    today_attendance: AttendanceStats

    def to_dict(self) -> dict:
        return {
            "childrenCount": self.children_count,
            "activePrograms": self.active_programs,
            "monthlyIncome": self.monthly_income,
            "todayAttendance": self.today_attendance.to_dict(),
        }


@dataclass(frozen=True)
class DashboardData:
    stats: DashboardStats
    active_programs: Sequence[Program] = field(default_factory=tuple)
    upcoming_programs: Sequence[Program] = field(default_factory=tuple)


