from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Sequence

from ..core.enums import EnrollmentStatus, PaymentStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_decimal
from .model import AttendanceStats, EnrollmentActivity
from .repository import StatisticsRepository


class MySQLStatisticsRepository(StatisticsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_enrollment_activity(self) -> Sequence[EnrollmentActivity]:
        # LEFT JOIN: a confirmed enrollment with no payments yet must still show up.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT e.id AS enrollment_id, e.program_id, e.child_id, e.status,
                       MAX(CASE WHEN p.status=%s THEN 1 ELSE 0 END) AS has_completed_payment
                FROM enrollments e
                LEFT JOIN payments p ON p.enrollment_id = e.id
                GROUP BY e.id, e.program_id, e.child_id, e.status
                """,
                (PaymentStatus.COMPLETED.value,),
            )
            return [
                EnrollmentActivity(
                    enrollment_id=int(r["enrollment_id"]),
                    program_id=int(r["program_id"]),
                    child_id=int(r["child_id"]),
                    status=EnrollmentStatus(r["status"]),
                    has_completed_payment=bool(r["has_completed_payment"]),
                )
                for r in fetchall(cur)
            ]

    def sum_completed_payments(self, *, start: datetime, end: datetime) -> Decimal:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT COALESCE(SUM(amount), 0) AS total
                FROM payments
                WHERE payment_date >= %s AND payment_date < %s AND status=%s
                """,
                (start, end, PaymentStatus.COMPLETED.value),
            )
            row = fetchone(cur) or {}
            return to_decimal(row.get("total"))

    def attendance_counts(self, day: date) -> AttendanceStats:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT COUNT(*) AS total,
                       COALESCE(SUM(CASE WHEN present THEN 1 ELSE 0 END), 0) AS present
                FROM attendance
                WHERE date=%s
                """,
                (day,),
            )
            row = fetchone(cur) or {}
            return AttendanceStats(present=int(row.get("present") or 0), total=int(row.get("total") or 0))
