from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from src.childcare_admin.childcare_admin.core.enums import EnrollmentStatus
from src.childcare_admin.childcare_admin.dashboard.model import AttendanceStats
from src.childcare_admin.childcare_admin.dashboard.mysql_statistics_repository import MySQLStatisticsRepository


def _squash(sql: str) -> str:
    return " ".join(sql.split())


class _Cursor:
    def __init__(self, rows):
        self.rows = rows
        self.executed = []

    def execute(self, sql, params=None):
        self.executed.append((_squash(sql), params))

    def fetchall(self):
        return self.rows

    def fetchone(self):
        return self.rows[0] if self.rows else None

    def close(self):
        pass


class _Conn:
    def __init__(self, cursor):
        self._cursor = cursor
        self.committed = False
        self.closed = False

    def cursor(self, dictionary=False):
        assert dictionary
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        pass

    def close(self):
        self.closed = True


class _Factory:
    def __init__(self, rows):
        self.cursor = _Cursor(rows)
        self.conn = _Conn(self.cursor)

    def connect(self):
        return self.conn


@pytest.fixture
def factory():
    return _Factory([])


def test_enrollment_activity_left_joins_payments(factory):
    factory.cursor.rows = [
        {"enrollment_id": 1, "program_id": 10, "child_id": 100, "status": "pending", "has_completed_payment": 1},
        {"enrollment_id": 2, "program_id": 10, "child_id": 101, "status": "confirmed", "has_completed_payment": 0},
    ]

    rows = MySQLStatisticsRepository(factory).list_enrollment_activity()

    sql, params = factory.cursor.executed[0]
    assert "FROM enrollments e LEFT JOIN payments p ON p.enrollment_id = e.id" in sql
    assert "MAX(CASE WHEN p.status=%s THEN 1 ELSE 0 END) AS has_completed_payment" in sql
    assert "GROUP BY e.id" in sql
    assert params == ("completed",)
    assert [(r.enrollment_id, r.status, r.has_completed_payment) for r in rows] == [
        (1, EnrollmentStatus.PENDING, True),
        (2, EnrollmentStatus.CONFIRMED, False),
    ]
    assert all(r.is_active for r in rows)
    assert factory.conn.committed and factory.conn.closed


def test_sum_completed_payments_binds_half_open_range(factory):
    factory.cursor.rows = [{"total": Decimal("750.50")}]
    start, end = datetime(2026, 10, 1), datetime(2026, 11, 1)

    total = MySQLStatisticsRepository(factory).sum_completed_payments(start=start, end=end)

    sql, params = factory.cursor.executed[0]
    assert "COALESCE(SUM(amount), 0)" in sql
    assert "payment_date >= %s AND payment_date < %s AND status=%s" in sql
    assert params == (start, end, "completed")
    assert total == Decimal("750.50")


def test_sum_completed_payments_without_rows_is_zero(factory):
    total = MySQLStatisticsRepository(factory).sum_completed_payments(
        start=datetime(2026, 10, 1), end=datetime(2026, 11, 1)
    )

    assert total == Decimal("0")


def test_attendance_counts_for_one_day(factory):
    factory.cursor.rows = [{"total": 3, "present": Decimal("2")}]

    stats = MySQLStatisticsRepository(factory).attendance_counts(date(2026, 10, 19))

    sql, params = factory.cursor.executed[0]
    assert "COUNT(*) AS total" in sql
    assert "COALESCE(SUM(CASE WHEN present THEN 1 ELSE 0 END), 0) AS present" in sql
    assert "WHERE date=%s" in sql
    assert params == (date(2026, 10, 19),)
    assert stats == AttendanceStats(present=2, total=3)
