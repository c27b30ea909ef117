from __future__ import annotations

from datetime import date, datetime
from typing import Any, Sequence

from ..database.connection import DatabaseConnection
from ..store.mysql_entity_repository import MySQLEntityRepository
from .model import ATTENDANCE_SCHEMA, Attendance


class MySQLAttendanceRepository(MySQLEntityRepository[Attendance]):
    order_by = "date DESC, id ASC"

    def __init__(self, conn_factory: DatabaseConnection):
        super().__init__(conn_factory, ATTENDANCE_SCHEMA, Attendance)

    def list_by(self, column: str, value: Any) -> Sequence[Attendance]:
        # A DATE column compared to a DATE: matches the whole calendar day.
        if column == "date" and isinstance(value, datetime):
            value = value.date()
        if column == "date" and not isinstance(value, date):
            raise ValueError(f"Expected a date for attendance lookup, got {value!r}")
        return super().list_by(column, value)
