from __future__ import annotations

from typing import Sequence

from ..core.enums import ProgramStatus
from ..database.connection import DatabaseConnection
from ..store.mysql_entity_repository import MySQLEntityRepository
from .model import ACTIVITY_SCHEMA, PROGRAM_SCHEMA, Activity, Program


class MySQLProgramRepository(MySQLEntityRepository[Program]):
    order_by = "start_date DESC, id DESC"

    def __init__(self, conn_factory: DatabaseConnection):
        super().__init__(conn_factory, PROGRAM_SCHEMA, Program)

    def list_by_status(self, status: ProgramStatus, limit: int = 100, offset: int = 0) -> Sequence[Program]:
        return self._fetch("status=%s", (ProgramStatus(status).value,), limit=limit, offset=offset)


class MySQLActivityRepository(MySQLEntityRepository[Activity]):
    order_by = "date ASC, start_time ASC"

    def __init__(self, conn_factory: DatabaseConnection):
        super().__init__(conn_factory, ACTIVITY_SCHEMA, Activity)
