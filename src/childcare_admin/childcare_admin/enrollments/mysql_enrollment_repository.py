from __future__ import annotations

from ..database.connection import DatabaseConnection
from ..store.mysql_entity_repository import MySQLEntityRepository
from .model import ENROLLMENT_SCHEMA, PAYMENT_SCHEMA, Enrollment, Payment


class MySQLEnrollmentRepository(MySQLEntityRepository[Enrollment]):
    order_by = "enrollment_date DESC, id DESC"

    def __init__(self, conn_factory: DatabaseConnection):
        super().__init__(conn_factory, ENROLLMENT_SCHEMA, Enrollment)


class MySQLPaymentRepository(MySQLEntityRepository[Payment]):
    order_by = "payment_date DESC, id DESC"

    def __init__(self, conn_factory: DatabaseConnection):
        super().__init__(conn_factory, PAYMENT_SCHEMA, Payment)
