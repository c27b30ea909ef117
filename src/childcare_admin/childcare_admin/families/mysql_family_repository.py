from __future__ import annotations

from ..database.connection import DatabaseConnection
from ..store.mysql_entity_repository import MySQLEntityRepository
from .model import CHILD_SCHEMA, COMMUNICATION_SCHEMA, PARENT_SCHEMA, Child, Communication, Parent


class MySQLParentRepository(MySQLEntityRepository[Parent]):
    order_by = "name ASC, id ASC"

    def __init__(self, conn_factory: DatabaseConnection):
        super().__init__(conn_factory, PARENT_SCHEMA, Parent)


class MySQLChildRepository(MySQLEntityRepository[Child]):
    order_by = "name ASC, id ASC"

    def __init__(self, conn_factory: DatabaseConnection):
        super().__init__(conn_factory, CHILD_SCHEMA, Child)


class MySQLCommunicationRepository(MySQLEntityRepository[Communication]):
    order_by = "date DESC, id DESC"

    def __init__(self, conn_factory: DatabaseConnection):
        super().__init__(conn_factory, COMMUNICATION_SCHEMA, Communication)
