from __future__ import annotations

from ..database.connection import DatabaseConnection
from ..store.mysql_entity_repository import MySQLEntityRepository
from .model import INVENTORY_SCHEMA, InventoryItem


class MySQLInventoryRepository(MySQLEntityRepository[InventoryItem]):
    order_by = "name ASC, id ASC"

    def __init__(self, conn_factory: DatabaseConnection):
        super().__init__(conn_factory, INVENTORY_SCHEMA, InventoryItem)
