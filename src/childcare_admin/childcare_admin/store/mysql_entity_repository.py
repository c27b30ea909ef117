from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Generic, Optional, Sequence, TypeVar

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_decimal
from .fields import EntitySchema

T = TypeVar("T")

_AUDIT_COLUMNS = ("created_at", "updated_at")


class MySQLEntityRepository(Generic[T]):
    """Table-driven CRUD over one entity table.

    Concrete repositories only pass their ``EntitySchema`` and model class, and
    add entity-specific queries on top.
    """

    order_by: str = "id ASC"

    def __init__(self, conn_factory: DatabaseConnection, schema: EntitySchema, model: Callable[..., T]):
        self._conn_factory = conn_factory
        self._schema = schema
        self._model = model
        self._select = ", ".join(["id", *schema.columns, *_AUDIT_COLUMNS])

    @property
    def schema(self) -> EntitySchema:
        return self._schema

    def _to_model(self, row: dict) -> T:
        values: dict[str, Any] = {"id": int(row["id"])}
        for spec in self._schema.fields:
            value = row.get(spec.name)
            if value is not None:
                if spec.kind == "enum":
                    value = spec.choices(value)
                elif spec.kind == "bool":
                    value = bool(value)
                elif spec.kind == "decimal":
                    value = to_decimal(value)
            values[spec.name] = value
        for col in _AUDIT_COLUMNS:
            values[col] = row.get(col)
        return self._model(**values)

    @staticmethod
    def _param(value: Any) -> Any:
        return value.value if isinstance(value, Enum) else value

    def _check_column(self, column: str) -> str:
        if column not in self._schema.columns and column != "id":
            raise ValueError(f"Unknown column {column!r} for {self._schema.table}")
        return column

    def _fetch(self, where: str = "", params: tuple = (), *, limit: int | None = None, offset: int = 0) -> list[T]:
        sql = f"SELECT {self._select} FROM {self._schema.table}"
        if where:
            sql += f" WHERE {where}"
        sql += f" ORDER BY {self.order_by}"
        if limit is not None:
            sql += " LIMIT %s OFFSET %s"
            params = (*params, int(limit), int(offset))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return [self._to_model(r) for r in fetchall(cur)]

    def get(self, entity_id: int) -> Optional[T]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {self._select} FROM {self._schema.table} WHERE id=%s", (int(entity_id),))
            row = fetchone(cur)
            return self._to_model(row) if row else None

    def list(self, limit: int = 100, offset: int = 0) -> Sequence[T]:
        return self._fetch(limit=limit, offset=offset)

    def list_by(self, column: str, value: Any) -> Sequence[T]:
        column = self._check_column(column)
        return self._fetch(f"{column}=%s", (self._param(value),))

    def create(self, data: dict) -> T:
        cols = [c for c in self._schema.columns if c in data]
        placeholders = ", ".join(["%s"] * len(cols))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO {self._schema.table} ({', '.join(cols)}) VALUES ({placeholders})",
                tuple(self._param(data[c]) for c in cols),
            )
            new_id = int(cur.lastrowid)
        created = self.get(new_id)
        if created is None:
            raise RuntimeError(f"Inserted {self._schema.table} row {new_id} could not be read back")
        return created

    def update(self, entity_id: int, partial: dict) -> Optional[T]:
        cols = [c for c in self._schema.columns if c in partial]
        if not cols:
            return self.get(entity_id)
        assignments = ", ".join(f"{c}=%s" for c in cols)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE {self._schema.table} SET {assignments} WHERE id=%s",
                (*[self._param(partial[c]) for c in cols], int(entity_id)),
            )
        # rowcount is 0 for a no-op update too, so re-read instead
        return self.get(entity_id)

    def delete(self, entity_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM {self._schema.table} WHERE id=%s", (int(entity_id),))
            return cur.rowcount > 0
