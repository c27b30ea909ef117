"""Plain-text description of the data model, fed to the assistant as context."""
from __future__ import annotations

from typing import Iterable

from ..attendance.model import ATTENDANCE_SCHEMA
from ..enrollments.model import ENROLLMENT_SCHEMA, PAYMENT_SCHEMA
from ..families.model import CHILD_SCHEMA, COMMUNICATION_SCHEMA, PARENT_SCHEMA
from ..inventory.model import INVENTORY_SCHEMA
from ..programs.model import ACTIVITY_SCHEMA, PROGRAM_SCHEMA
from ..store.fields import EntitySchema

ENTITY_SCHEMAS: tuple[EntitySchema, ...] = (
    PROGRAM_SCHEMA,
    PARENT_SCHEMA,
    CHILD_SCHEMA,
    ENROLLMENT_SCHEMA,
    PAYMENT_SCHEMA,
    ACTIVITY_SCHEMA,
    ATTENDANCE_SCHEMA,
    COMMUNICATION_SCHEMA,
    INVENTORY_SCHEMA,
)

# users is not exposed through the entity store; password hashes are left out
USER_COLUMNS = (("id", "int"), ("username", "text"), ("name", "text"), ("email", "text"), ("role", "enum"))


def _describe_table(name: str, columns: Iterable[tuple[str, str]]) -> str:
    lines = [f"Tabla {name}:"]
    lines += [f"  - {col}: {kind}" for col, kind in columns]
    return "\n".join(lines)


def _columns(schema: EntitySchema) -> list[tuple[str, str]]:
    columns = [("id", "int")]
    for spec in schema.fields:
        kind = spec.kind
        if spec.choices is not None:
            kind = f"enum({', '.join(c.value for c in spec.choices)})"
        columns.append((spec.name, kind))
    return columns


def describe_schema() -> str:
    blocks = [_describe_table("users", USER_COLUMNS)]
    blocks += [_describe_table(s.table, _columns(s)) for s in ENTITY_SCHEMAS]
    return "Base de datos del sistema NEMI:\n\n" + "\n\n".join(blocks) + "\n"
