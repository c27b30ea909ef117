from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..store.fields import EntitySchema, FieldSpec


@dataclass(frozen=True)
class InventoryItem:
    id: int
    name: str
    quantity: int
    category: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


INVENTORY_SCHEMA = EntitySchema(
    entity="inventory",
    table="inventory",
    label="Inventory item",
    fields=(
        FieldSpec("name", "text", required=True),
        FieldSpec("quantity", "int", required=True, min_value=0),
        FieldSpec("category", "text"),
        FieldSpec("notes", "text"),
    ),
)
