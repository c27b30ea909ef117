from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..store.fields import EntitySchema, FieldSpec


@dataclass(frozen=True)
class Attendance:
    """One child's presence mark for one calendar day."""

    id: int
    child_id: int
    date: date
    present: bool
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


ATTENDANCE_SCHEMA = EntitySchema(
    entity="attendance",
    table="attendance",
    label="Attendance record",
    fields=(
        FieldSpec("child_id", "int", required=True, references="children"),
        FieldSpec("date", "date", required=True),
        FieldSpec("present", "bool", required=True),
        FieldSpec("notes", "text"),
    ),
    filters={"date": "date", "childId": "child_id"},
    filter_required=True,
)
