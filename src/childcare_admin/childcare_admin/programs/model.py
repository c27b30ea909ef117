from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..core.enums import ProgramStatus
from ..store.fields import EntitySchema, FieldSpec


@dataclass(frozen=True)
class Program:
    """A program offering children can enroll in (camp, workshop, course)."""

    id: int
    name: str
    description: Optional[str]
    start_date: date
    end_date: date
    capacity: int
    price: Decimal
    status: ProgramStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class Activity:
    """A scheduled session inside a program."""

    id: int
    program_id: int
    name: str
    description: Optional[str]
    date: date
    start_time: str
    end_time: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


PROGRAM_SCHEMA = EntitySchema(
    entity="programs",
    table="programs",
    label="Program",
    fields=(
        FieldSpec("name", "text", required=True),
        FieldSpec("description", "text"),
        FieldSpec("start_date", "date", required=True),
        FieldSpec("end_date", "date", required=True),
        FieldSpec("capacity", "int", required=True, min_value=0),
        FieldSpec("price", "decimal", required=True, min_value=0),
        FieldSpec("status", "enum", default=ProgramStatus.DRAFT, choices=ProgramStatus),
    ),
)

ACTIVITY_SCHEMA = EntitySchema(
    entity="activities",
    table="activities",
    label="Activity",
    fields=(
        FieldSpec("program_id", "int", required=True, references="programs"),
        FieldSpec("name", "text", required=True),
        FieldSpec("description", "text"),
        FieldSpec("date", "date", required=True),
        FieldSpec("start_time", "time", required=True),
        FieldSpec("end_time", "time", required=True),
    ),
    filters={"programId": "program_id"},
)
