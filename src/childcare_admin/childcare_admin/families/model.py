from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import CommunicationStatus, CommunicationType
from ..store.fields import EntitySchema, FieldSpec


@dataclass(frozen=True)
class Parent:
    id: int
    name: str
    email: str
    phone: str
    emergency_phone: Optional[str] = None
    neighborhood: Optional[str] = None
    address: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class Child:
    """A registered child; always owned by exactly one parent."""

    id: int
    name: str
    birth_date: date
    parent_id: int
    age: Optional[int] = None
    allergies: Optional[str] = None
    medical_notes: Optional[str] = None
    interests: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class Communication:
    id: int
    parent_id: int
    type: CommunicationType
    subject: str
    content: str
    date: date
    status: CommunicationStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


PARENT_SCHEMA = EntitySchema(
    entity="parents",
    table="parents",
    label="Parent",
    fields=(
        FieldSpec("name", "text", required=True),
        FieldSpec("email", "text", required=True),
        FieldSpec("phone", "text", required=True),
        FieldSpec("emergency_phone", "text"),
        FieldSpec("neighborhood", "text"),
        FieldSpec("address", "text"),
        FieldSpec("notes", "text"),
    ),
)

CHILD_SCHEMA = EntitySchema(
    entity="children",
    table="children",
    label="Child",
    fields=(
        FieldSpec("name", "text", required=True),
        FieldSpec("birth_date", "date", required=True),
        FieldSpec("age", "int", min_value=0),
        FieldSpec("allergies", "text"),
        FieldSpec("medical_notes", "text"),
        FieldSpec("interests", "text"),
        FieldSpec("parent_id", "int", required=True, references="parents"),
    ),
    filters={"parentId": "parent_id"},
)

COMMUNICATION_SCHEMA = EntitySchema(
    entity="communications",
    table="communications",
    label="Communication",
    fields=(
        FieldSpec("parent_id", "int", required=True, references="parents"),
        FieldSpec("type", "enum", required=True, choices=CommunicationType),
        FieldSpec("subject", "text", required=True),
        FieldSpec("content", "text", required=True),
        FieldSpec("date", "date", required=True),
        FieldSpec("status", "enum", default=CommunicationStatus.SENT, choices=CommunicationStatus),
    ),
    filters={"parentId": "parent_id"},
)
