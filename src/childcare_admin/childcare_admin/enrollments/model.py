from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..core.enums import EnrollmentStatus, PaymentMethod, PaymentStatus
from ..store.fields import EntitySchema, FieldSpec


@dataclass(frozen=True)
class Enrollment:
    """Association of one child to one program, with its own financial terms."""

    id: int
    program_id: int
    child_id: int
    status: EnrollmentStatus
    amount: Decimal
    discount: Optional[Decimal]
    notes: Optional[str]
    enrollment_date: date
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class Payment:
    id: int
    enrollment_id: int
    amount: Decimal
    payment_date: date
    method: PaymentMethod
    status: PaymentStatus
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


ENROLLMENT_SCHEMA = EntitySchema(
    entity="enrollments",
    table="enrollments",
    label="Enrollment",
    fields=(
        FieldSpec("program_id", "int", required=True, references="programs"),
        FieldSpec("child_id", "int", required=True, references="children"),
        FieldSpec("status", "enum", default=EnrollmentStatus.PENDING, choices=EnrollmentStatus),
        FieldSpec("amount", "decimal", required=True, min_value=0),
        FieldSpec("discount", "decimal", default=Decimal("0.00"), min_value=0),
        FieldSpec("notes", "text"),
        FieldSpec("enrollment_date", "date", required=True),
    ),
    filters={"programId": "program_id", "childId": "child_id"},
)

PAYMENT_SCHEMA = EntitySchema(
    entity="payments",
    table="payments",
    label="Payment",
    fields=(
        FieldSpec("enrollment_id", "int", required=True, references="enrollments"),
        FieldSpec("amount", "decimal", required=True, min_value=0),
        FieldSpec("payment_date", "date", required=True),
        FieldSpec("method", "enum", required=True, choices=PaymentMethod),
        FieldSpec("status", "enum", default=PaymentStatus.PENDING, choices=PaymentStatus),
        FieldSpec("notes", "text"),
    ),
    filters={"enrollmentId": "enrollment_id"},
)
