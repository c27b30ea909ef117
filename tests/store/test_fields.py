from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from src.childcare_admin.childcare_admin.core.enums import EnrollmentStatus, PaymentStatus, ProgramStatus
from src.childcare_admin.childcare_admin.core.exceptions import ValidationError
from src.childcare_admin.childcare_admin.enrollments.model import ENROLLMENT_SCHEMA, PAYMENT_SCHEMA
from src.childcare_admin.childcare_admin.inventory.model import INVENTORY_SCHEMA
from src.childcare_admin.childcare_admin.programs.model import ACTIVITY_SCHEMA, PROGRAM_SCHEMA


def _errors(exc_info) -> dict:
    return {e["field"]: e["message"] for e in exc_info.value.errors}


def test_enrollment_defaults_status_and_discount():
    data = ENROLLMENT_SCHEMA.validate_create(
        {"programId": 1, "childId": 2, "amount": "1500", "enrollmentDate": "2026-06-10"}
    )

    assert data["status"] == EnrollmentStatus.PENDING
    assert data["discount"] == Decimal("0.00")
    assert data["amount"] == Decimal("1500.00")
    assert data["enrollment_date"] == date(2026, 6, 10)
    assert data["notes"] is None


def test_program_defaults_to_draft_and_keeps_decimal_precision():
    data = PROGRAM_SCHEMA.validate_create(
        {"name": "Arte", "startDate": "2026-01-01", "endDate": "2026-02-01", "capacity": 10, "price": 0.1}
    )

    assert data["status"] == ProgramStatus.DRAFT
    assert data["price"] == Decimal("0.10")


def test_all_missing_required_fields_are_reported_together():
    with pytest.raises(ValidationError) as exc_info:
        PAYMENT_SCHEMA.validate_create({"amount": "10"})

    errors = _errors(exc_info)
    assert set(errors) == {"enrollmentId", "paymentDate", "method"}
    assert str(exc_info.value) == "Validation failed"


def test_unknown_enum_value_is_rejected():
    with pytest.raises(ValidationError) as exc_info:
        PAYMENT_SCHEMA.validate_create(
            {"enrollmentId": 1, "amount": "10", "paymentDate": "2026-10-01", "method": "bitcoin"}
        )

    assert "bitcoin" in _errors(exc_info)["method"]


def test_negative_inventory_quantity_is_rejected():
    with pytest.raises(ValidationError) as exc_info:
        INVENTORY_SCHEMA.validate_create({"name": "Crayolas", "quantity": -1})

    assert "quantity" in _errors(exc_info)


def test_bad_date_and_time_formats():
    with pytest.raises(ValidationError) as exc_info:
        ACTIVITY_SCHEMA.validate_create(
            {"programId": 1, "name": "Pintura", "date": "19/10/2026", "startTime": "9am", "endTime": "10:30"}
        )

    errors = _errors(exc_info)
    assert set(errors) == {"date", "startTime"}


def test_update_validates_only_supplied_keys():
    data = PAYMENT_SCHEMA.validate_update({"status": "completed"})

    assert data == {"status": PaymentStatus.COMPLETED}


def test_update_rejects_clearing_a_required_field():
    with pytest.raises(ValidationError):
        PROGRAM_SCHEMA.validate_update({"name": None})


def test_unknown_keys_are_ignored():
    data = INVENTORY_SCHEMA.validate_update({"quantity": 3, "color": "rojo"})

    assert data == {"quantity": 3}


@pytest.mark.parametrize("price", ["1e30", "100000000", "-1e30"])
def test_decimal_outside_column_range_is_a_field_error(price):
    with pytest.raises(ValidationError) as exc_info:
        PROGRAM_SCHEMA.validate_create(
            {"name": "Arte", "startDate": "2026-01-01", "endDate": "2026-02-01", "capacity": 10, "price": price}
        )

    assert set(_errors(exc_info)) == {"price"}


def test_decimal_at_column_limit_is_accepted():
    data = PROGRAM_SCHEMA.validate_update({"price": "99999999.99"})

    assert data["price"] == Decimal("99999999.99")


def test_int_outside_column_range_is_a_field_error():
    with pytest.raises(ValidationError) as exc_info:
        INVENTORY_SCHEMA.validate_update({"quantity": 2**31})

    assert set(_errors(exc_info)) == {"quantity"}


def test_date_rejects_trailing_garbage():
    with pytest.raises(ValidationError) as exc_info:
        ACTIVITY_SCHEMA.validate_update({"date": "2026-10-19xyz"})

    assert set(_errors(exc_info)) == {"date"}


def test_date_accepts_iso_datetime():
    data = ACTIVITY_SCHEMA.validate_update({"date": "2026-10-19T08:30:00"})

    assert data["date"] == date(2026, 10, 19)
