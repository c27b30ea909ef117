from __future__ import annotations

from datetime import date

import pytest

from src.childcare_admin.childcare_admin.attendance.model import ATTENDANCE_SCHEMA
from src.childcare_admin.childcare_admin.core.enums import Role
from src.childcare_admin.childcare_admin.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from src.childcare_admin.childcare_admin.families.model import CHILD_SCHEMA
from src.childcare_admin.childcare_admin.store.service import EntityService


def test_child_requires_existing_parent(container, seeded):
    children = container.entity_services["children"]

    with pytest.raises(ValidationError) as exc_info:
        children.create({"name": "Mía", "birthDate": "2020-03-03", "parentId": 999})

    assert exc_info.value.errors[0]["field"] == "parentId"

    created = children.create({"name": "Mía", "birthDate": "2020-03-03", "parentId": seeded["parent"].id})
    assert created.parent_id == seeded["parent"].id


def test_enrollment_requires_existing_program_and_child(container, seeded):
    enrollments = container.entity_services["enrollments"]

    with pytest.raises(ValidationError) as exc_info:
        enrollments.create({"programId": 404, "childId": 405, "amount": "10", "enrollmentDate": "2026-10-01"})

    assert {e["field"] for e in exc_info.value.errors} == {"programId", "childId"}


def test_update_is_partial_and_checks_references(container, seeded):
    enrollments = container.entity_services["enrollments"]
    e1 = seeded["e1"]

    updated = enrollments.update(e1.id, {"notes": "Beca parcial"})
    assert updated.notes == "Beca parcial"
    assert updated.amount == e1.amount

    with pytest.raises(ValidationError):
        enrollments.update(e1.id, {"childId": 12345})


def test_get_and_update_missing_raise_not_found(container):
    programs = container.entity_services["programs"]

    with pytest.raises(NotFoundError, match="Program not found"):
        programs.get(42)
    with pytest.raises(NotFoundError):
        programs.update(42, {"name": "X"})


def test_delete_is_admin_only(container, seeded):
    parents = container.entity_services["parents"]
    parent_id = seeded["parent"].id

    with pytest.raises(AuthorizationError):
        parents.delete(parent_id, current_role=Role.STAFF)

    parents.delete(parent_id, current_role=Role.ADMIN)
    with pytest.raises(NotFoundError):
        parents.get(parent_id)
    with pytest.raises(NotFoundError):
        parents.delete(parent_id, current_role=Role.ADMIN)


def test_list_uses_first_declared_filter(container, seeded):
    enrollments = container.entity_services["enrollments"]

    by_program = enrollments.list(filters={"programId": str(seeded["p1"].id), "childId": str(seeded["ana"].id)})
    assert {e.id for e in by_program} == {seeded["e1"].id, seeded["e2"].id}

    by_child = enrollments.list(filters={"childId": str(seeded["luis"].id)})
    assert [e.id for e in by_child] == [seeded["e2"].id]


def test_list_pagination_is_clamped(container, repos):
    for i in range(5):
        repos["inventory"].add(name=f"Item {i}", quantity=i)
    inventory = container.entity_services["inventory"]

    assert len(inventory.list(limit=2, offset=1)) == 2
    assert len(inventory.list(limit=0)) == 5
    assert len(inventory.list(offset=-3)) == 5


def test_attendance_list_needs_date_or_child(container, repos):
    attendance = container.entity_services["attendance"]
    repos["attendance"].add(child_id=1, date=date(2026, 10, 19), present=True)

    with pytest.raises(ValidationError, match="Either date or childId parameter is required"):
        attendance.list()

    assert len(attendance.list(filters={"date": "2026-10-19"})) == 1
    assert len(attendance.list(filters={"childId": "1"})) == 1


def test_bad_filter_value_is_a_validation_error(container):
    with pytest.raises(ValidationError):
        container.entity_services["attendance"].list(filters={"date": "ayer"})


def test_service_refuses_unwired_references(repos):
    with pytest.raises(ValueError):
        EntityService(repos["children"], CHILD_SCHEMA)

    EntityService(repos["attendance"], ATTENDANCE_SCHEMA, references={"children": repos["children"]})
