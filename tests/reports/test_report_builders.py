from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from src.childcare_admin.childcare_admin.core.enums import EnrollmentStatus, PaymentMethod, PaymentStatus, ProgramStatus
from src.childcare_admin.childcare_admin.core.exceptions import ReportDataError
from src.childcare_admin.childcare_admin.enrollments.model import Enrollment, Payment
from src.childcare_admin.childcare_admin.families.model import Child, Parent
from src.childcare_admin.childcare_admin.programs.model import Program
from src.childcare_admin.childcare_admin.reports import builders

TODAY = date(2026, 10, 19)


def _payment(pid: int, enrollment_id: int) -> Payment:
    return Payment(
        id=pid,
        enrollment_id=enrollment_id,
        amount=Decimal("250"),
        payment_date=date(2026, 10, 2),
        method=PaymentMethod.CARD,
        status=PaymentStatus.COMPLETED,
    )


def test_children_report_defaults_allergies():
    children = [
        Child(id=1, name="Ana", birth_date=date(2018, 5, 2), parent_id=3, age=8),
        Child(id=2, name="Luis", birth_date=date(2016, 1, 9), parent_id=3, age=10, allergies="Maní"),
    ]

    document = builders.children_report(children, today=TODAY)

    assert document.filename == "reporte-ninos.pdf"
    assert document.table[0] == ["ID", "Nombre", "Fecha de Nacimiento", "Edad", "Alergias", "ID de Padre"]
    assert document.table[1] == ["1", "Ana", "02/05/2018", "8", "Ninguna", "3"]
    assert document.table[2][4] == "Maní"


def test_parents_report_defaults_address():
    parents = [Parent(id=1, name="Laura", email="l@x.mx", phone="555")]

    document = builders.parents_report(parents, today=TODAY)

    assert document.filename == "reporte-padres.pdf"
    assert document.table[1] == ["1", "Laura", "l@x.mx", "555", "No especificada"]


def test_programs_report_formats_money_dates_and_status():
    programs = [
        Program(
            id=4,
            name="Robótica",
            description=None,
            start_date=date(2026, 11, 3),
            end_date=date(2026, 12, 15),
            capacity=12,
            price=Decimal("900"),
            status=ProgramStatus.ACTIVE,
        )
    ]

    document = builders.programs_report(programs, today=TODAY)

    assert document.filename == "reporte-programas.pdf"
    assert document.table[1] == ["4", "Robótica", "03/11/2026", "15/12/2026", "12", "$900.00", "Activo"]


def test_enrollments_report_falls_back_to_ids():
    enrollments = [
        Enrollment(
            id=9,
            program_id=1,
            child_id=2,
            status=EnrollmentStatus.CONFIRMED,
            amount=Decimal("1500"),
            discount=Decimal("0"),
            notes=None,
            enrollment_date=date(2026, 6, 10),
        )
    ]

    document = builders.enrollments_report(enrollments, {1: "Campamento"}, {}, today=TODAY)

    assert document.filename == "reporte-inscripciones.pdf"
    assert document.table[1] == ["9", "Campamento", "Niño 2", "10/06/2026", "$1500.00", "Confirmado"]


def test_payments_report_uses_enrollment_details_or_fallback():
    enrollments_map = {5: {"programName": "Campamento", "childName": "Ana"}}

    document = builders.payments_report([_payment(1, 5), _payment(2, 6)], enrollments_map, today=TODAY)

    assert document.filename == "reporte-pagos.pdf"
    assert document.table[1] == ["1", "Campamento - Ana", "02/10/2026", "$250.00", "Tarjeta", "Completado"]
    assert document.table[2][1] == "Inscripción 6"


def test_empty_payments_report_has_header_only():
    document = builders.payments_report([], {}, today=TODAY)

    assert document.row_count == 0
    assert document.content.startswith(b"%PDF")


def test_missing_lookup_maps_are_rejected():
    with pytest.raises(ReportDataError):
        builders.payments_report([_payment(1, 5)], None)
    with pytest.raises(ReportDataError):
        builders.enrollments_report([], {}, None)
