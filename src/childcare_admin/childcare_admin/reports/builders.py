from __future__ import annotations

from datetime import date
from typing import Mapping, Optional, Sequence

from ..core.exceptions import ReportDataError
from ..enrollments.model import Enrollment, Payment
from ..families.model import Child, Parent
from ..programs.model import Program
from .renderer import DEFAULT_BRAND, ReportColumn, ReportDocument, generate_pdf
from .translations import format_currency, format_date, translate_payment_method, translate_status

CHILDREN_COLUMNS = (
    ReportColumn("ID", "id"),
    ReportColumn("Nombre", "name"),
    ReportColumn("Fecha de Nacimiento", "birthDate"),
    ReportColumn("Edad", "age"),
    ReportColumn("Alergias", "allergies"),
    ReportColumn("ID de Padre", "parentId"),
)

PARENTS_COLUMNS = (
    ReportColumn("ID", "id"),
    ReportColumn("Nombre", "name"),
    ReportColumn("Email", "email"),
    ReportColumn("Teléfono", "phone"),
    ReportColumn("Dirección", "address"),
)

PROGRAMS_COLUMNS = (
    ReportColumn("ID", "id"),
    ReportColumn("Nombre", "name"),
    ReportColumn("Inicio", "startDate"),
    ReportColumn("Fin", "endDate"),
    ReportColumn("Capacidad", "capacity"),
    ReportColumn("Precio", "price"),
    ReportColumn("Estado", "status"),
)

ENROLLMENTS_COLUMNS = (
    ReportColumn("ID", "id"),
    ReportColumn("Programa", "programName"),
    ReportColumn("Niño", "childName"),
    ReportColumn("Fecha", "enrollmentDate"),
    ReportColumn("Monto", "amount"),
    ReportColumn("Estado", "status"),
)

PAYMENTS_COLUMNS = (
    ReportColumn("ID", "id"),
    ReportColumn("Inscripción", "enrollmentDetails"),
    ReportColumn("Fecha", "paymentDate"),
    ReportColumn("Monto", "amount"),
    ReportColumn("Método", "method"),
    ReportColumn("Estado", "status"),
)


def children_report(
    children: Sequence[Child], *, today: Optional[date] = None, brand: str = DEFAULT_BRAND
) -> ReportDocument:
    rows = [
        {
            "id": c.id,
            "name": c.name,
            "birthDate": format_date(c.birth_date),
            "age": c.age,
            "allergies": c.allergies or "Ninguna",
            "parentId": c.parent_id,
        }
        for c in children
    ]
    return generate_pdf(
        "Informe de Niños",
        "Listado completo de niños registrados",
        CHILDREN_COLUMNS,
        rows,
        "reporte-ninos",
        today=today,
        brand=brand,
    )


def parents_report(
    parents: Sequence[Parent], *, today: Optional[date] = None, brand: str = DEFAULT_BRAND
) -> ReportDocument:
    rows = [
        {"id": p.id, "name": p.name, "email": p.email, "phone": p.phone, "address": p.address or "No especificada"}
        for p in parents
    ]
    return generate_pdf(
        "Informe de Padres",
        "Listado completo de padres registrados",
        PARENTS_COLUMNS,
        rows,
        "reporte-padres",
        today=today,
        brand=brand,
    )


def programs_report(
    programs: Sequence[Program], *, today: Optional[date] = None, brand: str = DEFAULT_BRAND
) -> ReportDocument:
    rows = [
        {
            "id": p.id,
            "name": p.name,
            "startDate": format_date(p.start_date),
            "endDate": format_date(p.end_date),
            "capacity": p.capacity,
            "price": format_currency(p.price),
            "status": translate_status(p.status),
        }
        for p in programs
    ]
    return generate_pdf(
        "Informe de Programas",
        "Listado completo de programas",
        PROGRAMS_COLUMNS,
        rows,
        "reporte-programas",
        today=today,
        brand=brand,
    )


def enrollments_report(
    enrollments: Sequence[Enrollment],
    programs_map: Optional[Mapping[int, str]],
    children_map: Optional[Mapping[int, str]],
    *,
    today: Optional[date] = None,
    brand: str = DEFAULT_BRAND,
) -> ReportDocument:
    if programs_map is None or children_map is None:
        raise ReportDataError("Enrollments report needs program and child names")

    rows = [
        {
            "id": e.id,
            "programName": programs_map.get(e.program_id) or f"Programa {e.program_id}",
            "childName": children_map.get(e.child_id) or f"Niño {e.child_id}",
            "enrollmentDate": format_date(e.enrollment_date),
            "amount": format_currency(e.amount),
            "status": translate_status(e.status),
        }
        for e in enrollments
    ]
    return generate_pdf(
        "Informe de Inscripciones",
        "Listado completo de inscripciones",
        ENROLLMENTS_COLUMNS,
        rows,
        "reporte-inscripciones",
        today=today,
        brand=brand,
    )


def _enrollment_details(enrollment_id: int, enrollments_map: Mapping[int, Mapping[str, str]]) -> str:
    details = enrollments_map.get(enrollment_id)
    if not details:
        return f"Inscripción {enrollment_id}"
    return f"{details.get('programName', '')} - {details.get('childName', '')}"


def payments_report(
    payments: Sequence[Payment],
    enrollments_map: Optional[Mapping[int, Mapping[str, str]]],
    *,
    today: Optional[date] = None,
    brand: str = DEFAULT_BRAND,
) -> ReportDocument:
    if enrollments_map is None:
        raise ReportDataError("Payments report needs enrollment details")

    rows = [
        {
            "id": p.id,
            "enrollmentDetails": _enrollment_details(p.enrollment_id, enrollments_map),
            "paymentDate": format_date(p.payment_date),
            "amount": format_currency(p.amount),
            "method": translate_payment_method(p.method),
            "status": translate_status(p.status),
        }
        for p in payments
    ]
    return generate_pdf(
        "Informe de Pagos",
        "Listado completo de pagos",
        PAYMENTS_COLUMNS,
        rows,
        "reporte-pagos",
        today=today,
        brand=brand,
    )
