"""Spanish display labels and formats used in the PDF reports."""
from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

STATUS_LABELS = {
    "active": "Activo",
    "complete": "Completado",
    "cancelled": "Cancelado",
    "draft": "Borrador",
    "pending": "Pendiente",
    "confirmed": "Confirmado",
    "refunded": "Reembolsado",
    "failed": "Fallido",
    "completed": "Completado",
}

PAYMENT_METHOD_LABELS = {
    "cash": "Efectivo",
    "transfer": "Transferencia",
    "card": "Tarjeta",
    "other": "Otro",
}

MONTHS_ES = (
    "enero", "febrero", "marzo", "abril", "mayo", "junio",
    "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
)


def _code(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return "" if value is None else str(value)


def translate_status(status: Any) -> str:
    """Spanish label for a program/enrollment/payment status; unknown codes pass through."""
    code = _code(status)
    return STATUS_LABELS.get(code, code)


def translate_payment_method(method: Any) -> str:
    code = _code(method)
    return PAYMENT_METHOD_LABELS.get(code, code)


def format_currency(value: Any) -> str:
    try:
        amount = Decimal(str(value if value is not None else 0))
    except InvalidOperation:
        return str(value)
    return f"${amount.quantize(Decimal('0.01'))}"


def _as_date(value: Any):
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(str(value)[:10], "%Y-%m-%d").date()
    except ValueError:
        return None


def format_date(value: Any) -> str:
    """``dd/mm/yyyy``; ``None`` becomes an empty string, unparseable text is kept as is."""
    if value is None or value == "":
        return ""
    day = _as_date(value)
    if day is None:
        return str(value)
    return day.strftime("%d/%m/%Y")


def format_long_date(day: date) -> str:
    """e.g. ``19 de octubre de 2026``."""
    return f"{day.day} de {MONTHS_ES[day.month - 1]} de {day.year}"
