"""JSON projection of domain records: camelCase keys, ISO dates, 2-place decimals."""
from __future__ import annotations

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

TWO_PLACES = Decimal("0.01")


def camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def to_json_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return str(value.quantize(TWO_PLACES))
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value


def to_json(record: Any) -> Any:
    if record is None:
        return None
    if isinstance(record, (list, tuple)):
        return [to_json(r) for r in record]
    if is_dataclass(record):
        return {camel_case(f.name): to_json(getattr(record, f.name)) for f in fields(record)}
    if isinstance(record, dict):
        return {k: to_json(v) for k, v in record.items()}
    return to_json_value(record)
