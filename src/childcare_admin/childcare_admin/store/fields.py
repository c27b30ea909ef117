"""Write-time schemas for the entity store.

Each entity declares its writable columns as ``FieldSpec`` entries. Payloads
arrive as camelCase JSON; ``validate_create`` / ``validate_update`` return a
clean snake_case dict ready for the repository, or raise one
``ValidationError`` listing every offending field.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Optional, Sequence

from ..common.serialization import TWO_PLACES, camel_case
from ..core.exceptions import ValidationError

_TIME_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_MISSING = object()

# Column ranges: DECIMAL(10,2) and signed INT.
DECIMAL_MAX = Decimal("99999999.99")
INT_MIN, INT_MAX = -(2**31), 2**31 - 1


@dataclass(frozen=True)
class FieldSpec:
    name: str
    kind: str  # text | int | decimal | date | bool | enum | time
    required: bool = False
    default: Any = None
    choices: Optional[type[Enum]] = None
    min_value: Optional[Any] = None
    references: Optional[str] = None  # entity name the id must exist in

    @property
    def json_name(self) -> str:
        return camel_case(self.name)


@dataclass(frozen=True)
class EntitySchema:
    entity: str
    table: str
    fields: Sequence[FieldSpec]
    label: str = ""
    filters: dict[str, str] = field(default_factory=dict)  # query arg -> column
    filter_required: bool = False

    @property
    def columns(self) -> list[str]:
        return [f.name for f in self.fields]

    @property
    def references(self) -> list[FieldSpec]:
        return [f for f in self.fields if f.references]

    def validate_create(self, payload: dict) -> dict:
        return self._validate(payload or {}, partial=False)

    def validate_update(self, payload: dict) -> dict:
        return self._validate(payload or {}, partial=True)

    def _validate(self, payload: dict, *, partial: bool) -> dict:
        if not isinstance(payload, dict):
            raise ValidationError("Validation failed", [{"field": "", "message": "Expected a JSON object"}])

        clean: dict[str, Any] = {}
        errors: list[dict] = []

        for spec in self.fields:
            raw = _lookup(payload, spec)
            if raw is _MISSING:
                if partial:
                    continue
                if spec.default is not None:
                    clean[spec.name] = spec.default
                    continue
                if spec.required:
                    errors.append({"field": spec.json_name, "message": "Required"})
                else:
                    clean[spec.name] = None
                continue

            if raw is None or (isinstance(raw, str) and raw.strip() == "" and spec.kind != "text"):
                if spec.required:
                    errors.append({"field": spec.json_name, "message": "Required"})
                else:
                    clean[spec.name] = None
                continue

            try:
                clean[spec.name] = coerce(spec, raw)
            except ValueError as e:
                errors.append({"field": spec.json_name, "message": str(e)})

        if errors:
            raise ValidationError("Validation failed", errors)
        return clean


def _lookup(payload: dict, spec: FieldSpec) -> Any:
    if spec.json_name in payload:
        return payload[spec.json_name]
    if spec.name in payload:
        return payload[spec.name]
    return _MISSING


def coerce(spec: FieldSpec, raw: Any) -> Any:
    """Convert a JSON value to the Python type of ``spec`` or raise ValueError."""
    kind = spec.kind

    if kind == "text":
        value = str(raw)
        if spec.required and not value.strip():
            raise ValueError("Required")
        return value

    if kind == "int":
        if isinstance(raw, bool):
            raise ValueError("Expected integer")
        try:
            value = int(str(raw))
        except ValueError:
            raise ValueError("Expected integer")
        if spec.min_value is not None and value < spec.min_value:
            raise ValueError(f"Must be greater than or equal to {spec.min_value}")
        if not INT_MIN <= value <= INT_MAX:
            raise ValueError("Out of range")
        return value

    if kind == "decimal":
        if isinstance(raw, bool):
            raise ValueError("Expected decimal")
        try:
            # str() first: a JSON float becomes its shortest repr, not its binary expansion
            value = Decimal(str(raw))
        except InvalidOperation:
            raise ValueError("Expected decimal")
        if not value.is_finite():
            raise ValueError("Expected decimal")
        if abs(value) > DECIMAL_MAX:
            raise ValueError(f"Must be at most {DECIMAL_MAX}")
        if spec.min_value is not None and value < Decimal(str(spec.min_value)):
            raise ValueError(f"Must be greater than or equal to {spec.min_value}")
        try:
            return value.quantize(TWO_PLACES)
        except InvalidOperation:
            raise ValueError("Expected decimal")

    if kind == "date":
        if isinstance(raw, datetime):
            return raw.date()
        if isinstance(raw, date):
            return raw
        text = str(raw).strip()
        try:
            if _DATE_RE.match(text):
                return datetime.strptime(text, "%Y-%m-%d").date()
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        except ValueError:
            raise ValueError("Expected date YYYY-MM-DD")

    if kind == "bool":
        if isinstance(raw, bool):
            return raw
        if raw in (0, 1):
            return bool(raw)
        if isinstance(raw, str) and raw.lower() in {"true", "false"}:
            return raw.lower() == "true"
        raise ValueError("Expected boolean")

    if kind == "enum":
        try:
            return spec.choices(str(raw))
        except ValueError:
            allowed = ", ".join(c.value for c in spec.choices)
            raise ValueError(f"Invalid value {raw!r}; expected one of: {allowed}")

    if kind == "time":
        value = str(raw).strip()
        if not _TIME_RE.match(value):
            raise ValueError("Expected time HH:MM")
        return value

    raise ValueError(f"Unsupported field kind {kind!r}")
