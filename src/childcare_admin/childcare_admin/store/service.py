from __future__ import annotations

import logging
from typing import Any, Generic, Mapping, Optional, Sequence, TypeVar

from ..core.constants import DEFAULT_LIST_LIMIT, MAX_LIST_LIMIT
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from .fields import EntitySchema, coerce
from .repository import EntityRepository

log = logging.getLogger(__name__)

T = TypeVar("T")


class EntityService(Generic[T]):
    """Use case: CRUD for one entity.

    Validates payloads against the entity schema, checks that foreign keys
    point at existing rows, and restricts deletes to admins. Concurrent edits
    are last-writer-wins; there is no version column.
    """

    def __init__(
        self,
        repo: EntityRepository[T],
        schema: EntitySchema,
        *,
        references: Optional[Mapping[str, EntityRepository[Any]]] = None,
    ):
        self._repo = repo
        self._schema = schema
        self._references = dict(references or {})

        missing = [f.references for f in schema.references if f.references not in self._references]
        if missing:
            raise ValueError(f"{schema.entity}: no repository wired for references {missing}")

    @property
    def schema(self) -> EntitySchema:
        return self._schema

    def get(self, entity_id: int) -> T:
        record = self._repo.get(entity_id)
        if record is None:
            raise NotFoundError(f"{self._schema.label} not found")
        return record

    def list(
        self,
        *,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Mapping[str, Any]] = None,
    ) -> Sequence[T]:
        filters = {k: v for k, v in (filters or {}).items() if v not in (None, "")}

        # First supported filter wins; the order is the one declared on the schema.
        for arg, column in self._schema.filters.items():
            if arg in filters:
                return self._repo.list_by(column, self._coerce_filter(arg, column, filters[arg]))

        if self._schema.filter_required:
            wanted = " or ".join(self._schema.filters)
            raise ValidationError(f"Either {wanted} parameter is required")

        limit = DEFAULT_LIST_LIMIT if not limit or limit < 0 else min(int(limit), MAX_LIST_LIMIT)
        offset = max(int(offset or 0), 0)
        return self._repo.list(limit, offset)

    def _coerce_filter(self, arg: str, column: str, raw: Any) -> Any:
        spec = next(f for f in self._schema.fields if f.name == column)
        try:
            return coerce(spec, raw)
        except ValueError as e:
            raise ValidationError("Validation failed", [{"field": arg, "message": str(e)}])

    def _check_references(self, data: dict) -> None:
        errors = []
        for spec in self._schema.references:
            if spec.name not in data or data[spec.name] is None:
                continue
            if self._references[spec.references].get(data[spec.name]) is None:
                errors.append({"field": spec.json_name, "message": f"Referenced {spec.references} record does not exist"})
        if errors:
            raise ValidationError("Validation failed", errors)

    def create(self, payload: dict) -> T:
        data = self._schema.validate_create(payload)
        self._check_references(data)
        record = self._repo.create(data)
        log.info("Created %s id=%s", self._schema.entity, getattr(record, "id", "?"))
        return record

    def update(self, entity_id: int, payload: dict) -> T:
        data = self._schema.validate_update(payload)
        self._check_references(data)
        record = self._repo.update(entity_id, data)
        if record is None:
            raise NotFoundError(f"{self._schema.label} not found")
        log.info("Updated %s id=%s fields=%s", self._schema.entity, entity_id, sorted(data))
        return record

    def delete(self, entity_id: int, *, current_role: Role) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Forbidden")
        if not self._repo.delete(entity_id):
            raise NotFoundError(f"{self._schema.label} not found")
        log.info("Deleted %s id=%s", self._schema.entity, entity_id)
