from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.constants import MAX_LIST_LIMIT
from ..core.exceptions import NotFoundError
from ..enrollments.model import Enrollment, Payment
from ..families.model import Child, Parent
from ..programs.model import Program
from ..store.repository import EntityRepository
from . import builders
from .renderer import DEFAULT_BRAND, ReportDocument

log = logging.getLogger(__name__)

REPORT_TYPES = ("children", "parents", "programs", "enrollments", "payments")


def _fetch_all(repo: EntityRepository[Any]) -> list:
    records: list = []
    offset = 0
    while True:
        page = list(repo.list(MAX_LIST_LIMIT, offset))
        records.extend(page)
        if len(page) < MAX_LIST_LIMIT:
            return records
        offset += MAX_LIST_LIMIT


class ReportService:
    """Use case: export one entity list as a PDF report."""

    def __init__(
        self,
        *,
        programs: EntityRepository[Program],
        parents: EntityRepository[Parent],
        children: EntityRepository[Child],
        enrollments: EntityRepository[Enrollment],
        payments: EntityRepository[Payment],
        tz_name: Optional[str] = None,
        brand: str = DEFAULT_BRAND,
    ):
        self._programs = programs
        self._parents = parents
        self._children = children
        self._enrollments = enrollments
        self._payments = payments
        self._tz_name = tz_name
        self._brand = brand

    def build(self, report_type: str, *, today: Optional[date] = None) -> ReportDocument:
        if report_type not in REPORT_TYPES:
            raise NotFoundError(f"Unknown report type: {report_type}")

        today = today or now_local(self._tz_name).date()
        document = getattr(self, f"_build_{report_type}")(today)
        log.info("Generated %s report (%s rows)", report_type, document.row_count)
        return document

    def _build_children(self, today: date) -> ReportDocument:
        return builders.children_report(_fetch_all(self._children), today=today, brand=self._brand)

    def _build_parents(self, today: date) -> ReportDocument:
        return builders.parents_report(_fetch_all(self._parents), today=today, brand=self._brand)

    def _build_programs(self, today: date) -> ReportDocument:
        return builders.programs_report(_fetch_all(self._programs), today=today, brand=self._brand)

    def _name_maps(self) -> tuple[dict[int, str], dict[int, str]]:
        programs_map = {p.id: p.name for p in _fetch_all(self._programs)}
        children_map = {c.id: c.name for c in _fetch_all(self._children)}
        return programs_map, children_map

    def _build_enrollments(self, today: date) -> ReportDocument:
        programs_map, children_map = self._name_maps()
        return builders.enrollments_report(
            _fetch_all(self._enrollments), programs_map, children_map, today=today, brand=self._brand
        )

    def _build_payments(self, today: date) -> ReportDocument:
        programs_map, children_map = self._name_maps()
        enrollments: Sequence[Enrollment] = _fetch_all(self._enrollments)
        enrollments_map = {
            e.id: {
                "programName": programs_map.get(e.program_id) or f"Programa {e.program_id}",
                "childName": children_map.get(e.child_id) or f"Niño {e.child_id}",
            }
            for e in enrollments
        }
        return builders.payments_report(_fetch_all(self._payments), enrollments_map, today=today, brand=self._brand)
