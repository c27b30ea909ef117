from __future__ import annotations

import dataclasses
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Callable, Optional

import pytest
from werkzeug.security import generate_password_hash

from src.childcare_admin.childcare_admin.attendance.model import Attendance
from src.childcare_admin.childcare_admin.container import assemble_container
from src.childcare_admin.childcare_admin.core.enums import (
    EnrollmentStatus,
    PaymentMethod,
    PaymentStatus,
    ProgramStatus,
    Role,
)
from src.childcare_admin.childcare_admin.dashboard.model import AttendanceStats, EnrollmentActivity
from src.childcare_admin.childcare_admin.enrollments.model import Enrollment, Payment
from src.childcare_admin.childcare_admin.families.model import Child, Communication, Parent
from src.childcare_admin.childcare_admin.inventory.model import InventoryItem
from src.childcare_admin.childcare_admin.programs.model import Activity, Program
from src.childcare_admin.childcare_admin.users.model import User

TODAY = date(2026, 10, 19)


class InMemoryEntities:
    def __init__(self, model: Callable[..., Any], order_key: Optional[Callable[[Any], Any]] = None, reverse=False):
        self._model = model
        self._rows: dict[int, Any] = {}
        self._next_id = 1
        self._order_key = order_key or (lambda r: r.id)
        self._reverse = reverse

    def add(self, **values) -> Any:
        values.setdefault("id", self._next_id)
        record = self._model(**values)
        self._rows[record.id] = record
        self._next_id = max(self._next_id, record.id) + 1
        return record

    def _ordered(self) -> list:
        return sorted(self._rows.values(), key=self._order_key, reverse=self._reverse)

    def get(self, entity_id: int):
        return self._rows.get(int(entity_id))

    def list(self, limit: int = 100, offset: int = 0):
        return self._ordered()[offset : offset + limit]

    def list_by(self, column: str, value: Any):
        return [r for r in self._ordered() if getattr(r, column) == value]

    def create(self, data: dict):
        return self.add(**data)

    def update(self, entity_id: int, partial: dict):
        current = self._rows.get(int(entity_id))
        if current is None:
            return None
        updated = dataclasses.replace(current, **partial)
        self._rows[current.id] = updated
        return updated

    def delete(self, entity_id: int) -> bool:
        return self._rows.pop(int(entity_id), None) is not None


class InMemoryPrograms(InMemoryEntities):
    def __init__(self):
        super().__init__(Program, order_key=lambda p: (p.start_date, p.id), reverse=True)

    def list_by_status(self, status: ProgramStatus, limit: int = 100, offset: int = 0):
        return [p for p in self._ordered() if p.status == status][offset : offset + limit]


class InMemoryStatistics:
    """Answers the dashboard queries from the in-memory enrollments/payments/attendance."""

    def __init__(self, enrollments: InMemoryEntities, payments: InMemoryEntities, attendance: InMemoryEntities):
        self._enrollments = enrollments
        self._payments = payments
        self._attendance = attendance

    def list_enrollment_activity(self):
        payments = self._payments.list(10_000)
        return [
            EnrollmentActivity(
                enrollment_id=e.id,
                program_id=e.program_id,
                child_id=e.child_id,
                status=e.status,
                has_completed_payment=any(
                    p.enrollment_id == e.id and p.status == PaymentStatus.COMPLETED for p in payments
                ),
            )
            for e in self._enrollments.list(10_000)
        ]

    def sum_completed_payments(self, *, start: datetime, end: datetime) -> Decimal:
        total = Decimal("0")
        for p in self._payments.list(10_000):
            paid_at = datetime.combine(p.payment_date, time.min)
            if p.status == PaymentStatus.COMPLETED and start <= paid_at < end:
                total += p.amount
        return total

    def attendance_counts(self, day: date) -> AttendanceStats:
        rows = self._attendance.list_by("date", day)
        return AttendanceStats(present=sum(1 for r in rows if r.present), total=len(rows))


class InMemoryUsers:
    def __init__(self):
        self._by_id: dict[int, User] = {}
        self._next_id = 1

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._by_id.get(int(user_id))

    def get_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self._by_id.values() if u.username == username), None)

    def create_user(self, *, username, password_hash, name, email, role) -> int:
        user_id = self._next_id
        self._next_id += 1
        self._by_id[user_id] = User(
            id=user_id, username=username, password_hash=password_hash, name=name, email=email, role=Role(role)
        )
        return user_id

    def delete_by_id(self, user_id: int) -> bool:
        return self._by_id.pop(int(user_id), None) is not None


class FakeChatModel:
    def __init__(self, reply: str = "Hay 2 programas activos.", error: Optional[Exception] = None):
        self._reply = reply
        self._error = error
        self.calls: list[dict] = []

    def reply(self, *, system: str, message: str) -> str:
        self.calls.append({"system": system, "message": message})
        if self._error is not None:
            raise self._error
        return self._reply


@pytest.fixture
def repos() -> dict:
    enrollments = InMemoryEntities(Enrollment)
    payments = InMemoryEntities(Payment)
    attendance = InMemoryEntities(Attendance)
    return {
        "programs": InMemoryPrograms(),
        "parents": InMemoryEntities(Parent),
        "children": InMemoryEntities(Child),
        "enrollments": enrollments,
        "payments": payments,
        "activities": InMemoryEntities(Activity),
        "attendance": attendance,
        "communications": InMemoryEntities(Communication),
        "inventory": InMemoryEntities(InventoryItem),
    }


@pytest.fixture
def stats_repo(repos) -> InMemoryStatistics:
    return InMemoryStatistics(repos["enrollments"], repos["payments"], repos["attendance"])


@pytest.fixture
def users_repo() -> InMemoryUsers:
    users = InMemoryUsers()
    users.create_user(
        username="admin", password_hash=generate_password_hash("admin123"), name="Admin", email="a@x.mx", role=Role.ADMIN
    )
    users.create_user(
        username="staff", password_hash=generate_password_hash("staff123"), name="Staff", email="s@x.mx", role=Role.STAFF
    )
    return users


@pytest.fixture
def chat_model() -> FakeChatModel:
    return FakeChatModel()


@pytest.fixture
def container(repos, stats_repo, users_repo, chat_model):
    return assemble_container(
        conn=None,
        users_repo=users_repo,
        stats_repo=stats_repo,
        repositories=repos,
        chat_model=chat_model,
        tz_name="America/Mexico_City",
    )


@pytest.fixture
def seeded(repos) -> dict:
    """One parent with two children, two programs, enrollments and payments."""
    parent = repos["parents"].add(name="Laura Gómez", email="laura@x.mx", phone="555-0101", address=None)
    ana = repos["children"].add(name="Ana", birth_date=date(2018, 5, 2), parent_id=parent.id, age=8)
    luis = repos["children"].add(name="Luis", birth_date=date(2016, 1, 9), parent_id=parent.id, age=10, allergies="Maní")
    p1 = repos["programs"].add(
        name="Campamento de Verano",
        description=None,
        start_date=date(2026, 7, 1),
        end_date=date(2026, 7, 31),
        capacity=20,
        price=Decimal("1500.00"),
        status=ProgramStatus.ACTIVE,
    )
    p2 = repos["programs"].add(
        name="Taller de Robótica",
        description=None,
        start_date=date(2026, 11, 3),
        end_date=date(2026, 12, 15),
        capacity=12,
        price=Decimal("900.00"),
        status=ProgramStatus.DRAFT,
    )
    e1 = repos["enrollments"].add(
        program_id=p1.id,
        child_id=ana.id,
        status=EnrollmentStatus.CONFIRMED,
        amount=Decimal("1500.00"),
        discount=Decimal("0.00"),
        notes=None,
        enrollment_date=date(2026, 6, 10),
    )
    e2 = repos["enrollments"].add(
        program_id=p1.id,
        child_id=luis.id,
        status=EnrollmentStatus.PENDING,
        amount=Decimal("1500.00"),
        discount=Decimal("0.00"),
        notes=None,
        enrollment_date=date(2026, 6, 12),
    )
    repos["payments"].add(
        enrollment_id=e2.id,
        amount=Decimal("750.50"),
        payment_date=date(2026, 10, 5),
        method=PaymentMethod.CASH,
        status=PaymentStatus.COMPLETED,
    )
    return {"parent": parent, "ana": ana, "luis": luis, "p1": p1, "p2": p2, "e1": e1, "e2": e2}
