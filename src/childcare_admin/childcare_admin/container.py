from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .assistant.llm import ChatModel, OpenAIChatModel
from .assistant.service import AssistantService
from .attendance.model import ATTENDANCE_SCHEMA
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .dashboard.mysql_statistics_repository import MySQLStatisticsRepository
from .dashboard.repository import StatisticsRepository
from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .enrollments.model import ENROLLMENT_SCHEMA, PAYMENT_SCHEMA
from .enrollments.mysql_enrollment_repository import MySQLEnrollmentRepository, MySQLPaymentRepository
from .families.model import CHILD_SCHEMA, COMMUNICATION_SCHEMA, PARENT_SCHEMA
from .families.mysql_family_repository import (
    MySQLChildRepository,
    MySQLCommunicationRepository,
    MySQLParentRepository,
)
from .inventory.model import INVENTORY_SCHEMA
from .inventory.mysql_inventory_repository import MySQLInventoryRepository
from .programs.model import ACTIVITY_SCHEMA, PROGRAM_SCHEMA
from .programs.mysql_program_repository import MySQLActivityRepository, MySQLProgramRepository
from .reports.renderer import DEFAULT_BRAND
from .reports.service import ReportService
from .store.fields import EntitySchema
from .store.repository import EntityRepository
from .store.service import EntityService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, UserService

# Registration order of the CRUD endpoints.
ENTITY_SCHEMAS: dict[str, EntitySchema] = {
    "programs": PROGRAM_SCHEMA,
    "parents": PARENT_SCHEMA,
    "children": CHILD_SCHEMA,
    "enrollments": ENROLLMENT_SCHEMA,
    "payments": PAYMENT_SCHEMA,
    "activities": ACTIVITY_SCHEMA,
    "attendance": ATTENDANCE_SCHEMA,
    "communications": COMMUNICATION_SCHEMA,
    "inventory": INVENTORY_SCHEMA,
}


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    users_repo: UserRepository
    stats_repo: StatisticsRepository
    repositories: Mapping[str, EntityRepository[Any]]

    auth_service: AuthService
    user_service: UserService
    entity_services: Mapping[str, EntityService[Any]]
    dashboard_service: DashboardService
    report_service: ReportService
    assistant_service: AssistantService


def assemble_container(
    *,
    conn: Optional[DatabaseConnection],
    users_repo: UserRepository,
    stats_repo: StatisticsRepository,
    repositories: Mapping[str, EntityRepository[Any]],
    chat_model: ChatModel,
    tz_name: Optional[str] = None,
    report_brand: str = DEFAULT_BRAND,
) -> Container:
    """Wire services on top of already-built repositories."""
    repositories = dict(repositories)

    entity_services: dict[str, EntityService[Any]] = {}
    for entity, schema in ENTITY_SCHEMAS.items():
        entity_services[entity] = EntityService(
            repositories[entity],
            schema,
            references={spec.references: repositories[spec.references] for spec in schema.references},
        )

    dashboard_service = DashboardService(stats_repo, repositories["programs"], tz_name=tz_name)
    report_service = ReportService(
        programs=repositories["programs"],
        parents=repositories["parents"],
        children=repositories["children"],
        enrollments=repositories["enrollments"],
        payments=repositories["payments"],
        tz_name=tz_name,
        brand=report_brand,
    )
    assistant_service = AssistantService(chat_model, repositories=repositories, dashboard=dashboard_service)

    return Container(
        conn=conn,
        users_repo=users_repo,
        stats_repo=stats_repo,
        repositories=repositories,
        auth_service=AuthService(users_repo),
        user_service=UserService(users_repo),
        entity_services=entity_services,
        dashboard_service=dashboard_service,
        report_service=report_service,
        assistant_service=assistant_service,
    )


def build_container(
    *,
    db_config: dict,
    pool_size: int = 5,
    pool_timeout: float = 10.0,
    tz_name: Optional[str] = None,
    openai_api_key: Optional[str] = None,
    assistant_model: str = "gpt-4o-mini",
    report_brand: str = DEFAULT_BRAND,
) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config, pool_size=pool_size, pool_timeout=pool_timeout)).open()

    repositories = {
        "programs": MySQLProgramRepository(conn),
        "parents": MySQLParentRepository(conn),
        "children": MySQLChildRepository(conn),
        "enrollments": MySQLEnrollmentRepository(conn),
        "payments": MySQLPaymentRepository(conn),
        "activities": MySQLActivityRepository(conn),
        "attendance": MySQLAttendanceRepository(conn),
        "communications": MySQLCommunicationRepository(conn),
        "inventory": MySQLInventoryRepository(conn),
    }

    return assemble_container(
        conn=conn,
        users_repo=MySQLUserRepository(conn),
        stats_repo=MySQLStatisticsRepository(conn),
        repositories=repositories,
        chat_model=OpenAIChatModel(api_key=openai_api_key, model=assistant_model),
        tz_name=tz_name,
        report_brand=report_brand,
    )
