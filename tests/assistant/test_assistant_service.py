from __future__ import annotations

import pytest

from src.childcare_admin.childcare_admin.assistant.schema_description import describe_schema
from src.childcare_admin.childcare_admin.assistant.service import APOLOGY, AssistantService, pick_topic
from src.childcare_admin.childcare_admin.core.exceptions import ValidationError


@pytest.mark.parametrize(
    "message,topic",
    [
        ("¿Qué programas hay?", "programs"),
        ("Lista de niños inscritos", "children"),
        ("datos de las madres", "parents"),
        ("¿Cuántas inscripciones hay?", "enrollments"),
        ("pagos pendientes", "payments"),
        ("actividades del lunes", "activities"),
        ("¿Quién estuvo ausente?", "attendance"),
        ("dame las estadísticas", "statistics"),
        ("hola", None),
    ],
)
def test_pick_topic_by_keyword(message, topic):
    assert pick_topic(message) == topic


def test_ask_sends_schema_and_topic_data(container, chat_model, seeded):
    reply = container.assistant_service.ask("¿Qué programas hay?")

    assert reply == "Hay 2 programas activos."
    call = chat_model.calls[0]
    assert "Tabla programs:" in call["system"]
    assert "Campamento de Verano" in call["message"]


def test_ask_statistics_uses_dashboard_numbers(container, chat_model, seeded):
    container.assistant_service.ask("estadísticas generales")

    message = chat_model.calls[0]["message"]
    assert '"activeChildren": 2' in message
    assert '"activePrograms": 1' in message


def test_model_failure_returns_apology(container, repos, chat_model):
    service = AssistantService(
        type(chat_model)(error=RuntimeError("quota exceeded")),
        repositories=repos,
        dashboard=container.dashboard_service,
    )

    assert service.ask("¿Qué programas hay?") == APOLOGY


def test_empty_message_is_rejected(container):
    with pytest.raises(ValidationError):
        container.assistant_service.ask("   ")


def test_schema_description_lists_every_table():
    text = describe_schema()

    for table in ("users", "programs", "parents", "children", "enrollments", "payments", "attendance", "inventory"):
        assert f"Tabla {table}:" in text
    assert "password" not in text
