from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Optional

from ..common.serialization import to_json
from ..core.constants import MAX_LIST_LIMIT
from ..core.exceptions import ValidationError
from ..dashboard.service import DashboardService
from ..store.repository import EntityRepository
from .llm import ChatModel
from .schema_description import describe_schema

log = logging.getLogger(__name__)

APOLOGY = "Lo siento, he tenido un problema al procesar tu consulta. Por favor, intenta nuevamente."
EMPTY_REPLY = "No pude generar una respuesta adecuada. Por favor, intenta reformular tu pregunta."
NO_TOPIC = "No se pudo determinar qué datos buscar. Por favor, intenta ser más específico con tu pregunta."

# (topic, keywords); first match wins
TOPICS = (
    ("programs", ("programa",)),
    ("children", ("niño", "nino", "hijo")),
    ("parents", ("padre", "madre")),
    ("enrollments", ("inscripción", "inscripcion", "matrícula", "matricula")),
    ("payments", ("pago", "cobro")),
    ("activities", ("actividad",)),
    ("attendance", ("asistencia", "presente", "ausente")),
    ("statistics", ("estadística", "estadistica", "total", "conteo")),
)

SYSTEM_PROMPT = """Eres NEMI Bot, un asistente virtual para el sistema de gestión educativa NEMI.
Tu tarea es ayudar a los usuarios a obtener información sobre niños, programas, pagos,
inscripciones y otras actividades del sistema, basándote en la información de la base de datos.

IMPORTANTE: Si te preguntan sobre algo que no existe en la base de datos, debes indicar claramente
que no tienes esa información.

Información del esquema de la base de datos:
{schema}

Cuando respondas preguntas sobre datos, formatea tu respuesta de manera clara y amigable.
Si recibes datos en formato JSON, conviértelos a una respuesta en lenguaje natural que sea
fácil de entender para el usuario."""

USER_PROMPT = """Mensaje del usuario: {message}

Resultados de la consulta a la base de datos:
{data}

Por favor, responde a la consulta del usuario de manera amigable, usando los datos proporcionados.
No menciones que recibiste datos en JSON. Responde directamente como si conocieras la información."""


def pick_topic(message: str) -> Optional[str]:
    text = (message or "").lower()
    for topic, keywords in TOPICS:
        if any(k in text for k in keywords):
            return topic
    return None


class AssistantService:
    """Use case: answer a free-text question about the data with an LLM."""

    def __init__(
        self,
        model: ChatModel,
        *,
        repositories: Mapping[str, EntityRepository[Any]],
        dashboard: DashboardService,
    ):
        self._model = model
        self._repositories = dict(repositories)
        self._dashboard = dashboard

    def _topic_data(self, topic: Optional[str]) -> str:
        if topic is None:
            return NO_TOPIC
        if topic == "statistics":
            stats = self._dashboard.stats()
            data: Any = {
                "activeChildren": stats.children_count,
                "activePrograms": stats.active_programs,
                "monthlyIncome": stats.monthly_income,
                "todayAttendance": stats.today_attendance.to_dict(),
            }
        else:
            data = to_json(list(self._repositories[topic].list(MAX_LIST_LIMIT)))
        return json.dumps(data, ensure_ascii=False, indent=2)

    def ask(self, message: str) -> str:
        if not message or not str(message).strip():
            raise ValidationError("Validation failed", [{"field": "message", "message": "Required"}])

        try:
            data = self._topic_data(pick_topic(message))
            reply = self._model.reply(
                system=SYSTEM_PROMPT.format(schema=describe_schema()),
                message=USER_PROMPT.format(message=message, data=data),
            )
        except Exception:
            log.exception("Assistant query failed")
            return APOLOGY

        return reply or EMPTY_REPLY
