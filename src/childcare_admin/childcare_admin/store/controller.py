from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import current_role, fails_with, login_required
from ..common.serialization import to_json
from ..common.validators import parse_int_arg
from ..container import Container
from .service import EntityService


def register_entity(app: Flask, service: EntityService) -> None:
    """Mount list/get/create/update/delete for one entity under ``/api/<entity>``."""
    entity = service.schema.entity
    label = service.schema.label.lower()
    base = f"/api/{entity}"

    @app.route(base, methods=["GET"], endpoint=f"list_{entity}")
    @login_required
    @fails_with(f"Error fetching {entity}")
    def list_records():
        records = service.list(
            limit=parse_int_arg(request.args.get("limit"), "limit"),
            offset=parse_int_arg(request.args.get("offset"), "offset"),
            filters={arg: request.args.get(arg) for arg in service.schema.filters},
        )
        return jsonify(to_json(list(records)))

    @app.route(f"{base}/<int:entity_id>", methods=["GET"], endpoint=f"get_{entity}")
    @login_required
    @fails_with(f"Error fetching {label}")
    def get_record(entity_id: int):
        return jsonify(to_json(service.get(entity_id)))

    @app.route(base, methods=["POST"], endpoint=f"create_{entity}")
    @login_required
    @fails_with(f"Error creating {label}")
    def create_record():
        record = service.create(request.get_json(silent=True) or {})
        return jsonify(to_json(record)), 201

    @app.route(f"{base}/<int:entity_id>", methods=["PUT"], endpoint=f"update_{entity}")
    @login_required
    @fails_with(f"Error updating {label}")
    def update_record(entity_id: int):
        record = service.update(entity_id, request.get_json(silent=True) or {})
        return jsonify(to_json(record))

    @app.route(f"{base}/<int:entity_id>", methods=["DELETE"], endpoint=f"delete_{entity}")
    @login_required
    @fails_with(f"Error deleting {label}")
    def delete_record(entity_id: int):
        service.delete(entity_id, current_role=current_role())
        return "", 204


def register(app: Flask, container: Container) -> None:
    for service in container.entity_services.values():
        register_entity(app, service)
