from __future__ import annotations

from datetime import timedelta

from flask import Flask, jsonify, request, session

from ..common.http import admin_required, current_role, fails_with, login_required
from ..core.constants import DEFAULT_SESSION_DAYS
from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    app.permanent_session_lifetime = timedelta(days=DEFAULT_SESSION_DAYS)

    @app.route("/api/login", methods=["POST"], endpoint="login")
    @fails_with("Error during login")
    def login():
        body = request.get_json(silent=True) or {}
        s_user = container.auth_service.authenticate(body.get("username", ""), body.get("password", ""))

        session.clear()
        session.permanent = bool(body.get("rememberMe"))
        session["user_id"] = s_user.user_id
        session["name"] = s_user.name
        session["role"] = s_user.role.value

        return jsonify(container.user_service.get(s_user.user_id).public_view())

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return "", 200

    @app.route("/api/user", methods=["GET"], endpoint="current_user")
    @login_required
    @fails_with("Error fetching user")
    def current_user():
        return jsonify(container.user_service.get(int(session["user_id"])).public_view())

    @app.route("/api/users", methods=["POST"], endpoint="create_user")
    @admin_required
    @fails_with("Error creating user")
    def create_user():
        body = request.get_json(silent=True) or {}
        try:
            role = Role(body.get("role") or Role.STAFF.value)
        except ValueError:
            raise ValidationError("Validation failed", [{"field": "role", "message": "Invalid role"}])

        user_id = container.user_service.create_account(
            username=body.get("username", ""),
            password=body.get("password", ""),
            name=body.get("name", ""),
            email=body.get("email", ""),
            role=role,
        )
        return jsonify(container.user_service.get(user_id).public_view()), 201

    @app.route("/api/users/<int:user_id>", methods=["DELETE"], endpoint="delete_user")
    @admin_required
    @fails_with("Error deleting user")
    def delete_user(user_id: int):
        container.user_service.delete_user(current_role=current_role(), user_id=user_id)
        return "", 204
