from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import fails_with, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/assistant", methods=["POST"], endpoint="assistant")
    @login_required
    @fails_with("Error processing assistant message")
    def assistant():
        body = request.get_json(silent=True) or {}
        return jsonify(reply=container.assistant_service.ask(body.get("message", "")))
