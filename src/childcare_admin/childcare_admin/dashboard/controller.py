from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import fails_with, login_required
from ..common.serialization import to_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    @login_required
    @fails_with("Error fetching dashboard data")
    def dashboard():
        return jsonify(to_json(container.dashboard_service.dashboard()))
