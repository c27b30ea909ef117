from __future__ import annotations

from flask import Flask, Response

from ..common.http import fails_with, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/reports/<report_type>", methods=["GET"], endpoint="report_pdf")
    @login_required
    @fails_with("Error generating report")
    def report_pdf(report_type: str):
        document = container.report_service.build(report_type)
        return Response(
            document.content,
            mimetype="application/pdf",
            headers={"Content-Disposition": f'attachment; filename="{document.filename}"'},
        )
