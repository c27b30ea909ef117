"""JSON error translation and session guards shared by the API controllers."""
from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, jsonify, session
from werkzeug.exceptions import HTTPException

from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    NotFoundError,
    ReportDataError,
    ValidationError,
)

log = logging.getLogger(__name__)


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify(message="Unauthorized"), 401
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify(message="Unauthorized"), 401
        if session.get("role") != Role.ADMIN.value:
            return jsonify(message="Forbidden"), 403
        return view(*args, **kwargs)

    return wrapper


def current_role() -> Role:
    return Role(session.get("role", Role.STAFF.value))


def fails_with(message: str):
    """Turn unexpected errors inside a view into ``500 {"message": message}``.

    Domain errors pass through to the handlers installed by
    ``register_error_handlers``.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except (DomainError, HTTPException):
                raise
            except Exception:
                log.exception(message)
                return jsonify(message=message), 500

        return wrapper

    return decorator


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        return jsonify(message=str(e), errors=e.errors), 400

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return jsonify(message=str(e)), 404

    @app.errorhandler(AuthenticationError)
    def _unauthenticated(e: AuthenticationError):
        return jsonify(message=str(e) or "Unauthorized"), 401

    @app.errorhandler(AuthorizationError)
    def _forbidden(e: AuthorizationError):
        return jsonify(message="Forbidden"), 403

    @app.errorhandler(ReportDataError)
    def _report_data(e: ReportDataError):
        log.warning("Report rejected: %s", e)
        return jsonify(message="Insufficient data to generate report"), 422

    @app.errorhandler(DomainError)
    def _domain(e: DomainError):
        return jsonify(message=str(e)), 400
