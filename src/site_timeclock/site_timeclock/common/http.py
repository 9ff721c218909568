from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, jsonify, request, session

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

ADMIN_SESSION_KEY = "is_admin"


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not session.get(ADMIN_SESSION_KEY):
            raise AuthorizationError("Acesso restrito ao administrador")
        return view(*args, **kwargs)

    return wrapper


def json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def register_error_handlers(app: Flask) -> None:
    status_by_error = (
        (ValidationError, 400),
        (AuthenticationError, 401),
        (AuthorizationError, 403),
        (NotFoundError, 404),
    )

    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        status = next((code for cls, code in status_by_error if isinstance(e, cls)), 400)
        return jsonify({"success": False, "message": str(e)}), status

    @app.errorhandler(500)
    def handle_unexpected(e):
        logger.error("Unhandled error on %s %s: %s", request.method, request.path, getattr(e, "original_exception", e))
        if bool(app.config.get("DEBUG", False)):
            return jsonify({"success": False, "message": f"Erro interno: {getattr(e, 'original_exception', e)}"}), 500
        return jsonify({"success": False, "message": "Erro interno do sistema"}), 500
