from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..core.exceptions import DomainError, ValidationError

logger = logging.getLogger(__name__)

_STATUS_BY_REASON = {
    "not-found": 404,
    "insufficient-balance": 409,
    "already-approved": 409,
    "duplicate-employee": 409,
    "invalid-date-range": 400,
    "invalid-argument": 400,
}


def error_response(message: str, reason: str, status: int):
    return jsonify({"error": message, "reason": reason}), status


def json_object() -> dict:
    """Request body as a dict; a missing body counts as empty."""
    payload = request.get_json(silent=True)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        return error_response(str(e), e.reason, _STATUS_BY_REASON.get(e.reason, 400))

    @app.errorhandler(500)
    def handle_internal_error(e):
        logger.error("Unhandled error while serving %s", request.path, exc_info=getattr(e, "original_exception", None))
        return error_response("Internal server error", "internal-error", 500)
