from __future__ import annotations

import logging

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.constants import INTERNAL_ERROR_MESSAGE
from ..core.exceptions import (
    AuthenticationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Order matters: the first matching class wins.
STATUS_BY_ERROR: tuple[tuple[type[DomainError], int], ...] = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (NotFoundError, 404),
    (ConflictError, 409),
)


def error_response(message: str, status: int):
    return jsonify({"error": message}), status


def status_for(exc: DomainError) -> int:
    for error_cls, status in STATUS_BY_ERROR:
        if isinstance(exc, error_cls):
            return status
    return 500


def register_error_handlers(app: Flask) -> None:
    """Map the domain error taxonomy onto the ``{"error": ...}`` envelope."""

    @app.errorhandler(DomainError)
    def handle_domain_error(exc: DomainError):
        status = status_for(exc)
        if status == 500:
            logger.error("internal error: %s", exc, exc_info=exc)
            return error_response(INTERNAL_ERROR_MESSAGE, 500)

        logger.info("%s (%d): %s", type(exc).__name__, status, exc)
        return error_response(str(exc), status)

    @app.errorhandler(HTTPException)
    def handle_http_error(exc: HTTPException):
        return error_response(exc.description or exc.name, exc.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(exc: Exception):
        logger.exception("unhandled error")
        return error_response(INTERNAL_ERROR_MESSAGE, 500)


def json_object() -> dict:
    """Request body as a dict; a missing or unparsable body reads as empty."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data
