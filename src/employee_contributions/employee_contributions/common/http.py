from __future__ import annotations

from typing import Any, Tuple

import structlog
from flask import Flask, Response, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.exceptions import DomainError, InvalidReferenceError, NotFoundError, StoreError, ValidationError

logger = structlog.get_logger(__name__)

_STATUS_FOR_ERROR = (
    (ValidationError, 400),
    (InvalidReferenceError, 400),
    (NotFoundError, 404),
    (StoreError, 500),
)


def json_body() -> Any:
    """Decoded JSON body, or None when missing or malformed."""
    return request.get_json(silent=True)


def error_response(message: str, status: int) -> Tuple[Response, int]:
    return jsonify({"message": message}), status


def domain_error_response(error: DomainError) -> Tuple[Response, int]:
    for error_type, status in _STATUS_FOR_ERROR:
        if isinstance(error, error_type):
            return error_response(str(error), status)
    return error_response(str(error), 500)


def unexpected_error_response(error: Exception, *, event: str) -> Tuple[Response, int]:
    logger.exception(event, path=request.path, method=request.method)
    return error_response(str(error) or "Internal server error", 500)


def register(app: Flask, *, cors_origin: str = "*") -> None:
    """App-wide JSON error pages and CORS headers."""

    @app.before_request
    def cors_preflight():
        if request.method == "OPTIONS":
            return Response(status=204)
        return None

    @app.after_request
    def cors_headers(response: Response) -> Response:
        response.headers["Access-Control-Allow-Origin"] = cors_origin
        response.headers["Access-Control-Allow-Methods"] = "GET, POST, PUT, DELETE, OPTIONS"
        response.headers["Access-Control-Allow-Headers"] = "Content-Type"
        return response

    @app.errorhandler(HTTPException)
    def http_error(error: HTTPException):
        return error_response(error.description or error.name, error.code or 500)

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})
