from __future__ import annotations

import enum
import logging
from typing import Optional

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class ErrorKind(enum.Enum):
    NOT_FOUND = "NotFoundError"
    VALIDATION = "ValidationError"


STATUS_CODES = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.VALIDATION: 400,
}


class AppError(Exception):
    """A failed precondition, tagged with the kind that picks its status code."""

    def __init__(self, kind: ErrorKind, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.status_code = status_code if status_code is not None else STATUS_CODES[kind]

    @property
    def type_name(self) -> str:
        return self.kind.value

    @classmethod
    def not_found(cls, message: str) -> "AppError":
        return cls(ErrorKind.NOT_FOUND, message)

    @classmethod
    def validation(cls, message: str) -> "AppError":
        return cls(ErrorKind.VALIDATION, message)

    def __repr__(self) -> str:
        return f"AppError({self.kind.name}, {self.message!r}, status_code={self.status_code})"


def error_response(status_code: int, message: str, type_name: str):
    return jsonify({"error": {"message": message, "type": type_name}}), status_code


def handle_app_error(err: AppError):
    logger.warning("%s: %s", err.type_name, err.message)
    return error_response(err.status_code, err.message, err.type_name)


def handle_http_exception(err: HTTPException):
    logger.warning("%s %s: %s", err.code, err.name, err.description)
    return error_response(err.code or 500, err.description or err.name, type(err).__name__)


def handle_unexpected_error(err: Exception):
    # Details go to the log only.
    logger.exception("Unhandled error while serving request")
    return error_response(500, "Internal Server Error", "Error")


def register_error_handlers(app: Flask) -> None:
    app.register_error_handler(AppError, handle_app_error)
    app.register_error_handler(HTTPException, handle_http_exception)
    app.register_error_handler(Exception, handle_unexpected_error)
