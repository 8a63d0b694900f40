"""Request hooks. Each returns ``None`` to continue or a response to stop."""

from __future__ import annotations

import hmac
import json
import logging
import math
import time
from datetime import datetime, timezone

from flask import current_app, g, jsonify, request

from catalog_api.errors import AppError

logger = logging.getLogger(__name__)

PRODUCTS_PREFIX = "/api/products"
BODY_METHODS = ("POST", "PUT", "PATCH")
UNAUTHORIZED_MESSAGE = "Unauthorized. API key is missing or invalid."


def log_request():
    g.started_at = time.perf_counter()
    logger.info(
        "[%s] %s %s",
        datetime.now(timezone.utc).isoformat(),
        request.method,
        request.full_path.rstrip("?"),
    )


def log_response(response):
    started = g.get("started_at")
    elapsed_ms = (time.perf_counter() - started) * 1000 if started is not None else 0.0
    logger.info("%s %s -> %s (%.2f ms)", request.method, request.path, response.status_code, elapsed_ms)
    return response


def _is_products_path(path: str) -> bool:
    return path == PRODUCTS_PREFIX or path.startswith(PRODUCTS_PREFIX + "/")


def require_api_key():
    # App level so unmatched product paths are gated too; 401 skips the error handlers.
    if not _is_products_path(request.path):
        return None
    expected = str(current_app.config["API_KEY"])
    supplied = request.headers.get(current_app.config["API_KEY_HEADER"])
    if supplied and hmac.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8")):
        return None
    logger.warning("Rejected %s %s: missing or invalid API key", request.method, request.path)
    return jsonify({"error": UNAUTHORIZED_MESSAGE}), 401


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def _finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"{text} is out of range")
    return value


def parse_json_body():
    g.body = {}
    if request.method not in BODY_METHODS or not request.is_json:
        return None
    raw = request.get_data(cache=True, as_text=True)
    if not raw:
        return None
    try:
        body = json.loads(raw, parse_constant=_reject_constant, parse_float=_finite_float)
    except ValueError as exc:
        raise AppError.validation("Malformed JSON in request body.") from exc
    if not isinstance(body, dict):
        raise AppError.validation("Request body must be a JSON object.")
    g.body = body
    return None
