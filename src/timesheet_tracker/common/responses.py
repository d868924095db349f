from __future__ import annotations

import logging
from functools import wraps
from typing import Any

from flask import jsonify, request

from ..core.exceptions import DomainError, ValidationError

logger = logging.getLogger(__name__)


def json_ok(data: Any, status: int = 200):
    return jsonify({"success": True, "data": data}), status


def json_error(message: str, status: int = 400):
    return jsonify({"success": False, "message": message}), status


def get_json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def int_field(data: dict, key: str, default: int = 0, *, strict: bool = True) -> int:
    """Whole-number field of a JSON body; absent or empty gives ``default``.

    Anything else that is not a whole number is a ``ValidationError`` on strict
    routes and ``default`` on lenient ones.
    """
    value = data.get(key)
    if value is None or value == "":
        return default
    if not isinstance(value, bool):
        try:
            return int(value)
        except (TypeError, ValueError):
            pass
    if strict:
        raise ValidationError(f"{key} must be a whole number")
    logger.debug("Ignoring non-numeric %s=%r", key, value)
    return default


def json_endpoint(view):
    """Map domain errors to 400 and anything unexpected to 500."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except DomainError as e:
            return json_error(str(e), 400)
        except Exception:
            logger.exception("Unhandled error in %s", view.__name__)
            return json_error("Internal server error", 500)

    return wrapper
