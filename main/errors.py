from flask import jsonify
from werkzeug.exceptions import HTTPException
import logging
from app.libs.errors import APIError, ServerError

logger = logging.getLogger(__name__)


def handle_error(e):
    if isinstance(e, ServerError):
        return jsonify(e.to_dict()), e.status_code
    elif isinstance(e, APIError):
        logger.warning(f"API Error: {e.message}")
        return jsonify(e.to_dict()), e.status_code
    elif isinstance(e, HTTPException):
        logger.error(f"HTTP Error: {e.description}")
        return jsonify({"error": e.name, "message": e.description}), e.code
    else:
        logger.exception("Unhandled exception")
        error = ServerError()
        return jsonify(error.to_dict()), error.status_code
