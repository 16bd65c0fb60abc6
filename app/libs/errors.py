from app.libs.datetime_utils import utcnow_aware


class APIError(Exception):
    """Base API error with status code and message"""

    def __init__(self, message, status_code=400, payload=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload

    def to_dict(self):
        rv = dict(self.payload or ())
        rv["message"] = self.message
        return rv


class ValidationError(APIError):
    """Client input rejected before any database access"""

    def __init__(self, message, code=None, status_code=400):
        super().__init__(
            message, status_code, payload={"error": "Validation failed", "code": code}
        )
        self.code = code


class ServerError(APIError):
    """Unexpected failure, reported to the client without internal detail"""

    def __init__(self, message="Internal server error", status_code=500):
        super().__init__(
            message,
            status_code,
            payload={
                "error": "Internal server error",
                "timestamp": utcnow_aware().isoformat(),
            },
        )
