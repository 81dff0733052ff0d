# app/core/errors.py
"""Application error taxonomy.

Every error carries the HTTP status it maps to and a message that is safe to
show to the client. The handlers in ``app.main`` turn them into the
``{"success": false, "error": ...}`` envelope.
"""


class AppError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None, status_code: int | None = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    default_message = "Invalid request"


class AuthError(AppError):
    status_code = 401
    default_message = "Authentication required. Please log in."


class ConflictError(AppError):
    # duplicate email is reported as a plain 400
    status_code = 400
    default_message = "Email already registered"


class ConfigError(AppError):
    status_code = 500
    default_message = "Service not configured"


class UpstreamError(AppError):
    status_code = 502
    default_message = "Upstream service error"


class DatabaseError(AppError):
    status_code = 500
    default_message = "Internal server error. Database unavailable."


class ServerError(AppError):
    status_code = 500


class NotFoundError(AppError):
    status_code = 404
    default_message = "Route not found"
