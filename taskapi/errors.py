# taskapi/errors.py
"""
Domain errors raised by the services and rendered by the app as
``{"message": ...}`` with the matching status code.
"""


class ApiError(Exception):
    status_code = 500
    default_message = "Server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(ApiError):
    status_code = 400
    default_message = "Invalid request"


class Unauthorized(ApiError):
    status_code = 401
    default_message = "Unauthorized access"


class NotFound(ApiError):
    status_code = 404
    default_message = "Not found"


class StorageFailure(ApiError):
    status_code = 500
    default_message = "Server error"
