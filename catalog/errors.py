# catalog/errors.py
from typing import Optional


class ApiError(Exception):
    """An error a handler wants reported to the client as ``{"error": message}``."""

    status_code = 500
    default_message = "Internal Server Error"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(ApiError):
    status_code = 400
    default_message = "Invalid JSON body"


class Unauthorized(ApiError):
    status_code = 401
    default_message = "Unauthorized - Invalid or missing API key"


class NotFound(ApiError):
    status_code = 404
    default_message = "Product not found"


class RouteNotFound(NotFound):
    default_message = "Route not found"


class InternalError(ApiError):
    pass
