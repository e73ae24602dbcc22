# tests/test_errors.py
from catalog.errors import ApiError, NotFound, RouteNotFound, Unauthorized, ValidationError


def test_defaults():
    assert (ValidationError().status_code, ValidationError().message) == (400, "Invalid JSON body")
    assert (Unauthorized().status_code, Unauthorized().message) == (
        401, "Unauthorized - Invalid or missing API key")
    assert (NotFound().status_code, NotFound().message) == (404, "Product not found")
    assert RouteNotFound().message == "Route not found"
    assert (ApiError().status_code, ApiError().message) == (500, "Internal Server Error")


def test_message_and_status_override():
    err = ValidationError("Invalid price")
    assert err.message == "Invalid price"
    assert err.status_code == 400
    assert ApiError("teapot", 418).status_code == 418
