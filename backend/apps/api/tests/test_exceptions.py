from django.db import OperationalError
from rest_framework import status
from rest_framework.exceptions import ParseError, ValidationError
from rest_framework.test import APIRequestFactory

from apps.api.exceptions import ApplicationError, global_exception_handler

factory = APIRequestFactory()


class DummyView:
    pass


def _context(request):
    return {"request": request, "view": DummyView()}


def test_application_error_returns_structured_response():
    request = factory.get("/api/products")
    exc = ApplicationError(
        "VALIDATION_ERROR",
        "limit must be a positive integer",
        details={"limit": "0"},
    )
    response = global_exception_handler(exc, _context(request))
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.data["status"] == "error"
    payload = response.data["error"]
    assert payload["code"] == "VALIDATION_ERROR"
    assert payload["message"] == "limit must be a positive integer"
    assert payload["details"] == {"limit": "0"}


def test_validation_error_preserves_details():
    request = factory.post("/api/products", data={})
    exc = ValidationError({"price": ["Ensure this value is greater than or equal to 0."]})
    response = global_exception_handler(exc, _context(request))
    payload = response.data["error"]
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert payload["code"] == "VALIDATION_ERROR"
    assert payload["message"] == "Validation failed"
    assert payload["details"] == {"price": ["Ensure this value is greater than or equal to 0."]}


def test_parse_error_maps_to_validation_error():
    request = factory.post("/api/products")
    response = global_exception_handler(ParseError("JSON parse error"), _context(request))
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.data["error"]["code"] == "VALIDATION_ERROR"
    assert response.data["message"] == "JSON parse error"


def test_database_error_hides_internal_detail():
    request = factory.get("/api/products/1")
    response = global_exception_handler(
        OperationalError("no such table: catalog_product"), _context(request)
    )
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.data["error"]["code"] == "SERVER_ERROR"
    assert "catalog_product" not in response.data["message"]


def test_unhandled_exception_returns_generic_message():
    request = factory.get("/api/products")
    response = global_exception_handler(RuntimeError("boom"), _context(request))
    payload = response.data["error"]
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert payload["code"] == "SERVER_ERROR"
    assert payload["message"] == "Something went wrong"
    assert "details" not in payload
