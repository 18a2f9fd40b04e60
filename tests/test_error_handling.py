"""
Tests for error handling and error response formatting.
Tests custom exceptions, the error handler service and the app-level handlers.
"""

import json
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from starlette.exceptions import HTTPException as StarletteHTTPException

from rental_api.config import Settings
from rental_api.main import create_app
from rental_api.services.error_handler import ErrorHandlerService
from rental_api.utils.exceptions import (
    ValidationError,
    NotFoundError,
    PropertyNotFoundError,
    RouteNotFoundError,
    PayloadTooLargeError,
    InternalServerError
)
from tests.conftest import PROPERTIES_URL


class TestExceptions:
    """Test custom exception classes."""

    def test_validation_error(self):
        exc = ValidationError(["Title is required", "Address is required"])

        assert exc.status_code == 400
        assert exc.error == "Validation error"
        assert exc.details == ["Title is required", "Address is required"]

    def test_property_not_found_error(self):
        exc = PropertyNotFoundError(12)

        assert isinstance(exc, NotFoundError)
        assert exc.status_code == 404
        assert exc.error == "Not Found"
        assert exc.detail == "Property with ID 12 does not exist"

    def test_route_not_found_error(self):
        assert RouteNotFoundError("/nowhere").detail == "Route /nowhere not found"

    def test_payload_too_large_error(self):
        exc = PayloadTooLargeError(200, 100)

        assert exc.status_code == 413
        assert "200" in exc.detail and "100" in exc.detail

    def test_internal_server_error_default(self):
        exc = InternalServerError()

        assert exc.status_code == 500
        assert exc.error == "Internal server error"


class TestErrorHandlerService:
    """Test error handler service functionality."""

    def test_format_error_response_with_message(self):
        response = ErrorHandlerService.format_error_response(error="Not Found", message="Gone")

        assert response == {"error": "Not Found", "message": "Gone"}

    def test_format_error_response_with_details(self):
        response = ErrorHandlerService.format_error_response(
            error="Validation error",
            details=["Title is required"]
        )

        assert response == {"error": "Validation error", "details": ["Title is required"]}

    def test_handle_validation_exception(self):
        response = ErrorHandlerService.handle_api_exception(ValidationError(["a", "b"]))

        assert response.status_code == 400
        assert json.loads(response.body) == {"error": "Validation error", "details": ["a", "b"]}

    def test_handle_not_found_exception(self):
        response = ErrorHandlerService.handle_api_exception(PropertyNotFoundError(5))

        assert response.status_code == 404
        assert json.loads(response.body) == {
            "error": "Not Found",
            "message": "Property with ID 5 does not exist"
        }

    def test_handle_internal_exception(self):
        response = ErrorHandlerService.handle_api_exception(InternalServerError("Failed to update property"))

        assert response.status_code == 500
        assert json.loads(response.body) == {
            "error": "Internal server error",
            "message": "Failed to update property"
        }

    def test_handle_unexpected_error_hides_details(self):
        response = ErrorHandlerService.handle_unexpected_error(Exception("secret connection string"))

        assert response.status_code == 500
        data = json.loads(response.body)
        assert data["error"] == "Internal server error"
        assert "secret" not in data["message"]
        assert "unexpected error occurred" in data["message"].lower()

    def test_handle_http_exception_not_found(self):
        response = ErrorHandlerService.handle_http_exception(StarletteHTTPException(status_code=404))

        assert response.status_code == 404
        assert json.loads(response.body) == {"error": "Not Found", "message": "Route / not found"}

    def test_handle_http_exception_other_status(self):
        response = ErrorHandlerService.handle_http_exception(
            StarletteHTTPException(status_code=503, detail="Try later")
        )

        assert response.status_code == 503
        assert json.loads(response.body) == {"error": "Service Unavailable", "message": "Try later"}


class TestApplicationErrorHandlers:
    """Test error handling through the HTTP stack."""

    def test_unknown_route(self, client: TestClient):
        response = client.get("/api/unknown")

        assert response.status_code == 404
        assert response.json() == {"error": "Not Found", "message": "Route /api/unknown not found"}

    def test_unknown_route_includes_query_string(self, client: TestClient):
        response = client.get("/nothing/here?x=1")

        assert response.status_code == 404
        assert response.json()["message"] == "Route /nothing/here?x=1 not found"

    def test_unsupported_method_is_route_not_found(self, client: TestClient):
        response = client.patch(f"{PROPERTIES_URL}/1", json={"title": "x"})

        assert response.status_code == 404
        assert response.json() == {
            "error": "Not Found",
            "message": f"Route {PROPERTIES_URL}/1 not found"
        }

    def test_malformed_json_body(self, client: TestClient):
        response = client.post(
            PROPERTIES_URL,
            content="{not json",
            headers={"content-type": "application/json"}
        )

        assert response.status_code == 400
        assert response.json() == {
            "error": "Validation error",
            "details": ["Request body must be valid JSON"]
        }

    def test_non_object_body(self, client: TestClient):
        response = client.post(PROPERTIES_URL, json=[{"title": "Flat A"}])

        assert response.status_code == 400
        assert response.json() == {
            "error": "Validation error",
            "details": ["Payload must be an object"]
        }

    def test_request_id_header(self, client: TestClient):
        response = client.get(PROPERTIES_URL)

        assert response.status_code == 200
        assert len(response.headers["X-Request-ID"]) == 8

    def test_payload_too_large(self):
        app = create_app(settings=Settings(
            environment="testing",
            max_request_size=64,
            enable_request_logging=False
        ))
        with TestClient(app) as client:
            response = client.post(
                PROPERTIES_URL,
                json={"title": "x" * 100, "address": "1 Main St", "price": 1}
            )

        assert response.status_code == 413
        assert response.json()["error"] == "Payload Too Large"
        assert app.state.property_repository.count() == 0

    def test_unexpected_exception_returns_generic_500(self, app: FastAPI):
        @app.get("/boom")
        async def boom():
            raise RuntimeError("database password is hunter2")

        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/boom")

        assert response.status_code == 500
        data = response.json()
        assert data["error"] == "Internal server error"
        assert "hunter2" not in data["message"]

    def test_store_failure_returns_operation_message(self, client: TestClient, app: FastAPI, monkeypatch):
        def explode(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(app.state.property_repository, "list_properties", explode)

        response = client.get(PROPERTIES_URL)

        assert response.status_code == 500
        assert response.json() == {
            "error": "Internal server error",
            "message": "Failed to retrieve properties"
        }
