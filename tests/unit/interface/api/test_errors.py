"""Unit tests for the problem-details error handlers."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, OperationalError

from sonic.config import Settings
from sonic.domain.error import (
    ConflictError,
    ContentDeletedException,
    NotAuthenticatedError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from sonic.interface.api.errors import (
    PROBLEM_MEDIA_TYPE,
    UNEXPECTED_ERROR_DETAIL,
    first_validation_message,
    register_error_handlers,
)


class EchoBody(BaseModel):
    title: str


def build_app(debug: bool = False) -> FastAPI:
    """App with one route per failure mode."""
    app = FastAPI()
    register_error_handlers(app, Settings(debug=debug))

    raisers = {
        "validation": ValidationError("Title is required.", "post.title_required"),
        "deleted": ContentDeletedException("Gone.", "post.deleted"),
        "unauthenticated": NotAuthenticatedError("Missing token.", "auth.missing_token"),
        "forbidden": NotAuthorizedError("Nope.", "post.forbidden_update"),
        "not_found": NotFoundError("post", "123"),
        "conflict": ConflictError("Email is already in use.", "auth.email_in_use"),
        "integrity": IntegrityError("INSERT", None, Exception("duplicate")),
        "unavailable": OperationalError("SELECT 1", None, Exception("refused")),
        "value": ValueError("Bad value."),
        "boom": RuntimeError("kaput"),
    }

    @app.get("/raise/{name}")
    async def raise_error(name: str):
        raise raisers[name]

    @app.post("/echo")
    async def echo(body: EchoBody):
        return body

    return app


@pytest.fixture
def client():
    with TestClient(build_app(), raise_server_exceptions=False) as test_client:
        yield test_client


class TestErrorHandlers:
    """Tests for register_error_handlers."""

    @pytest.mark.parametrize(
        ("name", "status_code", "code"),
        [
            ("validation", 400, "post.title_required"),
            ("deleted", 400, "post.deleted"),
            ("unauthenticated", 401, "auth.missing_token"),
            ("forbidden", 403, "post.forbidden_update"),
            ("not_found", 404, "post.not_found"),
            ("conflict", 409, "auth.email_in_use"),
            ("integrity", 409, "store.duplicate_key"),
            ("unavailable", 503, "store.unavailable"),
            ("value", 400, "request.invalid"),
        ],
    )
    def test_error_mapping(self, client, name, status_code, code):
        # Act
        response = client.get(f"/raise/{name}")

        # Assert
        assert response.status_code == status_code
        assert response.headers["content-type"].startswith(PROBLEM_MEDIA_TYPE)
        body = response.json()
        assert body["status"] == status_code
        assert body["code"] == code
        assert body["instance"] == f"/raise/{name}"

    def test_domain_message_is_detail(self, client):
        body = client.get("/raise/not_found").json()

        assert body["detail"] == "Post not found."
        assert body["title"] == "Error"

    def test_unexpected_error_hides_internals(self, client):
        # Act
        response = client.get("/raise/boom")

        # Assert
        assert response.status_code == 500
        body = response.json()
        assert body["code"] == "server.error"
        assert body["detail"] == UNEXPECTED_ERROR_DETAIL
        assert "kaput" not in response.text

    def test_debug_names_exception_type(self):
        with TestClient(build_app(debug=True), raise_server_exceptions=False) as client:
            body = client.get("/raise/boom").json()

        assert body["detail"].endswith("(RuntimeError)")

    def test_request_validation(self, client):
        # Act
        response = client.post("/echo", json={})

        # Assert
        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "request.invalid"
        assert body["detail"].startswith("title:")

    def test_unknown_route(self, client):
        response = client.get("/missing")

        assert response.status_code == 404
        assert response.json()["code"] == "http.404"


class TestFirstValidationMessage:
    """Tests for first_validation_message."""

    def test_empty(self):
        assert first_validation_message([]) == "The request is invalid."

    def test_prefers_context_error(self):
        errors = [
            {
                "loc": ("body", "email"),
                "msg": "Value error, Email is invalid.",
                "ctx": {"error": ValueError("Email is invalid.")},
            },
            {"loc": ("body", "password"), "msg": "Field required"},
        ]

        assert first_validation_message(errors) == "email: Email is invalid."

    def test_without_location(self):
        assert first_validation_message([{"loc": ("body",), "msg": "Bad"}]) == "Bad"
