"""Tests for the FastAPI adapter (optional; requires fluentcheck[fastapi])."""

import logging

import pytest

fastapi = pytest.importorskip("fastapi")

from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel

from fluentcheck.contrib.fastapi import (
    bind_body,
    get_params,
    install_exception_handlers,
    params_with,
    validation_error_response,
)
from fluentcheck.entity import EntityValidator
from fluentcheck.params import ParameterSource, ParameterValidator
from fluentcheck.primitives.exceptions import ValidationError
from fluentcheck.registry import ValidatorRegistry
from fluentcheck.validation import ValidationConfig, ValidationFailure


class CreateUser(BaseModel):
    name: str
    email: str


class CreateUserValidator(EntityValidator[CreateUser]):
    def __init__(self) -> None:
        super().__init__()
        self.field("name").not_empty().length(2, 50)
        self.field("email").not_empty().email_address()


@pytest.fixture
def app() -> FastAPI:
    registry = ValidatorRegistry()
    registry.register(CreateUser, CreateUserValidator())
    registry.freeze()

    lenient = params_with(
        ValidationConfig(optional_sources=frozenset({ParameterSource.QUERY}))
    )

    app = FastAPI()
    install_exception_handlers(app)

    @app.get("/users/{id}")
    def get_user(params: ParameterValidator = Depends(get_params)) -> dict:
        user_id = params.path_int("id").positive().value()
        tenant = params.header_string("X-Tenant").not_empty().value()
        params.ensure_valid()
        return {"id": user_id, "tenant": tenant}

    @app.get("/users")
    def list_users(params: ParameterValidator = Depends(lenient)) -> dict:
        page = params.query_int("page").range(1, 100).value_or(1)
        size = params.query_int("size").range(1, 50).value_or(10)
        params.ensure_valid()
        return {"page": page, "size": size}

    @app.post("/users")
    def create_user(
        body: CreateUser = Depends(bind_body(CreateUser, registry)),
    ) -> dict:
        return {"name": body.name}

    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


class TestParameters:
    def test_valid_request(self, client: TestClient) -> None:
        response = client.get("/users/7", headers={"X-Tenant": "acme"})

        assert response.status_code == 200
        assert response.json() == {"id": 7, "tenant": "acme"}

    def test_all_failures_in_one_response(
        self, client: TestClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.INFO, logger="fluentcheck.contrib.fastapi.responses")

        response = client.get("/users/-5")

        assert response.status_code == 400
        assert response.json() == {
            "code": "VALIDATION.FAILED",
            "message": "validation failed",
            "fields": [
                {
                    "field": "id",
                    "message": "must be positive",
                    "code": "VALIDATION.POSITIVE",
                },
                {
                    "field": "X-Tenant",
                    "message": "field is required",
                    "code": "VALIDATION.REQUIRED",
                },
            ],
        }
        assert "Rejected GET /users/-5: 2 invalid field(s)" in caplog.text

    def test_optional_query_defaults(self, client: TestClient) -> None:
        response = client.get("/users")

        assert response.status_code == 200
        assert response.json() == {"page": 1, "size": 10}

    def test_optional_query_out_of_range(self, client: TestClient) -> None:
        response = client.get("/users", params={"page": "0", "size": "10"})

        assert response.status_code == 400
        assert [f["field"] for f in response.json()["fields"]] == ["page"]


class TestBody:
    def test_valid_body(self, client: TestClient) -> None:
        response = client.post(
            "/users", json={"name": "ann", "email": "ann@example.com"}
        )

        assert response.status_code == 200
        assert response.json() == {"name": "ann"}

    def test_rule_failure(self, client: TestClient) -> None:
        response = client.post("/users", json={"name": "a", "email": "nope"})

        assert response.status_code == 400
        assert [f["field"] for f in response.json()["fields"]] == ["name", "email"]

    def test_empty_body(self, client: TestClient) -> None:
        response = client.post("/users", content=b"")

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "request body could not be decoded"
        assert body["fields"][0]["field"] == "body"

    def test_invalid_json(self, client: TestClient) -> None:
        response = client.post(
            "/users",
            content=b"{broken",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["fields"] == [
            {
                "field": "body",
                "message": "request body is not valid JSON",
                "code": "VALIDATION.FAILED",
            }
        ]


def test_validation_error_response() -> None:
    error = ValidationError([ValidationFailure("q", "field is required")])

    response = validation_error_response(error)

    assert response.status_code == 400
    assert b'"field":"q"' in response.body


class _BodyOnlyRequest:
    def __init__(self, payload: bytes) -> None:
        self._payload = payload

    async def body(self) -> bytes:
        return self._payload


@pytest.mark.asyncio
async def test_bind_body_dependency_awaits_request_body() -> None:
    registry = ValidatorRegistry()
    registry.register(CreateUser, CreateUserValidator())
    dependency = bind_body(CreateUser, registry)

    user = await dependency(_BodyOnlyRequest(b'{"name": "ann", "email": "a@b.io"}'))

    assert user == CreateUser(name="ann", email="a@b.io")

    with pytest.raises(ValidationError):
        await dependency(_BodyOnlyRequest(b'{"name": "", "email": "a@b.io"}'))
