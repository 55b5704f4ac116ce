"""FastAPI dependencies for parameter extraction and body binding.

Provides Depends functions that build a per-request
:class:`~fluentcheck.params.validator.ParameterValidator` and that bind and
validate JSON bodies against a :class:`~fluentcheck.registry.ValidatorRegistry`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from starlette.requests import Request  # noqa: TC002

from ...binding import bind_and_validate
from ...params.source import RequestValues
from ...params.validator import ParameterValidator

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from ...registry import ValidatorRegistry
    from ...validation.config import ValidationConfig

T = TypeVar("T")


def request_values(request: Request) -> RequestValues:
    """Snapshot path, query and header values of *request* as strings."""
    return RequestValues.from_mappings(
        path={k: str(v) for k, v in request.path_params.items()},
        query=dict(request.query_params),
        headers=dict(request.headers),
    )


def get_params(request: Request) -> ParameterValidator:
    """Fresh ParameterValidator for the current request.

    Example:
        ```python
        from fastapi import APIRouter, Depends
        from fluentcheck.contrib.fastapi import get_params

        router = APIRouter()

        @router.get("/orders/{id}")
        def get_order(params: ParameterValidator = Depends(get_params)):
            order_id = params.path_int("id").positive().value()
            params.ensure_valid()
            return {"id": order_id}
        ```
    """
    return ParameterValidator(request_values(request))


def params_with(config: ValidationConfig) -> Callable[[Any], ParameterValidator]:
    """Create a dependency that builds validators with *config*.

    Example:
        ```python
        lenient = params_with(
            ValidationConfig(optional_sources=frozenset({ParameterSource.QUERY}))
        )

        @router.get("/products")
        def browse(params: ParameterValidator = Depends(lenient)):
            ...
        ```
    """

    def dependency(request: Request) -> ParameterValidator:
        return ParameterValidator(request_values(request), config=config)

    return dependency


def bind_body(
    model_type: type[T], registry: ValidatorRegistry
) -> Callable[[Any], Awaitable[T]]:
    """Create a dependency that decodes the JSON body and validates it.

    Raises ``ValidationError`` (rendered as 400 by the installed exception
    handler) when the body is malformed or breaks a rule.

    Example:
        ```python
        @router.post("/users")
        async def create_user(
            body: CreateUser = Depends(bind_body(CreateUser, registry)),
        ):
            return {"name": body.name}
        ```
    """

    async def dependency(request: Request) -> T:
        payload = await request.body()
        return bind_and_validate(model_type, payload, registry)

    return dependency
