import logging
from dataclasses import dataclass

import pytest

from fluentcheck.entity import EntityValidator
from fluentcheck.primitives.exceptions import (
    ConfigurationError,
    UnregisteredValidatorError,
    ValidatorRegistrationError,
)
from fluentcheck.registry import ValidatorRegistry


@dataclass
class CreateOrder:
    sku: str = ""
    quantity: int = 0


@dataclass
class CancelOrder:
    order_id: int = 0


class CreateOrderValidator(EntityValidator[CreateOrder]):
    def __init__(self) -> None:
        super().__init__()
        self.field("sku").not_empty()
        self.field("quantity").greater_than(0)


class StrictCreateOrderValidator(CreateOrderValidator):
    pass


def test_register_and_lookup(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="fluentcheck.registry")
    registry = ValidatorRegistry()
    validator = CreateOrderValidator()

    registry.register(CreateOrder, validator)

    assert registry.get(CreateOrder) is validator
    assert registry.lookup(CreateOrder) is validator
    assert registry.is_registered(CreateOrder)
    assert not registry.is_registered(CancelOrder)
    assert registry.get(CancelOrder) is None
    assert registry.registered_types() == [CreateOrder]
    assert "Registered validator CreateOrder -> CreateOrderValidator" in caplog.text


def test_registering_same_instance_twice_is_allowed() -> None:
    registry = ValidatorRegistry()
    validator = CreateOrderValidator()

    registry.register(CreateOrder, validator)
    registry.register(CreateOrder, validator)

    assert registry.lookup(CreateOrder) is validator


def test_conflicting_registration_raises() -> None:
    registry = ValidatorRegistry()
    registry.register(CreateOrder, CreateOrderValidator())

    with pytest.raises(ValidatorRegistrationError, match="Duplicate validator"):
        registry.register(CreateOrder, StrictCreateOrderValidator())


def test_frozen_registry_rejects_registration() -> None:
    registry = ValidatorRegistry()
    registry.freeze()

    assert registry.is_frozen
    with pytest.raises(ValidatorRegistrationError, match="registry is frozen"):
        registry.register(CreateOrder, CreateOrderValidator())


def test_lookup_unregistered_type() -> None:
    registry = ValidatorRegistry()

    with pytest.raises(UnregisteredValidatorError, match="CancelOrder") as exc_info:
        registry.lookup(CancelOrder)

    assert exc_info.value.model_type is CancelOrder
    assert isinstance(exc_info.value, ConfigurationError)
    assert isinstance(exc_info.value, LookupError)


def test_validate_dispatches_on_instance_type() -> None:
    registry = ValidatorRegistry()
    registry.register(CreateOrder, CreateOrderValidator())

    result = registry.validate(CreateOrder(sku="", quantity=0))

    assert [f.field for f in result] == ["sku", "quantity"]
    assert registry.validate(CreateOrder(sku="A-1", quantity=2)).is_valid


def test_clear_unfreezes() -> None:
    registry = ValidatorRegistry()
    registry.register(CreateOrder, CreateOrderValidator())
    registry.freeze()

    registry.clear()

    assert not registry.is_frozen
    assert registry.registered_types() == []
    registry.register(CancelOrder, EntityValidator())
