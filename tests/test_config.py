"""Tests for configuration derivation and validation."""

import dataclasses

import pytest

from numberlist import (
    BASES,
    DEFAULT_CONFIG,
    OPERATIONS,
    RECORD_BOOK_NUMBER,
    Base,
    ConfigurationError,
    Operation,
    NumberConfig,
)


def test_catalogs() -> None:
    """Test the base and operation catalogs keep their selector order."""
    assert BASES == (2, 3, 8, 10, 16)
    assert OPERATIONS == ("add", "sub", "mul", "div", "mod", "and", "or")


def test_from_record_book_default() -> None:
    """Test the default record book number: C3=1, C5=2, C7=3."""
    config = NumberConfig.from_record_book(3517)
    assert config.primary_base == 8
    assert config.additional_base == 10
    assert config.operation == "div"
    assert config.circular is True
    assert config.doubly is False
    assert config.topology == "circular-singly"
    assert DEFAULT_CONFIG == NumberConfig.from_record_book(RECORD_BOOK_NUMBER)


@pytest.mark.parametrize(
    ("number", "primary", "additional", "operation", "topology"),
    [
        (0, 2, 3, "add", "linear-doubly"),
        (14, 16, 2, "add", "circular-doubly"),
        (13, 10, 16, "or", "circular-singly"),
        (6, 3, 8, "or", "linear-doubly"),
    ],
)
def test_from_record_book(
    number: int, primary: int, additional: int, operation: str, topology: str
) -> None:
    """Test each selector picks from its catalog."""
    config = NumberConfig.from_record_book(number)
    assert config.primary_base == primary
    assert config.additional_base == additional
    assert config.operation == operation
    assert config.topology == topology


def test_linear_singly_explicit() -> None:
    """Test the topology never derived from a record book can still be built."""
    config = NumberConfig(circular=False, doubly=False)
    assert config.topology == "linear-singly"


def test_negative_record_book_rejected() -> None:
    """Test negative identifiers are rejected."""
    with pytest.raises(ConfigurationError):
        NumberConfig.from_record_book(-1)


@pytest.mark.parametrize("field", ["primary_base", "additional_base"])
def test_unsupported_base_rejected(field: str) -> None:
    """Test bases outside the catalog are rejected."""
    with pytest.raises(ConfigurationError, match=field):
        NumberConfig(**{field: 7})


def test_unsupported_operation_rejected() -> None:
    """Test operations outside the catalog are rejected."""
    with pytest.raises(ConfigurationError):
        NumberConfig(operation="pow")  # type: ignore[arg-type]


def test_config_is_immutable() -> None:
    """Test a configuration cannot change after construction."""
    config = NumberConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.primary_base = 2  # type: ignore[misc]


def test_bases_use_catalog_alias() -> None:
    """Test both base fields are typed with the base catalog alias."""
    field_types = {field.name: field.type for field in dataclasses.fields(NumberConfig)}
    assert field_types["primary_base"] is Base
    assert field_types["additional_base"] is Base
    assert field_types["operation"] is Operation
