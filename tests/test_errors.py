"""Tests for the postal code error model and outcome types."""

from __future__ import annotations

import pytest
from pydantic import BaseModel, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from ryandata_postal_utils.core import (
    PACKAGE_NAME,
    CountryUnsupported,
    Invalid,
    InvalidPostalCodeError,
    PostalCodeError,
    RyanDataPostalValidationError,
    UnknownCountryError,
    Valid,
)


class TestUnknownCountryError:
    """Tests for UnknownCountryError."""

    def test_message_and_country(self) -> None:
        error = UnknownCountryError.for_country("XX")
        assert str(error) == "Unknown country: XX"
        assert error.country == "XX"
        assert error.type == "unknown_country"

    def test_context_identifies_package(self) -> None:
        error = UnknownCountryError.for_country("XX")
        assert error.context is not None
        assert error.context["package"] == PACKAGE_NAME

    def test_hierarchy(self) -> None:
        error = UnknownCountryError.for_country("XX")
        assert isinstance(error, PostalCodeError)
        assert isinstance(error, PydanticCustomError)
        assert isinstance(error, ValueError)


class TestInvalidPostalCodeError:
    """Tests for InvalidPostalCodeError."""

    def test_message_with_hint(self) -> None:
        error = InvalidPostalCodeError.for_postal_code("1234", "PL", "Five digits please.")
        assert str(error) == "Invalid postalCode: 1234. Five digits please."
        assert error.postal_code == "1234"
        assert error.country == "PL"
        assert error.hint == "Five digits please."
        assert error.type == "invalid_postal_code"

    @pytest.mark.parametrize("hint", [None, "", "   "])
    def test_blank_hint_is_dropped(self, hint: str | None) -> None:
        error = InvalidPostalCodeError.for_postal_code("1234", "PL", hint)
        assert str(error) == "Invalid postalCode: 1234"
        assert error.hint is None

    def test_catchable_as_base(self) -> None:
        with pytest.raises(PostalCodeError):
            raise InvalidPostalCodeError.for_postal_code("1234", "PL", "hint")

    def test_raised_inside_pydantic_validator(self) -> None:
        """The error surfaces as a regular pydantic validation failure."""

        class Model(BaseModel):
            postal_code: str

            @field_validator("postal_code")
            @classmethod
            def check(cls, value: str) -> str:
                raise InvalidPostalCodeError.for_postal_code(value, "PL", "Five digits.")

        with pytest.raises(ValidationError) as exc_info:
            Model(postal_code="1234")

        errors = exc_info.value.errors()
        assert errors[0]["type"] == "invalid_postal_code"
        assert errors[0]["msg"] == "Invalid postalCode: 1234. Five digits."


class TestRyanDataPostalValidationError:
    """Tests for the pydantic ValidationError wrapper."""

    def test_wraps_validation_error(self) -> None:
        class Model(BaseModel):
            value: int

        with pytest.raises(ValidationError) as exc_info:
            Model(value="not a number")

        wrapped = RyanDataPostalValidationError.from_validation_error(
            exc_info.value, {"env_var": "X"}
        )
        assert wrapped.original_error is exc_info.value
        assert wrapped.context == {"package": PACKAGE_NAME, "env_var": "X"}
        assert len(wrapped.errors()) == 1
        assert "RyanDataPostalValidationError" in repr(wrapped)

    def test_wraps_plain_exception(self) -> None:
        wrapped = RyanDataPostalValidationError(ValueError("bad entry"))
        assert str(wrapped) == "bad entry"
        assert wrapped.errors() == []


class TestOutcomes:
    """Tests for the tagged outcome types."""

    def test_valid(self) -> None:
        outcome = Valid("12-345")
        assert outcome.is_valid
        assert outcome.formatted == "12-345"

    def test_invalid_to_error(self) -> None:
        outcome = Invalid("1234", "PL", "Five digits.")
        assert not outcome.is_valid
        error = outcome.to_error()
        assert isinstance(error, InvalidPostalCodeError)
        assert str(error) == "Invalid postalCode: 1234. Five digits."

    def test_unsupported_to_error(self) -> None:
        outcome = CountryUnsupported("XX")
        assert not outcome.is_valid
        error = outcome.to_error()
        assert isinstance(error, UnknownCountryError)
        assert error.country == "XX"

    def test_outcomes_are_frozen_values(self) -> None:
        assert Valid("A") == Valid("A")
        assert hash(Invalid("1", "PL", "h")) == hash(Invalid("1", "PL", "h"))
        with pytest.raises(AttributeError):
            Valid("A").formatted = "B"  # type: ignore[misc]
