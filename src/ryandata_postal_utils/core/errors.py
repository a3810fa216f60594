"""Postal-code error classes with package identification.

Both failure kinds share one base so callers can catch them generically
(``except PostalCodeError``) or specifically. The base derives from
``PydanticCustomError`` and is therefore also a ``ValueError``, which lets the
errors be raised from inside pydantic validators unchanged.
"""

from __future__ import annotations

from typing import Any

from pydantic_core import PydanticCustomError

# Package identifier for error context
PACKAGE_NAME = "ryandata_postal_utils"


class PostalCodeError(PydanticCustomError):
    """Base error for every postal-code failure raised by this package.

    Instances carry a context dict that always includes ``package`` and
    ``country``; ``str(error)`` renders the message template against it.
    """

    @property
    def country(self) -> str:
        """Uppercase country identifier the failure relates to."""
        return str((self.context or {}).get("country", ""))


class UnknownCountryError(PostalCodeError):
    """Raised when no override or default handler exists for a country."""

    @classmethod
    def for_country(cls, country: str) -> UnknownCountryError:
        """Create the error for an unsupported country.

        Args:
            country: The country identifier that could not be resolved.

        Returns:
            UnknownCountryError with message ``"Unknown country: {country}"``.
        """
        return cls(
            "unknown_country",
            "Unknown country: {country}",
            {"package": PACKAGE_NAME, "country": country},
        )


class InvalidPostalCodeError(PostalCodeError):
    """Raised when a postal code fails validation for a supported country."""

    @classmethod
    def for_postal_code(
        cls, postal_code: str, country: str, hint: str | None = None
    ) -> InvalidPostalCodeError:
        """Create the error for a postal code rejected by its country's handler.

        Args:
            postal_code: The normalized postal code that failed validation.
            country: Country identifier whose rules rejected it.
            hint: Human-readable description of the expected format. Blank
                hints are dropped from the message.

        Returns:
            InvalidPostalCodeError with message
            ``"Invalid postalCode: {postal_code}. {hint}"``.
        """
        context: dict[str, Any] = {
            "package": PACKAGE_NAME,
            "postal_code": postal_code,
            "country": country,
        }
        template = "Invalid postalCode: {postal_code}"
        if hint and hint.strip():
            context["hint"] = hint
            template += ". {hint}"
        return cls("invalid_postal_code", template, context)

    @property
    def postal_code(self) -> str:
        """The normalized postal code that failed validation."""
        return str((self.context or {}).get("postal_code", ""))

    @property
    def hint(self) -> str | None:
        """Format hint of the country's handler, or None if it had none."""
        return (self.context or {}).get("hint")


class RyanDataPostalValidationError(Exception):
    """Exception wrapper for pydantic.ValidationError with package identification.

    Raised when configuration (handler overrides) fails validation. Provides
    access to the original error while adding package context.
    """

    def __init__(self, validation_error: Exception, context: dict | None = None):
        from pydantic import ValidationError as PydanticValidationError

        self.original_error = validation_error
        self.context = {"package": PACKAGE_NAME, **(context or {})}

        if isinstance(validation_error, PydanticValidationError):
            self.errors_list = validation_error.errors()
            error_messages = "; ".join(e.get("msg", str(e)) for e in self.errors_list)
        else:
            self.errors_list = []
            error_messages = str(validation_error)

        super().__init__(error_messages)

    @classmethod
    def from_validation_error(
        cls, error: Exception, context: dict | None = None
    ) -> RyanDataPostalValidationError:
        """Wrap a pydantic.ValidationError with package context."""
        return cls(error, context)

    def errors(self) -> list:
        """Get the list of validation errors."""
        return self.errors_list

    def __repr__(self) -> str:
        return f"RyanDataPostalValidationError({self.original_error!r}, context={self.context})"
