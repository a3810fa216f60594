"""Record-level postal code validation.

Bridges the manager into ``abstract_validation_base`` so postal codes can be
checked as part of a larger validation pipeline, reporting field-level errors
instead of raising.
"""

from __future__ import annotations

from abstract_validation_base import BaseValidator, ValidationResult
from pydantic import BaseModel, ConfigDict, Field

from ryandata_postal_utils.core.results import CountryUnsupported, Invalid
from ryandata_postal_utils.manager import PostalCodeManager


class PostalCodeRecord(BaseModel):
    """A postal code together with its country, as found in a data record."""

    model_config = ConfigDict(
        extra="ignore",
        str_strip_whitespace=True,
    )

    postal_code: str = Field(description="Raw postal code as supplied")
    country: str = Field(description="ISO 3166-1 alpha-2 country code, any case")

    def formatted(self, manager: PostalCodeManager) -> str | None:
        """Get the formatted postal code, or None if it is invalid or unsupported."""
        return manager.format_or_none(self.postal_code, self.country)


class PostalCodeValidator(BaseValidator[PostalCodeRecord]):
    """Validates a record's postal code against its country's rules.

    Unsupported countries are reported on the ``country`` field; codes rejected
    by a supported country are reported on ``postal_code`` with the format hint.
    """

    def __init__(self, manager: PostalCodeManager | None = None) -> None:
        """Initialize the validator.

        Args:
            manager: Manager to validate with. Defaults to one with only the
                built-in handlers.
        """
        self._manager = manager if manager is not None else PostalCodeManager()

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "postal_code"

    def validate(self, record: PostalCodeRecord) -> ValidationResult:
        """Validate the postal code in a record.

        Args:
            record: Record to validate.

        Returns:
            ValidationResult with any country or postal code errors.
        """
        result = ValidationResult(is_valid=True)
        outcome = self._manager.check(record.postal_code, record.country)

        if isinstance(outcome, CountryUnsupported):
            result.add_error("country", str(outcome.to_error()), record.country)
        elif isinstance(outcome, Invalid):
            result.add_error("postal_code", str(outcome.to_error()), record.postal_code)

        return result
