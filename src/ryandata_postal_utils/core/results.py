"""Outcome types produced by evaluating a postal code against its country.

The registry returns these instead of raising, so the decision of whether a
failure becomes ``None``, a default, ``False`` or an exception is left to the
caller-facing layers (``PostalCodeManager`` and ``PostalCode``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from ryandata_postal_utils.core.errors import InvalidPostalCodeError, UnknownCountryError


@dataclass(frozen=True)
class Valid:
    """The postal code passed validation.

    Attributes:
        formatted: The code in the country's display format.
    """

    formatted: str

    is_valid: ClassVar[bool] = True


@dataclass(frozen=True)
class Invalid:
    """The country is supported but the postal code was rejected.

    Attributes:
        postal_code: The normalized postal code.
        country: Uppercase country identifier.
        hint: The handler's description of the expected format.
    """

    postal_code: str
    country: str
    hint: str

    is_valid: ClassVar[bool] = False

    def to_error(self) -> InvalidPostalCodeError:
        """Build the matching exception."""
        return InvalidPostalCodeError.for_postal_code(self.postal_code, self.country, self.hint)


@dataclass(frozen=True)
class CountryUnsupported:
    """No handler is registered for the country."""

    country: str

    is_valid: ClassVar[bool] = False

    def to_error(self) -> UnknownCountryError:
        """Build the matching exception."""
        return UnknownCountryError.for_country(self.country)


ValidationOutcome = Union[Valid, Invalid, CountryUnsupported]
