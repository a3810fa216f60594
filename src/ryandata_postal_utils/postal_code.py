"""Fluent, memoizing view over one (postal code, country) pair."""

from __future__ import annotations

from functools import cached_property
from typing import TYPE_CHECKING

from ryandata_postal_utils.core.normalizer import normalize_country, normalize_postal_code
from ryandata_postal_utils.core.results import Valid, ValidationOutcome

if TYPE_CHECKING:
    from ryandata_postal_utils.registry import HandlerRegistry


class PostalCode:
    """A postal code bound to its country.

    Normalization happens once at construction; validation happens on first
    use and the outcome is memoized for the lifetime of the view.

    Example:
        >>> pc = PostalCode("wc2e 9rz", "gb", registry=HandlerRegistry())
        >>> pc.is_valid()
        True
        >>> pc.format()
        'WC2E 9RZ'
    """

    def __init__(self, postal_code: str, country: str, *, registry: HandlerRegistry) -> None:
        self._original = postal_code
        self._country = normalize_country(country)
        self._normalized = normalize_postal_code(postal_code)
        self._registry = registry

    @property
    def country(self) -> str:
        """Country identifier, uppercased when it is ASCII."""
        return self._country

    @property
    def original(self) -> str:
        """The postal code exactly as supplied."""
        return self._original

    @property
    def normalized(self) -> str:
        """The postal code without spaces or hyphens, uppercased."""
        return self._normalized

    @cached_property
    def outcome(self) -> ValidationOutcome:
        """Result of evaluating the postal code against its country's handler."""
        return self._registry.evaluate(self._normalized, self._country)

    def is_valid(self) -> bool:
        """Check the postal code. False for an unsupported country."""
        return self.outcome.is_valid

    def is_country_supported(self) -> bool:
        """Check whether the country has a handler."""
        return self._registry.is_supported(self._country)

    def format(self) -> str:
        """Get the postal code in its country's display format.

        Raises:
            InvalidPostalCodeError: If the code fails validation.
            UnknownCountryError: If the country is not supported.
        """
        outcome = self.outcome
        if isinstance(outcome, Valid):
            return outcome.formatted
        raise outcome.to_error()

    def format_or_none(self) -> str | None:
        """Get the formatted postal code, or None if it is invalid or unsupported."""
        outcome = self.outcome
        return outcome.formatted if isinstance(outcome, Valid) else None

    def format_or(self, default: str) -> str:
        """Get the formatted postal code, or ``default`` if it is invalid or unsupported."""
        outcome = self.outcome
        return outcome.formatted if isinstance(outcome, Valid) else default

    def hint(self) -> str:
        """Get the expected format for the country, or "" if it is unsupported."""
        handler = self._registry.get(self._country)
        return handler.hint() if handler is not None else ""

    def __str__(self) -> str:
        return self.format_or(self._original)

    def __repr__(self) -> str:
        return f"PostalCode({self._original!r}, {self._country!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PostalCode):
            return NotImplemented
        return (self._country, self._original) == (other._country, other._original)

    def __hash__(self) -> int:
        return hash((self._country, self._original))
