"""One-shot postal code operations.

``PostalCodeManager`` is the main entry point. Every call normalizes its input,
resolves the country's handler through a :class:`HandlerRegistry` and converts
the outcome into a value, ``None``, a default, a boolean or an exception,
depending on the operation. Nothing is memoized per input; use
:meth:`PostalCodeManager.for_postal_code` for a memoizing view.

Example:
    >>> manager = PostalCodeManager()
    >>> manager.format("wc-2E9RZ", "gb")
    'WC2E 9RZ'
    >>> manager.validate("1234", "PL")
    False
    >>> manager.format_or_none("123456", "FR") is None
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ryandata_postal_utils.core.normalizer import normalize_postal_code
from ryandata_postal_utils.core.results import Valid, ValidationOutcome
from ryandata_postal_utils.postal_code import PostalCode
from ryandata_postal_utils.registry import HandlerRegistry

if TYPE_CHECKING:
    from ryandata_postal_utils.config import PostalCodeSettings
    from ryandata_postal_utils.protocols import HandlerFactory


class PostalCodeManager:
    """Validate, format and describe postal codes.

    Args:
        registry: Registry to resolve handlers from. A registry with only the
            built-in handlers is created when omitted.
    """

    def __init__(self, registry: HandlerRegistry | None = None) -> None:
        self._registry = registry if registry is not None else HandlerRegistry()

    @classmethod
    def from_settings(cls, settings: PostalCodeSettings) -> PostalCodeManager:
        """Create a manager whose registry is seeded with the configured overrides."""
        return cls(settings.build_registry())

    @property
    def registry(self) -> HandlerRegistry:
        """The registry handlers are resolved from."""
        return self._registry

    def check(self, postal_code: str, country: str) -> ValidationOutcome:
        """Evaluate a raw postal code without raising.

        Args:
            postal_code: Raw postal code in any case, with or without separators.
            country: Country identifier in any case.

        Returns:
            ``Valid``, ``Invalid`` or ``CountryUnsupported``.
        """
        return self._registry.evaluate(normalize_postal_code(postal_code), country)

    def validate(self, postal_code: str, country: str) -> bool:
        """Check a postal code. Unsupported countries yield False, never an error."""
        return self.check(postal_code, country).is_valid

    def format(self, postal_code: str, country: str) -> str:
        """Format a postal code for display.

        Args:
            postal_code: Raw postal code.
            country: Country identifier in any case.

        Returns:
            The postal code in the country's display format.

        Raises:
            InvalidPostalCodeError: If the code fails validation.
            UnknownCountryError: If the country is not supported.
        """
        outcome = self.check(postal_code, country)
        if isinstance(outcome, Valid):
            return outcome.formatted
        raise outcome.to_error()

    def format_or_none(self, postal_code: str, country: str) -> str | None:
        """Format a postal code, returning None when it is invalid or unsupported."""
        outcome = self.check(postal_code, country)
        return outcome.formatted if isinstance(outcome, Valid) else None

    def format_or(self, postal_code: str, country: str, default: str) -> str:
        """Format a postal code, returning ``default`` when it is invalid or unsupported."""
        outcome = self.check(postal_code, country)
        return outcome.formatted if isinstance(outcome, Valid) else default

    def is_supported_country(self, country: str) -> bool:
        """Check whether a handler is registered for a country, in any case."""
        return self._registry.is_supported(country)

    def get_hint(self, country: str) -> str:
        """Get the expected format for a country, or "" if it is unsupported."""
        handler = self._registry.get(country)
        return handler.hint() if handler is not None else ""

    def register_handler(self, country: str, factory: HandlerFactory) -> PostalCodeManager:
        """Override the handler for a country.

        Args:
            country: Country identifier in any case.
            factory: Zero-argument callable returning a handler.

        Returns:
            This manager, for chaining.

        Raises:
            ValueError: If ``country`` is not a two-letter code.
            TypeError: If ``factory`` is not callable, or is a class without
                validate(), format() and hint().
        """
        self._registry.register_override(country, factory)
        return self

    def for_postal_code(self, postal_code: str, country: str) -> PostalCode:
        """Create a memoizing view over one postal code."""
        return PostalCode(postal_code, country, registry=self._registry)

    def supported_countries(self) -> list[str]:
        """Get the sorted list of countries with a handler."""
        return self._registry.supported_countries()
