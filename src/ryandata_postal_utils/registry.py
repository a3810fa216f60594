"""Country handler registry and resolver.

The registry owns two tiers of registrations: overrides (constructor argument,
configuration or ``register_override``) and defaults (the built-in
``DEFAULT_HANDLERS`` table). Overrides always win. Resolved handler instances
are cached per country and dropped whenever that country's registration
changes, so a lookup never sees a stale handler.

Example:
    >>> registry = HandlerRegistry()
    >>> registry.resolve("pl").format("12345")
    '12-345'

    # Replace the German rules at runtime
    >>> registry.register_override("DE", MyDEHandler)
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping
from typing import Union

from ryandata_postal_utils.core.errors import UnknownCountryError
from ryandata_postal_utils.core.normalizer import (
    is_canonical_postal_code,
    is_country_code,
    normalize_country,
)
from ryandata_postal_utils.core.results import CountryUnsupported, Invalid, Valid, ValidationOutcome
from ryandata_postal_utils.protocols import HandlerFactory, PostalCodeHandlerProtocol

logger = logging.getLogger(__name__)

_HANDLER_METHODS = ("validate", "format", "hint")

HandlerRegistrations = Union[Mapping[str, HandlerFactory], Iterable[tuple[str, HandlerFactory]]]


def _items(registrations: HandlerRegistrations) -> Iterable[tuple[str, HandlerFactory]]:
    if isinstance(registrations, Mapping):
        return registrations.items()
    return registrations


def _check_registration(country: str, factory: object) -> str:
    """Validate a registration and return the uppercased country code."""
    if not isinstance(country, str) or not is_country_code(country):
        raise ValueError(f"Country must be a 2-letter ISO 3166-1 alpha-2 code, got {country!r}")
    if not callable(factory):
        raise TypeError(f"Handler factory for {country} must be callable, got {factory!r}")
    if isinstance(factory, type) and not all(
        callable(getattr(factory, method, None)) for method in _HANDLER_METHODS
    ):
        raise TypeError(
            f"{factory.__name__} registered for {normalize_country(country)} "
            "does not implement validate(), format() and hint()"
        )
    return normalize_country(country)


class HandlerRegistry:
    """Resolve country identifiers to postal code handlers.

    Args:
        overrides: Registrations that take precedence over the defaults, as a
            mapping or an iterable of ``(country, factory)`` pairs. When a
            country appears more than once the last registration wins.
        defaults: Replacement for the built-in default table. When omitted the
            built-in handlers are loaded on first use.

    Raises:
        ValueError: If a country code is not two letters.
        TypeError: If a factory is not callable, or is a class without
            validate(), format() and hint().
    """

    def __init__(
        self,
        overrides: HandlerRegistrations | None = None,
        *,
        defaults: Mapping[str, HandlerFactory] | None = None,
    ) -> None:
        self._lock = threading.RLock()
        self._overrides: dict[str, HandlerFactory] = {}
        self._cache: dict[str, PostalCodeHandlerProtocol] = {}
        self._defaults: dict[str, HandlerFactory] | None = None
        # Countries whose factory built something that is not a handler
        self._broken: set[str] = set()

        if defaults is not None:
            self._defaults = {
                _check_registration(country, factory): factory
                for country, factory in defaults.items()
            }

        for country, factory in _items(overrides or {}):
            self._overrides[_check_registration(country, factory)] = factory

    def _default_table(self) -> dict[str, HandlerFactory]:
        """Get the default tier, loading the built-in handlers on first use."""
        if self._defaults is None:
            from ryandata_postal_utils.handlers import DEFAULT_HANDLERS

            self._defaults = dict(DEFAULT_HANDLERS)
        return self._defaults

    def _factory_for(self, country: str) -> HandlerFactory | None:
        factory = self._overrides.get(country)
        if factory is None:
            factory = self._default_table().get(country)
        return factory

    def get(self, country: str) -> PostalCodeHandlerProtocol | None:
        """Get the handler for a country.

        A factory that builds something other than a handler leaves the
        country unsupported until its registration changes; the failure is
        logged and the country is reported as unsupported from then on.

        Args:
            country: Country identifier in any case.

        Returns:
            The cached or freshly built handler, or None if the country is
            not supported.
        """
        if not is_country_code(country):
            return None
        country = normalize_country(country)

        with self._lock:
            handler = self._cache.get(country)
            if handler is not None:
                return handler

            factory = self._factory_for(country)
            if factory is None or country in self._broken:
                return None

            handler = factory()
            if not isinstance(handler, PostalCodeHandlerProtocol):
                self._broken.add(country)
                logger.warning(
                    "Handler factory for %s returned %s, which does not implement "
                    "validate(), format() and hint(); treating %s as unsupported",
                    country,
                    type(handler).__name__,
                    country,
                )
                return None
            self._cache[country] = handler
            logger.debug("Instantiated %s for %s", type(handler).__name__, country)
            return handler

    def resolve(self, country: str) -> PostalCodeHandlerProtocol:
        """Get the handler for a country, raising if there is none.

        Raises:
            UnknownCountryError: If no override or default handler exists.
            TypeError: If the registered factory does not build a handler.
        """
        handler = self.get(country)
        if handler is not None:
            return handler

        country = normalize_country(country)
        with self._lock:
            broken = country in self._broken
        if broken:
            raise TypeError(
                f"Handler factory for {country} does not build a handler "
                "implementing validate(), format() and hint()"
            )
        raise UnknownCountryError.for_country(country)

    def is_supported(self, country: str) -> bool:
        """Check whether a handler is registered for a country without building it.

        Countries whose factory has already failed to build a handler are
        reported as unsupported.
        """
        if not is_country_code(country):
            return False
        country = normalize_country(country)
        with self._lock:
            return self._factory_for(country) is not None and country not in self._broken

    def register_override(self, country: str, factory: HandlerFactory) -> HandlerRegistry:
        """Install or replace the override for a country.

        The cached handler for that country is dropped in the same step, so the
        next lookup builds the new handler.

        Args:
            country: Country identifier in any case.
            factory: Zero-argument callable returning a handler, such as a
                handler class.

        Returns:
            This registry, for chaining.

        Raises:
            ValueError: If ``country`` is not a two-letter code.
            TypeError: If ``factory`` is not callable, or is a class without
                validate(), format() and hint().
        """
        country = _check_registration(country, factory)
        with self._lock:
            self._overrides[country] = factory
            self._invalidate(country)
        logger.info("Registered handler override for %s: %r", country, factory)
        return self

    def unregister_override(self, country: str) -> HandlerRegistry:
        """Remove the override for a country, falling back to its default.

        Returns:
            This registry, for chaining.
        """
        country = normalize_country(country)
        with self._lock:
            removed = self._overrides.pop(country, None)
            self._invalidate(country)
        if removed is not None:
            logger.info("Removed handler override for %s", country)
        return self

    def _invalidate(self, country: str) -> None:
        self._broken.discard(country)
        if self._cache.pop(country, None) is not None:
            logger.debug("Dropped cached handler for %s", country)

    def clear_cache(self) -> None:
        """Drop every cached handler instance."""
        with self._lock:
            self._cache.clear()
        logger.debug("Cleared handler cache")

    def overrides(self) -> dict[str, HandlerFactory]:
        """Get a copy of the override tier."""
        with self._lock:
            return dict(self._overrides)

    def supported_countries(self) -> list[str]:
        """Get the sorted list of countries with an override or default handler."""
        with self._lock:
            return sorted((set(self._default_table()) | set(self._overrides)) - self._broken)

    def evaluate(self, postal_code: str, country: str) -> ValidationOutcome:
        """Validate and format a normalized postal code.

        ``format`` is only called on the handler after ``validate`` accepted
        the code. Codes that are empty or contain anything other than ASCII
        letters and digits are rejected before the handler sees them.

        Args:
            postal_code: Normalized postal code.
            country: Country identifier in any case.

        Returns:
            ``Valid`` with the formatted code, ``Invalid`` with the handler's
            hint, or ``CountryUnsupported``.
        """
        handler = self.get(country)
        country = normalize_country(country)
        if handler is None:
            return CountryUnsupported(country)

        if not is_canonical_postal_code(postal_code) or not handler.validate(postal_code):
            return Invalid(postal_code, country, handler.hint())

        return Valid(handler.format(postal_code))

    def __repr__(self) -> str:
        return f"HandlerRegistry(overrides={sorted(self._overrides)})"
