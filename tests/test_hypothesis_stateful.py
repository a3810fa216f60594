"""Stateful property-based tests using Hypothesis for workflow testing.

This module contains stateful tests using Hypothesis's RuleBasedStateMachine
to test multi-step workflows against the handler registry: overrides being
registered, replaced and removed while lookups keep returning the handler
of the current registration.
"""

from __future__ import annotations

import hypothesis.strategies as st
from hypothesis import HealthCheck, settings
from hypothesis.stateful import RuleBasedStateMachine, invariant, rule

from ryandata_postal_utils import HandlerRegistry, PostalCodeManager
from ryandata_postal_utils.handlers import DEFAULT_HANDLERS
from tests.fakes import AcceptAllHandler, ZZHandler

# Mix of countries with and without a built-in handler
COUNTRIES = ["PL", "GB", "DE", "US", "ZZ", "YY", "XX"]

HANDLER_CLASSES = [AcceptAllHandler, ZZHandler]


# =============================================================================
# HandlerRegistry State Machine
# =============================================================================


class HandlerRegistryStateMachine(RuleBasedStateMachine):
    """State machine for testing HandlerRegistry override bookkeeping.

    A plain dict models the override tier. After every step the registry
    must resolve each country to the override class if there is one, to the
    built-in class otherwise, and report unsupported countries as such.
    """

    def __init__(self) -> None:
        super().__init__()
        self.registry = HandlerRegistry()
        self.manager = PostalCodeManager(self.registry)
        self.expected_overrides: dict[str, type] = {}

    # =========================================================================
    # Rules
    # =========================================================================

    @rule(
        country=st.sampled_from(COUNTRIES),
        lower=st.booleans(),
        handler_class=st.sampled_from(HANDLER_CLASSES),
    )
    def register_override(self, country: str, lower: bool, handler_class: type) -> None:
        """Register (or replace) an override."""
        self.manager.register_handler(country.lower() if lower else country, handler_class)
        self.expected_overrides[country] = handler_class

    @rule(country=st.sampled_from(COUNTRIES))
    def unregister_override(self, country: str) -> None:
        """Remove an override, if any."""
        self.registry.unregister_override(country)
        self.expected_overrides.pop(country, None)

    @rule(country=st.sampled_from(COUNTRIES))
    def resolve_handler(self, country: str) -> None:
        """Look up a handler, populating the cache."""
        handler = self.registry.get(country)
        if handler is not None:
            assert self.registry.get(country) is handler

    @rule()
    def clear_cache(self) -> None:
        self.registry.clear_cache()

    # =========================================================================
    # Invariants
    # =========================================================================

    @invariant()
    def overrides_match_model(self) -> None:
        assert self.registry.overrides() == self.expected_overrides

    @invariant()
    def resolution_follows_precedence(self) -> None:
        for country in COUNTRIES:
            expected = self.expected_overrides.get(country) or DEFAULT_HANDLERS.get(country)
            handler = self.registry.get(country)
            if expected is None:
                assert handler is None
                assert not self.manager.is_supported_country(country)
            else:
                assert type(handler) is expected
                assert self.manager.is_supported_country(country)

    @invariant()
    def supported_countries_is_union(self) -> None:
        expected = sorted(set(DEFAULT_HANDLERS) | set(self.expected_overrides))
        assert self.registry.supported_countries() == expected


# Create pytest test case
TestHandlerRegistry = HandlerRegistryStateMachine.TestCase
TestHandlerRegistry.settings = settings(
    max_examples=50,
    stateful_step_count=20,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
