"""Shared pytest fixtures and Hypothesis configuration.

This module provides pytest fixtures and configures Hypothesis profiles
for the test suite.
"""

from __future__ import annotations

import pytest
from hypothesis import Verbosity, settings

from ryandata_postal_utils import HandlerRegistry, PostalCodeManager

# Configure Hypothesis settings for the test suite
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)


@pytest.fixture
def registry() -> HandlerRegistry:
    """Registry with only the built-in handlers."""
    return HandlerRegistry()


@pytest.fixture
def manager(registry: HandlerRegistry) -> PostalCodeManager:
    """Manager over a fresh registry."""
    return PostalCodeManager(registry)
