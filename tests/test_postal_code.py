"""Tests for the memoizing PostalCode view."""

from __future__ import annotations

import pytest

from ryandata_postal_utils import (
    HandlerRegistry,
    InvalidPostalCodeError,
    PostalCode,
    PostalCodeManager,
    UnknownCountryError,
    Valid,
)
from tests.fakes import ZZHandler


class CountingHandler(ZZHandler):
    """ZZHandler that counts validate() calls."""

    calls = 0

    def validate(self, postal_code: str) -> bool:
        CountingHandler.calls += 1
        return super().validate(postal_code)


class TestPostalCodeView:
    """Tests for PostalCode accessors and formatting."""

    def test_valid_code(self, registry: HandlerRegistry) -> None:
        pc = PostalCode("wc-2E9RZ", "gb", registry=registry)
        assert pc.is_valid()
        assert pc.format() == "WC2E 9RZ"
        assert pc.format_or_none() == "WC2E 9RZ"
        assert pc.format_or("fallback") == "WC2E 9RZ"
        assert pc.outcome == Valid("WC2E 9RZ")

    def test_properties(self, registry: HandlerRegistry) -> None:
        pc = PostalCode("wc-2E9RZ", "gb", registry=registry)
        assert pc.country == "GB"
        assert pc.original == "wc-2E9RZ"
        assert pc.normalized == "WC2E9RZ"

    def test_invalid_code(self, registry: HandlerRegistry) -> None:
        pc = PostalCode("1234", "PL", registry=registry)
        assert not pc.is_valid()
        assert pc.format_or_none() is None
        assert pc.format_or("n/a") == "n/a"
        with pytest.raises(InvalidPostalCodeError) as exc_info:
            pc.format()
        assert exc_info.value.postal_code == "1234"
        assert exc_info.value.hint == pc.hint()

    def test_unsupported_country(self, registry: HandlerRegistry) -> None:
        pc = PostalCode("12345", "xx", registry=registry)
        assert not pc.is_valid()
        assert not pc.is_country_supported()
        assert pc.format_or_none() is None
        assert pc.hint() == ""
        with pytest.raises(UnknownCountryError) as exc_info:
            pc.format()
        assert exc_info.value.country == "XX"

    @pytest.mark.parametrize("country", ["ﬁ", "ß"])
    def test_non_ascii_country_matches_manager(
        self, registry: HandlerRegistry, country: str
    ) -> None:
        """Ligatures that uppercase to real codes stay unsupported."""
        manager = PostalCodeManager(registry)
        pc = manager.for_postal_code("00100", country)
        assert pc.country == country
        assert pc.is_valid() is manager.validate("00100", country) is False
        assert not pc.is_country_supported()
        assert pc.hint() == manager.get_hint(country) == ""
        with pytest.raises(UnknownCountryError) as exc_info:
            manager.format("00100", country)
        assert exc_info.value.country == country

    def test_hint(self, registry: HandlerRegistry) -> None:
        pc = PostalCode("anything", "PL", registry=registry)
        assert pc.is_country_supported()
        assert pc.hint() == "PostalCodes consist of 5 digits in the following format: xy-zzz."

    def test_str_falls_back_to_original(self, registry: HandlerRegistry) -> None:
        assert str(PostalCode("12345", "PL", registry=registry)) == "12-345"
        assert str(PostalCode("12 34", "PL", registry=registry)) == "12 34"
        assert str(PostalCode("12345", "XX", registry=registry)) == "12345"

    def test_outcome_is_memoized(self) -> None:
        CountingHandler.calls = 0
        registry = HandlerRegistry({"ZZ": CountingHandler})
        pc = PostalCode("custom123", "ZZ", registry=registry)
        assert pc.is_valid()
        assert pc.format() == "CUSTOM-123"
        assert str(pc) == "CUSTOM-123"
        assert CountingHandler.calls == 1


class TestPostalCodeIdentity:
    """Tests for equality, hashing and repr."""

    def test_equality_by_country_and_original(self, registry: HandlerRegistry) -> None:
        assert PostalCode("12345", "pl", registry=registry) == PostalCode(
            "12345", "PL", registry=registry
        )
        assert PostalCode("12345", "PL", registry=registry) != PostalCode(
            "12-345", "PL", registry=registry
        )
        assert PostalCode("12345", "PL", registry=registry) != PostalCode(
            "12345", "DE", registry=registry
        )

    def test_hash(self, registry: HandlerRegistry) -> None:
        views = {
            PostalCode("12345", "PL", registry=registry),
            PostalCode("12345", "pl", registry=registry),
        }
        assert len(views) == 1

    def test_not_equal_to_string(self, registry: HandlerRegistry) -> None:
        assert PostalCode("12345", "PL", registry=registry) != "12345"

    def test_repr(self, registry: HandlerRegistry) -> None:
        assert repr(PostalCode("12 345", "pl", registry=registry)) == "PostalCode('12 345', 'PL')"
