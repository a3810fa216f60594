"""Shared Hypothesis strategies for postal code testing.

This module provides reusable Hypothesis strategies for generating
country codes, raw postal codes with arbitrary separators and casing, and
valid postal codes for countries with a known display format.
"""

from __future__ import annotations

import hypothesis.strategies as st

from ryandata_postal_utils.countries import COUNTRIES_WITHOUT_POSTAL_CODES
from ryandata_postal_utils.handlers import DEFAULT_HANDLERS

# =============================================================================
# Country Constants
# =============================================================================

SUPPORTED_COUNTRIES = sorted(DEFAULT_HANDLERS)

# Two-letter codes with no built-in handler
UNSUPPORTED_COUNTRIES = sorted(
    f"{a}{b}"
    for a in "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    for b in "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    if f"{a}{b}" not in DEFAULT_HANDLERS
)

NO_POSTAL_CODE_COUNTRIES = sorted(COUNTRIES_WITHOUT_POSTAL_CODES)

DIGITS = "0123456789"
SEPARATORS = " -"

# =============================================================================
# Basic Strategies
# =============================================================================

supported_country = st.sampled_from(SUPPORTED_COUNTRIES)
unsupported_country = st.sampled_from(UNSUPPORTED_COUNTRIES)


@st.composite
def mixed_case(draw: st.DrawFn, value: str) -> str:
    """Randomly change the case of each letter in ``value``."""
    flags = draw(st.lists(st.booleans(), min_size=len(value), max_size=len(value)))
    return "".join(c.lower() if flag else c for c, flag in zip(value, flags))


@st.composite
def with_separators(draw: st.DrawFn, value: str) -> str:
    """Insert random spaces and hyphens around the characters of ``value``."""
    parts: list[str] = []
    for char in value:
        parts.append(draw(st.text(alphabet=SEPARATORS, max_size=2)))
        parts.append(char)
    parts.append(draw(st.text(alphabet=SEPARATORS, max_size=2)))
    return "".join(parts)


@st.composite
def scrambled(draw: st.DrawFn, value: str) -> str:
    """Apply random casing and separators to a normalized postal code."""
    return draw(with_separators(draw(mixed_case(value))))


def digits(n: int) -> st.SearchStrategy[str]:
    return st.text(alphabet=DIGITS, min_size=n, max_size=n)


# =============================================================================
# Valid Postal Codes
# =============================================================================


@st.composite
def gb_postcode(draw: st.DrawFn) -> tuple[str, str]:
    """Generate a (normalized, formatted) valid UK postcode of shape AA9 9AA."""
    area = draw(st.sampled_from(["SW", "EC", "WC", "NW", "SE", "CB", "OX", "LS", "BT", "AB"]))
    district = draw(st.integers(min_value=1, max_value=9))
    sector = draw(st.integers(min_value=0, max_value=9))
    unit = draw(st.text(alphabet="ABDEFGHJLNPQRSTUWXYZ", min_size=2, max_size=2))
    outward = f"{area}{district}"
    inward = f"{sector}{unit}"
    return f"{outward}{inward}", f"{outward} {inward}"


@st.composite
def separator_country_code(draw: st.DrawFn) -> tuple[str, str, str]:
    """Generate (country, normalized, formatted) for countries that insert a separator."""
    country = draw(st.sampled_from(["PL", "JP", "BR", "PT", "CZ", "GR", "US"]))
    if country == "PL":
        a, b = draw(digits(2)), draw(digits(3))
        return country, a + b, f"{a}-{b}"
    if country == "JP":
        a, b = draw(digits(3)), draw(digits(4))
        return country, a + b, f"{a}-{b}"
    if country == "BR":
        a, b = draw(digits(5)), draw(digits(3))
        return country, a + b, f"{a}-{b}"
    if country == "PT":
        a, b = draw(digits(4)), draw(digits(3))
        return country, a + b, f"{a}-{b}"
    if country == "CZ":
        a = draw(st.sampled_from("1234567")) + draw(digits(2))
        b = draw(digits(2))
        return country, a + b, f"{a} {b}"
    if country == "GR":
        a, b = draw(digits(3)), draw(digits(2))
        return country, a + b, f"{a} {b}"
    a, b = draw(digits(5)), draw(digits(4))
    return country, a + b, f"{a}-{b}"


@st.composite
def raw_postal_code(draw: st.DrawFn) -> str:
    """Generate arbitrary raw input, including separators and non-ASCII characters."""
    return draw(
        st.one_of(
            st.text(alphabet=DIGITS + "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ -"),
            st.text(),
        )
    )
