"""Postal code and country identifier normalization.

Consolidates the canonicalization applied to every input before any
country rule sees it, so handlers never have to strip or uppercase.
"""

from __future__ import annotations

import re

_SEPARATORS = str.maketrans("", "", " -")
_COUNTRY_CODE = re.compile(r"[A-Z]{2}", re.ASCII)
_CANONICAL_POSTAL_CODE = re.compile(r"[A-Z0-9]+")


def normalize_postal_code(postal_code: str) -> str:
    """Canonicalize a raw postal code.

    Removes ASCII spaces and hyphens and uppercases every letter. All other
    characters pass through unchanged; deciding whether they are acceptable
    is the handler's job.

    Args:
        postal_code: Raw postal code as supplied by the caller.

    Returns:
        Normalized postal code. Normalizing it again returns the same string.

    Example:
        >>> normalize_postal_code("wc-2e 9rz")
        'WC2E9RZ'
    """
    return postal_code.translate(_SEPARATORS).upper()


def normalize_country(country: str) -> str:
    """Uppercase an ASCII country identifier (``"gb"`` -> ``"GB"``).

    Non-ASCII identifiers are returned unchanged, since ``str.upper`` can turn
    them into valid-looking codes (``"ﬁ"`` -> ``"FI"``, ``"ß"`` -> ``"SS"``).
    """
    return country.upper() if country.isascii() else country


def is_country_code(country: str) -> bool:
    """Check whether ``country`` is a well-formed ISO 3166-1 alpha-2 code.

    Args:
        country: Country identifier in any case.

    Returns:
        True if the identifier is exactly two ASCII letters.
    """
    return _COUNTRY_CODE.fullmatch(normalize_country(country)) is not None


def is_canonical_postal_code(postal_code: str) -> bool:
    """Check that a normalized postal code is non-empty uppercase ASCII alphanumerics."""
    return _CANONICAL_POSTAL_CODE.fullmatch(postal_code) is not None
