"""RyanData Postal Utils Core - normalization, outcomes and errors.

These pieces have no knowledge of individual countries and are shared by the
registry, the manager and the fluent view.

Usage:
    from ryandata_postal_utils.core import (
        # Normalization
        normalize_postal_code,
        normalize_country,
        # Outcomes
        Valid,
        Invalid,
        CountryUnsupported,
        ValidationOutcome,
        # Errors
        PostalCodeError,
        UnknownCountryError,
        InvalidPostalCodeError,
    )
"""

from __future__ import annotations

from ryandata_postal_utils.core.errors import (
    PACKAGE_NAME,
    InvalidPostalCodeError,
    PostalCodeError,
    RyanDataPostalValidationError,
    UnknownCountryError,
)
from ryandata_postal_utils.core.normalizer import (
    is_canonical_postal_code,
    is_country_code,
    normalize_country,
    normalize_postal_code,
)
from ryandata_postal_utils.core.results import (
    CountryUnsupported,
    Invalid,
    Valid,
    ValidationOutcome,
)

__all__ = [
    # Errors
    "PACKAGE_NAME",
    "PostalCodeError",
    "UnknownCountryError",
    "InvalidPostalCodeError",
    "RyanDataPostalValidationError",
    # Normalization
    "normalize_postal_code",
    "normalize_country",
    "is_country_code",
    "is_canonical_postal_code",
    # Outcomes
    "Valid",
    "Invalid",
    "CountryUnsupported",
    "ValidationOutcome",
]
