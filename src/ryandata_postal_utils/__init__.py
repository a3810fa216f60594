"""ryandata-postal-utils: postal code validation and formatting for ~170 countries.

This package provides:
- A country handler registry with runtime overrides and per-country caching
- Built-in validation and formatting rules for every country with postal codes
- One-shot operations (PostalCodeManager) and a memoizing view (PostalCode)
- Typed outcomes instead of exceptions at the core boundary
- Pandas integration and a small CLI

Quick Start:
    >>> from ryandata_postal_utils import PostalCodeManager
    >>> manager = PostalCodeManager()
    >>> manager.format("wc-2E9RZ", "gb")
    'WC2E 9RZ'
    >>> manager.validate("1234", "PL")
    False

    # Errors carry the country's format hint
    >>> manager.format("1234", "PL")
    Traceback (most recent call last):
    ...
    InvalidPostalCodeError: Invalid postalCode: 1234. PostalCodes consist of 5 digits ...

    # Override a country's rules
    >>> manager.register_handler("DE", MyDEHandler)

    # Memoizing view
    >>> pc = manager.for_postal_code("12345", "PL")
    >>> pc.is_valid(), str(pc)
    (True, '12-345')
"""

from __future__ import annotations  # noqa: I001

from ryandata_postal_utils.core import (
    PACKAGE_NAME,
    CountryUnsupported,
    Invalid,
    InvalidPostalCodeError,
    PostalCodeError,
    RyanDataPostalValidationError,
    UnknownCountryError,
    Valid,
    ValidationOutcome,
    normalize_country,
    normalize_postal_code,
)
from ryandata_postal_utils.countries import (
    COUNTRIES_WITHOUT_POSTAL_CODES,
    FALLBACK_POSTAL_CODE,
    countries_without_postal_codes,
    fallback_postal_code,
    has_postal_code,
)
from ryandata_postal_utils.handlers import (
    DEFAULT_HANDLERS,
    BasePostalCodeHandler,
    PatternHandler,
    PostalCodeHandler,
    SingleCodeHandler,
    ZipCodeHandler,
)
from ryandata_postal_utils.protocols import HandlerFactory, PostalCodeHandlerProtocol
from ryandata_postal_utils.registry import HandlerRegistry
from ryandata_postal_utils.postal_code import PostalCode
from ryandata_postal_utils.manager import PostalCodeManager
from ryandata_postal_utils.config import PostalCodeSettings
from ryandata_postal_utils.validation import PostalCodeRecord, PostalCodeValidator

__version__ = "0.1.0"
__package_name__ = "ryandata-postal-utils"

__all__ = [
    # Version
    "__version__",
    # Primary interface
    "PostalCodeManager",
    "PostalCode",
    "HandlerRegistry",
    "PostalCodeSettings",
    # Normalization
    "normalize_postal_code",
    "normalize_country",
    # Outcomes
    "Valid",
    "Invalid",
    "CountryUnsupported",
    "ValidationOutcome",
    # Errors
    "PACKAGE_NAME",
    "PostalCodeError",
    "UnknownCountryError",
    "InvalidPostalCodeError",
    "RyanDataPostalValidationError",
    # Handlers
    "PostalCodeHandlerProtocol",
    "HandlerFactory",
    "DEFAULT_HANDLERS",
    "BasePostalCodeHandler",
    "PostalCodeHandler",
    "PatternHandler",
    "ZipCodeHandler",
    "SingleCodeHandler",
    # Country catalog
    "COUNTRIES_WITHOUT_POSTAL_CODES",
    "FALLBACK_POSTAL_CODE",
    "has_postal_code",
    "fallback_postal_code",
    "countries_without_postal_codes",
    # Record validation
    "PostalCodeRecord",
    "PostalCodeValidator",
]
