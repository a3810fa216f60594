"""Built-in country handlers.

Each country is implemented as a small handler class named after its ISO 3166-1
alpha-2 code (``GBHandler``, ``PLHandler``, ...), grouped by region. The
``DEFAULT_HANDLERS`` table maps every country code to its class and forms the
default tier of :class:`~ryandata_postal_utils.registry.HandlerRegistry`.

Example:
    >>> from ryandata_postal_utils.handlers import DEFAULT_HANDLERS
    >>> handler = DEFAULT_HANDLERS["PL"]()
    >>> handler.format("12345")
    '12-345'
"""

from __future__ import annotations

import re
from types import ModuleType

from ryandata_postal_utils.handlers import (
    africa_middle_east,
    americas,
    asia_pacific,
    europe,
    territories,
)
from ryandata_postal_utils.handlers.base import (
    BasePostalCodeHandler,
    PatternHandler,
    PostalCodeHandler,
    SingleCodeHandler,
    ZipCodeHandler,
    in_ranges,
    strip_prefix,
)

_HANDLER_NAME = re.compile(r"([A-Z]{2})Handler")


def _collect(*modules: ModuleType) -> dict[str, type[BasePostalCodeHandler]]:
    """Map country codes to the ``<CC>Handler`` classes defined in ``modules``."""
    handlers: dict[str, type[BasePostalCodeHandler]] = {}
    for module in modules:
        for name, obj in vars(module).items():
            match = _HANDLER_NAME.fullmatch(name)
            if match is None or not isinstance(obj, type):
                continue
            if obj.__module__ != module.__name__:
                continue
            country = match.group(1)
            if country in handlers:
                raise RuntimeError(f"Duplicate default handler for {country}")
            handlers[country] = obj
    return dict(sorted(handlers.items()))


DEFAULT_HANDLERS: dict[str, type[BasePostalCodeHandler]] = _collect(
    europe,
    americas,
    asia_pacific,
    africa_middle_east,
    territories,
)

__all__ = [
    "DEFAULT_HANDLERS",
    "BasePostalCodeHandler",
    "PostalCodeHandler",
    "PatternHandler",
    "ZipCodeHandler",
    "SingleCodeHandler",
    "in_ranges",
    "strip_prefix",
]
