"""Handler override configuration.

Overrides are declared as ``country -> factory`` pairs, where a factory is a
handler class (or any zero-argument callable) given either directly or as an
import path such as ``"my_pkg.handlers:CustomDEHandler"``. Import paths are
resolved once, when the settings are validated, never during handler lookup.

Environment:
    RYANDATA_POSTAL_HANDLERS: Comma-separated ``CC=module:attr`` entries,
        e.g. ``"DE=my_pkg.handlers:CustomDEHandler,ZZ=my_pkg.handlers:ZZHandler"``.
"""

from __future__ import annotations

import logging
import os
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ImportString, ValidationError, field_validator

from ryandata_postal_utils.core.errors import RyanDataPostalValidationError
from ryandata_postal_utils.core.normalizer import is_country_code, normalize_country
from ryandata_postal_utils.manager import PostalCodeManager
from ryandata_postal_utils.registry import HandlerRegistry

logger = logging.getLogger(__name__)

HANDLERS_ENV_VAR = "RYANDATA_POSTAL_HANDLERS"


def parse_handler_overrides(value: str) -> dict[str, str]:
    """Parse ``"CC=module:attr,CC=module:attr"`` into a mapping.

    Blank entries are skipped; a country listed twice keeps its last entry.

    Raises:
        ValueError: If an entry has no ``=`` or an empty side.
    """
    handlers: dict[str, str] = {}
    for entry in value.split(","):
        entry = entry.strip()
        if not entry:
            continue
        country, sep, target = entry.partition("=")
        country, target = country.strip(), target.strip()
        if not sep or not country or not target:
            raise ValueError(f"Handler override must look like CC=module:attr, got {entry!r}")
        handlers[country] = target
    return handlers


class PostalCodeSettings(BaseModel):
    """Validated handler overrides.

    Attributes:
        handlers: Country code to handler factory. Keys are uppercased and must
            be two letters; values must be callable once imported.

    Example:
        >>> settings = PostalCodeSettings(handlers={"de": "my_pkg.handlers:CustomDEHandler"})
        >>> manager = settings.build_manager()
    """

    model_config = ConfigDict(frozen=True)

    handlers: dict[str, ImportString] = Field(
        default_factory=dict,
        description="Country code to handler factory (class or import path)",
    )

    @field_validator("handlers", mode="before")
    @classmethod
    def _parse_handlers(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = parse_handler_overrides(value)
        if not isinstance(value, dict):
            return value

        handlers: dict[str, Any] = {}
        for country, target in value.items():
            if not isinstance(country, str) or not is_country_code(country.strip()):
                raise ValueError(f"Country must be a 2-letter code, got {country!r}")
            handlers[normalize_country(country.strip())] = target
        return handlers

    @field_validator("handlers", mode="after")
    @classmethod
    def _check_callable(cls, value: dict[str, Any]) -> dict[str, Any]:
        for country, factory in value.items():
            if not callable(factory):
                raise ValueError(f"Handler for {country} is not callable: {factory!r}")
        return value

    @classmethod
    def from_env(cls, env_var: str = HANDLERS_ENV_VAR) -> PostalCodeSettings:
        """Load overrides from an environment variable.

        Args:
            env_var: Variable holding ``CC=module:attr`` entries. Missing or
                empty means no overrides.

        Raises:
            RyanDataPostalValidationError: If the variable is malformed or an
                import path cannot be resolved.
        """
        raw = os.getenv(env_var, "")
        try:
            return cls(handlers=raw)
        except ValidationError as exc:
            logger.warning("Invalid handler overrides in %s: %s", env_var, exc)
            raise RyanDataPostalValidationError.from_validation_error(
                exc, {"env_var": env_var}
            ) from exc

    def build_registry(self) -> HandlerRegistry:
        """Create a registry seeded with these overrides."""
        return HandlerRegistry(self.handlers)

    def build_manager(self) -> PostalCodeManager:
        """Create a manager over a registry seeded with these overrides."""
        return PostalCodeManager(self.build_registry())
