from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import ClassVar

Ranges = tuple[tuple[str, str], ...]


def strip_prefix(postal_code: str, prefix: str) -> str:
    """Remove ``prefix`` from the start of ``postal_code`` if present.

    Args:
        postal_code: Normalized postal code.
        prefix: Prefix to remove (e.g. a country letter code).

    Returns:
        The postal code without the prefix, or unchanged if it did not start with it.
    """
    if prefix and postal_code.startswith(prefix):
        return postal_code[len(prefix) :]
    return postal_code


def in_ranges(value: str, ranges: Ranges) -> bool:
    """Check ``value`` against inclusive ``(low, high)`` string ranges of equal width."""
    return any(low <= value <= high for low, high in ranges)


class BasePostalCodeHandler(ABC):
    """Abstract base class for postal code handlers.

    Subclasses must implement ``validate`` and ``hint``. ``format`` defaults to
    returning the normalized input unchanged, which is correct for every
    country that displays its codes without separators.
    """

    @abstractmethod
    def validate(self, postal_code: str) -> bool:
        """Check a normalized postal code against the country's rules."""
        ...

    def format(self, postal_code: str) -> str:
        """Format a validated postal code. Identity by default."""
        return postal_code

    @abstractmethod
    def hint(self) -> str:
        """Human-readable description of the expected format."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class PostalCodeHandler(BasePostalCodeHandler):
    """Handler whose validation and formatting share one implementation.

    Subclasses implement ``_format_impl``, returning the formatted code or None
    when the input is invalid. ``validate`` is derived from it, so the set of
    inputs ``validate`` accepts is exactly the set ``format`` can transform.
    Invalid input passed to ``format`` is returned unchanged.
    """

    hint_text: ClassVar[str] = ""

    @abstractmethod
    def _format_impl(self, postal_code: str) -> str | None:
        """Format ``postal_code`` or return None if it is invalid."""
        ...

    def validate(self, postal_code: str) -> bool:
        return self._format_impl(postal_code) is not None

    def format(self, postal_code: str) -> str:
        formatted = self._format_impl(postal_code)
        return postal_code if formatted is None else formatted

    def hint(self) -> str:
        return self.hint_text


class PatternHandler(PostalCodeHandler):
    """Declarative handler driven by a regular expression.

    Class attributes:
        pattern: Regex the (prefix-stripped) code must match in full. Compiled
            once per subclass with ``re.ASCII`` so ``\\d`` means 0-9 only.
        template: Optional ``re.Match.expand`` template producing the display
            form (e.g. ``r"\\1 \\2"``). Without it the matched code is kept.
        input_prefix: Prefix removed from the input before matching, if present.
        output_prefix: Prefix prepended to the formatted result.
        ranges: Inclusive ``(low, high)`` string ranges the matched code must
            fall into. Empty means no range restriction.

    Example:
        class PLHandler(PatternHandler):
            hint_text = "PostalCodes consist of 5 digits in the following format: xy-zzz."
            pattern = r"(\\d{2})(\\d{3})"
            template = r"\\1-\\2"
    """

    pattern: ClassVar[str]
    template: ClassVar[str | None] = None
    input_prefix: ClassVar[str] = ""
    output_prefix: ClassVar[str] = ""
    ranges: ClassVar[Ranges] = ()

    _regex: ClassVar[re.Pattern[str]]

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        if "pattern" in cls.__dict__:
            cls._regex = re.compile(cls.pattern, re.ASCII)

    def _accepts(self, match: re.Match[str]) -> bool:
        """Extra checks beyond the pattern. Override for country-specific rules."""
        return True

    def _format_impl(self, postal_code: str) -> str | None:
        body = strip_prefix(postal_code, self.input_prefix)
        match = self._regex.fullmatch(body)
        if match is None:
            return None
        if self.ranges and not in_ranges(body, self.ranges):
            return None
        if not self._accepts(match):
            return None

        formatted = match.expand(self.template) if self.template else body
        return f"{self.output_prefix}{formatted}"


class ZipCodeHandler(PostalCodeHandler):
    """U.S.-style ZIP codes: ``NNNNN`` or ZIP+4 ``NNNNN-NNNN``.

    Used by the United States, its territories and freely associated states,
    and countries that adopted the same scheme. ``ranges`` restricts the
    5-digit part; an empty tuple accepts any 5 digits.
    """

    ranges: ClassVar[Ranges] = ()

    _ZIP: ClassVar[re.Pattern[str]] = re.compile(r"(\d{5})(\d{4})?", re.ASCII)

    def _format_impl(self, postal_code: str) -> str | None:
        match = self._ZIP.fullmatch(postal_code)
        if match is None:
            return None

        zip5, zip4 = match.groups()
        if self.ranges and not in_ranges(zip5, self.ranges):
            return None

        if zip4:
            return f"{zip5}-{zip4}"
        return zip5


class SingleCodeHandler(PostalCodeHandler):
    """Handler for places using one (or a few) fixed postal codes.

    ``codes`` maps every accepted normalized form to its display form.
    """

    codes: ClassVar[Mapping[str, str]]

    def _format_impl(self, postal_code: str) -> str | None:
        return self.codes.get(postal_code)
