from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class PostalCodeHandlerProtocol(Protocol):
    """Protocol for country-specific postal code rules.

    Implementations receive input that has already been normalized
    (uppercase, no spaces or hyphens) and must not normalize it again.
    Handlers are stateless and are constructed without arguments, so one
    instance can be shared by every caller.
    """

    def validate(self, postal_code: str) -> bool:
        """Check a normalized postal code against the country's rules.

        Args:
            postal_code: Normalized postal code.

        Returns:
            True if the code is valid. Must accept exactly the inputs that
            ``format`` can transform.
        """
        ...

    def format(self, postal_code: str) -> str:
        """Format a normalized, already validated postal code for display.

        Args:
            postal_code: Normalized postal code that passed ``validate``.

        Returns:
            The postal code in the country's display convention.
        """
        ...

    def hint(self) -> str:
        """Describe the expected format; never depends on the input."""
        ...


# Anything that builds a handler without arguments, a handler class included
HandlerFactory = Callable[[], PostalCodeHandlerProtocol]
