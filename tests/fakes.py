"""Hand-written handlers used as overrides in tests."""

from __future__ import annotations


class ZZHandler:
    """Handler for a made-up country that only knows CUSTOM123."""

    def validate(self, postal_code: str) -> bool:
        return postal_code == "CUSTOM123"

    def format(self, postal_code: str) -> str:
        return f"CUSTOM-{postal_code[6:]}"

    def hint(self) -> str:
        return "The only valid postal code is CUSTOM123."


class AcceptAllHandler:
    """Handler that accepts anything and returns it unchanged."""

    def validate(self, postal_code: str) -> bool:
        return True

    def format(self, postal_code: str) -> str:
        return postal_code

    def hint(self) -> str:
        return "Anything goes."


class NotAHandler:
    """Lacks hint(), so it does not satisfy the handler protocol."""

    def validate(self, postal_code: str) -> bool:
        return True

    def format(self, postal_code: str) -> str:
        return postal_code
