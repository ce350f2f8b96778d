from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class PurecmdError(Exception):
    """Base class for errors raised by purecmd itself."""


class NotACmdError(PurecmdError, TypeError):
    """Raised when a combinator receives something it cannot invoke."""

    def __init__(self, argument: str, value: Any, expected: str = "callable") -> None:
        self.argument = argument
        self.value = value
        super().__init__(
            f"{argument} must be {expected}, got {type(value).__name__}"
        )


class UnknownStdlibNameError(PurecmdError, KeyError):
    """Raised when a qualified name is not part of the standard library."""

    def __init__(self, name: str, known: Iterable[str]) -> None:
        self.name = name
        self.known = tuple(sorted(known))
        super().__init__(
            f"Unknown standard library function: {name!r}\n"
            f"Hint: known names are {', '.join(self.known)}"
        )

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the whole message
        return str(self.args[0])


__all__ = ["NotACmdError", "PurecmdError", "UnknownStdlibNameError"]
