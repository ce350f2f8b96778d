"""Construction-time argument checks shared by the combinators."""

from __future__ import annotations

from purecmd.curry import Curried
from purecmd.errors import NotACmdError


def ensure_callable(value: object, *, name: str) -> None:
    if not callable(value):
        raise NotACmdError(name, value)


def ensure_cmd(value: object, *, name: str) -> None:
    """A command must be invocable with no arguments; partial applications are not."""
    ensure_callable(value, name=name)
    if isinstance(value, Curried) and value.remaining > 0:
        raise NotACmdError(name, value, expected="fully applied")
