"""
Pure value operations of the standard library.

Integer operators accept ``int`` operands only, ``bool`` excluded, and are
checked at call time by beartype. ``div`` floors toward negative infinity like ``//``.
"""

from __future__ import annotations

from typing import Annotated

from beartype import beartype
from beartype.vale import IsInstance

from purecmd.curry import curried
from purecmd.types import T

WholeNumber = Annotated[int, ~IsInstance[bool]]


def identity(value: T) -> T:
    return value


@curried
@beartype
def iff(cond: bool, then: T, otherwise: T) -> T:
    """Select ``then`` when ``cond`` holds, otherwise ``otherwise``."""

    return then if cond else otherwise


@curried
@beartype
def add(x: WholeNumber, y: WholeNumber) -> int:
    return x + y


@curried
@beartype
def sub(x: WholeNumber, y: WholeNumber) -> int:
    return x - y


@curried
@beartype
def mul(x: WholeNumber, y: WholeNumber) -> int:
    return x * y


@curried
@beartype
def div(x: WholeNumber, y: WholeNumber) -> int:
    """Floor division; ``div(-7, 2) == -4``. Raises ``ZeroDivisionError`` on zero."""

    return x // y


floor_div = div


__all__ = ["add", "div", "floor_div", "identity", "iff", "mul", "sub"]
