"""
Combinators for deferred effects.

Every function here builds a new ``Cmd`` without invoking anything. Effects
happen only when the returned command is called, in the order documented on
each combinator. Exceptions raised by a wrapped command or by a user function
are never caught here; they reach whoever invoked the outermost command.
"""

from __future__ import annotations

from collections.abc import Callable

from purecmd._validators import ensure_callable, ensure_cmd
from purecmd.curry import curried
from purecmd.types import Cmd, T, U


def lift(value: T) -> Cmd[T]:
    """Wrap ``value`` in a command that performs no effect."""

    def pure_thunk() -> T:
        return value

    return pure_thunk


@curried
def map_effect(f: Callable[[T], U], c: Cmd[T]) -> Cmd[U]:
    """Run ``c`` once, then return ``f`` applied to its value.

    ``f`` is never called if ``c`` raises.
    """

    ensure_callable(f, name="mapper")
    ensure_cmd(c, name="command")

    def mapped_thunk() -> U:
        return f(c())

    return mapped_thunk


@curried
def replace_with(default: U, c: Cmd[T]) -> Cmd[U]:
    """Run ``c`` for its effect only and return ``default``."""

    ensure_cmd(c, name="command")

    def replaced_thunk() -> U:
        c()
        return default

    return replaced_thunk


@curried
def sequence(first: Cmd[T], second: Cmd[U]) -> Cmd[U]:
    """Run ``first`` to completion, then ``second``; return ``second``'s value."""

    ensure_cmd(first, name="first")
    ensure_cmd(second, name="second")

    def sequenced_thunk() -> U:
        first()
        return second()

    return sequenced_thunk


@curried
def chain(c: Cmd[T], f: Callable[[T], Cmd[U]]) -> Cmd[U]:
    """Monadic bind for commands.

    Both effects are deferred: nothing runs until the returned command is
    invoked. On invocation ``c`` runs once, ``f`` receives its value and the
    command ``f`` returns is invoked for the final value.
    """

    ensure_cmd(c, name="command")
    ensure_callable(f, name="binder")

    def chained_thunk() -> U:
        next_cmd = f(c())
        ensure_cmd(next_cmd, name="binder result")
        return next_cmd()

    return chained_thunk


def run(c: Cmd[T]) -> T:
    """Invoke ``c`` and return its value."""

    ensure_cmd(c, name="command")
    return c()


# Aliases matching the standard library runtime names
cmd = lift
map_cmd = map_effect
swap_cmd = replace_with
then_cmd = sequence
chain_cmd = chain

# Monadic vocabulary
pure = lift
flat_map = chain


__all__ = [
    "chain",
    "chain_cmd",
    "cmd",
    "flat_map",
    "lift",
    "map_cmd",
    "map_effect",
    "pure",
    "replace_with",
    "run",
    "sequence",
    "swap_cmd",
    "then_cmd",
]
