"""
Standard library registry.

Maps qualified names such as ``"std.add"`` to their implementation, a stable
index and a type scheme written in the source language's notation. The
registry is immutable; programs resolve names against it and call the
implementation with the curried convention from :mod:`purecmd.curry`.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from frozendict import frozendict
from loguru import logger as loguru_logger

from purecmd import arith, combinators, io
from purecmd.errors import UnknownStdlibNameError

loguru_logger = loguru_logger.bind(component="purecmd")


class StdLib(IntEnum):
    ID = 0
    IFF = 1

    ADD = 2
    SUB = 3
    MUL = 4
    DIV = 5

    PRINTS = 6

    CMD = 7
    MAP_CMD = 8
    SWAP_CMD = 9
    THEN_CMD = 10
    CHAIN_CMD = 11


@dataclass(frozen=True)
class Function:
    """A resolved standard library entry."""

    name: str
    index: StdLib
    scheme: str
    impl: Callable[..., Any]

    def __call__(self, *args: Any) -> Any:
        return self.impl(*args)


_INT_BINOP = "Int -> Int -> Int"

REGISTRY: frozendict[str, Function] = frozendict(
    {
        entry.name: entry
        for entry in (
            Function("std.id", StdLib.ID, "forall a. a -> a", arith.identity),
            Function("std.iff", StdLib.IFF, "forall a. Bool -> a -> a -> a", arith.iff),
            Function("std.add", StdLib.ADD, _INT_BINOP, arith.add),
            Function("std.sub", StdLib.SUB, _INT_BINOP, arith.sub),
            Function("std.mul", StdLib.MUL, _INT_BINOP, arith.mul),
            Function("std.div", StdLib.DIV, _INT_BINOP, arith.div),
            Function("std.prints", StdLib.PRINTS, "Str -> Cmd Str", io.prints),
            Function("std.cmd", StdLib.CMD, "forall a. a -> Cmd a", combinators.lift),
            Function(
                "std.mapCmd",
                StdLib.MAP_CMD,
                "forall a b. (a -> b) -> Cmd a -> Cmd b",
                combinators.map_effect,
            ),
            Function(
                "std.swapCmd",
                StdLib.SWAP_CMD,
                "forall a b. a -> Cmd b -> Cmd a",
                combinators.replace_with,
            ),
            Function(
                "std.thenCmd",
                StdLib.THEN_CMD,
                "forall a b. Cmd a -> Cmd b -> Cmd b",
                combinators.sequence,
            ),
            Function(
                "std.chainCmd",
                StdLib.CHAIN_CMD,
                "forall a b. Cmd a -> (a -> Cmd b) -> Cmd b",
                combinators.chain,
            ),
        )
    }
)


def index() -> frozendict[str, int]:
    """Qualified name to stable index."""

    return frozendict({name: int(entry.index) for name, entry in REGISTRY.items()})


def function(name: str) -> Function | None:
    return REGISTRY.get(name)


def resolve(name: str) -> Function:
    """Look up ``name`` or raise :class:`UnknownStdlibNameError`."""

    entry = REGISTRY.get(name)
    if entry is None:
        raise UnknownStdlibNameError(name, REGISTRY.keys())
    loguru_logger.debug("resolved {} -> {}", name, entry.index.name)
    return entry


def call(name: str, *args: Any) -> Any:
    """Resolve ``name`` and apply its implementation to ``args``."""

    return resolve(name)(*args)


__all__ = ["REGISTRY", "Function", "StdLib", "call", "function", "index", "resolve"]
