"""
purecmd - deferred effects and the standard library runtime for Pure programs.

A ``Cmd[T]`` is a zero-argument callable that performs an effect and returns
a ``T``. The combinators build new commands without running anything; effects
happen only when a command is invoked.

Example:
    >>> from purecmd import prints, run, sequence
    >>>
    >>> greet = sequence(prints("hello"), prints("world"))
    >>> run(greet)
    hello
    world
    'world'
"""

from purecmd.arith import add, div, floor_div, identity, iff, mul, sub
from purecmd.combinators import (
    chain,
    chain_cmd,
    cmd,
    flat_map,
    lift,
    map_cmd,
    map_effect,
    pure,
    replace_with,
    run,
    sequence,
    swap_cmd,
    then_cmd,
)
from purecmd.config import debug_enabled
from purecmd.curry import Curried, curried
from purecmd.errors import NotACmdError, PurecmdError, UnknownStdlibNameError
from purecmd.io import print_, prints
from purecmd.stdlib import REGISTRY, Function, StdLib, resolve
from purecmd.trace import traced
from purecmd.types import Cmd

__version__ = "0.1.0"

__all__ = [
    # Types
    "Cmd",
    "Curried",
    # Combinators
    "lift",
    "map_effect",
    "replace_with",
    "sequence",
    "chain",
    "run",
    "pure",
    "flat_map",
    # Standard library runtime names
    "cmd",
    "map_cmd",
    "swap_cmd",
    "then_cmd",
    "chain_cmd",
    # Values
    "identity",
    "iff",
    "add",
    "sub",
    "mul",
    "div",
    "floor_div",
    # IO
    "prints",
    "print_",
    # Registry
    "REGISTRY",
    "Function",
    "StdLib",
    "resolve",
    # Diagnostics
    "traced",
    "debug_enabled",
    "curried",
    # Errors
    "PurecmdError",
    "NotACmdError",
    "UnknownStdlibNameError",
]
