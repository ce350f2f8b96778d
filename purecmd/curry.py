"""
Curried calling convention for the standard library.

Every multi-argument operation can be called in full (``add(1, 2)``) or one
argument group at a time (``add(1)(2)``). Partial application never mutates
the original callable; each step returns a fresh :class:`Curried`.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


@dataclass(eq=False)
class Curried(Generic[T]):
    """
    A fixed-arity function that collects positional arguments until full.

    ``bound`` holds the arguments collected so far. Once ``arity`` arguments
    are available the wrapped function is called with all of them.
    """

    func: Callable[..., T]
    arity: int
    bound: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        for attr in ("__name__", "__qualname__", "__doc__", "__module__"):
            value = getattr(self.func, attr, None)
            if value is not None:
                setattr(self, attr, value)

    @property
    def remaining(self) -> int:
        return self.arity - len(self.bound)

    def __call__(self, *args: Any) -> Curried[T] | T:
        name = getattr(self, "__name__", "<curried>")
        if not args:
            raise TypeError(
                f"{name}() needs at least one argument; {self.remaining} remaining"
            )
        collected = self.bound + args
        if len(collected) > self.arity:
            raise TypeError(
                f"{name}() takes {self.arity} arguments but {len(collected)} were given"
            )
        if len(collected) < self.arity:
            return Curried(self.func, self.arity, collected)
        return self.func(*collected)

    def __repr__(self) -> str:
        name = getattr(self, "__name__", "<curried>")
        shown = [repr(arg) for arg in self.bound] + ["..."] * self.remaining
        return f"<curried {name}({', '.join(shown)})>"


def positional_arity(func: Callable[..., Any]) -> int:
    """Count the required positional parameters of ``func``."""

    signature = inspect.signature(func)
    return sum(
        1
        for param in signature.parameters.values()
        if param.kind in _POSITIONAL and param.default is inspect.Parameter.empty
    )


def curried(func: Callable[..., T]) -> Curried[T]:
    """Decorate ``func`` so it accepts its positional arguments in any grouping."""

    arity = positional_arity(func)
    if arity < 2:
        raise ValueError(
            f"curried() needs a function of two or more arguments; "
            f"{getattr(func, '__name__', func)!r} takes {arity}"
        )
    return Curried(func, arity)


__all__ = ["Curried", "curried", "positional_arity"]
