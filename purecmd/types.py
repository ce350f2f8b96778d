"""
Core types for purecmd.

A ``Cmd[T]`` is any zero-argument callable that performs its effect and
returns a ``T`` when invoked. There is no wrapper class: plain functions,
lambdas and closures are all commands.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

T = TypeVar("T")
U = TypeVar("U")

Cmd = Callable[[], T]


__all__ = ["Cmd", "T", "U"]
