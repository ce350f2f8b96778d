"""Console output commands."""

from __future__ import annotations

from beartype import beartype
from loguru import logger as loguru_logger

from purecmd.types import Cmd

loguru_logger = loguru_logger.bind(component="purecmd")


@beartype
def prints(message: str) -> Cmd[str]:
    """Build a command that prints ``message`` and returns it.

    The line goes to whatever ``sys.stdout`` is at invocation time. Every
    invocation prints again.
    """

    def print_thunk() -> str:
        loguru_logger.debug("prints: {!r}", message)
        print(message)
        return message

    return print_thunk


print_ = prints


__all__ = ["print_", "prints"]
