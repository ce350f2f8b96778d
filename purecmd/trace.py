"""
Invocation tracing for commands.

``traced`` wraps a command so each invocation emits loguru DEBUG records
bound with ``component="purecmd"``. The wrapped command's value, ordering and
exceptions pass through untouched. Add a loguru sink to see the records.
"""

from __future__ import annotations

from loguru import logger as loguru_logger

from purecmd._validators import ensure_cmd
from purecmd.config import debug_enabled
from purecmd.types import Cmd, T

loguru_logger = loguru_logger.bind(component="purecmd")


def describe(c: Cmd[T]) -> str:
    return getattr(c, "__qualname__", None) or repr(c)


def traced(c: Cmd[T], label: str | None = None, *, enabled: bool | None = None) -> Cmd[T]:
    """Return ``c`` wrapped with invocation logging.

    When ``enabled`` is ``None`` the ``PURECMD_DEBUG`` environment switch
    decides. A disabled trace returns ``c`` itself.
    """

    ensure_cmd(c, name="command")
    if enabled is None:
        enabled = debug_enabled()
    if not enabled:
        return c

    name = label if label is not None else describe(c)

    def traced_thunk() -> T:
        loguru_logger.debug("invoking {}", name)
        try:
            value = c()
        except Exception as exc:
            loguru_logger.opt(exception=exc).debug("{} raised {!r}", name, exc)
            raise
        loguru_logger.debug("{} returned {!r}", name, value)
        return value

    traced_thunk.__qualname__ = f"traced({name})"
    return traced_thunk


__all__ = ["describe", "traced"]
