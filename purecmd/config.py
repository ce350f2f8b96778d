"""
Environment-driven switches.

Values are read on every call so tests and callers can change the
environment without reloading the module.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

DEBUG_ENV_KEY = "PURECMD_DEBUG"

_TRUTHY = ("1", "true", "yes")


def debug_enabled(environ: Mapping[str, str] | None = None) -> bool:
    """Return ``True`` when ``PURECMD_DEBUG`` asks for traced commands."""

    source = os.environ if environ is None else environ
    return source.get(DEBUG_ENV_KEY, "").lower() in _TRUTHY


__all__ = ["DEBUG_ENV_KEY", "debug_enabled"]
