"""
Pytest configuration for purecmd tests.

Provides an effect trace that commands append to, a factory for recording
commands, and a loguru sink that captures trace records.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from loguru import logger


@pytest.fixture
def effects() -> list[str]:
    """Ordered list of effect labels written by recording commands."""
    return []


@pytest.fixture
def recording(effects: list[str]) -> Callable[..., Callable[[], Any]]:
    """
    Factory for commands that append ``label`` to ``effects`` when invoked.

    The command returns ``value`` if given, otherwise the label itself.
    """

    def make(label: str, value: Any = None) -> Callable[[], Any]:
        def thunk() -> Any:
            effects.append(label)
            return label if value is None else value

        return thunk

    return make


@pytest.fixture
def loguru_records() -> list[dict[str, Any]]:
    """Capture every loguru record emitted while the test runs."""
    records: list[dict[str, Any]] = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)
