"""Pytest configuration for the providers test suite.

Fixtures:
- ``log_events``: captures every JSON event emitted under the shared
  ``providers`` logger. That logger does not propagate to root, so ``caplog``
  cannot see these records.
- ``no_provider_env``: removes provider credentials from the environment.
- an autouse guard that drops the process-wide router between tests.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Iterator, List

import pytest

from gateway_providers.base.logging import BASE_LOGGER_NAME, get_logger
from gateway_providers.base.routing import reset_router
from gateway_providers.config.env import ENV_MAP


class _ListHandler(logging.Handler):
    """Capture log records into a list for assertions."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.events: List[Dict[str, Any]] = []

    def emit(self, record: logging.LogRecord) -> None:  # pragma: no cover - exercised via tests
        try:
            payload = json.loads(record.getMessage())
        except ValueError:
            payload = {"msg": record.getMessage()}
        payload["_level"] = record.levelno
        self.events.append(payload)


class LogEvents(list):
    """List of captured payloads with small lookup helpers."""

    def named(self, event: str) -> List[Dict[str, Any]]:
        return [e for e in self if e.get("event") == event]


@pytest.fixture()
def log_events() -> Iterator[LogEvents]:
    logger = get_logger(BASE_LOGGER_NAME)
    handler = _ListHandler()
    captured = LogEvents()
    handler.events = captured
    previous = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    yield captured
    logger.removeHandler(handler)
    logger.setLevel(previous)


@pytest.fixture()
def no_provider_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_MAP.values():
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _fresh_default_router() -> Iterator[None]:
    reset_router()
    yield
    reset_router()
