"""Pytest configuration and shared fixtures for reason tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import reason._config as config_module
from reason._logging import clear_log_hooks

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def reset_state() -> Generator[None]:
    """Reset global configuration and log hooks around each test."""
    config_module._config = None
    clear_log_hooks()
    yield
    config_module._config = None
    clear_log_hooks()


@pytest.fixture
def ok_reply():
    """A reply that succeeded with an integer payload."""
    from reason import Reply

    return Reply[int]().succeed(12345)


@pytest.fixture
def bad_reply():
    """A reply that failed with a described error."""
    from reason import Reply

    return Reply[int]().fail(RuntimeError('A processing error occurred.'))
