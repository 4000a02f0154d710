from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from verdict import options

if TYPE_CHECKING:
    from collections.abc import Generator


def pytest_configure() -> None:
    logging.basicConfig(level=logging.ERROR)  # set log levels very high for tests


@pytest.fixture(autouse=True)
def default_options() -> Generator[None]:
    options.reset()
    yield
    options.reset()


@pytest.fixture
def suppressed() -> list[tuple[str, Exception]]:
    """Collect exceptions swallowed by the tee operations."""
    calls: list[tuple[str, Exception]] = []
    options.configure(on_suppressed=lambda op, e: calls.append((op, e)))
    return calls


@pytest.fixture
def verdict_logs(caplog: pytest.LogCaptureFixture) -> Generator[pytest.LogCaptureFixture]:
    logger = logging.getLogger("verdict")
    logger.propagate = True
    caplog.set_level(logging.DEBUG, logger="verdict")
    yield caplog
    logger.propagate = False
