import logging
from collections.abc import Iterable
from datetime import UTC
from datetime import datetime

import pytest
from time_machine import TimeMachineFixture

from userdir.infrastructure.config.loggers import configure_loggers


@pytest.fixture(scope="session", autouse=True)
def silence_loggers() -> Iterable[None]:
    """Keep records flowing to caplog without writing them to the terminal."""
    configure_loggers(level="DEBUG", handlers=["null"], propagate=True)
    yield
    logging.shutdown()


@pytest.fixture
def frozen_time(time_machine: TimeMachineFixture) -> datetime:
    """Stops the clock, so `created_at` values can be predicted."""
    now = datetime(2026, 1, 1, 9, 30, tzinfo=UTC)
    time_machine.move_to(now, tick=False)
    return now
