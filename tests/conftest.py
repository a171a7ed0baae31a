import io
from datetime import datetime

import pytest

from simplelog import LogLevel, SharedState


def pytest_addoption(parser: pytest.Parser) -> None:
    """Add the live-test option."""
    try:
        parser.addoption(
            "--run-live",
            action="store_true",
            default=False,
            help="Run live tests that open real sockets (ZMQ round trips)",
        )
    except ValueError:
        # Option may already be registered by a nested conftest.
        pass


def pytest_configure(config: pytest.Config) -> None:
    """Register shared markers."""
    config.addinivalue_line("markers", "live: mark test as opening real sockets")


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip live tests unless explicitly enabled."""
    if config.getoption("--run-live"):
        return

    skip_live = pytest.mark.skip(reason="need --run-live option to run")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_live)


class FixedClock:
    """Clock returning a settable datetime, for deterministic timestamps."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


class ExplodingSink:
    """Sink that fails the test if anything reaches it."""

    def __init__(self) -> None:
        self.writes = 0

    def write(self, data: bytes) -> None:
        self.writes += 1
        raise AssertionError(f"unexpected write: {data!r}")


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2024, 3, 9, 14, 5, 7, 250000))


@pytest.fixture
def buffer() -> io.BytesIO:
    return io.BytesIO()


@pytest.fixture
def state(buffer: io.BytesIO, clock: FixedClock) -> SharedState:
    """An isolated state writing to an in-memory buffer, with a primed date tracker."""
    shared = SharedState(output=buffer, level=LogLevel.TRACE, clock=clock)
    shared.tracker.last_month = clock.now.month
    shared.tracker.last_day = clock.now.day
    return shared


@pytest.fixture
def exploding_sink() -> ExplodingSink:
    return ExplodingSink()


@pytest.fixture
def exit_calls(monkeypatch: pytest.MonkeyPatch) -> list[int]:
    """Record process-exit requests from fatal calls instead of exiting."""
    calls: list[int] = []
    monkeypatch.setattr("simplelog.logger._exit", calls.append)
    return calls
