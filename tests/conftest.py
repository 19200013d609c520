"""Shared test fixtures for ui_automation tests."""

from unittest.mock import MagicMock

import pytest

from ui_automation.core import interaction as interaction_module
from ui_automation.core import poller as poller_module
from ui_automation.core.browser import Session
from ui_automation.core.config import HarnessConfig
from ui_automation.core.driver import PlaywrightDriver


class FakeClock:
    """Virtual monotonic clock; sleep advances time instead of blocking."""

    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: list[float] = []

    def monotonic(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds

    def advance_ms(self, ms: float) -> None:
        self.now += ms / 1000

    @property
    def elapsed_ms(self) -> float:
        return self.now * 1000

    @property
    def sleeps_ms(self) -> list[float]:
        return [s * 1000 for s in self.sleeps]


@pytest.fixture
def clock(monkeypatch: pytest.MonkeyPatch) -> FakeClock:
    fake = FakeClock()
    monkeypatch.setattr(poller_module, "time", fake)
    monkeypatch.setattr(interaction_module, "time", fake)
    return fake


@pytest.fixture
def config(tmp_path) -> HarnessConfig:
    return HarnessConfig(
        base_url="https://example.com",
        wait_timeout_ms=1000,
        poll_interval_ms=250,
        page_load_timeout_ms=2000,
        retry_count=3,
        retry_delay_ms=1000,
        screenshot_dir=str(tmp_path / "screenshots"),
        log_dir=str(tmp_path / "logs"),
    )


@pytest.fixture
def mock_page() -> MagicMock:
    """Create a mock Playwright Page object."""
    page = MagicMock()
    page.url = "https://example.com/"
    return page


@pytest.fixture
def mock_driver() -> MagicMock:
    """Create a mock driver with a visible, enabled target."""
    driver = MagicMock(spec=PlaywrightDriver)
    driver.resolve.return_value = MagicMock(name="target")
    driver.count.return_value = 1
    driver.is_visible.return_value = True
    driver.is_clickable.return_value = True
    return driver


@pytest.fixture
def session(mock_page: MagicMock, mock_driver: MagicMock, config: HarnessConfig) -> Session:
    """A Session whose driver is a mock."""
    s = Session(mock_page, config)
    s.driver = mock_driver
    return s
