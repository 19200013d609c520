"""ui_automation core components."""

from ui_automation.core.browser import Session, launch_session, open_session
from ui_automation.core.config import HarnessConfig, load_config
from ui_automation.core.driver import Driver, PlaywrightDriver
from ui_automation.core.errors import (
    AutomationError,
    ConfigError,
    InteractionFailedError,
    NavigationError,
    PollTimeoutError,
    ResolutionFailedError,
)
from ui_automation.core.interaction import safe_interact
from ui_automation.core.poller import poll_until

__all__ = [
    "AutomationError",
    "ConfigError",
    "Driver",
    "HarnessConfig",
    "InteractionFailedError",
    "NavigationError",
    "PlaywrightDriver",
    "PollTimeoutError",
    "ResolutionFailedError",
    "Session",
    "launch_session",
    "load_config",
    "open_session",
    "poll_until",
    "safe_interact",
]
