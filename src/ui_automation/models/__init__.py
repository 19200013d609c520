"""ui_automation data models."""

from ui_automation.models.interaction import InteractionOutcome, InteractionState
from ui_automation.models.poll import PollConfig, PollMode, PollOutcome

__all__ = [
    "InteractionOutcome",
    "InteractionState",
    "PollConfig",
    "PollMode",
    "PollOutcome",
]
