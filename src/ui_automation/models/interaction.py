"""Interaction state and outcome models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class InteractionState(str, Enum):
    """States a safe_interact call moves through.

    IDLE -> RESOLVING -> AWAITING_READY -> ACTING -> SUCCESS, with
    RETRY_PENDING leading back to RESOLVING and FAILED as the other
    terminal state.
    """

    IDLE = "IDLE"
    RESOLVING = "RESOLVING"
    AWAITING_READY = "AWAITING_READY"
    ACTING = "ACTING"
    RETRY_PENDING = "RETRY_PENDING"
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"


TERMINAL_STATES = frozenset({InteractionState.SUCCESS, InteractionState.FAILED})


class InteractionOutcome(BaseModel):
    """Result of a successful safe_interact call.

    Attributes:
        locator: The locator that was acted on.
        action: Name of the action (click, type, ...).
        attempts: Attempt number that succeeded (1-based).
        elapsed_ms: Time spent across all attempts, delays included.
        states: Every state entered, in order, starting at IDLE.
    """

    model_config = ConfigDict(frozen=True)

    locator: str
    action: str
    attempts: int
    elapsed_ms: float
    states: list[InteractionState]

    @property
    def final_state(self) -> InteractionState:
        return self.states[-1]
