"""Polling configuration and outcome models.

A PollConfig selects exactly one of two strategies:

- interval mode: evaluate every ``interval_ms`` until ``timeout_ms`` elapses.
- backoff mode: evaluate up to ``max_attempts`` times, sleeping
  ``base_delay_ms * backoff_base ** (attempt - 1)`` between attempts.

Setting fields from both modes on the same config is rejected.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_TIMEOUT_MS = 10000
DEFAULT_INTERVAL_MS = 500
DEFAULT_MAX_ATTEMPTS = 5
DEFAULT_BASE_DELAY_MS = 1000
DEFAULT_BACKOFF_BASE = 2.0


class PollMode(str, Enum):
    """Polling strategy of a PollConfig."""

    INTERVAL = "interval"
    BACKOFF = "backoff"


class PollConfig(BaseModel):
    """Budget and pacing for a single poll_until call.

    Attributes:
        timeout_ms: Total time budget in interval mode (0 means one evaluation).
        interval_ms: Pause between evaluations in interval mode.
        max_attempts: Evaluation budget in backoff mode.
        base_delay_ms: First pause in backoff mode.
        backoff_base: Multiplier applied to each successive pause.
        propagate_errors: If True, an exception raised by the condition is
            re-raised instead of being treated as "not yet satisfied".
    """

    model_config = ConfigDict(frozen=True)

    timeout_ms: int | None = Field(default=None, ge=0)
    interval_ms: int | None = Field(default=None, gt=0)
    max_attempts: int | None = Field(default=None, ge=1)
    base_delay_ms: int | None = Field(default=None, ge=0)
    backoff_base: float | None = Field(default=None, ge=1.0)
    propagate_errors: bool = False

    @model_validator(mode="after")
    def single_strategy(self) -> "PollConfig":
        """Reject configs that mix interval and backoff fields."""
        interval_fields = self.timeout_ms is not None or self.interval_ms is not None
        backoff_fields = (
            self.max_attempts is not None
            or self.base_delay_ms is not None
            or self.backoff_base is not None
        )
        if interval_fields and backoff_fields:
            raise ValueError(
                "cannot mix interval polling (timeout_ms/interval_ms) with "
                "attempt-count polling (max_attempts/base_delay_ms/backoff_base)"
            )
        return self

    @classmethod
    def fixed(
        cls,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        interval_ms: int = DEFAULT_INTERVAL_MS,
        propagate_errors: bool = False,
    ) -> "PollConfig":
        """Build an interval-mode config."""
        return cls(
            timeout_ms=timeout_ms,
            interval_ms=interval_ms,
            propagate_errors=propagate_errors,
        )

    @classmethod
    def backoff(
        cls,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        base_delay_ms: int = DEFAULT_BASE_DELAY_MS,
        backoff_base: float = DEFAULT_BACKOFF_BASE,
        propagate_errors: bool = False,
    ) -> "PollConfig":
        """Build a backoff-mode config."""
        return cls(
            max_attempts=max_attempts,
            base_delay_ms=base_delay_ms,
            backoff_base=backoff_base,
            propagate_errors=propagate_errors,
        )

    @property
    def mode(self) -> PollMode:
        if self.max_attempts is not None or self.base_delay_ms is not None or self.backoff_base is not None:
            return PollMode.BACKOFF
        return PollMode.INTERVAL

    @property
    def effective_timeout_ms(self) -> int:
        return DEFAULT_TIMEOUT_MS if self.timeout_ms is None else self.timeout_ms

    @property
    def effective_interval_ms(self) -> int:
        return DEFAULT_INTERVAL_MS if self.interval_ms is None else self.interval_ms

    @property
    def effective_max_attempts(self) -> int:
        return DEFAULT_MAX_ATTEMPTS if self.max_attempts is None else self.max_attempts

    def backoff_delay_ms(self, attempt: int) -> float:
        """Delay to sleep after a failed 1-based ``attempt`` in backoff mode."""
        base_delay = DEFAULT_BASE_DELAY_MS if self.base_delay_ms is None else self.base_delay_ms
        multiplier = DEFAULT_BACKOFF_BASE if self.backoff_base is None else self.backoff_base
        return base_delay * multiplier ** (attempt - 1)


class PollOutcome(BaseModel):
    """Successful result of poll_until.

    Attributes:
        elapsed_ms: Time from the first evaluation to success.
        attempts: Number of condition evaluations performed.
        mode: Strategy used.
    """

    model_config = ConfigDict(frozen=True)

    elapsed_ms: float
    attempts: int
    mode: PollMode
