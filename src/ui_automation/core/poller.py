"""Condition polling.

poll_until is the single waiting primitive the rest of the package builds on.
It evaluates a zero-argument condition until it returns a truthy value or the
budget in its PollConfig runs out. Evaluations are strictly sequential.
"""

import time
from typing import Callable

from ui_automation.core.errors import PollTimeoutError
from ui_automation.core.logging import logForDebugging
from ui_automation.models.poll import PollConfig, PollMode, PollOutcome

Condition = Callable[[], object]

_COMPONENT = "poller"


def _elapsed_ms(start: float) -> float:
    return (time.monotonic() - start) * 1000


def _evaluate(
    condition: Condition,
    config: PollConfig,
    description: str,
    attempt: int,
) -> tuple[bool, BaseException | None]:
    """Run the condition once.

    Returns:
        (satisfied, error) where error is the swallowed exception, if any.
    """
    try:
        return bool(condition()), None
    except Exception as e:
        if config.propagate_errors:
            raise
        logForDebugging(
            f"Condition {description!r} raised on evaluation {attempt}: {e}",
            extra={"error": type(e).__name__},
            component=_COMPONENT,
        )
        return False, e


def poll_until(
    condition: Condition,
    config: PollConfig | None = None,
    description: str = "condition",
) -> PollOutcome:
    """Evaluate a condition until it is satisfied or the budget runs out.

    Args:
        condition: Zero-argument callable. Must be safe to call repeatedly.
        config: Polling strategy and budget. Defaults to interval mode with a
                10000ms timeout and a 500ms interval.
        description: Human-readable name used in logs and the timeout error.

    Returns:
        PollOutcome with elapsed time and the number of evaluations.

    Raises:
        PollTimeoutError: If the condition never became true in time.
        Exception: Whatever the condition raised, when config.propagate_errors
                   is set.
    """
    if config is None:
        config = PollConfig()

    if config.mode == PollMode.BACKOFF:
        return _poll_with_backoff(condition, config, description)
    return _poll_with_interval(condition, config, description)


def _poll_with_interval(
    condition: Condition,
    config: PollConfig,
    description: str,
) -> PollOutcome:
    timeout_ms = config.effective_timeout_ms
    interval_ms = config.effective_interval_ms
    start = time.monotonic()
    attempt = 0
    last_error: BaseException | None = None

    while True:
        attempt += 1
        satisfied, error = _evaluate(condition, config, description, attempt)
        if satisfied:
            return PollOutcome(
                elapsed_ms=_elapsed_ms(start),
                attempts=attempt,
                mode=PollMode.INTERVAL,
            )
        if error is not None:
            last_error = error

        elapsed = _elapsed_ms(start)
        if elapsed >= timeout_ms:
            break

        # Never sleep past the deadline
        time.sleep(min(interval_ms, timeout_ms - elapsed) / 1000)

        elapsed = _elapsed_ms(start)
        if elapsed >= timeout_ms:
            break

    raise _timeout(description, _elapsed_ms(start), attempt, PollMode.INTERVAL, last_error)


def _poll_with_backoff(
    condition: Condition,
    config: PollConfig,
    description: str,
) -> PollOutcome:
    max_attempts = config.effective_max_attempts
    start = time.monotonic()
    last_error: BaseException | None = None

    logForDebugging(
        f"Waiting for {description!r} with exponential backoff, max attempts: {max_attempts}",
        component=_COMPONENT,
    )

    for attempt in range(1, max_attempts + 1):
        satisfied, error = _evaluate(condition, config, description, attempt)
        if satisfied:
            return PollOutcome(
                elapsed_ms=_elapsed_ms(start),
                attempts=attempt,
                mode=PollMode.BACKOFF,
            )
        if error is not None:
            last_error = error

        if attempt < max_attempts:
            delay_ms = config.backoff_delay_ms(attempt)
            logForDebugging(
                f"Waiting {delay_ms:.0f}ms before next attempt",
                extra={"attempt": attempt},
                component=_COMPONENT,
            )
            time.sleep(delay_ms / 1000)

    raise _timeout(description, _elapsed_ms(start), max_attempts, PollMode.BACKOFF, last_error)


def _timeout(
    description: str,
    elapsed_ms: float,
    attempts: int,
    mode: PollMode,
    last_error: BaseException | None,
) -> PollTimeoutError:
    error = PollTimeoutError(
        description=description,
        elapsed_ms=elapsed_ms,
        attempts=attempts,
        mode=mode.value,
        last_error=last_error,
    )
    error.__cause__ = last_error
    return error
