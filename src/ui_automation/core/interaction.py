"""Safe interaction with retries.

safe_interact wraps one fallible action (click, type, hover, ...) so that each
attempt re-resolves its target, waits for a readiness predicate through
poll_until, and only then acts. Failed attempts are logged and retried after a
fixed delay; the error of the last attempt is surfaced as
InteractionFailedError once the retry budget is spent.

The wrapper does not roll back partial effects of a failed attempt. Actions
that must not run twice should pass a retry_guard.
"""

import time
from typing import Any, Callable

from ui_automation.core.driver import Driver
from ui_automation.core.errors import InteractionFailedError
from ui_automation.core.logging import ErrorIds, logError, logForDebugging
from ui_automation.core.poller import poll_until
from ui_automation.models.interaction import InteractionOutcome, InteractionState
from ui_automation.models.poll import PollConfig

Readiness = Callable[[Any], object]
Action = Callable[[Any], object]
RetryGuard = Callable[[Any], bool]

DEFAULT_RETRIES = 3
DEFAULT_READINESS_TIMEOUT_MS = 10000
DEFAULT_RETRY_DELAY_MS = 1000
DEFAULT_POLL_INTERVAL_MS = 500

_COMPONENT = "interaction"


def _elapsed_ms(start: float) -> float:
    return (time.monotonic() - start) * 1000


def safe_interact(
    driver: Driver,
    locator: str,
    readiness: Readiness,
    action: Action,
    retries: int = DEFAULT_RETRIES,
    readiness_timeout_ms: int = DEFAULT_READINESS_TIMEOUT_MS,
    retry_delay_ms: int = DEFAULT_RETRY_DELAY_MS,
    poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS,
    retry_guard: RetryGuard | None = None,
    action_name: str = "interact",
) -> InteractionOutcome:
    """Resolve, await readiness and act on a target, retrying on failure.

    Args:
        driver: Driver used to resolve the locator.
        locator: Selector of the target. Resolved fresh on every attempt.
        readiness: Predicate on the resolved target (e.g., visible, clickable).
        action: Callable performing the interaction on the resolved target.
        retries: Total number of attempts (must be >= 1).
        readiness_timeout_ms: Budget for the readiness wait of each attempt.
        retry_delay_ms: Fixed pause between attempts.
        poll_interval_ms: Polling interval of the readiness wait.
        retry_guard: Optional check run before repeating the action on
                     attempts 2 and later. Returning False stops the retries.
        action_name: Name used in log messages and the outcome.

    Returns:
        InteractionOutcome describing the successful attempt.

    Raises:
        InteractionFailedError: If every attempt failed, or the retry guard
                                refused to repeat the action.
        ValueError: If retries is less than 1.
    """
    if retries < 1:
        raise ValueError(f"retries must be at least 1, got {retries}")

    states = [InteractionState.IDLE]
    readiness_config = PollConfig.fixed(
        timeout_ms=readiness_timeout_ms,
        interval_ms=poll_interval_ms,
    )
    start = time.monotonic()
    last_error: BaseException | None = None
    guard_blocked = False
    attempt = 0

    for attempt in range(1, retries + 1):
        try:
            states.append(InteractionState.RESOLVING)
            target = driver.resolve(locator)

            states.append(InteractionState.AWAITING_READY)
            poll_until(
                lambda: readiness(target),
                readiness_config,
                description=f"{action_name} readiness of {locator}",
            )

            if attempt > 1 and retry_guard is not None and not retry_guard(target):
                guard_blocked = True
                break

            states.append(InteractionState.ACTING)
            action(target)
        except Exception as e:
            last_error = e
            logForDebugging(
                f"{action_name.capitalize()} attempt {attempt} failed for {locator}: {e}",
                level="warning",
                extra={"attempt": attempt, "locator": locator, "error": type(e).__name__},
                component=_COMPONENT,
            )
            if attempt < retries:
                states.append(InteractionState.RETRY_PENDING)
                time.sleep(retry_delay_ms / 1000)
            continue

        states.append(InteractionState.SUCCESS)
        elapsed = _elapsed_ms(start)
        logForDebugging(
            f"Successfully performed {action_name} on element: {locator}",
            level="info",
            extra={"attempt": attempt, "elapsed_ms": round(elapsed)},
            component=_COMPONENT,
        )
        return InteractionOutcome(
            locator=locator,
            action=action_name,
            attempts=attempt,
            elapsed_ms=elapsed,
            states=states,
        )

    states.append(InteractionState.FAILED)
    elapsed = _elapsed_ms(start)
    error = InteractionFailedError(
        locator=locator,
        attempts=attempt,
        last_error=last_error,
        elapsed_ms=elapsed,
        guard_blocked=guard_blocked,
    )
    logError(
        ErrorIds.RETRY_GUARD_BLOCKED if guard_blocked else ErrorIds.RETRY_EXHAUSTED,
        str(error),
        extra={"action": action_name, "attempts": attempt, "elapsed_ms": round(elapsed)},
        component=_COMPONENT,
    )
    raise error from last_error
