"""Error types raised by waits and interactions."""


class AutomationError(Exception):
    """Base class for every error surfaced to scenario code."""


class PollTimeoutError(AutomationError):
    """Raised when a condition never became true within its budget."""

    def __init__(
        self,
        description: str,
        elapsed_ms: float,
        attempts: int,
        mode: str,
        last_error: BaseException | None = None,
    ) -> None:
        self.description = description
        self.elapsed_ms = elapsed_ms
        self.attempts = attempts
        self.mode = mode
        self.last_error = last_error

        if mode == "backoff":
            message = (
                f"Condition {description!r} not met after {attempts} attempts "
                f"with exponential backoff ({elapsed_ms:.0f}ms elapsed)"
            )
        else:
            message = (
                f"Timed out waiting for {description!r} after {elapsed_ms:.0f}ms "
                f"({attempts} evaluation(s))"
            )
        if last_error is not None:
            message += f"; last error: {last_error}"
        super().__init__(message)


class InteractionFailedError(AutomationError):
    """Raised when an interaction failed on every retry.

    Only the error from the final attempt is kept.
    """

    def __init__(
        self,
        locator: str,
        attempts: int,
        last_error: BaseException | None,
        elapsed_ms: float = 0.0,
        guard_blocked: bool = False,
    ) -> None:
        self.locator = locator
        self.attempts = attempts
        self.last_error = last_error
        self.elapsed_ms = elapsed_ms
        self.guard_blocked = guard_blocked

        if guard_blocked:
            message = (
                f"Interaction with {locator!r} stopped after {attempts} attempt(s): "
                f"retry guard refused to repeat the action"
            )
        else:
            message = (
                f"Interaction with {locator!r} failed after {attempts} attempt(s) "
                f"in {elapsed_ms:.0f}ms"
            )
        if last_error is not None:
            message += f": {last_error}"
        super().__init__(message)


class ResolutionFailedError(InteractionFailedError):
    """Raised when a locator matched zero elements during one attempt."""

    def __init__(self, locator: str) -> None:
        self.locator = locator
        self.attempts = 1
        self.last_error = None
        self.elapsed_ms = 0.0
        self.guard_blocked = False
        Exception.__init__(self, f"Locator {locator!r} matched no elements")


class NavigationError(AutomationError):
    """Raised when navigation returned an error status."""

    def __init__(self, url: str, status: int) -> None:
        self.url = url
        self.status = status
        super().__init__(f"Navigation to {url!r} returned status {status}")


class ConfigError(AutomationError):
    """Raised when a configuration file cannot be loaded."""
