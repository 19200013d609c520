"""Click action for browser automation.

This module provides safe_click, which clicks an element through the
safe_interact retry wrapper once it is visible and enabled.
"""

from ui_automation.core.browser import Session
from ui_automation.core.interaction import RetryGuard, safe_interact
from ui_automation.models.interaction import InteractionOutcome


def safe_click(
    session: Session,
    selector: str,
    retries: int | None = None,
    retry_guard: RetryGuard | None = None,
) -> InteractionOutcome:
    """Click an element, retrying on failure.

    Clicks are not idempotent in general (a submit button clicked twice may
    submit twice). Pass a retry_guard when a repeated click would be harmful.

    Args:
        session: The active session.
        selector: Selector of the element to click.
        retries: Total attempts. Defaults to config.retry_count.
        retry_guard: Optional check before repeating the click on attempts 2+.

    Returns:
        InteractionOutcome of the successful attempt.

    Raises:
        InteractionFailedError: If every attempt failed.
    """
    config = session.config
    driver = session.driver
    return safe_interact(
        driver,
        selector,
        readiness=driver.is_clickable,
        action=driver.click,
        retries=config.retry_count if retries is None else retries,
        readiness_timeout_ms=config.wait_timeout_ms,
        retry_delay_ms=config.retry_delay_ms,
        poll_interval_ms=config.poll_interval_ms,
        retry_guard=retry_guard,
        action_name="click",
    )
