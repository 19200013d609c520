"""Type action for browser automation.

This module provides safe_type, which replaces the value of an input
element through the safe_interact retry wrapper.
"""

from typing import Any

from ui_automation.core.browser import Session
from ui_automation.core.interaction import safe_interact
from ui_automation.models.interaction import InteractionOutcome


def safe_type(
    session: Session,
    selector: str,
    text: str,
    retries: int | None = None,
) -> InteractionOutcome:
    """Clear an input element and type text into it, retrying on failure.

    Clearing before typing makes the action safe to repeat.

    Args:
        session: The active session.
        selector: Selector of the input element.
        text: The text to type.
        retries: Total attempts. Defaults to config.retry_count.

    Returns:
        InteractionOutcome of the successful attempt.

    Raises:
        InteractionFailedError: If every attempt failed.
    """
    config = session.config
    driver = session.driver

    def clear_and_type(target: Any) -> None:
        driver.clear_value(target)
        driver.set_value(target, text)

    return safe_interact(
        driver,
        selector,
        readiness=driver.is_visible,
        action=clear_and_type,
        retries=config.retry_count if retries is None else retries,
        readiness_timeout_ms=config.wait_timeout_ms,
        retry_delay_ms=config.retry_delay_ms,
        poll_interval_ms=config.poll_interval_ms,
        action_name="type",
    )
