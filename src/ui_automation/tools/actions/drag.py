"""Drag-and-drop action for browser automation."""

from ui_automation.core.browser import Session
from ui_automation.core.interaction import safe_interact
from ui_automation.models.interaction import InteractionOutcome


def drag_and_drop(
    session: Session,
    source_selector: str,
    target_selector: str,
    retries: int | None = None,
) -> InteractionOutcome:
    """Drag one element onto another.

    The source is the retried target: it must be visible before each attempt.
    The drop target is re-resolved inside every attempt, so a drop zone that is
    not rendered yet fails the attempt and is retried.

    Args:
        session: The active session.
        source_selector: Selector of the element to drag.
        target_selector: Selector of the element to drop onto.
        retries: Total attempts. Defaults to config.retry_count.

    Returns:
        InteractionOutcome of the successful attempt.

    Raises:
        InteractionFailedError: If every attempt failed.
    """
    config = session.config
    driver = session.driver

    def drop(source) -> None:
        driver.drag_to(source, driver.resolve(target_selector))

    return safe_interact(
        driver,
        source_selector,
        readiness=driver.is_visible,
        action=drop,
        retries=config.retry_count if retries is None else retries,
        readiness_timeout_ms=config.wait_timeout_ms,
        retry_delay_ms=config.retry_delay_ms,
        poll_interval_ms=config.poll_interval_ms,
        action_name="drag",
    )
