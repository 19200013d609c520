"""Hover and scroll actions for browser automation."""

from ui_automation.core.browser import Session
from ui_automation.core.interaction import safe_interact
from ui_automation.models.interaction import InteractionOutcome


def hover_over(session: Session, selector: str, retries: int | None = None) -> InteractionOutcome:
    """Move the pointer over an element once it is visible."""
    config = session.config
    driver = session.driver
    return safe_interact(
        driver,
        selector,
        readiness=driver.is_visible,
        action=driver.hover,
        retries=config.retry_count if retries is None else retries,
        readiness_timeout_ms=config.wait_timeout_ms,
        retry_delay_ms=config.retry_delay_ms,
        poll_interval_ms=config.poll_interval_ms,
        action_name="hover",
    )


def scroll_to_element(session: Session, selector: str, retries: int | None = None) -> InteractionOutcome:
    """Scroll an element into view once it is attached to the page."""
    config = session.config
    driver = session.driver
    return safe_interact(
        driver,
        selector,
        readiness=lambda target: True,
        action=driver.scroll_into_view,
        retries=config.retry_count if retries is None else retries,
        readiness_timeout_ms=config.wait_timeout_ms,
        retry_delay_ms=config.retry_delay_ms,
        poll_interval_ms=config.poll_interval_ms,
        action_name="scroll",
    )
