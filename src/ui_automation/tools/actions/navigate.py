"""Navigate action for browser automation.

This module provides the navigate function for opening a URL and waiting
until the page has fully loaded.
"""

from ui_automation.core.browser import Session
from ui_automation.core.errors import NavigationError
from ui_automation.core.logging import ErrorIds, logError, logForDebugging
from ui_automation.tools.waits import wait_for_page_load


def navigate(session: Session, url: str = "") -> int | None:
    """Navigate to a URL and wait for the page to load.

    Args:
        session: The active session.
        url: Absolute URL, or a path joined onto config.base_url.

    Returns:
        The HTTP status of the main document, or None when the navigation
        produced no response (e.g., for non-http protocols).

    Raises:
        NavigationError: If the response status is 400 or higher.
        PollTimeoutError: If the page does not finish loading in time.
    """
    config = session.config
    target_url = config.resolve_url(url)
    logForDebugging(f"Navigating to: {target_url}", level="info", component="navigate")

    status = session.driver.navigate_to(target_url, timeout_ms=config.page_load_timeout_ms)
    if status is not None and status >= 400:
        logError(
            ErrorIds.NAVIGATION_FAILED,
            f"Navigation to {target_url!r} returned status {status}",
            component="navigate",
        )
        raise NavigationError(target_url, status)

    wait_for_page_load(session)
    return status
