"""Read-only page queries.

Presence and visibility checks never raise: any driver error means the
element is not there. Text and attribute reads wait for visibility first.
"""

from ui_automation.core.browser import Session
from ui_automation.core.logging import logForDebugging
from ui_automation.tools.waits import wait_for_element_visible


def get_title(session: Session) -> str:
    return session.driver.title()


def get_current_url(session: Session) -> str:
    return session.driver.current_url()


def get_text_content(session: Session, selector: str, timeout_ms: int | None = None) -> str:
    """Return the text of an element once it is visible."""
    target = wait_for_element_visible(session, selector, timeout_ms)
    return session.driver.get_text(target)


def get_attribute(
    session: Session, selector: str, attribute: str, timeout_ms: int | None = None
) -> str | None:
    """Return an attribute of an element once it is visible."""
    target = wait_for_element_visible(session, selector, timeout_ms)
    return session.driver.get_attribute(target, attribute)


def is_element_present(session: Session, selector: str) -> bool:
    try:
        return session.driver.count(selector) > 0
    except Exception as e:
        logForDebugging(f"Presence check failed for {selector}: {e}", component="query")
        return False


def is_element_visible(session: Session, selector: str) -> bool:
    driver = session.driver
    try:
        return driver.is_visible(driver.resolve(selector))
    except Exception as e:
        logForDebugging(f"Visibility check failed for {selector}: {e}", component="query")
        return False
