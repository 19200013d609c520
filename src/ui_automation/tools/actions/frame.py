"""Frame switching for browser automation.

After switch_to_frame, every selector passed to the waits and actions resolves
inside that iframe until switch_to_default_content or the next navigation.
Scripts still run in the top-level document.
"""

from ui_automation.core.browser import Session
from ui_automation.core.logging import logForDebugging
from ui_automation.tools.waits import wait_for_element_present


def switch_to_frame(session: Session, frame_selector: str, timeout_ms: int | None = None) -> None:
    """Scope later selectors to the iframe matching frame_selector.

    Raises:
        PollTimeoutError: If no iframe matches within the timeout.
    """
    wait_for_element_present(session, frame_selector, timeout_ms)
    session.driver.enter_frame(frame_selector)
    logForDebugging(f"Switched to frame: {frame_selector}", component="frame")


def switch_to_default_content(session: Session) -> None:
    session.driver.exit_frames()
    logForDebugging("Switched to default content", component="frame")
