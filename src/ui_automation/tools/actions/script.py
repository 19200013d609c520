"""Script execution action for browser automation."""

from typing import Any

from ui_automation.core.browser import Session
from ui_automation.core.logging import ErrorIds, logError


def execute_script(session: Session, script: str, arg: Any = None) -> Any:
    """Evaluate JavaScript in the page and return its result.

    Args:
        session: The active session.
        script: A JavaScript expression or function source.
        arg: Optional serializable argument passed to the function.

    Returns:
        The JSON-deserialized value the script produced.
    """
    try:
        return session.driver.execute_script(script, arg)
    except Exception as e:
        logError(ErrorIds.SCRIPT_FAILED, f"Script execution failed: {e}", component="script")
        raise
