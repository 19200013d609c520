"""File upload action for browser automation."""

from pathlib import Path

from ui_automation.core.browser import Session
from ui_automation.core.interaction import safe_interact
from ui_automation.models.interaction import InteractionOutcome


def upload_file(
    session: Session,
    selector: str,
    file_path: str | Path,
    retries: int | None = None,
) -> InteractionOutcome:
    """Set a local file on an ``<input type="file">``.

    File inputs are often hidden behind a styled button, so the input only
    has to be attached to the page.

    Raises:
        FileNotFoundError: If file_path does not exist.
        InteractionFailedError: If every attempt failed.
    """
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"Upload file not found: {path}")

    config = session.config
    driver = session.driver
    return safe_interact(
        driver,
        selector,
        readiness=lambda target: True,
        action=lambda target: driver.set_input_files(target, path),
        retries=config.retry_count if retries is None else retries,
        readiness_timeout_ms=config.wait_timeout_ms,
        retry_delay_ms=config.retry_delay_ms,
        poll_interval_ms=config.poll_interval_ms,
        action_name="upload",
    )
