"""Screenshot capture tools for browser automation.

This module provides page, element and failure screenshots, named with a
filesystem-safe timestamp and stored under config.screenshot_dir, plus cleanup
of old screenshot files.
"""

import re
import time
from datetime import datetime, timezone
from pathlib import Path

from playwright.sync_api import Page

from ui_automation.core.browser import Session
from ui_automation.core.logging import ErrorIds, logError, logForDebugging
from ui_automation.tools.waits import wait_for_element_present

FAILURES_SUBDIR = "failures"

_COMPONENT = "screenshot"


def _timestamp() -> str:
    return re.sub(r"[:.]", "-", datetime.now(timezone.utc).isoformat(timespec="milliseconds"))


def _sanitize(name: str) -> str:
    return re.sub(r"[^a-zA-Z0-9]", "_", name)


def capture_screenshot(
    page: Page,
    output_path: Path | str | None = None,
    full_page: bool = False,
) -> Path:
    """Capture a screenshot of the current page.

    Args:
        page: The Playwright Page object.
        output_path: Path where screenshot should be saved.
                     If None, generates a timestamped filename in current directory.
        full_page: If True, captures the full scrollable page.
                  If False, captures only the viewport.

    Returns:
        Path to the saved screenshot.
    """
    if output_path is None:
        timestamp = int(time.time() * 1000)
        output_path = Path(f"screenshot-{timestamp}.png")
    else:
        output_path = Path(output_path)

    # Ensure parent directory exists
    output_path.parent.mkdir(parents=True, exist_ok=True)

    page.screenshot(path=str(output_path), full_page=full_page)

    return output_path


def take_screenshot(session: Session, name: str | None = None, full_page: bool = False) -> Path:
    """Save a page screenshot as ``<screenshot_dir>/<name>_<timestamp>.png``.

    Raises:
        Exception: Whatever the driver raised; the failure is logged first.
    """
    prefix = "fullpage" if full_page else "screenshot"
    file_name = f"{name}_{_timestamp()}.png" if name else f"{prefix}_{_timestamp()}.png"
    path = Path(session.config.screenshot_dir) / file_name

    try:
        saved = capture_screenshot(session.page, path, full_page=full_page)
    except Exception as e:
        logError(
            ErrorIds.SCREENSHOT_CAPTURE_FAILED,
            "Failed to take screenshot",
            extra={"path": path, "error": e},
            component=_COMPONENT,
        )
        raise

    logForDebugging(f"Screenshot saved: {saved}", level="info", component=_COMPONENT)
    return saved


def take_element_screenshot(session: Session, selector: str, name: str | None = None) -> Path:
    """Save a screenshot of one element once it is present."""
    file_name = f"{name}_element_{_timestamp()}.png" if name else f"element_{_timestamp()}.png"
    path = Path(session.config.screenshot_dir) / file_name
    path.parent.mkdir(parents=True, exist_ok=True)

    try:
        target = wait_for_element_present(session, selector)
        session.driver.element_screenshot(target, path)
    except Exception as e:
        logError(
            ErrorIds.SCREENSHOT_CAPTURE_FAILED,
            "Failed to take element screenshot",
            extra={"selector": selector, "path": path, "error": e},
            component=_COMPONENT,
        )
        raise

    logForDebugging(f"Element screenshot saved: {path}", level="info", component=_COMPONENT)
    return path


def take_failure_screenshot(session: Session, test_name: str, error: BaseException) -> Path:
    """Save a screenshot for a failed scenario under ``failures/``.

    The file is named ``FAILURE_<sanitized test name>_<timestamp>.png``.
    """
    file_name = f"FAILURE_{_sanitize(test_name)}_{_timestamp()}.png"
    path = Path(session.config.screenshot_dir) / FAILURES_SUBDIR / file_name

    try:
        saved = capture_screenshot(session.page, path)
    except Exception as e:
        logError(
            ErrorIds.SCREENSHOT_CAPTURE_FAILED,
            "Failed to take failure screenshot",
            extra={"test_name": test_name, "original_error": error, "error": e},
            component=_COMPONENT,
        )
        raise

    logError(
        ErrorIds.SCENARIO_FAILED,
        f"Failure screenshot saved: {saved}",
        extra={"test_name": test_name, "error": error},
        component=_COMPONENT,
    )
    return saved


def clean_old_screenshots(directory: str | Path, days_old: int = 7) -> int:
    """Delete screenshot files older than days_old.

    Only files directly inside directory are considered.

    Returns:
        Number of files deleted.
    """
    screenshot_dir = Path(directory)
    if not screenshot_dir.is_dir():
        return 0

    cutoff = time.time() - days_old * 24 * 60 * 60
    deleted = 0
    try:
        for path in screenshot_dir.iterdir():
            if path.is_file() and path.stat().st_mtime < cutoff:
                path.unlink()
                deleted += 1
    except OSError as e:
        logError(
            ErrorIds.SCREENSHOT_CLEANUP_FAILED,
            f"Failed to clean old screenshots: {e}",
            extra={"directory": screenshot_dir, "deleted": deleted},
            component=_COMPONENT,
        )
        raise

    logForDebugging(
        f"Cleaned {deleted} old screenshots older than {days_old} days",
        level="info",
        component=_COMPONENT,
    )
    return deleted
