"""Waits, page actions and screenshot tools."""

from ui_automation.tools.screenshot import (
    capture_screenshot,
    clean_old_screenshots,
    take_element_screenshot,
    take_failure_screenshot,
    take_screenshot,
)

__all__ = [
    "capture_screenshot",
    "clean_old_screenshots",
    "take_element_screenshot",
    "take_failure_screenshot",
    "take_screenshot",
]
