"""Page actions composed by scenarios."""

from ui_automation.tools.actions.click import safe_click
from ui_automation.tools.actions.drag import drag_and_drop
from ui_automation.tools.actions.frame import switch_to_default_content, switch_to_frame
from ui_automation.tools.actions.hover import hover_over, scroll_to_element
from ui_automation.tools.actions.navigate import navigate
from ui_automation.tools.actions.query import (
    get_attribute,
    get_current_url,
    get_text_content,
    get_title,
    is_element_present,
    is_element_visible,
)
from ui_automation.tools.actions.script import execute_script
from ui_automation.tools.actions.type import safe_type
from ui_automation.tools.actions.upload import upload_file

__all__ = [
    "drag_and_drop",
    "execute_script",
    "get_attribute",
    "get_current_url",
    "get_text_content",
    "get_title",
    "hover_over",
    "is_element_present",
    "is_element_visible",
    "navigate",
    "safe_click",
    "safe_type",
    "scroll_to_element",
    "switch_to_default_content",
    "switch_to_frame",
    "upload_file",
]
