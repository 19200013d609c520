"""Driver interface over the browser-automation backend.

The Driver protocol is everything the waits and interactions need from a
browser: resolving locators to live targets, readiness queries, action
primitives, navigation and script execution. PlaywrightDriver implements it on
top of a Playwright sync Page. Targets are Playwright Locators and are never
cached between attempts. Selectors resolve inside the current frame scope,
which starts at the page and narrows with enter_frame.
"""

from pathlib import Path
from typing import Any, Literal, Protocol, Sequence

from playwright.sync_api import FrameLocator, Locator, Page

from ui_automation.core.errors import ResolutionFailedError

WaitUntil = Literal["commit", "domcontentloaded", "load", "networkidle"]


class Driver(Protocol):
    """Operations the core needs from a browser session."""

    def resolve(self, locator: str) -> Any: ...

    def count(self, locator: str) -> int: ...

    def is_visible(self, target: Any) -> bool: ...

    def is_clickable(self, target: Any) -> bool: ...

    def click(self, target: Any) -> None: ...

    def set_value(self, target: Any, text: str) -> None: ...

    def clear_value(self, target: Any) -> None: ...

    def get_text(self, target: Any) -> str: ...

    def get_attribute(self, target: Any, name: str) -> str | None: ...

    def hover(self, target: Any) -> None: ...

    def scroll_into_view(self, target: Any) -> None: ...

    def drag_to(self, source: Any, destination: Any) -> None: ...

    def set_input_files(self, target: Any, files: str | Path | Sequence[str | Path]) -> None: ...

    def enter_frame(self, frame_locator: str) -> None: ...

    def exit_frames(self) -> None: ...

    def navigate_to(self, url: str, timeout_ms: float = 30000) -> int | None: ...

    def current_url(self) -> str: ...

    def title(self) -> str: ...

    def execute_script(self, script: str, arg: Any = None) -> Any: ...

    def element_screenshot(self, target: Any, path: Path) -> None: ...


class PlaywrightDriver:
    """Driver backed by a Playwright Page.

    Args:
        page: The Playwright Page object.
        action_timeout_ms: Timeout passed to Playwright action calls.
    """

    def __init__(self, page: Page, action_timeout_ms: float = 10000) -> None:
        self.page = page
        self.action_timeout_ms = action_timeout_ms
        self.scope: Page | FrameLocator = page

    def resolve(self, locator: str) -> Locator:
        """Resolve a selector to the first matching element.

        Raises:
            ResolutionFailedError: If the selector matches nothing right now.
        """
        target = self.scope.locator(locator)
        if target.count() == 0:
            raise ResolutionFailedError(locator)
        return target.first

    def count(self, locator: str) -> int:
        return self.scope.locator(locator).count()

    def is_visible(self, target: Locator) -> bool:
        return target.is_visible()

    def is_clickable(self, target: Locator) -> bool:
        return target.is_visible() and target.is_enabled()

    def click(self, target: Locator) -> None:
        target.click(timeout=self.action_timeout_ms)

    def set_value(self, target: Locator, text: str) -> None:
        target.fill(text, timeout=self.action_timeout_ms)

    def clear_value(self, target: Locator) -> None:
        target.clear(timeout=self.action_timeout_ms)

    def get_text(self, target: Locator) -> str:
        return target.inner_text(timeout=self.action_timeout_ms)

    def get_attribute(self, target: Locator, name: str) -> str | None:
        return target.get_attribute(name, timeout=self.action_timeout_ms)

    def hover(self, target: Locator) -> None:
        target.hover(timeout=self.action_timeout_ms)

    def scroll_into_view(self, target: Locator) -> None:
        target.scroll_into_view_if_needed(timeout=self.action_timeout_ms)

    def drag_to(self, source: Locator, destination: Locator) -> None:
        source.drag_to(destination, timeout=self.action_timeout_ms)

    def set_input_files(self, target: Locator, files: str | Path | Sequence[str | Path]) -> None:
        target.set_input_files(files, timeout=self.action_timeout_ms)

    def enter_frame(self, frame_locator: str) -> None:
        """Resolve later selectors inside the first iframe matching frame_locator.

        Frames nest: entering twice scopes into a frame within the current one.
        """
        self.scope = self.scope.frame_locator(frame_locator).first

    def exit_frames(self) -> None:
        """Return to the top-level document."""
        self.scope = self.page

    def navigate_to(
        self,
        url: str,
        timeout_ms: float = 30000,
        wait_until: WaitUntil = "load",
    ) -> int | None:
        """Navigate to a URL.

        Returns:
            The HTTP status, or None when no response was received
            (e.g., for non-http protocols).
        """
        self.exit_frames()
        response = self.page.goto(url, wait_until=wait_until, timeout=timeout_ms)
        if response is None:
            return None
        return response.status

    def current_url(self) -> str:
        return self.page.url

    def title(self) -> str:
        return self.page.title()

    def execute_script(self, script: str, arg: Any = None) -> Any:
        return self.page.evaluate(script, arg)

    def element_screenshot(self, target: Locator, path: Path) -> None:
        target.screenshot(path=str(path), timeout=self.action_timeout_ms)
