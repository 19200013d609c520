"""Browser session management.

A Session bundles one Playwright page with its driver and config. Sessions are
passed explicitly to every wait and action, so parallel workers can each own
an independent browser without shared state.
"""

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from playwright.sync_api import Browser, BrowserContext, Page, Playwright, sync_playwright

from ui_automation.core.config import HarnessConfig
from ui_automation.core.driver import PlaywrightDriver
from ui_automation.core.logging import logForDebugging


class Session:
    """One browser page plus the settings used to drive it.

    Args:
        page: The Playwright Page object.
        config: Harness settings (timeouts, retries, directories).
        context: Owning BrowserContext, closed by close().
        browser: Owning Browser, closed by close(). None for persistent contexts.
    """

    def __init__(
        self,
        page: Page,
        config: HarnessConfig,
        context: BrowserContext | None = None,
        browser: Browser | None = None,
    ) -> None:
        self.page = page
        self.config = config
        self.context = context
        self.browser = browser
        self.driver = PlaywrightDriver(page, action_timeout_ms=config.wait_timeout_ms)

    def close(self) -> None:
        """Close the context and, when owned, the browser."""
        if self.context is not None:
            self.context.close()
        if self.browser is not None:
            self.browser.close()


def launch_session(playwright: Playwright, config: HarnessConfig) -> Session:
    """Launch a browser and open a page according to config.

    When config.user_data_dir is set, the browser is launched with persistent
    storage (cookies, localStorage, ...) in that directory. Only one browser
    instance can use a given user_data_dir at a time.

    Args:
        playwright: The Playwright instance (from sync_playwright()).
        config: Harness settings.

    Returns:
        A Session owning the new page.
    """
    browser_type = getattr(playwright, config.browser)
    viewport = {"width": config.viewport_width, "height": config.viewport_height}
    base_url = config.base_url or None

    logForDebugging(
        f"Launching {config.browser}",
        level="info",
        extra={"headless": config.headless, "persistent": config.user_data_dir is not None},
        component="browser",
    )

    browser: Browser | None = None
    if config.user_data_dir:
        context = browser_type.launch_persistent_context(
            user_data_dir=str(Path(config.user_data_dir)),
            headless=config.headless,
            viewport=viewport,
            base_url=base_url,
        )
        page = context.pages[0] if context.pages else context.new_page()
    else:
        browser = browser_type.launch(headless=config.headless)
        context = browser.new_context(viewport=viewport, base_url=base_url)
        page = context.new_page()

    context.set_default_timeout(config.wait_timeout_ms)
    context.set_default_navigation_timeout(config.page_load_timeout_ms)
    return Session(page, config, context=context, browser=browser)


@contextmanager
def open_session(config: HarnessConfig) -> Iterator[Session]:
    """Start Playwright, launch a session, and close both on exit.

    Example:
        with open_session(load_config()) as session:
            navigate(session, "/login")
            safe_click(session, "#submit")
    """
    with sync_playwright() as p:
        session = launch_session(p, config)
        try:
            yield session
        finally:
            session.close()
