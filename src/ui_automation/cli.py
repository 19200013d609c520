"""CLI entry point for ui-automation.

Runs a single smoke scenario against a page: navigate, optionally wait for an
element, type into fields, click elements and save a screenshot.
"""

import argparse
import sys
from pathlib import Path

from rich.console import Console

from ui_automation.core.browser import Session, open_session
from ui_automation.core.config import load_config
from ui_automation.core.errors import AutomationError
from ui_automation.core.logging import (
    ErrorIds,
    enable_file_logging,
    logEvent,
    logError,
    set_log_level,
)
from ui_automation.tools.actions import navigate, safe_click, safe_type
from ui_automation.tools.screenshot import take_failure_screenshot, take_screenshot
from ui_automation.tools.waits import wait_for_element_visible

console = Console()


def _type_step(value: str) -> tuple[str, str]:
    selector, sep, text = value.partition("=")
    if not sep or not selector:
        raise argparse.ArgumentTypeError(f"expected SELECTOR=TEXT, got {value!r}")
    return selector, text


def _save_failure_screenshot(session: Session, error: Exception) -> None:
    try:
        path = take_failure_screenshot(session, "smoke", error)
    except Exception as e:
        # Capture errors are logged by take_failure_screenshot.
        console.print(f"[yellow]Failure screenshot not saved:[/yellow] {e}")
        return
    console.print(f"Failure screenshot: [dim]{path}[/dim]")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ui-automation",
        description="Run a smoke scenario with retrying clicks and typed input",
    )
    parser.add_argument("--url", required=True, help="URL or path (joined onto base_url) to open")
    parser.add_argument("--config", type=str, default=None, help="YAML config file")
    parser.add_argument(
        "--wait-for",
        metavar="SELECTOR",
        default=None,
        help="Wait for this element to be visible after navigation",
    )
    parser.add_argument(
        "--type",
        dest="type_steps",
        metavar="SELECTOR=TEXT",
        type=_type_step,
        action="append",
        default=[],
        help="Type TEXT into SELECTOR (repeatable, runs before clicks)",
    )
    parser.add_argument(
        "--click",
        dest="click_steps",
        metavar="SELECTOR",
        action="append",
        default=[],
        help="Click SELECTOR (repeatable)",
    )
    parser.add_argument("--screenshot", metavar="NAME", default=None, help="Save a screenshot at the end")
    parser.add_argument(
        "--headless",
        action="store_true",
        default=None,
        help="Run in headless mode (default: from config)",
    )
    parser.add_argument("--log-level", default=None, help="Console log level (debug, info, warning, error)")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config, headless=args.headless, log_level=args.log_level)
    except AutomationError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        return 2

    set_log_level(config.log_level)
    enable_file_logging(Path(config.log_dir))

    console.print("[bold cyan]ui-automation[/bold cyan] - smoke scenario")
    console.print(f"Browser: [dim]{config.browser}[/dim]  headless: [dim]{config.headless}[/dim]")

    try:
        with open_session(config) as session:
            try:
                status = navigate(session, args.url)
                console.print(f"[green]Navigated[/green] to {session.driver.current_url()} (status: {status})")

                if args.wait_for:
                    wait_for_element_visible(session, args.wait_for)
                    console.print(f"[green]Visible:[/green] {args.wait_for}")

                for selector, text in args.type_steps:
                    outcome = safe_type(session, selector, text)
                    console.print(f"[green]Typed[/green] into {selector} (attempt {outcome.attempts})")

                for selector in args.click_steps:
                    outcome = safe_click(session, selector)
                    console.print(f"[green]Clicked[/green] {selector} (attempt {outcome.attempts})")

                if args.screenshot:
                    path = take_screenshot(session, args.screenshot)
                    console.print(f"Screenshot: [dim]{path}[/dim]")
            except Exception as e:
                console.print(f"[red]Scenario failed:[/red] {e}")
                _save_failure_screenshot(session, e)
                return 1
    except KeyboardInterrupt:
        logError(ErrorIds.KEYBOARD_INTERRUPT, "Interrupted by user")
        console.print("\n[yellow]Interrupted.[/yellow]")
        return 130

    logEvent("scenario_completed", {"url": args.url, "clicks": len(args.click_steps)})
    console.print("[green]Done.[/green]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
