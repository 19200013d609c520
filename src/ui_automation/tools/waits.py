"""Named waits built on poll_until.

Element waits re-resolve their selector on every evaluation and treat driver
errors (detached element, zero matches, ...) as "not ready yet". Page-level
waits (URL, title, document state) let driver errors propagate, since those
indicate a broken session rather than a transient DOM state.
"""

from typing import Any, Callable, Sequence

from ui_automation.core.browser import Session
from ui_automation.core.logging import logForDebugging
from ui_automation.core.poller import poll_until
from ui_automation.models.poll import PollConfig, PollOutcome

PENDING_REQUESTS_TIMEOUT_MS = 5000

_COMPONENT = "waits"

_READY_STATE_SCRIPT = "() => document.readyState"
_PENDING_REQUESTS_SCRIPT = """() => {
    return window.performance && window.performance.getEntriesByType
        ? window.performance.getEntriesByType('resource')
            .filter((r) => r.initiatorType === 'xmlhttprequest' && r.responseEnd === 0).length
        : 0;
}"""


def _element_config(session: Session, timeout_ms: int | None) -> PollConfig:
    return PollConfig.fixed(
        timeout_ms=session.config.wait_timeout_ms if timeout_ms is None else timeout_ms,
        interval_ms=session.config.poll_interval_ms,
        propagate_errors=False,
    )


def _page_config(session: Session, timeout_ms: int | None) -> PollConfig:
    return PollConfig.fixed(
        timeout_ms=session.config.wait_timeout_ms if timeout_ms is None else timeout_ms,
        interval_ms=session.config.poll_interval_ms,
        propagate_errors=True,
    )


def _debug(message: str) -> None:
    logForDebugging(message, component=_COMPONENT)


def _wait_for_target(
    session: Session,
    selector: str,
    ready: Callable[[Any], bool],
    timeout_ms: int | None,
    description: str,
) -> Any:
    """Poll until the selector resolves to a target that passes ready; return that target."""
    driver = session.driver
    found: list[Any] = []

    def condition() -> bool:
        target = driver.resolve(selector)
        if not ready(target):
            return False
        found.append(target)
        return True

    poll_until(condition, _element_config(session, timeout_ms), description=description)
    return found[-1]


def wait_for_element_present(
    session: Session, selector: str, timeout_ms: int | None = None
) -> Any:
    """Wait until the selector matches at least one element; return the first."""
    _debug(f"Waiting for element to be present: {selector}")
    return _wait_for_target(
        session, selector, lambda target: True, timeout_ms, f"element {selector} to be present"
    )


def wait_for_element_visible(
    session: Session, selector: str, timeout_ms: int | None = None
) -> Any:
    """Wait until the first match of the selector is visible; return it."""
    _debug(f"Waiting for element to be visible: {selector}")
    return _wait_for_target(
        session, selector, session.driver.is_visible, timeout_ms, f"element {selector} to be visible"
    )


def wait_for_element_clickable(
    session: Session, selector: str, timeout_ms: int | None = None
) -> Any:
    """Wait until the first match of the selector is visible and enabled; return it."""
    _debug(f"Waiting for element to be clickable: {selector}")
    return _wait_for_target(
        session, selector, session.driver.is_clickable, timeout_ms, f"element {selector} to be clickable"
    )


def wait_for_element_to_disappear(
    session: Session, selector: str, timeout_ms: int | None = None
) -> PollOutcome:
    """Wait until the selector matches nothing or its first match is hidden."""
    _debug(f"Waiting for element to disappear: {selector}")
    driver = session.driver

    def gone() -> bool:
        if driver.count(selector) == 0:
            return True
        return not driver.is_visible(driver.resolve(selector))

    return poll_until(
        gone,
        _element_config(session, timeout_ms),
        description=f"element {selector} to disappear",
    )


def wait_for_text_in_element(
    session: Session, selector: str, expected_text: str, timeout_ms: int | None = None
) -> PollOutcome:
    """Wait until the element's text contains expected_text."""
    _debug(f"Waiting for text {expected_text!r} in element: {selector}")
    driver = session.driver
    return poll_until(
        lambda: expected_text in driver.get_text(driver.resolve(selector)),
        _element_config(session, timeout_ms),
        description=f"text {expected_text!r} in element {selector}",
    )


def wait_for_attribute_value(
    session: Session,
    selector: str,
    attribute: str,
    expected_value: str,
    timeout_ms: int | None = None,
) -> PollOutcome:
    """Wait until the element's attribute equals expected_value."""
    _debug(f"Waiting for attribute {attribute!r} to have value {expected_value!r} in element: {selector}")
    driver = session.driver
    return poll_until(
        lambda: driver.get_attribute(driver.resolve(selector), attribute) == expected_value,
        _element_config(session, timeout_ms),
        description=f"attribute {attribute!r} of {selector} to equal {expected_value!r}",
    )


def wait_for_url_contains(
    session: Session, text: str, timeout_ms: int | None = None
) -> PollOutcome:
    _debug(f"Waiting for URL to contain: {text}")
    driver = session.driver
    return poll_until(
        lambda: text in driver.current_url(),
        _page_config(session, timeout_ms),
        description=f"URL to contain {text!r}",
    )


def wait_for_title_contains(
    session: Session, text: str, timeout_ms: int | None = None
) -> PollOutcome:
    _debug(f"Waiting for title to contain: {text}")
    driver = session.driver
    return poll_until(
        lambda: text in driver.title(),
        _page_config(session, timeout_ms),
        description=f"title to contain {text!r}",
    )


def wait_for_element_count(
    session: Session, selector: str, expected_count: int, timeout_ms: int | None = None
) -> PollOutcome:
    """Wait until exactly expected_count elements match the selector."""
    _debug(f"Waiting for {expected_count} elements with selector: {selector}")
    driver = session.driver
    return poll_until(
        lambda: driver.count(selector) == expected_count,
        _element_config(session, timeout_ms),
        description=f"{expected_count} elements matching {selector}",
    )


def wait_for_page_load(session: Session, timeout_ms: int | None = None) -> PollOutcome:
    """Wait for document.readyState to be complete, then for pending XHRs to finish.

    Args:
        session: The active session.
        timeout_ms: Budget for the ready-state wait. Defaults to
                    config.page_load_timeout_ms. The pending-request wait
                    always uses a 5000ms budget.

    Returns:
        Outcome of the ready-state wait.
    """
    _debug("Waiting for page to load completely")
    driver = session.driver
    if timeout_ms is None:
        timeout_ms = session.config.page_load_timeout_ms

    outcome = poll_until(
        lambda: driver.execute_script(_READY_STATE_SCRIPT) == "complete",
        _page_config(session, timeout_ms),
        description="page to load completely",
    )
    poll_until(
        lambda: driver.execute_script(_PENDING_REQUESTS_SCRIPT) == 0,
        _page_config(session, PENDING_REQUESTS_TIMEOUT_MS),
        description="pending requests to complete",
    )
    return outcome


def smart_wait(
    session: Session,
    conditions: Sequence[Callable[[], object]],
    timeout_ms: int | None = None,
) -> PollOutcome:
    """Wait until every condition holds on the same evaluation.

    Conditions are checked in order and short-circuit on the first falsy one.
    """
    _debug(f"Executing smart wait with {len(conditions)} conditions")
    return poll_until(
        lambda: all(condition() for condition in conditions),
        _element_config(session, timeout_ms),
        description="smart wait conditions",
    )


def wait_with_polling(
    session: Session,
    condition: Callable[[], object],
    timeout_ms: int | None = None,
    interval_ms: int | None = None,
    propagate_errors: bool = False,
) -> PollOutcome:
    """Wait for a custom condition with a custom polling interval."""
    if interval_ms is None:
        interval_ms = session.config.poll_interval_ms
    _debug(f"Waiting with custom polling interval: {interval_ms}ms")
    return poll_until(
        condition,
        PollConfig.fixed(
            timeout_ms=session.config.wait_timeout_ms if timeout_ms is None else timeout_ms,
            interval_ms=interval_ms,
            propagate_errors=propagate_errors,
        ),
        description="custom wait condition",
    )


def wait_with_backoff(
    session: Session,
    condition: Callable[[], object],
    max_attempts: int | None = None,
    base_delay_ms: int | None = None,
    propagate_errors: bool = False,
) -> PollOutcome:
    """Wait for a custom condition, doubling the delay after every attempt."""
    return poll_until(
        condition,
        PollConfig.backoff(
            max_attempts=session.config.backoff_max_attempts if max_attempts is None else max_attempts,
            base_delay_ms=session.config.backoff_base_delay_ms if base_delay_ms is None else base_delay_ms,
            propagate_errors=propagate_errors,
        ),
        description="custom backoff condition",
    )
