"""Tests for the ui-automation CLI."""

import argparse
from contextlib import contextmanager
from unittest.mock import MagicMock, patch

import pytest

from ui_automation import cli
from ui_automation.core.config import HarnessConfig
from ui_automation.core.errors import InteractionFailedError


@pytest.fixture
def cli_session(tmp_path) -> MagicMock:
    session = MagicMock()
    session.config = HarnessConfig(log_dir=str(tmp_path / "logs"))
    return session


@pytest.fixture
def patched_cli(cli_session: MagicMock, tmp_path):
    @contextmanager
    def fake_open_session(config):
        yield cli_session

    with patch.object(cli, "open_session", fake_open_session), patch.object(
        cli, "load_config", return_value=HarnessConfig(log_dir=str(tmp_path / "logs"))
    ), patch.object(cli, "enable_file_logging"), patch.object(cli, "navigate", return_value=200) as nav, patch.object(
        cli, "safe_type"
    ) as type_, patch.object(cli, "safe_click") as click, patch.object(
        cli, "wait_for_element_visible"
    ) as wait, patch.object(cli, "take_screenshot") as shot, patch.object(
        cli, "take_failure_screenshot"
    ) as failure_shot:
        yield {
            "navigate": nav,
            "safe_type": type_,
            "safe_click": click,
            "wait": wait,
            "screenshot": shot,
            "failure_screenshot": failure_shot,
        }


def test_parser_collects_steps() -> None:
    args = cli.build_parser().parse_args(
        ["--url", "/login", "--type", "#email=ada@example.com", "--type", "#pw=a=b", "--click", "#go"]
    )
    assert args.url == "/login"
    assert args.type_steps == [("#email", "ada@example.com"), ("#pw", "a=b")]
    assert args.click_steps == ["#go"]
    assert args.headless is None


def test_type_step_requires_separator() -> None:
    with pytest.raises(argparse.ArgumentTypeError):
        cli._type_step("#email")


def test_main_runs_steps_in_order(patched_cli: dict, cli_session: MagicMock) -> None:
    code = cli.main(
        ["--url", "/login", "--wait-for", "form", "--type", "#email=ada", "--click", "#go", "--screenshot", "done"]
    )

    assert code == 0
    patched_cli["navigate"].assert_called_once_with(cli_session, "/login")
    patched_cli["wait"].assert_called_once_with(cli_session, "form")
    patched_cli["safe_type"].assert_called_once_with(cli_session, "#email", "ada")
    patched_cli["safe_click"].assert_called_once_with(cli_session, "#go")
    patched_cli["screenshot"].assert_called_once_with(cli_session, "done")


def test_main_failure_takes_screenshot(patched_cli: dict, cli_session: MagicMock) -> None:
    error = InteractionFailedError("#go", 3, RuntimeError("intercepted"))
    patched_cli["safe_click"].side_effect = error

    code = cli.main(["--url", "/login", "--click", "#go"])

    assert code == 1
    patched_cli["failure_screenshot"].assert_called_once_with(cli_session, "smoke", error)


def test_main_config_error(tmp_path) -> None:
    bad = tmp_path / "bad.yaml"
    bad.write_text("- not a mapping\n")
    assert cli.main(["--url", "/", "--config", str(bad)]) == 2


def test_main_driver_error_takes_screenshot(patched_cli: dict, cli_session: MagicMock) -> None:
    error = RuntimeError("net::ERR_NAME_NOT_RESOLVED")
    patched_cli["navigate"].side_effect = error

    code = cli.main(["--url", "https://shop.invalid/"])

    assert code == 1
    patched_cli["failure_screenshot"].assert_called_once_with(cli_session, "smoke", error)
    patched_cli["safe_click"].assert_not_called()


def test_main_failure_screenshot_error_keeps_exit_code(patched_cli: dict) -> None:
    patched_cli["safe_click"].side_effect = InteractionFailedError("#go", 3, RuntimeError("intercepted"))
    patched_cli["failure_screenshot"].side_effect = RuntimeError("target closed")

    assert cli.main(["--url", "/login", "--click", "#go"]) == 1
