"""Harness configuration.

Settings are merged from three layers, later layers winning:

1. A YAML file (optional).
2. Environment variables: BASE_URL, BROWSER, HEADLESS, LOG_LEVEL.
3. Keyword overrides passed to load_config.
"""

import os
from pathlib import Path
from typing import Any, Literal

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ui_automation.core.errors import ConfigError
from ui_automation.core.logging import ErrorIds, logError

BrowserName = Literal["chromium", "firefox", "webkit"]

_ENV_KEYS = {
    "BASE_URL": "base_url",
    "BROWSER": "browser",
    "HEADLESS": "headless",
    "LOG_LEVEL": "log_level",
}


class HarnessConfig(BaseModel):
    """Settings shared by a session's waits, interactions and artifacts.

    Attributes:
        base_url: Prefix for relative URLs passed to navigate.
        browser: Browser engine to launch.
        headless: Launch without a visible window.
        user_data_dir: If set, launch a persistent context stored here.
        viewport_width: Viewport width in pixels.
        viewport_height: Viewport height in pixels.
        wait_timeout_ms: Default budget for waits and readiness checks.
        poll_interval_ms: Default polling interval.
        page_load_timeout_ms: Budget for navigation and document readiness.
        retry_count: Attempts per safe interaction.
        retry_delay_ms: Pause between interaction attempts.
        backoff_max_attempts: Default attempts for wait_with_backoff.
        backoff_base_delay_ms: Default first delay for wait_with_backoff.
        screenshot_dir: Directory for screenshots.
        log_dir: Directory for rotating log files.
        log_level: Console log level.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    base_url: str = ""
    browser: BrowserName = "chromium"
    headless: bool = True
    user_data_dir: str | None = None
    viewport_width: int = Field(default=1920, gt=0)
    viewport_height: int = Field(default=1080, gt=0)
    wait_timeout_ms: int = Field(default=10000, ge=0)
    poll_interval_ms: int = Field(default=500, gt=0)
    page_load_timeout_ms: int = Field(default=30000, ge=0)
    retry_count: int = Field(default=3, ge=1)
    retry_delay_ms: int = Field(default=1000, ge=0)
    backoff_max_attempts: int = Field(default=5, ge=1)
    backoff_base_delay_ms: int = Field(default=1000, ge=0)
    screenshot_dir: str = "screenshots"
    log_dir: str = "logs"
    log_level: str = "info"

    def resolve_url(self, url: str) -> str:
        """Join a relative URL onto base_url; absolute URLs pass through."""
        if not url or "://" not in url:
            if not self.base_url:
                return url
            return self.base_url.rstrip("/") + "/" + url.lstrip("/")
        return url


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logError(ErrorIds.CONFIG_INVALID, f"Cannot read config file {path}: {e}")
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        logError(ErrorIds.CONFIG_INVALID, f"Config file {path} is not a mapping")
        raise ConfigError(f"Config file {path} must contain a mapping at the top level")
    return data


def _read_env() -> dict[str, Any]:
    values: dict[str, Any] = {}
    for env_key, field in _ENV_KEYS.items():
        raw = os.environ.get(env_key)
        if raw is None or raw == "":
            continue
        if field == "headless":
            values[field] = raw.strip().lower() in ("1", "true", "yes", "on")
        else:
            values[field] = raw
    return values


def load_config(path: str | Path | None = None, **overrides: Any) -> HarnessConfig:
    """Load a HarnessConfig from YAML, the environment and overrides.

    Args:
        path: Optional YAML file path.
        **overrides: Field values taking precedence over file and environment.
                     None values are ignored.

    Returns:
        The merged HarnessConfig.

    Raises:
        ConfigError: If the file is unreadable, not a mapping, or the merged
                     values fail validation.
    """
    values: dict[str, Any] = {}
    if path is not None:
        values.update(_read_yaml(Path(path)))
    values.update(_read_env())
    values.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return HarnessConfig(**values)
    except ValidationError as e:
        logError(ErrorIds.CONFIG_INVALID, f"Invalid configuration: {e}")
        raise ConfigError(f"Invalid configuration: {e}") from e
