"""Environment-driven renderer settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlsplit

from dotenv import load_dotenv

BASE_URL_ENV_VAR = "PLAN_COMMENTS_BASE_URL"
VERBOSE_ENV_VAR = "PLAN_COMMENTS_VERBOSE"
DEFAULT_BASE_URL = "http://localhost:4141"


class SettingsError(ValueError):
    """Raised when a configured setting has an invalid value."""


@dataclass(frozen=True, slots=True)
class RendererSettings:
    """Settings for rendering comments outside of a server process."""

    base_url: str = DEFAULT_BASE_URL
    verbose: bool = False


def _parse_base_url(value: str) -> str:
    parts = urlsplit(value)
    if parts.scheme not in {"http", "https"} or not parts.netloc:
        raise SettingsError(
            f"{BASE_URL_ENV_VAR} must be an absolute http(s) URL, got '{value}'."
        )
    return value


def load_settings(*, base_url_override: str | None = None) -> RendererSettings:
    """Load settings from the environment, reading `.env` from cwd first.

    A non-blank ``base_url_override`` replaces the configured base URL, which
    is then neither read nor validated.
    """
    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)

    verbose = os.getenv(VERBOSE_ENV_VAR) == "1"
    if base_url_override is not None and base_url_override.strip():
        return RendererSettings(base_url=base_url_override.strip(), verbose=verbose)

    base_url = os.getenv(BASE_URL_ENV_VAR)
    if base_url is None or not base_url.strip():
        return RendererSettings(verbose=verbose)
    return RendererSettings(base_url=_parse_base_url(base_url.strip()), verbose=verbose)
