"""Discard-plan link construction."""

from __future__ import annotations

from collections.abc import Callable
from urllib.parse import quote

LOCK_ROUTE = "/lock"


def build_lock_url_builder(base_url: str) -> Callable[[str], str]:
    """Return a builder mapping a lock key to its discard URL on ``base_url``."""
    normalized_base_url = base_url.strip().rstrip("/")
    if not normalized_base_url:
        raise ValueError("base_url must be a non-empty URL.")

    def lock_url(lock_key: str) -> str:
        return f"{normalized_base_url}{LOCK_ROUTE}?id={quote(lock_key, safe='')}"

    return lock_url
