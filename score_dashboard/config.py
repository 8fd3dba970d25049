"""
Application-wide configuration constants and helper utilities.
"""

from __future__ import annotations

import datetime as dt
import os
from dataclasses import dataclass
from typing import List, Optional

import streamlit as st


@dataclass(frozen=True)
class ViewConfig:
    key: str
    label: str


# Ordered view definitions for the sidebar navigation
VIEWS: List[ViewConfig] = [
    ViewConfig("live", "Live"),
    ViewConfig("totals", "Totals"),
]

DEFAULT_API_URL = "https://hiikunz.pythonanywhere.com/json"
DEFAULT_REFRESH_INTERVAL_SECONDS = 10
DEFAULT_REQUEST_TIMEOUT_SECONDS = 10.0
DEFAULT_LOG_LEVEL = "INFO"

# Scores are displayed and filtered in JST regardless of the viewer's locale.
DISPLAY_TZ = dt.timezone(dt.timedelta(hours=9), name="JST")
LATEST_RECORDS_COUNT = 5


@dataclass(frozen=True)
class Settings:
    api_url: str
    refresh_interval_seconds: int
    request_timeout_seconds: float
    log_level: str

    @property
    def refresh_interval_ms(self) -> int:
        return self.refresh_interval_seconds * 1000


def get_setting(name: str, default: Optional[str] = None) -> Optional[str]:
    """Try env first, then st.secrets (if available)."""
    val = os.getenv(name)
    if val:
        return val
    try:
        sec = getattr(st, "secrets", None)
        if sec:
            v = sec.get(name)  # type: ignore[index]
            return str(v) if v is not None else default
    except Exception:
        # st.secrets raises when no secrets.toml exists outside Streamlit Cloud
        pass
    return default


def _positive_number(name: str, raw: Optional[str], cast, default):
    if raw is None or not str(raw).strip():
        return default
    try:
        value = cast(str(raw).strip())
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be greater than zero, got {raw!r}")
    return value


def load_settings() -> Settings:
    """Resolve settings from env / secrets, falling back to the built-in defaults."""
    api_url = (get_setting("SCORE_API_URL") or DEFAULT_API_URL).strip()
    refresh = _positive_number(
        "REFRESH_INTERVAL_SECONDS",
        get_setting("REFRESH_INTERVAL_SECONDS"),
        int,
        DEFAULT_REFRESH_INTERVAL_SECONDS,
    )
    timeout = _positive_number(
        "REQUEST_TIMEOUT_SECONDS",
        get_setting("REQUEST_TIMEOUT_SECONDS"),
        float,
        DEFAULT_REQUEST_TIMEOUT_SECONDS,
    )
    log_level = (get_setting("LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    return Settings(
        api_url=api_url,
        refresh_interval_seconds=refresh,
        request_timeout_seconds=timeout,
        log_level=log_level,
    )
