"""
Utility helpers for formatting timestamps, score points, and percentages.
"""

from __future__ import annotations

from typing import Any, Optional

import pandas as pd

from score_dashboard.config import DISPLAY_TZ

PLACEHOLDER = "–"
DISPLAY_TIME_FORMAT = "%Y/%m/%d %H:%M:%S"


def format_display_time(value: Any) -> str:
    """Render a timestamp in JST as ``YYYY/MM/DD HH:MM:SS``. Naive values are taken as UTC."""
    if value is None:
        return PLACEHOLDER
    try:
        ts = pd.Timestamp(value)
    except (TypeError, ValueError):
        return PLACEHOLDER
    if pd.isna(ts):
        return PLACEHOLDER
    if ts.tzinfo is None:
        ts = ts.tz_localize("UTC")
    return ts.tz_convert(DISPLAY_TZ).strftime(DISPLAY_TIME_FORMAT)


def format_display_times(series: pd.Series) -> pd.Series:
    return series.map(format_display_time)


def format_number(value: Optional[float], decimals: int = 0) -> str:
    if value is None:
        return PLACEHOLDER
    try:
        return f"{value:,.{decimals}f}"
    except (TypeError, ValueError):
        return PLACEHOLDER


def format_points(value: Optional[float]) -> str:
    if value is None:
        return PLACEHOLDER
    return f"{format_number(value, 0)} pt"


def format_percent(value: Optional[float], decimals: int = 1) -> str:
    if value is None:
        return PLACEHOLDER
    try:
        return f"{value:.{decimals}f}%"
    except (TypeError, ValueError):
        return PLACEHOLDER
