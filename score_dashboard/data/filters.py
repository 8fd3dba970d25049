"""
Filter utilities that apply the date/hour range selection to the score records.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import pandas as pd

from score_dashboard.config import DISPLAY_TZ
from score_dashboard.data.models import DateTimeRange


def apply_range_filter(df: pd.DataFrame, date_range: Optional[DateTimeRange]) -> pd.DataFrame:
    """
    Keep the records whose created_at, seen in JST, lies inside the range.

    Both bounds are inclusive. A range whose start is after its end yields an
    empty frame rather than an error. ``None`` means no filtering.
    """
    filtered = df.copy()
    if date_range is None:
        filtered.attrs["applied_range"] = None
        return filtered

    if not filtered.empty:
        start, end = date_range.bounds()
        # Compared at whole-second precision so HH:59:59.xxx still falls inside the end hour
        created_local = filtered["created_at"].dt.tz_convert(DISPLAY_TZ).dt.floor("s")
        filtered = filtered[(created_local >= start) & (created_local <= end)]

    filtered.attrs["applied_range"] = serialize_range(date_range)
    return filtered


def serialize_range(date_range: DateTimeRange) -> Dict[str, Any]:
    """
    Convert the DateTimeRange dataclass to a JSON-serialisable dictionary to be
    stored in session_state or used for logging/debugging.
    """
    start, end = date_range.bounds()
    return {
        "start_date": date_range.start_date.isoformat(),
        "end_date": date_range.end_date.isoformat(),
        "start_hour": date_range.start_hour,
        "end_hour": date_range.end_hour,
        "start": start.isoformat(),
        "end": end.isoformat(),
    }
