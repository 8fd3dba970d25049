"""
Derived views over a RecordSet: the fun/tired series split for the live chart
and the range totals for the summary view.

The two operations bucket a zero score differently. The series split drops
it from both lines, the totals count it toward fun. Keep them separate.
"""

from __future__ import annotations

from typing import List, Optional

import numpy as np
import pandas as pd

from score_dashboard.config import LATEST_RECORDS_COUNT
from score_dashboard.data.filters import apply_range_filter
from score_dashboard.data.models import (
    AggregateTotals,
    DateTimeRange,
    ScoreRecord,
    records_from_frame,
)


def split_series(df: pd.DataFrame) -> pd.DataFrame:
    """Split scores into aligned fun / tired columns, NaN where a point is absent."""
    scores = df["score"]
    return pd.DataFrame(
        {
            "created_at": df["created_at"],
            "fun": scores.where(scores > 0, np.nan).astype("float64"),
            "tired": scores.abs().where(scores < 0, np.nan).astype("float64"),
        },
        index=df.index,
    )


def compute_totals(df: pd.DataFrame, date_range: Optional[DateTimeRange] = None) -> AggregateTotals:
    filtered = apply_range_filter(df, date_range)
    if filtered.empty:
        return AggregateTotals()
    scores = filtered["score"]
    fun = int(scores[scores >= 0].sum())
    tired = int(scores[scores < 0].abs().sum())
    return AggregateTotals(fun=fun, tired=tired)


# Called explicitly by the totals view after any change to records or range.
recompute = compute_totals


def latest_records(df: pd.DataFrame, n: int = LATEST_RECORDS_COUNT) -> List[ScoreRecord]:
    """Return the last ``n`` records, newest first."""
    if df.empty or n <= 0:
        return []
    return list(reversed(records_from_frame(df.tail(n))))
