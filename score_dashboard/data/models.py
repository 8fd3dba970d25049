"""
Value types shared by the loader, the aggregation helpers, and the views.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd

from score_dashboard.config import DISPLAY_TZ

RECORD_COLUMNS: List[str] = ["id", "created_at", "score"]
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def _require_int(item: Dict[str, Any], key: str) -> int:
    value = item.get(key)
    # bool is an int subclass; the API never sends booleans for these fields
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key!r} must be an integer, got {value!r}")
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValueError(f"{key!r} is out of the 64-bit integer range: {value!r}")
    return value


def parse_timestamp(value: Any) -> pd.Timestamp:
    """Parse an API timestamp. Values without an offset are taken as UTC."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValueError("'created_at' is missing")
    if not isinstance(value, (str, dt.datetime)):
        raise ValueError(f"'created_at' must be a string or datetime, got {value!r}")
    try:
        ts = pd.Timestamp(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"'created_at' is not a timestamp: {value!r}") from exc
    if pd.isna(ts):
        raise ValueError(f"'created_at' is not a timestamp: {value!r}")
    if ts.tzinfo is None:
        return ts.tz_localize("UTC")
    return ts.tz_convert("UTC")


@dataclass(frozen=True)
class ScoreRecord:
    id: int
    created_at: pd.Timestamp
    score: int

    @classmethod
    def from_payload(cls, item: Any) -> "ScoreRecord":
        if not isinstance(item, dict):
            raise ValueError(f"record must be an object, got {type(item).__name__}")
        missing = [key for key in RECORD_COLUMNS if key not in item]
        if missing:
            raise ValueError(f"record is missing {', '.join(missing)}")
        return cls(
            id=_require_int(item, "id"),
            created_at=parse_timestamp(item["created_at"]),
            score=_require_int(item, "score"),
        )


@dataclass(frozen=True)
class DateTimeRange:
    """Closed date + hour window evaluated in the display timezone."""

    start_date: dt.date
    end_date: dt.date
    start_hour: int = 0
    end_hour: int = 23

    def __post_init__(self) -> None:
        for name in ("start_hour", "end_hour"):
            hour = getattr(self, name)
            if isinstance(hour, bool) or not isinstance(hour, int) or not 0 <= hour <= 23:
                raise ValueError(f"{name} must be an hour between 0 and 23, got {hour!r}")

    @classmethod
    def today(cls, now: Optional[dt.datetime] = None) -> "DateTimeRange":
        current = now.astimezone(DISPLAY_TZ) if now is not None else dt.datetime.now(DISPLAY_TZ)
        return cls(start_date=current.date(), end_date=current.date(), start_hour=0, end_hour=23)

    def bounds(self) -> Tuple[pd.Timestamp, pd.Timestamp]:
        start = pd.Timestamp(
            dt.datetime.combine(self.start_date, dt.time(self.start_hour, 0, 0), tzinfo=DISPLAY_TZ)
        )
        end = pd.Timestamp(
            dt.datetime.combine(self.end_date, dt.time(self.end_hour, 59, 59), tzinfo=DISPLAY_TZ)
        )
        return start, end

    def is_empty(self) -> bool:
        start, end = self.bounds()
        return start > end


@dataclass(frozen=True)
class AggregateTotals:
    fun: int = 0
    tired: int = 0

    @property
    def total(self) -> int:
        return self.fun + self.tired

    @property
    def fun_share(self) -> Optional[float]:
        """Percentage of the total contributed by fun, None when nothing was scored."""
        if self.total == 0:
            return None
        return self.fun / self.total * 100


def empty_record_frame() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "id": pd.Series(dtype="int64"),
            "created_at": pd.Series(dtype="datetime64[ns, UTC]"),
            "score": pd.Series(dtype="int64"),
        }
    )


def records_to_frame(records: List[ScoreRecord]) -> pd.DataFrame:
    """Build a RecordSet frame sorted ascending by created_at."""
    if not records:
        return empty_record_frame()
    df = pd.DataFrame(
        {
            "id": pd.Series([r.id for r in records], dtype="int64"),
            "created_at": pd.to_datetime([r.created_at for r in records], utc=True),
            "score": pd.Series([r.score for r in records], dtype="int64"),
        }
    )
    # Relative order of equal timestamps is not guaranteed to callers
    return df.sort_values("created_at", kind="mergesort").reset_index(drop=True)


def records_from_frame(df: pd.DataFrame) -> List[ScoreRecord]:
    return [
        ScoreRecord(id=int(row.id), created_at=row.created_at, score=int(row.score))
        for row in df[RECORD_COLUMNS].itertuples(index=False)
    ]
