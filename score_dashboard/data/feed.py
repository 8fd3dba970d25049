"""
Per-view holder for the current RecordSet and the outcome of the last fetch.

Every fetch is tagged with a monotonically increasing sequence number. A
result carrying a number at or below the last applied one is discarded, so a
slow response can never overwrite newer data.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Callable, Optional

import pandas as pd
import streamlit as st
import structlog

from score_dashboard.data.errors import FetchError

logger = structlog.get_logger(__name__)

STATUS_LOADING = "loading"
STATUS_ERROR = "error"
STATUS_READY = "ready"


@dataclass
class FeedState:
    name: str = "feed"
    records: Optional[pd.DataFrame] = None
    error: Optional[str] = None
    issued: int = 0
    applied: int = 0
    fetch_count: int = 0
    last_success_at: Optional[dt.datetime] = None
    last_tick: Optional[int] = None

    @property
    def has_data(self) -> bool:
        return self.records is not None

    @property
    def is_first_load(self) -> bool:
        return self.records is None

    @property
    def status(self) -> str:
        if self.records is not None:
            return STATUS_READY
        if self.error is not None:
            return STATUS_ERROR
        return STATUS_LOADING

    def begin(self) -> int:
        self.issued += 1
        self.fetch_count += 1
        return self.issued

    def _is_stale(self, seq: int) -> bool:
        if seq <= self.applied:
            logger.info("stale_response_discarded", feed=self.name, seq=seq, applied=self.applied)
            return True
        return False

    def apply_success(self, seq: int, records: pd.DataFrame) -> bool:
        if self._is_stale(seq):
            return False
        self.records = records
        self.error = None
        self.applied = seq
        self.last_success_at = dt.datetime.now(dt.timezone.utc)
        return True

    def apply_failure(self, seq: int, error: FetchError) -> bool:
        """Record the error message; previously loaded records stay in place."""
        if self._is_stale(seq):
            return False
        self.error = str(error)
        self.applied = seq
        return True


def refresh(state: FeedState, fetcher: Callable[[], pd.DataFrame]) -> FeedState:
    seq = state.begin()
    try:
        records = fetcher()
    except FetchError as exc:
        state.apply_failure(seq, exc)
        logger.info(
            "feed_refresh_failed",
            feed=state.name,
            seq=seq,
            kind=exc.kind,
            keeps_previous=state.has_data,
        )
        return state
    state.apply_success(seq, records)
    return state


def needs_refetch(
    state: FeedState,
    tick: Optional[int],
    force_refresh: bool = False,
    view_changed: bool = False,
) -> bool:
    """Decide whether a timer-driven view should fetch on this render.

    Fetches on an explicit refresh, on returning to the view, and whenever the
    timer counter differs from the one seen at the last fetch (including the
    first render, when no tick has been seen yet).
    """
    return force_refresh or view_changed or tick != state.last_tick


def get_feed(key: str) -> FeedState:
    """Return the FeedState stored in session_state under ``key``, creating it on first use."""
    session_key = f"feed_{key}"
    if session_key not in st.session_state:
        st.session_state[session_key] = FeedState(name=key)
    return st.session_state[session_key]
