from __future__ import annotations

from functools import partial

import streamlit as st

from score_dashboard.config import Settings
from score_dashboard.data.feed import STATUS_ERROR, STATUS_LOADING, FeedState, refresh
from score_dashboard.data.loader import fetch_records
from score_dashboard.ui.components.formatting import format_display_time


def load_into(feed: FeedState, settings: Settings) -> FeedState:
    fetcher = partial(
        fetch_records,
        url=settings.api_url,
        timeout=settings.request_timeout_seconds,
    )
    # Spinner only until the first successful load; later refreshes keep the page as is.
    if feed.is_first_load:
        with st.spinner("Loading..."):
            return refresh(feed, fetcher)
    return refresh(feed, fetcher)


def render_feed_status(feed: FeedState) -> bool:
    """Show the error banner / last-updated caption. Returns True when records can be drawn."""
    status = feed.status
    if status == STATUS_LOADING:
        st.info("Loading...")
        return False
    if status == STATUS_ERROR:
        # Nothing has loaded yet, so the error is all there is to show.
        st.error(f"Error: {feed.error}")
        return False

    # Ready: a failed refresh only adds a banner above the data already loaded.
    if feed.error:
        st.error(f"Error: {feed.error}")
    if feed.last_success_at is not None:
        st.caption(f"Last updated: {format_display_time(feed.last_success_at)} (JST)")
    return True
