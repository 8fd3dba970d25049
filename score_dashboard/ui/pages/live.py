from __future__ import annotations

import streamlit as st
from streamlit_autorefresh import st_autorefresh

from score_dashboard.data.aggregation import latest_records, split_series
from score_dashboard.data.feed import get_feed, needs_refetch
from score_dashboard.ui.components.charts import render_plotly, score_line_chart
from score_dashboard.ui.components.tables import render_record_cards
from score_dashboard.ui.pages.context import PageContext
from score_dashboard.ui.pages.helpers import load_into, render_feed_status


def render(context: PageContext) -> None:
    settings = context.settings
    st.subheader(f"Score Data Graph, refreshed every {settings.refresh_interval_seconds} seconds")

    # The timer component exists only while this view is rendered; switching views removes it.
    tick = st_autorefresh(interval=settings.refresh_interval_ms, key="live_refresh")

    feed = get_feed("live")
    if needs_refetch(feed, tick, force_refresh=context.force_refresh, view_changed=context.view_changed):
        load_into(feed, settings)
        feed.last_tick = tick

    if not render_feed_status(feed):
        return

    records = feed.records
    if records.empty:
        st.info("The API returned no records yet.")
        return

    fig = score_line_chart(split_series(records), title="Fun vs Tired")
    render_plotly(fig, key="live_chart")

    st.markdown("#### Latest Records")
    render_record_cards(latest_records(records))
