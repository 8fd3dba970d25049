from __future__ import annotations

import streamlit as st
import structlog

from score_dashboard.data.aggregation import recompute
from score_dashboard.data.feed import get_feed
from score_dashboard.data.filters import apply_range_filter
from score_dashboard.ui.components.charts import render_plotly, totals_pie_chart
from score_dashboard.ui.components.formatting import format_points
from score_dashboard.ui.components.kpi import render_kpi_cards, totals_cards
from score_dashboard.ui.components.tables import render_table
from score_dashboard.ui.layout import range_filter_ui
from score_dashboard.ui.pages.context import PageContext
from score_dashboard.ui.pages.helpers import load_into, render_feed_status

logger = structlog.get_logger(__name__)


def render(context: PageContext) -> None:
    st.subheader("Fun vs Tired (Totals)")

    feed = get_feed("totals")
    # One-time load; later fetches only on an explicit refresh.
    if context.force_refresh or feed.fetch_count == 0:
        load_into(feed, context.settings)

    if not render_feed_status(feed):
        return

    date_range = range_filter_ui()
    if date_range.is_empty():
        st.info("The start is after the end, so the range contains no records.")

    records = feed.records
    filtered = apply_range_filter(records, date_range)
    totals = recompute(records, date_range)
    logger.debug(
        "totals_recomputed",
        fun=totals.fun,
        tired=totals.tired,
        records=len(filtered),
        range=filtered.attrs.get("applied_range"),
    )

    render_kpi_cards(totals_cards(totals, len(filtered)), columns=4)

    if totals.total == 0:
        st.info("No scores in the selected range.")
    else:
        render_plotly(totals_pie_chart(totals, title="Fun vs Tired (share of score)"), key="totals_pie")

    st.markdown("#### Totals")
    st.write(f"Fun: {format_points(totals.fun)}")
    st.write(f"Tired: {format_points(totals.tired)}")

    with st.expander("Records in range", expanded=False):
        render_table(filtered, export_file_name="scores_in_range.csv")
