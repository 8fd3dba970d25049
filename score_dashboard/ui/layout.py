"""
Layout helpers for the Streamlit application (page setup, navigation, range controls).
"""

from __future__ import annotations

import datetime as dt
from typing import Optional

import pandas as pd
import streamlit as st

from score_dashboard.config import VIEWS, ViewConfig
from score_dashboard.data.models import DateTimeRange
from score_dashboard.ui.components.charts import register_chart_theme

HOUR_MIN = 0
HOUR_MAX = 23


def setup_page() -> None:
    """Set Streamlit page configuration and one-time chart registration."""
    st.set_page_config(
        page_title="Fun vs Tired",
        layout="wide",
        page_icon=":chart_with_upwards_trend:",
    )
    register_chart_theme()


def sidebar_navigation() -> ViewConfig:
    """Render the view switcher and return the selected view."""
    st.sidebar.header("Views")
    labels = {view.key: view.label for view in VIEWS}
    selected_key = st.sidebar.radio(
        "Go to",
        options=[view.key for view in VIEWS],
        format_func=lambda key: labels[key],
        key="sd_active_view",
        label_visibility="collapsed",
    )
    return next(view for view in VIEWS if view.key == selected_key)


def _as_date(value, fallback: dt.date) -> dt.date:
    """Return a datetime.date from various input types, with a fallback.

    Handles pd.Timestamp, datetime.datetime, datetime.date, strings, and None.
    """
    if isinstance(value, pd.Timestamp):
        return value.date()
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if value is None:
        return fallback
    try:
        return pd.to_datetime(value).date()
    except (TypeError, ValueError):
        return fallback


def range_filter_ui(defaults: Optional[DateTimeRange] = None) -> DateTimeRange:
    """
    Render the date and hour controls and return the selected range.

    Defaults to today in JST, full 24 hours. A start after the end is passed
    through unchanged; the caller shows it as an empty range.
    """
    defaults = defaults or DateTimeRange.today()

    col_start, col_end = st.columns(2)
    with col_start:
        start_date = st.date_input(
            "Start date",
            value=_as_date(st.session_state.get("sd_range_start_date"), defaults.start_date),
            key="sd_range_start_date",
        )
        start_hour = st.slider(
            "Start hour",
            min_value=HOUR_MIN,
            max_value=HOUR_MAX,
            value=defaults.start_hour,
            key="sd_range_start_hour",
            format="%d:00",
        )
    with col_end:
        end_date = st.date_input(
            "End date",
            value=_as_date(st.session_state.get("sd_range_end_date"), defaults.end_date),
            key="sd_range_end_date",
        )
        end_hour = st.slider(
            "End hour",
            min_value=HOUR_MIN,
            max_value=HOUR_MAX,
            value=defaults.end_hour,
            key="sd_range_end_hour",
            format="%d:59",
        )

    return DateTimeRange(
        start_date=_as_date(start_date, defaults.start_date),
        end_date=_as_date(end_date, defaults.end_date),
        start_hour=int(start_hour),
        end_hour=int(end_hour),
    )
