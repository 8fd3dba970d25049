"""
Plotly chart factory functions with consistent styling for the dashboard.
"""

from __future__ import annotations

from typing import Optional

import pandas as pd
import plotly.graph_objects as go
import plotly.io as pio
import streamlit as st

from score_dashboard.config import DISPLAY_TZ
from score_dashboard.data.models import AggregateTotals
from score_dashboard.ui.components.formatting import DISPLAY_TIME_FORMAT, format_display_times


TEMPLATE_NAME = "score_dashboard"
FUN_COLOR = "rgb(255, 99, 132)"
TIRED_COLOR = "rgb(75, 192, 192)"
FUN_FILL = "rgba(255, 99, 132, 0.6)"
TIRED_FILL = "rgba(75, 192, 192, 0.6)"
FUN_SERIES_LABEL = "Fun (positive score)"
TIRED_SERIES_LABEL = "Tired (negative score)"
PIE_LABELS = ["Fun", "Tired"]

_theme_registered = False


def register_chart_theme() -> None:
    """Register the dashboard template once per process and make it the plotly default."""
    global _theme_registered
    if _theme_registered:
        return
    template = go.layout.Template(pio.templates["plotly_white"])
    template.layout.colorway = [FUN_COLOR, TIRED_COLOR]
    template.layout.legend = dict(orientation="h", yanchor="bottom", y=1.02, x=0)
    template.layout.margin = dict(l=40, r=20, t=60, b=40)
    pio.templates[TEMPLATE_NAME] = template
    pio.templates.default = TEMPLATE_NAME
    _theme_registered = True


def _configure_layout(
    fig: go.Figure,
    title: Optional[str] = None,
    xaxis_title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
    cartesian: bool = True,
) -> go.Figure:
    fig.update_layout(
        template=TEMPLATE_NAME,
        title=title,
    )
    if not cartesian:
        return fig
    fig.update_layout(hovermode="x unified")
    if xaxis_title:
        fig.update_xaxes(title=xaxis_title)
    if yaxis_title:
        fig.update_yaxes(title=yaxis_title)
    fig.update_xaxes(showgrid=False)
    fig.update_yaxes(showgrid=True, zeroline=True)
    return fig


def render_plotly(fig: go.Figure, key: Optional[str] = None) -> None:
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False}, key=key)


def score_line_chart(series: pd.DataFrame, title: Optional[str] = None) -> go.Figure:
    """Line chart of the fun / tired split.

    Absent points (NaN) are skipped by the line instead of being drawn at zero.
    The x axis carries JST wall-clock time so records sharing a second stay apart.
    """
    register_chart_theme()
    local_times = series["created_at"].dt.tz_convert(DISPLAY_TZ).dt.tz_localize(None)
    labels = format_display_times(series["created_at"]).tolist()
    fig = go.Figure()
    for column, name, color in (
        ("fun", FUN_SERIES_LABEL, FUN_COLOR),
        ("tired", TIRED_SERIES_LABEL, TIRED_COLOR),
    ):
        values = [None if pd.isna(v) else float(v) for v in series[column]]
        fig.add_trace(
            go.Scatter(
                x=local_times.tolist(),
                y=values,
                customdata=labels,
                mode="lines+markers",
                name=name,
                line=dict(color=color, shape="spline", smoothing=0.1),
                connectgaps=True,
                hovertemplate="%{customdata}<br>%{y}<extra>" + name + "</extra>",
            )
        )
    fig.update_xaxes(tickformat=DISPLAY_TIME_FORMAT)
    return _configure_layout(fig, title, xaxis_title="Time (JST)", yaxis_title="Score")


def totals_pie_chart(totals: AggregateTotals, title: Optional[str] = None) -> go.Figure:
    register_chart_theme()
    fig = go.Figure(
        go.Pie(
            labels=PIE_LABELS,
            values=[totals.fun, totals.tired],
            name="Score distribution",
            marker=dict(colors=[FUN_FILL, TIRED_FILL], line=dict(width=1)),
            sort=False,
        )
    )
    return _configure_layout(fig, title, cartesian=False)
