"""
Reusable helpers for rendering score records as tables and cards.
"""

from __future__ import annotations

from typing import Sequence

import pandas as pd
import streamlit as st

from score_dashboard.data.models import ScoreRecord
from score_dashboard.ui.components.formatting import format_display_time, format_display_times


def records_for_display(df: pd.DataFrame, newest_first: bool = True) -> pd.DataFrame:
    display = df[["id", "created_at", "score"]].copy()
    display["created_at"] = format_display_times(display["created_at"])
    display = display.rename(columns={"id": "ID", "created_at": "Created (JST)", "score": "Score"})
    if newest_first:
        display = display.iloc[::-1]
    return display.reset_index(drop=True)


def render_table(
    df: pd.DataFrame,
    height: int = 320,
    export_file_name: str = "scores.csv",
) -> None:
    if df.empty:
        st.info("No records to display.")
        return

    display = records_for_display(df)

    def _style_score(val):
        if val > 0:
            return "color: #ff6384;"
        if val < 0:
            return "color: #4bc0c0;"
        return ""

    st.dataframe(
        display.style.map(_style_score, subset=["Score"]),
        use_container_width=True,
        height=height,
        hide_index=True,
    )

    csv_bytes = display.to_csv(index=False).encode("utf-8")
    st.download_button(
        "Download CSV",
        data=csv_bytes,
        file_name=export_file_name,
        mime="text/csv",
    )


def render_record_cards(records: Sequence[ScoreRecord]) -> None:
    if not records:
        st.info("No records yet.")
        return
    for record in records:
        with st.container(border=True):
            st.markdown(f"**Score: {record.score}**")
            st.caption(f"Created: {format_display_time(record.created_at)}")
            st.caption(f"ID: {record.id}")
