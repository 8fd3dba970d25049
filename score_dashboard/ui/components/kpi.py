from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

import streamlit as st

from score_dashboard.data.models import AggregateTotals
from score_dashboard.ui.components.formatting import format_number, format_percent, format_points


@dataclass
class KpiCard:
    label: str
    value: Optional[float] = None
    value_display: Optional[str] = None
    unit: str = "number"  # number | points | percent
    decimals: int = 0
    help_text: Optional[str] = None


def format_card_value(card: KpiCard) -> str:
    if card.value_display is not None:
        return card.value_display
    if card.unit == "points":
        return format_points(card.value)
    if card.unit == "percent":
        return format_percent(card.value, decimals=card.decimals or 1)
    return format_number(card.value, decimals=card.decimals)


def totals_cards(totals: AggregateTotals, record_count: int) -> List[KpiCard]:
    return [
        KpiCard(label="Fun", value=totals.fun, unit="points", help_text="Sum of scores ≥ 0"),
        KpiCard(label="Tired", value=totals.tired, unit="points", help_text="Sum of |score| for scores < 0"),
        KpiCard(label="Fun Share", value=totals.fun_share, unit="percent"),
        KpiCard(label="Records in Range", value=record_count),
    ]


def render_kpi_cards(cards: Sequence[KpiCard], columns: int = 4) -> None:
    """
    Render KPI cards in a responsive grid using Streamlit columns.
    """
    cards = list(cards)
    if not cards:
        st.info("No totals available for the current range.")
        return

    columns = max(columns, 1)
    for idx in range(0, len(cards), columns):
        row_cards = cards[idx: idx + columns]
        cols = st.columns(len(row_cards))
        for col, card in zip(cols, row_cards):
            with col:
                st.metric(label=card.label, value=format_card_value(card))
                if card.help_text:
                    st.caption(card.help_text)
