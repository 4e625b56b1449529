"""Summary card renderer for the precomputed repayment totals."""

from __future__ import annotations

import streamlit as st

from src.dashboard.components.formatting import format_currency
from src.models.repayment import RepaymentSummary


def summary_card_rows(summary: RepaymentSummary) -> list[tuple[str, str, str]]:
    """(title, before-TDS text, after-TDS text) per card."""
    return [
        ('Next Month Repayment', format_currency(summary.next_month), format_currency(summary.next_month_after_tds)),
        ('This Month Repayment', format_currency(summary.this_month), format_currency(summary.this_month_after_tds)),
        (
            'This Financial Year',
            format_currency(summary.this_financial_year),
            format_currency(summary.this_financial_year_after_tds),
        ),
        ('All Time Repayment', format_currency(summary.all_time), format_currency(summary.all_time_after_tds)),
    ]


def render_summary_cards(summary: RepaymentSummary, filtered_count: int) -> None:
    """Render top-level KPI cards."""
    columns = st.columns(4)
    for column, (title, before_tds, after_tds) in zip(columns, summary_card_rows(summary)):
        column.metric(title, before_tds)
        column.caption(f'After TDS: {after_tds}')
    st.caption(f'{filtered_count:,d} repayments match the current filters.')
