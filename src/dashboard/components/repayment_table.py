"""Repayment table component."""

from __future__ import annotations

import pandas as pd
import streamlit as st

from src.dashboard.components.formatting import (
    NOT_AVAILABLE,
    display_text,
    format_currency,
    format_date,
    format_percentage,
)
from src.models.repayment import Repayment
from src.utils.date_utils import DEFAULT_TIMEZONE

TABLE_COLUMNS = ['Date', 'Product', 'Scrip', 'Type', 'Amount', 'TDS', 'TDS %', 'Net Amount', 'Bank Account']
EMPTY_MESSAGE = 'No repayments found matching the current filters.'

TYPE_COLORS = {
    'INTEREST': 'background-color: #dbeafe',
    'PRINCIPAL+INTEREST': 'background-color: #d1fae5',
}


def repayment_row(record: Repayment, tz: str = DEFAULT_TIMEZONE) -> dict[str, str]:
    """Display values for one record; missing fields become placeholders."""
    target = record.transferred_to
    return {
        'Date': format_date(record.repayment_date, tz),
        'Product': display_text(record.product_name),
        'Scrip': display_text(record.scrip_code, NOT_AVAILABLE),
        'Type': display_text(record.repayment_type),
        'Amount': format_currency(record.total_repayment_before_tds),
        'TDS': format_currency(record.tds_value),
        'TDS %': format_percentage(record.tds_percentage),
        'Net Amount': format_currency(record.total_repayment_after_tds),
        'Bank Account': display_text(target.account_no if target else None, NOT_AVAILABLE),
    }


def build_repayment_table(records: list[Repayment], tz: str = DEFAULT_TIMEZONE) -> pd.DataFrame:
    rows = [repayment_row(r, tz) for r in records]
    return pd.DataFrame(rows, columns=TABLE_COLUMNS)


def _type_color(value: str) -> str:
    return TYPE_COLORS.get(value, 'background-color: #f3f4f6')


def render_repayment_table(records: list[Repayment], tz: str = DEFAULT_TIMEZONE) -> None:
    st.markdown(f'**Upcoming Repayments ({len(records)} items)**')
    table = build_repayment_table(records, tz)
    if table.empty:
        st.caption(EMPTY_MESSAGE)
        return
    st.dataframe(table.style.map(_type_color, subset=['Type']), width='stretch', hide_index=True)
