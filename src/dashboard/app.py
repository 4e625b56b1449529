"""Streamlit app entrypoint for the investment repayment dashboard."""

from __future__ import annotations

from pathlib import Path
import sys
import time

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import streamlit as st

from src.calculations.facets import unique_entities, unique_products, unique_repayment_types
from src.calculations.pipeline import build_dashboard_view, default_filter_criteria, reset_filter_criteria
from src.dashboard.components.controls import render_filter_controls, render_sort_controls
from src.dashboard.components.repayment_table import render_repayment_table
from src.dashboard.components.summary_cards import render_summary_cards
from src.dashboard.plots.repayment_charts import render_repayment_charts
from src.data.loader import DEFAULT_DATA_FILENAME, load_investment_data
from src.data.validator import DataLoadError
from src.models.repayment import InvestmentData
from src.utils.logging import get_logger

LOGGER = get_logger(__name__)

DEFAULT_INPUT_PATH = PROJECT_ROOT / DEFAULT_DATA_FILENAME
LOAD_ERROR_MESSAGE = 'Failed to load investment data. Please try again later.'


@st.cache_data
def _load(path: str) -> InvestmentData:
    return load_investment_data(path)


@st.cache_data
def _facets(path: str) -> tuple[list[str], list[str], list[str]]:
    records = _load(path).repayments
    return unique_products(records), unique_entities(records), unique_repayment_types(records)


def main() -> None:
    st.set_page_config(page_title='Investment Repayment Dashboard', layout='wide')
    st.title('Investment Repayment Dashboard')
    st.caption('Interactive visualization of upcoming interest repayments')

    with st.sidebar:
        input_path = st.text_input(
            'Dataset path',
            value=st.session_state.get('input_path', str(DEFAULT_INPUT_PATH)),
            key='input_path',
        )

    try:
        data = _load(input_path)
    except DataLoadError as exc:
        LOGGER.error('Error loading data: %s', exc)
        st.error(LOAD_ERROR_MESSAGE)
        st.caption(str(exc))
        st.stop()

    products, entities, repayment_types = _facets(input_path)
    now_ms = int(time.time() * 1000)
    criteria = render_filter_controls(
        products,
        entities,
        repayment_types,
        default_range=default_filter_criteria(now_ms).date_range,
        reset_range=reset_filter_criteria(now_ms).date_range,
    )

    st.markdown('Sort by')
    spec = render_sort_controls()
    view = build_dashboard_view(data.repayments, criteria, spec)

    render_summary_cards(data.summary, view.count)
    render_repayment_charts(view.monthly_totals, view.type_distribution, view.product_distribution)
    render_repayment_table(view.repayments)


if __name__ == '__main__':
    main()
