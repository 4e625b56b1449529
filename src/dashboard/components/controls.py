"""Sidebar filter controls and state normalization helpers."""

from __future__ import annotations

from datetime import date
from typing import Any

import streamlit as st

from src.models.criteria import DateRange, FilterCriteria, SortSpec
from src.utils.date_utils import DEFAULT_TIMEZONE, end_of_day_ms, epoch_ms_to_timestamp, timestamp_to_epoch_ms
from src.utils.logging import get_logger

LOGGER = get_logger(__name__)

ALL_OPTION = ''
SORT_LABELS = {'date': 'Date', 'product': 'Product', 'amount': 'Amount', 'entity': 'Entity'}
FILTER_STATE_KEY = 'filter_criteria'
SORT_STATE_KEY = 'sort_spec'


def coerce_option(current: Any, options: list[Any], default: Any) -> Any:
    """Return a stable option value that is guaranteed to be in options."""
    if not options:
        return default
    if current in options:
        return current
    if default in options:
        return default
    return options[0]


def entity_label(value: str) -> str:
    """Entity names are stored lower-case; show them capitalized."""
    if not value:
        return 'All Entities'
    return value[:1].upper() + value[1:]


def criteria_from_inputs(
    *,
    product: str,
    entity: str,
    repayment_type: str,
    start: date,
    end: date,
    tz: str = DEFAULT_TIMEZONE,
) -> tuple[FilterCriteria, str | None]:
    """Build criteria from widget values.

    An inverted date range leaves the date facet unset and returns a
    warning message for the caller to display.
    """
    start_ms = timestamp_to_epoch_ms(start, tz)
    end_ms = end_of_day_ms(end, tz)
    warning = None
    date_range = None
    if start_ms > end_ms:
        warning = 'Start date is after end date; the date filter is ignored.'
        LOGGER.debug('Ignoring inverted date range %s > %s.', start, end)
    else:
        date_range = DateRange(start_ms, end_ms)
    criteria = FilterCriteria(
        product=product or None,
        entity=entity or None,
        repayment_type=repayment_type or None,
        date_range=date_range,
    )
    return criteria, warning


def _stable_selectbox(*, label: str, options: list[str], key: str, format_func=None) -> str:
    current = coerce_option(st.session_state.get(key, ALL_OPTION), options, ALL_OPTION)
    st.session_state[key] = current
    idx = options.index(current)
    if format_func is None:
        return st.selectbox(label, options, index=idx, key=key)
    return st.selectbox(label, options, index=idx, key=key, format_func=format_func)


def render_filter_controls(
    products: list[str],
    entities: list[str],
    repayment_types: list[str],
    default_range: DateRange,
    reset_range: DateRange,
    tz: str = DEFAULT_TIMEZONE,
) -> FilterCriteria:
    """Render the filter sidebar and return the resulting criteria."""
    if 'filter_start' not in st.session_state:
        st.session_state['filter_start'] = epoch_ms_to_timestamp(default_range.start, tz).date()
        st.session_state['filter_end'] = epoch_ms_to_timestamp(default_range.end, tz).date()

    with st.sidebar:
        st.subheader('Filters')
        if st.button('Reset Filters', key='filter_reset'):
            for key in ('filter_product', 'filter_entity', 'filter_type'):
                st.session_state[key] = ALL_OPTION
            st.session_state['filter_start'] = epoch_ms_to_timestamp(reset_range.start, tz).date()
            st.session_state['filter_end'] = epoch_ms_to_timestamp(reset_range.end, tz).date()

        product = _stable_selectbox(
            label='Product',
            options=[ALL_OPTION] + products,
            key='filter_product',
            format_func=lambda v: v or 'All Products',
        )
        entity = _stable_selectbox(
            label='Entity',
            options=[ALL_OPTION] + entities,
            key='filter_entity',
            format_func=entity_label,
        )
        repayment_type = _stable_selectbox(
            label='Repayment Type',
            options=[ALL_OPTION] + repayment_types,
            key='filter_type',
            format_func=lambda v: v or 'All Types',
        )
        st.caption('Date Range')
        start = st.date_input('From', key='filter_start')
        end = st.date_input('To', key='filter_end')

    criteria, warning = criteria_from_inputs(
        product=product,
        entity=entity,
        repayment_type=repayment_type,
        start=start,
        end=end,
        tz=tz,
    )
    if warning:
        st.sidebar.warning(warning)
    st.session_state[FILTER_STATE_KEY] = criteria
    return criteria


def current_sort_spec() -> SortSpec:
    spec = st.session_state.get(SORT_STATE_KEY)
    return spec if isinstance(spec, SortSpec) else SortSpec()


def render_sort_controls() -> SortSpec:
    """Render one button per sortable column; a click toggles the spec."""
    spec = current_sort_spec()
    columns = st.columns(len(SORT_LABELS))
    for column, (key, label) in zip(columns, SORT_LABELS.items()):
        marker = ''
        if spec.key == key:
            marker = ' ↑' if spec.direction == 'asc' else ' ↓'
        if column.button(f'{label}{marker}', key=f'sort_{key}'):
            spec = spec.toggled(key)
            st.session_state[SORT_STATE_KEY] = spec
            st.rerun()
    return spec
