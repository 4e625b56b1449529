"""Shared dashboard formatting helpers."""

from __future__ import annotations

import math

import plotly.graph_objects as go

from src.utils.date_utils import DEFAULT_TIMEZONE, epoch_ms_to_timestamp, is_representable_ms

NOT_AVAILABLE = 'N/A'
UNKNOWN = 'Unknown'
CURRENCY_SYMBOL = '₹'


def _group_indian(digits: str) -> str:
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs: list[str] = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ','.join(pairs + [tail])


def format_currency(amount: float | None) -> str:
    """INR amount with lakh/crore grouping, e.g. ``'₹1,23,456.78'``."""
    if amount is None or not math.isfinite(amount):
        return NOT_AVAILABLE
    sign = '-' if round(float(amount), 2) < 0 else ''
    whole, _, fraction = f'{abs(float(amount)):.2f}'.partition('.')
    return f'{sign}{CURRENCY_SYMBOL}{_group_indian(whole)}.{fraction}'


def format_date(timestamp_ms: int | None, tz: str = DEFAULT_TIMEZONE) -> str:
    """Short date such as ``'Jan 15, 2025'``."""
    if not is_representable_ms(timestamp_ms):
        return NOT_AVAILABLE
    ts = epoch_ms_to_timestamp(timestamp_ms, tz)
    return f'{ts.strftime("%b")} {ts.day}, {ts.year}'


def format_percentage(value: float | None) -> str:
    if value is None:
        return NOT_AVAILABLE
    return f'{value:g}%'


def display_text(value: str | None, placeholder: str = UNKNOWN) -> str:
    return value if value else placeholder


def plot_axis_number_format(fig: go.Figure, *, y_axes: list[str]) -> go.Figure:
    """Apply thousand separators and consistent tick formatting to selected y-axes."""
    layout = fig.layout
    for axis_name in y_axes:
        axis = getattr(layout, axis_name, None)
        if axis is None:
            continue
        axis.separatethousands = True
        axis.tickprefix = CURRENCY_SYMBOL
    return apply_plot_layout_hygiene(fig)


def apply_plot_layout_hygiene(fig: go.Figure) -> go.Figure:
    """Apply consistent spacing so legends and axis titles do not overlap."""
    fig.update_layout(
        margin=dict(t=72, r=48, b=96, l=72),
        legend=dict(
            orientation='h',
            yanchor='top',
            y=-0.2,
            xanchor='left',
            x=0.0,
            bgcolor='rgba(0,0,0,0)',
        ),
    )
    fig.update_xaxes(automargin=True, title_standoff=14)
    fig.update_yaxes(automargin=True, title_standoff=12)
    return fig
