"""Chart-ready reductions over repayment records.

Every reduction sums ``total_repayment_before_tds``. Records without that
amount are left out of the sums entirely, so they never open a bucket on
their own; they still appear in filtered and sorted output.
"""

from __future__ import annotations

from collections.abc import Iterable
import math
from typing import Any

import pandas as pd

from src.models.repayment import Repayment
from src.utils.date_utils import DEFAULT_TIMEZONE, is_representable_ms, month_start

UNKNOWN_CATEGORY = 'Unknown'
MONTH_LABEL_FORMAT = '%b %Y'

MONTHLY_COLUMNS = ['month_start', 'label', 'amount']
DISTRIBUTION_COLUMNS = ['name', 'amount']


def _with_amount(records: Iterable[Repayment]) -> list[Repayment]:
    return [
        r for r in records
        if r.total_repayment_before_tds is not None and math.isfinite(r.total_repayment_before_tds)
    ]


def monthly_totals(records: Iterable[Repayment], tz: str = DEFAULT_TIMEZONE) -> pd.DataFrame:
    """Sum amounts per calendar month, ordered chronologically.

    Labels look like ``'Jan 2025'``; ordering uses ``month_start`` rather
    than the label text. Records without a usable date are skipped.
    """
    rows = [
        {'month_start': month_start(r.repayment_date, tz), 'amount': float(r.total_repayment_before_tds)}
        for r in _with_amount(records)
        if is_representable_ms(r.repayment_date)
    ]
    if not rows:
        return pd.DataFrame(columns=MONTHLY_COLUMNS)

    grouped = pd.DataFrame(rows).groupby('month_start', as_index=False)['amount'].sum()
    grouped = grouped.sort_values('month_start', kind='stable').reset_index(drop=True)
    grouped['label'] = grouped['month_start'].dt.strftime(MONTH_LABEL_FORMAT)
    return grouped[MONTHLY_COLUMNS]


def _distribution(records: Iterable[Repayment], attr: str) -> pd.DataFrame:
    rows = [
        {'name': getattr(r, attr) or UNKNOWN_CATEGORY, 'amount': float(r.total_repayment_before_tds)}
        for r in _with_amount(records)
    ]
    if not rows:
        return pd.DataFrame(columns=DISTRIBUTION_COLUMNS)
    grouped = pd.DataFrame(rows).groupby('name', sort=False, as_index=False)['amount'].sum()
    return grouped[DISTRIBUTION_COLUMNS].reset_index(drop=True)


def distribution_by_type(records: Iterable[Repayment]) -> pd.DataFrame:
    """Sum amounts per repayment type in first-occurrence order."""
    return _distribution(records, 'repayment_type')


def distribution_by_product(records: Iterable[Repayment]) -> pd.DataFrame:
    """Sum amounts per product name in first-occurrence order."""
    return _distribution(records, 'product_name')


def as_records(frame: pd.DataFrame) -> list[dict[str, Any]]:
    return frame.to_dict(orient='records')
