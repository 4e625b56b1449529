"""Single recomputation pass: filter, sort, then aggregate."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import pandas as pd

from src.calculations.aggregation import distribution_by_product, distribution_by_type, monthly_totals
from src.calculations.filtering import filter_repayments
from src.calculations.sorting import sort_repayments
from src.models.criteria import DateRange, FilterCriteria, SortSpec
from src.models.repayment import Repayment
from src.utils.date_utils import DEFAULT_RANGE_START_MS, DEFAULT_TIMEZONE, ONE_YEAR_MS


@dataclass(frozen=True)
class DashboardView:
    """Derived outputs for one (records, criteria, sort spec) triple."""

    repayments: list[Repayment]
    monthly_totals: pd.DataFrame
    type_distribution: pd.DataFrame
    product_distribution: pd.DataFrame

    @property
    def count(self) -> int:
        return len(self.repayments)


def default_filter_criteria(now_ms: int) -> FilterCriteria:
    """Initial dashboard state: from 2025-01-01 through one year ahead."""
    return FilterCriteria(date_range=DateRange(DEFAULT_RANGE_START_MS, now_ms + ONE_YEAR_MS))


def reset_filter_criteria(now_ms: int) -> FilterCriteria:
    """State after 'Reset Filters': no facets, epoch through one year ahead."""
    return FilterCriteria(date_range=DateRange(0, now_ms + ONE_YEAR_MS))


def build_dashboard_view(
    records: Iterable[Repayment],
    criteria: FilterCriteria,
    spec: SortSpec,
    tz: str = DEFAULT_TIMEZONE,
) -> DashboardView:
    """Apply criteria and ordering, then compute chart series from the result."""
    ordered = sort_repayments(filter_repayments(records, criteria), spec)
    return DashboardView(
        repayments=ordered,
        monthly_totals=monthly_totals(ordered, tz=tz),
        type_distribution=distribution_by_type(ordered),
        product_distribution=distribution_by_product(ordered),
    )
