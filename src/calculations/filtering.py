"""Facet and date-range filtering of repayment records."""

from __future__ import annotations

from collections.abc import Iterable

from src.models.criteria import FilterCriteria
from src.models.repayment import Repayment


def _facet_matches(expected: str | None, actual: str | None) -> bool:
    if not expected:
        return True
    return actual == expected


def matches(record: Repayment, criteria: FilterCriteria) -> bool:
    """True when ``record`` satisfies every constrained facet of ``criteria``."""
    if not _facet_matches(criteria.product, record.product_name):
        return False
    if not _facet_matches(criteria.entity, record.entity_name):
        return False
    if not _facet_matches(criteria.repayment_type, record.repayment_type):
        return False
    if criteria.date_range is not None:
        if record.repayment_date is None or not criteria.date_range.contains(record.repayment_date):
            return False
    return True


def filter_repayments(records: Iterable[Repayment], criteria: FilterCriteria) -> list[Repayment]:
    """Return a new list of the records matching all facets, in input order."""
    return [record for record in records if matches(record, criteria)]
