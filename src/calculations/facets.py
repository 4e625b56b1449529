"""Distinct facet values used to populate filter choices."""

from __future__ import annotations

from collections.abc import Iterable

from src.models.repayment import Repayment

FACET_FIELDS = {
    'product': 'product_name',
    'entity': 'entity_name',
    'repayment_type': 'repayment_type',
}


def extract_unique_values(records: Iterable[Repayment], field: str) -> list[str]:
    """Return distinct values of a facet in first-occurrence order.

    Records missing the field, or holding an empty string, are skipped.
    """
    if field not in FACET_FIELDS:
        raise ValueError(f'Unknown facet field {field!r}; expected one of {sorted(FACET_FIELDS)}.')
    attr = FACET_FIELDS[field]
    seen: dict[str, None] = {}
    for record in records:
        value = getattr(record, attr)
        if value:
            seen.setdefault(value, None)
    return list(seen)


def unique_products(records: Iterable[Repayment]) -> list[str]:
    return extract_unique_values(records, 'product')


def unique_entities(records: Iterable[Repayment]) -> list[str]:
    return extract_unique_values(records, 'entity')


def unique_repayment_types(records: Iterable[Repayment]) -> list[str]:
    return extract_unique_values(records, 'repayment_type')
