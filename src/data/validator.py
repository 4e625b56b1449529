"""Input validation for the repayment dataset."""

from __future__ import annotations

from typing import Any

from src.models.repayment import Repayment, SUMMARY_FIELD_MAP

ROOT_KEY = 'upcomingRepayments'
LIST_KEY = 'repaymentsList'


class DataLoadError(ValueError):
    """Dataset cannot be used at all; surfaced as a load failure."""


def validate_payload(payload: Any) -> list[str]:
    """Check the document shape and return non-fatal warnings."""
    if not isinstance(payload, dict) or not isinstance(payload.get(ROOT_KEY), dict):
        raise DataLoadError(f'Invalid data structure: missing {ROOT_KEY}')
    root = payload[ROOT_KEY]
    if not isinstance(root.get(LIST_KEY), list):
        raise DataLoadError(f'Invalid data structure: {ROOT_KEY}.{LIST_KEY} must be a list')

    warnings: list[str] = []
    missing_totals = [key for key in SUMMARY_FIELD_MAP if key not in root]
    if missing_totals:
        warnings.append(f'Summary totals missing from dataset: {missing_totals}')

    skipped = sum(1 for item in root[LIST_KEY] if not isinstance(item, dict))
    if skipped:
        warnings.append(f'{skipped} repayment entries are not objects and were skipped.')
    return warnings


def validate_repayments(records: list[Repayment]) -> list[str]:
    """Report records whose key fields degraded to missing values."""
    warnings: list[str] = []

    no_amount = sum(1 for r in records if r.total_repayment_before_tds is None)
    if no_amount:
        warnings.append(f'{no_amount} repayments have no totalRepaymentBeforeTds and are excluded from totals.')

    no_date = sum(1 for r in records if r.repayment_date is None)
    if no_date:
        warnings.append(f'{no_date} repayments have no repaymentDate.')

    no_target = sum(1 for r in records if r.transferred_to is None)
    if no_target:
        warnings.append(f'{no_target} repayments have no transferredTo account.')

    return warnings
