"""Ordering of repayment records for the table view."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any
import unicodedata

from src.models.criteria import SortSpec
from src.models.repayment import Repayment
from src.utils.logging import get_logger

LOGGER = get_logger(__name__)

DEFAULT_SORT_KEY = 'date'


def natural_text_key(value: str) -> tuple[str, str]:
    """Alphabetical key: accent- and case-folded first, raw text as tie-break."""
    decomposed = unicodedata.normalize('NFKD', value)
    folded = ''.join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()
    return folded, value


def _text(attr: str) -> Callable[[Repayment], Any]:
    def _key(record: Repayment) -> Any:
        value = getattr(record, attr)
        return None if value is None else natural_text_key(value)

    return _key


SORT_KEY_FUNCS: dict[str, Callable[[Repayment], Any]] = {
    'date': lambda r: r.repayment_date,
    'amount': lambda r: r.total_repayment_before_tds,
    'product': _text('product_name'),
    'entity': _text('entity_name'),
}


def resolve_sort_key(key: str) -> Callable[[Repayment], Any]:
    """Key function for ``key``; unknown keys fall back to date order."""
    func = SORT_KEY_FUNCS.get(key)
    if func is None:
        LOGGER.debug('Unknown sort key %r, falling back to %r.', key, DEFAULT_SORT_KEY)
        return SORT_KEY_FUNCS[DEFAULT_SORT_KEY]
    return func


def sort_repayments(records: Iterable[Repayment], spec: SortSpec) -> list[Repayment]:
    """Return a new list ordered by ``spec``.

    Equal keys keep their input order in both directions. Records without a
    value for the key follow all keyed records, in input order.
    """
    key_func = resolve_sort_key(spec.key)
    keyed: list[tuple[Any, Repayment]] = []
    missing: list[Repayment] = []
    for record in records:
        value = key_func(record)
        if value is None:
            missing.append(record)
        else:
            keyed.append((value, record))
    keyed.sort(key=lambda pair: pair[0], reverse=spec.descending)
    return [record for _, record in keyed] + missing
