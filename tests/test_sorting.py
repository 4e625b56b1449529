from src.calculations.sorting import natural_text_key, sort_repayments
from src.models.criteria import SortSpec
from src.models.repayment import Repayment


def _rec(tag: str, date: int | None = None, amount: float | None = None,
         product: str | None = None, entity: str | None = None) -> Repayment:
    return Repayment(
        scrip_code=tag,
        repayment_date=date,
        total_repayment_before_tds=amount,
        product_name=product,
        entity_name=entity,
    )


def _tags(records: list[Repayment]) -> list[str]:
    return [r.scrip_code for r in records]


def test_sort_by_amount_descending() -> None:
    records = [_rec('a', amount=1000.0), _rec('b', amount=2000.0)]
    out = sort_repayments(records, SortSpec('amount', 'desc'))
    assert [r.total_repayment_before_tds for r in out] == [2000.0, 1000.0]


def test_sort_by_date_ascending_returns_new_list() -> None:
    records = [_rec('a', date=30), _rec('b', date=10), _rec('c', date=20)]
    out = sort_repayments(records, SortSpec('date', 'asc'))
    assert _tags(out) == ['b', 'c', 'a']
    assert _tags(records) == ['a', 'b', 'c']


def test_sort_is_stable_in_both_directions() -> None:
    records = [
        _rec('x1', amount=5.0),
        _rec('y', amount=1.0),
        _rec('x2', amount=5.0),
        _rec('z', amount=9.0),
    ]
    asc = sort_repayments(records, SortSpec('amount', 'asc'))
    desc = sort_repayments(records, SortSpec('amount', 'desc'))
    assert _tags(asc) == ['y', 'x1', 'x2', 'z']
    assert _tags(desc) == ['z', 'x1', 'x2', 'y']


def test_sort_is_idempotent_permutation() -> None:
    records = [_rec(str(i), date=(i * 7) % 5) for i in range(10)]
    spec = SortSpec('date', 'desc')
    once = sort_repayments(records, spec)
    assert sort_repayments(once, spec) == once
    assert sorted(_tags(once)) == sorted(_tags(records))


def test_unknown_key_falls_back_to_date() -> None:
    records = [_rec('late', date=20), _rec('early', date=10)]
    out = sort_repayments(records, SortSpec('coupon', 'asc'))
    assert _tags(out) == ['early', 'late']


def test_text_keys_sort_alphabetically_ignoring_case_and_accents() -> None:
    records = [
        _rec('1', product='beta'),
        _rec('2', product='Alpha'),
        _rec('3', product='Éclair'),
        _rec('4', product='delta'),
    ]
    out = sort_repayments(records, SortSpec('product', 'asc'))
    assert [r.product_name for r in out] == ['Alpha', 'beta', 'delta', 'Éclair']


def test_entity_sort_descending() -> None:
    records = [_rec('1', entity='kinara'), _rec('2', entity='vivriti'), _rec('3', entity='aye')]
    out = sort_repayments(records, SortSpec('entity', 'desc'))
    assert [r.entity_name for r in out] == ['vivriti', 'kinara', 'aye']


def test_missing_keys_go_last_in_input_order() -> None:
    records = [_rec('m1'), _rec('a', amount=2.0), _rec('m2'), _rec('b', amount=1.0)]
    asc = sort_repayments(records, SortSpec('amount', 'asc'))
    desc = sort_repayments(records, SortSpec('amount', 'desc'))
    assert _tags(asc) == ['b', 'a', 'm1', 'm2']
    assert _tags(desc) == ['a', 'b', 'm1', 'm2']


def test_empty_input_sorts_to_empty_list() -> None:
    assert sort_repayments([], SortSpec()) == []


def test_natural_text_key_orders_case_variants_deterministically() -> None:
    assert natural_text_key('abc') < natural_text_key('ABD')
    assert natural_text_key('ABC') != natural_text_key('abc')


def test_sort_spec_toggle_flips_active_column_only() -> None:
    spec = SortSpec('date', 'asc')
    assert spec.toggled('date') == SortSpec('date', 'desc')
    assert spec.toggled('date').toggled('date') == SortSpec('date', 'asc')
    assert SortSpec('date', 'desc').toggled('amount') == SortSpec('amount', 'asc')
