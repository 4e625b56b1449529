import json

import pytest

from src.data.loader import load_investment_data, parse_investment_data
from src.data.validator import DataLoadError, validate_repayments
from src.models.repayment import Repayment


def _payload(repayments: list) -> dict:
    return {
        'upcomingRepayments': {
            'repaymentsList': repayments,
            'totalRepaymentNextMonth': 2000,
            'totalRepaymentNextMonthAfterTds': 1980,
            'totalRepaymentAllTime': 3000,
            'totalRepaymentAllTimeAfterTds': 2880,
            'totalRepaymentThisMonth': 1000,
            'totalRepaymentThisMonthAfterTds': 900,
            'totalRepaymentThisFinancialYear': 3000,
            'totalRepaymentThisFinancialYearAfterTds': 2880,
        }
    }


def _raw_repayment(**overrides) -> dict:
    raw = {
        'productId': 7,
        'productName': 'Bond A',
        'scripCode': 'BA26',
        'entityName': 'alpha finance',
        'repaymentDate': 1736899200000,
        'repaymentType': 'INTEREST',
        'tdsPercentage': 10,
        'tdsValue': 100,
        'totalRepaymentBeforeTds': 1000,
        'totalRepaymentAfterTds': 900,
        'transferredTo': {'accountNo': 'XXXX1234', 'bankLogo': 'logo.png'},
        'timeRanges': [1736899200000],
        'isTdsOnInterestApplicable': True,
    }
    raw.update(overrides)
    return raw


def test_loader_reads_records_and_summary(tmp_path) -> None:
    path = tmp_path / 'invest.json'
    path.write_text(json.dumps(_payload([_raw_repayment()])), encoding='utf-8')

    data = load_investment_data(str(path))

    assert len(data.repayments) == 1
    record = data.repayments[0]
    assert record.product_name == 'Bond A'
    assert record.total_repayment_before_tds == 1000.0
    assert record.transferred_to.account_no == 'XXXX1234'
    assert record.time_ranges == (1736899200000,)
    assert record.is_tds_on_interest_applicable is True
    assert data.summary.all_time == 3000.0
    assert data.summary.this_month_after_tds == 900.0


def test_wrong_typed_fields_degrade_to_none() -> None:
    raw = _raw_repayment(
        totalRepaymentBeforeTds='1,000',
        repaymentDate=None,
        transferredTo='XXXX1234',
        tdsPercentage=True,
        productName={'name': 'x'},
    )
    record = Repayment.from_dict(raw)
    assert record.total_repayment_before_tds is None
    assert record.repayment_date is None
    assert record.transferred_to is None
    assert record.tds_percentage is None
    assert record.product_name is None
    assert record.entity_name == 'alpha finance'


def test_non_object_entries_are_skipped(caplog) -> None:
    data = parse_investment_data(_payload([_raw_repayment(), 'garbage', 42, _raw_repayment(productName='B')]))
    assert [r.product_name for r in data.repayments] == ['Bond A', 'B']
    assert 'not objects' in caplog.text


def test_missing_summary_totals_degrade_to_none() -> None:
    data = parse_investment_data({'upcomingRepayments': {'repaymentsList': []}})
    assert data.repayments == ()
    assert data.summary.next_month is None


def test_missing_root_is_a_load_failure() -> None:
    with pytest.raises(DataLoadError, match='missing upcomingRepayments'):
        parse_investment_data({'somethingElse': {}})


def test_non_list_repayments_is_a_load_failure() -> None:
    with pytest.raises(DataLoadError, match='must be a list'):
        parse_investment_data({'upcomingRepayments': {'repaymentsList': {}}})


def test_missing_file_and_invalid_json_are_load_failures(tmp_path) -> None:
    with pytest.raises(DataLoadError, match='not found'):
        load_investment_data(str(tmp_path / 'absent.json'))
    bad = tmp_path / 'bad.json'
    bad.write_text('{not json', encoding='utf-8')
    with pytest.raises(DataLoadError, match='not valid JSON'):
        load_investment_data(str(bad))


def test_validator_reports_degraded_records() -> None:
    warnings = validate_repayments([Repayment(), Repayment(total_repayment_before_tds=1.0, repayment_date=1)])
    assert any('no totalRepaymentBeforeTds' in w for w in warnings)
    assert any('no repaymentDate' in w for w in warnings)
    assert any('no transferredTo' in w for w in warnings)


def test_unrepresentable_dates_degrade_without_breaking_siblings() -> None:
    data = parse_investment_data(_payload([
        _raw_repayment(repaymentDate=1e300, productName='Far'),
        _raw_repayment(repaymentDate=-1e300, productName='Past'),
        _raw_repayment(),
    ]))
    assert [r.repayment_date for r in data.repayments] == [None, None, 1736899200000]
    assert data.repayments[0].product_name == 'Far'


def test_non_finite_numbers_degrade_to_none() -> None:
    text = (
        '{"upcomingRepayments": {"repaymentsList": ['
        '{"repaymentDate": Infinity, "totalRepaymentBeforeTds": -Infinity, "tdsValue": NaN},'
        '{"productName": "ok", "productId": Infinity}'
        '], "totalRepaymentAllTime": Infinity}}'
    )
    data = parse_investment_data(json.loads(text))
    first, second = data.repayments
    assert first.repayment_date is None
    assert first.total_repayment_before_tds is None
    assert first.tds_value is None
    assert second.product_name == 'ok'
    assert second.product_id is None
    assert data.summary.all_time is None
