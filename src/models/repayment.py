"""Repayment domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Any

from src.utils.date_utils import is_representable_ms


def _opt_str(value: Any) -> str | None:
    if value is None or isinstance(value, (dict, list, bool)):
        return None
    return str(value)


def _opt_float(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        out = float(value)
    except OverflowError:
        return None
    return out if math.isfinite(out) else None


def _opt_int(value: Any) -> int | None:
    out = _opt_float(value)
    return None if out is None else int(out)


def _opt_epoch_ms(value: Any) -> int | None:
    """Millisecond timestamp within the range pandas can represent."""
    out = _opt_int(value)
    return out if is_representable_ms(out) else None


def _opt_bool(value: Any) -> bool | None:
    return value if isinstance(value, bool) else None


@dataclass(frozen=True)
class TransferTarget:
    """Bank account a repayment is credited to."""

    account_no: str | None = None
    bank_logo: str | None = None

    @classmethod
    def from_dict(cls, raw: Any) -> TransferTarget | None:
        if not isinstance(raw, dict):
            return None
        return cls(account_no=_opt_str(raw.get('accountNo')), bank_logo=_opt_str(raw.get('bankLogo')))


@dataclass(frozen=True)
class Repayment:
    """A single upcoming repayment.

    No field is guaranteed by the producing system, so every attribute may be
    ``None``. Values of the wrong type are dropped to ``None`` on construction
    from raw JSON instead of failing the whole record.
    """

    product_id: int | None = None
    product_name: str | None = None
    scrip_code: str | None = None
    entity_name: str | None = None
    repayment_date: int | None = None
    status: str | None = None
    principal_repayment: float | None = None
    interest_repayment: float | None = None
    tds_percentage: float | None = None
    tds_value: float | None = None
    total_repayment_before_tds: float | None = None
    total_repayment_after_tds: float | None = None
    total_quantity: float | None = None
    repayment_type: str | None = None
    transferred_to: TransferTarget | None = None
    time_ranges: tuple[int, ...] = field(default_factory=tuple)
    product_type: str | None = None
    is_tds_on_interest_applicable: bool | None = None
    tds_exemption_threshold_amount: float | None = None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Repayment:
        """Build a record from a camelCase JSON object."""
        ranges = raw.get('timeRanges')
        time_ranges: tuple[int, ...] = ()
        if isinstance(ranges, list):
            time_ranges = tuple(v for v in (_opt_int(r) for r in ranges) if v is not None)
        return cls(
            product_id=_opt_int(raw.get('productId')),
            product_name=_opt_str(raw.get('productName')),
            scrip_code=_opt_str(raw.get('scripCode')),
            entity_name=_opt_str(raw.get('entityName')),
            repayment_date=_opt_epoch_ms(raw.get('repaymentDate')),
            status=_opt_str(raw.get('status')),
            principal_repayment=_opt_float(raw.get('principalRepayment')),
            interest_repayment=_opt_float(raw.get('interestRepayment')),
            tds_percentage=_opt_float(raw.get('tdsPercentage')),
            tds_value=_opt_float(raw.get('tdsValue')),
            total_repayment_before_tds=_opt_float(raw.get('totalRepaymentBeforeTds')),
            total_repayment_after_tds=_opt_float(raw.get('totalRepaymentAfterTds')),
            total_quantity=_opt_float(raw.get('totalQuantity')),
            repayment_type=_opt_str(raw.get('repaymentType')),
            transferred_to=TransferTarget.from_dict(raw.get('transferredTo')),
            time_ranges=time_ranges,
            product_type=_opt_str(raw.get('productType')),
            is_tds_on_interest_applicable=_opt_bool(raw.get('isTdsOnInterestApplicable')),
            tds_exemption_threshold_amount=_opt_float(raw.get('tdsExemptionThresholdAmount')),
        )


SUMMARY_FIELD_MAP = {
    'totalRepaymentNextMonth': 'next_month',
    'totalRepaymentNextMonthAfterTds': 'next_month_after_tds',
    'totalRepaymentThisMonth': 'this_month',
    'totalRepaymentThisMonthAfterTds': 'this_month_after_tds',
    'totalRepaymentThisFinancialYear': 'this_financial_year',
    'totalRepaymentThisFinancialYearAfterTds': 'this_financial_year_after_tds',
    'totalRepaymentAllTime': 'all_time',
    'totalRepaymentAllTimeAfterTds': 'all_time_after_tds',
}


@dataclass(frozen=True)
class RepaymentSummary:
    """Precomputed totals supplied with the dataset; displayed as-is."""

    next_month: float | None = None
    next_month_after_tds: float | None = None
    this_month: float | None = None
    this_month_after_tds: float | None = None
    this_financial_year: float | None = None
    this_financial_year_after_tds: float | None = None
    all_time: float | None = None
    all_time_after_tds: float | None = None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> RepaymentSummary:
        return cls(**{attr: _opt_float(raw.get(key)) for key, attr in SUMMARY_FIELD_MAP.items()})


@dataclass(frozen=True)
class InvestmentData:
    """Materialized dataset: the record list plus its summary totals."""

    repayments: tuple[Repayment, ...]
    summary: RepaymentSummary
