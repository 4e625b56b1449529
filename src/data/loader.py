"""JSON dataset loader."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from src.data.validator import (
    LIST_KEY,
    ROOT_KEY,
    DataLoadError,
    validate_payload,
    validate_repayments,
)
from src.models.repayment import InvestmentData, Repayment, RepaymentSummary
from src.utils.logging import get_logger

LOGGER = get_logger(__name__)

DEFAULT_DATA_FILENAME = 'invest.json'


def parse_investment_data(payload: Any) -> InvestmentData:
    """Validate a decoded document and materialize its records and totals."""
    payload_warnings = validate_payload(payload)
    root = payload[ROOT_KEY]

    repayments = [Repayment.from_dict(item) for item in root[LIST_KEY] if isinstance(item, dict)]
    summary = RepaymentSummary.from_dict(root)

    for warning in payload_warnings + validate_repayments(repayments):
        LOGGER.warning(warning)

    LOGGER.info('Loaded %s repayments.', len(repayments))
    return InvestmentData(repayments=tuple(repayments), summary=summary)


def load_investment_data(path: str) -> InvestmentData:
    """Read, validate, and materialize the dataset at ``path``."""
    p = Path(path)
    if not p.exists():
        raise DataLoadError(f'Data file not found: {p}')
    try:
        with p.open('r', encoding='utf-8') as f:
            payload = json.load(f)
    except json.JSONDecodeError as exc:
        raise DataLoadError(f'Data file {p} is not valid JSON: {exc}') from exc
    return parse_investment_data(payload)
