from datetime import date
from decimal import Decimal

import pytest

from statement_extractor.core.validator import validate
from statement_extractor.errors import MissingRequiredAnchor
from statement_extractor.loaders.pcfinancial import PCFinancialExtractor


def test_payment_rows_are_omitted(pc_text):
    ext = PCFinancialExtractor()
    extraction = ext.extract(pc_text)
    txs = extraction.transactions

    assert [tx.item for tx in txs] == [
        "LOBLAWS #1234 TORONTO ON",
        "SHOPPERS DRUG MART",
        "REFUND SHOPPERS",
        "PURCHASE INTEREST",
    ]
    assert txs[0].date == date(2024, 1, 18)
    assert txs[2].amount == Decimal("-10.00")
    assert extraction.aggregates.previous_balance == Decimal("1000.00")
    assert extraction.aggregates.payments == Decimal("1000.00")
    assert extraction.aggregates.statement_balance == Decimal("850.00")
    assert validate(ext, extraction) == []


def test_combined_payments_and_credits_label(pc_text):
    # the combined figure counts the 10.00 refund that also appears as a row
    text = pc_text.replace(
        "Payments                       - $1,000.00",
        "Payments & credits             - $1,010.00",
    ).replace("$845.50", "$855.50")
    extraction = PCFinancialExtractor().extract(text)
    assert extraction.aggregates.payments == Decimal("1010.00")
    assert extraction.aggregates.credits == Decimal("10.00")
    assert sum(tx.amount for tx in extraction.transactions) == Decimal("850.00")
    assert validate(PCFinancialExtractor(), extraction) == []


def test_combined_label_still_catches_a_wrong_total(pc_text):
    text = pc_text.replace(
        "Payments                       - $1,000.00",
        "Payments & credits             - $1,020.00",
    )
    failures = validate(PCFinancialExtractor(), PCFinancialExtractor().extract(text))
    assert len(failures) == 1
    assert failures[0].residual == Decimal("10.00")


def test_plain_payments_label_has_no_credit_adjustment(pc_text):
    extraction = PCFinancialExtractor().extract(pc_text)
    assert extraction.aggregates.credits is None


def test_missing_statement_date_is_fatal(pc_text):
    with pytest.raises(MissingRequiredAnchor):
        PCFinancialExtractor().extract(pc_text.replace("Statement date:", "Printed:"))


def test_missing_previous_balance_is_fatal(pc_text):
    with pytest.raises(MissingRequiredAnchor) as exc:
        PCFinancialExtractor().extract(pc_text.replace("Previous balance", "Opening"))
    assert exc.value.anchor == "previous balance"
