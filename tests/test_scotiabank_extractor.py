from datetime import date
from decimal import Decimal

import pytest

from statement_extractor.core.validator import validate
from statement_extractor.errors import MissingRequiredAnchor
from statement_extractor.loaders.scotiabank import ScotiabankExtractor


def test_extracts_every_row(scotia_text):
    ext = ScotiabankExtractor()
    extraction = ext.extract(scotia_text)
    txs, aggregates, has_ids = extraction

    assert has_ids is True
    assert [tx.transaction_id for tx in txs] == [1, 2, 3, 4, 5]
    assert [tx.item for tx in txs] == [
        "AMAZON.CA AMAZON.CA ON",
        "PAYMENT FROM - *****12*3456",
        "UBER TRIP",
        "COFFEE SHOP TORONTO ON",
        "RETURN - BEST BUY",
    ]
    assert [tx.amount for tx in txs] == [
        Decimal("45.99"), Decimal("-500.00"), Decimal("16.45"),
        Decimal("39.01"), Decimal("-20.00"),
    ]
    assert txs[3].date == date(2023, 12, 31)
    assert txs[4].date == date(2024, 1, 2)
    assert aggregates.payments == Decimal("520.00")
    assert aggregates.purchases == Decimal("101.45")
    assert validate(ext, extraction) == []


def test_gap_in_reference_numbers_is_reported(scotia_text):
    text = "\n".join(l for l in scotia_text.splitlines() if not l.startswith("002"))
    ext = ScotiabankExtractor()
    extraction = ext.extract(text)

    failures = validate(ext, extraction)
    contiguity = [f for f in failures if f.kind == "contiguity"]
    assert len(contiguity) == 1
    assert contiguity[0].pair == (1, 3)
    # the dropped payment also breaks the checksum
    assert [f.kind for f in failures].count("checksum") == 1


def test_interest_rate_rows_are_not_transactions(scotia_text):
    text = scotia_text + "006    Jan 03  Jan 03  PROMO RATE                     19.99%\n"
    txs, _, _ = ScotiabankExtractor().extract(text)
    assert len(txs) == 5


def test_missing_statement_date_is_fatal(scotia_text):
    text = scotia_text.replace("Statement date", "Statement")
    with pytest.raises(MissingRequiredAnchor):
        ScotiabankExtractor().extract(text)


def test_missing_purchases_total_is_fatal(scotia_text):
    text = scotia_text.replace("Purchases/charges", "Purchases")
    with pytest.raises(MissingRequiredAnchor):
        ScotiabankExtractor().extract(text)
