from datetime import date
from decimal import Decimal

from statement_extractor.core.models import Transaction
from statement_extractor.utils import dedupe_transactions, sort_transactions


def _tx(d, item, amount="1.00"):
    return Transaction(date=d, item=item, amount=Decimal(amount))


def test_sort_is_stable_and_idempotent():
    txs = [
        _tx(date(2024, 1, 5), "B"),
        _tx(date(2023, 12, 31), "A"),
        _tx(date(2024, 1, 5), "C"),
    ]
    once = sort_transactions(txs)
    assert [tx.item for tx in once] == ["A", "B", "C"]
    assert sort_transactions(once) == once


def test_dedupe_keeps_first_occurrence():
    txs = [
        _tx(date(2024, 1, 5), "COFFEE"),
        _tx(date(2024, 1, 5), "COFFEE"),
        _tx(date(2024, 1, 5), "COFFEE", "2.00"),
    ]
    assert dedupe_transactions(txs) == [txs[0], txs[2]]
