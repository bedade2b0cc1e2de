# statement_extractor/loaders/scotiabank.py
import re

from statement_extractor.core.models import AggregateFigures, Extraction, IssuerVariant, Transaction
from statement_extractor.core.normalizer import (
    DATE_TOKEN, MONTH_PATTERN, collapse_whitespace, parse_amount, resolve_date,
)
from statement_extractor.errors import MissingRequiredAnchor
from statement_extractor.loaders.base import BaseExtractor, find_amount

_STATEMENT_DATE = re.compile(r"Statement date +(" + MONTH_PATTERN + r")[A-Za-z]* +\d{1,2}, +(\d{4})")

# 001  Dec 10  Dec 11  UBER TRIP  AMT 12.00 USD     16.45
# 002  Dec 15  Dec 16  PAYMENT FROM - *****12*3456  500.00-
_ROW = re.compile(
    r"(?<!\d)(\d{3}) +"
    r"(" + DATE_TOKEN + r") +"
    r"(?:" + DATE_TOKEN + r" +)?"
    r"(.+?)"
    r"(?: +AMT +(?:[\d,]+\.\d{2}-?)? *(?:[\w ]*?))?"
    r" +([\d,]+\.\d{2})(-?)(?![%\d])"
)

_PAYMENTS = re.compile(r"Payments/credits[\s\-$]+([\d,]+\.\d{2})")
_PURCHASES = re.compile(r"Purchases/charges[\s+$]+([\d,]+\.\d{2})")
_INTEREST = re.compile(r"Interest charges[\s+$]+([\d,]+\.\d{2})")


class ScotiabankExtractor(BaseExtractor):
    """
    Scotiabank VISA statements.

    Every row carries a three digit reference number that must run without
    gaps. Payments and credits are printed with a trailing minus and stay in
    the transaction list as negative amounts.
    """
    issuer = IssuerVariant.SCOTIABANK
    SIGNATURE = re.compile(r"Scotia.*VISA.*card", re.I)

    def extract(self, text):
        anchor = _STATEMENT_DATE.search(text)
        if not anchor:
            raise MissingRequiredAnchor(self.issuer.value, "Statement date")
        ref_month, ref_year = anchor.group(1), int(anchor.group(2))

        txs = []
        for m in _ROW.finditer(text):
            txs.append(Transaction(
                date=resolve_date(ref_year, ref_month, m.group(2)),
                item=collapse_whitespace(m.group(3)),
                amount=parse_amount(m.group(4) + m.group(5)),
                transaction_id=int(m.group(1)),
            ))

        payments = find_amount(_PAYMENTS, text)
        if payments is None:
            raise MissingRequiredAnchor(self.issuer.value, "Payments/credits")
        purchases = find_amount(_PURCHASES, text)
        if purchases is None:
            raise MissingRequiredAnchor(self.issuer.value, "Purchases/charges")

        aggregates = AggregateFigures(
            payments=payments,
            purchases=purchases,
            interest=find_amount(_INTEREST, text),
        )
        return Extraction(txs, aggregates, True)

    def expected_total(self, aggregates):
        return aggregates.purchases - aggregates.payments
