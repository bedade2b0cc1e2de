# statement_extractor/loaders/pcfinancial.py
import logging
import re
from decimal import Decimal

from statement_extractor.core.models import AggregateFigures, Extraction, IssuerVariant, Transaction
from statement_extractor.core.normalizer import (
    DATE_TOKEN, MONTH_PATTERN, collapse_whitespace, parse_amount, resolve_date,
)
from statement_extractor.errors import MissingRequiredAnchor
from statement_extractor.loaders.base import BaseExtractor, find_amount

logger = logging.getLogger(__name__)

_STATEMENT_DATE = re.compile(
    r"Statement date:?\s+(" + MONTH_PATTERN + r")[A-Za-z]*\.? +\d{1,2}, *(\d{4})", re.I
)

_ROW = re.compile(
    r"^[ \t]*(" + DATE_TOKEN + r") +"
    r"(?:" + DATE_TOKEN + r" +)?"
    r"(.+?) +"
    r"(-?\$?[\d,]+\.\d{2})(?![%\d])[ \t]*$",
    re.M,
)

_PAYMENT_LINE = re.compile(r"PAYMENT\b.*THANK\s+YOU", re.I)

_PREVIOUS_BALANCE = re.compile(r"Previous balance[\s$]+([\d,]+\.\d{2})", re.I)
_PAYMENTS = re.compile(r"\bPayments[\s\-$]+([\d,]+\.\d{2})")
# Alternate summary label whose figure also includes refunds and other credits
_PAYMENTS_AND_CREDITS = re.compile(r"\bPayments\s*(?:&|and)\s*credits[\s\-$]+([\d,]+\.\d{2})", re.I)
_STATEMENT_BALANCE = re.compile(r"(?:New|Statement) balance[\s$]+([\d,]+\.\d{2})", re.I)


class PCFinancialExtractor(BaseExtractor):
    """
    PC Financial Mastercard statements.

    Payment rows are left out of the transaction list; the payments total is
    added back when reconciling against the balances instead. When the summary
    only prints a combined "Payments & credits" figure, the credit rows kept in
    the list are subtracted from it first.
    """
    issuer = IssuerVariant.PC_FINANCIAL
    SIGNATURE = re.compile(r"PC Financial.*Mastercard", re.I)

    def extract(self, text):
        anchor = _STATEMENT_DATE.search(text)
        if not anchor:
            raise MissingRequiredAnchor(self.issuer.value, "Statement date")
        ref_month, ref_year = anchor.group(1), int(anchor.group(2))

        txs = []
        for m in _ROW.finditer(text):
            item = collapse_whitespace(m.group(2))
            if _PAYMENT_LINE.search(item):
                logger.debug("Skipping PC Financial payment row: %s", item)
                continue
            txs.append(Transaction(
                date=resolve_date(ref_year, ref_month, m.group(1)),
                item=item,
                amount=parse_amount(m.group(3)),
            ))

        figures = {}
        for name, patterns in (
            ("previous_balance", _PREVIOUS_BALANCE),
            ("payments", (_PAYMENTS, _PAYMENTS_AND_CREDITS)),
            ("statement_balance", _STATEMENT_BALANCE),
        ):
            figures[name] = find_amount(patterns, text)
            if figures[name] is None:
                raise MissingRequiredAnchor(self.issuer.value, name.replace("_", " "))

        if find_amount(_PAYMENTS, text) is None:
            # credit rows stay in the list, so take them back out of the combined figure
            figures["credits"] = -sum((tx.amount for tx in txs if tx.amount < 0), Decimal("0"))
        return Extraction(txs, AggregateFigures(**figures), False)

    def expected_total(self, aggregates):
        payments = aggregates.payments - (aggregates.credits or Decimal("0"))
        return aggregates.statement_balance - aggregates.previous_balance + payments
