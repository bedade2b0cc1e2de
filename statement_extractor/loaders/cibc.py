# statement_extractor/loaders/cibc.py
import logging
import re
from decimal import Decimal

from statement_extractor.core.models import AggregateFigures, Extraction, IssuerVariant, Transaction
from statement_extractor.core.normalizer import (
    DATE_TOKEN, MONTH_PATTERN, collapse_whitespace, parse_amount, resolve_date,
)
from statement_extractor.errors import MissingRequiredAnchor
from statement_extractor.loaders.base import BaseExtractor, sum_amounts

logger = logging.getLogger(__name__)

_STATEMENT_PERIOD = re.compile(
    r"Statement period\s+" + MONTH_PATTERN + r"[A-Za-z]*\.? +\d{1,2}(?:, *\d{4})?"
    r"\s+to\s+(" + MONTH_PATTERN + r")[A-Za-z]*\.? +\d{1,2}, *(\d{4})",
    re.I,
)

# Trans date, optional post date, then the rest of the line
_ROW_HEAD = re.compile(rf"^\s*({DATE_TOKEN}) +(?:{DATE_TOKEN} +)?(\S.*?)\s*$")
_DESC_AMOUNT = re.compile(r"^(.*?)\s*(-?\$?[\d,]+\.\d{2})$")

_PAYMENT_LINE = re.compile(r"PAYMENT\s+THANK\s+YOU", re.I)
_TOTAL_CREDITS = re.compile(r"Total credits\s+-?\s*\$?([\d,]+\.\d{2})", re.I)
_TOTAL_CHARGES = re.compile(r"Total charges\s+\+?\s*\$?([\d,]+\.\d{2})", re.I)

# Continuation lines may drift this many columns from the description column
_COLUMN_SLACK = 2


class _Row:
    def __init__(self, date_token, desc_col, parts, amount=None):
        self.date_token = date_token
        self.desc_col = desc_col
        self.parts = parts
        self.amount = amount


class CIBCExtractor(BaseExtractor):
    """
    CIBC credit card statements.

    Descriptions can wrap onto following lines aligned with the description
    column; the amount sits on either the first or the last of those lines.
    Payments are printed as positive magnitudes and are flipped negative.
    """
    issuer = IssuerVariant.CIBC
    SIGNATURE = re.compile(r"CIBC.*(?:Visa|Mastercard)", re.I)

    def extract(self, text):
        period = _STATEMENT_PERIOD.search(text)
        if not period:
            logger.warning("No statement period found in CIBC statement; no transactions extracted")
            return Extraction([], AggregateFigures(), False)
        ref_month, ref_year = period.group(1), int(period.group(2))

        txs = []
        for row in self._rows(text):
            item = collapse_whitespace(" ".join(row.parts))
            txs.append(Transaction(
                date=resolve_date(ref_year, ref_month, row.date_token),
                item=item,
                amount=parse_amount(row.amount, negative=bool(_PAYMENT_LINE.search(item))),
            ))

        credits = sum_amounts(_TOTAL_CREDITS, text)
        charges = sum_amounts(_TOTAL_CHARGES, text)
        if credits is None and charges is None:
            raise MissingRequiredAnchor(self.issuer.value, "Total credits/Total charges")
        aggregates = AggregateFigures(
            credits=credits or Decimal("0"),
            charges=charges or Decimal("0"),
        )
        return Extraction(txs, aggregates, False)

    def expected_total(self, aggregates):
        return (aggregates.charges or Decimal("0")) - (aggregates.credits or Decimal("0"))

    def _rows(self, text):
        current = None
        for line in text.splitlines():
            head = _ROW_HEAD.match(line)
            if head:
                yield from self._finish(current)
                current = _Row(head.group(1), head.start(2), [])
                self._take(current, head.group(2))
                continue

            stripped = line.strip()
            indent = len(line) - len(line.lstrip())
            if current is None or not stripped or abs(indent - current.desc_col) > _COLUMN_SLACK:
                yield from self._finish(current)
                current = None
                continue

            if current.amount is None:
                self._take(current, stripped)
            elif _DESC_AMOUNT.match(stripped):
                # next amount-bearing line is not ours
                yield from self._finish(current)
                current = None
            else:
                current.parts.append(stripped)
        yield from self._finish(current)

    @staticmethod
    def _take(row, fragment):
        m = _DESC_AMOUNT.match(fragment)
        if m:
            row.amount = m.group(2)
            fragment = m.group(1)
        if fragment:
            row.parts.append(fragment)

    @staticmethod
    def _finish(row):
        if row is None:
            return
        if row.amount is None:
            logger.debug("Dropping CIBC row without amount: %s", " ".join(row.parts))
            return
        yield row
