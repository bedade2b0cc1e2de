# statement_extractor/core/normalizer.py
import re
from datetime import date
from decimal import Decimal, InvalidOperation

from statement_extractor.errors import InvalidStatementDate

MONTHS = {
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "may": 5, "jun": 6,
    "jul": 7, "aug": 8, "sep": 9, "oct": 10, "nov": 11, "dec": 12,
}

# Case-insensitive month abbreviation, for embedding in row patterns
MONTH_PATTERN = "(?i:" + "|".join(MONTHS) + ")"
DATE_TOKEN = MONTH_PATTERN + r" +\d{1,2}"

_CENTS = Decimal("0.01")
_CLEAN_AMOUNT = re.compile(r"[\s$,]")
_WHITESPACE = re.compile(r"\s+")


def month_number(token):
    """Map 'Jan', 'January' or 'JAN.' to 1..12."""
    key = token.strip().rstrip(".")[:3].lower()
    if key not in MONTHS:
        raise ValueError(f"Unknown month '{token}'")
    return MONTHS[key]


def resolve_date(ref_year, ref_month, token):
    """
    Build a date from a 'Mon DD' token relative to the statement anchor.

    A December transaction on a January statement belongs to the previous
    year.
    """
    try:
        if isinstance(ref_month, str):
            ref_month = month_number(ref_month)
        mon_str, day_str = token.split()
        month = month_number(mon_str)
        year = int(ref_year)
        if ref_month == 1 and month == 12:
            year -= 1
        return date(year, month, int(day_str))
    except ValueError as e:
        raise InvalidStatementDate(token, e) from e


def parse_amount(text, negative=False):
    """
    Parse '1,234.56', '$12.00', '-5.00' or '5.00-' into a two-decimal Decimal.
    ``negative`` forces the sign for issuers that only print magnitudes.
    """
    raw = _CLEAN_AMOUNT.sub("", text)
    sign = 1
    if raw.endswith("-"):
        raw, sign = raw[:-1], -1
    if raw.startswith("-"):
        raw, sign = raw[1:], -1
    try:
        value = Decimal(raw).quantize(_CENTS)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{text}'")
    if negative:
        return -abs(value)
    return value * sign


def collapse_whitespace(text):
    return _WHITESPACE.sub(" ", text).strip()
