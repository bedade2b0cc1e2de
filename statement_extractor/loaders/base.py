# statement_extractor/loaders/base.py
import re
from abc import ABC, abstractmethod
from decimal import Decimal

from statement_extractor.core.normalizer import parse_amount


class BaseExtractor(ABC):
    issuer = None
    SIGNATURE = None

    def matches(self, text):
        return bool(self.SIGNATURE.search(text))

    @abstractmethod
    def extract(self, text):
        """
        Return an Extraction (transactions, aggregates, id_sequence_present)
        for the linearized statement text.
        """
        pass

    @abstractmethod
    def expected_total(self, aggregates):
        """The amount the transactions of this statement must sum to."""
        pass


def find_amount(patterns, text):
    """Parse the first group of the first pattern that matches, else None."""
    if isinstance(patterns, re.Pattern):
        patterns = (patterns,)
    for rx in patterns:
        m = rx.search(text)
        if m:
            return parse_amount(m.group(1))
    return None


def sum_amounts(pattern, text):
    """Sum every occurrence of pattern; None when it never appears."""
    values = [parse_amount(m.group(1)) for m in pattern.finditer(text)]
    if not values:
        return None
    return sum(values, Decimal("0"))
