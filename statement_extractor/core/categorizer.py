# statement_extractor/core/categorizer.py
from dataclasses import dataclass, replace
from typing import Tuple

UNCLASSIFIED = "unclassified"
FORCED_KEY = "forced"


@dataclass(frozen=True)
class ForcedCategory:
    item: str
    date: str
    category: str


@dataclass(frozen=True)
class CategoryRuleSet:
    rules: Tuple[Tuple[str, Tuple[str, ...]], ...] = ()
    forced: Tuple[ForcedCategory, ...] = ()

    @classmethod
    def from_mapping(cls, data):
        """
        Build a rule set from {'label': [terms...], 'forced': [{item, date, category}]}.
        Label order is preserved; a missing 'forced' list is treated as empty.
        """
        data = data or {}
        forced = tuple(
            ForcedCategory(
                item=str(entry.get("item", "")),
                date=str(entry.get("date", "")),
                category=str(entry.get("category", UNCLASSIFIED)),
            )
            for entry in (data.get(FORCED_KEY) or [])
        )
        rules = tuple(
            (str(label), tuple(str(t) for t in (terms or [])))
            for label, terms in data.items()
            if label != FORCED_KEY
        )
        return cls(rules=rules, forced=forced)


def get_category(rules, tx):
    date_s = tx.iso_date
    for forced in rules.forced:
        if forced.item == tx.item and forced.date == date_s:
            return forced.category
    for label, terms in rules.rules:
        if any(term in tx.item for term in terms):
            return label
    return UNCLASSIFIED


def categorize(rules, transactions):
    return [replace(tx, category=get_category(rules, tx)) for tx in transactions]
