# statement_extractor/core/models.py
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import List, NamedTuple, Optional, Tuple


class IssuerVariant(str, Enum):
    SCOTIABANK = "scotiabank"
    CIBC = "cibc"
    PC_FINANCIAL = "pcfinancial"


@dataclass
class Transaction:
    date: date
    item: str
    amount: Decimal
    category: str = None
    transaction_id: Optional[int] = field(default=None, compare=False, repr=False)

    @property
    def iso_date(self) -> str:
        return self.date.isoformat()


@dataclass
class AggregateFigures:
    """Summary numbers printed by the issuer, used only for the checksum."""
    previous_balance: Optional[Decimal] = None
    payments: Optional[Decimal] = None
    purchases: Optional[Decimal] = None
    credits: Optional[Decimal] = None
    charges: Optional[Decimal] = None
    interest: Optional[Decimal] = None
    statement_balance: Optional[Decimal] = None


@dataclass
class StatementDocument:
    source: str
    text: str
    issuer: IssuerVariant


@dataclass
class ValidationFailure:
    kind: str
    message: str
    residual: Optional[Decimal] = None
    pair: Optional[Tuple[int, int]] = None


class Extraction(NamedTuple):
    transactions: List[Transaction]
    aggregates: AggregateFigures
    id_sequence_present: bool


@dataclass
class TransactionBatch:
    issuer: IssuerVariant
    transactions: List[Transaction]
    aggregates: AggregateFigures
    id_sequence_present: bool = False
    validation_errors: List[ValidationFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.validation_errors
