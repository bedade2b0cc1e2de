# statement_extractor/core/validator.py
from decimal import Decimal

from statement_extractor.core.models import ValidationFailure

TOLERANCE = Decimal("0.01")


def check_contiguity(transactions):
    """One failure per adjacent pair whose ids do not step by exactly one."""
    failures = []
    for i in range(1, len(transactions)):
        prev_id = transactions[i - 1].transaction_id
        cur_id = transactions[i].transaction_id
        if prev_id is None or cur_id is None or prev_id + 1 != cur_id:
            failures.append(ValidationFailure(
                kind="contiguity",
                message=(
                    f"Records {i - 1} and {i} are not contiguous "
                    f"(ids {prev_id} -> {cur_id})"
                ),
                pair=(prev_id, cur_id),
            ))
    return failures


def check_checksum(expected_total, transactions, tolerance=TOLERANCE):
    residual = Decimal(expected_total) - sum((tx.amount for tx in transactions), Decimal("0"))
    if abs(residual) > tolerance:
        return [ValidationFailure(
            kind="checksum",
            message=f"Checksum failure:  {residual}",
            residual=residual,
        )]
    return []


def validate(extractor, extraction):
    """
    Run every check that applies to the extraction and collect the failures.
    The checksum formula belongs to the extractor.
    """
    failures = []
    if extraction.id_sequence_present:
        failures.extend(check_contiguity(extraction.transactions))
    failures.extend(check_checksum(
        extractor.expected_total(extraction.aggregates),
        extraction.transactions,
    ))
    return failures
