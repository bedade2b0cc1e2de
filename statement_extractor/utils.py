# statement_extractor/utils.py


def sort_transactions(transactions):
    """
    Order transactions by ISO date. The sort is stable, so rows from the same
    day keep their statement order.
    """
    return sorted(transactions, key=lambda tx: tx.iso_date)


def dedupe_transactions(transactions):
    """
    Remove duplicates based on (date, item, amount), e.g. the same statement
    dropped into the input directory twice.
    """
    seen = set()
    unique = []
    for tx in transactions:
        key = (tx.date, tx.item, tx.amount)
        if key not in seen:
            seen.add(key)
            unique.append(tx)
    return unique
