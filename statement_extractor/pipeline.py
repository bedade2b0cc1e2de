# statement_extractor/pipeline.py

"""Statement text → validated, categorized transactions.

``extract_transactions`` is the pure core: detect the issuer, run its
extractor and collect validation failures. ``file_to_transactions`` adds the
file boundary (linearization, fatal validation, categorization) and
``files_to_transactions`` fans a batch of files out over a thread pool.
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor

from statement_extractor.core.categorizer import categorize
from statement_extractor.core.models import StatementDocument, TransactionBatch
from statement_extractor.core.validator import validate
from statement_extractor.errors import BatchError, StatementFileError, StatementValidationError
from statement_extractor.loaders import detect_issuer, get_extractor
from statement_extractor.pdf_text import read_statement_text
from statement_extractor.utils import sort_transactions

logger = logging.getLogger(__name__)


def extract_transactions(raw_text, config=None):
    """
    Parse one statement's text into a TransactionBatch.

    Raises UnrecognizedStatementFormat when no issuer signature matches and
    MissingRequiredAnchor when the issuer needs a figure the text lacks.
    Validation failures are returned on the batch, not raised.
    """
    issuer = detect_issuer(raw_text, config)
    extractor = get_extractor(issuer, config)
    extraction = extractor.extract(raw_text)
    failures = validate(extractor, extraction)
    return TransactionBatch(
        issuer=issuer,
        transactions=list(extraction.transactions),
        aggregates=extraction.aggregates,
        id_sequence_present=extraction.id_sequence_present,
        validation_errors=failures,
    )


def file_to_transactions(path, rules, config=None):
    try:
        text = read_statement_text(path)
        batch = extract_transactions(text, config)
        doc = StatementDocument(source=str(path), text=text, issuer=batch.issuer)
        if not batch.ok:
            raise StatementValidationError(batch.validation_errors)
        logger.info(
            "Parsed %d transaction(s) from %s (%s)",
            len(batch.transactions), doc.source, doc.issuer.value,
        )
        return categorize(rules, batch.transactions)
    except Exception as e:
        raise StatementFileError(path, e) from e


def files_to_transactions(paths, rules, config=None, jobs=4):
    """
    Process every file, even after one fails. Any failure fails the whole
    batch with a BatchError listing each file's error.
    """
    paths = list(paths)
    results, errors = [], []
    with ThreadPoolExecutor(max_workers=max(1, int(jobs))) as pool:
        futures = [pool.submit(file_to_transactions, p, rules, config) for p in paths]
        for fut in futures:
            try:
                results.extend(fut.result())
            except StatementFileError as e:
                logger.error("%s", e)
                errors.append(e)
    if errors:
        raise BatchError(errors)
    return sort_transactions(results)


def list_statement_files(directory):
    files = []
    for fname in sorted(os.listdir(directory)):
        path = os.path.join(directory, fname)
        if fname.startswith('.') or not os.path.isfile(path):
            continue
        files.append(path)
    return files
