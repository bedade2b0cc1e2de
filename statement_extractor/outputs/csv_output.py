# statement_extractor/outputs/csv_output.py

import csv
import logging
from statement_extractor.outputs.base import BaseOutput, FIELDS

logger = logging.getLogger(__name__)


class CSVOutput(BaseOutput):
    """
    Writes transactions, in the order given, to a single CSV file with the
    columns date, item, category, amount.
    """
    def __init__(self, config):
        self.config = config

    def write(self, transactions, out_path):
        with open(out_path, 'w', newline='') as f:
            writer = csv.writer(f)
            writer.writerow(FIELDS)
            for tx in transactions:
                writer.writerow([
                    tx.iso_date,
                    tx.item,
                    tx.category or '',
                    f"{tx.amount:.2f}",
                ])
        logger.debug("Wrote %d row(s) to %s", len(transactions), out_path)
