# statement_extractor/outputs/excel_output.py

"""Excel output module backed by XlsxWriter.

Writes one worksheet per statement month plus an ``AllData`` worksheet
holding every transaction, all with the same columns as the CSV output.
"""

from __future__ import annotations

import xlsxwriter

from statement_extractor.outputs.base import BaseOutput, FIELDS


class ExcelOutput(BaseOutput):
    """Generate a local Excel workbook, one tab per month."""

    MONTH_FMT = "%B %Y"
    ALL_DATA = "AllData"

    def __init__(self, config: dict):
        self.config = config

    def write(self, transactions, out_path):
        workbook = xlsxwriter.Workbook(out_path)
        amount_fmt = workbook.add_format({"num_format": "$#,##0.00"})

        by_month = {}
        for tx in transactions:
            by_month.setdefault(tx.date.strftime("%Y-%m"), []).append(tx)

        for month_key in sorted(by_month):
            sheet_name = by_month[month_key][0].date.strftime(self.MONTH_FMT)
            self._write_sheet(workbook, sheet_name, by_month[month_key], amount_fmt)
        self._write_sheet(workbook, self.ALL_DATA, transactions, amount_fmt)
        workbook.close()

    @staticmethod
    def _write_sheet(workbook, name, transactions, amount_fmt):
        ws = workbook.add_worksheet(name)
        ws.freeze_panes(1, 0)
        ws.write_row(0, 0, FIELDS)
        for row_idx, tx in enumerate(transactions, start=1):
            ws.write_row(row_idx, 0, [tx.iso_date, tx.item, tx.category or ""])
            ws.write_number(row_idx, 3, float(tx.amount), amount_fmt)
        ws.set_column(3, 3, None, amount_fmt)
