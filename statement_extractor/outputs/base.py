# statement_extractor/outputs/base.py
from abc import ABC, abstractmethod

FIELDS = ['date', 'item', 'category', 'amount']


class BaseOutput(ABC):
    @abstractmethod
    def write(self, transactions, out_path):
        """Write the ordered transactions to out_path."""
        pass
