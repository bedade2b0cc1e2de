from statement_extractor.core.categorizer import CategoryRuleSet, categorize
from statement_extractor.pipeline import extract_transactions

__all__ = ['CategoryRuleSet', 'categorize', 'extract_transactions']
