# statement_extractor/categories.py
import logging
import os

import yaml

from statement_extractor.core.categorizer import CategoryRuleSet

logger = logging.getLogger(__name__)


def load_category_rules(path):
    """
    Load category rules from a JSON or YAML file. A missing file yields an
    empty rule set, so every transaction ends up 'unclassified'.
    """
    if not path or not os.path.exists(path):
        logger.info("No category file at %s; all transactions will be unclassified", path)
        return CategoryRuleSet()

    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Category file {path} must contain a mapping of category to terms")
    return CategoryRuleSet.from_mapping(data)
