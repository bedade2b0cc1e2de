# statement_extractor/config.py
import yaml

DEFAULT_CONFIG = {
    'issuer_extractors': {},
    'output_modules': {
        'csv': 'statement_extractor.outputs.csv_output.CSVOutput',
        'excel': 'statement_extractor.outputs.excel_output.ExcelOutput',
    },
    'category_file': 'category.json',
    'jobs': 4,
}


def load_config(path=None):
    """Read config.yaml (if given) on top of the defaults."""
    cfg = {k: (dict(v) if isinstance(v, dict) else v) for k, v in DEFAULT_CONFIG.items()}
    if not path:
        return cfg
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    for key, value in data.items():
        if isinstance(value, dict) and isinstance(cfg.get(key), dict):
            cfg[key].update(value)
        else:
            cfg[key] = value
    return cfg
