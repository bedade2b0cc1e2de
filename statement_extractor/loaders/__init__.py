# statement_extractor/loaders/__init__.py
from importlib import import_module

from statement_extractor.core.models import IssuerVariant
from statement_extractor.errors import UnrecognizedStatementFormat

# Detection order: first matching signature wins
ISSUER_EXTRACTORS = {
    IssuerVariant.SCOTIABANK: 'statement_extractor.loaders.scotiabank.ScotiabankExtractor',
    IssuerVariant.CIBC: 'statement_extractor.loaders.cibc.CIBCExtractor',
    IssuerVariant.PC_FINANCIAL: 'statement_extractor.loaders.pcfinancial.PCFinancialExtractor',
}


def _extractor_paths(config):
    overrides = (config or {}).get('issuer_extractors') or {}
    return {
        issuer: overrides.get(issuer.value, path)
        for issuer, path in ISSUER_EXTRACTORS.items()
    }


def get_extractor(issuer, config=None):
    issuer = IssuerVariant(issuer)
    extractor_path = _extractor_paths(config)[issuer]
    module_name, cls_name = extractor_path.rsplit('.', 1)
    mod = import_module(module_name)
    return getattr(mod, cls_name)()


def detect_issuer(text, config=None):
    for issuer in _extractor_paths(config):
        if get_extractor(issuer, config).matches(text):
            return issuer
    raise UnrecognizedStatementFormat('Unrecognized credit file')
