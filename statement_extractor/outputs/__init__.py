# statement_extractor/outputs/__init__.py
"""Output sinks, looked up by format name in config['output_modules']."""
from importlib import import_module


def get_output(name, config):
    modules = config.get('output_modules') or {}
    if name not in modules:
        known = ', '.join(sorted(modules)) or 'none'
        raise ValueError(f"Unknown output format '{name}' (configured: {known})")
    module_name, cls_name = modules[name].rsplit('.', 1)
    return getattr(import_module(module_name), cls_name)(config)
