"""Writer registry.

Each module listed in WRITER_MODULES lives under aco_tool/writers/ and
defines a module-level `writer` object of type Writer. The registry is
built once, on first use, keyed by writer name.
"""

import importlib

from aco_tool.core.types import Writer

WRITER_MODULES = ('gpl', 'json', 'png')

_registry: dict[str, Writer] = {}


def discover() -> dict[str, Writer]:
    """Import the writer modules and return the registry."""
    if not _registry:
        for modname in WRITER_MODULES:
            module = importlib.import_module(f'aco_tool.writers.{modname}')
            w = module.writer
            if not isinstance(w, Writer):
                raise TypeError(f'aco_tool.writers.{modname}.writer is not a Writer')
            _registry[w.name] = w
    return _registry


def get(name: str) -> Writer:
    """Get a writer by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown writer: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_writers() -> dict[str, Writer]:
    """Return all registered writers."""
    return discover()
