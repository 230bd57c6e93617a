"""
Dimensia: dimensional analysis and unit conversion on an explicit unit algebra.

Quantities are numbers tagged with composite units (products of registered
units raised to integer powers). An `Environment` owns the registered unit
classes and units, derives base dimensions and conversion ratios for any
composite unit and renders units, scalars and formula trees as text.
Heavy objects (the default environment) are built lazily on first access.
"""

import logging
from importlib import metadata as _metadata
from typing import Any, Optional

from dimensia.environment import Environment


__author__ = "Parneet Sidhu"
__license__ = "MIT"

# Library logging stays silent unless the application configures handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Try to read the installed package version first; fall back to a default for local dev.
try:
    __version__ = _metadata.version("dimensia")
except _metadata.PackageNotFoundError:
    import tomllib
    with open("pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public names exposed by the package. Keep this minimal and stable.
__all__ = ["__version__", "__author__", "__license__", "Environment"]

_DEFAULT_ENV: Optional[Environment] = None


# Lazy access helpers -------------------------------------------------------

def _get_default_environment() -> Environment:
    global _DEFAULT_ENV
    if _DEFAULT_ENV is None:
        _DEFAULT_ENV = Environment()
    return _DEFAULT_ENV


def __getattr__(name: str) -> Any:
    """
    Lazy attribute access. Accessing 'env' builds the shared default
    environment (all default units and symbols) on first use.
    """
    if name == "env":
        return _get_default_environment()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    # Improve discoverability in REPL / autocomplete.
    return sorted(list(globals().keys()) + ["env"])
