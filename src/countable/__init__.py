"""
countable package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .api import Countable, create
from .config import CountConfig, config_from_dict, config_from_yaml, load_config
from .counter import count
from .models import Binding, CountResult
from .registry import BindingRegistry
from .surfaces import (
    CallableResolver,
    SelectorMap,
    Surface,
    SurfaceResolver,
    TextSurface,
)
from .validation import ValidationResult, validate_arguments

__all__ = [
    "Binding",
    "BindingRegistry",
    "CallableResolver",
    "Countable",
    "CountConfig",
    "CountResult",
    "SelectorMap",
    "Surface",
    "SurfaceResolver",
    "TextSurface",
    "ValidationResult",
    "config_from_dict",
    "config_from_yaml",
    "count",
    "create",
    "load_config",
    "validate_arguments",
]

__version__ = "0.1.0"
