"""Sieve Simple - Convert parsed sieve scripts into simple filters."""

__version__ = "0.1.0"

# Re-export main components for convenience
from .errors import InvalidInputError, SieveConversionError, UnsupportedRepresentationError
from .tree import load_tree, load_tree_file
from .simple import from_tree, is_simple, SimpleFilter, Condition, Actions, LabelValue
from .config import load_config, Config

__all__ = [
    "InvalidInputError",
    "SieveConversionError",
    "UnsupportedRepresentationError",
    "load_tree",
    "load_tree_file",
    "from_tree",
    "is_simple",
    "SimpleFilter",
    "Condition",
    "Actions",
    "LabelValue",
    "load_config",
    "Config",
]
