"""Sieve Simple - Parsed sieve tree package."""

from .loader import load_tree, load_tree_file
from .models import (
    AddFlag,
    Address,
    Combinator,
    Comment,
    Discard,
    Exists,
    FileInto,
    Header,
    If,
    Keep,
    Not,
    OtherAction,
    OtherNode,
    OtherTest,
    Require,
    Vacation,
)

__all__ = [
    "load_tree",
    "load_tree_file",
    "AddFlag",
    "Address",
    "Combinator",
    "Comment",
    "Discard",
    "Exists",
    "FileInto",
    "Header",
    "If",
    "Keep",
    "Not",
    "OtherAction",
    "OtherNode",
    "OtherTest",
    "Require",
    "Vacation",
]
