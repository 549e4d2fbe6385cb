"""Sieve Simple - Simple filter conversion package."""

from .actions import parse_then_nodes
from .comment import parse_comparator_comment
from .conditions import parse_if_conditions
from .engine import from_tree, is_simple
from .extractor import extract_main_node
from .models import Actions, CommentAnnotation, Condition, LabelValue, MainNode, Mark, SimpleFilter

__all__ = [
    "from_tree",
    "is_simple",
    "extract_main_node",
    "parse_comparator_comment",
    "parse_if_conditions",
    "parse_then_nodes",
    "Actions",
    "CommentAnnotation",
    "Condition",
    "LabelValue",
    "MainNode",
    "Mark",
    "SimpleFilter",
]
