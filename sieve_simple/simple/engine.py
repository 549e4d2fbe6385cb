"""Sieve tree to simple filter conversion."""

import logging
from typing import TYPE_CHECKING, Optional

from ..errors import InvalidInputError, SieveConversionError, UnsupportedRepresentationError
from ..tree.loader import load_tree
from .actions import parse_then_nodes
from .comment import parse_comparator_comment
from .conditions import parse_if_conditions
from .constants import OPERATOR_KEYS, REQUIRED_EXTENSIONS, TRASH_FOLDER
from .extractor import extract_main_node
from .labels import build_label_value, invert
from .models import SimpleFilter

if TYPE_CHECKING:
    from ..config.models import Config

logger = logging.getLogger(__name__)


def from_tree(tree, config: Optional["Config"] = None) -> SimpleFilter:
    """Transform a parsed sieve script into a simple filter.

    ``tree`` is the parser output (a list of node dicts) or already loaded
    nodes. It is never modified.

    Raises InvalidInputError or UnsupportedRepresentationError when the script
    cannot be represented as a simple filter.
    """
    nodes = load_tree(tree)
    main = extract_main_node(
        nodes,
        required_extensions=config.required_extensions if config else REQUIRED_EXTENSIONS,
    )
    comment = parse_comparator_comment(main.comment)

    test_list = main.tree.test
    operator = invert(OPERATOR_KEYS).get(test_list.type)
    if operator is None:
        raise InvalidInputError(f"Invalid operator: {test_list.type}")

    if comment is not None and comment.type and operator != comment.type:
        raise UnsupportedRepresentationError("Comment and computed type incompatible")

    conditions = parse_if_conditions(test_list.tests, comment.comparators if comment is not None else ())
    actions = parse_then_nodes(
        main.tree.then,
        trash_folder=config.trash_folder if config else TRASH_FOLDER,
    )

    logger.debug("Converted filter: %s with %d condition(s)", operator, len(conditions))
    return SimpleFilter(
        operator=build_label_value(operator),
        conditions=conditions,
        actions=actions,
    )


def is_simple(tree, config: Optional["Config"] = None) -> bool:
    """Whether ``tree`` can be edited as a simple filter."""
    try:
        from_tree(tree, config)
    except SieveConversionError as e:
        logger.info("Not a simple filter: %s", e)
        return False
    return True
