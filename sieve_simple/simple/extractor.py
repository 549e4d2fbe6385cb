"""Main node extraction.

Scans the top-level nodes once, checking the ``require`` declarations and
picking the ``if`` node and annotation comment the simple model is built from.
"""

import logging
import re
from dataclasses import dataclass, replace
from functools import reduce
from typing import Optional

from ..errors import InvalidInputError, UnsupportedRepresentationError
from ..tree.models import Combinator, Comment, If, Node, Require
from .constants import REQUIRED_EXTENSIONS
from .models import MainNode

logger = logging.getLogger(__name__)

ANNOTATION_COMMENT = re.compile(
    r"/\*\*\r\n(?:\s\*\s@(?:type|comparator)[^\r]+\r\n)+\s\*/"
)


@dataclass(frozen=True)
class ScanState:
    """Accumulated result of the top-level scan."""
    missing_extensions: tuple[str, ...]
    main_node: Optional[If] = None
    comment: Optional[Comment] = None
    error_level: str = "missing"  # last invalid ``if`` wins


def is_annotation_comment(node: Comment) -> bool:
    return ANNOTATION_COMMENT.fullmatch(node.text) is not None


def _if_error_level(node: If) -> Optional[str]:
    for level, value in (("If", node.test), ("Then", node.then), ("Type", node.type)):
        if value is None or value == "":
            return level
    if not isinstance(node.test, Combinator) or node.test.tests is None:
        return "Tests"
    return None


def _scan(state: ScanState, node: Node) -> ScanState:
    if isinstance(node, Require):
        return replace(
            state,
            missing_extensions=tuple(
                ext for ext in state.missing_extensions if ext not in node.extensions
            ),
        )

    if isinstance(node, If):
        error_level = _if_error_level(node)
        if error_level:
            return replace(state, error_level=error_level)
        return replace(state, main_node=node, error_level="missing")

    if isinstance(node, Comment) and is_annotation_comment(node):
        return replace(state, comment=node)

    return state


def extract_main_node(nodes, required_extensions=REQUIRED_EXTENSIONS) -> MainNode:
    """Validate the top-level nodes and return the main ``if`` node.

    Raises UnsupportedRepresentationError if ``nodes`` is not a sequence and
    InvalidInputError if no valid ``if`` node exists or a required extension
    was never declared.
    """
    if not isinstance(nodes, (list, tuple)):
        raise UnsupportedRepresentationError("Array expected.")

    state = reduce(_scan, nodes, ScanState(missing_extensions=tuple(required_extensions)))

    if state.main_node is None:
        raise InvalidInputError(f"Invalid tree representation: {state.error_level} level")

    if state.missing_extensions:
        logger.debug("Missing required extensions: %s", ", ".join(state.missing_extensions))
        raise InvalidInputError("Invalid tree representation: requirements")

    logger.debug(
        "Main node found (%d tests, %d actions, annotation: %s)",
        len(state.main_node.test.tests),
        len(state.main_node.then),
        "yes" if state.comment else "no",
    )
    return MainNode(tree=state.main_node, comment=state.comment)
