"""Action aggregation - ``then`` block to simple actions."""

import logging
from dataclasses import replace
from functools import reduce

from ..errors import UnsupportedRepresentationError
from ..tree.models import AddFlag, Discard, FileInto, Keep, Vacation
from .constants import TRASH_FOLDER
from .models import Actions, Mark

logger = logging.getLogger(__name__)


def _apply(actions: Actions, node, trash_folder: str) -> Actions:
    if isinstance(node, Keep):
        return actions
    if isinstance(node, Discard):
        return replace(actions, file_into=actions.file_into + (trash_folder,))
    if isinstance(node, FileInto):
        return replace(actions, file_into=actions.file_into + (node.name,))
    if isinstance(node, AddFlag):
        # The last addflag replaces any earlier one
        return replace(
            actions,
            mark=Mark(read="\\Seen" in node.flags, starred="\\Flagged" in node.flags),
        )
    if isinstance(node, Vacation):
        return replace(actions, vacation=node.message)
    raise UnsupportedRepresentationError(f"Unsupported filter representation: {node.type}")


def parse_then_nodes(nodes, trash_folder: str = TRASH_FOLDER) -> Actions:
    """Fold the ``then`` actions into a single Actions record."""
    actions = reduce(lambda acc, node: _apply(acc, node, trash_folder), nodes, Actions())
    logger.debug(
        "Actions: file_into=%s mark=%s vacation=%s",
        list(actions.file_into),
        actions.mark,
        actions.vacation is not None,
    )
    return actions
