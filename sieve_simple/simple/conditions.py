"""Condition normalization - sieve tests to simple conditions."""

import logging
import re
from typing import Optional

from ..errors import InvalidInputError, UnsupportedRepresentationError
from ..tree.models import Address, Exists, Header, Not
from .constants import MATCH_KEYS
from .labels import build_label_value, invert
from .models import Condition, LabelValue

logger = logging.getLogger(__name__)

RECIPIENT_HEADERS = ("To", "Cc", "Bcc")
LEADING_WILDCARDS = re.compile(r"^\*+")
TRAILING_WILDCARDS = re.compile(r"\*+$")


def split_negation(comparator: Optional[str]) -> tuple[Optional[str], bool]:
    """``"!contains"`` -> ``("contains", True)``."""
    if not comparator:
        return None, False
    if comparator.startswith("!"):
        return comparator[1:], True
    return comparator, False


def unwrap_test(test):
    """Return the inner test and whether it was wrapped in ``not``."""
    if isinstance(test, Not):
        return test.test, True
    return test, False


def condition_type(element) -> str:
    """Infer the simple condition type from the test and its headers."""
    if isinstance(element, Exists):
        return "attachments" if "X-Attached" in element.headers else ""
    if isinstance(element, Header):
        return "subject" if "Subject" in element.headers else ""
    if isinstance(element, Address):
        if "From" in element.headers:
            return "sender"
        if any(header in element.headers for header in RECIPIENT_HEADERS):
            return "recipient"
    return ""


def build_comparator(comparator: str, negate: bool) -> LabelValue:
    """Map a sieve match type (``"Contains"``) to a simple comparator token."""
    inverted = invert(MATCH_KEYS)
    if comparator not in inverted:
        raise InvalidInputError("Invalid match keys")
    return build_label_value(("!" if negate else "") + inverted[comparator])


def build_params(
    comparator: str,
    values: tuple[str, ...],
    negate: bool,
    comment_comparator: Optional[str] = None,
) -> tuple[LabelValue, tuple[str, ...]]:
    """Resolve the final comparator and values, checking the annotation."""
    if comment_comparator in ("starts", "ends"):
        if comparator != "Matches":
            raise UnsupportedRepresentationError(
                f"Comment and computed comparator incompatible: {comparator} instead of matches"
            )
        wildcards = LEADING_WILDCARDS if comment_comparator == "ends" else TRAILING_WILDCARDS
        return (
            build_comparator(comment_comparator.capitalize(), negate),
            tuple(wildcards.sub("", value) for value in values),
        )

    if comment_comparator and comparator.lower() != comment_comparator:
        raise UnsupportedRepresentationError(
            f"Comment and computed comparator incompatible: {comparator} instead of {comment_comparator}"
        )

    return build_comparator(comparator, negate), values


def parse_if_conditions(tests, comment_comparators=()) -> tuple[Condition, ...]:
    """Normalize the ``if`` tests, in order.

    ``comment_comparators`` is aligned by index with ``tests`` and may be
    shorter; missing entries mean no annotation for that test.
    """
    conditions = []

    for index, test in enumerate(tests):
        annotation = comment_comparators[index] if index < len(comment_comparators) else None
        comment_comparator, comment_negate = split_negation(annotation)

        element, negate = unwrap_test(test)

        if comment_comparator and comment_negate != negate:
            raise UnsupportedRepresentationError("Comment and computed negation incompatible")

        type_ = condition_type(element)

        if type_ == "attachments":
            comparator = "Contains"
        else:
            comparator = getattr(element, "match_type", None)
            if not comparator:
                raise InvalidInputError("Missing match type")

        values = tuple(getattr(element, "keys", None) or ())

        resolved, values = build_params(comparator, values, negate, comment_comparator)
        condition = Condition(type=build_label_value(type_), comparator=resolved, values=values)
        logger.debug(
            "Condition %d: %s %s %s", index, type_ or "<unknown>", resolved.value, list(values)
        )
        conditions.append(condition)

    return tuple(conditions)
