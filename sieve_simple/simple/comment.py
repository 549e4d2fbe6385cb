"""Annotation comment parser.

Simple filters are saved with a leading doc comment such as::

    /**
     * @type and
     * @comparator starts
     * @comparator !contains
     */

The ``@comparator`` lines keep the comparator the user picked when the sieve
match type alone is ambiguous (``starts`` and ``matches`` are both saved as
``:matches``).
"""

import logging
import re
from dataclasses import dataclass, field, replace
from functools import reduce
from typing import Optional

from ..errors import InvalidInputError
from ..tree.models import Comment
from .constants import ANNOTATION_TYPES
from .models import CommentAnnotation

logger = logging.getLogger(__name__)

LINE_SEPARATOR = "\r\n *"
ANNOTATION_LINE = re.compile(r"\s@(\w*)\s(.*)$")


@dataclass(frozen=True)
class AnnotationError:
    type: str
    value: str

    def __str__(self) -> str:
        return f'{self.type} "{self.value}"'


@dataclass(frozen=True)
class ParseResult:
    annotation: CommentAnnotation = field(default_factory=CommentAnnotation)
    errors: tuple[AnnotationError, ...] = ()


def _parse_line(result: ParseResult, line: str) -> ParseResult:
    match = ANNOTATION_LINE.search(line)
    if not match:
        return result

    annotation_type, value = match.groups()
    annotation = result.annotation

    if annotation_type == "type":
        if value not in ANNOTATION_TYPES:
            return replace(result, errors=result.errors + (AnnotationError(annotation_type, value),))
        return replace(result, annotation=replace(annotation, type=ANNOTATION_TYPES[value]))

    if annotation_type == "comparator":
        comparator = value.replace("default", "contains", 1)
        return replace(
            result,
            annotation=replace(annotation, comparators=annotation.comparators + (comparator,)),
        )

    return result


def scan_annotations(text: str) -> ParseResult:
    """Parse every annotation line, collecting errors instead of raising."""
    return reduce(_parse_line, text.split(LINE_SEPARATOR), ParseResult())


def parse_comparator_comment(comment: Optional[Comment]) -> Optional[CommentAnnotation]:
    """Return the annotations declared in ``comment``, or None without a comment.

    Raises InvalidInputError listing every unknown annotation value.
    """
    if comment is None:
        return None

    result = scan_annotations(comment.text)
    if result.errors:
        raise InvalidInputError(f"Unknown {', '.join(str(error) for error in result.errors)}")

    logger.debug(
        "Annotation: type=%r comparators=%s",
        result.annotation.type,
        list(result.annotation.comparators),
    )
    return result.annotation
