"""Load parser output (JSON-like dicts and lists) into tree nodes."""

import json
from pathlib import Path
from typing import Any, Optional, Union

from ..errors import UnsupportedRepresentationError
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
    Node,
    Not,
    OtherAction,
    OtherNode,
    OtherTest,
    Require,
    Test,
    Vacation,
)

NODE_CLASSES = (Require, Comment, If, OtherNode)
VACATION_TYPES = ("Vacation", "Vacation\\Vacation")


def load_tree(tree) -> tuple[Node, ...]:
    """Convert a list of parser nodes into immutable tree nodes.

    Already loaded nodes are passed through. The input is only read, never
    modified.
    """
    if not isinstance(tree, (list, tuple)):
        raise UnsupportedRepresentationError("Array expected.")
    return tuple(_load_node(node) for node in tree)


def load_tree_file(path: Union[str, Path]) -> tuple[Node, ...]:
    """Read a JSON dump of a parsed script and load it."""
    with open(path, encoding="utf-8") as f:
        return load_tree(json.load(f))


def _as_dict(data: Any) -> dict:
    if not isinstance(data, dict):
        raise UnsupportedRepresentationError(f"Unsupported node: {data!r}")
    return data


def _as_strings(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(value.split())
    return tuple(value)


def _optional_strings(value: Any) -> Optional[tuple[str, ...]]:
    if value is None:
        return None
    if isinstance(value, str):
        return (value,)
    return tuple(value)


def _load_node(data: Any) -> Node:
    if isinstance(data, NODE_CLASSES):
        return data

    data = _as_dict(data)
    node_type = data.get("Type")

    if node_type == "Require":
        return Require(extensions=_optional_strings(data.get("List")) or ())

    if node_type == "Comment":
        return Comment(text=data.get("Text") or "")

    if node_type == "If":
        then = data.get("Then")
        otherwise = data.get("Else")
        return If(
            test=_load_condition(data["If"]) if data.get("If") is not None else None,
            then=tuple(_load_action(a) for a in then) if then is not None else None,
            otherwise=tuple(_load_action(a) for a in otherwise) if otherwise is not None else None,
        )

    return OtherNode(type=str(node_type))


def _load_condition(data: Any) -> Union[Combinator, Test]:
    if isinstance(data, (Combinator, Exists, Header, Address, OtherTest, Not)):
        return data

    data = _as_dict(data)
    node_type = data.get("Type")

    if node_type in ("allof", "anyof") or "Tests" in data:
        tests = data.get("Tests")
        return Combinator(
            type=str(node_type),
            tests=tuple(_load_test(t) for t in tests) if tests is not None else None,
        )

    return _load_test(data)


def _load_test(data: Any) -> Test:
    if isinstance(data, (Exists, Header, Address, OtherTest, Not)):
        return data

    data = _as_dict(data)
    node_type = data.get("Type")

    if node_type == "Not":
        return Not(test=_load_test(data.get("Test")))

    headers = _as_strings(data.get("Headers"))
    keys = _optional_strings(data.get("Keys"))
    match_type = (data.get("Match") or {}).get("Type")

    if node_type == "Exists":
        return Exists(headers=headers)
    if node_type == "Header":
        return Header(headers=headers, keys=keys, match_type=match_type)
    if node_type == "Address":
        return Address(headers=headers, keys=keys, match_type=match_type)
    return OtherTest(type=str(node_type), headers=headers, keys=keys, match_type=match_type)


def _load_action(data: Any):
    if isinstance(data, (Keep, Discard, FileInto, AddFlag, Vacation, OtherAction)):
        return data

    data = _as_dict(data)
    node_type = data.get("Type")

    if node_type == "Keep":
        return Keep()
    if node_type == "Discard":
        return Discard()
    if node_type == "FileInto":
        return FileInto(name=data.get("Name", ""))
    if node_type == "AddFlag":
        return AddFlag(flags=_as_strings(data.get("Flags")))
    if node_type in VACATION_TYPES:
        return Vacation(message=data.get("Message", ""), type=node_type)
    return OtherAction(type=str(node_type))
