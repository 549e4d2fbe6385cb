"""Sieve tree nodes - all frozen (immutable) dataclasses.

Each parser node type maps to one variant. Nodes are grouped by where they
may appear in a script: top level, inside an ``if`` test, or inside a
``then`` block.
"""

from dataclasses import dataclass, field
from typing import Optional, Union


# ---------------------------------------------------------------------------
# Tests (conditions of an ``if``)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Exists:
    """``exists "X-Attached"``."""
    headers: tuple[str, ...] = ()
    type: str = field(default="Exists", init=False)


@dataclass(frozen=True)
class Header:
    """``header :contains "Subject" ["foo"]``."""
    headers: tuple[str, ...] = ()
    keys: Optional[tuple[str, ...]] = None
    match_type: Optional[str] = None  # "Contains", "Is", "Matches"...
    type: str = field(default="Header", init=False)


@dataclass(frozen=True)
class Address:
    """``address :all :is "From" ["me@example.com"]``."""
    headers: tuple[str, ...] = ()
    keys: Optional[tuple[str, ...]] = None
    match_type: Optional[str] = None
    type: str = field(default="Address", init=False)


@dataclass(frozen=True)
class OtherTest:
    """Any other test the parser produced (envelope, body, size...)."""
    type: str
    headers: tuple[str, ...] = ()
    keys: Optional[tuple[str, ...]] = None
    match_type: Optional[str] = None


@dataclass(frozen=True)
class Not:
    """``not <test>``."""
    test: "Test"
    type: str = field(default="Not", init=False)


Test = Union[Exists, Header, Address, OtherTest, Not]


@dataclass(frozen=True)
class Combinator:
    """``allof(...)`` / ``anyof(...)``."""
    type: str  # "allof" or "anyof"
    tests: Optional[tuple[Test, ...]] = None


# ---------------------------------------------------------------------------
# Actions (content of a ``then`` block)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Keep:
    type: str = field(default="Keep", init=False)


@dataclass(frozen=True)
class Discard:
    type: str = field(default="Discard", init=False)


@dataclass(frozen=True)
class FileInto:
    name: str
    type: str = field(default="FileInto", init=False)


@dataclass(frozen=True)
class AddFlag:
    flags: tuple[str, ...] = ()
    type: str = field(default="AddFlag", init=False)


@dataclass(frozen=True)
class Vacation:
    """Auto-reply. The parser emits either ``Vacation`` or ``Vacation\\Vacation``."""
    message: str
    type: str = "Vacation"


@dataclass(frozen=True)
class OtherAction:
    """Action we have no simple representation for (redirect, reject...)."""
    type: str


Action = Union[Keep, Discard, FileInto, AddFlag, Vacation, OtherAction]


# ---------------------------------------------------------------------------
# Top level
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Require:
    extensions: tuple[str, ...] = ()
    type: str = field(default="Require", init=False)


@dataclass(frozen=True)
class Comment:
    text: str = ""
    type: str = field(default="Comment", init=False)


@dataclass(frozen=True)
class If:
    """``if <test> { <then> } else { <else> }``.

    ``test`` and ``then`` are None when the parser output lacked them; the
    extractor reports those nodes as invalid.
    """
    test: Union[Combinator, Test, None] = None
    then: Optional[tuple[Action, ...]] = None
    otherwise: Optional[tuple[Action, ...]] = None
    type: str = field(default="If", init=False)


@dataclass(frozen=True)
class OtherNode:
    """Top-level node ignored by the simple model."""
    type: str


Node = Union[Require, Comment, If, OtherNode]
