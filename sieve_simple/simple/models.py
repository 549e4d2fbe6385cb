"""Simple filter models - what the filter editor works with."""

from dataclasses import dataclass, field
from typing import Optional

from ..tree.models import Comment, If


@dataclass(frozen=True)
class LabelValue:
    """Display label plus canonical machine value."""
    label: str
    value: str

    def to_dict(self) -> dict:
        return {"label": self.label, "value": self.value}


@dataclass(frozen=True)
class Condition:
    """A single normalized condition."""
    type: LabelValue  # attachments, subject, sender, recipient or ''
    comparator: LabelValue  # e.g. "contains", "!starts"
    values: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "Type": self.type.to_dict(),
            "Comparator": self.comparator.to_dict(),
            "Values": list(self.values),
        }


@dataclass(frozen=True)
class Mark:
    """Flags set on matching messages."""
    read: bool = False
    starred: bool = False


@dataclass(frozen=True)
class Actions:
    """Everything the filter does to a matching message."""
    file_into: tuple[str, ...] = ()
    mark: Mark = field(default_factory=Mark)
    vacation: Optional[str] = None  # None when there is no auto-reply

    def to_dict(self) -> dict:
        data = {
            "FileInto": list(self.file_into),
            "Mark": {"Read": self.mark.read, "Starred": self.mark.starred},
        }
        if self.vacation is not None:
            data["Vacation"] = self.vacation
        return data


@dataclass(frozen=True)
class SimpleFilter:
    """Result of a successful conversion."""
    operator: LabelValue
    conditions: tuple[Condition, ...]
    actions: Actions

    def to_dict(self) -> dict:
        """Convert to the plain structure consumed by the editor."""
        return {
            "Operator": self.operator.to_dict(),
            "Conditions": [condition.to_dict() for condition in self.conditions],
            "Actions": self.actions.to_dict(),
        }


@dataclass(frozen=True)
class MainNode:
    """The filter's ``if`` node and its governing annotation comment."""
    tree: If
    comment: Optional[Comment] = None


@dataclass(frozen=True)
class CommentAnnotation:
    """Metadata declared in a ``/** @type ... @comparator ... */`` comment."""
    type: str = ""  # "all", "any" or '' when not declared
    comparators: tuple[str, ...] = ()
