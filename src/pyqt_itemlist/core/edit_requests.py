"""
List-level edit requests.

An edit request is the only message type a dynamic item list understands. Item-level
messages travel inside Forward, tagged with the identifier of the item they target.
"""

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class InsertAtEnd:
    """Append a fresh item after the last entry."""


@dataclass(frozen=True)
class InsertAfter:
    """Insert a fresh item immediately after the entry with item_id."""

    item_id: int


@dataclass(frozen=True)
class Remove:
    """Drop the entry with item_id."""

    item_id: int


@dataclass(frozen=True)
class Forward:
    """Deliver an item-level message to the entry with item_id."""

    item_id: int
    message: Any


EditRequest = Union[InsertAtEnd, InsertAfter, Remove, Forward]

EDIT_REQUEST_TYPES = (InsertAtEnd, InsertAfter, Remove, Forward)


def is_edit_request(obj: Any) -> bool:
    """Check if obj is one of the list-level edit requests."""
    return isinstance(obj, EDIT_REQUEST_TYPES)
