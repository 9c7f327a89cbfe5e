"""
Identity store for dynamic item lists.

Holds the ordered (identifier, item) entries of one list together with the next
identifier to issue and the template used to initialise new items. Identifiers are
opaque integers: unique for the lifetime of the list, never reused, never positional.
"""

import copy
from dataclasses import dataclass, replace
from typing import Any, Generic, Iterable, List, Optional, Tuple, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ListState(Generic[T]):
    """Immutable state of one item list.

    Attributes:
        entries: Ordered (identifier, item) pairs in display order
        next_id: Identifier issued by the next insertion
        default_item: Template copied into every newly inserted slot
    """

    entries: Tuple[Tuple[int, T], ...] = ()
    next_id: int = 0
    default_item: Optional[T] = None

    def fresh_item(self) -> T:
        """Return an independent copy of the template item."""
        return copy.deepcopy(self.default_item)

    def __len__(self) -> int:
        return len(self.entries)


def init_list(default_item: T) -> ListState[T]:
    """Create an empty list whose inserted items start as copies of default_item."""
    return ListState(entries=(), next_id=0, default_item=default_item)


def get_items(state: ListState[T]) -> List[T]:
    """Project the list down to its item values, in order."""
    return [item for _, item in state.entries]


def get_identifiers(state: ListState[T]) -> List[int]:
    """Return the identifiers of the list, in order."""
    return [item_id for item_id, _ in state.entries]


def find_item(state: ListState[T], item_id: int, default: Any = None) -> Any:
    """Return the item stored under item_id, or default if no entry has it."""
    for entry_id, item in state.entries:
        if entry_id == item_id:
            return item
    return default


def set_items(items: Iterable[T], state: ListState[T]) -> ListState[T]:
    """
    Replace every entry with the given items.

    Identifiers are reassigned from scratch as 0..n-1 and next_id becomes n, even for
    values that were already present. Identifiers captured before the call (for
    example by a rendered control) may afterwards address a different item or none.

    Args:
        items: New item values, in order
        state: State whose template is kept

    Returns:
        New ListState holding the re-identified items
    """
    entries = tuple(enumerate(items))
    return replace(state, entries=entries, next_id=len(entries))
