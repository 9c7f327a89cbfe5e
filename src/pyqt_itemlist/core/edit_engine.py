"""
Edit engine for dynamic item lists.

Pure state transition: (request, state) -> new state. The input state is never
modified. Item-level changes are delegated to a host-supplied update function that
never sees identifiers.

Requests addressing an identifier that is not in the list degrade to no-ops, with one
exception: a missed InsertAfter still consumes an identifier unless the active
ItemListConfig disables it.
"""

import logging
from dataclasses import replace
from typing import Any, Callable, Dict, Iterable, Optional, TypeVar

from pyqt_itemlist.core.edit_requests import (
    EDIT_REQUEST_TYPES, EditRequest, Forward, InsertAfter, InsertAtEnd, Remove, is_edit_request,
)
from pyqt_itemlist.core.list_state import ListState
from pyqt_itemlist.exceptions import UnknownEditRequestError
from pyqt_itemlist.protocols.list_config import ItemListConfig, get_list_config

logger = logging.getLogger(__name__)

T = TypeVar("T")
UpdateItemFn = Callable[[Any, T], T]


def _insert_at_end(request: InsertAtEnd, state: ListState, update_item: UpdateItemFn,
                   config: ItemListConfig) -> ListState:
    entry = (state.next_id, state.fresh_item())
    return replace(state, entries=state.entries + (entry,), next_id=state.next_id + 1)


def _insert_after(request: InsertAfter, state: ListState, update_item: UpdateItemFn,
                  config: ItemListConfig) -> ListState:
    new_id = state.next_id
    entries = []
    matched = False
    for entry in state.entries:
        entries.append(entry)
        if entry[0] == request.item_id:
            # Every match gets its own copy but they all share new_id
            entries.append((new_id, state.fresh_item()))
            matched = True

    if not matched:
        logger.debug(f"InsertAfter missed identifier {request.item_id}")
        if not config.consume_id_on_missed_insert:
            return state
        return replace(state, next_id=new_id + 1)

    return replace(state, entries=tuple(entries), next_id=new_id + 1)


def _remove(request: Remove, state: ListState, update_item: UpdateItemFn,
            config: ItemListConfig) -> ListState:
    entries = tuple(entry for entry in state.entries if entry[0] != request.item_id)
    if len(entries) == len(state.entries):
        logger.debug(f"Remove missed identifier {request.item_id}")
        return state
    return replace(state, entries=entries)


def _forward(request: Forward, state: ListState, update_item: UpdateItemFn,
             config: ItemListConfig) -> ListState:
    entries = []
    matched = False
    for item_id, item in state.entries:
        if item_id == request.item_id:
            item = update_item(request.message, item)
            matched = True
        entries.append((item_id, item))

    if not matched:
        logger.debug(f"Forward missed identifier {request.item_id}")
        return state
    return replace(state, entries=tuple(entries))


_HANDLERS: Dict[type, Callable[..., ListState]] = {
    InsertAtEnd: _insert_at_end,
    InsertAfter: _insert_after,
    Remove: _remove,
    Forward: _forward,
}


def apply_edit(request: EditRequest, state: ListState[T], update_item: UpdateItemFn,
               config: Optional[ItemListConfig] = None) -> ListState[T]:
    """
    Apply one edit request to a list state.

    Args:
        request: InsertAtEnd, InsertAfter, Remove or Forward
        state: Current list state (left untouched)
        update_item: Item-level update, called as update_item(message, item)
        config: Behaviour switches; defaults to the active ItemListConfig

    Returns:
        The new list state

    Raises:
        UnknownEditRequestError: If request is not an edit request
    """
    if not is_edit_request(request):
        raise UnknownEditRequestError(
            f"{type(request).__name__} is not an edit request. "
            f"Expected one of: {', '.join(cls.__name__ for cls in EDIT_REQUEST_TYPES)}."
        )
    handler = next(h for cls, h in _HANDLERS.items() if isinstance(request, cls))

    config = config or get_list_config()
    new_state = handler(request, state, update_item, config)

    log = logger.info if config.log_edits else logger.debug
    log(f"Applied {request!r}: {len(state.entries)} -> {len(new_state.entries)} items, "
        f"next_id={new_state.next_id}")
    return new_state


def replay_edits(requests: Iterable[EditRequest], state: ListState[T],
                 update_item: UpdateItemFn,
                 config: Optional[ItemListConfig] = None) -> ListState[T]:
    """Apply requests one after another, each to the state produced by the previous."""
    for request in requests:
        state = apply_edit(request, state, update_item, config)
    return state
