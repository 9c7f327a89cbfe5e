"""
Composition layer for dynamic item lists.

Builds the list-wide view from a per-item render function. Each item's description is
lifted so that any message it emits arrives as Forward(item_id, message), and every
item gets its own delete and insert-after controls.
"""

from functools import partial
from typing import Any, Callable, Optional

from pyqt_itemlist.core.edit_requests import Forward, InsertAfter, InsertAtEnd, Remove
from pyqt_itemlist.core.list_state import ListState
from pyqt_itemlist.core.view_nodes import Box, Button, Direction, ViewNode
from pyqt_itemlist.protocols.list_config import ListLabels, get_list_config

RenderItemFn = Callable[[Any], ViewNode]

LIST_ROLE = "list"
ITEM_ROLE = "item"


def lift(node: ViewNode, item_id: int) -> ViewNode:
    """Tag every message node can emit with the identifier of its item."""
    return node.map(partial(Forward, item_id))


def render_item_block(item_id: int, item: Any, labels: ListLabels,
                      render_item: RenderItemFn) -> Box:
    """Render one entry: the item's own view followed by its delete and insert controls."""
    return Box(
        (
            lift(render_item(item), item_id),
            Button(labels.delete_label, Remove(item_id)),
            Button(labels.insert_label, InsertAfter(item_id)),
        ),
        direction=Direction.HORIZONTAL,
        role=ITEM_ROLE,
        key=item_id,
    )


def render_list(state: ListState, labels: Optional[ListLabels],
                render_item: RenderItemFn) -> Box:
    """
    Render a whole list.

    Args:
        state: List to render
        labels: Control labels; defaults to the configured labels
        render_item: Item-level render function returning a ViewNode

    Returns:
        Box with role "list" holding one "item" Box per entry, in order, followed by a
        trailing Button that emits InsertAtEnd
    """
    labels = labels or get_list_config().default_labels
    blocks = [render_item_block(item_id, item, labels, render_item)
              for item_id, item in state.entries]
    add_control = Button(labels.insert_label, InsertAtEnd())
    return Box(tuple(blocks) + (add_control,), direction=Direction.VERTICAL, role=LIST_ROLE)
