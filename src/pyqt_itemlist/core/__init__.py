"""
Core item list logic.

Identity store, edit engine and composition layer. Everything here is a pure function
over immutable values; widgets live in pyqt_itemlist.widgets.
"""

from .list_state import (
    ListState,
    init_list,
    get_items,
    set_items,
    get_identifiers,
    find_item,
)
from .edit_requests import (
    EditRequest,
    InsertAtEnd,
    InsertAfter,
    Remove,
    Forward,
    is_edit_request,
)
from .edit_engine import apply_edit, replay_edits
from .view_nodes import (
    ViewNode,
    Direction,
    Text,
    Button,
    LineEdit,
    CheckBox,
    SpinBox,
    Box,
    hbox,
    vbox,
    iter_nodes,
    iter_messages,
    find_nodes,
)
from .composition import render_list, render_item_block, lift, LIST_ROLE, ITEM_ROLE

__all__ = [
    "ListState",
    "init_list",
    "get_items",
    "set_items",
    "get_identifiers",
    "find_item",
    "EditRequest",
    "InsertAtEnd",
    "InsertAfter",
    "Remove",
    "Forward",
    "is_edit_request",
    "apply_edit",
    "replay_edits",
    "ViewNode",
    "Direction",
    "Text",
    "Button",
    "LineEdit",
    "CheckBox",
    "SpinBox",
    "Box",
    "hbox",
    "vbox",
    "iter_nodes",
    "iter_messages",
    "find_nodes",
    "render_list",
    "render_item_block",
    "lift",
    "LIST_ROLE",
    "ITEM_ROLE",
]
