"""
pyqt-itemlist: dynamic, user-editable lists of any item component for PyQt6.

Turns one item component (a template value, an update function and a render
function) into a list the user can grow, shrink and edit in place.

Architecture:
- Tier 1 (Core): Identity store, edit engine and composition layer over immutable state
- Tier 2 (Protocols): Widget ABCs, adapters, item component contract and configuration
- Tier 3 (Widgets): View builder and the DynamicListWidget host

Key Features:
- Stable identifiers that survive insertions and removals
- Item messages lifted into list-level edit requests
- Keyed widget reuse, so rows keep focus while the list changes around them
"""

__version__ = "0.1.0"

from .exceptions import ItemListError, UnknownEditRequestError, UnsupportedNodeError
from .core import (
    ListState,
    init_list,
    get_items,
    set_items,
    apply_edit,
    render_list,
    InsertAtEnd,
    InsertAfter,
    Remove,
    Forward,
)
from .protocols import ItemListConfig, ListLabels, set_list_config, get_list_config

__all__ = [
    "__version__",
    "ItemListError",
    "UnknownEditRequestError",
    "UnsupportedNodeError",
    "ListState",
    "init_list",
    "get_items",
    "set_items",
    "apply_edit",
    "render_list",
    "InsertAtEnd",
    "InsertAfter",
    "Remove",
    "Forward",
    "ItemListConfig",
    "ListLabels",
    "set_list_config",
    "get_list_config",
]
