"""
PyQt6 widgets for dynamic item lists.

The view builder materialises view descriptions; DynamicListWidget hosts a list state
and keeps its widgets in sync with it.
"""

from .view_builder import ViewBuilder, BoxWidget
from .dynamic_list_widget import DynamicListWidget

__all__ = [
    "ViewBuilder",
    "BoxWidget",
    "DynamicListWidget",
]
