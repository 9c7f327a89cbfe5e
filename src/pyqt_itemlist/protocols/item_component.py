"""Item component contract.

An item component bundles what a dynamic list needs to know about one kind of item:
the template for new items, how an item reacts to its own messages, and how it is
drawn. The list never passes identifiers to a component.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable

from pyqt_itemlist.core.view_nodes import ViewNode


class ItemComponent(ABC):
    """ABC for components that can be repeated inside a dynamic list."""

    @abstractmethod
    def default_item(self) -> Any:
        """Return the template value for newly inserted items."""
        pass

    @abstractmethod
    def update(self, message: Any, item: Any) -> Any:
        """Return the item after handling message. Must not mutate item."""
        pass

    @abstractmethod
    def render(self, item: Any) -> ViewNode:
        """Describe the item's view. Emitted messages are item-level messages."""
        pass


class FunctionItemComponent(ItemComponent):
    """ItemComponent assembled from plain callables."""

    def __init__(self, default_item: Any, update: Callable[[Any, Any], Any],
                 render: Callable[[Any], ViewNode]):
        self._default_item = default_item
        self._update = update
        self._render = render

    def default_item(self) -> Any:
        return self._default_item

    def update(self, message: Any, item: Any) -> Any:
        return self._update(message, item)

    def render(self, item: Any) -> ViewNode:
        return self._render(item)
