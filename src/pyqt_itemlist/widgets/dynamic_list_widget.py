"""
Dynamic List Widget for PyQt6 GUI.

Repeats one item component as a user-editable list. Holds the current ListState,
applies every edit request its rows emit and re-renders through the view builder.
"""

import logging
from typing import Any, Callable, Iterable, List, Optional

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QScrollArea, QVBoxLayout, QWidget

from pyqt_itemlist.core import (
    ListState, ViewNode, apply_edit, get_items, init_list, render_list, set_items,
)
from pyqt_itemlist.core.edit_requests import EditRequest
from pyqt_itemlist.protocols import ItemComponent, ItemListConfig, ListLabels, get_list_config
from pyqt_itemlist.widgets.view_builder import BoxWidget, ViewBuilder

logger = logging.getLogger(__name__)


class DynamicListWidget(QWidget):
    """
    Editable list of one item component.

    Every row shows the item's own widgets plus delete and insert-after buttons; a
    trailing button appends a new item. The widget is the single owner of the list
    state: edits are applied one at a time on the GUI thread in the order they arrive.
    """

    # Signals
    edit_applied = pyqtSignal(object)  # EditRequest
    items_changed = pyqtSignal(list)  # current items, in order

    def __init__(self, default_item: Any, update_item: Callable[[Any, Any], Any],
                 render_item: Callable[[Any], ViewNode], labels: Optional[ListLabels] = None,
                 initial_items: Optional[Iterable[Any]] = None,
                 config: Optional[ItemListConfig] = None, parent=None):
        super().__init__(parent)

        self.config = config or get_list_config()
        self.labels = labels or self.config.default_labels
        self._update_item = update_item
        self._render_item = render_item

        self._state: ListState = init_list(default_item)
        if initial_items is not None:
            self._state = set_items(initial_items, self._state)

        self._builder = ViewBuilder(dispatch=self.dispatch, spacing=self.config.item_spacing)
        self._root: Optional[BoxWidget] = None

        self.setup_ui()
        self.refresh()

        logger.debug(f"Dynamic list initialized with {len(self._state)} items")

    @classmethod
    def from_component(cls, component: ItemComponent, labels: Optional[ListLabels] = None,
                       initial_items: Optional[Iterable[Any]] = None,
                       config: Optional[ItemListConfig] = None, parent=None) -> "DynamicListWidget":
        """Create a list widget repeating an ItemComponent."""
        if not isinstance(component, ItemComponent):
            raise TypeError(
                f"{type(component).__name__} does not implement ItemComponent ABC. "
                f"Add ItemComponent to its base classes or use FunctionItemComponent."
            )
        return cls(component.default_item(), component.update, component.render,
                   labels=labels, initial_items=initial_items, config=config, parent=parent)

    def setup_ui(self):
        """Setup the user interface."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAsNeeded)
        layout.addWidget(self.scroll_area)

    # ========== State access ==========

    @property
    def state(self) -> ListState:
        return self._state

    def items(self) -> List[Any]:
        """Current item values, in display order."""
        return get_items(self._state)

    def set_items(self, items: Iterable[Any]) -> None:
        """
        Replace all items.

        Every item receives a new identifier, so all rows are rebuilt.
        """
        self._state = set_items(items, self._state)
        self.refresh(rebuild=True)
        self.items_changed.emit(self.items())

    def row_widget(self, item_id: int) -> Optional[QWidget]:
        """Return the row widget showing the item with item_id, if present."""
        if self._root is None:
            return None
        return self._root.child_by_key(item_id)

    def add_button(self) -> QWidget:
        """Return the trailing button that appends a new item."""
        return self._root.child_widgets[-1]

    # ========== Edits ==========

    def dispatch(self, request: EditRequest) -> None:
        """Apply request to the current state and re-render."""
        previous = self._state
        self._state = apply_edit(request, previous, self._update_item, self.config)
        self.edit_applied.emit(request)

        if self._state is previous:
            return

        self.refresh()
        if self._state.entries != previous.entries:
            self.items_changed.emit(self.items())

    def refresh(self, rebuild: bool = False) -> None:
        """Bring the widgets in line with the current state."""
        tree = render_list(self._state, self.labels, self._render_item)
        if not rebuild and self._root is not None and self._builder.patch(self._root, tree):
            return

        self._root = self._builder.build(tree)
        # setWidget deletes the previous root
        self.scroll_area.setWidget(self._root)
        logger.debug(f"Rebuilt list view with {len(self._state)} rows")
