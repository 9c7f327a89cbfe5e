"""
View builder: turns view description trees into PyQt6 widgets.

build() creates widgets for a tree; patch() brings previously built widgets in line
with a newer tree, reusing them wherever the shape allows. Box children that carry a
key are matched by key rather than position, so a row keeps its widgets (and the
keyboard focus inside them) while rows around it are inserted or removed.

Widgets never hold on to a message. Each interaction reads the message from the node
the widget was last built or patched with, then hands it to dispatch.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from PyQt6.QtWidgets import QBoxLayout, QHBoxLayout, QLabel, QVBoxLayout, QWidget

from pyqt_itemlist.core.view_nodes import (
    Box, Button, CheckBox, Direction, LineEdit, SpinBox, Text, ViewNode,
)
from pyqt_itemlist.exceptions import UnsupportedNodeError
from pyqt_itemlist.protocols import (
    ChangeSignalEmitter, ValueGettable, ValueSettable, WIDGET_ADAPTERS,
)

logger = logging.getLogger(__name__)

DispatchFn = Callable[[Any], None]


def _node_key(node: Optional[ViewNode]) -> Any:
    """Return the key of a keyed Box node, None for anything else."""
    if isinstance(node, Box):
        return node.key
    return None


class BoxWidget(QWidget):
    """Container widget materialising a Box node."""

    def __init__(self, node: Box, parent=None):
        super().__init__(parent)
        self.view_node = node
        self.child_widgets: List[QWidget] = []
        layout = QVBoxLayout(self) if node.direction is Direction.VERTICAL else QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self.setObjectName(node.role or "box")

    def box_layout(self) -> QBoxLayout:
        return self.layout()

    def set_children(self, widgets: List[QWidget]) -> None:
        """Lay out widgets in order, dropping any previous child not among them."""
        layout = self.box_layout()
        keep = set(id(widget) for widget in widgets)
        for widget in self.child_widgets:
            layout.removeWidget(widget)
            if id(widget) not in keep:
                widget.hide()
                widget.deleteLater()
        for widget in widgets:
            layout.addWidget(widget)
        self.child_widgets = list(widgets)

    def child_by_key(self, key: Any) -> Optional[QWidget]:
        for widget in self.child_widgets:
            node = getattr(widget, "view_node", None)
            if isinstance(node, Box) and node.key == key:
                return widget
        return None


class ViewBuilder:
    """
    Materialise view descriptions as widgets wired to a dispatch callback.

    Usage:
        builder = ViewBuilder(dispatch=self.dispatch)
        root = builder.build(tree)
        ...
        if not builder.patch(root, new_tree):
            root = builder.build(new_tree)
    """

    def __init__(self, dispatch: DispatchFn, spacing: int = 4,
                 adapters: Optional[Dict[str, type]] = None):
        self._dispatch = dispatch
        self._spacing = spacing
        # widget_id -> adapter class; hosts may substitute subclasses
        self._adapters = dict(WIDGET_ADAPTERS)
        if adapters:
            self._adapters.update(adapters)
        self._builders: Dict[type, Callable[[Any], QWidget]] = {
            Text: self._build_text,
            Button: self._build_button,
            LineEdit: self._build_line_edit,
            CheckBox: self._build_check_box,
            SpinBox: self._build_spin_box,
            Box: self._build_box,
        }
        self._patchers: Dict[type, Callable[[Any, Any], bool]] = {
            Text: self._patch_text,
            Button: self._patch_button,
            LineEdit: self._patch_line_edit,
            CheckBox: self._patch_check_box,
            SpinBox: self._patch_spin_box,
            Box: self._patch_box,
        }

    # ========== Public API ==========

    def build(self, node: ViewNode) -> QWidget:
        """
        Create a widget tree for node.

        Raises:
            UnsupportedNodeError: If node (or a descendant) has no widget mapping
        """
        builder = self._builders.get(type(node))
        if builder is None:
            raise UnsupportedNodeError(
                f"No widget for view node {type(node).__name__}. "
                f"Supported: {', '.join(cls.__name__ for cls in self._builders)}."
            )
        widget = builder(node)
        widget.view_node = node
        return widget

    def patch(self, widget: QWidget, node: ViewNode) -> bool:
        """
        Update widget in place to match node.

        Returns:
            True if widget now reflects node, False if it must be rebuilt
        """
        old_node = getattr(widget, "view_node", None)
        if old_node is None or type(old_node) is not type(node):
            return False
        patcher = self._patchers.get(type(node))
        if patcher is None or not patcher(widget, node):
            return False
        widget.view_node = node
        return True

    # ========== Signal wiring ==========

    def _connect(self, widget: QWidget, handler_attr: Optional[str]) -> None:
        """Route user changes on widget to dispatch via the widget's current node."""
        if not isinstance(widget, ChangeSignalEmitter):
            raise TypeError(
                f"Widget {type(widget).__name__} does not implement ChangeSignalEmitter ABC. "
                f"Add ChangeSignalEmitter to widget's base classes and implement connect_change_signal()."
            )
        if handler_attr is not None and not isinstance(widget, ValueGettable):
            raise TypeError(
                f"Widget {type(widget).__name__} does not implement ValueGettable ABC. "
                f"Add ValueGettable to widget's base classes and implement get_value()."
            )

        def on_change(_signal_value):
            node = widget.view_node
            if handler_attr is None:
                message = node.on_click
                if message is None:
                    return
            else:
                handler = getattr(node, handler_attr)
                if handler is None:
                    return
                message = handler(widget.get_value())
            logger.debug(f"{type(node).__name__} emitted {message!r}")
            self._dispatch(message)

        widget.connect_change_signal(on_change)

    def _adapter(self, widget_id: str) -> type:
        return self._adapters[widget_id]

    @staticmethod
    def _set_value(widget: QWidget, value: Any) -> None:
        if not isinstance(widget, ValueSettable):
            raise TypeError(
                f"Widget {type(widget).__name__} does not implement ValueSettable ABC. "
                f"Add ValueSettable to widget's base classes and implement set_value()."
            )
        widget.set_value(value)

    # ========== Builders ==========

    def _build_text(self, node: Text) -> QWidget:
        return QLabel(node.text)

    def _build_button(self, node: Button) -> QWidget:
        button = self._adapter("push_button")(node.label)
        self._connect(button, None)
        return button

    def _build_line_edit(self, node: LineEdit) -> QWidget:
        line_edit = self._adapter("line_edit")()
        self._patch_line_edit(line_edit, node)
        self._connect(line_edit, "on_change")
        return line_edit

    def _build_check_box(self, node: CheckBox) -> QWidget:
        check_box = self._adapter("check_box")()
        self._patch_check_box(check_box, node)
        self._connect(check_box, "on_toggle")
        return check_box

    def _build_spin_box(self, node: SpinBox) -> QWidget:
        spin_box = self._adapter("spin_box")()
        self._patch_spin_box(spin_box, node)
        self._connect(spin_box, "on_change")
        return spin_box

    def _build_box(self, node: Box) -> QWidget:
        box = BoxWidget(node)
        if node.direction is Direction.VERTICAL:
            box.box_layout().setSpacing(self._spacing)
        box.set_children([self.build(child) for child in node.items])
        return box

    # ========== Patchers ==========

    def _patch_text(self, widget: QLabel, node: Text) -> bool:
        if widget.text() != node.text:
            widget.setText(node.text)
        return True

    def _patch_button(self, widget: QWidget, node: Button) -> bool:
        if widget.text() != node.label:
            self._set_value(widget, node.label)
        return True

    def _patch_line_edit(self, widget: QWidget, node: LineEdit) -> bool:
        self._set_value(widget, node.value)
        widget.setPlaceholderText(node.placeholder)
        widget.setReadOnly(node.on_change is None)
        return True

    def _patch_check_box(self, widget: QWidget, node: CheckBox) -> bool:
        self._set_value(widget, node.checked)
        widget.setText(node.label)
        widget.setEnabled(node.on_toggle is not None)
        return True

    def _patch_spin_box(self, widget: QWidget, node: SpinBox) -> bool:
        widget.configure_range(node.minimum, node.maximum)
        self._set_value(widget, node.value)
        widget.setReadOnly(node.on_change is None)
        return True

    def _patch_box(self, widget: BoxWidget, node: Box) -> bool:
        if widget.view_node.direction is not node.direction:
            return False

        # Keyed children match by key, unkeyed ones by their order among unkeyed siblings
        keyed = {}
        unkeyed = []
        for child in widget.child_widgets:
            child_key = _node_key(getattr(child, "view_node", None))
            if child_key is None:
                unkeyed.append(child)
            else:
                keyed[child_key] = child

        new_children = []
        reused = set()
        unkeyed_index = 0
        for child_node in node.items:
            child_key = _node_key(child_node)
            if child_key is not None:
                candidate = keyed.get(child_key)
            else:
                candidate = unkeyed[unkeyed_index] if unkeyed_index < len(unkeyed) else None
                unkeyed_index += 1

            if candidate is not None and id(candidate) not in reused and self.patch(candidate, child_node):
                reused.add(id(candidate))
                new_children.append(candidate)
            else:
                new_children.append(self.build(child_node))

        widget.set_children(new_children)
        widget.setObjectName(node.role or "box")
        logger.debug(f"Patched {node.role or 'box'}: reused {len(reused)}/{len(node.items)} children")
        return True
