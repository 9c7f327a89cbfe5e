"""
Widget adapters that wrap Qt widgets to implement the widget ABCs.

Normalizes Qt's inconsistent APIs:
- QLineEdit.text() vs QSpinBox.value() vs QCheckBox.isChecked()
- QLineEdit.setText() vs QSpinBox.setValue() vs QCheckBox.setChecked()
- textEdited vs valueChanged vs toggled vs clicked

set_value() blocks signals, so only user interaction reaches change callbacks.
"""

from abc import ABCMeta
from contextlib import contextmanager
from typing import Any, Callable

from PyQt6.QtCore import QObject
from PyQt6.QtWidgets import QCheckBox, QLineEdit, QPushButton, QSpinBox

from .widget_protocols import ValueGettable, ValueSettable, ChangeSignalEmitter

# PyQt-specific metaclass that combines ABCMeta with Qt's metaclass
_QtMetaclass = type(QObject)


class PyQtWidgetMeta(_QtMetaclass, ABCMeta):
    """Metaclass for PyQt widgets that need ABC support."""
    pass


@contextmanager
def signals_blocked(widget: QObject):
    """Suppress signals of widget for the duration of the block."""
    previous = widget.blockSignals(True)
    try:
        yield widget
    finally:
        widget.blockSignals(previous)


class LineEditAdapter(QLineEdit, ValueGettable, ValueSettable, ChangeSignalEmitter,
                      metaclass=PyQtWidgetMeta):
    """
    Adapter for QLineEdit.

    - .text() → .get_value()
    - .setText() → .set_value()
    - .textEdited → .connect_change_signal()
    """

    _widget_id = "line_edit"

    def get_value(self) -> Any:
        """Implement ValueGettable ABC."""
        return self.text()

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        text = "" if value is None else str(value)
        if text == self.text():
            # Leave cursor position alone while the user is typing
            return
        with signals_blocked(self):
            self.setText(text)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        self.textEdited.connect(callback)


class SpinBoxAdapter(QSpinBox, ValueGettable, ValueSettable, ChangeSignalEmitter,
                     metaclass=PyQtWidgetMeta):
    """Adapter for QSpinBox."""

    _widget_id = "spin_box"

    def get_value(self) -> Any:
        """Implement ValueGettable ABC."""
        return self.value()

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        with signals_blocked(self):
            self.setValue(int(value))

    def configure_range(self, minimum: int, maximum: int) -> None:
        with signals_blocked(self):
            self.setRange(int(minimum), int(maximum))

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        self.valueChanged.connect(callback)


class CheckBoxAdapter(QCheckBox, ValueGettable, ValueSettable, ChangeSignalEmitter,
                      metaclass=PyQtWidgetMeta):
    """Adapter for QCheckBox."""

    _widget_id = "check_box"

    def get_value(self) -> Any:
        """Implement ValueGettable ABC."""
        return self.isChecked()

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        with signals_blocked(self):
            self.setChecked(bool(value))

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        self.toggled.connect(callback)


class PushButtonAdapter(QPushButton, ValueSettable, ChangeSignalEmitter,
                        metaclass=PyQtWidgetMeta):
    """
    Adapter for QPushButton.

    The value of a button is its label; activation reports no value.
    """

    _widget_id = "push_button"

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        self.setText("" if value is None else str(value))

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        self.clicked.connect(lambda checked=False: callback(None))


WIDGET_ADAPTERS = {
    adapter_class._widget_id: adapter_class
    for adapter_class in (LineEditAdapter, SpinBoxAdapter, CheckBoxAdapter, PushButtonAdapter)
}
