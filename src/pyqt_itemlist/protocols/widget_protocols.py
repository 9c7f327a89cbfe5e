"""
Widget ABC contracts for item list views.

Defines the explicit contracts a widget must implement before the view builder will
read, write or listen to it, in place of duck typing on Qt's inconsistent APIs.

Design Philosophy:
- Explicit inheritance over duck typing
- Fail-loud over fail-silent
"""

from abc import ABC, abstractmethod
from typing import Any, Callable


class ValueGettable(ABC):
    """
    ABC for widgets that can return a value.

    Input widgets implement this so emitted messages can be built from their value.
    """

    @abstractmethod
    def get_value(self) -> Any:
        """
        Get the current value from the widget.

        Returns:
            The widget's current value
        """
        pass


class ValueSettable(ABC):
    """
    ABC for widgets that can accept a value.

    Input widgets implement this so a re-render can update them in place.
    """

    @abstractmethod
    def set_value(self, value: Any) -> None:
        """
        Set the widget's value without emitting a change signal.

        Args:
            value: The value to display
        """
        pass


class ChangeSignalEmitter(ABC):
    """
    ABC for widgets that report user changes.

    Provides one connection point regardless of the underlying Qt signal name
    (textEdited vs valueChanged vs toggled vs clicked).
    """

    @abstractmethod
    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """
        Connect callback to the widget's user-change signal.

        Args:
            callback: Called with the widget's new value.
                     Signature: callback(new_value: Any) -> None
        """
        pass
