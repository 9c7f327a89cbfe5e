"""Item list exceptions."""


class ItemListError(Exception):
    """Base class for errors raised by pyqt-itemlist."""


class UnknownEditRequestError(ItemListError, TypeError):
    """Raised when an object that is not an edit request reaches the edit engine."""


class UnsupportedNodeError(ItemListError, TypeError):
    """Raised when the view builder has no widget for a view description node."""
