"""pytest configuration and fixtures for pyqt-itemlist tests."""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from pyqt_itemlist.core import LineEdit
from pyqt_itemlist.protocols import set_list_config


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture(autouse=True)
def reset_list_config():
    """Restore the default configuration after every test."""
    yield
    set_list_config(None)


def replace_value(message, item):
    """Item update that replaces the item with the message."""
    return message


def render_text_item(item):
    """Item render: an editable line whose edits become the new value."""
    return LineEdit(value=item, on_change=lambda text: text)


@pytest.fixture
def text_item():
    """(update, render) pair for plain string items."""
    return replace_value, render_text_item
