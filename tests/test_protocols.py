"""Tests for widget protocols, adapters, config and item components."""

import pytest


def test_line_edit_adapter(qapp):
    """Test LineEditAdapter implements protocols."""
    from pyqt_itemlist.protocols import (
        ChangeSignalEmitter, LineEditAdapter, ValueGettable, ValueSettable,
    )

    adapter = LineEditAdapter()
    assert isinstance(adapter, ValueGettable)
    assert isinstance(adapter, ValueSettable)
    assert isinstance(adapter, ChangeSignalEmitter)

    # Test value roundtrip
    adapter.set_value("test")
    assert adapter.get_value() == "test"
    adapter.set_value(None)
    assert adapter.get_value() == ""


def test_set_value_does_not_emit_change(qapp):
    """Test programmatic updates never reach change callbacks."""
    from pyqt_itemlist.protocols import CheckBoxAdapter, SpinBoxAdapter

    received = []
    spin_box = SpinBoxAdapter()
    spin_box.configure_range(0, 10)
    spin_box.connect_change_signal(received.append)
    spin_box.set_value(5)
    assert spin_box.get_value() == 5

    check_box = CheckBoxAdapter()
    check_box.connect_change_signal(received.append)
    check_box.set_value(True)
    assert check_box.get_value() is True

    assert received == []


def test_push_button_adapter_reports_clicks(qapp):
    """Test PushButtonAdapter forwards clicks with no value."""
    from pyqt_itemlist.protocols import PushButtonAdapter, ValueGettable

    clicks = []
    button = PushButtonAdapter("Go")
    button.connect_change_signal(clicks.append)
    button.click()
    assert clicks == [None]
    assert not isinstance(button, ValueGettable)


def test_widget_adapters_registry():
    """Test adapters are registered under their widget ids."""
    from pyqt_itemlist.protocols import WIDGET_ADAPTERS, LineEditAdapter

    assert WIDGET_ADAPTERS["line_edit"] is LineEditAdapter
    assert set(WIDGET_ADAPTERS) == {"line_edit", "spin_box", "check_box", "push_button"}


def test_list_config_defaults_and_override():
    """Test get_list_config falls back to defaults until one is set."""
    from pyqt_itemlist.protocols import ItemListConfig, ListLabels, get_list_config, set_list_config

    default = get_list_config()
    assert default.consume_id_on_missed_insert is True
    assert default.default_labels == ListLabels("Insert", "Delete")

    custom = ItemListConfig(log_edits=True)
    set_list_config(custom)
    assert get_list_config() is custom


def test_function_item_component():
    """Test FunctionItemComponent delegates to its callables."""
    from pyqt_itemlist.core import Text
    from pyqt_itemlist.protocols import FunctionItemComponent, ItemComponent

    component = FunctionItemComponent("Hello", lambda message, item: message, Text)
    assert isinstance(component, ItemComponent)
    assert component.default_item() == "Hello"
    assert component.update("Hi", "Hello") == "Hi"
    assert component.render("Hello") == Text("Hello")


def test_item_component_is_abstract():
    """Test ItemComponent cannot be instantiated without its methods."""
    from pyqt_itemlist.protocols import ItemComponent

    with pytest.raises(TypeError):
        ItemComponent()
