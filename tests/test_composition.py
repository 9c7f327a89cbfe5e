"""Tests for view description nodes and list rendering."""

import pytest

from pyqt_itemlist.core import (
    Box, Button, CheckBox, Direction, Forward, InsertAfter, InsertAtEnd, LineEdit, Remove,
    SpinBox, Text, apply_edit, find_nodes, hbox, init_list, iter_messages, render_list,
    set_items, vbox, ITEM_ROLE, LIST_ROLE,
)
from pyqt_itemlist.protocols import ItemListConfig, ListLabels, set_list_config


def render_greeting(item):
    return hbox(
        Text(item),
        Button("Shout", "shout"),
        LineEdit(item, on_change=lambda text: ("rename", text)),
    )


def test_map_lifts_button_and_input_messages():
    """Test map() rewrites static messages and composes input handlers."""
    node = vbox(Button("Go", "go"), LineEdit("a", on_change=str.upper), Text("static"))
    mapped = node.map(lambda message: ("wrapped", message))

    button, line_edit, text = mapped.items
    assert button.on_click == ("wrapped", "go")
    assert line_edit.on_change("abc") == ("wrapped", "ABC")
    assert text == Text("static")


def test_map_keeps_read_only_inputs_read_only():
    """Test inputs without a handler stay without one after map()."""
    node = vbox(LineEdit("a"), CheckBox(True), SpinBox(3))
    mapped = node.map(lambda message: ("wrapped", message))
    line_edit, check_box, spin_box = mapped.items
    assert line_edit.on_change is None
    assert check_box.on_toggle is None
    assert spin_box.on_change is None


def test_box_stores_tuple_children():
    """Test Box accepts lists and stays hashable."""
    box = Box([Text("a")], role="row", key=3)
    assert box.items == (Text("a"),)
    assert hash(box) == hash(Box((Text("a"),), role="row", key=3))


def test_render_list_structure():
    """Test one keyed item block per entry plus a trailing add control."""
    state = set_items(["Hello", "World"], init_list("Hello"))
    tree = render_list(state, ListLabels(insert_label="Add", delete_label="Drop"), render_greeting)

    assert tree.role == LIST_ROLE
    assert tree.direction is Direction.VERTICAL

    *blocks, add = tree.items
    assert [block.key for block in blocks] == [0, 1]
    assert all(block.role == ITEM_ROLE for block in blocks)
    assert add == Button("Add", InsertAtEnd())

    content, delete, insert = blocks[1].items
    assert delete == Button("Drop", Remove(1))
    assert insert == Button("Add", InsertAfter(1))
    assert content.items[0] == Text("World")


def test_render_list_lifts_item_messages():
    """Test item-level messages come out as Forward(item_id, message)."""
    state = set_items(["a", "b"], init_list("a"))
    tree = render_list(state, None, render_greeting)

    assert list(iter_messages(tree)) == [
        Forward(0, "shout"), Remove(0), InsertAfter(0),
        Forward(1, "shout"), Remove(1), InsertAfter(1),
        InsertAtEnd(),
    ]

    line_edits = find_nodes(tree, LineEdit)
    assert line_edits[1].on_change("bee") == Forward(1, ("rename", "bee"))


def test_render_list_uses_configured_labels():
    """Test labels default to the active configuration."""
    set_list_config(ItemListConfig(default_labels=ListLabels("Plus", "Minus")))
    state = set_items(["a"], init_list("a"))
    tree = render_list(state, None, render_greeting)

    labels = [node.label for node in find_nodes(tree, Button)]
    assert labels == ["Shout", "Minus", "Plus", "Plus"]


def test_empty_list_renders_only_add_control():
    """Test an empty list still offers the add control."""
    tree = render_list(init_list("x"), ListLabels(), render_greeting)
    assert tree.items == (Button("Insert", InsertAtEnd()),)


def test_rendered_messages_drive_the_edit_engine():
    """Test feeding rendered controls back into apply_edit."""
    def update(message, item):
        if message == "shout":
            return item.upper()
        return message[1]

    state = apply_edit(InsertAtEnd(), init_list("hi"), update)
    tree = render_list(state, None, render_greeting)

    shout = find_nodes(tree, Button)[0].on_click
    state = apply_edit(shout, state, update)
    assert state.entries == ((0, "HI"),)

    tree = render_list(state, None, render_greeting)
    rename = find_nodes(tree, LineEdit)[0].on_change("yo")
    state = apply_edit(rename, state, update)
    assert state.entries == ((0, "yo"),)


@pytest.mark.parametrize("role,expected", [(ITEM_ROLE, 2), (LIST_ROLE, 1), ("missing", 0)])
def test_find_nodes_by_role(role, expected):
    """Test find_nodes filters Boxes by role."""
    state = set_items(["a", "b"], init_list("a"))
    tree = render_list(state, None, render_greeting)
    assert len(find_nodes(tree, Box, role=role)) == expected


def test_button_without_message_stays_inert_when_lifted():
    """Test a Button with on_click=None is not lifted into Forward(id, None)."""
    def render(item):
        return hbox(Text(item), Button("noop", None))

    tree = render_list(set_items(["a"], init_list("a")), None, render)
    assert find_nodes(tree, Button)[0] == Button("noop", None)
    assert list(iter_messages(tree)) == [None, Remove(0), InsertAfter(0), InsertAtEnd()]
