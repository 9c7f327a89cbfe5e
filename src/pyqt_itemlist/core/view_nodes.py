"""
View description nodes.

A render function returns a tree of immutable nodes describing widgets and the
messages they emit, never the widgets themselves. The Qt layer turns a tree into
widgets; tests can inspect it directly.

Every node implements map(fn), which returns the same description with each emitted
message passed through fn. Mapping is how a list lifts item-level messages into
list-level edit requests.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterator, Optional, Sequence, Tuple

MessageFn = Callable[[Any], Any]


class Direction(Enum):
    """Layout direction of a Box."""
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


def _then(handler: Optional[Callable[[Any], Any]], fn: MessageFn) -> Optional[Callable[[Any], Any]]:
    """Compose a value->message handler with a message mapping."""
    if handler is None:
        return None

    def lifted(value):
        return fn(handler(value))

    return lifted


class ViewNode(ABC):
    """Base class for view description nodes."""

    @abstractmethod
    def map(self, fn: MessageFn) -> "ViewNode":
        """Return a copy of this node whose emitted messages are passed through fn."""
        pass

    @property
    def children(self) -> Tuple["ViewNode", ...]:
        return ()


@dataclass(frozen=True)
class Text(ViewNode):
    """Static text. Emits nothing."""

    text: str

    def map(self, fn: MessageFn) -> "Text":
        return self


@dataclass(frozen=True)
class Button(ViewNode):
    """Push button emitting on_click when activated. A None on_click is inert."""

    label: str
    on_click: Any

    def map(self, fn: MessageFn) -> "Button":
        if self.on_click is None:
            return self
        return Button(self.label, fn(self.on_click))


@dataclass(frozen=True)
class LineEdit(ViewNode):
    """Single-line text input. on_change maps the new text to a message."""

    value: str = ""
    on_change: Optional[Callable[[str], Any]] = None
    placeholder: str = ""

    def map(self, fn: MessageFn) -> "LineEdit":
        return LineEdit(self.value, _then(self.on_change, fn), self.placeholder)


@dataclass(frozen=True)
class CheckBox(ViewNode):
    """Check box. on_toggle maps the new checked state to a message."""

    checked: bool = False
    on_toggle: Optional[Callable[[bool], Any]] = None
    label: str = ""

    def map(self, fn: MessageFn) -> "CheckBox":
        return CheckBox(self.checked, _then(self.on_toggle, fn), self.label)


@dataclass(frozen=True)
class SpinBox(ViewNode):
    """Integer input. on_change maps the new value to a message."""

    value: int = 0
    on_change: Optional[Callable[[int], Any]] = None
    minimum: int = 0
    maximum: int = 99

    def map(self, fn: MessageFn) -> "SpinBox":
        return SpinBox(self.value, _then(self.on_change, fn), self.minimum, self.maximum)


@dataclass(frozen=True)
class Box(ViewNode):
    """Container laying out its children in one direction.

    Attributes:
        items: Child nodes, in layout order
        direction: Layout direction
        role: Free-form tag for hosts and tests ("list", "item", ...)
        key: Stable identity of the box across renders, if it has one
    """

    items: Tuple[ViewNode, ...] = ()
    direction: Direction = Direction.VERTICAL
    role: Optional[str] = None
    key: Any = None

    def __post_init__(self):
        # Accept any sequence, store a tuple so the node stays hashable
        object.__setattr__(self, "items", tuple(self.items))

    @property
    def children(self) -> Tuple[ViewNode, ...]:
        return self.items

    def map(self, fn: MessageFn) -> "Box":
        return Box(tuple(child.map(fn) for child in self.items),
                   self.direction, self.role, self.key)


def hbox(*items: ViewNode, role: Optional[str] = None, key: Any = None) -> Box:
    """Horizontal Box shorthand."""
    return Box(items, Direction.HORIZONTAL, role, key)


def vbox(*items: ViewNode, role: Optional[str] = None, key: Any = None) -> Box:
    """Vertical Box shorthand."""
    return Box(items, Direction.VERTICAL, role, key)


def iter_nodes(node: ViewNode) -> Iterator[ViewNode]:
    """Yield node and all of its descendants, depth first."""
    yield node
    for child in node.children:
        yield from iter_nodes(child)


def iter_messages(node: ViewNode) -> Iterator[Any]:
    """Yield the click message of every Button in the tree, in layout order."""
    for descendant in iter_nodes(node):
        if isinstance(descendant, Button):
            yield descendant.on_click


def find_nodes(node: ViewNode, node_type: type = ViewNode,
               role: Optional[str] = None) -> Sequence[ViewNode]:
    """Return descendants of node_type, optionally restricted to Boxes with role."""
    found = []
    for descendant in iter_nodes(node):
        if not isinstance(descendant, node_type):
            continue
        if role is not None and getattr(descendant, "role", None) != role:
            continue
        found.append(descendant)
    return found
