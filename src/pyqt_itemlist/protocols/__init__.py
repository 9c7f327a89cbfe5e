"""
Widget protocols, adapters and configuration.

ABC-based widget contracts that eliminate duck typing in favor of
explicit, fail-loud inheritance-based architecture, plus the item
component contract and the global list configuration.
"""

from .widget_protocols import (
    ValueGettable,
    ValueSettable,
    ChangeSignalEmitter,
)
from .widget_adapters import (
    LineEditAdapter,
    SpinBoxAdapter,
    CheckBoxAdapter,
    PushButtonAdapter,
    PyQtWidgetMeta,
    WIDGET_ADAPTERS,
    signals_blocked,
)
from .list_config import ItemListConfig, ListLabels, set_list_config, get_list_config
from .item_component import ItemComponent, FunctionItemComponent

__all__ = [
    "ValueGettable",
    "ValueSettable",
    "ChangeSignalEmitter",
    "LineEditAdapter",
    "SpinBoxAdapter",
    "CheckBoxAdapter",
    "PushButtonAdapter",
    "PyQtWidgetMeta",
    "WIDGET_ADAPTERS",
    "signals_blocked",
    "ItemListConfig",
    "ListLabels",
    "set_list_config",
    "get_list_config",
    "ItemComponent",
    "FunctionItemComponent",
]
