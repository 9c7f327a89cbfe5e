"""Configuration for dynamic item lists.

Provides hooks for applications to customize edit and rendering behavior.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class ListLabels:
    """Display text for the controls a list renders around its items.

    Attributes:
        insert_label: Text on every "insert after" control and the trailing add control
        delete_label: Text on every "remove" control
    """

    insert_label: str = "Insert"
    delete_label: str = "Delete"


@dataclass
class ItemListConfig:
    """Base configuration for item list behavior.

    Applications can subclass this to provide custom configuration.

    Attributes:
        consume_id_on_missed_insert: Whether InsertAfter targeting an absent identifier
            still uses up an identifier
        default_labels: Labels used when a list widget is created without labels
        log_edits: Log every applied edit at INFO instead of DEBUG
        item_spacing: Spacing between children of vertical boxes (the rows of a list)
    """

    consume_id_on_missed_insert: bool = True
    default_labels: ListLabels = field(default_factory=ListLabels)
    log_edits: bool = False
    item_spacing: int = 4


# Global config instance (set by application)
_list_config: Optional[ItemListConfig] = None


def set_list_config(config: Optional[ItemListConfig]) -> None:
    """Set the global item list configuration.

    Args:
        config: ItemListConfig instance, or None to restore defaults
    """
    global _list_config
    _list_config = config


def get_list_config() -> ItemListConfig:
    """Get the current item list configuration.

    Returns:
        Current ItemListConfig or default if not set
    """
    if _list_config is None:
        return ItemListConfig()
    return _list_config
