"""Record categories used across the flow_store layer."""

from enum import StrEnum


class Category(StrEnum):
    """A record category. The value doubles as the directory name."""

    TABS = "tabs"
    SUBFLOWS = "subflows"
    CONFIG_NODES = "config-nodes"


# Split and merge both walk the categories in this order
CATEGORIES: tuple[Category, ...] = (
    Category.TABS,
    Category.SUBFLOWS,
    Category.CONFIG_NODES,
)
