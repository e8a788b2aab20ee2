"""Services shared by value nodes views."""

from .ui_dispatcher import UIDispatcher
from .value_nodes_context import (
    NAME_COLUMN,
    VALUE_COLUMN,
    TYPE_COLUMN,
    ValueNodesContext,
)
from .value_nodes_provider import (
    ValueNodesProviderABC,
    CallbackValueNodesProvider,
    StaticValueNodesProvider,
)

__all__ = [
    "UIDispatcher",
    "NAME_COLUMN",
    "VALUE_COLUMN",
    "TYPE_COLUMN",
    "ValueNodesContext",
    "ValueNodesProviderABC",
    "CallbackValueNodesProvider",
    "StaticValueNodesProvider",
]
