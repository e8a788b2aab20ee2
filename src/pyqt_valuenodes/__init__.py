"""
Keyed value-node trees for PyQt6.

Keeps a QTreeWidget of value nodes in sync with a nodes provider, reusing
existing items for unchanged expressions so refreshes stay cheap.
"""

from .config import DebuggerSettings, FormatterSettings, ValueNodesViewOptions
from .strategies import (
    ValueFormatterOptions,
    TypeFormatterOptions,
    RefreshNodeOptions,
)
from .protocols import ValueNode, ValueNodeRendererABC, DefaultValueNodeRenderer
from .services import (
    UIDispatcher,
    ValueNodesContext,
    ValueNodesProviderABC,
    CallbackValueNodesProvider,
    StaticValueNodesProvider,
)
from .widgets.shared import (
    ChildCollectionABC,
    ListChildCollection,
    TreeItemChildCollection,
    ValueNodeItem,
    KeyedChildReconciler,
    find_child_mismatches,
)
from .widgets import ValueNodesView

__all__ = [
    "DebuggerSettings",
    "FormatterSettings",
    "ValueNodesViewOptions",
    "ValueFormatterOptions",
    "TypeFormatterOptions",
    "RefreshNodeOptions",
    "ValueNode",
    "ValueNodeRendererABC",
    "DefaultValueNodeRenderer",
    "UIDispatcher",
    "ValueNodesContext",
    "ValueNodesProviderABC",
    "CallbackValueNodesProvider",
    "StaticValueNodesProvider",
    "ChildCollectionABC",
    "ListChildCollection",
    "TreeItemChildCollection",
    "ValueNodeItem",
    "KeyedChildReconciler",
    "find_child_mismatches",
    "ValueNodesView",
]
