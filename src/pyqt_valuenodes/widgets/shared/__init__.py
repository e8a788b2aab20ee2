"""
Shared tree widget components.
"""

from .child_collection import (
    ChildCollectionABC,
    ListChildCollection,
    TreeItemChildCollection,
)
from .value_node_item import ValueNodeItem
from .value_nodes_reconciler import (
    DisplayAdapter,
    KeyIndex,
    KeyedChildReconciler,
    ReconcileStats,
    find_child_mismatches,
)

__all__ = [
    "ChildCollectionABC",
    "ListChildCollection",
    "TreeItemChildCollection",
    "ValueNodeItem",
    "DisplayAdapter",
    "KeyIndex",
    "KeyedChildReconciler",
    "ReconcileStats",
    "find_child_mismatches",
]
