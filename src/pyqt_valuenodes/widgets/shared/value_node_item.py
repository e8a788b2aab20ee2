"""Tree item that displays one value node and survives rebinding."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QTreeWidgetItem

from pyqt_valuenodes.protocols.value_node_protocol import ValueNode
from pyqt_valuenodes.services.value_nodes_context import (
    NAME_COLUMN,
    TYPE_COLUMN,
    VALUE_COLUMN,
    ValueNodesContext,
)
from pyqt_valuenodes.strategies.formatter_options import RefreshNodeOptions

logger = logging.getLogger(__name__)

_NAME_FLAGS = RefreshNodeOptions.REFRESH_NAME | RefreshNodeOptions.REFRESH_NAME_CONTROL
_VALUE_FLAGS = RefreshNodeOptions.REFRESH_VALUE | RefreshNodeOptions.REFRESH_VALUE_CONTROL
_TYPE_FLAGS = RefreshNodeOptions.REFRESH_TYPE | RefreshNodeOptions.REFRESH_TYPE_CONTROL


class ValueNodeItem(QTreeWidgetItem):
    """Display adapter for a ValueNode.

    The item itself is the entry stored in the parent's child list, so any
    state Qt attaches to it (selection, expansion, current item) lives exactly
    as long as the item is reused by reconciliation.
    """

    def __init__(self, context: ValueNodesContext, source_node: ValueNode) -> None:
        super().__init__()
        self._context = context
        self._source_node = source_node
        self.refresh_ui(RefreshNodeOptions.ALL)

    @property
    def source_node(self) -> ValueNode:
        return self._source_node

    def set_source_node(self, new_node: ValueNode) -> None:
        """Rebind to new_node, keeping this item's identity.

        Reconciliation only rebinds same-key pairs; a different key is
        tolerated but logged. Every column is re-rendered since text cached
        from the old node is stale.
        """
        if new_node.key != self._source_node.key:
            logger.warning(
                f"Rebinding value node item from key {self._source_node.key!r} "
                f"to different key {new_node.key!r}"
            )
        self._source_node = new_node
        self.refresh_ui(RefreshNodeOptions.ALL)

    def refresh_ui(self, options: RefreshNodeOptions | None = None) -> None:
        """Re-render the columns selected by options (context default if None)."""
        if options is None:
            options = self._context.refresh_node_options
        renderer = self._context.renderer
        node = self._source_node

        if options & _NAME_FLAGS:
            self.setText(NAME_COLUMN, renderer.render_name(node, self._context))
        if options & _VALUE_FLAGS:
            self.setText(VALUE_COLUMN, renderer.render_value(node, self._context))
        if options & _TYPE_FLAGS:
            self.setText(TYPE_COLUMN, renderer.render_type(node, self._context))
        self.setToolTip(VALUE_COLUMN, self.text(VALUE_COLUMN))
        self.setData(NAME_COLUMN, Qt.ItemDataRole.UserRole, node.key)

    def __repr__(self) -> str:
        return f"<ValueNodeItem {self._source_node.key!r}>"
