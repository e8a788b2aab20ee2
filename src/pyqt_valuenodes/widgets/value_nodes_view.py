"""
Value nodes view for PyQt6.

Shows the root value nodes of a nodes provider in a grid-style QTreeWidget
(name / value / type) and keeps it current:

- provider ``nodes_changed`` -> reconcile root children, reusing items
- debugger / formatter settings changes -> recompute formatter flags and
  re-render the affected columns of every item
- hidden views show nothing and listen to nothing
"""

import logging
from typing import Optional, Sequence

from PyQt6.QtCore import QObject
from PyQt6.QtWidgets import QAbstractItemView, QTreeWidget, QWidget

from pyqt_valuenodes.config.value_nodes_settings import (
    DebuggerSettings,
    FormatterSettings,
    ValueNodesViewOptions,
)
from pyqt_valuenodes.protocols.value_node_protocol import ValueNode, ValueNodeRendererABC
from pyqt_valuenodes.services.ui_dispatcher import UIDispatcher
from pyqt_valuenodes.services.value_nodes_context import ValueNodesContext
from pyqt_valuenodes.services.value_nodes_provider import ValueNodesProviderABC
from pyqt_valuenodes.strategies.formatter_options import (
    REFRESH_THEME_FIELDS,
    REFRESH_VALUE_AND_TYPE_FIELDS,
    REFRESH_VALUE_FIELDS,
    RefreshNodeOptions,
    get_type_formatter_options,
    get_value_formatter_options,
)
from pyqt_valuenodes.widgets.shared.child_collection import TreeItemChildCollection
from pyqt_valuenodes.widgets.shared.value_node_item import ValueNodeItem
from pyqt_valuenodes.widgets.shared.value_nodes_reconciler import (
    KeyedChildReconciler,
    find_child_mismatches,
)

logger = logging.getLogger(__name__)

_FORMATTER_SETTING_NAMES = frozenset(FormatterSettings.setting_names())


class ValueNodesView(QObject):
    """Controller for one value nodes tree.

    Must be created and used on the UI thread of ``ui_dispatcher``.
    """

    _NAME_COLUMN_WIDTH_PX = 200
    _VALUE_COLUMN_WIDTH_PX = 250

    def __init__(
        self,
        ui_dispatcher: UIDispatcher,
        options: ValueNodesViewOptions,
        nodes_provider: ValueNodesProviderABC,
        debugger_settings: DebuggerSettings,
        formatter_settings: FormatterSettings,
        renderer: Optional[ValueNodeRendererABC] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        ui_dispatcher.verify_access()
        super().__init__(parent)

        self._nodes_provider = nodes_provider
        self._debugger_settings = debugger_settings
        self._formatter_settings = formatter_settings
        self._context = ValueNodesContext(
            ui_dispatcher=ui_dispatcher,
            options=options,
            syntax_highlight=debugger_settings.syntax_highlight,
        )
        if renderer is not None:
            self._context.renderer = renderer
        self._is_open = False

        self.tree_widget = QTreeWidget(parent)
        self.tree_widget.setObjectName(options.tree_view_id)
        self.tree_widget.setHeaderLabels(options.header_labels)
        self.tree_widget.setRootIsDecorated(False)
        self.tree_widget.setAlternatingRowColors(True)
        self.tree_widget.setSelectionMode(
            QAbstractItemView.SelectionMode.ExtendedSelection
        )
        self.tree_widget.setColumnWidth(0, self._NAME_COLUMN_WIDTH_PX)
        self.tree_widget.setColumnWidth(1, self._VALUE_COLUMN_WIDTH_PX)

        self._root_children = TreeItemChildCollection(self.tree_widget.invisibleRootItem())
        self._reconciler = KeyedChildReconciler(self._create_item)

    # ========== PROPERTIES ==========

    @property
    def context(self) -> ValueNodesContext:
        return self._context

    @property
    def is_open(self) -> bool:
        return self._is_open

    @property
    def root_children(self) -> TreeItemChildCollection:
        return self._root_children

    # ========== LIFECYCLE ==========

    def show(self) -> None:
        self._context.ui_dispatcher.verify_access()
        self._initialize(enable=True)

    def hide(self) -> None:
        self._context.ui_dispatcher.verify_access()
        self._initialize(enable=False)

    def dispose(self) -> None:
        self._context.ui_dispatcher.verify_access()
        if self._is_open:
            self.hide()
        self.tree_widget.clear()
        self.tree_widget.deleteLater()

    def _initialize(self, enable: bool) -> None:
        if enable != self._is_open:
            self._is_open = enable
            if enable:
                self._debugger_settings.property_changed.connect(self._on_debugger_setting_changed)
                self._formatter_settings.property_changed.connect(self._on_formatter_setting_changed)
                self._nodes_provider.nodes_changed.connect(self._on_nodes_changed)
                self._context.syntax_highlight = self._debugger_settings.syntax_highlight
                self.update_formatter_options()
                logger.debug(f"{self._context.options.tree_view_id}: listening for changes")
            else:
                self._debugger_settings.property_changed.disconnect(self._on_debugger_setting_changed)
                self._formatter_settings.property_changed.disconnect(self._on_formatter_setting_changed)
                self._nodes_provider.nodes_changed.disconnect(self._on_nodes_changed)
                logger.debug(f"{self._context.options.tree_view_id}: stopped listening")
        self.recreate_root_children()

    # ========== NODES ==========

    def _on_nodes_changed(self) -> None:
        self._context.ui_dispatcher.verify_access()
        self.recreate_root_children()

    def recreate_root_children(self) -> None:
        self._context.ui_dispatcher.verify_access()
        nodes: Sequence[ValueNode] = (
            tuple(self._nodes_provider.get_nodes()) if self._is_open else ()
        )
        self._reconciler.reconcile(self._root_children, nodes)
        if self._context.options.verify_children:
            problems = find_child_mismatches(self._root_children, nodes)
            if problems:
                raise AssertionError(
                    f"{self._context.options.tree_view_id}: root children out of sync: "
                    + "; ".join(problems)
                )

    def _create_item(self, node: ValueNode) -> ValueNodeItem:
        return ValueNodeItem(self._context, node)

    # ========== SETTINGS ==========

    # random thread
    def _on_debugger_setting_changed(self, name: str) -> None:
        self._context.ui_dispatcher.ui(lambda: self._debugger_setting_changed_ui(name))

    def _debugger_setting_changed_ui(self, name: str) -> None:
        self._context.ui_dispatcher.verify_access()
        if name == "use_hexadecimal":
            self.update_formatter_options()
            self.refresh_nodes(REFRESH_VALUE_FIELDS)
        elif name == "syntax_highlight":
            self._context.syntax_highlight = self._debugger_settings.syntax_highlight
            self.refresh_nodes(REFRESH_THEME_FIELDS)
        elif name in ("property_eval_and_function_calls", "use_string_conversion_function"):
            self.update_formatter_options()
            self.refresh_nodes(REFRESH_VALUE_FIELDS)

    # random thread
    def _on_formatter_setting_changed(self, name: str) -> None:
        self._context.ui_dispatcher.ui(lambda: self._formatter_setting_changed_ui(name))

    def _formatter_setting_changed_ui(self, name: str) -> None:
        self._context.ui_dispatcher.verify_access()
        if name not in _FORMATTER_SETTING_NAMES:
            logger.error(f"Unknown formatter setting name: {name}")
            return
        self.update_formatter_options()
        self.refresh_nodes(REFRESH_VALUE_AND_TYPE_FIELDS)

    def update_formatter_options(self) -> None:
        self._context.ui_dispatcher.verify_access()
        self._context.value_formatter_options = get_value_formatter_options(
            self._debugger_settings, self._formatter_settings, is_display=True
        )
        self._context.type_formatter_options = get_type_formatter_options(
            self._formatter_settings
        )

    def refresh_nodes(self, options: RefreshNodeOptions) -> None:
        self._context.ui_dispatcher.verify_access()
        self._context.refresh_node_options = options
        for item in self._root_children:
            item.refresh_ui(options)
        logger.debug(
            f"{self._context.options.tree_view_id}: refreshed {len(self._root_children)} nodes ({options})"
        )
