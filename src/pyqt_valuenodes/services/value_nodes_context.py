"""Shared per-view state read by every value node item."""

from __future__ import annotations

from dataclasses import dataclass, field

from pyqt_valuenodes.config.value_nodes_settings import ValueNodesViewOptions
from pyqt_valuenodes.protocols.value_node_protocol import (
    DefaultValueNodeRenderer,
    ValueNodeRendererABC,
)
from pyqt_valuenodes.services.ui_dispatcher import UIDispatcher
from pyqt_valuenodes.strategies.formatter_options import (
    RefreshNodeOptions,
    TypeFormatterOptions,
    ValueFormatterOptions,
)

NAME_COLUMN = 0
VALUE_COLUMN = 1
TYPE_COLUMN = 2


@dataclass
class ValueNodesContext:
    """Mutable state owned by one view and shared with all of its items.

    Formatter options and refresh options are rewritten by the view when
    settings change; items only read them.
    """

    ui_dispatcher: UIDispatcher
    options: ValueNodesViewOptions = field(default_factory=ValueNodesViewOptions)
    renderer: ValueNodeRendererABC = field(default_factory=DefaultValueNodeRenderer)
    value_formatter_options: ValueFormatterOptions = ValueFormatterOptions.DISPLAY
    type_formatter_options: TypeFormatterOptions = TypeFormatterOptions.NONE
    refresh_node_options: RefreshNodeOptions = RefreshNodeOptions.ALL
    syntax_highlight: bool = True
