"""Settings and view configuration."""

from .value_nodes_settings import (
    DebuggerSettings,
    FormatterSettings,
    ValueNodesViewOptions,
)

__all__ = [
    "DebuggerSettings",
    "FormatterSettings",
    "ValueNodesViewOptions",
]
