"""Value node rows and the renderers that turn them into column text.

A ValueNode is what a nodes provider hands out for one refresh. Its
``expression`` is the reconciliation key; ``payload`` carries whatever the
value model wants to keep next to the display strings and is frozen on
construction so one node can be shared between passes safely.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, TYPE_CHECKING

from pyqt_valuenodes.strategies.formatter_options import (
    TypeFormatterOptions,
    ValueFormatterOptions,
)

if TYPE_CHECKING:
    from pyqt_valuenodes.services.value_nodes_context import ValueNodesContext


def freeze_mapping(data: Mapping[str, Any] | None = None) -> Mapping[str, Any]:
    """Return a read-only copy of data (empty when None)."""
    if data is None:
        return MappingProxyType({})
    return MappingProxyType(dict(data))


@dataclass(frozen=True)
class ValueNode:
    """One computed child for a single reconciliation pass.

    ``expression`` is the matching key. It is not guaranteed to be unique
    within one list. Everything the value model knows beyond the display
    strings goes into ``payload``.
    """
    expression: str
    name: str
    value: Any = None
    type_name: str = ""
    # MappingProxyType is unhashable: keep it out of __hash__
    payload: Mapping[str, Any] = field(default_factory=freeze_mapping, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "payload", freeze_mapping(self.payload))

    @property
    def key(self) -> str:
        return self.expression


class ValueNodeRendererABC(ABC):
    """ABC for rendering value nodes into (name, value, type) column text."""

    @abstractmethod
    def render_name(self, node: ValueNode, context: "ValueNodesContext") -> str:
        """Return the text shown in the name column."""

    @abstractmethod
    def render_value(self, node: ValueNode, context: "ValueNodesContext") -> str:
        """Return the text shown in the value column."""

    @abstractmethod
    def render_type(self, node: ValueNode, context: "ValueNodesContext") -> str:
        """Return the text shown in the type column."""


class DefaultValueNodeRenderer(ValueNodeRendererABC):
    """Plain-text renderer honoring the hex/decimal and namespace flags."""

    HEX_DIGITS = 8

    def render_name(self, node: ValueNode, context: "ValueNodesContext") -> str:
        return node.name

    def render_value(self, node: ValueNode, context: "ValueNodesContext") -> str:
        value = node.value
        if value is None:
            return ""
        # bool is an int subclass but never shown in hex
        if isinstance(value, int) and not isinstance(value, bool):
            if ValueFormatterOptions.DECIMAL in context.value_formatter_options:
                return str(value)
            if value < 0:
                return f"-0x{-value:0{self.HEX_DIGITS}X}"
            return f"0x{value:0{self.HEX_DIGITS}X}"
        return str(value)

    def render_type(self, node: ValueNode, context: "ValueNodesContext") -> str:
        type_name = node.type_name
        if TypeFormatterOptions.NAMESPACES in context.type_formatter_options:
            return type_name
        # Generic arguments may contain dots too: only strip the outer name
        head, sep, tail = type_name.partition("<")
        return head.rsplit(".", 1)[-1] + sep + tail
