"""Value node data structures and renderer abstractions."""

from .value_node_protocol import (
    ValueNode,
    ValueNodeRendererABC,
    DefaultValueNodeRenderer,
    freeze_mapping,
)

__all__ = [
    "ValueNode",
    "ValueNodeRendererABC",
    "DefaultValueNodeRenderer",
    "freeze_mapping",
]
