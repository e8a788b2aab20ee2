"""Value nodes widgets."""

from .value_nodes_view import ValueNodesView

__all__ = ["ValueNodesView"]
