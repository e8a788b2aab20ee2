"""Nodes provider boundary for value nodes views."""

from __future__ import annotations

from abc import ABC, ABCMeta, abstractmethod
from typing import Callable, Sequence

from PyQt6.QtCore import QObject, pyqtSignal

from pyqt_valuenodes.protocols.value_node_protocol import ValueNode


class _CombinedMeta(ABCMeta, type(QObject)):
    """Combined metaclass for ABC + PyQt6 QObject."""


class ValueNodesProviderABC(QObject, ABC, metaclass=_CombinedMeta):
    """Source of the root value nodes shown by a view.

    Emit ``nodes_changed`` whenever ``get_nodes()`` may return something new.
    """

    nodes_changed = pyqtSignal()

    @abstractmethod
    def get_nodes(self) -> Sequence[ValueNode]:
        """Return the current ordered root nodes (possibly empty)."""

    def notify_nodes_changed(self) -> None:
        self.nodes_changed.emit()


class CallbackValueNodesProvider(ValueNodesProviderABC):
    """Callback-backed nodes provider."""

    def __init__(
        self,
        get_nodes_fn: Callable[[], Sequence[ValueNode]],
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._get_nodes_fn = get_nodes_fn

    def get_nodes(self) -> Sequence[ValueNode]:
        return self._get_nodes_fn()


class StaticValueNodesProvider(ValueNodesProviderABC):
    """Provider holding an explicit node list; ``set_nodes`` notifies."""

    def __init__(
        self,
        nodes: Sequence[ValueNode] = (),
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._nodes: tuple[ValueNode, ...] = tuple(nodes)

    def get_nodes(self) -> Sequence[ValueNode]:
        return self._nodes

    def set_nodes(self, nodes: Sequence[ValueNode]) -> None:
        self._nodes = tuple(nodes)
        self.notify_nodes_changed()
