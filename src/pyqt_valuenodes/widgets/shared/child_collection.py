"""Ordered child collections that reconciliation can patch in place."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Iterator, List, TypeVar

from PyQt6.QtWidgets import QTreeWidgetItem

TChild = TypeVar("TChild")


class ChildCollectionABC(ABC, Generic[TChild]):
    """Index-addressable mutable sequence of display adapters."""

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of live children."""

    @abstractmethod
    def __getitem__(self, index: int) -> TChild:
        """Return the child at index."""

    @abstractmethod
    def insert_at(self, index: int, child: TChild) -> None:
        """Insert child so that it ends up at index (0 <= index <= len)."""

    @abstractmethod
    def remove_at(self, index: int) -> None:
        """Remove the child at index (0 <= index < len)."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every child."""

    def append(self, child: TChild) -> None:
        self.insert_at(len(self), child)

    def __iter__(self) -> Iterator[TChild]:
        for index in range(len(self)):
            yield self[index]

    def _check_insert_index(self, index: int) -> None:
        if not 0 <= index <= len(self):
            raise IndexError(f"insert index {index} out of range for {len(self)} children")

    def _check_remove_index(self, index: int) -> None:
        if not 0 <= index < len(self):
            raise IndexError(f"remove index {index} out of range for {len(self)} children")


class ListChildCollection(ChildCollectionABC[TChild]):
    """Child collection backed by a plain Python list."""

    def __init__(self, children: List[TChild] | None = None) -> None:
        self._children: List[TChild] = list(children) if children is not None else []

    def __len__(self) -> int:
        return len(self._children)

    def __getitem__(self, index: int) -> TChild:
        return self._children[index]

    def insert_at(self, index: int, child: TChild) -> None:
        self._check_insert_index(index)
        self._children.insert(index, child)

    def remove_at(self, index: int) -> None:
        self._check_remove_index(index)
        del self._children[index]

    def clear(self) -> None:
        self._children.clear()


class TreeItemChildCollection(ChildCollectionABC[QTreeWidgetItem]):
    """Children of one QTreeWidgetItem (use invisibleRootItem() for top level)."""

    def __init__(self, parent_item: QTreeWidgetItem) -> None:
        self._parent_item = parent_item

    @property
    def parent_item(self) -> QTreeWidgetItem:
        return self._parent_item

    def __len__(self) -> int:
        return self._parent_item.childCount()

    def __getitem__(self, index: int) -> QTreeWidgetItem:
        if not 0 <= index < len(self):
            raise IndexError(f"child index {index} out of range for {len(self)} children")
        return self._parent_item.child(index)

    def insert_at(self, index: int, child: QTreeWidgetItem) -> None:
        self._check_insert_index(index)
        self._parent_item.insertChild(index, child)

    def remove_at(self, index: int) -> None:
        self._check_remove_index(index)
        self._parent_item.takeChild(index)

    def clear(self) -> None:
        self._parent_item.takeChildren()
