"""Keyed reconciliation of an ordered child collection against new nodes.

Reusing existing items is much cheaper than recreating them, and most of the
time a refresh produces the same expressions in the same order, so the
reconciler patches the live collection instead of rebuilding it:

- matched items are rebound in place (``set_source_node``) and keep identity
- old items with no later match are removed
- new items with no match are inserted fresh

Matching is greedy and leftmost: for each new node, in order, the earliest
unconsumed old position with the same key after the last match is reused.
It is not a minimal edit script, and callers rely on exactly this behavior.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Generic, Hashable, List, Optional, Protocol, Sequence, TypeVar

from pyqt_valuenodes.widgets.shared.child_collection import ChildCollectionABC

logger = logging.getLogger(__name__)

TNode = TypeVar("TNode")


class DisplayAdapter(Protocol[TNode]):
    """What the reconciler needs from a child entry."""

    @property
    def source_node(self) -> TNode: ...

    def set_source_node(self, new_node: TNode) -> None: ...


def node_key(node) -> Hashable:
    return node.key


class KeyIndex:
    """Old positions grouped by key, each group in increasing order.

    Every group has a read cursor. Positions below the requested minimum are
    skipped for good, which is safe because the minimum never decreases
    during one pass.
    """

    def __init__(self, keys: Sequence[Hashable]) -> None:
        self._positions: Dict[Hashable, List[int]] = {}
        self._cursors: Dict[Hashable, int] = {}
        for position, key in enumerate(keys):
            self._positions.setdefault(key, []).append(position)

    def first_at_or_after(self, key: Hashable, min_position: int) -> Optional[int]:
        """Return the smallest old position >= min_position for key, or None."""
        positions = self._positions.get(key)
        if positions is None:
            return None
        cursor = self._cursors.get(key, 0)
        while cursor < len(positions) and positions[cursor] < min_position:
            cursor += 1
        self._cursors[key] = cursor
        if cursor == len(positions):
            return None
        return positions[cursor]


@dataclass
class ReconcileStats:
    """Counts of operations applied by one reconciliation pass."""

    reused: int = 0
    inserted: int = 0
    removed: int = 0
    full_replace: bool = False


class KeyedChildReconciler(Generic[TNode]):
    """Converge a child collection to a new ordered node list.

    ``create_adapter`` builds a fresh child for a node that matched nothing.
    The reconciler keeps no state between calls.
    """

    def __init__(
        self,
        create_adapter: Callable[[TNode], DisplayAdapter[TNode]],
        key_fn: Callable[[TNode], Hashable] = node_key,
    ) -> None:
        self._create_adapter = create_adapter
        self._key_fn = key_fn

    def reconcile(
        self,
        children: ChildCollectionABC,
        new_nodes: Sequence[TNode],
    ) -> None:
        stats = ReconcileStats()
        if len(new_nodes) == 0 or len(children) == 0:
            self._replace_all(children, new_nodes, stats)
        else:
            self._patch(children, new_nodes, stats)
        logger.debug(
            f"Reconciled {len(new_nodes)} nodes: reused={stats.reused} "
            f"inserted={stats.inserted} removed={stats.removed} "
            f"full_replace={stats.full_replace}"
        )

    def _replace_all(
        self,
        children: ChildCollectionABC,
        new_nodes: Sequence[TNode],
        stats: ReconcileStats,
    ) -> None:
        stats.removed += len(children)
        children.clear()
        for node in new_nodes:
            children.append(self._create_adapter(node))
        stats.inserted += len(new_nodes)
        stats.full_replace = True

    def _patch(
        self,
        children: ChildCollectionABC,
        new_nodes: Sequence[TNode],
        stats: ReconcileStats,
    ) -> None:
        old_count = len(children)
        key_index = KeyIndex([self._key_fn(children[i].source_node) for i in range(old_count)])

        new_index = 0
        old_cursor = 0
        write_cursor = 0
        while new_index < len(new_nodes):
            match = self._find_match(key_index, new_nodes, new_index, old_cursor)
            if match is None:
                if new_index == 0:
                    # Nothing in common: a clear + append is simpler for the host
                    self._replace_all(children, new_nodes, stats)
                    return
                while len(children) > write_cursor:
                    children.remove_at(len(children) - 1)
                    stats.removed += 1
                for node in new_nodes[new_index:]:
                    children.append(self._create_adapter(node))
                    stats.inserted += 1
                return

            match_new, match_old = match

            # Old items skipped over by this match have no counterpart
            for _ in range(match_old - old_cursor):
                children.remove_at(write_cursor)
                stats.removed += 1

            for node in new_nodes[new_index:match_new]:
                children.insert_at(write_cursor, self._create_adapter(node))
                write_cursor += 1
                stats.inserted += 1

            children[write_cursor].set_source_node(new_nodes[match_new])
            write_cursor += 1
            stats.reused += 1
            new_index = match_new + 1
            old_cursor = match_old + 1

        while len(children) > write_cursor:
            children.remove_at(len(children) - 1)
            stats.removed += 1

    def _find_match(
        self,
        key_index: KeyIndex,
        new_nodes: Sequence[TNode],
        new_index: int,
        min_old: int,
    ) -> Optional[tuple[int, int]]:
        """Return (new position, old position) of the next match, or None."""
        for position in range(new_index, len(new_nodes)):
            old_position = key_index.first_at_or_after(self._key_fn(new_nodes[position]), min_old)
            if old_position is not None:
                return position, old_position
        return None


def find_child_mismatches(
    children: ChildCollectionABC,
    new_nodes: Sequence[TNode],
    key_fn: Callable[[TNode], Hashable] = node_key,
) -> List[str]:
    """Describe every way children fails to mirror new_nodes (empty if none)."""
    problems: List[str] = []
    if len(children) != len(new_nodes):
        problems.append(f"expected {len(new_nodes)} children, found {len(children)}")
    for index in range(min(len(children), len(new_nodes))):
        source_node = children[index].source_node
        expected = new_nodes[index]
        if key_fn(source_node) != key_fn(expected):
            problems.append(
                f"child {index}: key {key_fn(source_node)!r} != {key_fn(expected)!r}"
            )
        elif source_node is not expected:
            problems.append(f"child {index}: bound to a stale node for key {key_fn(expected)!r}")
    return problems
