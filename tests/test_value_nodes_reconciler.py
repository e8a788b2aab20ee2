"""Tests for keyed child reconciliation."""

import random

import pytest

from pyqt_valuenodes.widgets.shared import (
    KeyIndex,
    KeyedChildReconciler,
    ListChildCollection,
    find_child_mismatches,
)


class FakeAdapter:
    """Minimal display adapter recording how often it was rebound."""

    def __init__(self, node):
        self.source_node = node
        self.origin = node
        self.rebind_count = 0

    def set_source_node(self, new_node):
        self.source_node = new_node
        self.rebind_count += 1


class RecordingChildCollection(ListChildCollection):
    """List collection counting structural operations."""

    def __init__(self, children=None):
        super().__init__(children)
        self.inserts = 0
        self.removes = 0
        self.clears = 0

    def insert_at(self, index, child):
        super().insert_at(index, child)
        self.inserts += 1

    def remove_at(self, index):
        super().remove_at(index)
        self.removes += 1

    def clear(self):
        super().clear()
        self.clears += 1

    def reset_counts(self):
        self.inserts = self.removes = self.clears = 0


@pytest.fixture
def reconciler():
    return KeyedChildReconciler(FakeAdapter)


def populated(reconciler, nodes):
    children = RecordingChildCollection()
    reconciler.reconcile(children, nodes)
    children.reset_counts()
    return children


def keys_of(children):
    return [child.source_node.key for child in children]


def test_empty_to_populated_inserts_in_order(reconciler, make_nodes):
    children = RecordingChildCollection()
    nodes = make_nodes(["p", "q"])

    reconciler.reconcile(children, nodes)

    assert keys_of(children) == ["p", "q"]
    assert [child.source_node for child in children] == nodes
    assert all(child.rebind_count == 0 for child in children)


def test_populated_to_empty_clears(reconciler, make_nodes):
    children = populated(reconciler, make_nodes(["x"]))

    reconciler.reconcile(children, [])

    assert len(children) == 0
    assert children.clears == 1


def test_mixed_keep_insert_remove(reconciler, make_nodes):
    children = populated(reconciler, make_nodes(["a", "b", "c"]))
    old_a, old_b, old_c = list(children)

    new_nodes = make_nodes(["a", "c", "d"], tag="'")
    reconciler.reconcile(children, new_nodes)

    assert keys_of(children) == ["a", "c", "d"]
    assert children[0] is old_a
    assert children[1] is old_c
    assert children[2] not in (old_a, old_b, old_c)
    assert children[2].rebind_count == 0
    assert old_a.source_node is new_nodes[0]
    assert old_c.source_node is new_nodes[1]
    assert children.clears == 0


def test_duplicate_keys_reuse_first_old_item(reconciler, make_nodes):
    children = populated(reconciler, make_nodes(["m", "m"]))
    first_m, second_m = list(children)

    reconciler.reconcile(children, make_nodes(["m"]))

    assert len(children) == 1
    assert children[0] is first_m
    assert second_m not in list(children)


def test_duplicate_key_runs_match_in_order(reconciler, make_nodes):
    children = populated(reconciler, make_nodes(["m", "m", "n", "m"]))
    old = list(children)

    reconciler.reconcile(children, make_nodes(["m", "n", "m", "m"]))

    assert keys_of(children) == ["m", "n", "m", "m"]
    # m0 -> m0, n2 -> n, m3 -> m; m1 dropped, last m is fresh
    assert children[0] is old[0]
    assert children[1] is old[2]
    assert children[2] is old[3]
    assert children[3] not in old


def test_total_mismatch_takes_full_replace(reconciler, make_nodes):
    children = populated(reconciler, make_nodes(["a", "b"]))
    old = list(children)

    reconciler.reconcile(children, make_nodes(["x", "y"]))

    assert keys_of(children) == ["x", "y"]
    assert children.clears == 1
    assert children.removes == 0
    assert not any(child in old for child in children)
    assert all(child.rebind_count == 0 for child in old)


def test_exhausted_key_does_not_stop_matching(reconciler, make_nodes):
    children = populated(reconciler, make_nodes(["x", "a", "y"]))
    old_x, old_a, old_y = list(children)

    reconciler.reconcile(children, make_nodes(["a", "x", "y"]))

    assert keys_of(children) == ["a", "x", "y"]
    assert children[0] is old_a
    # "x" only exists before the "a" match, so it is created fresh
    assert children[1] is not old_x
    assert children[2] is old_y


def test_greedy_match_gives_up_reordered_prefix(reconciler, make_nodes):
    children = populated(reconciler, make_nodes(["a", "b", "c"]))
    old_a, old_b, old_c = list(children)

    reconciler.reconcile(children, make_nodes(["c", "a", "b"]))

    assert keys_of(children) == ["c", "a", "b"]
    assert children[0] is old_c
    assert children[1] is not old_a
    assert children[2] is not old_b


def test_trailing_old_items_are_removed(reconciler, make_nodes):
    children = populated(reconciler, make_nodes(["a", "b", "c", "d"]))
    old_a, old_b = children[0], children[1]

    reconciler.reconcile(children, make_nodes(["a", "b"]))

    assert list(children) == [old_a, old_b]
    assert children.removes == 2
    assert children.inserts == 0


def test_insertions_before_match_keep_order(reconciler, make_nodes):
    children = populated(reconciler, make_nodes(["c"]))
    old_c = children[0]

    reconciler.reconcile(children, make_nodes(["a", "b", "c", "d"]))

    assert keys_of(children) == ["a", "b", "c", "d"]
    assert children[2] is old_c
    assert children.inserts == 3
    assert children.removes == 0


def test_custom_key_function(make_nodes):
    reconciler = KeyedChildReconciler(FakeAdapter, key_fn=lambda node: node.key.lower())
    children = populated(reconciler, make_nodes(["A", "b"]))
    old_a = children[0]

    new_nodes = make_nodes(["a", "B"])
    reconciler.reconcile(children, new_nodes)

    assert children[0] is old_a
    assert children.inserts == 0
    assert find_child_mismatches(children, new_nodes) == []


def test_key_index_returns_first_position_at_or_after():
    index = KeyIndex(["m", "n", "m", "m"])

    assert index.first_at_or_after("m", 0) == 0
    assert index.first_at_or_after("m", 1) == 2
    assert index.first_at_or_after("m", 3) == 3
    assert index.first_at_or_after("m", 4) is None
    assert index.first_at_or_after("n", 0) == 1
    assert index.first_at_or_after("z", 0) is None


def test_find_child_mismatches_reports_problems(reconciler, make_nodes):
    nodes = make_nodes(["a", "b"])
    children = populated(reconciler, nodes)

    assert find_child_mismatches(children, nodes) == []
    assert find_child_mismatches(children, nodes[:1]) == ["expected 1 children, found 2"]

    problems = find_child_mismatches(children, make_nodes(["a", "c"]))
    assert len(problems) == 2
    assert "stale" in problems[0]
    assert "'b' != 'c'" in problems[1]


# ========== PROPERTIES ==========

SEEDS = range(40)


def random_keys(rng):
    alphabet = "abcdef"[: rng.randint(1, 6)]
    return [rng.choice(alphabet) for _ in range(rng.randint(0, 12))]


@pytest.mark.parametrize("seed", SEEDS)
def test_reconcile_converges(reconciler, make_nodes, seed):
    rng = random.Random(seed)
    children = populated(reconciler, make_nodes(random_keys(rng)))
    new_nodes = make_nodes(random_keys(rng), tag="'")

    reconciler.reconcile(children, new_nodes)

    assert find_child_mismatches(children, new_nodes) == []


@pytest.mark.parametrize("seed", SEEDS)
def test_reconcile_is_idempotent(reconciler, make_nodes, seed):
    rng = random.Random(seed)
    children = populated(reconciler, make_nodes(random_keys(rng)))
    new_nodes = make_nodes(random_keys(rng), tag="'")
    reconciler.reconcile(children, new_nodes)
    before = list(children)
    children.reset_counts()

    reconciler.reconcile(children, new_nodes)

    assert (children.inserts, children.removes) == (0, 0)
    if new_nodes:
        assert children.clears == 0
    assert list(children) == before


@pytest.mark.parametrize("seed", SEEDS)
def test_matched_items_keep_relative_order(reconciler, make_nodes, seed):
    rng = random.Random(seed)
    children = populated(reconciler, make_nodes(random_keys(rng)))
    old = list(children)

    reconciler.reconcile(children, make_nodes(random_keys(rng), tag="'"))

    reused = [child for child in children if any(child is item for item in old)]
    survivors = [next(i for i, item in enumerate(old) if item is child) for child in reused]
    assert survivors == sorted(survivors)
    for child in reused:
        assert child.origin.key == child.source_node.key


def test_fresh_items_are_not_mistaken_for_reused(reconciler, make_nodes):
    children = populated(reconciler, make_nodes(["c", "e", "a", "d"]))
    old = list(children)

    reconciler.reconcile(children, make_nodes(list("aaabbabaaa"), tag="'"))

    reused = [child for child in children if any(child is item for item in old)]
    assert reused == [old[2]]
    assert children[0] is old[2]
