import random

import pytest

from aoc_solutions.structures import DisjointSet


def test_union_reports_whether_sets_merged():
    forest = DisjointSet(3)
    assert forest.union(0, 1)
    assert not forest.union(1, 0)
    assert forest.connected(0, 1)
    assert not forest.connected(0, 2)


def test_equal_sizes_keep_left_root():
    forest = DisjointSet(4)
    forest.union(0, 1)
    assert forest.find(1) == 0
    forest.union(3, 2)
    assert forest.find(2) == 3


def test_smaller_tree_goes_under_larger():
    forest = DisjointSet(3)
    forest.union(0, 1)
    forest.union(2, 1)
    assert forest.find(2) == 0
    assert forest.size_of(2) == 3


def test_component_count_tracks_successful_unions():
    forest = DisjointSet(5)
    forest.union(0, 1)
    forest.union(1, 0)
    forest.union(3, 4)
    assert forest.component_count == 3


def test_find_is_idempotent_and_sizes_match_members():
    rng = random.Random(7)
    forest = DisjointSet(50)
    for _ in range(60):
        forest.union(rng.randrange(50), rng.randrange(50))

    for index in range(50):
        assert forest.find(index) == forest.find(index)

    for root, members in forest.groups().items():
        assert forest.find(root) == root
        assert forest.sizes[root] == len(members)
    assert sum(len(members) for members in forest.groups().values()) == 50
    assert len(forest.groups()) == forest.component_count


def test_noop_union_leaves_forest_unchanged():
    forest = DisjointSet(4)
    forest.union(0, 1)
    forest.union(1, 2)
    for index in range(4):
        forest.find(index)
    parents = list(forest.parent)
    sizes = list(forest.sizes)

    assert not forest.union(2, 0)
    assert forest.parent == parents
    assert forest.sizes == sizes


def test_find_compresses_paths():
    forest = DisjointSet(4)
    forest.parent = [0, 0, 1, 2]
    assert forest.find(3) == 0
    assert forest.parent == [0, 0, 0, 0]


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        DisjointSet(-1)
