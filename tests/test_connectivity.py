import pytest

from aoc_solutions.connectivity import (
    BRIDGE_SENTINEL,
    CandidateEdge,
    bridging_edge_product,
    component_size_product,
    edge_budget,
    find_bridging_edge,
    iter_merges,
    sorted_candidate_edges,
    squared_distance,
)

LINE = [(0, 0, 0), (1, 0, 0), (2, 0, 0)]
TWO_PAIRS = [(0, 0, 0), (1, 0, 0), (10, 10, 10), (11, 10, 10)]


def test_squared_distance_is_exact_for_integers():
    assert squared_distance((1, 2, 3), (4, 6, 3)) == 25


def test_candidate_edges_sorted_with_enumeration_tie_break():
    edges = sorted_candidate_edges(LINE)
    assert [(edge.left, edge.right, edge.weight) for edge in edges] == [
        (0, 1, 1),
        (1, 2, 1),
        (0, 2, 4),
    ]


def test_candidate_edge_order_is_repeatable():
    points = [(0, 0, 0), (0, 0, 1), (0, 1, 0), (1, 0, 0), (1, 1, 1)]
    first = sorted_candidate_edges(points)
    assert first == sorted_candidate_edges(points)
    assert [(edge.left, edge.right) for edge in first[:3]] == [(0, 1), (0, 2), (0, 3)]


def test_edge_budget_policy():
    assert edge_budget(4) == 2
    assert edge_budget(9) == 4
    assert edge_budget(5000) == 1000


def test_fewer_than_three_circuits_is_rejected():
    with pytest.raises(ValueError):
        component_size_product(TWO_PAIRS)


def test_budget_covering_each_cluster(cluster_points):
    assert component_size_product(cluster_points, budget=6) == 27


def test_default_budget_stops_inside_third_cluster(cluster_points):
    # four pairs finish the first two clusters and leave the third as singletons
    assert component_size_product(cluster_points) == 9


def test_redundant_pairs_still_consume_budget():
    square = [(0, 0, 0), (1, 0, 0), (0, 1, 0), (1, 1, 0)]
    far = [(100, 0, 0), (200, 0, 0), (300, 0, 0), (400, 0, 0)]
    # the fourth cheapest pair closes a cycle in the square
    assert component_size_product(square + far) == 4


def test_bridging_edge_uses_first_pair_that_completes():
    assert find_bridging_edge(LINE) == CandidateEdge(1, 2, 1)
    assert bridging_edge_product(LINE) == 2


def test_bridging_stops_scanning_after_last_merge():
    consumed = []

    def tracked():
        for edge in sorted_candidate_edges(LINE):
            consumed.append((edge.left, edge.right))
            yield edge

    steps = list(iter_merges(LINE, tracked()))
    assert [step.components for step in steps] == [2, 1]
    assert consumed == [(0, 1), (1, 2)]


def test_bridging_across_clusters(cluster_points):
    assert find_bridging_edge(cluster_points) == CandidateEdge(2, 6, 10009)
    assert bridging_edge_product(cluster_points) == 10


def test_bridging_sentinel_when_never_connected():
    assert bridging_edge_product([]) == BRIDGE_SENTINEL
    assert bridging_edge_product([(3, 4, 5)]) == BRIDGE_SENTINEL


def test_merge_steps_report_surviving_root():
    steps = list(iter_merges(LINE))
    assert [step.root for step in steps] == [0, 0]
    assert [(step.edge.left, step.edge.right) for step in steps] == [(0, 1), (1, 2)]


def test_queries_repeat_identically(cluster_points):
    assert component_size_product(cluster_points) == component_size_product(cluster_points)
    assert bridging_edge_product(cluster_points) == bridging_edge_product(cluster_points)
    replay = [step.edge for step in iter_merges(cluster_points)]
    assert replay == [step.edge for step in iter_merges(cluster_points)]
    assert len(replay) == len(cluster_points) - 1


def test_decimal_coordinates():
    points = [(0.5, 0, 0), (1.5, 0, 0), (4.0, 0, 0)]
    assert find_bridging_edge(points) == CandidateEdge(1, 2, 6.25)
    assert bridging_edge_product(points) == pytest.approx(6.0)


def test_merge_steps_record_component_count_when_yielded():
    steps = list(iter_merges([(0, 0, 0), (1, 0, 0), (5, 0, 0)]))
    assert [step.components for step in steps] == [2, 1]
    # the forest is shared by the whole run
    assert steps[0].forest is steps[1].forest


def test_budget_override_is_keyword_only(cluster_points):
    with pytest.raises(TypeError):
        component_size_product(cluster_points, 6)


def test_bridging_product_keeps_integer_coordinates_integral():
    product = bridging_edge_product(LINE)
    assert product == 2
    assert isinstance(product, int)
