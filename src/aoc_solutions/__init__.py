"""Daily puzzle solutions with replayable visualizations."""

from .connectivity import (
    CandidateEdge,
    bridging_edge_product,
    component_size_product,
    edge_budget,
    find_bridging_edge,
    iter_merges,
    sorted_candidate_edges,
)
from .inputs import InputConfig, fetch_input, load_points
from .runner import DayResult, SolverConfig, run_day, run_days, solve_day
from .structures import DisjointSet
from .visualize import generate_visualization

__all__ = [
    "CandidateEdge",
    "DayResult",
    "DisjointSet",
    "InputConfig",
    "SolverConfig",
    "bridging_edge_product",
    "component_size_product",
    "edge_budget",
    "fetch_input",
    "find_bridging_edge",
    "generate_visualization",
    "iter_merges",
    "load_points",
    "run_day",
    "run_days",
    "solve_day",
    "sorted_candidate_edges",
]
