"""Shared fixtures for region generation tests."""

import pytest

from py_regions.core import build_cell_adjacency, generate_points, relax_points
from py_regions.core.random_source import RandomSource


def path_adjacency(n):
    """Cells 0..n-1 connected in a line."""
    return [[j for j in (i - 1, i + 1) if 0 <= j < n] for i in range(n)]


def cycle_adjacency(n):
    """Cells 0..n-1 connected in a ring."""
    return [sorted({(i - 1) % n, (i + 1) % n}) for i in range(n)]


def connected_components(cells, neighbors):
    """Split a set of cells into connected components."""
    remaining = set(cells)
    components = []
    while remaining:
        start = remaining.pop()
        component = {start}
        queue = [start]
        while queue:
            cell = queue.pop()
            for n in neighbors(cell):
                if n in remaining:
                    remaining.remove(n)
                    component.add(n)
                    queue.append(n)
        components.append(component)
    return components


@pytest.fixture
def line4():
    """Four cells in a line: 0-1-2-3."""
    adjacency = path_adjacency(4)
    return adjacency.__getitem__


@pytest.fixture(scope="session")
def cell_graph():
    """Voronoi adjacency of 120 relaxed random points."""
    points = generate_points(120, 800, 600, RandomSource(0.25))
    points = relax_points(points, 800, 600, n_iterations=1)
    return build_cell_adjacency(points, 800, 600)
