"""
Cell selection and scoring for flood fill growth.

A region grows into the unassigned neighbor of its frontier that already
touches the most cells of the region. Pockets and concavities are filled
before open territory, which keeps regions compact.
"""

from typing import Callable, Iterable, List, Optional, Tuple

from .regions import Region, RegionRegistry, UNASSIGNED

# Adjacency provider: cell index -> neighboring cell indices
NeighborFn = Callable[[int], Iterable[int]]


def compute_score(cell: int, region_id: int, registry: RegionRegistry,
                  neighbors: NeighborFn) -> int:
    """
    Score a candidate cell for a region.

    Args:
        cell: Candidate cell
        region_id: Region that would receive the cell
        registry: Current region state
        neighbors: Adjacency provider

    Returns:
        Number of the cell's neighbors already in the region
    """
    assignment = registry.region_assignment
    return sum(1 for n in neighbors(cell) if assignment[n] == region_id)


def collect_candidates(region: Region, registry: RegionRegistry,
                       neighbors: NeighborFn) -> List[int]:
    """Unassigned neighbors of the region's frontier, sorted by cell index."""
    assignment = registry.region_assignment
    available = set()
    for cell in region.frontier:
        for neighbor in neighbors(cell):
            if assignment[neighbor] == UNASSIGNED:
                available.add(int(neighbor))
    return sorted(available)


def rank_candidates(region: Region, registry: RegionRegistry,
                    neighbors: NeighborFn) -> List[Tuple[int, int]]:
    """
    Rank candidate cells for a region.

    Returns:
        (cell, score) pairs, best first. Higher score wins, ties go to
        the lower cell index.
    """
    scored = [
        (cell, compute_score(cell, region.id, registry, neighbors))
        for cell in collect_candidates(region, registry, neighbors)
    ]
    scored.sort(key=lambda item: (-item[1], item[0]))
    return scored


def select_candidate(region: Region, registry: RegionRegistry,
                     neighbors: NeighborFn) -> Optional[int]:
    """
    Pick the next cell to add to a region.

    Args:
        region: Region to grow
        registry: Current region state
        neighbors: Adjacency provider

    Returns:
        Best candidate cell, or None if the region cannot grow
    """
    ranked = rank_candidates(region, registry, neighbors)
    if not ranked:
        return None
    return ranked[0][0]


def prune_frontier(region: Region, registry: RegionRegistry,
                   neighbors: NeighborFn) -> None:
    """Drop frontier cells whose neighbors all belong to the region."""
    assignment = registry.region_assignment
    interior = [
        cell for cell in region.frontier
        if all(assignment[n] == region.id for n in neighbors(cell))
    ]
    region.frontier.difference_update(interior)
