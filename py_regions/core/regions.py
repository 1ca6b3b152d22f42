"""
Region state owned by a single generation run.

The registry holds every in-progress region, the cell to region
assignment and the step at which each cell was filled. Assignment is
append-only: once a cell carries a region id it keeps it.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Set

import numpy as np

# Region id of a cell that belongs to no region yet
UNASSIGNED = -1

# Fill step of a cell that was never filled
NEVER_FILLED = np.inf


@dataclass
class Region:
    """A region being grown from a seed cell."""

    id: int
    # Cells of the region that still touch a cell outside of it
    frontier: Set[int] = field(default_factory=set)


class RegionRegistry:
    """Regions, cell assignment and fill history for one run."""

    def __init__(self, point_count: int):
        """
        Create an empty registry.

        Args:
            point_count: Number of cells being partitioned
        """
        self.point_count = point_count
        self.regions: List[Region] = []
        self.region_assignment = np.full(point_count, UNASSIGNED, dtype=np.int32)
        self.step_when_filled = np.full(point_count, NEVER_FILLED, dtype=np.float64)

    def is_assigned(self, cell: int) -> bool:
        """Check if a cell belongs to any region."""
        return self.region_assignment[cell] != UNASSIGNED

    def region_of(self, cell: int) -> int:
        """Region id of a cell, UNASSIGNED if it has none."""
        return int(self.region_assignment[cell])

    def add_region(self, seed_cell: int, step: int) -> Region:
        """
        Start a new region from an unassigned seed cell.

        Args:
            seed_cell: First cell of the region
            step: Step number recorded as the seed's fill step

        Returns:
            The new region, its frontier holding only the seed
        """
        region = Region(id=len(self.regions), frontier={seed_cell})
        self.regions.append(region)
        self.assign(seed_cell, region.id, step)
        return region

    def assign(self, cell: int, region_id: int, step: int) -> None:
        """
        Assign a cell to a region at the given step.

        Raises:
            ValueError: If the cell already belongs to a region
        """
        if self.is_assigned(cell):
            raise ValueError(
                f"Cell {cell} already belongs to region {self.region_of(cell)}"
            )
        self.region_assignment[cell] = region_id
        self.step_when_filled[cell] = step

    def region_ids(self) -> List[int]:
        """Ids of all regions in ascending order."""
        return [region.id for region in self.regions]

    def cells_of(self, region_id: int) -> Iterable[int]:
        """Cells currently assigned to a region."""
        return np.flatnonzero(self.region_assignment == region_id).tolist()

    def assigned_count(self) -> int:
        """Number of assigned cells."""
        return int(np.count_nonzero(self.region_assignment != UNASSIGNED))
