"""
Snapshots of a region generation run.

A run yields one ``GenerationStep`` per filled cell. Snapshots do not copy
the assignment array: assignment only ever grows, so the state at step S
is every cell whose fill step is <= S. Only the active frontier is copied.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Optional

import numpy as np

from .regions import NEVER_FILLED, Region, RegionRegistry, UNASSIGNED


@dataclass(frozen=True, eq=False)
class GenerationStep:
    """Point-in-time view of a partial partition."""

    step: int
    description: str
    active_region_frontier: FrozenSet[int]
    region_id: Optional[int]
    region_assignment: np.ndarray = field(repr=False)
    step_when_filled: np.ndarray = field(repr=False)

    @property
    def point_count(self) -> int:
        return len(self.region_assignment)

    def get_region(self, cell: int) -> Optional[int]:
        """
        Region of a cell as of this step.

        Args:
            cell: Cell index

        Returns:
            Region id, or None if the cell was unassigned at this step

        Raises:
            IndexError: If the cell index is out of range
        """
        if not 0 <= cell < self.point_count:
            raise IndexError(f"Cell {cell} out of range [0, {self.point_count})")
        region_id = self.region_assignment[cell]
        if region_id != UNASSIGNED and self.step_when_filled[cell] <= self.step:
            return int(region_id)
        return None

    def is_frontier(self, cell: int) -> bool:
        """Check if a cell is on the active region's frontier."""
        return cell in self.active_region_frontier

    def assignment(self) -> np.ndarray:
        """Full assignment as of this step, UNASSIGNED where empty."""
        visible = (self.step_when_filled <= self.step) & (self.region_assignment != UNASSIGNED)
        return np.where(visible, self.region_assignment, UNASSIGNED).astype(np.int32)

    def region_sizes(self) -> Dict[int, int]:
        """Number of cells per region as of this step."""
        assignment = self.assignment()
        ids, counts = np.unique(assignment[assignment != UNASSIGNED], return_counts=True)
        return {int(i): int(c) for i, c in zip(ids, counts)}


def _read_only(array: np.ndarray) -> np.ndarray:
    view = array.view()
    view.flags.writeable = False
    return view


class StepRecorder:
    """Creates snapshots from the state of a running generation."""

    def __init__(self, registry: RegionRegistry):
        self.registry = registry
        self.recorded = 0
        # Read-only views shared by every snapshot
        self._assignment_view = _read_only(registry.region_assignment)
        self._filled_view = _read_only(registry.step_when_filled)

    def snapshot(self, step: int, description: str,
                 region: Optional[Region] = None) -> GenerationStep:
        """
        Freeze the current state as a snapshot.

        Args:
            step: Current step number
            description: What happened in this step
            region: Region that was grown, None for the initial snapshot
        """
        self.recorded += 1
        return GenerationStep(
            step=step,
            description=description,
            active_region_frontier=frozenset(region.frontier) if region is not None else frozenset(),
            region_id=region.id if region is not None else None,
            region_assignment=self._assignment_view,
            step_when_filled=self._filled_view,
        )

    @staticmethod
    def empty(point_count: int) -> GenerationStep:
        """Snapshot with every cell unassigned."""
        return GenerationStep(
            step=0,
            description="",
            active_region_frontier=frozenset(),
            region_id=None,
            region_assignment=_read_only(np.full(point_count, UNASSIGNED, dtype=np.int32)),
            step_when_filled=_read_only(np.full(point_count, NEVER_FILLED, dtype=np.float64)),
        )
