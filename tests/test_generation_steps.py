"""Tests for generation snapshots."""

import numpy as np
import pytest

from py_regions.core.generation_steps import GenerationStep, StepRecorder
from py_regions.core.regions import RegionRegistry, UNASSIGNED


@pytest.fixture
def registry():
    """Registry with two regions seeded at step 0 and a few later fills."""
    registry = RegionRegistry(6)
    registry.add_region(0, 0)
    registry.add_region(5, 0)
    registry.assign(1, 0, 1)
    registry.assign(4, 1, 2)
    registry.assign(2, 0, 3)
    return registry


class TestGenerationStep:
    """Test point-in-time lookups."""

    def test_lookup_as_of_step(self, registry):
        """Test that later fills are invisible to earlier snapshots."""
        recorder = StepRecorder(registry)
        step1 = recorder.snapshot(1, "one")
        assert step1.get_region(0) == 0
        assert step1.get_region(5) == 1
        assert step1.get_region(1) == 0
        assert step1.get_region(4) is None
        assert step1.get_region(2) is None
        assert step1.get_region(3) is None

    def test_full_assignment(self, registry):
        """Test materializing the assignment of a step."""
        recorder = StepRecorder(registry)
        np.testing.assert_array_equal(
            recorder.snapshot(2, "two").assignment(),
            [0, 0, UNASSIGNED, UNASSIGNED, 1, 1],
        )
        np.testing.assert_array_equal(
            recorder.snapshot(3, "three").assignment(),
            [0, 0, 0, UNASSIGNED, 1, 1],
        )

    def test_region_sizes(self, registry):
        """Test counting cells per region."""
        step = StepRecorder(registry).snapshot(3, "three")
        assert step.region_sizes() == {0: 3, 1: 2}

    def test_frontier_is_copied(self, registry):
        """Test that later frontier changes do not leak into a snapshot."""
        region = registry.regions[0]
        region.frontier = {0, 1}
        step = StepRecorder(registry).snapshot(1, "one", region)
        region.frontier.add(2)
        region.frontier.discard(0)
        assert step.active_region_frontier == frozenset({0, 1})
        assert step.is_frontier(0)
        assert not step.is_frontier(2)
        assert step.region_id == 0

    def test_snapshot_is_immutable(self, registry):
        """Test that snapshot fields cannot be reassigned."""
        step = StepRecorder(registry).snapshot(1, "one")
        with pytest.raises(AttributeError):
            step.description = "changed"

    def test_arrays_are_read_only(self, registry):
        """Test that snapshots cannot rewrite shared history."""
        step = StepRecorder(registry).snapshot(1, "one")
        with pytest.raises(ValueError):
            step.region_assignment[3] = 0
        with pytest.raises(ValueError):
            step.step_when_filled[3] = 0
        registry.assign(3, 1, 4)
        assert step.region_assignment[3] == 1
        assert step.get_region(3) is None

    def test_out_of_range_lookup(self, registry):
        """Test that lookups outside the complex fail."""
        step = StepRecorder(registry).snapshot(1, "one")
        with pytest.raises(IndexError):
            step.get_region(6)
        with pytest.raises(IndexError):
            step.get_region(-1)

    def test_recorder_counts_snapshots(self, registry):
        """Test that the recorder counts what it produced."""
        recorder = StepRecorder(registry)
        recorder.snapshot(0, "zero")
        recorder.snapshot(1, "one")
        assert recorder.recorded == 2


class TestEmptyStep:
    """Test the snapshot of a disabled run."""

    def test_everything_unassigned(self):
        """Test that the empty snapshot has no regions."""
        step = StepRecorder.empty(4)
        assert isinstance(step, GenerationStep)
        assert [step.get_region(c) for c in range(4)] == [None] * 4
        assert step.region_sizes() == {}
        assert step.active_region_frontier == frozenset()
        assert step.point_count == 4

    def test_zero_cells(self):
        """Test the empty snapshot of an empty complex."""
        step = StepRecorder.empty(0)
        assert step.assignment().shape == (0,)

    def test_read_only(self):
        """Test that the empty snapshot cannot be modified."""
        step = StepRecorder.empty(3)
        with pytest.raises(ValueError):
            step.region_assignment[0] = 1
