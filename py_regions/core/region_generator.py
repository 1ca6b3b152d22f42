"""
Region generation by randomized flood fill.

Seeds the requested number of regions at random cells and then grows one
randomly chosen region by one cell at a time until no region can grow.
Every fill yields a snapshot so the run can be replayed step by step.
"""

from enum import Enum
from typing import Any, Iterator, List, Optional

import structlog
from pydantic import BaseModel, Field

from ..config import settings
from .random_source import RandomSource
from .cell_selection import NeighborFn, prune_frontier, select_candidate
from .exceptions import InfeasibleConfiguration, RunawayGeneration, UnsupportedMethod
from .generation_steps import GenerationStep, StepRecorder
from .regions import RegionRegistry

logger = structlog.get_logger()

INITIAL_STEP_DESCRIPTION = "Initialized regions in random locations."


class RegionGenerationMethod(str, Enum):
    """Supported ways of partitioning cells into regions."""

    FLOOD_FILL = "floodFill"
    NONE = "none"


class RegionGenerationOptions(BaseModel):
    """Region generation options."""

    region_count: int = Field(
        default_factory=lambda: settings.default_region_count,
        description="Number of regions to generate",
    )
    min_region_size: int = Field(
        default_factory=lambda: settings.default_min_region_size,
        description="Minimum region size, only checked against the cell count before growth",
    )
    method: Any = Field(
        default=RegionGenerationMethod.FLOOD_FILL, description="Generation method"
    )
    max_steps: int = Field(
        default_factory=lambda: settings.max_generation_steps,
        description="Step ceiling guarding against non-terminating growth",
    )


def _resolve_method(method) -> Optional[RegionGenerationMethod]:
    if isinstance(method, RegionGenerationMethod):
        return method
    try:
        return RegionGenerationMethod(method)
    except ValueError:
        return None


class RegionGenerator:
    """Partitions the cells of a planar subdivision into contiguous regions."""

    def __init__(
        self,
        neighbors: NeighborFn,
        point_count: int,
        options: Optional[RegionGenerationOptions] = None,
        random_source: Optional[RandomSource] = None,
    ):
        """
        Initialize region generator.

        Args:
            neighbors: Adjacency provider, must be symmetric
            point_count: Number of cells
            options: Region generation options
            random_source: Source of every random decision of the run
        """
        self.neighbors = neighbors
        self.point_count = point_count
        self.options = options or RegionGenerationOptions()
        self.random = random_source or RandomSource()

        # State of the latest run
        self.registry: Optional[RegionRegistry] = None

    def generate(self) -> Iterator[GenerationStep]:
        """
        Generate regions lazily.

        Yields:
            One snapshot after seeding and one per filled cell. A single
            empty snapshot when regions are disabled.

        Raises:
            InfeasibleConfiguration: Too few cells for the requested regions
            UnsupportedMethod: Unknown generation method
            RunawayGeneration: Step ceiling exceeded
        """
        options = self.options
        method = _resolve_method(options.method)

        if (options.region_count <= 0 or options.min_region_size <= 0
                or method is RegionGenerationMethod.NONE):
            logger.info("Region generation disabled",
                        region_count=options.region_count,
                        min_region_size=options.min_region_size,
                        method=str(options.method))
            yield StepRecorder.empty(self.point_count)
            return

        if method is not RegionGenerationMethod.FLOOD_FILL:
            logger.error("Unknown region generation method", method=str(options.method))
            raise UnsupportedMethod(options.method)

        yield from self._flood_fill()

    def _flood_fill(self) -> Iterator[GenerationStep]:
        options = self.options
        region_count = options.region_count

        if self.point_count < region_count * options.min_region_size:
            logger.error("Region configuration infeasible",
                         point_count=self.point_count,
                         region_count=region_count,
                         min_region_size=options.min_region_size)
            raise InfeasibleConfiguration(self.point_count, region_count, options.min_region_size)

        # Every run replays the stream from its seed
        self.random.seed(self.random.current_seed)

        logger.info("Starting flood fill region generation",
                    point_count=self.point_count,
                    region_count=region_count,
                    method=RegionGenerationMethod.FLOOD_FILL.value,
                    seed=self.random.current_seed)

        registry = RegionRegistry(self.point_count)
        recorder = StepRecorder(registry)
        self.registry = registry

        step = 0
        self._seed_regions(registry, region_count, step)
        growable: List[int] = registry.region_ids()

        yield recorder.snapshot(step, INITIAL_STEP_DESCRIPTION)
        step += 1

        while growable:
            region_id = growable[self.random.next_int(0, len(growable))]
            region = registry.regions[region_id]

            cell = select_candidate(region, registry, self.neighbors)
            if cell is None:
                growable.remove(region_id)
                logger.debug("Region cannot grow any further", region=region_id, step=step)
                continue

            registry.assign(cell, region_id, step)
            region.frontier.add(cell)
            prune_frontier(region, registry, self.neighbors)

            if step > options.max_steps:
                logger.error("Region generation exceeded step ceiling",
                             step=step, max_steps=options.max_steps)
                raise RunawayGeneration(step, options.max_steps)

            logger.debug("Filled cell", cell=cell, region=region_id, step=step)
            yield recorder.snapshot(step, f"Filled cell {cell} with region {region_id}", region)
            step += 1

        logger.info("Region generation complete",
                    steps=recorder.recorded,
                    assigned_cells=registry.assigned_count(),
                    unassigned_cells=self.point_count - registry.assigned_count())

    def _seed_regions(self, registry: RegionRegistry, region_count: int, step: int) -> None:
        """Place each region on a random unassigned cell."""
        seeds = []
        for _ in range(region_count):
            cell = self.random.next_int(0, self.point_count)
            while registry.is_assigned(cell):
                cell = self.random.next_int(0, self.point_count)
            registry.add_region(cell, step)
            seeds.append(cell)

        logger.info("Regions seeded", seeds=seeds)


def generate_regions(
    neighbors: NeighborFn,
    point_count: int,
    region_count: int,
    min_region_size: int,
    method: Any = RegionGenerationMethod.FLOOD_FILL,
    random_source: Optional[RandomSource] = None,
    max_steps: Optional[int] = None,
) -> Iterator[GenerationStep]:
    """
    Generate regions and yield the animation steps.

    Args:
        neighbors: Adjacency provider
        point_count: Total number of cells
        region_count: Number of regions to generate
        min_region_size: Minimum region size (precondition only)
        method: Generation method
        random_source: Seeded random source
        max_steps: Step ceiling, defaults to the configured value

    Returns:
        Lazy sequence of snapshots
    """
    options = RegionGenerationOptions(
        region_count=region_count,
        min_region_size=min_region_size,
        method=method,
        max_steps=max_steps if max_steps is not None else settings.max_generation_steps,
    )
    return RegionGenerator(neighbors, point_count, options, random_source).generate()
