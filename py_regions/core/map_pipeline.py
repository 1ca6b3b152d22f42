"""
End-to-end region map generation.

Relaxes a point set, builds the cell adjacency and runs region generation
with a fixed seed, collecting every animation step.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional

import numpy as np
import structlog
from pydantic import BaseModel, Field

from ..config import settings
from .random_source import RandomSource
from .exceptions import RegionGenerationError
from .generation_steps import GenerationStep
from .region_generator import RegionGenerationMethod, RegionGenerationOptions, RegionGenerator
from .voronoi_graph import CellGraph, build_cell_adjacency, generate_points, relax_points

logger = structlog.get_logger()


class MapConfig(BaseModel):
    """Parameters of one region map."""

    num_points: int = Field(default_factory=lambda: settings.default_num_points, ge=0)
    region_count: int = Field(default_factory=lambda: settings.default_region_count)
    min_region_size: int = Field(default_factory=lambda: settings.default_min_region_size)
    iterations: int = Field(
        default_factory=lambda: settings.default_relaxation_iterations, ge=0,
        description="Lloyd relaxation iterations",
    )
    method: Any = Field(default=RegionGenerationMethod.FLOOD_FILL)
    seed: float = Field(default_factory=lambda: settings.default_seed)
    width: float = Field(default_factory=lambda: settings.default_width, gt=0)
    height: float = Field(default_factory=lambda: settings.default_height, gt=0)
    max_steps: int = Field(default_factory=lambda: settings.max_generation_steps)


@dataclass
class GeneratedMap:
    """Result of a map generation."""

    points: np.ndarray
    graph: CellGraph
    steps: List[GenerationStep] = field(default_factory=list)
    status: str = ""
    error: Optional[RegionGenerationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def step_at(self, index: int) -> GenerationStep:
        """Snapshot at an animation position."""
        return self.steps[index]

    def final_step(self) -> Optional[GenerationStep]:
        """Last snapshot, None if generation failed."""
        return self.steps[-1] if self.steps else None


def initial_points(config: MapConfig, random_source: Optional[RandomSource] = None) -> np.ndarray:
    """Random points for a map, drawn from their own source unless one is given."""
    random_source = random_source or RandomSource(config.seed)
    return generate_points(config.num_points, config.width, config.height, random_source)


def regenerate_map(points: np.ndarray, config: MapConfig) -> GeneratedMap:
    """
    Generate regions over a point set.

    Generation errors are reported in the result's status instead of
    being raised, and leave the step list empty.

    Args:
        points: Cell sites
        config: Map configuration

    Returns:
        GeneratedMap with relaxed points, adjacency and all steps
    """
    logger.info("Regenerating map", points=len(points),
                region_count=config.region_count,
                min_region_size=config.min_region_size,
                iterations=config.iterations)

    points = relax_points(points, config.width, config.height, config.iterations)
    graph = build_cell_adjacency(points, config.width, config.height)

    options = RegionGenerationOptions(
        region_count=config.region_count,
        min_region_size=config.min_region_size,
        method=config.method,
        max_steps=config.max_steps,
    )
    generator = RegionGenerator(graph.neighbors, graph.point_count, options,
                                RandomSource(config.seed))

    try:
        steps = list(generator.generate())
    except RegionGenerationError as e:
        logger.error("Region generation failed", error=str(e))
        return GeneratedMap(points=points, graph=graph, status=f"Error: {e}", error=e)

    return GeneratedMap(points=points, graph=graph, steps=steps)
