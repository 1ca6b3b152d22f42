"""
Core region generation functionality.
"""

from .exceptions import (RegionGenerationError, InfeasibleConfiguration,
                         UnsupportedMethod, RunawayGeneration)
from .random_source import RandomSource
from .regions import Region, RegionRegistry, UNASSIGNED
from .cell_selection import select_candidate, prune_frontier, compute_score
from .generation_steps import GenerationStep, StepRecorder
from .region_generator import (RegionGenerationMethod, RegionGenerationOptions,
                               RegionGenerator, generate_regions)
from .voronoi_graph import CellGraph, build_cell_adjacency, generate_points, relax_points
from .map_pipeline import MapConfig, GeneratedMap, initial_points, regenerate_map

__all__ = ['RegionGenerationError', 'InfeasibleConfiguration', 'UnsupportedMethod',
           'RunawayGeneration', 'RandomSource', 'Region', 'RegionRegistry', 'UNASSIGNED',
           'select_candidate', 'prune_frontier', 'compute_score',
           'GenerationStep', 'StepRecorder',
           'RegionGenerationMethod', 'RegionGenerationOptions', 'RegionGenerator',
           'generate_regions', 'CellGraph', 'build_cell_adjacency', 'generate_points',
           'relax_points', 'MapConfig', 'GeneratedMap', 'initial_points', 'regenerate_map']
