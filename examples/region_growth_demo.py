#!/usr/bin/env python3
"""
Demonstration of flood fill region generation.

Generates a relaxed Voronoi map, partitions it into regions and walks
through the recorded animation steps:
1. Seeding
2. Step by step growth
3. Replaying an earlier step
4. Error reporting
"""

from py_regions.core import MapConfig, initial_points, regenerate_map
from py_regions.logging_config import configure_logging


def main():
    configure_logging(level="WARNING", fmt="console")

    config = MapConfig(num_points=150, region_count=6, min_region_size=10, iterations=2)

    print("=== Region Growth Demo ===\n")

    # 1. Generate the map
    print("1. Generating map...")
    generated = regenerate_map(initial_points(config), config)
    print(f"   - Cells: {generated.graph.point_count}")
    print(f"   - Animation steps: {len(generated.steps)}")

    # 2. Show the first few steps
    print("\n2. First steps:")
    for step in generated.steps[:8]:
        frontier = sorted(step.active_region_frontier)
        print(f"   [{step.step:3d}] {step.description}  frontier={frontier}")

    # 3. Replay a step from the middle
    middle = generated.step_at(len(generated.steps) // 2)
    print(f"\n3. Region sizes at step {middle.step}: {middle.region_sizes()}")
    print(f"   Region sizes at the end: {generated.final_step().region_sizes()}")

    # 4. Infeasible configuration
    print("\n4. Asking for too many regions...")
    crowded = config.model_copy(update={"region_count": 50})
    failed = regenerate_map(initial_points(crowded), crowded)
    print(f"   - Status: {failed.status}")


if __name__ == "__main__":
    main()
