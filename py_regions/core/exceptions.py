"""Errors raised by region generation."""


class RegionGenerationError(Exception):
    """Base class for region generation failures."""


class InfeasibleConfiguration(RegionGenerationError, ValueError):
    """Not enough cells for the requested region count and minimum size."""

    def __init__(self, point_count: int, region_count: int, min_region_size: int):
        self.point_count = point_count
        self.region_count = region_count
        self.min_region_size = min_region_size
        super().__init__(
            f"Not enough points to generate {region_count} regions with minimum size "
            f"{min_region_size} ({point_count} < {region_count * min_region_size})."
        )


class UnsupportedMethod(RegionGenerationError, ValueError):
    """Unknown region generation method."""

    def __init__(self, method):
        self.method = method
        super().__init__(f"Unknown region generation method: {method}")


class RunawayGeneration(RegionGenerationError, RuntimeError):
    """Step ceiling exceeded, which points at broken adjacency or selection."""

    def __init__(self, step: int, max_steps: int):
        self.step = step
        self.max_steps = max_steps
        super().__init__(
            f"Too many steps ({step} > {max_steps}), likely an infinite loop. "
            "Check the cell adjacency."
        )
