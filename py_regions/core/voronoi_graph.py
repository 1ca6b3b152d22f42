"""Voronoi cell adjacency for region generation."""

from dataclasses import dataclass
from typing import List

import numpy as np
import structlog
from scipy.spatial import Voronoi

from .random_source import RandomSource

logger = structlog.get_logger()


@dataclass
class CellGraph:
    """Voronoi cells clipped to a rectangular canvas."""

    width: float
    height: float
    points: np.ndarray
    cell_neighbors: List[List[int]]  # cell_neighbors[i] = sorted neighbor cell ids

    @property
    def point_count(self) -> int:
        return len(self.points)

    def neighbors(self, cell: int) -> List[int]:
        """Neighbor cell ids of a cell."""
        return self.cell_neighbors[cell]


def generate_points(count: int, width: float, height: float,
                    random_source: RandomSource) -> np.ndarray:
    """
    Generate uniformly distributed points on the canvas.

    Args:
        count: Number of points
        width: Canvas width
        height: Canvas height
        random_source: Source of the coordinates

    Returns:
        Array of [x, y] point coordinates
    """
    points = np.empty((count, 2), dtype=np.float64)
    for i in range(count):
        points[i, 0] = random_source.next_uniform() * width
        points[i, 1] = random_source.next_uniform() * height
    return points


def _mirrored_voronoi(points: np.ndarray, width: float, height: float) -> Voronoi:
    """
    Voronoi diagram whose first len(points) cells are clipped to the canvas.

    Each point is mirrored across the four canvas edges so that the cells of
    the input points end exactly at the border.
    """
    left = points * [-1, 1]
    right = points * [-1, 1] + [2 * width, 0]
    top = points * [1, -1]
    bottom = points * [1, -1] + [0, 2 * height]
    return Voronoi(np.vstack([points, left, right, top, bottom]))


def compute_polygon_centroid(vertices: np.ndarray) -> np.ndarray:
    """Compute the centroid of a polygon.

    Args:
        vertices: Array of [x, y] vertex coordinates

    Returns:
        [x, y] centroid coordinates
    """
    if len(vertices) < 3:
        return np.mean(vertices, axis=0)

    x = vertices[:, 0]
    y = vertices[:, 1]
    x_next = np.roll(x, -1)
    y_next = np.roll(y, -1)
    cross = x * y_next - x_next * y
    area = cross.sum() * 0.5

    if abs(area) < 1e-10:
        return np.mean(vertices, axis=0)

    cx = ((x + x_next) * cross).sum() / (6.0 * area)
    cy = ((y + y_next) * cross).sum() / (6.0 * area)
    return np.array([cx, cy])


def relax_points(points: np.ndarray, width: float, height: float,
                 n_iterations: int = 1) -> np.ndarray:
    """Apply Lloyd's relaxation to improve point distribution.

    Moves each point to the centroid of its clipped Voronoi cell.

    Args:
        points: Points to relax
        width: Canvas width
        height: Canvas height
        n_iterations: Number of relaxation iterations

    Returns:
        Relaxed point coordinates
    """
    points = np.array(points, dtype=np.float64)  # Don't modify original
    n_points = len(points)
    if n_points == 0 or n_iterations <= 0:
        return points

    logger.info("Starting Lloyd's relaxation", iterations=n_iterations, points=n_points)

    for iteration in range(n_iterations):
        vor = _mirrored_voronoi(points, width, height)
        relaxed = points.copy()

        for i in range(n_points):
            region_vertices = vor.regions[vor.point_region[i]]
            if -1 in region_vertices or len(region_vertices) < 3:
                continue
            centroid = compute_polygon_centroid(vor.vertices[region_vertices])
            relaxed[i, 0] = np.clip(centroid[0], 0, width)
            relaxed[i, 1] = np.clip(centroid[1], 0, height)

        points = relaxed
        logger.debug("Relaxation iteration complete", iteration=iteration + 1)

    return points


def build_cell_adjacency(points: np.ndarray, width: float, height: float) -> CellGraph:
    """
    Build the cell adjacency of points clipped to the canvas.

    Two cells are neighbors when their clipped Voronoi cells share an edge.

    Args:
        points: Cell sites
        width: Canvas width
        height: Canvas height

    Returns:
        CellGraph with symmetric, sorted neighbor lists
    """
    points = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    n_points = len(points)
    cell_neighbors: List[List[int]] = [[] for _ in range(n_points)]

    if n_points > 1:
        vor = _mirrored_voronoi(points, width, height)
        for p1, p2 in vor.ridge_points:
            # Only connections between real cells, not their mirror images
            if p1 < n_points and p2 < n_points:
                cell_neighbors[p1].append(int(p2))
                cell_neighbors[p2].append(int(p1))

        for i in range(n_points):
            cell_neighbors[i] = sorted(set(cell_neighbors[i]))

    logger.info("Cell adjacency built", cells=n_points,
                edges=sum(len(n) for n in cell_neighbors) // 2)

    return CellGraph(width=width, height=height, points=points, cell_neighbors=cell_neighbors)
