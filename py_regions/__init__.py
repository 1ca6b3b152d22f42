"""Randomized flood fill partitioning of Voronoi cells into regions."""

__version__ = "0.1.0"
