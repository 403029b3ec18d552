"""Exact incremental 2D Voronoi diagrams."""

from .core import VoronoiGraph

__version__ = "0.1.0"

__all__ = ['VoronoiGraph']
