"""Drawable primitives for a Voronoi graph snapshot."""

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple, Union

import numpy as np

from .bisector import BisectorEdge, to_float
from .sites import Site


@dataclass(frozen=True, eq=False)
class SitePoint:
    site_id: int
    position: np.ndarray


@dataclass(frozen=True, eq=False)
class Segment:
    sites: Tuple[int, int]
    start: np.ndarray
    end: np.ndarray


@dataclass(frozen=True, eq=False)
class Ray:
    sites: Tuple[int, int]
    origin: np.ndarray
    direction: np.ndarray  # unit vector


@dataclass(frozen=True, eq=False)
class RayPair:
    """Full bisector line, drawn as two opposite rays from the anchor."""
    sites: Tuple[int, int]
    origin: np.ndarray
    direction_1: np.ndarray
    direction_2: np.ndarray


EdgePrimitive = Union[Segment, Ray, RayPair]
Primitive = Union[SitePoint, Segment, Ray, RayPair]


def emit_site(site: Site) -> SitePoint:
    return SitePoint(site.id, np.array([float(site.x), float(site.y)]))


def emit_edge(edge: BisectorEdge) -> EdgePrimitive:
    """
    Map an edge's bound state to a primitive.

    Args:
        edge: Non-degenerate edge

    Returns:
        Segment if both bounds are set, Ray if one is, RayPair if neither
    """
    unit = edge.unit_direction()
    start = edge.start()
    end = edge.end()

    if start is not None and end is not None:
        return Segment(edge.sites, to_float(start), to_float(end))
    if start is not None:
        return Ray(edge.sites, to_float(start), unit)
    if end is not None:
        return Ray(edge.sites, to_float(end), -unit)
    return RayPair(edge.sites, to_float(edge.anchor), unit, -unit)


def emit(sites: Iterable[Site], edges: Iterable[BisectorEdge]) -> Iterator[Primitive]:
    """Yield every site as a point, then every edge as a segment or ray(s)."""
    for site in sites:
        yield emit_site(site)
    for edge in edges:
        yield emit_edge(edge)
