"""
Draw a Voronoi graph with matplotlib.

Sites and finite vertices are drawn as dots, segments as lines. Rays have
no end, so they are cut at ``ray_extension`` times the size of the finite
geometry. The y axis points down, as in SVG.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import structlog

from .config import settings
from .core.emitter import Primitive, Ray, RayPair, Segment, SitePoint
from .core.voronoi_graph import VoronoiGraph

logger = structlog.get_logger()

SITE_COLOUR = "black"
EDGE_COLOUR = "red"


def finite_points(primitives: Iterable[Primitive]) -> np.ndarray:
    """All finite coordinates among the primitives. Shape: [N, 2]."""
    points = []
    for prim in primitives:
        if isinstance(prim, SitePoint):
            points.append(prim.position)
        elif isinstance(prim, Segment):
            points.extend([prim.start, prim.end])
        elif isinstance(prim, (Ray, RayPair)):
            points.append(prim.origin)
    if not points:
        return np.zeros((0, 2))
    return np.vstack(points)


def view_box(points: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Region to show around ``points``.

    The bounding box is inflated by half a unit and scaled by 1.2 around
    its centre.

    Returns:
        (min corner, max corner)
    """
    if len(points) == 0:
        return np.array([-1.0, -1.0]), np.array([1.0, 1.0])
    low = points.min(axis=0) - 0.5
    high = points.max(axis=0) + 0.5
    centre = (low + high) / 2
    half = (high - low) / 2 * 1.2
    return centre - half, centre + half


def ray_segments(primitives: Iterable[Primitive], length: float) -> List[Tuple[np.ndarray, np.ndarray]]:
    """Line segments for every edge, with rays cut at ``length``."""
    lines = []
    for prim in primitives:
        if isinstance(prim, Segment):
            lines.append((prim.start, prim.end))
        elif isinstance(prim, Ray):
            lines.append((prim.origin, prim.origin + prim.direction * length))
        elif isinstance(prim, RayPair):
            lines.append((prim.origin, prim.origin + prim.direction_1 * length))
            lines.append((prim.origin, prim.origin + prim.direction_2 * length))
    return lines


def render(source: Union[VoronoiGraph, Iterable[Primitive]], path: Union[str, Path],
           size_px: Optional[int] = None, dpi: Optional[int] = None) -> Path:
    """
    Render a graph (or its primitives) to an image file.

    The format follows the file extension (``.svg``, ``.png``, ...).

    Args:
        source: Graph or primitives to draw
        path: Output file
        size_px: Width and height of the image
        dpi: Resolution used to convert ``size_px`` to inches

    Returns:
        Path of the written file
    """
    path = Path(path)
    size_px = size_px or settings.image_size_px
    dpi = dpi or settings.image_dpi

    if isinstance(source, VoronoiGraph):
        primitives = list(source.primitives())
    else:
        primitives = list(source)

    points = finite_points(primitives)
    low, high = view_box(points)
    extent = high - low
    length = settings.ray_extension * float(max(extent))

    fig, ax = plt.subplots(figsize=(size_px / dpi, size_px / dpi), dpi=dpi)
    try:
        for start, end in ray_segments(primitives, length):
            ax.plot([start[0], end[0]], [start[1], end[1]], color=EDGE_COLOUR, linewidth=1)

        vertices = finite_points(p for p in primitives if not isinstance(p, SitePoint))
        if len(vertices):
            ax.scatter(vertices[:, 0], vertices[:, 1], s=settings.point_size, color=EDGE_COLOUR, zorder=2)

        sites = finite_points(p for p in primitives if isinstance(p, SitePoint))
        if len(sites):
            ax.scatter(sites[:, 0], sites[:, 1], s=settings.point_size, color=SITE_COLOUR, zorder=3)

        ax.set_xlim(low[0], high[0])
        ax.set_ylim(high[1], low[1])  # y down
        ax.set_aspect("equal")
        ax.set_xticks([])
        ax.set_yticks([])

        path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(path, dpi=dpi)
    finally:
        plt.close(fig)

    logger.info("Rendered Voronoi graph", path=str(path), primitives=len(primitives))
    return path
