#!/usr/bin/env python3
"""
Demo script showing incremental Voronoi construction.
"""

from py_voronoi.core import Ray, RayPair, Segment, VoronoiGraph
from py_voronoi.render import render


def describe(graph: VoronoiGraph):
    """Print every edge with its exact bounds."""
    for edge in graph.edges:
        print(f"  edge {edge.sites}: min_t={edge.min_t} max_t={edge.max_t}")


def main():
    """Insert a handful of points one at a time and draw each stage."""
    print("Py-Voronoi Incremental Construction Demo")
    print("=" * 40)

    points = [(-10, 0), (0, 0), (5, 5), (-3, 12), (8, -6), (-12, -9)]
    graph = VoronoiGraph()

    for step, point in enumerate(points):
        site = graph.insert(point)
        print(f"\nInserted site {site.id} at ({site.x}, {site.y}): {len(graph.edges)} edges")
        describe(graph)
        render(graph, f"incremental_step_{step}.svg", size_px=512)

    counts = {Segment: 0, Ray: 0, RayPair: 0}
    for prim in graph.primitives():
        if type(prim) in counts:
            counts[type(prim)] += 1
    print(f"\nFinal diagram: {counts[Segment]} segments, {counts[Ray]} rays, {counts[RayPair]} full lines")


if __name__ == "__main__":
    main()
