"""Incremental Voronoi graph construction."""

from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

import structlog

from .bisector import BisectorEdge
from .emitter import Primitive, emit
from .sites import Site, SiteStore
from .trim import TrimAction, trim

logger = structlog.get_logger()


class VoronoiGraph:
    """
    Voronoi diagram of the sites inserted so far.

    After every insertion the edge list holds, for each pair of sites, the
    part of their bisector that no third site is strictly closer to. Edges
    only ever shrink or disappear.
    """

    def __init__(self, max_coordinate: Optional[int] = None):
        """
        Args:
            max_coordinate: Largest accepted absolute coordinate, or None
                for no limit
        """
        self._sites = SiteStore(max_coordinate=max_coordinate)
        self._edges: List[BisectorEdge] = []

    @classmethod
    def from_points(cls, points: Iterable[Sequence], max_coordinate: Optional[int] = None) -> "VoronoiGraph":
        graph = cls(max_coordinate=max_coordinate)
        for point in points:
            graph.insert(point)
        return graph

    @property
    def sites(self) -> SiteStore:
        return self._sites

    @property
    def edges(self) -> Tuple[BisectorEdge, ...]:
        """Snapshot of the current edges."""
        return tuple(self._edges)

    def __len__(self) -> int:
        return len(self._sites)

    def edge_between(self, site_a: int, site_b: int) -> Optional[BisectorEdge]:
        """Edge owned by the two given sites (in either order), if it survives."""
        wanted = {site_a, site_b}
        for edge in self._edges:
            if {edge.site_a, edge.site_b} == wanted:
                return edge
        return None

    def insert(self, point: Sequence) -> Site:
        """
        Add a site and restore the diagram.

        The new edge list is computed in full before it replaces the old one,
        and the site is committed last, so a failure leaves the graph as it
        was.

        Args:
            point: (x, y) pair of integer values

        Returns:
            The inserted site
        """
        site = self._sites.make_site(point)

        # Retrim existing edges against the new site
        new_edges: List[BisectorEdge] = []
        trimmed = 0
        for edge in self._edges:
            result = trim(edge, site)
            if result.action is TrimAction.FILTER:
                continue
            if result.action is TrimAction.TRIMMED:
                trimmed += 1
            new_edges.append(result.apply(edge))
        filtered = len(self._edges) - len(new_edges)

        # Bisectors between the new site and every existing one
        added = 0
        for existing in self._sites:
            candidate = self._build_candidate(existing, site)
            if candidate is not None:
                new_edges.append(candidate)
                added += 1

        self._sites.append(site)
        self._edges = new_edges

        logger.debug(
            "Inserted site",
            site_id=site.id,
            x=site.x,
            y=site.y,
            trimmed=trimmed,
            filtered=filtered,
            added=added,
            edges=len(new_edges),
        )
        return site

    def _build_candidate(self, existing: Site, new_site: Site) -> Optional[BisectorEdge]:
        """Bisector of two sites trimmed against every other known site."""
        edge = BisectorEdge.between(existing, new_site)
        if edge.is_degenerate:
            logger.debug("Skipping coincident sites", site_a=existing.id, site_b=new_site.id)
            return None

        for other in self._sites:
            if other.id == existing.id:
                continue
            edge = trim(edge, other).apply(edge)
            if edge is None:
                return None
        return edge

    def primitives(self) -> Iterator[Primitive]:
        """Read-only traversal of sites and edges as drawable primitives."""
        return emit(tuple(self._sites), self.edges)
