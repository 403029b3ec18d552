"""Append-only store of Voronoi sites."""

import numbers
from typing import Iterator, List, NamedTuple, Optional, Sequence

from .errors import CoordinateOverflowError, SiteCoordinateError


class Site(NamedTuple):
    """An inserted point. ``id`` is its insertion index."""
    id: int
    x: int
    y: int


def _exact_coordinate(value) -> int:
    """Convert ``value`` to an int without losing information."""
    if isinstance(value, bool):
        raise SiteCoordinateError(f"Coordinate must be a number, got {value!r}")
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        as_float = float(value)
        if as_float.is_integer():
            return int(as_float)
    raise SiteCoordinateError(f"Coordinate must be an integer value, got {value!r}")


class SiteStore:
    """
    Ordered collection of sites.

    Sites are never removed or modified, so a site's id always equals its
    position in the store.
    """

    def __init__(self, max_coordinate: Optional[int] = None):
        """
        Args:
            max_coordinate: Largest accepted absolute coordinate, or None
                for no limit
        """
        self.max_coordinate = max_coordinate
        self._sites: List[Site] = []

    def __len__(self) -> int:
        return len(self._sites)

    def __iter__(self) -> Iterator[Site]:
        return iter(self._sites)

    def __getitem__(self, site_id: int) -> Site:
        return self._sites[site_id]

    @property
    def next_id(self) -> int:
        return len(self._sites)

    def make_site(self, point: Sequence) -> Site:
        """
        Validate ``point`` and build the site it would become.

        The site is not stored; call ``append`` once the graph has been
        updated for it.

        Raises:
            SiteCoordinateError: If the point is not a pair of integer values
            CoordinateOverflowError: If a coordinate exceeds ``max_coordinate``
        """
        try:
            raw_x, raw_y = point
        except (TypeError, ValueError):
            raise SiteCoordinateError(f"Expected an (x, y) pair, got {point!r}") from None

        x = _exact_coordinate(raw_x)
        y = _exact_coordinate(raw_y)

        if self.max_coordinate is not None:
            if abs(x) > self.max_coordinate or abs(y) > self.max_coordinate:
                raise CoordinateOverflowError(
                    f"Point ({x}, {y}) exceeds the safe magnitude {self.max_coordinate}"
                )

        return Site(self.next_id, x, y)

    def append(self, site: Site) -> None:
        if site.id != self.next_id:
            raise ValueError(f"Site id {site.id} does not match next id {self.next_id}")
        self._sites.append(site)
