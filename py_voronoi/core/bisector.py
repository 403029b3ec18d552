"""
Bisector edges between pairs of sites.

An edge stores the perpendicular bisector of two sites ``a`` and ``b`` in
integer form:

- ``anchor2 = a + b`` is twice the midpoint, so it stays integral
- ``direction`` is ``b - a`` rotated clockwise, so ``|direction| = |b - a|``
- points on the edge are ``anchor2 / 2 + t * direction``

``min_t`` and ``max_t`` are exact ``Fraction`` bounds on ``t``. ``None``
leaves that side unbounded.
"""

from dataclasses import dataclass, replace
from fractions import Fraction
from typing import Optional, Tuple

import numpy as np

from .sites import Site

ExactPoint = Tuple[Fraction, Fraction]


@dataclass(frozen=True)
class BisectorEdge:
    """Surviving part of the bisector between two sites."""

    site_a: int
    site_b: int
    anchor2: Tuple[int, int]
    direction: Tuple[int, int]
    min_t: Optional[Fraction] = None
    max_t: Optional[Fraction] = None

    def __post_init__(self):
        if self.min_t is not None and self.max_t is not None and self.min_t >= self.max_t:
            raise ValueError(
                f"Empty bounds for edge ({self.site_a}, {self.site_b}): "
                f"min_t={self.min_t} max_t={self.max_t}"
            )

    @classmethod
    def between(cls, a: Site, b: Site) -> "BisectorEdge":
        """Unbounded bisector of ``a`` and ``b``."""
        dx = b.x - a.x
        dy = b.y - a.y
        return cls(
            site_a=a.id,
            site_b=b.id,
            anchor2=(a.x + b.x, a.y + b.y),
            direction=(dy, -dx),
        )

    @property
    def sites(self) -> Tuple[int, int]:
        return (self.site_a, self.site_b)

    @property
    def length_sq(self) -> int:
        """Squared distance between the two sites (and squared length of ``direction``)."""
        dx, dy = self.direction
        return dx * dx + dy * dy

    @property
    def is_degenerate(self) -> bool:
        # Coincident sites have no bisector
        return self.direction == (0, 0)

    @property
    def anchor(self) -> ExactPoint:
        return (Fraction(self.anchor2[0], 2), Fraction(self.anchor2[1], 2))

    def with_bounds(self, min_t: Optional[Fraction], max_t: Optional[Fraction]) -> "BisectorEdge":
        return replace(self, min_t=min_t, max_t=max_t)

    def point_at(self, t: Fraction) -> ExactPoint:
        """Exact point at parameter ``t``."""
        mx, my = self.anchor
        dx, dy = self.direction
        return (mx + t * dx, my + t * dy)

    def start(self) -> Optional[ExactPoint]:
        """Exact point at ``min_t``, or None if unbounded below."""
        if self.min_t is None:
            return None
        return self.point_at(self.min_t)

    def end(self) -> Optional[ExactPoint]:
        """Exact point at ``max_t``, or None if unbounded above."""
        if self.max_t is None:
            return None
        return self.point_at(self.max_t)

    def unit_direction(self) -> np.ndarray:
        vector = np.array(self.direction, dtype=float)
        return vector / np.linalg.norm(vector)


def to_float(point: ExactPoint) -> np.ndarray:
    """Project an exact point to float output coordinates."""
    return np.array([float(point[0]), float(point[1])])
