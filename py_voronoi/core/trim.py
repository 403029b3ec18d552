"""
Trim engine: tighten a bisector edge against a third site.

For an edge between ``a`` and ``b`` with anchor ``M`` and direction ``D``,
the point ``M + t*D`` is at squared distance ``L/4 + t^2 L`` from both owning
sites, where ``L = |D|^2 = |b - a|^2``. Against a probe ``P`` write
``Q = 2P - 2M`` (integral thanks to the doubled anchor). The squared distance
to ``P`` is ``|Q|^2/4 - t (D.Q) + t^2 L``, so the ``t^2`` terms cancel and the
probe takes over the edge beyond

    cut_t = (|Q|^2 - L) / (4 D.Q)

computed here as an exact ``Fraction``. The sign of ``D.Q`` tells which side
of the cut the probe wins: positive cuts the upper bound, negative the lower.
"""

from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from typing import Optional

from .bisector import BisectorEdge
from .sites import Site


class TrimAction(Enum):
    """Outcome of trimming an edge against a site."""
    KEEP = "keep"
    FILTER = "filter"
    TRIMMED = "trimmed"


@dataclass(frozen=True)
class TrimResult:
    action: TrimAction
    min_t: Optional[Fraction] = None
    max_t: Optional[Fraction] = None

    def apply(self, edge: BisectorEdge) -> Optional[BisectorEdge]:
        """Edge after this result, or None if it was filtered."""
        if self.action is TrimAction.FILTER:
            return None
        if self.action is TrimAction.TRIMMED:
            return edge.with_bounds(self.min_t, self.max_t)
        return edge


KEEP = TrimResult(TrimAction.KEEP)
FILTER = TrimResult(TrimAction.FILTER)


def cut_max(edge: BisectorEdge, t: Fraction) -> TrimResult:
    """Bound the edge above by ``t``."""
    if edge.min_t is not None and t <= edge.min_t:
        return FILTER
    if edge.max_t is not None and t >= edge.max_t:
        return KEEP
    return TrimResult(TrimAction.TRIMMED, edge.min_t, t)


def cut_min(edge: BisectorEdge, t: Fraction) -> TrimResult:
    """Bound the edge below by ``t``."""
    if edge.max_t is not None and t >= edge.max_t:
        return FILTER
    if edge.min_t is not None and t <= edge.min_t:
        return KEEP
    return TrimResult(TrimAction.TRIMMED, t, edge.max_t)


def trim(edge: BisectorEdge, probe: Site) -> TrimResult:
    """
    Remove the part of ``edge`` that is strictly closer to ``probe``.

    Args:
        edge: Edge to test
        probe: Any site other than the two owning the edge

    Returns:
        KEEP if the probe does not reach the edge, FILTER if it dominates
        all that is left of it, otherwise TRIMMED with the tightened bounds
    """
    if edge.is_degenerate:
        return FILTER

    qx = 2 * probe.x - edge.anchor2[0]
    qy = 2 * probe.y - edge.anchor2[1]
    dx, dy = edge.direction

    along = dx * qx + dy * qy
    q_sq = qx * qx + qy * qy
    length_sq = edge.length_sq

    if along == 0:
        # Probe is on the line through both sites: no finite cut.
        # Equality (probe on an owning site) filters.
        if q_sq > length_sq:
            return KEEP
        return FILTER

    cut_t = Fraction(q_sq - length_sq, 4 * along)
    if along > 0:
        return cut_max(edge, cut_t)
    return cut_min(edge, cut_t)
