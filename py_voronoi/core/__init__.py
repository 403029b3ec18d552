"""
Exact incremental Voronoi construction.
"""

from .bisector import BisectorEdge
from .emitter import Ray, RayPair, Segment, SitePoint, emit, emit_edge
from .errors import CoordinateOverflowError, ScenarioError, SiteCoordinateError, VoronoiError
from .sites import Site, SiteStore
from .trim import TrimAction, TrimResult, trim
from .voronoi_graph import VoronoiGraph

__all__ = ['BisectorEdge', 'Ray', 'RayPair', 'Segment', 'SitePoint', 'emit', 'emit_edge',
           'CoordinateOverflowError', 'ScenarioError', 'SiteCoordinateError', 'VoronoiError',
           'Site', 'SiteStore', 'TrimAction', 'TrimResult', 'trim', 'VoronoiGraph']
