"""Exceptions raised by the Voronoi core and its collaborators."""


class VoronoiError(Exception):
    """Base exception for Voronoi construction."""

    pass


class SiteCoordinateError(VoronoiError, ValueError):
    """A site coordinate is not an exact integer."""

    pass


class CoordinateOverflowError(VoronoiError, OverflowError):
    """A site coordinate exceeds the configured safe magnitude."""

    pass


class ScenarioError(VoronoiError):
    """A scenario description could not be read or validated."""

    pass
