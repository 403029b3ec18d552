"""
Scenario loading.

A scenario is a JSON object naming how the sites are produced:

- ``{"scenario": "points", "points": [[x, y], ...]}`` lists them explicitly
  (``"voronoi_points_2d"`` is accepted as an alias)
- ``{"scenario": "random", "number": N, "seed": S}`` draws N seeded points
"""

import json
from pathlib import Path
from typing import List, Literal, Optional, Tuple, Union

import numpy as np
import structlog
from pydantic import BaseModel, Field, ValidationError

from .config import settings
from .core.errors import ScenarioError
from .core.voronoi_graph import VoronoiGraph

logger = structlog.get_logger()


class PointsScenario(BaseModel):
    """Explicit list of integer points, inserted in order."""

    scenario: Literal["points", "voronoi_points_2d"] = Field(description="Scenario name")
    points: List[Tuple[int, int]] = Field(description="Sites as [x, y] pairs")

    def generate_points(self) -> List[Tuple[int, int]]:
        return list(self.points)


class RandomScenario(BaseModel):
    """Seeded random integer points."""

    scenario: Literal["random"] = Field(description="Scenario name")
    number: int = Field(ge=0, description="Number of points to generate")
    seed: int = Field(default=0, ge=0, description="Random seed for reproducible generation")
    coordinate_range: Optional[int] = Field(
        default=None, gt=0, description="Points fall strictly inside (-range, range)"
    )

    def generate_points(self) -> List[Tuple[int, int]]:
        bound = self.coordinate_range or settings.random_coordinate_range
        rng = np.random.default_rng(self.seed)
        coords = rng.integers(-(bound - 1), bound, size=(self.number, 2))
        return [(int(x), int(y)) for x, y in coords]


Scenario = Union[PointsScenario, RandomScenario]

SCENARIOS = {
    "points": PointsScenario,
    "voronoi_points_2d": PointsScenario,
    "random": RandomScenario,
}


def parse_scenario(data) -> Scenario:
    """
    Validate a decoded scenario description.

    Raises:
        ScenarioError: If the scenario is unknown or malformed
    """
    if not isinstance(data, dict):
        raise ScenarioError(f"Scenario must be a JSON object, got {type(data).__name__}")

    name = data.get("scenario")
    if name is None:
        raise ScenarioError("Missing scenario key")
    if name not in SCENARIOS:
        raise ScenarioError(f"Unknown scenario {name!r}")

    try:
        return SCENARIOS[name](**data)
    except ValidationError as e:
        raise ScenarioError(f"Invalid {name} scenario: {e}") from e


def load_scenario(path: Union[str, Path]) -> Scenario:
    """Read and validate a scenario file."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ScenarioError(f"Could not read {path}: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ScenarioError(f"Could not parse {path}: {e}") from e

    scenario = parse_scenario(data)
    logger.info("Parsed scenario", path=str(path), scenario=scenario.scenario)
    return scenario


def build_graph(scenario: Scenario, max_coordinate: Optional[int] = None) -> VoronoiGraph:
    """Insert the scenario's points, in order, into a new graph."""
    points = scenario.generate_points()
    logger.info("Building Voronoi graph", scenario=scenario.scenario, points=len(points))
    graph = VoronoiGraph.from_points(points, max_coordinate=max_coordinate)
    logger.info("Voronoi graph complete", sites=len(graph.sites), edges=len(graph.edges))
    return graph
