"""
Scenario aggregation.

Partitions the assets attached to a focal physical object (oilfield, well,
or 5D object) into the ordered stages of a business scenario. Every stage is
evaluated independently against the full focal set, so an asset whose
category satisfies several stages appears in each of them. Stages with no
matching assets are kept: an empty stage tells the evaluation team what is
still missing.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

import yaml
from pydantic import ValidationError

from ..core.exceptions import CatalogLoadError, InvalidArgumentError
from ..core.types import Asset, Dimension, PhysicalObject, ScenarioDefinition, StageGroup

logger = logging.getLogger(__name__)

UNKNOWN_REGION = "unknown"
RELATED_ASSET_LIMIT = 3

ScenarioInput = Union[ScenarioDefinition, Mapping[str, Any]]


DEFAULT_SCENARIOS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "name": "New Well Evaluation Campaign",
        "description": "Structure, sedimentary and reserves graphics supporting drilling decisions for new wells.",
        "updatedAt": "2024-03-20",
        "stages": [
            {"id": "s1-1", "name": "Geological Background",
             "requiredCategories": ["Exploration Map", "Geological Section"]},
            {"id": "s1-2", "name": "Reservoir Evaluation",
             "requiredCategories": ["Development Model", "3D Model", "Geophysical Result"]},
            {"id": "s1-3", "name": "Well Placement Decision",
             "requiredCategories": ["Engineering Design", "Engineering Drawing"]},
        ],
    },
    {
        "id": "2",
        "name": "Mature Field Redevelopment",
        "description": "Injection-production relations, remaining oil and adjustment plans for high water-cut fields.",
        "updatedAt": "2024-03-15",
        "stages": [
            {"id": "s2-1", "name": "Production Diagnosis",
             "requiredCategories": ["Production Operations", "Monitoring Map", "Dashboard"]},
            {"id": "s2-2", "name": "Remaining Oil Study",
             "requiredCategories": ["Development Model", "3D Model", "Data Volume"]},
            {"id": "s2-3", "name": "Adjustment Plan",
             "requiredCategories": ["Engineering Design", "Surface Engineering"]},
        ],
    },
    {
        "id": "3",
        "name": "Surface Engineering Optimisation",
        "description": "Pipeline networks, gathering systems and inspection imagery for surface facility layout.",
        "updatedAt": "2024-02-10",
        "stages": [
            {"id": "s3-1", "name": "Topology Analysis",
             "requiredCategories": ["Surface Engineering", "Production Operations"]},
            {"id": "s3-2", "name": "Field Inspection Feedback",
             "requiredCategories": ["Inspection Imagery"]},
        ],
    },
]


def coerce_scenario(scenario: ScenarioInput) -> ScenarioDefinition:
    """
    Validate a scenario definition.

    Raises:
        InvalidArgumentError: If stages are missing or empty, or a stage's
            categories are not strings.
    """
    if isinstance(scenario, ScenarioDefinition):
        if not scenario.stages:
            raise InvalidArgumentError(f"Scenario {scenario.id!r} has no stages")
        return scenario

    if not isinstance(scenario, Mapping):
        raise InvalidArgumentError(f"Scenario must be a mapping, got {type(scenario).__name__}")
    if "stages" not in scenario:
        raise InvalidArgumentError("Scenario is missing 'stages'", {"scenario": scenario.get("id")})

    try:
        return ScenarioDefinition.model_validate(scenario)
    except ValidationError as e:
        raise InvalidArgumentError(
            f"Invalid scenario {scenario.get('id')!r}",
            {"errors": e.errors(include_url=False)},
        ) from e


def matches_object(asset: Asset, object_id: str) -> bool:
    """True when the asset sits on the object via oilfield, well or 5D object."""
    return (
        asset.oilfield == object_id
        or asset.well_id == object_id
        or asset.dimension_value(Dimension.OBJECT) == object_id
    )


def assets_for_object(assets: Sequence[Asset], object_id: str) -> List[Asset]:
    if not object_id:
        return []
    return [a for a in assets if matches_object(a, object_id)]


def related_assets(
    assets: Sequence[Asset],
    asset: Asset,
    limit: Optional[int] = RELATED_ASSET_LIMIT,
) -> List[Asset]:
    """
    Other assets from the same project or oilfield, in catalogue order.

    Empty project names and oilfields never count as a match.
    """
    related = [
        other for other in assets
        if other.id != asset.id and (
            (asset.project_name and other.project_name == asset.project_name)
            or (asset.oilfield and other.oilfield == asset.oilfield)
        )
    ]
    return related if limit is None else related[:limit]


def available_objects(assets: Iterable[Asset]) -> List[str]:
    """Every focal object an asset can be attached to, sorted."""
    objects = set()
    for asset in assets:
        if asset.oilfield:
            objects.add(asset.oilfield)
        if asset.well_id:
            objects.add(asset.well_id)
        obj = asset.dimension_value(Dimension.OBJECT)
        if obj:
            objects.add(obj)
    return sorted(objects)


def aggregate_by_scenario(
    assets: Sequence[Asset],
    scenario: ScenarioInput,
    focal_object_id: Optional[str],
) -> List[StageGroup]:
    """
    Group the focal object's assets into the scenario's stages.

    Returns an empty list when no focal object is selected. An unknown object
    yields every stage with no assets.

    Raises:
        InvalidArgumentError: If the scenario is malformed.
    """
    definition = coerce_scenario(scenario)
    if not focal_object_id:
        return []

    focal_assets = assets_for_object(assets, focal_object_id)
    groups = []
    for stage in definition.stages:
        required = set(stage.required_categories)
        groups.append(StageGroup(
            stage_name=stage.name,
            required_categories=list(stage.required_categories),
            assets=[a for a in focal_assets if a.category in required],
        ))

    logger.debug(
        "Scenario %s on %s: %d focal assets across %d stages",
        definition.id, focal_object_id, len(focal_assets), len(groups),
    )
    return groups


def spatial_distribution(
    assets: Iterable[Asset],
    physical_objects: Mapping[str, PhysicalObject],
) -> Dict[str, List[Asset]]:
    """
    Bucket assets by the physical object they are drawn on.

    A known well wins over the oilfield; assets on neither land in
    ``UNKNOWN_REGION``.
    """
    mapping: Dict[str, List[Asset]] = {}
    for asset in assets:
        if asset.well_id and asset.well_id in physical_objects:
            key = asset.well_id
        elif asset.oilfield in physical_objects:
            key = asset.oilfield
        else:
            key = UNKNOWN_REGION
        mapping.setdefault(key, []).append(asset)
    return mapping


class ScenarioLibrary:
    """Ordered, read-only collection of scenario definitions."""

    def __init__(self, scenarios: Optional[Iterable[ScenarioInput]] = None):
        source = DEFAULT_SCENARIOS if scenarios is None else scenarios
        self._scenarios: Dict[str, ScenarioDefinition] = {}
        for raw in source:
            scenario = coerce_scenario(raw)
            if scenario.id in self._scenarios:
                raise InvalidArgumentError(f"Duplicate scenario id: {scenario.id}")
            self._scenarios[scenario.id] = scenario

    @classmethod
    def from_yaml(cls, path: Path) -> "ScenarioLibrary":
        """
        Load ``scenarios:`` from a YAML file.

        Raises:
            CatalogLoadError: If the file is missing or unreadable.
            InvalidArgumentError: If a scenario is malformed.
        """
        path = Path(path)
        if not path.exists():
            raise CatalogLoadError(f"Scenario file not found: {path}", {"path": str(path)})
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise CatalogLoadError(f"Failed to parse scenarios {path}: {e}") from e

        scenarios = data.get("scenarios") if isinstance(data, dict) else data
        if not isinstance(scenarios, list):
            raise InvalidArgumentError(f"Scenario file must contain a 'scenarios' list: {path}")

        logger.info("Loaded %d scenarios from %s", len(scenarios), path)
        return cls(scenarios)

    def get(self, scenario_id: str) -> ScenarioDefinition:
        scenario = self._scenarios.get(scenario_id)
        if scenario is None:
            raise InvalidArgumentError(
                f"Unknown scenario: {scenario_id}",
                {"available": list(self._scenarios)},
            )
        return scenario

    def list(self) -> List[ScenarioDefinition]:
        return list(self._scenarios.values())

    def to_yaml(self, path: Path) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        payload = {"scenarios": [s.model_dump(mode="json", by_alias=True) for s in self.list()]}
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(payload, f, sort_keys=False, allow_unicode=True, default_flow_style=False)
        return path

    def __len__(self) -> int:
        return len(self._scenarios)

    def __contains__(self, scenario_id: str) -> bool:
        return scenario_id in self._scenarios
