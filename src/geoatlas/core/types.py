"""
Core type definitions for geoatlas.

Assets arrive in the camelCase shape used by the catalogue front end, so every
model accepts both the alias (``coordinates5D``, ``wellId``) and the
snake_case field name.
"""

from enum import StrEnum
from operator import attrgetter
from typing import Callable, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Dimension(StrEnum):
    """The five semantic coordinate axes, in canonical order."""
    OBJECT = "object"
    BUSINESS = "business"
    WORK = "work"
    PROFESSION = "profession"
    PROCESS = "process"


class GraphicType(StrEnum):
    STATIC = "static"
    DYNAMIC = "dynamic"
    DATAVOLUME = "datavolume"


class SpatialRelation(StrEnum):
    AERIAL = "aerial"
    SURFACE = "surface"
    GROUND = "ground"
    UNDERWATER = "underwater"
    SUBSURFACE = "subsurface"


class AssetStatus(StrEnum):
    DRAFT = "draft"
    REVIEW = "review"
    PUBLISHED = "published"


class NodeType(StrEnum):
    """Categories of nodes in a derived asset graph."""
    ROOT = "root"
    OILFIELD = "oilfield"
    PROFESSION = "profession"
    ASSET = "asset"
    AXIS_HUB = "axis-hub"
    SEMANTIC_DIM = "semantic-dim"


class EdgeType(StrEnum):
    """Styling tag for edges. Traversal ignores it."""
    HIERARCHY = "hierarchy"
    SEMANTIC = "semantic"
    AXIS = "axis"


class HeatmapStrategy(StrEnum):
    """Scoring for heatmap cells other than the focus cell."""
    REFERENCE = "reference"
    COOCCURRENCE = "cooccurrence"


class Facet(StrEnum):
    """Categorical asset attributes usable as heatmap axes or search filters."""
    CATEGORY = "category"
    PROFESSION = "profession"
    OILFIELD = "oilfield"
    STAGE = "stage"
    GRAPHIC_TYPE = "graphic_type"
    SPATIAL_RELATION = "spatial_relation"
    WELL_ID = "well_id"
    STATUS = "status"


class Coordinates5D(BaseModel):
    """
    Semantic coordinate of an asset.

    An empty string means the asset is not mounted on that axis.
    """
    object: str = ""
    business: str = ""
    work: str = ""
    profession: str = ""
    process: str = ""

    model_config = ConfigDict(frozen=True)

    def value_of(self, dimension: Dimension) -> str:
        return _DIMENSION_ACCESSORS[dimension](self)

    def mounted(self) -> Dict[Dimension, str]:
        """Non-empty axes, in canonical dimension order."""
        result = {}
        for dimension in Dimension:
            value = self.value_of(dimension)
            if value:
                result[dimension] = value
        return result


_DIMENSION_ACCESSORS: Dict[Dimension, Callable[[Coordinates5D], str]] = {
    Dimension.OBJECT: attrgetter("object"),
    Dimension.BUSINESS: attrgetter("business"),
    Dimension.WORK: attrgetter("work"),
    Dimension.PROFESSION: attrgetter("profession"),
    Dimension.PROCESS: attrgetter("process"),
}


class Asset(BaseModel):
    """
    A catalogued geoscience graphic (map, section, well diagram, model).
    """
    id: str
    title: str = ""
    category: str = ""
    profession: str = ""
    oilfield: str = ""
    stage: str = ""
    graphic_type: Optional[GraphicType] = Field(default=None, alias="graphicType")
    spatial_relation: Optional[SpatialRelation] = Field(default=None, alias="spatialRelation")
    well_id: Optional[str] = Field(default=None, alias="wellId")
    layer: Optional[str] = None
    coordinates_5d: Optional[Coordinates5D] = Field(default=None, alias="coordinates5D")

    figure_note: Optional[str] = Field(default=None, alias="figureNote")
    tags: List[str] = Field(default_factory=list)
    version: str = ""
    status: AssetStatus = AssetStatus.DRAFT
    mbu_node: Optional[str] = Field(default=None, alias="mbuNode")

    format: Optional[str] = None
    source: Optional[str] = None
    creation_time: Optional[str] = Field(default=None, alias="creationTime")
    last_update: Optional[str] = Field(default=None, alias="lastUpdate")
    coordinate_system: Optional[str] = Field(default=None, alias="coordinateSystem")
    project_name: Optional[str] = Field(default=None, alias="projectName")
    thumbnail: Optional[str] = None

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    def dimension_value(self, dimension: Dimension) -> str:
        """Value on a semantic axis, or "" when unmounted."""
        if self.coordinates_5d is None:
            return ""
        return self.coordinates_5d.value_of(dimension)

    def facet_value(self, facet: Facet) -> str:
        value = _FACET_ACCESSORS[facet](self)
        return "" if value is None else str(value)

    def __hash__(self):
        return hash(self.id)

    def __eq__(self, other):
        if isinstance(other, Asset):
            return self.id == other.id
        return False


_FACET_ACCESSORS: Dict[Facet, Callable[[Asset], object]] = {
    Facet.CATEGORY: attrgetter("category"),
    Facet.PROFESSION: attrgetter("profession"),
    Facet.OILFIELD: attrgetter("oilfield"),
    Facet.STAGE: attrgetter("stage"),
    Facet.GRAPHIC_TYPE: attrgetter("graphic_type"),
    Facet.SPATIAL_RELATION: attrgetter("spatial_relation"),
    Facet.WELL_ID: attrgetter("well_id"),
    Facet.STATUS: attrgetter("status"),
}


class Position(BaseModel):
    x: float
    y: float

    model_config = ConfigDict(frozen=True)


class GraphNode(BaseModel):
    """
    Node of a derived graph.

    Ids are a deterministic function of node category and discriminator,
    so a selection survives rebuilds.
    """
    id: str
    type: NodeType
    label: str
    position: Position
    asset: Optional[Asset] = None

    model_config = ConfigDict(frozen=True)


class GraphEdge(BaseModel):
    source: str
    target: str
    type: EdgeType

    model_config = ConfigDict(frozen=True)

    def touches(self, node_id: str) -> bool:
        return self.source == node_id or self.target == node_id


class StageRule(BaseModel):
    id: str = ""
    name: str
    required_categories: List[str] = Field(default_factory=list, alias="requiredCategories")

    model_config = ConfigDict(populate_by_name=True)


class ScenarioDefinition(BaseModel):
    """
    Business-owned pipeline definition. Stage order is pipeline order.
    """
    id: str = ""
    name: str = ""
    description: str = ""
    stages: List[StageRule] = Field(min_length=1)
    updated_at: Optional[str] = Field(default=None, alias="updatedAt")

    model_config = ConfigDict(populate_by_name=True)


class StageGroup(BaseModel):
    stage_name: str
    required_categories: List[str]
    assets: List[Asset] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.assets


class HeatmapCell(BaseModel):
    facet_a_value: str
    facet_b_value: str
    intensity: int = Field(ge=0, le=100)


class HeatmapMatrix(BaseModel):
    """Complete facet_a_values x facet_b_values grid, row-major."""
    facet_a: Facet
    facet_b: Facet
    facet_a_values: List[str]
    facet_b_values: List[str]
    cells: List[HeatmapCell] = Field(default_factory=list)

    def intensity(self, a: str, b: str) -> int:
        for cell in self.cells:
            if cell.facet_a_value == a and cell.facet_b_value == b:
                return cell.intensity
        raise KeyError((a, b))

    def as_nested(self) -> Dict[str, Dict[str, int]]:
        nested: Dict[str, Dict[str, int]] = {a: {} for a in self.facet_a_values}
        for cell in self.cells:
            nested[cell.facet_a_value][cell.facet_b_value] = cell.intensity
        return nested


class PhysicalObject(BaseModel):
    """A field or well that assets can be located on."""
    name: str
    type: str = "field"
    lat: Optional[float] = None
    lon: Optional[float] = None
    parent: Optional[str] = None
