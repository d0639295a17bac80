"""
Faceted catalogue search and review queue.

Filters combine with AND across facets and OR within one facet. The stage
filter matches on containment because stage labels carry a keyword plus a
suffix ("Development Stage").
"""

from typing import Dict, Iterable, List, Sequence

from pydantic import BaseModel, Field

from ..core.types import Asset, AssetStatus, GraphicType, SpatialRelation

STAGE_KEYWORDS = ("Exploration", "Appraisal", "Development", "Production")


class AssetQuery(BaseModel):
    text: str = ""
    oilfield: List[str] = Field(default_factory=list)
    spatial_relation: List[SpatialRelation] = Field(default_factory=list)
    stage: List[str] = Field(default_factory=list)
    profession: List[str] = Field(default_factory=list)
    graphic_type: List[GraphicType] = Field(default_factory=list)
    published_only: bool = True

    def matches(self, asset: Asset) -> bool:
        if self.published_only and asset.status != AssetStatus.PUBLISHED:
            return False
        if self.oilfield and asset.oilfield not in self.oilfield:
            return False
        if self.spatial_relation and asset.spatial_relation not in self.spatial_relation:
            return False
        if self.profession and asset.profession not in self.profession:
            return False
        if self.graphic_type and (asset.graphic_type or GraphicType.STATIC) not in self.graphic_type:
            return False
        if self.stage and not any(s in asset.stage for s in self.stage):
            return False
        return self._matches_text(asset)

    def _matches_text(self, asset: Asset) -> bool:
        q = self.text.strip().lower()
        if not q:
            return True
        return (
            q in asset.title.lower()
            or any(q in tag.lower() for tag in asset.tags)
            or q in asset.oilfield.lower()
            or q in asset.profession.lower()
        )


def search_assets(assets: Iterable[Asset], query: AssetQuery) -> List[Asset]:
    return [a for a in assets if query.matches(a)]


def facet_counts(assets: Iterable[Asset], published_only: bool = True) -> Dict[str, Dict[str, int]]:
    """
    Per-facet value counts for the filter sidebar.

    Spatial relations, graphic types and stage keywords always report every
    bucket, zero or not.
    """
    counts: Dict[str, Dict[str, int]] = {
        "oilfield": {},
        "spatial_relation": {s.value: 0 for s in SpatialRelation},
        "stage": {k: 0 for k in STAGE_KEYWORDS},
        "profession": {},
        "graphic_type": {g.value: 0 for g in GraphicType},
    }

    for asset in assets:
        if published_only and asset.status != AssetStatus.PUBLISHED:
            continue
        counts["oilfield"][asset.oilfield] = counts["oilfield"].get(asset.oilfield, 0) + 1
        counts["profession"][asset.profession] = counts["profession"].get(asset.profession, 0) + 1
        if asset.spatial_relation:
            counts["spatial_relation"][asset.spatial_relation.value] += 1
        if asset.graphic_type:
            counts["graphic_type"][asset.graphic_type.value] += 1
        for keyword in STAGE_KEYWORDS:
            if keyword in asset.stage:
                counts["stage"][keyword] += 1

    return counts


def review_queue(assets: Sequence[Asset]) -> Dict[str, List[Asset]]:
    """Partition assets by review status, preserving catalogue order."""
    queue: Dict[str, List[Asset]] = {status.value: [] for status in AssetStatus}
    for asset in assets:
        queue[asset.status.value].append(asset)
    return queue
