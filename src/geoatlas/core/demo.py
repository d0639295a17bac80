"""
Demo Manager - Scaffolds a sample catalogue.

Writes a small asset catalogue and scenario file that exercise every
derived view: shared oilfields and professions for the object-centric graph,
partially mounted 5D coordinates for the dimension-centric graph, and
categories that fill some scenario stages and leave others empty.
"""

import logging
from pathlib import Path
from typing import Dict, List

from ..analysis.scenario import ScenarioLibrary
from .storage.json_file import write_assets
from .types import Asset, PhysicalObject

logger = logging.getLogger(__name__)


DEMO_ASSETS: List[Dict] = [
    {
        "id": "1",
        "title": "Saertu North-1 Structural Interpretation Map",
        "category": "Exploration Map",
        "profession": "Geology",
        "oilfield": "Saertu",
        "spatialRelation": "subsurface",
        "stage": "Development Stage",
        "lastUpdate": "2023-10-24",
        "version": "V2.1",
        "status": "published",
        "tags": ["structure", "3D interpretation", "authoritative"],
        "format": "TIFF",
        "creationTime": "2023-09-12",
        "graphicType": "static",
        "figureNote": "Top-surface structure of the main pay zone; the principal fault strikes NNE with 20-50 m throw.",
        "coordinates5D": {
            "object": "North-1 Structural Belt",
            "business": "Capacity Build",
            "work": "Plan Compilation",
            "profession": "Geological Engineering",
            "process": "Archived",
        },
    },
    {
        "id": "2",
        "title": "JZ9-3 Injection-Production Balance Dynamics V3",
        "category": "Monitoring Map",
        "profession": "Reservoir Engineering",
        "oilfield": "JZ9-3",
        "wellId": "JZ9-3-101",
        "spatialRelation": "underwater",
        "stage": "Production Stage",
        "lastUpdate": "2023-11-02",
        "version": "V3.0",
        "status": "review",
        "tags": ["injection balance", "dynamic analysis"],
        "format": "DWG / SVG",
        "graphicType": "dynamic",
        "coordinates5D": {
            "object": "JZ9-3-101 Well Group",
            "business": "Reservoir Management",
            "work": "Dynamic Monitoring",
            "profession": "Reservoir Development",
            "process": "Expert Review",
        },
    },
    {
        "id": "3",
        "title": "Shunbei-5 Fracture Network Model",
        "category": "Development Model",
        "profession": "Geophysics",
        "oilfield": "Shunbei-5",
        "spatialRelation": "subsurface",
        "stage": "Appraisal Stage",
        "lastUpdate": "2023-11-15",
        "version": "V1.5",
        "status": "draft",
        "tags": ["fracture modelling", "numerical simulation"],
        "format": "DAT",
        "graphicType": "datavolume",
        "coordinates5D": {
            "object": "Shunbei-5 Deep Reservoir",
            "business": "Reservoir Evaluation",
            "work": "Numerical Modelling",
            "profession": "Geophysics",
            "process": "Preliminary Interpretation",
        },
    },
    {
        "id": "4",
        "title": "Saertu Gathering Network Layout",
        "category": "Surface Engineering",
        "profession": "Surface Engineering",
        "oilfield": "Saertu",
        "spatialRelation": "ground",
        "stage": "Production Stage",
        "lastUpdate": "2023-12-01",
        "version": "V1.0",
        "status": "published",
        "tags": ["pipeline", "gathering"],
        "graphicType": "static",
        "coordinates5D": {
            "object": "North-1 Structural Belt",
            "business": "Capacity Build",
            "work": "",
            "profession": "Surface Engineering",
            "process": "Archived",
        },
    },
    {
        "id": "5",
        "title": "Well SE-12 Completion Diagram",
        "category": "Engineering Design",
        "profession": "Drilling Engineering",
        "oilfield": "Saertu",
        "wellId": "SE-12",
        "spatialRelation": "subsurface",
        "stage": "Development Stage",
        "lastUpdate": "2024-01-08",
        "version": "V1.2",
        "status": "published",
        "tags": ["completion", "wellbore"],
        "graphicType": "static",
        "coordinates5D": {
            "object": "SE-12",
            "business": "",
            "work": "Well Design",
            "profession": "Drilling Engineering",
            "process": "",
        },
    },
    {
        "id": "6",
        "title": "Weiyuan-Changning Seismic Section Line 7",
        "category": "Geophysical Result",
        "profession": "Geophysics",
        "oilfield": "Weiyuan-Changning",
        "spatialRelation": "subsurface",
        "stage": "Exploration Stage",
        "lastUpdate": "2024-02-19",
        "version": "V1.0",
        "status": "published",
        "tags": ["seismic", "shale gas"],
        "graphicType": "static",
    },
    {
        "id": "7",
        "title": "Halahatang Production Dashboard",
        "category": "Dashboard",
        "profession": "Production Engineering",
        "oilfield": "Halahatang",
        "spatialRelation": "surface",
        "stage": "Production Stage",
        "lastUpdate": "2024-03-02",
        "version": "V0.9",
        "status": "review",
        "tags": ["real-time", "KPI"],
        "graphicType": "dynamic",
        "coordinates5D": {
            "object": "",
            "business": "",
            "work": "",
            "profession": "",
            "process": "",
        },
    },
    {
        "id": "8",
        "title": "Saertu Drone Inspection Mosaic",
        "category": "Inspection Imagery",
        "profession": "Surface Engineering",
        "oilfield": "Saertu",
        "spatialRelation": "aerial",
        "stage": "Production Stage",
        "lastUpdate": "2024-03-11",
        "version": "V1.0",
        "status": "published",
        "tags": ["UAV", "inspection"],
        "graphicType": "static",
        "coordinates5D": {
            "object": "North-1 Structural Belt",
            "business": "Facility Management",
            "work": "Site Inspection",
            "profession": "Surface Engineering",
            "process": "Archived",
        },
    },
]

DEMO_PHYSICAL_OBJECTS: List[Dict] = [
    {"name": "Saertu", "type": "field", "lat": 46.58, "lon": 124.92},
    {"name": "JZ9-3", "type": "field", "lat": 40.25, "lon": 121.05},
    {"name": "Shunbei-5", "type": "field", "lat": 40.88, "lon": 83.45},
    {"name": "Weiyuan-Changning", "type": "field", "lat": 29.55, "lon": 104.65},
    {"name": "Halahatang", "type": "field", "lat": 41.25, "lon": 83.9},
    {"name": "JZ9-3-101", "type": "well", "lat": 40.26, "lon": 121.06, "parent": "JZ9-3"},
    {"name": "SE-12", "type": "well", "lat": 46.6, "lon": 124.95, "parent": "Saertu"},
]


def demo_assets() -> List[Asset]:
    return [Asset.model_validate(raw) for raw in DEMO_ASSETS]


def demo_physical_objects() -> Dict[str, PhysicalObject]:
    objects = [PhysicalObject.model_validate(raw) for raw in DEMO_PHYSICAL_OBJECTS]
    return {obj.name: obj for obj in objects}


class DemoManager:
    """
    Manages the creation of the demo catalogue.
    """

    def __init__(self, root_dir: Path):
        self.root_dir = root_dir

    def provision(self, assets_path: Path, scenarios_path: Path) -> Path:
        """
        Write the demo catalogue and scenarios.

        Returns:
            Path: The written assets file.
        """
        target = self.root_dir / assets_path
        write_assets(demo_assets(), target)
        ScenarioLibrary().to_yaml(self.root_dir / scenarios_path)
        logger.info("Provisioned demo catalogue at %s", target)
        return target
