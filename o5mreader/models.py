"""
Pydantic models for GeoJSON export of decoded O5M data
"""

from typing import List, Optional, Dict, Any, Literal, Union
from pydantic import BaseModel, Field


# ============================================================
# GeoJSON Types
# ============================================================

class GeoJSONPoint(BaseModel):
    type: Literal["Point"] = "Point"
    coordinates: List[float]  # [longitude, latitude]


class GeoJSONLineString(BaseModel):
    type: Literal["LineString"] = "LineString"
    coordinates: List[List[float]]  # [[lon, lat], ...]


class GeoJSONPolygon(BaseModel):
    type: Literal["Polygon"] = "Polygon"
    coordinates: List[List[List[float]]]  # [[[lon, lat], ...]]


# ============================================================
# Features
# ============================================================

class Feature(BaseModel):
    type: Literal["Feature"] = "Feature"
    id: str  # "node_<id>" or "way_<id>"
    geometry: Union[GeoJSONPoint, GeoJSONLineString, GeoJSONPolygon]
    properties: Dict[str, Any] = Field(default_factory=dict)


class FeatureCollection(BaseModel):
    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: List[Feature] = Field(default_factory=list)
    bbox: Optional[List[float]] = None  # [min_lon, min_lat, max_lon, max_lat]
