"""
Decoded O5M entities

Data classes for the boundary, node and way records and the Dataset that
collects them.
"""

from typing import List, Dict, Optional, Tuple
from dataclasses import dataclass, field

COORD_SCALE = 10_000_000


def to_degrees(raw: int) -> float:
    """Convert a raw 100-nanodegree integer to degrees"""
    return raw / COORD_SCALE


@dataclass
class Boundary:
    """Bounding box in degrees"""
    min_lat: float
    min_lon: float
    max_lat: float
    max_lon: float

    def as_tuple(self) -> Tuple[float, float, float, float]:
        """(min_lon, min_lat, max_lon, max_lat), the order used on the wire"""
        return (self.min_lon, self.min_lat, self.max_lon, self.max_lat)

    def contains(self, lat: float, lon: float) -> bool:
        return self.min_lat <= lat <= self.max_lat and self.min_lon <= lon <= self.max_lon


@dataclass
class Author:
    """Author uid (as decimal text) and display name"""
    id: str
    name: str


@dataclass
class Header:
    """Version metadata; only version is set when version == 0"""
    version: int = 0
    timestamp: int = 0
    changeset: int = 0
    author: Optional[Author] = None


@dataclass
class Node:
    """Represents an OSM node (point)"""
    id: int
    header: Header
    lat: float
    lon: float
    tags: Dict[str, str] = field(default_factory=dict)


@dataclass
class Way:
    """Represents an OSM way (ordered node references)"""
    id: int
    header: Header
    refs: List[int] = field(default_factory=list)
    tags: Dict[str, str] = field(default_factory=dict)


@dataclass
class Dataset:
    """
    Result of decoding one O5M stream

    `success` is False when a record failed to decode; everything gathered
    before the failure stays available together with the `error` itself.
    """
    success: bool = False
    boundary: Optional[Boundary] = None
    nodes: Dict[int, Node] = field(default_factory=dict)
    ways: List[Way] = field(default_factory=list)
    string_table: List[str] = field(default_factory=list)
    error: Optional[Exception] = None
    bytes_consumed: int = 0
