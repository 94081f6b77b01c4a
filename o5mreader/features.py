"""
Geometry and GeoJSON helpers for decoded datasets

Ways only carry node ids; these helpers look the nodes up to build
coordinates, shapely geometries and GeoJSON features.
"""

from typing import Dict, List, Optional, Union
from loguru import logger
from shapely.geometry import LineString, Point, Polygon

from .codec import Dataset, Node, Way
from .models import Feature, FeatureCollection, GeoJSONLineString, GeoJSONPoint, GeoJSONPolygon


def way_coordinates(way: Way, nodes: Dict[int, Node]) -> List[List[float]]:
    """
    Get way coordinates as [lon, lat] list

    References to nodes missing from `nodes` are skipped.
    """
    return [[nodes[ref].lon, nodes[ref].lat] for ref in way.refs if ref in nodes]


def node_geometry(node: Node) -> Point:
    return Point(node.lon, node.lat)


def way_geometry(way: Way, nodes: Dict[int, Node]) -> Optional[Union[LineString, Polygon]]:
    """
    Build a shapely geometry for a way

    Returns:
        Polygon for a closed ring of at least 4 coordinates, LineString for
        2 or more coordinates, None otherwise
    """
    coords = way_coordinates(way, nodes)
    if len(coords) >= 4 and coords[0] == coords[-1]:
        return Polygon(coords)
    if len(coords) >= 2:
        return LineString(coords)
    return None


def node_feature(node: Node) -> Feature:
    return Feature(
        id=f"node_{node.id}",
        geometry=GeoJSONPoint(coordinates=[node.lon, node.lat]),
        properties={"osm_type": "node", "osm_id": node.id, "osm_tags": dict(node.tags)}
    )


def way_feature(way: Way, nodes: Dict[int, Node]) -> Optional[Feature]:
    """GeoJSON feature for a way, or None if it has fewer than 2 known nodes"""
    geometry = way_geometry(way, nodes)
    if geometry is None:
        return None
    if isinstance(geometry, Polygon):
        geojson = GeoJSONPolygon(coordinates=[[list(c) for c in geometry.exterior.coords]])
    else:
        geojson = GeoJSONLineString(coordinates=[list(c) for c in geometry.coords])
    return Feature(
        id=f"way_{way.id}",
        geometry=geojson,
        properties={"osm_type": "way", "osm_id": way.id, "osm_tags": dict(way.tags)}
    )


def to_feature_collection(dataset: Dataset, tagged_nodes_only: bool = True) -> FeatureCollection:
    """
    Export a dataset as a GeoJSON FeatureCollection

    Args:
        dataset: Decoded dataset
        tagged_nodes_only: Leave out untagged nodes (plain way vertices)

    Returns:
        FeatureCollection with node features first, then way features
    """
    features = [
        node_feature(node)
        for node in dataset.nodes.values()
        if node.tags or not tagged_nodes_only
    ]

    skipped = 0
    for way in dataset.ways:
        feature = way_feature(way, dataset.nodes)
        if feature is None:
            skipped += 1
            continue
        features.append(feature)
    if skipped:
        logger.debug(f"Skipped {skipped} ways with fewer than 2 resolvable nodes")

    bbox = list(dataset.boundary.as_tuple()) if dataset.boundary else None
    return FeatureCollection(features=features, bbox=bbox)
