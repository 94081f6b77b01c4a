import pytest
from shapely.geometry import LineString, Point, Polygon

from o5mreader import decode_bytes, node_geometry, to_feature_collection, way_coordinates, way_geometry
from o5mreader.codec.entities import Header, Node, Way
from o5m_builder import boundary, node, string_pair, stream, way


def make_nodes():
    return {
        1: Node(1, Header(), lat=0.0, lon=0.0),
        2: Node(2, Header(), lat=0.0, lon=1.0),
        3: Node(3, Header(), lat=1.0, lon=1.0, tags={"natural": "tree"}),
    }


def test_way_coordinates_skip_missing_nodes():
    coords = way_coordinates(Way(10, Header(), refs=[1, 99, 2]), make_nodes())
    assert coords == [[0.0, 0.0], [1.0, 0.0]]


def test_closed_way_is_polygon():
    geometry = way_geometry(Way(10, Header(), refs=[1, 2, 3, 1]), make_nodes())
    assert isinstance(geometry, Polygon)
    assert geometry.area == pytest.approx(0.5)


def test_open_way_is_linestring():
    geometry = way_geometry(Way(10, Header(), refs=[1, 2, 3]), make_nodes())
    assert isinstance(geometry, LineString)
    assert geometry.length == pytest.approx(2.0)


def test_way_without_geometry():
    assert way_geometry(Way(10, Header(), refs=[1]), make_nodes()) is None
    assert way_geometry(Way(11, Header(), refs=[7, 8]), make_nodes()) is None


def test_node_geometry():
    point = node_geometry(make_nodes()[3])
    assert isinstance(point, Point)
    assert (point.x, point.y) == (1.0, 1.0)


def test_feature_collection():
    dataset = decode_bytes(stream(
        boundary(0, 0, 10000000, 10000000),
        node(1, 0, 0),
        node(1, 10000000, 0),
        node(1, 0, 10000000, tags=string_pair("natural", "tree")),
        way(1, [1, 1, 1, -2], tags=string_pair("building", "yes")),
        way(1, [0, 1]),
        way(1, [40]),
    ))
    collection = to_feature_collection(dataset)
    assert collection.bbox == [0.0, 0.0, 1.0, 1.0]
    assert [f.id for f in collection.features] == ["node_3", "way_1", "way_2"]

    tree, building, line = collection.features
    assert tree.geometry.type == "Point"
    assert tree.properties["osm_tags"] == {"natural": "tree"}
    assert building.geometry.type == "Polygon"
    assert building.geometry.coordinates[0][0] == building.geometry.coordinates[0][-1]
    assert building.properties == {"osm_type": "way", "osm_id": 1, "osm_tags": {"building": "yes"}}
    assert line.geometry.type == "LineString"
    assert line.geometry.coordinates == [[0.0, 0.0], [1.0, 0.0]]


def test_feature_collection_all_nodes():
    dataset = decode_bytes(stream(node(1, 0, 0), node(1, 0, 0)))
    collection = to_feature_collection(dataset, tagged_nodes_only=False)
    assert len(collection.features) == 2
    assert collection.bbox is None
    assert collection.model_dump()["type"] == "FeatureCollection"
