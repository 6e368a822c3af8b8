import json

from property_extractor.counties.polk.geometry import (
    geometry_record,
    parse_polygon,
    read_geometries,
    split_geometry,
)

RING = [[-81.9, 28.0], [-81.8, 28.0], [-81.8, 28.1], [-81.9, 28.0]]


def test_parse_polygon_by_nesting_depth():
    assert parse_polygon(json.dumps(RING)) == {"type": "Polygon", "coordinates": [RING]}
    assert parse_polygon(json.dumps([RING])) == {"type": "Polygon", "coordinates": [RING]}
    assert parse_polygon(json.dumps([[RING]]))["type"] == "MultiPolygon"
    assert parse_polygon(json.dumps({"type": "Polygon", "coordinates": [RING]}))["type"] == "Polygon"


def test_parse_polygon_rejects_garbage():
    assert parse_polygon("") is None
    assert parse_polygon("not json") is None
    assert parse_polygon(json.dumps({"type": "Point", "coordinates": [1, 2]})) is None


def test_multipolygon_splits_into_one_geometry_per_member():
    record = {"latitude": "28.05", "longitude": "", "parcel_polygon": json.dumps([[RING], [RING]])}
    geometries = split_geometry(record)
    assert len(geometries) == 2
    assert geometries[0]["latitude"] == 28.05
    assert geometries[0]["longitude"] is None
    assert geometries[1]["polygon"]["type"] == "Polygon"


def test_read_csv_and_build_record(tmp_path):
    csv_path = tmp_path / "input.csv"
    csv_path.write_text(
        "latitude,longitude,parcel_polygon\n" + '28.05,-81.85,"' + json.dumps([RING]).replace('"', '""') + '"\n'
    )
    geometries = read_geometries(str(csv_path))
    assert len(geometries) == 1
    record = geometry_record(geometries[0])
    assert record["latitude"] == 28.05
    assert record["polygon"][0] == {"longitude": -81.9, "latitude": 28.0}
    assert len(record["polygon"]) == 4
