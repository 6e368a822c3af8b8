import json
import os

import pytest

from property_extractor.records import (
    EntityRegistry,
    LayoutTree,
    OutputWriter,
    apply_unit_invariant,
    link_to_buildings,
    lot_type_for_acres,
    make_layout,
    normalize_sidecar,
    property_id_candidates,
    resolve_property_entry,
    write_property_type_error,
)
from property_extractor.relationships import RelationshipWriter


def read(data_dir, path):
    with open(os.path.join(data_dir, path)) as f:
        return json.load(f)


@pytest.mark.parametrize("acres,expected", [
    (None, "LessThanOrEqualToOneQuarterAcre"),
    (0.1, "LessThanOrEqualToOneQuarterAcre"),
    (0.25, "LessThanOrEqualToOneQuarterAcre"),
    (0.2501, "GreaterThanOneQuarterAcre"),
    (3, "GreaterThanOneQuarterAcre"),
])
def test_lot_type_boundary(acres, expected):
    assert lot_type_for_acres(acres) == expected


def test_land_parcel_has_no_units():
    record = apply_unit_invariant({"property_type": "LandParcel", "number_of_units": 1, "number_of_units_type": "One"})
    assert record["number_of_units"] is None
    assert record["number_of_units_type"] is None


def test_building_keeps_units():
    record = apply_unit_invariant({"property_type": "Building", "number_of_units": 2, "number_of_units_type": "Two"})
    assert record["number_of_units"] == 2


@pytest.mark.parametrize("value,expected", [
    (None, []),
    ({}, []),
    ([], []),
    ([{"a": 1}, "junk"], [{"data": {"a": 1}, "building_index": None}]),
    (
        {"buildings": [{"building_index": "2", "structure": {"a": 1}}, {"building_index": 1, "b": 2}]},
        [
            {"data": {"a": 1}, "building_index": 2},
            {"data": {"building_index": 1, "b": 2}, "building_index": 1},
        ],
    ),
    ({"structures": [{"a": 1}]}, [{"data": {"a": 1}, "building_index": None}]),
    ({"roof": "Shingle"}, [{"data": {"roof": "Shingle"}, "building_index": None}]),
])
def test_normalize_sidecar_shapes(value, expected):
    assert normalize_sidecar(value, "structure") == expected


def test_normalize_sidecar_custom_plural():
    assert normalize_sidecar({"utilities": [{"a": 1}]}, "utility", "utilities") == [
        {"data": {"a": 1}, "building_index": None}
    ]


def test_property_entry_resolution():
    candidates = property_id_candidates(" 01-02-03 ", "0102")
    assert candidates == ["01-02-03", "10203", "0102", "102"]
    data = {"property_10203": {"owners": []}}
    assert resolve_property_entry(data, candidates) == {"owners": []}
    assert resolve_property_entry(None, candidates) is None


def test_output_writer_numbers_per_prefix(tmp_path):
    writer = OutputWriter(str(tmp_path / "data"))
    assert writer.write_next("sales_history", {}) == "./sales_history_1.json"
    assert writer.write_next("sales_history", {}) == "./sales_history_2.json"
    assert writer.write_next("deed", {}) == "./deed_1.json"
    assert writer.write("property", {"a": 1}) == "./property.json"


def test_registry_writes_each_identity_once(tmp_path):
    data_dir = str(tmp_path)
    writer = OutputWriter(data_dir)
    registry = EntityRegistry(writer, request_identifier="R1", source_http_request={"method": "GET", "url": "u"})
    paths = registry.owners([
        {"type": "person", "first_name": "John", "middle_name": None, "last_name": "Smith"},
        {"type": "person", "first_name": "JOHN", "middle_name": None, "last_name": "SMITH"},
        {"type": "company", "name": "Acme LLC"},
    ])
    assert paths == ["./person_1.json", "./company_1.json"]
    person = read(data_dir, "person_1.json")
    assert person["first_name"] == "John"
    assert person["request_identifier"] == "R1"
    assert person["us_citizenship_status"] is None
    assert registry.company("ACME LLC") == "./company_1.json"


def test_property_type_error_file(tmp_path):
    writer = OutputWriter(str(tmp_path))
    path = write_property_type_error(writer, "999")
    assert read(str(tmp_path), path) == {
        "type": "error",
        "message": "Unable to map property type from property use code.",
        "path": "property.property_type",
    }


def test_layout_tree_numbers_children_per_building(tmp_path):
    writer = OutputWriter(str(tmp_path))
    tree = LayoutTree()
    tree.add_building(1, make_layout("Building"))
    tree.add_building(2, make_layout("Building"))
    tree.attach(1, make_layout("Bedroom"))
    tree.attach(1, make_layout("Bedroom"))
    tree.attach(2, make_layout("Kitchen", floor_level="2nd Floor"))
    tree.attach(9, make_layout("Full Bathroom"))

    buildings, standalone = tree.write(writer)
    assert standalone == []
    assert [b["path"] for b in buildings] == ["./layout_1.json", "./layout_2.json"]
    assert len(buildings[0]["child_paths"]) == 3

    bedroom = read(str(tmp_path), buildings[0]["child_paths"][1])
    assert bedroom["space_index"] == 2
    assert bedroom["space_type_index"] == "1.2"
    assert bedroom["floor_level"] == "1st Floor"
    kitchen = read(str(tmp_path), buildings[1]["child_paths"][0])
    assert kitchen["space_type_index"] == "2.1"
    assert kitchen["floor_level"] == "2nd Floor"


def test_layout_tree_without_buildings_keeps_rooms_standalone(tmp_path):
    tree = LayoutTree()
    tree.attach(None, make_layout("Bedroom"))
    buildings, standalone = tree.write(OutputWriter(str(tmp_path)))
    assert buildings == []
    assert standalone == ["./layout_1.json"]


def test_link_to_buildings_exact_then_leftovers_then_property(tmp_path):
    relationships = RelationshipWriter(str(tmp_path))
    buildings = [{"index": 1, "path": "./layout_1.json"}, {"index": 2, "path": "./layout_2.json"}]
    items = [
        {"path": "./structure_1.json", "building_index": 2},
        {"path": "./structure_2.json", "building_index": None},
        {"path": "./structure_3.json", "building_index": None},
    ]
    link_to_buildings(relationships, buildings, items, "./property.json")
    assert relationships.written == [
        "relationship_layout_2_has_structure_1.json",
        "relationship_layout_1_has_structure_2.json",
        "relationship_property_has_structure_3.json",
    ]
