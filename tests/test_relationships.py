import json
import os

from property_extractor.relationships import (
    RelationshipWriter,
    make_relationship_filename,
    relationship_base_name,
)


def test_base_name_strips_dot_slash_and_extension():
    assert relationship_base_name("./sales_history_1.json") == "sales_history_1"
    assert relationship_base_name("person_2") == "person_2"
    assert relationship_base_name("") is None


def test_filename_is_derived_from_both_endpoints():
    assert (
        make_relationship_filename("./sales_history_1.json", "./person_2.json")
        == "relationship_sales_history_1_has_person_2.json"
    )
    assert make_relationship_filename("./property.json", None) is None


def test_writes_ipld_links(tmp_path):
    writer = RelationshipWriter(str(tmp_path))
    filename = writer.write("./property.json", "./address.json")
    with open(os.path.join(tmp_path, filename)) as f:
        assert json.load(f) == {"from": {"/": "./property.json"}, "to": {"/": "./address.json"}}


def test_same_pair_written_once(tmp_path):
    writer = RelationshipWriter(str(tmp_path))
    writer.write("./property.json", "./lot.json")
    writer.write("./property.json", "./lot.json")
    writer.write_many("./property.json", ["./lot.json", "./address.json"])
    assert writer.written == [
        "relationship_property_has_lot.json",
        "relationship_property_has_address.json",
    ]
    assert sorted(os.listdir(tmp_path)) == sorted(writer.written)


def test_empty_endpoint_is_skipped(tmp_path):
    writer = RelationshipWriter(str(tmp_path))
    assert writer.write("./property.json", "") is None
    assert os.listdir(tmp_path) == []
