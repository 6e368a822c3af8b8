import json
import os

from property_extractor.data_group import build_county_data_group, relationship_type
from property_extractor.relationships import RelationshipWriter


def test_relationship_type_strips_numbers():
    assert relationship_type("relationship_sales_history_2_has_person_1.json") == "sales_history_has_person"
    assert relationship_type("relationship_property_has_address.json") == "property_has_address"
    assert relationship_type("property.json") is None


def test_single_link_is_object_and_several_are_a_list(tmp_path):
    data_dir = str(tmp_path)
    relationships = RelationshipWriter(data_dir)
    relationships.write("./property.json", "./address.json")
    relationships.write("./sales_history_1.json", "./person_1.json")
    relationships.write("./sales_history_2.json", "./person_1.json")

    group = build_county_data_group(data_dir)
    assert group["label"] == "County"
    assert group["relationships"]["property_has_address"] == {"/": "./relationship_property_has_address.json"}
    assert group["relationships"]["sales_history_has_person"] == [
        {"/": "./relationship_sales_history_1_has_person_1.json"},
        {"/": "./relationship_sales_history_2_has_person_1.json"},
    ]
    with open(os.path.join(data_dir, "county_data_group.json")) as f:
        assert json.load(f) == group
