import json
import os

import pytest

from property_extractor.code_mapper import UnmappedCodeError
from property_extractor.counties.seminole import (
    codes,
    data_extractor,
    layout_extractor,
    owner_processor,
    structure_extractor,
    utility_extractor,
)
from property_extractor.counties.seminole.page import (
    building_number_of,
    load_input,
    parse_address_components,
    parse_year_tokens,
    to_iso_date,
    to_number,
)

PRODUCERS = (owner_processor, structure_extractor, utility_extractor, layout_extractor)


def read(path):
    with open(path) as f:
        return json.load(f)


def run_pipeline(base_dir, strict=None):
    for module in PRODUCERS:
        module.main(base_dir=str(base_dir))
    return data_extractor.main(base_dir=str(base_dir), strict=strict)


def test_four_digit_code_falls_back_to_two_digit_prefix():
    assert codes.map_property_use("0100")["structure_form"] == "SingleFamilyDetached"
    assert codes.map_property_use("0103")["structure_form"] == "TownhouseRowhouse"
    assert codes.map_property_use("1")["property_type"] == "Building"
    assert codes.map_property_use("00")["property_type"] == "LandParcel"


def test_deed_type_description_then_code_then_miscellaneous():
    assert codes.map_deed_type({"deedDescription": "WARRANTY DEED"}) == "Warranty Deed"
    assert codes.map_deed_type({"deedDescription": "CORRECTIVE SPECIAL WARRANTY DEED"}) == "Special Warranty Deed"
    assert codes.map_deed_type({"deedType": "QCD"}) == "Quitclaim Deed"
    assert codes.map_deed_type({"deedDescription": "ODD DEED"}) == "Miscellaneous"
    assert codes.map_deed_type({"deedDescription": "AGREEMENT"}) is None


def test_sale_type_codes():
    assert codes.map_sale_type("SQ") == "TypicallyMotivated"
    assert codes.map_sale_type("UQ") is None
    assert codes.map_sale_type("FD") == "ReoPostForeclosureSale"
    assert codes.map_sale_type("ZZ") == "TypicallyMotivated"
    assert codes.map_sale_type("") is None


def test_floor_and_space_normalization():
    assert codes.normalize_floor_level(2) == "2nd Floor"
    assert codes.normalize_floor_level("LEVEL 3") == "3rd Floor"
    assert codes.normalize_floor_level("second floor") == "2nd Floor"
    assert codes.normalize_floor_level(7) is None
    assert codes.normalize_space_type("bedroom") == "Bedroom"
    assert codes.normalize_space_type("Garage") == "Attached Garage"
    assert codes.normalize_space_type("Ballroom") is None


def test_lot_and_improvement_mapping():
    assert codes.map_lot_type("FRONT FOOT", 0.3) == "GreaterThanOneQuarterAcre"
    assert codes.map_lot_type("PAVED ROAD FRONTAGE", None) == "PavedRoad"
    assert codes.map_lot_type(None, None) is None
    assert codes.map_improvement_status("07") == "Completed"
    assert codes.map_improvement_status("03") is None
    assert codes.map_improvement_type("", "A") == "ResidentialConstruction"


def test_address_components():
    parts = parse_address_components("123 N MAIN ST, SANFORD FL 32771-1234")
    assert parts["street_number"] == "123"
    assert parts["street_pre_directional_text"] == "N"
    assert parts["street_name"] == "MAIN"
    assert parts["street_suffix_type"] == "St"
    assert parts["city_name"] == "SANFORD"
    assert parts["state_code"] == "FL"
    assert parts["postal_code"] == "32771"
    assert parts["plus_four_postal_code"] == "1234"
    assert parse_address_components("") is None


def test_value_helpers():
    assert to_number("12.0") == 12
    assert to_number(True) is None
    assert to_number("nan") is None
    assert to_iso_date("2019-05-03T00:00:00") == "2019-05-03"
    assert to_iso_date("05/03/2019") is None
    assert parse_year_tokens("1985 1999") == (1985, 1999)
    assert parse_year_tokens(None) == (None, None)
    assert building_number_of({"bldgNo": "BLDG 2"}) == 2
    assert building_number_of({}, default=1) == 1


def test_load_input_requires_json(tmp_path):
    path = tmp_path / "input.html"
    path.write_text("<html><pre>  </pre></html>")
    with pytest.raises(ValueError):
        load_input(str(path))


def test_owner_processor_current_owners_and_attributes(seminole_dir):
    out_path = owner_processor.main(base_dir=str(seminole_dir))
    entry = read(out_path)["property_R123"]
    current = entry["owners_by_date"]["current"]
    assert [(o["first_name"], o["middle_name"], o["last_name"]) for o in current] == [
        ("John", "A", "Smith"),
        ("Mary", None, "Smith"),
    ]
    assert entry["owner_attributes"]["p:john|a|smith"]["ownership_percentage"] == 50
    assert entry["invalid_owners"] == []


def test_dated_owner_groups_sorted_before_current(seminole_parcel):
    seminole_parcel["ownerHistory"] = [
        {"ownerName": "ACME HOLDINGS LLC", "saleDate": "2010-04-01"},
        {"ownerName": "JANE DOE", "saleDate": "03/15/1999"},
    ]
    owners_by_date, _ = owner_processor.build_owners_by_date(seminole_parcel)
    assert list(owners_by_date) == ["1999-03-15", "2010-04-01", "current"]
    assert owners_by_date["2010-04-01"] == [{"type": "company", "name": "ACME HOLDINGS LLC"}]


def test_structure_from_building(seminole_parcel):
    building = structure_extractor.build_structure_data(seminole_parcel)["buildings"][0]
    structure = building["structure"]
    assert building["building_index"] == 1
    assert structure["exterior_wall_material_primary"] == "Stucco"
    assert structure["exterior_wall_material_secondary"] == "Brick Accent"
    assert structure["primary_framing_material"] == "Concrete Block"
    assert structure["attachment_type"] == "Detached"
    assert structure["unfinished_base_area"] == 600


def test_utility_availability(seminole_parcel):
    utility = utility_extractor.build_utility(seminole_parcel)
    assert utility["public_utility_type"] == "WaterAvailable"
    assert utility["sewer_type"] == "Public"
    seminole_parcel["waterServiceArea"] = ""
    seminole_parcel["sewerServiceArea"] = None
    assert utility_extractor.build_utility(seminole_parcel)["public_utility_type"] == "ElectricityAvailable"


def test_layouts_for_building(seminole_parcel):
    layouts = layout_extractor.build_layout_data(seminole_parcel)["layouts"]
    space_types = [layout["space_type"] for layout in layouts]
    assert space_types[0] == "Building"
    assert space_types.count("Bedroom") == 3
    assert space_types.count("Full Bathroom") == 2
    assert space_types.count("Half Bathroom / Powder Room") == 1
    assert "Attached Garage" in space_types
    assert all(layout["building_number"] == 1 for layout in layouts)


def test_vacant_parcel_has_no_layouts(seminole_parcel):
    seminole_parcel["buildingDetails"] = []
    seminole_parcel["dor"] = "00"
    assert layout_extractor.build_layout_data(seminole_parcel) == {"layouts": []}


def test_full_pipeline_writes_linked_records(seminole_dir):
    data_dir = run_pipeline(seminole_dir)
    files = set(os.listdir(data_dir))

    prop = read(os.path.join(data_dir, "property.json"))
    assert prop["parcel_identifier"] == "2520305AA00000010"
    assert prop["property_type"] == "Building"
    assert prop["property_structure_built_year"] == 1995
    assert prop["property_effective_built_year"] == 2001
    assert prop["livable_floor_area"] == "1800"
    assert prop["request_identifier"] == "REQ-1"

    address = read(os.path.join(data_dir, "address.json"))
    assert (address["street_number"], address["street_name"], address["city_name"]) == ("123", "MAIN", "SANFORD")
    assert address["county_name"] == "Seminole"
    assert address["latitude"] == 28.8

    assert read(os.path.join(data_dir, "sales_history_1.json"))["ownership_transfer_date"] == "2001-02-03"
    assert read(os.path.join(data_dir, "sales_history_1.json"))["sale_type"] is None
    assert read(os.path.join(data_dir, "deed_1.json"))["deed_type"] == "Quitclaim Deed"
    deed_2 = read(os.path.join(data_dir, "deed_2.json"))
    assert (deed_2["deed_type"], deed_2["book"], deed_2["page"]) == ("Warranty Deed", "8500", "12")

    tax = read(os.path.join(data_dir, "tax_2024.json"))
    assert tax["property_assessed_value_amount"] == 250000
    assert tax["yearly_tax_amount"] == 4200.5

    assert read(os.path.join(data_dir, "lot.json"))["lot_type"] == "LessThanOrEqualToOneQuarterAcre"
    assert read(os.path.join(data_dir, "flood_storm_information.json"))["flood_insurance_required"] is False
    assert read(os.path.join(data_dir, "file_1.json"))["file_format"] == "jpeg"
    assert read(os.path.join(data_dir, "property_improvement_1.json"))["improvement_status"] == "Completed"

    expected = {
        "relationship_property_has_address.json",
        "relationship_property_has_lot.json",
        "relationship_property_has_property_improvement_1.json",
        "relationship_property_has_flood_storm_information.json",
        "relationship_sales_history_1_has_deed_1.json",
        "relationship_sales_history_2_has_deed_2.json",
        "relationship_sales_history_2_has_person_1.json",
        "relationship_sales_history_2_has_person_2.json",
        "relationship_person_1_has_mailing_address.json",
        "relationship_property_has_layout_1.json",
        "relationship_layout_1_has_layout_2.json",
        "relationship_layout_1_has_structure_1.json",
        "relationship_layout_1_has_utility_1.json",
    }
    assert expected <= files
    assert "relationship_sales_history_1_has_person_1.json" not in files
    assert "error_property_type.json" not in files


def test_unknown_code_is_fatal_in_strict_mode(seminole_dir, seminole_parcel, write_parcel):
    seminole_parcel["dor"] = "ABC"
    write_parcel(seminole_parcel)
    with pytest.raises(UnmappedCodeError):
        data_extractor.main(base_dir=str(seminole_dir))


def test_unknown_code_writes_error_file_in_soft_mode(seminole_dir, seminole_parcel, write_parcel, monkeypatch):
    seminole_parcel["dor"] = "ABC"
    write_parcel(seminole_parcel)
    monkeypatch.setenv("EXTRACTOR_STRICT_CODES", "soft")
    data_dir = data_extractor.main(base_dir=str(seminole_dir))
    error = read(os.path.join(data_dir, "error_property_type.json"))
    assert error["path"] == "property.property_type"
    assert read(os.path.join(data_dir, "property.json"))["property_type"] is None
