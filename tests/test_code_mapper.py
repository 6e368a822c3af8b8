import re

import pytest

from property_extractor.code_mapper import (
    CodeMapper,
    UnmappedCodeError,
    compile_rules,
    digits_key,
    first_match,
    property_use_record,
)
from property_extractor.counties.alachua import codes as alachua_codes
from property_extractor.counties.seminole import codes as seminole_codes


def test_every_alachua_code_has_a_mapping():
    missing = [code for code in alachua_codes.PROPERTY_USE_CODES if code not in alachua_codes.PROPERTY_USE_CODE_MAP]
    assert missing == []


def test_strict_mapper_raises_on_unknown_code():
    mapper = CodeMapper({"01": "Residential"}, strict=True)
    with pytest.raises(UnmappedCodeError) as excinfo:
        mapper.map("77")
    assert str(excinfo.value) == "Unknown enum value 77."
    assert excinfo.value.path == "property.property_type"


def test_soft_mapper_returns_default():
    mapper = CodeMapper({"01": "Residential"}, default="Unknown")
    assert mapper.map("77") == "Unknown"
    assert mapper.map("01") == "Residential"


def test_per_call_strict_overrides_mapper_policy():
    mapper = CodeMapper({"01": "Residential"}, strict=True, default="Unknown")
    assert mapper.map("77", strict=False) == "Unknown"


def test_candidates_then_prefix_then_rules():
    mapper = CodeMapper(
        {"0100": "A", "2000": "B"},
        normalize=digits_key,
        candidates=lambda key: [key + "0"],
        prefix_lengths=(2,),
        rules=[(r"CONDO", "C")],
    )
    assert mapper.find("010") == "A"
    assert mapper.find("2099") == "B"
    assert mapper.find("CONDO UNIT") == "C"
    assert "CONDO UNIT" in mapper
    assert mapper.find("") is None


def test_first_match_accepts_regex_and_callable():
    rules = compile_rules([
        (r"BRICK", "Brick"),
        (lambda text: text.startswith("WD"), "Wood"),
        (re.compile(r"STUCCO"), "Stucco"),
    ])
    assert first_match(rules, "CB BRICK") == "Brick"
    assert first_match(rules, "WD FRAME") == "Wood"
    assert first_match(rules, "STUCCO") == "Stucco"
    assert first_match(rules, "GLASS", default="Other") == "Other"
    assert first_match(rules, "", default="Other") == "Other"


def test_property_use_record_for_none_is_all_null():
    record = property_use_record(None)
    assert set(record) == {
        "ownership_estate_type", "build_status", "structure_form", "property_usage_type", "property_type",
    }
    assert all(value is None for value in record.values())


def test_alachua_soft_policy_uses_defaults():
    record = alachua_codes.map_property_use("12345")
    assert record["property_type"] == "Building"
    assert record["build_status"] == "Improved"


def test_alachua_deed_type_with_spaces_and_default():
    assert alachua_codes.map_deed_type("Warranty Deed") == "Warranty Deed"
    assert alachua_codes.map_deed_type("QUIT CLAIM DEED") == "Quitclaim Deed"
    assert alachua_codes.map_deed_type("CERTIFICATE OF TITLE") == "Miscellaneous"
    assert alachua_codes.map_deed_type(None) == "Miscellaneous"


def test_seminole_strict_policy_raises():
    with pytest.raises(UnmappedCodeError):
        seminole_codes.map_property_use("ABC")
    assert seminole_codes.map_property_use("ABC", strict=False)["property_type"] is None
