import pytest

from property_extractor.owners import (
    classify_owner_line,
    classify_owner_polk,
    dedupe_owners,
    get_owner_strategy,
    owner_key,
    parse_owner_lines,
    parse_owner_records_seminole,
    parse_owners_from_text,
)


def names(owners):
    return [
        (o["first_name"], o["middle_name"], o["last_name"]) if o["type"] == "person" else o["name"]
        for o in owners
    ]


def test_shared_surname_is_carried_to_second_owner():
    result = parse_owners_from_text("SMITH JOHN & MARY")
    assert names(result["owners"]) == [("John", None, "Smith"), ("Mary", None, "Smith")]
    assert result["invalids"] == []


def test_middle_initials_on_both_owners():
    result = parse_owners_from_text("DOE JOHN A & JANE B")
    assert names(result["owners"]) == [("John", "A", "Doe"), ("Jane", "B", "Doe")]


def test_company_keyword_yields_single_company():
    result = parse_owners_from_text("ACME HOLDINGS LLC")
    assert result["owners"] == [{"type": "company", "name": "Acme Holdings Llc"}]
    assert result["invalids"] == []


def test_comma_separates_unrelated_owners():
    result = parse_owners_from_text("SMITH JOHN, FIRST NATIONAL BANK")
    assert [o["type"] for o in result["owners"]] == ["person", "company"]


def test_empty_input_gives_nothing():
    assert parse_owners_from_text(None) == {"owners": [], "invalids": []}
    assert parse_owners_from_text("") == {"owners": [], "invalids": []}


def test_leading_asterisk_is_stripped():
    result = parse_owners_from_text("*SMITH JOHN")
    assert names(result["owners"]) == [("John", None, "Smith")]


def test_lone_token_without_surname_is_invalid():
    result = parse_owners_from_text("MADONNA")
    assert result["owners"] == []
    assert result["invalids"] == [{"raw": "MADONNA", "reason": "ambiguous_or_incomplete_person_name"}]


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("SMITH JOHN ROBERT MARY", [("John", "Robert", "Smith"), ("Mary", None, "Smith")]),
        ("SMITH JOHN & MARY A", [("John", None, "Smith"), ("Mary", "A", "Smith")]),
        (
            "SMITH JOHN A MARY B & SUE",
            [("John", "A", "Smith"), ("Mary", "B", "Smith"), ("Sue", None, "Smith")],
        ),
    ],
)
def test_shared_surname_heuristics(raw, expected):
    result = parse_owners_from_text(raw)
    assert names(result["owners"]) == expected
    assert result["invalids"] == []


def test_fragment_without_name_tokens_is_reported():
    assert parse_owners_from_text("123") == {
        "owners": [],
        "invalids": [{"raw": "123", "reason": "ambiguous_or_incomplete_person_name"}],
    }
    result = parse_owners_from_text("SMITH JOHN & 123")
    assert names(result["owners"]) == [("John", None, "Smith")]
    assert result["invalids"] == [{"raw": "123", "reason": "ambiguous_or_incomplete_person_name"}]


def test_repeated_owner_is_deduplicated():
    result = parse_owners_from_text("SMITH JOHN, SMITH JOHN")
    assert names(result["owners"]) == [("John", None, "Smith")]


def test_dedupe_is_case_insensitive():
    owners = [
        {"type": "person", "first_name": "John", "middle_name": None, "last_name": "Smith"},
        {"type": "person", "first_name": "JOHN", "middle_name": None, "last_name": "SMITH"},
        {"type": "company", "name": "Acme  LLC"},
        {"type": "company", "name": "acme llc"},
    ]
    assert len(dedupe_owners(owners)) == 2


def test_owner_key_shapes():
    assert owner_key({"type": "company", "name": " Acme LLC "}) == "c:acme llc"
    assert owner_key({"type": "person", "first_name": "Jane", "last_name": "Doe"}) == "p:jane||doe"
    assert owner_key({"type": "person"}) is None


def test_hillsborough_prefix_and_suffix():
    result = classify_owner_line("Dr. Jane Q Public Jr")
    person = result["owners"][0]
    assert person["prefix_name"] == "Dr."
    assert person["suffix_name"] == "Jr."
    assert (person["first_name"], person["middle_name"], person["last_name"]) == ("Jane", "Q", "Public")


def test_hillsborough_all_caps_is_last_first():
    result = classify_owner_line("SMITH JOHN")
    assert names(result["owners"]) == [("John", None, "Smith")]


def test_hillsborough_invalid_reasons():
    assert classify_owner_line("")["invalids"][0]["reason"] == "empty_string"
    assert classify_owner_line("CHER")["invalids"][0]["reason"] == "unclassified_name"


def test_hillsborough_lines_split_on_semicolon():
    result = parse_owner_lines("SMITH JOHN; ACME PROPERTIES INC")
    assert [o["type"] for o in result["owners"]] == ["person", "company"]


def test_polk_comma_form_and_company():
    result = classify_owner_polk("DOE, JANE & ACME LLC")
    assert names(result["owners"]) == [("Jane", None, "Doe"), "ACME LLC"]


def test_polk_rejects_digits():
    result = classify_owner_polk("JOHN 3RD")
    assert result["owners"] == []
    assert result["invalids"][0]["reason"] == "name contains digits"


def test_seminole_strings_and_objects_are_proper_cased():
    result = parse_owner_records_seminole([
        "JOHN A SMITH & MARY SMITH",
        {"firstName": "JANE", "lastName": "DOE"},
        {"entityName": "SUNRISE HOLDINGS LLC"},
    ])
    assert names(result["owners"]) == [
        ("John", "A", "Smith"),
        ("Mary", None, "Smith"),
        ("Jane", None, "Doe"),
        "SUNRISE HOLDINGS LLC",
    ]


def test_seminole_empty_string_is_invalid():
    result = parse_owner_records_seminole([""])
    assert result["owners"] == []
    assert result["invalids"][0]["reason"] == "empty_or_null"


def test_strategy_lookup_by_county():
    assert get_owner_strategy("Alachua") is parse_owners_from_text
    assert get_owner_strategy("seminole") is parse_owner_records_seminole
