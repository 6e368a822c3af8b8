import json
import os

import pytest
from bs4 import BeautifulSoup

from property_extractor.code_mapper import UnmappedCodeError
from property_extractor.counties.hillsborough import (
    codes,
    data_extractor,
    layout_extractor,
    owner_processor,
    structure_extractor,
    utility_extractor,
)
from property_extractor.counties.hillsborough.page import (
    parse_buildings,
    parse_county_valuation,
    parse_sales,
    section_township_range,
)
from property_extractor.records import AddressNotFoundError

PAGE = """
<html><body>
<h4 data-bind="html: publicOwner">SMITH JOHN<br>ACME PROPERTIES INC</h4>
<table>
  <tr><td data-bind="text: displayStrap">192818ZZZ00000100010</td></tr>
  <tr><td>Property Use:</td><td>{use}</td></tr>
  <tr><td>Subdivision:</td><td>OAK PARK</td></tr>
  <tr><td>PIN:</td><td>U-19-28-18-ZZZ-000001-00010.0</td></tr>
</table>
<h5>Site Address</h5><p>123 MAIN ST TAMPA, FL 33602</p>
<h5>Mailing Address</h5><p>PO BOX 1 TAMPA FL 33601</p>
<table><tbody data-bind="foreach: fullLegal"><tr><td>1</td><td>LOT 1 BLOCK 2 OAK PARK</td></tr></tbody></table>
<div class="value-summary-years"><span data-bind="text: displayedTaxYear">2024 Tax Year</span></div>
<h4 class="section-header">Value Summary</h4>
<div><table><tbody>
  <tr><td>County</td><td>$300,000</td><td>$250,000</td><td>$50,000</td><td>$200,000</td></tr>
</tbody></table></div>
<h4>Sales History</h4>
<div><table><tbody>
  <tr><td>12345 / 67</td><td><a href="https://example.com/doc/1">2019001234</a></td><td>6</td><td>2019</td>
      <td>WD</td><td>Q</td><td>I</td><td>$250,000</td></tr>
</tbody></table></div>
<table class="permitinfo"><tbody>
  <tr><td>BLD</td><td>P-1</td><td>REROOF</td><td>01/05/2020</td></tr>
</tbody></table>
<div data-bind="foreach: buildings()">
  <h4 class="section-header">Building 1</h4>
  <div class="section-wrap">
    <table class="report-table"><tbody>
      <tr><td>Type</td><td>01</td><td>SINGLE FAMILY</td></tr>
      <tr><td>Class</td><td>C</td><td>MASONRY CONCRETE BLOCK</td></tr>
      <tr><td>Exterior Wall</td><td>04</td><td>CB STUCCO</td></tr>
      <tr><td>Roof Structure</td><td>03</td><td>GABLE OR HIP</td></tr>
      <tr><td>Roof Cover</td><td>03</td><td>ASPHALT SHINGLE</td></tr>
      <tr><td>Interior Flooring</td><td>08</td><td>CARPET</td></tr>
      <tr><td>Interior Flooring</td><td>12</td><td>CERAMIC TILE</td></tr>
      <tr><td>Heat/Ac</td><td>2</td><td>CENTRAL</td></tr>
      <tr><td>Bedrooms</td><td>3.0</td><td></td></tr>
      <tr><td>Bathrooms</td><td>2.5</td><td></td></tr>
      <tr><td>Stories</td><td>1.0</td><td></td></tr>
    </tbody></table>
    <table class="data-table"><tfoot><tr><th>Total</th><th>2,400</th><th>1,800</th></tr></tfoot></table>
  </div>
</div>
<div data-bind="visible: landLines().length > 0"><table><tbody>
  <tr><td data-bind="text: publicLandType">AC ACREAGE</td><td data-bind="text: publicUnits">0.30</td>
      <td data-bind="text: frontage">80</td><td data-bind="text: depth">120</td></tr>
</tbody></table></div>
</body></html>
"""


def read(data_dir, name):
    with open(os.path.join(data_dir, name)) as f:
        return json.load(f)


@pytest.fixture
def property_dir(tmp_path, monkeypatch):
    monkeypatch.delenv("EXTRACTOR_STRICT_CODES", raising=False)

    def write(use="0100 SINGLE FAMILY R", page=PAGE):
        (tmp_path / "input.html").write_text(page.replace("{use}", use), encoding="utf-8")
        (tmp_path / "property_seed.json").write_text(json.dumps({"parcel_id": "A1", "request_identifier": "A1"}))
        (tmp_path / "unnormalized_address.json").write_text(json.dumps({"county_jurisdiction": "Hillsborough"}))
        return tmp_path
    return write


def test_use_code_lookup_ignores_separators_and_falls_back_to_code():
    assert codes.map_property_use("0100 SINGLE FAMILY R")["structure_form"] == "SingleFamilyDetached"
    assert codes.map_property_use("0100-SINGLE FAMILY (R)")["property_type"] == "Building"
    assert codes.map_property_use("0100 SOMETHING NEW")["property_type"] == "Building"
    assert codes.map_deed_type("QC") == "Quitclaim Deed"
    assert codes.map_deed_type("ZZ") == "Miscellaneous"


def test_section_township_range_from_pin():
    assert section_township_range("U-19-28-18-ZZZ-000001-00010.0") == {
        "section": "19", "township": "28", "range": "18",
    }
    assert section_township_range(None) == {"section": None, "township": None, "range": None}


def test_page_sales_and_valuation():
    soup = BeautifulSoup(PAGE.replace("{use}", ""), "html.parser")
    assert parse_county_valuation(soup) == {"year": 2024, "market": 300000, "assessed": 250000, "taxable": 200000}
    sale = parse_sales(soup)[0]
    assert sale["date"] == "2019-06-01"
    assert (sale["book"], sale["page"], sale["deed_code"]) == ("12345", "67", "WD")
    assert sale["url"] == "https://example.com/doc/1"


def test_extraction_writes_linked_records(property_dir):
    base_dir = str(property_dir())
    owner_processor.main(base_dir=base_dir)
    data_dir = data_extractor.main(base_dir=base_dir)
    files = set(os.listdir(data_dir))

    prop = read(data_dir, "property.json")
    assert prop["parcel_identifier"] == "U-19-28-18-ZZZ-000001-00010.0"
    assert prop["property_legal_description_text"] == "LOT 1 BLOCK 2 OAK PARK"
    address = read(data_dir, "address.json")
    assert (address["section"], address["township"], address["range"]) == ("19", "28", "18")
    assert read(data_dir, "deed_1.json")["deed_type"] == "Warranty Deed"
    assert read(data_dir, "lot.json")["lot_type"] == "GreaterThanOneQuarterAcre"
    assert read(data_dir, "person_1.json")["last_name"] == "Smith"
    assert read(data_dir, "company_1.json")["name"] == "ACME PROPERTIES INC"
    assert {
        "relationship_sales_history_1_has_person_1.json",
        "relationship_sales_history_1_has_company_1.json",
        "relationship_person_1_has_mailing_address.json",
        "relationship_deed_1_has_file_1.json",
        "relationship_property_has_property_improvement_1.json",
        "relationship_property_has_lot.json",
    } <= files


def test_unknown_use_code_is_soft_by_default(property_dir):
    base_dir = str(property_dir(use="XXXX MYSTERY"))
    data_dir = data_extractor.main(base_dir=base_dir)
    assert os.path.exists(os.path.join(data_dir, "error_property_type.json"))
    with pytest.raises(UnmappedCodeError):
        data_extractor.main(base_dir=base_dir, strict=True)


def test_page_buildings_characteristics_and_areas():
    soup = BeautifulSoup(PAGE.replace("{use}", ""), "html.parser")
    (building,) = parse_buildings(soup)
    assert building["building_number"] == 1
    assert (building["gross_area"], building["heated_area"]) == (2400.0, 1800.0)
    assert [entry["description"] for entry in building["characteristics"]["interior_flooring"]] == [
        "CARPET", "CERAMIC TILE",
    ]


def test_structure_utility_and_layout_sidecars(property_dir):
    base_dir = str(property_dir())
    key = "property_192818ZZZ00000100010"

    (structure,) = read(os.path.dirname(structure_extractor.main(base_dir=base_dir)),
                        "structure_data.json")[key]["structures"]
    assert structure["building_number"] == 1
    assert structure["exterior_wall_material_primary"] == "Stucco"
    assert structure["primary_framing_material"] == "Concrete Block"
    assert structure["roof_design_type"] == "Combination"
    assert structure["roof_covering_material"] == "Architectural Asphalt Shingle"
    assert structure["roof_material_type"] == "Shingle"
    assert (structure["flooring_material_primary"], structure["flooring_material_secondary"]) == (
        "Carpet", "Ceramic Tile",
    )
    assert structure["finished_base_area"] == 1800
    assert structure["attachment_type"] == "Detached"

    (utility,) = read(os.path.dirname(utility_extractor.main(base_dir=base_dir)),
                      "utilities_data.json")[key]["utilities"]
    assert (utility["cooling_system_type"], utility["heating_system_type"]) == ("CentralAir", "Central")
    assert utility["hvac_condensing_unit_present"] == "Yes"
    assert utility["hvac_system_configuration"] == "Other"

    layouts = read(os.path.dirname(layout_extractor.main(base_dir=base_dir)), "layout_data.json")[key]["layouts"]
    assert [layout["space_type"] for layout in layouts] == [
        "Building", "Bedroom", "Bedroom", "Bedroom", "Full Bathroom", "Full Bathroom",
        "Half Bathroom / Powder Room",
    ]
    assert layouts[0]["total_area_sq_ft"] == 2400.0


def test_sidecars_link_to_the_building_layout(property_dir):
    base_dir = str(property_dir())
    for script in (owner_processor, structure_extractor, utility_extractor, layout_extractor):
        script.main(base_dir=base_dir)
    data_dir = data_extractor.main(base_dir=base_dir)
    files = set(os.listdir(data_dir))

    building = read(data_dir, "layout_1.json")
    assert building["space_type"] == "Building"
    assert "building_number" not in building
    assert read(data_dir, "structure_1.json")["roof_design_type"] == "Combination"
    assert {
        "relationship_property_has_layout_1.json",
        "relationship_layout_1_has_layout_2.json",
        "relationship_layout_1_has_layout_7.json",
        "relationship_layout_1_has_structure_1.json",
        "relationship_layout_1_has_utility_1.json",
    } <= files


def test_missing_site_address_raises(property_dir):
    page = PAGE.replace("<h5>Site Address</h5><p>123 MAIN ST TAMPA, FL 33602</p>", "")
    base_dir = str(property_dir(page=page))
    with pytest.raises(AddressNotFoundError):
        data_extractor.main(base_dir=base_dir)


def test_no_mailing_block_writes_no_mailing_address(property_dir):
    page = PAGE.replace("<h5>Mailing Address</h5><p>PO BOX 1 TAMPA FL 33601</p>", "")
    base_dir = str(property_dir(page=page))
    owner_processor.main(base_dir=base_dir)
    data_dir = data_extractor.main(base_dir=base_dir)
    files = os.listdir(data_dir)

    assert "person_1.json" in files
    assert "mailing_address.json" not in files
    assert not [name for name in files if "mailing_address" in name]
