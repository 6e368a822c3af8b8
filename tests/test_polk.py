import json
import os

import pytest
from bs4 import BeautifulSoup

from property_extractor.code_mapper import UnmappedCodeError
from property_extractor.counties.polk import (
    data_extractor,
    layout_extractor,
    owner_processor,
    structure_extractor,
    utility_extractor,
)
from property_extractor.counties.polk.page import extra_features, parse_buildings, property_id

STRAP = "252830000000011010"

PAGE = """
<html><body>
<a href="CamaDisplay.aspx?strap=252830000000011010">Parcel</a>
<h4>Parcel Information</h4>
<table>
  <tr><td>Property (DOR) Use Code</td><td>{use}</td></tr>
  <tr><td>Acreage</td><td>0.30</td></tr>
  <tr><td>Subdivision</td><td>LAKE HILLS</td></tr>
</table>
<h4>Owners</h4>
<table><tr><td>SMITH JOHN A 100%</td></tr></table>
<h4>Physical Street Address</h4>
<table><tr><td>Address</td><td>123 LAKE DR</td></tr></table>
<h4>Postal City and Zip</h4>
<table><tr><td>City</td><td>LAKELAND FL 33801</td></tr></table>
<h4>Mailing Address</h4>
<table><tr><td>Line 1</td><td>PO BOX 9</td></tr><tr><td>Line 2</td><td>LAKELAND FL 33802</td></tr></table>
<div id="saleHist"><table class="center">
  <tr class="header"><th>OR Book/Page</th><th>Date</th><th>Type Inst</th><th>V/I</th><th>Grantee</th><th>Price</th></tr>
  <tr><td><a href="https://example.com/deed/1234">1234/567</a></td><td>06/2015</td><td>W</td><td>I</td>
      <td>SMITH JOHN A</td><td>$250,000</td></tr>
  <tr><td>1000/20</td><td>03/2001</td><td>Q</td><td>V</td><td>DOE JANE</td><td>$90,000</td></tr>
</table></div>
<div id="bldngs">
  <div class="pagebreak">
    <h4>Building 1 <a>SINGLE FAMILY</a></h4>
    <div>
      <h4>Building Characteristics</h4>
      <b>Living Area:</b> 1,500<br>
      <b>Total Under Roof:</b> 2,100<br>
      <b>Actual Year Built:</b> 1990<br>
      <table>
        <tr><th>Element</th><th>Units</th><th>Information</th></tr>
        <tr><td>BEDROOM</td><td>3</td><td></td></tr>
        <tr><td>FULL BATH</td><td>2</td><td></td></tr>
        <tr><td>HALF BATH</td><td>1</td><td></td></tr>
        <tr><td>STORY HEIGHT INFO ONLY</td><td></td><td>1 STORY</td></tr>
        <tr><td>SUBSTRUCT</td><td></td><td>CONTINUOUS WALL</td></tr>
        <tr><td>FRAME / CONST TYPE</td><td></td><td>MASONRY</td></tr>
        <tr><td>EXTERIOR WALL</td><td></td><td>STUCCO</td></tr>
        <tr><td>ROOF STRUCTURE</td><td></td><td>GABLE/HIP SHINGLE</td></tr>
        <tr><td>CNTRL HEATING / AC</td><td>Y</td><td></td></tr>
      </table>
    </div>
    <h4>Building Subareas</h4>
    <table>
      <tr><th>Code Description</th><th>Heated</th><th>Total</th></tr>
      <tr><td>BAS BASE AREA</td><td>Y</td><td>1,500</td></tr>
      <tr><td>FGR FINISHED GARAGE</td><td>N</td><td>440</td></tr>
      <tr><td>FSP SCREENED PORCH UNFINISHED</td><td>N</td><td>160</td></tr>
      <tr><td colspan="2">Total</td><td>2,100</td></tr>
    </table>
  </div>
</div>
<h3>Extra Features</h3>
<table>
  <tr><th>Code</th><th>Description</th></tr>
  <tr><td>RP1</td><td>POOL RESIDENTIAL</td></tr>
  <tr><td>FN1</td><td>FENCE CHAIN LINK</td></tr>
</table>
</body></html>
"""


def read(data_dir, name):
    with open(os.path.join(data_dir, name)) as f:
        return json.load(f)


@pytest.fixture
def property_dir(tmp_path, monkeypatch):
    monkeypatch.delenv("EXTRACTOR_STRICT_CODES", raising=False)

    def write(use="0100 - SFR UP TO 2.49 AC"):
        (tmp_path / "input.html").write_text(PAGE.replace("{use}", use), encoding="utf-8")
        (tmp_path / "property_seed.json").write_text(json.dumps({"parcel_id": STRAP, "request_identifier": STRAP}))
        (tmp_path / "unnormalized_address.json").write_text(json.dumps({"county_jurisdiction": "Polk"}))
        return tmp_path
    return write


def run_all(base_dir):
    for script in (owner_processor, structure_extractor, utility_extractor, layout_extractor):
        script.main(base_dir=base_dir)
    return data_extractor.main(base_dir=base_dir)


def test_page_building_sections():
    soup = BeautifulSoup(PAGE.replace("{use}", ""), "html.parser")
    assert property_id(soup) == STRAP
    (building,) = parse_buildings(soup)
    assert building["characteristics"]["living_area"] == "1,500"
    assert building["elements"]["BEDROOM"]["units"] == "3"
    # the colspan totals row is not a subarea
    assert [row["code_description"] for row in building["subareas"]] == [
        "BAS BASE AREA", "FGR FINISHED GARAGE", "FSP SCREENED PORCH UNFINISHED",
    ]
    assert [row["description"] for row in extra_features(soup)] == ["POOL RESIDENTIAL", "FENCE CHAIN LINK"]


def test_producers_key_by_building_number(property_dir):
    base_dir = str(property_dir())
    key = f"property_{STRAP}"

    structure = read(os.path.dirname(structure_extractor.main(base_dir=base_dir)), "structure_data.json")[key]["1"]
    assert structure["exterior_wall_material_primary"] == "Stucco"
    assert structure["primary_framing_material"] == "Concrete Block"
    assert structure["foundation_type"] == "Stem Wall"
    assert (structure["roof_design_type"], structure["roof_material_type"]) == ("Gable", "Shingle")
    assert structure["roof_covering_material"] == "Architectural Asphalt Shingle"

    utility = read(os.path.dirname(utility_extractor.main(base_dir=base_dir)), "utilities_data.json")[key]["1"]
    assert (utility["heating_system_type"], utility["cooling_system_type"]) == ("Central", "CentralAir")
    assert utility["solar_panel_present"] is False

    layouts = read(os.path.dirname(layout_extractor.main(base_dir=base_dir)), "layout_data.json")[key]["layouts"]
    assert [(layout["space_type"], layout["building_number"]) for layout in layouts] == [
        ("Building", 1),
        ("Bedroom", 1), ("Bedroom", 1), ("Bedroom", 1),
        ("Full Bathroom", 1), ("Full Bathroom", 1),
        ("Half Bathroom / Powder Room", 1),
        ("Floor", 1),
        ("Attached Garage", 1),
        ("Screened Porch", 1),
        ("Outdoor Pool", None),
    ]
    assert (layouts[0]["livable_area_sq_ft"], layouts[0]["total_area_sq_ft"]) == (1500, 2100)
    assert layouts[9]["is_finished"] is False
    assert layouts[8]["total_area_sq_ft"] == 440


def test_extraction_links_owners_sales_and_layouts(property_dir):
    data_dir = run_all(str(property_dir()))
    files = set(os.listdir(data_dir))

    prop = read(data_dir, "property.json")
    assert prop["property_type"] == "Building"
    assert prop["property_structure_built_year"] == 1990
    assert read(data_dir, "person_1.json")["first_name"] == "John"
    assert read(data_dir, "person_2.json")["first_name"] == "Jane"
    assert read(data_dir, "sales_history_1.json")["ownership_transfer_date"] == "2015-06-01"
    assert read(data_dir, "deed_1.json")["deed_type"] == "Warranty Deed"
    assert read(data_dir, "layout_11.json")["space_type"] == "Outdoor Pool"
    assert {
        # grantees match the owner files by name
        "relationship_sales_history_1_has_person_1.json",
        "relationship_sales_history_2_has_person_2.json",
        "relationship_person_1_has_mailing_address.json",
        "relationship_property_has_layout_1.json",
        "relationship_property_has_layout_11.json",
        "relationship_layout_1_has_layout_10.json",
        "relationship_layout_1_has_structure_1.json",
        "relationship_layout_1_has_utility_1.json",
    } <= files
    assert "relationship_sales_history_1_has_person_2.json" not in files


def test_unknown_use_code_is_fatal_by_default(property_dir):
    base_dir = str(property_dir(use="9999 - MYSTERY"))
    with pytest.raises(UnmappedCodeError):
        data_extractor.main(base_dir=base_dir)
    data_dir = data_extractor.main(base_dir=base_dir, strict=False)
    assert os.path.exists(os.path.join(data_dir, "error_property_type.json"))
