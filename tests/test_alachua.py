import json
import os

import pytest
from bs4 import BeautifulSoup

from property_extractor.counties.alachua import (
    data_extractor,
    layout_extractor,
    owner_processor,
    structure_extractor,
)
from property_extractor.counties.alachua.page import (
    parse_building_summaries,
    parse_sales,
    parse_summary,
    property_id,
)

SUMMARY_ROW = (
    '<tr><th><strong>{label}</strong></th><td><div id="ctlBodyPane_ctl03_ctl01_dynamicSummaryData_'
    'rptrDynamicColumns_{column}_pnlSingleValue"><span>{value}</span></div></td></tr>'
)

SUMMARY_ROWS = "\n".join(
    SUMMARY_ROW.format(label=label, column=column, value=value)
    for label, column, value in (
        ("Parcel ID", "ctl00", "06013-001-000"),
        ("Prop ID", "ctl01", "12345"),
        ("Location Address", "ctl02", "123 NW 1ST AVE"),
        ("", "ctl03", "GAINESVILLE 32601"),
        ("Property Use Code", "ctl04", "{use}"),
        ("Subdivision", "ctl06", "OAK PARK"),
        ("Brief Tax Description", "ctl07", "LOT 1 OAK PARK PB A-1"),
        ("Sec/Twp/Rng", "ctl09", "01-09-19"),
        ("Acres", "ctl11", "0.21"),
    )
)

BUILDING = "ctlBodyPane_ctl10_ctl01_lstBuildings_ctl00"

PAGE = f"""
<html><body>
<section id="ctlBodyPane_ctl03_mSection"><header><div class="title">Parcel Summary</div></header>
<div id="ctlBodyPane_ctl03_ctl01_dynamicSummaryData_divSummary"><table>
{SUMMARY_ROWS}
</table></div>
</section>
<section id="ctlBodyPane_ctl02_mSection"><header><div class="title">Owner Information</div></header>
<span id="ctlBodyPane_ctl02_ctl01_rptOwner_ctl00_sprOwnerName1_lnkUpmSearchLinkSuppressed_lnkSearch">SMITH JOHN &amp; MARY</span>
<span id="ctlBodyPane_ctl02_ctl01_rptOwner_ctl00_lblOwnerAddress">PO BOX 1<br>GAINESVILLE FL 32601</span>
</section>
<section id="ctlBodyPane_ctl10_mSection"><header><div class="title">Building Information</div></header>
<div id="{BUILDING}_dynamicBuildingDataLeftColumn_divSummary"><table>
  <tr><th><strong>Type</strong></th><td><span>SINGLE FAMILY</span></td></tr>
  <tr><th><strong>Total Area</strong></th><td><span>2,000</span></td></tr>
  <tr><th><strong>Heated Area</strong></th><td><span>1,600</span></td></tr>
  <tr><th><strong>Exterior Walls</strong></th><td><span>CB STUCCO; FACE BRICK</span></td></tr>
  <tr><th><strong>Interior Walls</strong></th><td><span>DRYWALL</span></td></tr>
  <tr><th><strong>Floor Cover</strong></th><td><span>CARPET/CERAMIC TILE</span></td></tr>
  <tr><th><strong>Frame</strong></th><td><span>MASONRY</span></td></tr>
  <tr><th><strong>Roofing</strong></th><td><span>ASPHALT</span></td></tr>
  <tr><th><strong>Roof Type</strong></th><td><span>GABLE/HIP</span></td></tr>
  <tr><th><strong>Actual Year Built</strong></th><td><span>1995</span></td></tr>
  <tr><th><strong>Effective Year Built</strong></th><td><span>2000</span></td></tr>
</table></div>
<div id="{BUILDING}_dynamicBuildingDataRightColumn_divSummary"><table>
  <tr><th><strong>Bedrooms</strong></th><td><span>3</span></td></tr>
  <tr><th><strong>Bathrooms</strong></th><td><span>2/1</span></td></tr>
  <tr><th><strong>Stories</strong></th><td><span>1</span></td></tr>
</table></div>
</section>
<section id="ctlBodyPane_ctl11_mSection"><header><div class="title">Sub Area</div></header>
<table id="ctlBodyPane_ctl11_ctl01_lstSubAreaSqFt_ctl00_gvwSubAreaSqFtDetail"><tbody>
  <tr><th>BAS</th><td>BASE AREA</td><td>1,600</td><td>1995</td><td>2000</td><td>AVG</td><td>01</td><td>SFR</td></tr>
  <tr><th>FGR</th><td>FINISHED GARAGE</td><td>400</td><td>1995</td><td>2000</td><td>AVG</td><td>01</td><td>SFR</td></tr>
</tbody></table>
</section>
<section id="ctlBodyPane_ctl12_mSection"><header><div class="title">Sales</div></header>
<table><tbody>
  <tr><td>06/15/2015</td><td>$250,000</td><td>WD</td><td>1234</td><td>567</td><td>Q</td><td>I</td>
      <td>DOE JANE</td><td>SMITH JOHN &amp; MARY</td>
      <td><input type="button" onclick="window.open('https://clerk.example.com/doc?docid=998877')"></td></tr>
</tbody></table>
</section>
</body></html>
"""


def read(data_dir, name):
    with open(os.path.join(data_dir, name)) as f:
        return json.load(f)


@pytest.fixture
def property_dir(tmp_path, monkeypatch):
    monkeypatch.delenv("EXTRACTOR_STRICT_CODES", raising=False)

    def write(use="SINGLE FAMILY (00100)"):
        (tmp_path / "input.html").write_text(PAGE.replace("{use}", use), encoding="utf-8")
        (tmp_path / "property_seed.json").write_text(json.dumps({"parcel_id": "06013-001-000"}))
        (tmp_path / "unnormalized_address.json").write_text(json.dumps({
            "county_jurisdiction": "Alachua", "request_identifier": "06013-001-000",
        }))
        return tmp_path
    return write


def test_page_summary_buildings_and_sales():
    soup = BeautifulSoup(PAGE.replace("{use}", "SINGLE FAMILY (00100)"), "html.parser")
    summary = parse_summary(soup)
    assert (summary["parcel_id"], summary["prop_id"]) == ("06013-001-000", "12345")
    assert summary["property_use"] == "SINGLE FAMILY (00100)"
    assert summary["acres"] == 0.21
    assert property_id(soup) == "12345"
    assert property_id(soup, label_text="parcel id") == "06013-001-000"

    (building,) = parse_building_summaries(soup)
    assert building["building_identifier"] == "ctl00"
    assert building["right"]["bathrooms"] == "2/1"

    (sale,) = parse_sales(soup)
    assert sale["grantee"] == "SMITH JOHN & MARY"
    assert sale["instrument_number"] == "998877"


def test_structure_sidecar_maps_building_materials(property_dir):
    base_dir = str(property_dir())
    (building,) = read(os.path.dirname(structure_extractor.main(base_dir=base_dir)),
                       "structure_data.json")["property_12345"]["buildings"]
    structure = building["structure"]
    assert building["building_index"] == 1
    assert (structure["exterior_wall_material_primary"], structure["exterior_wall_material_secondary"]) == (
        "Stucco", "Brick",
    )
    assert (structure["flooring_material_primary"], structure["flooring_material_secondary"]) == (
        "Carpet", "Ceramic Tile",
    )
    assert structure["roof_design_type"] == "Combination"
    assert structure["roof_material_type"] == "Shingle"
    assert structure["finished_base_area"] == 1600


def test_full_run_builds_linked_graph(property_dir):
    base_dir = str(property_dir())
    for script in (owner_processor, structure_extractor, layout_extractor):
        script.main(base_dir=base_dir)
    data_dir = data_extractor.main(base_dir=base_dir)
    files = set(os.listdir(data_dir))

    prop = read(data_dir, "property.json")
    assert prop["structure_form"] == "SingleFamilyDetached"
    assert prop["property_structure_built_year"] == 1995
    assert prop["livable_floor_area"] == "1,600 sq ft"
    address = read(data_dir, "address.json")
    assert address["unnormalized_address"] == "123 NW 1ST AVE, GAINESVILLE 32601"
    assert (address["section"], address["township"], address["range"]) == ("01", "09", "19")
    assert read(data_dir, "lot.json")["lot_area_sqft"] == 9148

    assert [read(data_dir, f"person_{n}.json")["first_name"] for n in (1, 2)] == ["John", "Mary"]
    assert read(data_dir, "deed_1.json") == {
        "deed_type": "Warranty Deed", "book": "1234", "page": "567", "instrument_number": "998877",
    }
    assert read(data_dir, "structure_1.json")["exterior_wall_material_primary"] == "Stucco"
    assert read(data_dir, "layout_1.json")["space_type"] == "Building"
    assert [read(data_dir, f"layout_{n}.json")["space_type"] for n in range(2, 10)] == [
        "Bedroom", "Bedroom", "Bedroom", "Full Bathroom", "Full Bathroom",
        "Half Bathroom / Powder Room", "Living Area", "Attached Garage",
    ]
    assert {
        "relationship_property_has_layout_1.json",
        "relationship_layout_1_has_layout_9.json",
        "relationship_layout_1_has_structure_1.json",
        "relationship_person_1_has_mailing_address_1.json",
        "relationship_person_2_has_mailing_address_1.json",
        "relationship_sales_history_1_has_person_1.json",
        "relationship_sales_history_1_has_person_2.json",
        "relationship_deed_1_has_file_1.json",
        "relationship_property_has_address.json",
        "relationship_property_has_lot.json",
    } <= files


def test_unmapped_use_code_is_soft_by_default(property_dir):
    base_dir = str(property_dir(use="SPACE STATION (99999)"))
    data_dir = data_extractor.main(base_dir=base_dir)
    assert os.path.exists(os.path.join(data_dir, "error_property_type.json"))
