from bs4 import BeautifulSoup

from property_extractor.fields import (
    FieldSpec,
    extract_fields,
    find_row_value_by_label,
    find_section_by_title,
    table_label_map,
)
from property_extractor.text_utils import parse_float_safe

PAGE = """
<section id="ctlBodyPane_ctl01_mSection">
  <header><div class="title">Summary</div></header>
  <table>
    <tr><th><strong>Parcel ID</strong></th><td><span>01234-000-000</span></td></tr>
    <tr><th><strong>Acreage</strong></th><td><span> 0.31 </span></td></tr>
    <tr><th><strong>Zoning</strong></th><td><span></span></td></tr>
  </table>
</section>
<section id="ctlBodyPane_ctl02_mSection">
  <header><div class="title">Valuation</div></header>
  <div class="land"><span>$12,000</span></div>
</section>
"""


def soup():
    return BeautifulSoup(PAGE, "html.parser")


def test_label_and_selector_specs():
    specs = [
        FieldSpec("parcel_id", label="parcel id"),
        FieldSpec("acres", label="Acreage", transform=parse_float_safe),
        FieldSpec("zoning", label="Zoning", default="UNKNOWN"),
        FieldSpec("land", selector=".land span"),
        FieldSpec("missing", selector=".nope", default=0),
    ]
    assert extract_fields(soup(), specs) == {
        "parcel_id": "01234-000-000",
        "acres": 0.31,
        "zoning": "UNKNOWN",
        "land": "$12,000",
        "missing": 0,
    }


def test_scope_limits_the_search():
    spec = FieldSpec("land", selector="span", scope="#ctlBodyPane_ctl02_mSection")
    assert spec.extract(soup()) == "$12,000"
    assert FieldSpec("x", selector="span", scope="#absent").extract(soup()) is None


def test_spec_needs_selector_or_label():
    try:
        FieldSpec("broken")
    except ValueError as e:
        assert "broken" in str(e)
    else:
        raise AssertionError("FieldSpec without selector or label was accepted")


def test_section_lookup_and_label_map():
    section = find_section_by_title(soup(), "summary")
    assert section["id"] == "ctlBodyPane_ctl01_mSection"
    assert find_row_value_by_label(section, "Acre") == "0.31"
    assert table_label_map(section) == {"parcel id": "01234-000-000", "acreage": "0.31", "zoning": None}
    assert find_section_by_title(soup(), "Sales") is None
