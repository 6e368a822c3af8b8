"""Lookups on the Alachua qPublic parcel page shared by the Alachua scripts."""

import re

from bs4 import BeautifulSoup

from ...fields import (
    FieldSpec,
    cell_texts,
    extract_fields,
    find_section_by_title,
    table_label_map,
)
from ...text_utils import clean_text, money_to_number, parse_float_safe, parse_int_safe

SUMMARY = "#ctlBodyPane_ctl03_ctl01_dynamicSummaryData_divSummary"


def summary_value(column):
    return f"#ctlBodyPane_ctl03_ctl01_dynamicSummaryData_rptrDynamicColumns_{column}_pnlSingleValue span"


SUMMARY_FIELDS = [
    FieldSpec("parcel_id", selector=summary_value("ctl00")),
    FieldSpec("prop_id", selector=summary_value("ctl01")),
    FieldSpec("address_line1", selector=summary_value("ctl02")),
    FieldSpec("address_line2", selector=summary_value("ctl03")),
    FieldSpec("subdivision", selector=summary_value("ctl06")),
    FieldSpec("legal_description", selector=summary_value("ctl07")),
    FieldSpec("sec_twp_rng", selector=summary_value("ctl09")),
    FieldSpec("acres", selector=summary_value("ctl11"), transform=parse_float_safe),
    FieldSpec("property_use", label="Property Use Code", scope=SUMMARY),
    FieldSpec("property_use_short", label="Property Use", scope=SUMMARY),
]

BUILDING_LEFT = "div[id$='dynamicBuildingDataLeftColumn_divSummary']"


def load_page(path):
    with open(path, "r", encoding="utf-8", errors="ignore") as f:
        return BeautifulSoup(f.read(), "html.parser")


def parse_summary(soup):
    values = extract_fields(soup, SUMMARY_FIELDS)
    values["property_use"] = values.pop("property_use") or values.pop("property_use_short")
    values.pop("property_use_short", None)
    return values


def parse_property_use_code(raw):
    """'SINGLE FAMILY (00100)' -> ('00100', 'SINGLE FAMILY')"""
    if not raw:
        return None, None
    match = re.search(r"\((\d{5})\)", raw)
    code = match.group(1) if match else None
    description = re.sub(r"\(\d{5}\)\s*$", "", raw).strip() or None
    return code, description


def parse_sec_twp_rng(raw):
    if not raw:
        return {"section": None, "township": None, "range": None}
    parts = [p.strip() for p in raw.split("-")]
    parts += [None] * (3 - len(parts))
    return {"section": parts[0] or None, "township": parts[1] or None, "range": parts[2] or None}


def parse_zoning(soup):
    for row in soup.select("#ctlBodyPane_ctl09_ctl01_gvwLand tbody tr"):
        cells = cell_texts(row)
        if len(cells) > 6 and cells[6]:
            return cells[6]
    return None


def property_id(soup, seed=None, label_text="prop id"):
    """Summary row value used to key the sidecar files ("prop id" or "parcel id")"""
    for row in soup.select(f"{SUMMARY} table tr"):
        label = row.select_one("th strong")
        if label and label_text in clean_text(label.get_text()).lower():
            value = row.select_one("td span")
            if value and clean_text(value.get_text()):
                return clean_text(value.get_text())
    seed = seed or {}
    return seed.get("prop_id") or seed.get("parcel_id") or "unknown"


def parse_building_summaries(soup):
    """One entry per building with its left/right characteristic tables"""
    module = find_section_by_title(soup, "Building Information")
    if module is None:
        return []
    buildings = []
    for index, left in enumerate(module.select(BUILDING_LEFT), start=1):
        prefix = (left.get("id") or "").replace("_dynamicBuildingDataLeftColumn_divSummary", "")
        right = module.find(id=f"{prefix}_dynamicBuildingDataRightColumn_divSummary")
        match = re.search(r"lstBuildings_(ctl\d+)", prefix, re.I)
        buildings.append({
            "building_index": index,
            "building_identifier": match.group(1) if match else None,
            "left": table_label_map(left),
            "right": table_label_map(right),
        })
    return buildings


def parse_sub_areas(soup):
    """Sub Area tables, one list of rows per building"""
    module = find_section_by_title(soup, "Sub Area")
    if module is None:
        return []
    tables = []
    for table in module.select("table[id*='lstSubAreaSqFt']"):
        rows = []
        for tr in table.select("tbody tr"):
            header = tr.find("th")
            area_type = clean_text(header.get_text()) if header else ""
            cells = cell_texts(tr)
            cells += [""] * (7 - len(cells))
            square_feet = parse_int_safe(cells[1])
            if not area_type and not cells[0] and square_feet is None:
                continue
            rows.append({
                "type": area_type or None,
                "description": cells[0] or None,
                "square_feet": square_feet,
                "actual_year_built": parse_int_safe(cells[2]),
                "effective_year_built": parse_int_safe(cells[3]),
                "quality": cells[4] or None,
                "improvement_use": cells[5] or None,
                "improvement_use_description": cells[6] or None,
            })
        tables.append(rows)
    return tables


def parse_sales(soup):
    table = None
    for section in soup.find_all("section"):
        title = section.select_one("div.title")
        if title and clean_text(title.get_text()).lower() == "sales":
            table = section.find("table")
            if table is not None:
                break
    if table is None:
        return []

    sales = []
    for tr in table.select("tbody tr"):
        cells = tr.find_all("td")
        if not cells:
            continue
        texts = [clean_text(td.get_text(" ")) for td in cells] + [""] * 10
        clerk_url = None
        if len(cells) > 9:
            button = cells[9].find("input")
            if button is not None:
                match = re.search(r"window\.open\('([^']+)'\)", button.get("onclick") or "")
                if match:
                    clerk_url = match.group(1)
        instrument_number = None
        if clerk_url:
            match = re.search(r"[?&](?:docid|instrument|inst|instrumentnumber)=(\d+)", clerk_url, re.I)
            if match:
                instrument_number = match.group(1)
        if not texts[0] or not texts[1]:
            continue
        sales.append({
            "date": texts[0],
            "price": money_to_number(texts[1]),
            "instrument": texts[2] or None,
            "book": texts[3] or None,
            "page": texts[4] or None,
            "qualification": texts[5] or None,
            "vacant_improved": texts[6] or None,
            "grantor": texts[7] or None,
            "grantee": texts[8] or None,
            "clerk_url": clerk_url,
            "instrument_number": instrument_number,
        })
    return sales


def parse_owner_names(soup):
    selectors = (
        "[id*='sprOwnerName'][id$='lnkSearch'], "
        "[id*='sprOwnerName'][id$='lblSearch'], "
        "[id*='sprPrimaryOwner'][id$='lblSuppressed']"
    )
    names = []
    for node in soup.select(selectors):
        name = clean_text(node.get_text(" "))
        if name and name not in names:
            names.append(name)
    return names


def parse_owner_mailing_addresses(soup):
    """(raw addresses in owner order, unique addresses)"""
    raw = []
    for span in soup.select("span[id$='lblOwnerAddress']"):
        for br in span.find_all("br"):
            br.replace_with("\n")
        lines = [clean_text(line) for line in span.get_text().split("\n")]
        lines = [line for line in lines if line]
        if lines:
            raw.append(", ".join(lines))
    unique = []
    for address in raw:
        if address not in unique:
            unique.append(address)
    return raw, unique


def parse_permits(soup):
    section = find_section_by_title(soup, "Permits")
    if section is None:
        return []
    table = section.select_one("table[id*='grdPermit']") or section.find("table")
    if table is None:
        return []
    permits = []
    for tr in table.select("tbody tr"):
        header = tr.find("th")
        permit_number = clean_text(header.get_text()) if header else ""
        cells = cell_texts(tr)
        if not permit_number and not any(cells):
            continue
        cells += [""] * (5 - len(cells))
        permits.append({
            "permit_number": permit_number or None,
            "type": cells[0] or None,
            "primary": cells[1] or None,
            "active": cells[2] or None,
            "issue_date": cells[3] or None,
            "value": cells[4] or None,
        })
    return permits


def parse_valuations_working(soup, year=2025):
    values = {}
    for tr in soup.select("#ctlBodyPane_ctl06_ctl01_grdValuation tbody tr"):
        header = tr.find("th")
        cell = tr.find("td")
        if header is None:
            continue
        values[clean_text(header.get_text())] = clean_text(cell.get_text()) if cell else ""
    if not values:
        return None
    return {
        "year": year,
        "improvement": money_to_number(values.get("Improvement Value")) or None,
        "land": money_to_number(values.get("Land Value")) or None,
        "just_market": money_to_number(values.get("Just (Market) Value")) or None,
        "assessed": money_to_number(values.get("Assessed Value")) or None,
        "taxable": money_to_number(values.get("Taxable Value")) or None,
    }


def parse_valuations_certified(soup):
    table = soup.select_one("#ctlBodyPane_ctl07_ctl01_grdValuation_grdYearData")
    if table is None:
        return []
    years = [parse_int_safe(th.get_text()) for th in table.select("thead th.value-column")]
    years = [y for y in years if y]
    rows = {}
    for tr in table.select("tbody tr"):
        header = tr.find("th")
        label = clean_text(header.get_text()) if header else ""
        rows[label] = [clean_text(td.get_text()) for td in tr.select("td.value-column")]

    def column(labels, index):
        for label in labels:
            if label in rows:
                values = rows[label]
                return money_to_number(values[index]) if index < len(values) else None
        return None

    out = []
    for index, year in enumerate(years):
        out.append({
            "year": year,
            "improvement": column(["Improvement Value"], index),
            "land": column(["Land Value"], index),
            "just_market": column(["Just Market Value"], index),
            "assessed": column(["School Assessed Value", "Non School Assessed Value"], index),
            "taxable": column(["School Taxable Value", "Non School Taxable Value"], index),
        })
    return out
