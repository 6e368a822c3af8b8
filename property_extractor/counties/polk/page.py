"""Lookups on the Polk appraiser parcel page."""

import re

from bs4 import BeautifulSoup, NavigableString

from ...text_utils import clean_text, month_year_to_iso, parse_currency

STRAP_PATTERNS = (r"strap=(\d{18})", r"ParcelID=(\d{18})")


def load_page(path):
    with open(path, "r", encoding="utf-8", errors="ignore") as f:
        return BeautifulSoup(f.read(), "html.parser")


def cell_text(cell):
    """Cell text with <br> read as a space"""
    if cell is None:
        return ""
    return clean_text(cell.get_text(" "))


def find_h4(soup, predicate):
    for heading in soup.find_all("h4"):
        if predicate(clean_text(heading.get_text())):
            return heading
    return None


def following_table(heading):
    return heading.find_next_sibling("table") if heading is not None else None


def property_id(soup):
    """18-digit STRAP from link/script attributes, else from page text"""
    attributes = []
    for node in soup.find_all(["a", "form", "script", "input", "div", "span"]):
        attributes.extend(str(value) for value in node.attrs.values())
    for pattern in STRAP_PATTERNS:
        for value in attributes:
            match = re.search(pattern, value, re.I)
            if match:
                return match.group(1)
    for text in soup.find_all(string=True):
        match = re.search(r"(\d{18})", str(text))
        if match:
            return match.group(1)
    return "unknown_id"


def parcel_information(soup):
    """{lower-cased label: value} from the Parcel Information table"""
    table = following_table(find_h4(soup, lambda text: "Parcel Information" in text))
    values = {}
    if table is None:
        return values
    for row in table.find_all("tr"):
        cells = row.find_all("td")
        if len(cells) < 2:
            continue
        label = clean_text(cells[0].get_text()).lower()
        if label:
            values[label] = clean_text(cells[1].get_text()) or None
    return values


def labelled(values, needle):
    for label, value in values.items():
        if needle in label:
            return value
    return None


def built_year(soup):
    """Latest Actual Year Built across the building sections"""
    years = []
    for heading in soup.find_all("h4"):
        if "Building Characteristics" not in heading.get_text():
            continue
        match = re.search(r"Actual\s+Year\s+Built:\s*(\d{4})", heading.parent.get_text(" "), re.I)
        if match:
            years.append(int(match.group(1)))
    return max(years) if years else None


def address_lines(soup, heading_text):
    table = following_table(find_h4(soup, lambda text: text.startswith(heading_text)))
    if table is None:
        return []
    lines = []
    for row in table.find_all("tr"):
        cells = row.find_all("td")
        text = cell_text(cells[-1]) if cells else ""
        if text:
            lines.append(text)
    return lines


def site_address(soup):
    lines = [", ".join(address_lines(soup, "Physical Street Address")),
             ", ".join(address_lines(soup, "Postal City and Zip"))]
    return ", ".join(line for line in lines if line) or None


def mailing_address(soup):
    return ", ".join(address_lines(soup, "Mailing Address")) or None


def current_tax(soup):
    header = soup.select_one("#valueSummary h3")
    match = re.search(r"\((\d{4})\)", header.get_text() if header else "")
    values = {
        "tax_year": int(match.group(1)) if match else None,
        "market": 0, "assessed": 0, "taxable": 0, "building": 0, "land": 0, "exemption": 0,
    }
    for row in soup.select("#valueSummary table tr"):
        cells = row.find_all("td")
        if len(cells) < 2:
            continue
        label = clean_text(cells[0].get_text()).upper()
        amount = parse_currency(clean_text(cells[1].get_text())) or 0
        if label == "JUST MARKET VALUE":
            values["market"] = amount
        elif label == "ASSESSED VALUE":
            values["assessed"] = amount
        elif "TAXABLE VALUE" in label and "(COUNTY)" in label:
            values["taxable"] = amount
        elif label == "BUILDING VALUE":
            values["building"] = amount
        elif label == "LAND VALUE":
            values["land"] = amount
        elif "EXEMPTION VALUE" in label and "(COUNTY)" in label:
            values["exemption"] = amount
    return values


PRIOR_VALUE_ROWS = {
    "JUST MARKET VALUE": "market",
    "ASSESSED VALUE": "assessed",
    "LAND VALUE": "land",
    "BUILDING VALUE": "building",
    "TAXABLE VALUE (COUNTY)": "taxable",
    "EXEMPTION VALUE (COUNTY)": "exemption",
}


def prior_taxes(soup):
    table = soup.select_one("#priorValues table.left")
    if table is None:
        return []
    rows = table.find_all("tr")
    if not rows:
        return []
    year_columns = []
    for index, cell in enumerate(rows[0].find_all("td")):
        text = clean_text(cell.get_text())
        if re.match(r"^\d{4}$", text):
            year_columns.append((int(text), index))

    by_year = {
        year: {"tax_year": year, "market": 0, "assessed": 0, "taxable": 0,
               "building": 0, "land": 0, "exemption": 0}
        for year, _ in year_columns
    }
    for row in rows[1:]:
        cells = row.find_all("td")
        if not cells:
            continue
        field = PRIOR_VALUE_ROWS.get(clean_text(cells[0].get_text()).upper())
        if field is None:
            continue
        for year, index in year_columns:
            text = clean_text(cells[index].get_text()) if index < len(cells) else ""
            by_year[year][field] = parse_currency(text) or 0
    return list(by_year.values())


def parse_sales(soup):
    sales = []
    for position, row in enumerate(soup.select("#saleHist table.center tr")):
        if position == 0:
            continue
        cells = row.find_all("td")
        if len(cells) < 6:
            continue
        book_page = cells[0].get_text().strip().split("\n")[0].strip()
        book = page = None
        if book_page and len(book_page.split("/")) == 2:
            book, page = (part.strip() for part in book_page.split("/"))
        links = cells[0].find_all("a")
        date_text = clean_text(cells[1].get_text())
        grantee = clean_text(cells[4].get_text())
        price = parse_currency(clean_text(cells[5].get_text()))
        if price is None and not grantee and not date_text:
            continue
        sales.append({
            "date_text": date_text,
            "date": month_year_to_iso(date_text),
            "instrument": clean_text(cells[2].get_text()),
            "grantee": grantee,
            "price": price,
            "book": book or None,
            "page": page or None,
            "url": links[-1].get("href") if links else None,
        })
    return sales


def owner_rows(soup):
    """Owner names from the Owners table with ownership percentages removed"""
    names = []
    for heading in soup.find_all("h4"):
        if not re.match(r"^Owners\b", clean_text(heading.get_text()), re.I):
            continue
        table = following_table(heading)
        if table is None:
            continue
        for row in table.find_all("tr"):
            cells = row.find_all("td")
            if not cells:
                continue
            name = clean_text(re.sub(r"\s*\d+%\s*$", "", clean_text(cells[0].get_text())))
            if name:
                names.append(name)
    return names


def sale_grantees(soup):
    """(iso date or None, grantee) for each sale row"""
    grantees = []
    for row in soup.select("#saleHist table tr"):
        if "header" in (row.get("class") or []):
            continue
        cells = row.find_all("td")
        if len(cells) < 5:
            continue
        grantee = clean_text(cells[4].get_text())
        if not grantee or re.match(r"^grantee$", grantee, re.I):
            continue
        grantees.append((month_year_to_iso(clean_text(cells[1].get_text())), grantee))
    return grantees


def more_info_grantees(soup):
    names = []
    for block in soup.select("div.more-info"):
        match = re.search(r"Grantee Name:\s*(.+)$", clean_text(block.get_text()), re.I)
        if match and clean_text(match.group(1)):
            names.append(clean_text(match.group(1)))
    return names


def column_key(text):
    return re.sub(r"[^a-z0-9]+", "_", clean_text(text).lower()).strip("_")


def standard_table(table, skip_colspan=False):
    """Rows after the header as {column key: text}; rows of another width are dropped"""
    if table is None:
        return []
    rows = table.find_all("tr")
    if not rows:
        return []
    headers = [column_key(cell_text(cell)) or f"column_{index}"
               for index, cell in enumerate(rows[0].find_all(["th", "td"]), start=1)]
    records = []
    for row in rows[1:]:
        cells = row.find_all("td")
        if skip_colspan and any(cell.get("colspan") for cell in cells):
            continue
        if len(cells) != len(headers):
            continue
        records.append({header: cell_text(cell) or None for header, cell in zip(headers, cells)})
    return records


def bold_value(bold):
    """Text after a <b>Label:</b> up to the next <br> or block tag"""
    parts = []
    for sibling in bold.next_siblings:
        if isinstance(sibling, NavigableString):
            parts.append(str(sibling))
            continue
        if sibling.name in ("br", "b", "table", "div") or re.match(r"^h\d$", sibling.name or ""):
            break
    return clean_text("".join(parts))


def child_heading(section, title):
    for heading in section.find_all("h4"):
        if clean_text(heading.get_text()) == title:
            return heading
    return None


def parse_building_section(section, number):
    characteristics = {}
    elements = {}
    heading = child_heading(section, "Building Characteristics")
    if heading is not None:
        container = heading.parent
        for bold in container.find_all("b"):
            key = column_key(bold.get_text())
            value = bold_value(bold)
            if key and value:
                characteristics[key] = value
        for row in standard_table(container.find("table")):
            label = (row.get("element") or "").upper()
            if label:
                elements[label] = {"units": row.get("units"), "information": row.get("information")}

    subarea_heading = child_heading(section, "Building Subareas")
    subarea_table = subarea_heading.find_next("table") if subarea_heading is not None else None
    return {
        "building_number": number,
        "characteristics": characteristics,
        "elements": elements,
        "subareas": standard_table(subarea_table, skip_colspan=True),
    }


def parse_buildings(soup):
    """Building sections under #bldngs, numbered by position"""
    buildings = []
    for section in soup.select("#bldngs .pagebreak"):
        heading = section.find("h4", recursive=False)
        if heading is None or not re.search(r"building", heading.get_text(), re.I):
            continue
        buildings.append(parse_building_section(section, len(buildings) + 1))
    return buildings


def element_units(building, label):
    element = building["elements"].get(label)
    return element["units"] if element else None


def element_information(building, label):
    element = building["elements"].get(label)
    return element["information"] if element else None


def extra_features(soup):
    for heading in soup.find_all("h3"):
        if clean_text(heading.get_text()).startswith("Extra Features"):
            return standard_table(heading.find_next("table"))
    return []
