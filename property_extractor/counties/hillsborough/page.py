"""Lookups on the Hillsborough appraiser parcel page (knockout-bound HTML)."""

import re

from bs4 import BeautifulSoup

from ...text_utils import clean_text, parse_currency, parse_float_safe


def load_page(path):
    with open(path, "r", encoding="utf-8", errors="ignore") as f:
        return BeautifulSoup(f.read(), "html.parser")


def multiline_text(node):
    """Text of node with <br> turned into newlines and runs of blanks collapsed"""
    if node is None:
        return ""
    for br in node.find_all("br"):
        br.replace_with("\n")
    lines = [clean_text(line) for line in node.get_text().split("\n")]
    return "\n".join(line for line in lines if line)


def owner_text(soup):
    return multiline_text(soup.select_one("h4[data-bind*='publicOwner']"))


def display_strap(soup):
    node = soup.select_one("td[data-bind*='displayStrap']")
    return clean_text(node.get_text()) if node else ""


def next_sibling_text(cell):
    sibling = cell.find_next_sibling("td")
    return clean_text(sibling.get_text()) if sibling else ""


def heading_paragraph(soup, title):
    for heading in soup.find_all("h5"):
        if title in heading.get_text():
            paragraph = heading.find_next_sibling("p")
            if paragraph is not None:
                return clean_text(paragraph.get_text(" ")) or None
    return None


def parse_property_data(soup):
    values = {"property_use": None, "subdivision": None, "pin": None}
    for cell in soup.find_all("td"):
        text = cell.get_text().strip()
        if "Property Use:" in text:
            values["property_use"] = next_sibling_text(cell) or None
        elif "Subdivision:" in text:
            values["subdivision"] = next_sibling_text(cell) or None
        elif text == "PIN:":
            values["pin"] = next_sibling_text(cell) or None
    values["site_address"] = heading_paragraph(soup, "Site Address")
    values["mailing_address"] = heading_paragraph(soup, "Mailing Address")
    return values


def parse_legal_description(soup):
    lines = []
    for row in soup.select("tbody[data-bind*='fullLegal'] tr"):
        cells = row.find_all("td")
        if cells:
            text = cells[-1].get_text().strip()
            if text:
                lines.append(text)
    return " ".join(lines) if lines else None


def section_township_range(pin):
    """'A-19-28-18-ZZZ-...' or '192818...' -> section, township, range"""
    result = {"section": None, "township": None, "range": None}
    if not pin:
        return result
    normalized = re.sub(r"\s+", "", str(pin).upper())
    match = re.match(r"^[A-Z]?-?(\d{2})-(\d{2})-(\d{2})", normalized)
    if match:
        result.update(section=match.group(1), township=match.group(2), range=match.group(3))
        return result
    digits = re.sub(r"\D", "", normalized)
    if len(digits) >= 6:
        result.update(section=digits[0:2], township=digits[2:4], range=digits[4:6])
    return result


def following_div(heading):
    return heading.find_next_sibling("div") if heading is not None else None


def find_heading(soup, pattern, tag="h4", class_=None):
    regex = re.compile(pattern, re.I)
    for heading in soup.find_all(tag, class_=class_):
        if regex.search(heading.get_text()):
            return heading
    return None


def parse_tax_year(soup):
    node = soup.select_one("div.value-summary-years span[data-bind*='displayedTaxYear']")
    match = re.search(r"(20\d{2})", clean_text(node.get_text()) if node else "")
    return int(match.group(1)) if match else None


def parse_county_valuation(soup):
    container = following_div(find_heading(soup, r"value summary", class_="section-header"))
    if container is None:
        return None
    for row in container.select("tbody tr"):
        cells = row.find_all("td")
        if not cells or not re.search(r"county", clean_text(cells[0].get_text()), re.I):
            continue
        if len(cells) < 5:
            return None
        return {
            "year": parse_tax_year(soup),
            "market": parse_currency(clean_text(cells[1].get_text())),
            "assessed": parse_currency(clean_text(cells[2].get_text())),
            "taxable": parse_currency(clean_text(cells[4].get_text())),
        }
    return None


def sale_date(month_text, year_text):
    year = clean_text(year_text)
    if not year:
        return None
    match = re.search(r"\d+", clean_text(month_text))
    month = str(int(match.group(0))).zfill(2) if match else "01"
    return f"{year}-{month}-01"


def strip_confidential(text):
    return re.sub(r"\s*Confidential$", "", clean_text(text), flags=re.I).strip()


def link_href(cell):
    link = cell.find("a")
    return link.get("href") if link is not None and link.get("href") else None


def parse_sales(soup):
    container = following_div(find_heading(soup, r"sales history"))
    if container is None:
        return []
    sales = []
    for row in container.select("tbody tr"):
        cells = row.find_all("td")
        if not cells:
            continue
        cells += [None] * (8 - len(cells))

        book = page = None
        match = re.search(r"(\d+)\s*/\s*(\d+)", strip_confidential(cells[0].get_text()))
        if match:
            book, page = match.group(1), match.group(2)

        instrument = strip_confidential(cells[1].get_text()) if cells[1] is not None else ""
        sales.append({
            "date": sale_date(
                cells[2].get_text() if cells[2] is not None else "",
                cells[3].get_text() if cells[3] is not None else "",
            ),
            "deed_code": clean_text(cells[4].get_text()) if cells[4] is not None else "",
            "price": parse_currency(clean_text(cells[7].get_text())) if cells[7] is not None else None,
            "book": book,
            "page": page,
            "instrument_number": instrument or None,
            "url": (link_href(cells[1]) if cells[1] is not None else None) or link_href(cells[0]),
        })
    return sales


def parse_permits(soup):
    permits = []
    for row in soup.select("table.permitinfo tbody tr"):
        cells = row.find_all("td")
        if len(cells) < 2:
            continue
        number = clean_text(cells[1].get_text())
        if not number:
            continue
        permits.append({
            "permit_number": number,
            "description": clean_text(cells[2].get_text()) if len(cells) > 2 else "",
            "issue_date": clean_text(cells[3].get_text()) if len(cells) > 3 else "",
            "url": link_href(cells[1]),
        })
    return permits


def bound_text(row, binding):
    node = row.select_one(f"[data-bind='text: {binding}']")
    return clean_text(node.get_text()) if node else ""


def parse_land_lines(soup):
    lines = []
    for row in soup.select("div[data-bind='visible: landLines().length > 0'] tbody tr"):
        lines.append({
            "land_type": bound_text(row, "publicLandType"),
            "units": parse_float_safe(bound_text(row, "publicUnits")),
            "frontage": parse_float_safe(bound_text(row, "frontage")),
            "depth": parse_float_safe(bound_text(row, "depth")),
        })
    return lines


def characteristic_key(label):
    return re.sub(r"[^a-z0-9]+", "_", clean_text(label).lower())


def building_characteristics(section):
    """{label key: [{"label", "code", "description"}, ...]} from the report table"""
    values = {}
    for row in section.select("table.report-table tbody > tr"):
        cells = row.find_all("td")
        if len(cells) < 2:
            continue
        label = clean_text(cells[0].get_text())
        if not label:
            continue
        values.setdefault(characteristic_key(label), []).append({
            "label": label,
            "code": clean_text(cells[1].get_text()),
            "description": clean_text(cells[2].get_text()) if len(cells) > 2 else "",
        })
    return values


def sub_area_totals(section):
    """Gross and heated square feet from the Building Sub Areas footer"""
    row = section.select_one("table.data-table tfoot tr") or section.select_one("table tfoot tr")
    cells = row.find_all("th") if row is not None else []
    return {
        "gross_area": parse_float_safe(cells[1].get_text()) if len(cells) > 1 else None,
        "heated_area": parse_float_safe(cells[2].get_text()) if len(cells) > 2 else None,
    }


def building_number(title, position):
    match = re.search(r"building\s+(\d+)", title or "", re.I)
    return int(match.group(1)) if match else position


def is_section_header(node):
    return node.name == "h4" and "section-header" in (node.get("class") or [])


def parse_buildings(soup):
    """One dict per building block under the knockout buildings() loop"""
    container = soup.select_one("div[data-bind='foreach: buildings()']")
    if container is None:
        return []
    buildings = []
    for position, header in enumerate(container.find_all(is_section_header), start=1):
        content = []
        for sibling in header.find_next_siblings():
            if is_section_header(sibling):
                break
            content.append(sibling)
        wrap = next((n for n in content if n.name == "div" and "section-wrap" in (n.get("class") or [])), None)
        if wrap is None:
            continue
        title = clean_text(header.get_text())
        building = {
            "building_number": building_number(title, position),
            "title": title,
            "characteristics": building_characteristics(wrap),
            "text": " ".join(clean_text(node.get_text(" ")) for node in content).lower(),
        }
        building.update(sub_area_totals(wrap))
        buildings.append(building)
    return buildings


def characteristic(building, label):
    entries = building["characteristics"].get(characteristic_key(label)) or []
    return entries[0] if entries else None


def characteristic_text(building, label):
    """'<description> <code>' of the first row with this label, lower-cased"""
    entry = characteristic(building, label)
    if entry is None:
        return ""
    return f"{entry['description']} {entry['code']}".strip().lower()


def characteristic_number(building, label):
    entry = characteristic(building, label)
    if entry is None:
        return None
    return parse_float_safe(entry["description"] or entry["code"])
