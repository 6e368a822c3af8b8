"""Declarative field extraction from parsed appraiser pages.

Each county lists its fields as FieldSpec rows instead of hand-writing a
lookup per field:

    SUMMARY_FIELDS = [
        FieldSpec("parcel_id", selector="#summary .parcel span"),
        FieldSpec("acres", label="Acreage", transform=parse_float_safe),
    ]
    values = extract_fields(soup, SUMMARY_FIELDS)
"""

from .text_utils import clean_text


class FieldSpec:
    def __init__(self, key, selector=None, label=None, transform=None, default=None, scope=None):
        if not selector and not label:
            raise ValueError(f"FieldSpec {key!r} needs a selector or a label")
        self.key = key
        self.selector = selector
        self.label = label
        self.transform = transform
        self.default = default
        self.scope = scope

    def raw_text(self, soup):
        container = soup
        if self.scope:
            container = soup.select_one(self.scope)
            if container is None:
                return ""
        if self.selector:
            node = container.select_one(self.selector)
            return clean_text(node.get_text(" ")) if node else ""
        return find_row_value_by_label(container, self.label) or ""

    def extract(self, soup):
        text = self.raw_text(soup)
        if not text:
            return self.default
        if self.transform:
            value = self.transform(text)
            return self.default if value is None else value
        return text

    def __repr__(self):
        return f"FieldSpec({self.key!r})"


def extract_fields(soup, specs):
    return {spec.key: spec.extract(soup) for spec in specs}


def find_row_value_by_label(container, label):
    """Value cell of the first table row whose header starts with label"""
    if container is None or not label:
        return None
    wanted = label.lower()
    for row in container.select("tr"):
        header = row.select_one("th strong") or row.select_one("th")
        if header is None:
            continue
        header_text = clean_text(header.get_text(" "))
        if header_text and header_text.lower().startswith(wanted):
            cell = row.select_one("td div span") or row.select_one("td span") or row.select_one("td")
            value = clean_text(cell.get_text(" ")) if cell else ""
            return value or None
    return None


def table_label_map(container):
    """{lower-cased header: value} for every labelled row in container"""
    result = {}
    if container is None:
        return result
    for row in container.select("tr"):
        header = row.select_one("th strong") or row.select_one("th")
        if header is None:
            continue
        label = clean_text(header.get_text(" "))
        if not label:
            continue
        cell = row.select_one("td span") or row.select_one("td")
        value = clean_text(cell.get_text(" ")) if cell else ""
        result[label.lower()] = value or None
    return result


def find_section_by_title(soup, title):
    """qPublic module whose header title equals title (case-insensitive)"""
    wanted = (title or "").lower()
    if not wanted:
        return None
    for section in soup.select("section[id^='ctlBodyPane_']"):
        header = section.find("header", recursive=False)
        if header is None:
            continue
        title_node = header.select_one(".title")
        if title_node and clean_text(title_node.get_text(" ")).lower() == wanted:
            return section
    return None


def cell_texts(row, tag="td"):
    return [clean_text(cell.get_text(" ")) for cell in row.find_all(tag)]
