"""Polk County data extractor.

Unknown DOR use codes abort the run unless soft mode is forced through
EXTRACTOR_STRICT_CODES. Parcel geometry comes from input.csv when present,
else from the coordinates in unnormalized_address.json.
"""

import logging
import os

from ...code_mapper import UnmappedCodeError
from ...owners import title_case_keep_delimiters
from ...records import (
    EntityRegistry,
    LayoutTree,
    OutputWriter,
    apply_unit_invariant,
    lot_type_for_acres,
    make_layout,
    normalize_sidecar,
    property_id_candidates,
    resolve_property_entry,
    write_property_type_error,
)
from ...relationships import RelationshipWriter
from ...text_utils import clean_text, parse_float_safe, parse_int_safe
from ...utils import (
    ensure_directory,
    load_optional_json,
    load_sidecars,
    print_status,
    resolve_strict,
    source_request,
)
from .codes import PROPERTY_USE_MAPPER, map_deed_type, map_property_use
from .geometry import geometry_record, read_geometries
from .page import (
    built_year,
    current_tax,
    labelled,
    load_page,
    mailing_address,
    parcel_information,
    parse_sales,
    prior_taxes,
    property_id,
    site_address,
)

logger = logging.getLogger(__name__)

STRICT_CODES = True
APPRAISER_URL = "https://www.polkpa.org/CamaDisplay.aspx"


def buildings_by_number(value, key, plural=None):
    """Structure/utility sidecar -> {building number: record}.

    Polk keys these by building number ({"1": {...}, "2": {...}}); the
    other accepted shapes fall back to their position.
    """
    if isinstance(value, dict) and value and all(str(k).isdigit() for k in value):
        return {int(k): v for k, v in value.items() if isinstance(v, dict)}
    out = {}
    for position, item in enumerate(normalize_sidecar(value, key, plural), start=1):
        out[item["building_index"] or position] = item["data"]
    return out


def title_case_person(owner):
    if owner.get("type") != "person":
        return owner
    return dict(
        owner,
        first_name=title_case_keep_delimiters(owner.get("first_name")),
        last_name=title_case_keep_delimiters(owner.get("last_name")),
        middle_name=title_case_keep_delimiters(owner["middle_name"]) if owner.get("middle_name") else None,
    )


def name_variants(person):
    first = (person.get("first_name") or "").strip()
    middle = (person.get("middle_name") or "").strip()
    last = (person.get("last_name") or "").strip()
    if not first or not last:
        return []
    return [
        f"{last} {first}{' ' + middle if middle else ''}".upper(),
        f"{first} {middle + ' ' if middle else ''}{last}".upper(),
        f"{last} {first}".upper(),
    ]


class PolkExtraction:
    def __init__(self, base_dir, strict):
        self.base_dir = base_dir
        self.strict = strict
        self.data_dir = os.path.join(base_dir, "data")
        ensure_directory(self.data_dir)

        self.soup = load_page(os.path.join(base_dir, "input.html"))
        self.unaddr = load_optional_json(os.path.join(base_dir, "unnormalized_address.json")) or {}
        self.seed = load_optional_json(os.path.join(base_dir, "property_seed.json")) or {}
        self.parcel_info = parcel_information(self.soup)

        self.parcel_id = (
            self.seed.get("request_identifier") or self.seed.get("parcel_id")
            or self.unaddr.get("request_identifier") or ""
        )
        candidates = property_id_candidates(self.parcel_id, property_id(self.soup))
        sidecars = load_sidecars(base_dir)
        self.entries = {key: resolve_property_entry(value, candidates) for key, value in sidecars.items()}

        self.request_identifier = self.parcel_id
        self.source = source_request(self.unaddr, self.seed, APPRAISER_URL)

        self.writer = OutputWriter(self.data_dir)
        self.relationships = RelationshipWriter(self.data_dir)
        self.registry = EntityRegistry(
            self.writer, request_identifier=self.request_identifier, source_http_request=self.source
        )
        self.name_paths = {}

    def common(self):
        return {"source_http_request": dict(self.source), "request_identifier": self.request_identifier}

    def run(self):
        property_path = self.write_property()
        parcel_path = self.writer.write("parcel", {"parcel_identifier": self.parcel_id or ""})
        self.relationships.write_many(parcel_path, self.write_geometries())

        address_path = self.write_address()
        if address_path:
            self.relationships.write(property_path, address_path)
        mailing_path = self.write_mailing_address()
        self.relationships.write(property_path, self.write_lot())
        self.write_taxes()

        current_paths = self.write_owners()
        if mailing_path:
            for path in current_paths:
                self.relationships.write(path, mailing_path)
        self.write_sales()
        self.write_layouts(property_path)

    def write_property(self):
        raw_use = labelled(self.parcel_info, "property (dor) use code")
        if raw_use not in PROPERTY_USE_MAPPER:
            if self.strict:
                raise UnmappedCodeError(raw_use)
            write_property_type_error(self.writer, raw_use)
        use = map_property_use(raw_use, strict=False)

        record = dict(self.common())
        record.update({
            "parcel_identifier": str(self.parcel_id) if self.parcel_id else None,
            "property_legal_description_text": None,
            "property_structure_built_year": built_year(self.soup),
            "property_type": use["property_type"],
            "ownership_estate_type": use["ownership_estate_type"],
            "build_status": use["build_status"],
            "structure_form": use["structure_form"],
            "property_usage_type": use["property_usage_type"],
            "number_of_units": None,
            "subdivision": labelled(self.parcel_info, "subdivision") or "",
            "zoning": None,
        })
        apply_unit_invariant(record)
        return self.writer.write("property", record)

    def write_geometries(self):
        csv_path = os.path.join(self.base_dir, "input.csv")
        if os.path.exists(csv_path):
            geometries = read_geometries(csv_path)
        else:
            latitude = self.unaddr.get("latitude")
            longitude = self.unaddr.get("longitude")
            geometries = [{"latitude": latitude, "longitude": longitude}] if latitude and longitude else []
        return [self.writer.write_next("geometry", geometry_record(g)) for g in geometries]

    def write_address(self):
        text = site_address(self.soup)
        if not text:
            return None
        county = clean_text(self.unaddr.get("county_jurisdiction")) or clean_text(self.unaddr.get("county_name"))
        address = dict(self.common())
        address.update({"county_name": county or None, "unnormalized_address": text})
        return self.writer.write("address", address)

    def write_mailing_address(self):
        text = mailing_address(self.soup)
        if not text:
            return None
        mailing = dict(self.common())
        mailing["unnormalized_address"] = text
        return self.writer.write("mailing_address", mailing)

    def write_lot(self):
        acres = parse_float_safe(self.parcel_info.get("acreage"))
        lot = dict(self.common())
        lot.update({
            "lot_type": lot_type_for_acres(acres),
            "lot_length_feet": None,
            "lot_width_feet": None,
            "lot_area_sqft": None,
            "lot_size_acre": acres,
            "landscaping_features": None,
            "view": None,
            "fencing_type": None,
            "fence_height": None,
            "fence_length": None,
            "driveway_material": None,
            "driveway_condition": None,
            "lot_condition_issues": None,
        })
        return self.writer.write("lot", lot)

    def write_taxes(self):
        paths = []
        for values in [current_tax(self.soup)] + prior_taxes(self.soup):
            if not values["tax_year"]:
                continue
            tax = dict(self.common())
            tax.update({
                "tax_year": values["tax_year"],
                "property_assessed_value_amount": values["assessed"],
                "property_market_value_amount": values["market"],
                "property_building_amount": values["building"],
                "property_land_amount": values["land"],
                "property_taxable_value_amount": values["taxable"],
                "property_exemption_amount": values["exemption"],
                "monthly_tax_amount": None,
                "period_end_date": None,
                "period_start_date": None,
            })
            paths.append(self.writer.write(f"tax_{values['tax_year']}", tax))
        return paths

    def register(self, owner):
        path = self.registry.owner(title_case_person(owner))
        if not path:
            return None
        if owner.get("type") == "company":
            self.name_paths.setdefault(clean_text(owner.get("name")).upper(), path)
        else:
            for variant in name_variants(title_case_person(owner)):
                self.name_paths.setdefault(variant, path)
        return path

    def write_owners(self):
        """Current owners first, then every historical owner; returns current paths"""
        owners_by_date = (self.entries["owners"] or {}).get("owners_by_date") or {}
        current = []
        for owner in owners_by_date.get("current") or []:
            path = self.register(owner)
            if path and path not in current:
                current.append(path)
        for date_key, owners in owners_by_date.items():
            if date_key == "current":
                continue
            for owner in owners or []:
                self.register(owner)
        return current

    def grantee_path(self, grantee):
        name = clean_text(grantee).upper()
        if not name:
            return None
        if name in self.name_paths:
            return self.name_paths[name]
        parts = name.split(" ")
        if len(parts) >= 2:
            return self.name_paths.get(f"{' '.join(parts[1:])} {parts[0]}")
        return None

    def write_sales(self):
        paths = []
        for position, sale in enumerate(parse_sales(self.soup), start=1):
            sale_record = dict(self.common())
            sale_record.update({
                "ownership_transfer_date": sale["date"],
                "purchase_price_amount": sale["price"],
            })
            sale_path = self.writer.write(f"sales_history_{position}", sale_record)

            deed = dict(self.common())
            deed["deed_type"] = map_deed_type(sale["instrument"])
            if sale["book"]:
                deed["book"] = sale["book"]
            if sale["page"]:
                deed["page"] = sale["page"]
            deed_path = self.writer.write(f"deed_{position}", deed)

            book_page = f"{sale['book']}/{sale['page']}" if sale["book"] and sale["page"] else None
            document = dict(self.common())
            document.update({
                "document_type": "Title",
                "file_format": None,
                "ipfs_url": None,
                "name": f"Deed {book_page}" if book_page else "Deed Document",
                "original_url": sale["url"],
            })
            file_path = self.writer.write(f"file_{position}", document)
            self.relationships.write(deed_path, file_path)
            self.relationships.write(sale_path, deed_path)

            buyer = self.grantee_path(sale["grantee"])
            if buyer:
                self.relationships.write(sale_path, buyer)
            paths.append(sale_path)
        return paths

    def write_layouts(self, property_path):
        entry = self.entries["layouts"] or {}
        raw_layouts = entry.get("layouts") if isinstance(entry, dict) else None
        structures = buildings_by_number(self.entries["structures"], "structure")
        utilities = buildings_by_number(self.entries["utilities"], "utility", "utilities")

        tree = LayoutTree()
        for position, raw in enumerate(raw_layouts or [], start=1):
            overrides = dict(raw or {})
            building_number = parse_int_safe(overrides.pop("building_number", None))
            space_type = overrides.pop("space_type", None)
            overrides.pop("space_type_index", None)
            layout = make_layout(space_type, self.common(), **overrides)
            if space_type == "Building":
                tree.add_building(building_number or position, layout)
            elif building_number and tree.has_building(building_number):
                tree.attach(building_number, layout)
            else:
                tree.add_standalone(layout)

        buildings, standalone = tree.write(self.writer)
        # extra features have no building and hang off the property
        self.relationships.write_many(property_path, [b["path"] for b in buildings] + standalone)
        for building in buildings:
            self.relationships.write_many(building["path"], building["child_paths"])
            if building["index"] in structures:
                record = dict(self.common())
                record.update(structures[building["index"]])
                self.relationships.write(building["path"], self.writer.write_next("structure", record))
            if building["index"] in utilities:
                record = dict(self.common())
                record.update(utilities[building["index"]])
                self.relationships.write(building["path"], self.writer.write_next("utility", record))
        return buildings


def main(base_dir=".", strict=None):
    strict = resolve_strict(strict, STRICT_CODES)
    extraction = PolkExtraction(base_dir, strict)
    extraction.run()
    print_status(f"Polk extraction complete: {len(extraction.relationships.written)} relationships")
    return extraction.data_dir


if __name__ == "__main__":
    main()
