"""Hillsborough County data extractor.

Reads input.html, unnormalized_address.json, property_seed.json and the
owners/*.json sidecars keyed by PIN, and writes the property graph into
data/.
"""

import logging
import os

from ...code_mapper import UnmappedCodeError, compile_rules, first_match
from ...records import (
    AddressNotFoundError,
    EntityRegistry,
    LayoutTree,
    OutputWriter,
    apply_unit_invariant,
    link_to_buildings,
    lot_type_for_acres,
    make_layout,
    normalize_sidecar,
    property_id_candidates,
    resolve_property_entry,
    write_property_type_error,
)
from ...relationships import RelationshipWriter
from ...text_utils import parse_int_safe, to_iso_from_mdy
from ...utils import (
    ensure_directory,
    load_optional_json,
    load_sidecars,
    print_status,
    resolve_strict,
    source_request,
)
from .codes import PROPERTY_USE_MAPPER, map_deed_type, map_property_use
from .page import (
    display_strap,
    load_page,
    parse_county_valuation,
    parse_land_lines,
    parse_legal_description,
    parse_permits,
    parse_property_data,
    parse_sales,
    section_township_range,
)

logger = logging.getLogger(__name__)

STRICT_CODES = False
APPRAISER_URL = "https://gis.hcpafl.org/propertysearch/"

IMPROVEMENT_TYPE_RULES = compile_rules([
    (r"pool|spa", "PoolSpaInstallation"),
    (r"roof", "Roofing"),
    (r"demolition|demo", "Demolition"),
    (r"fence", "Fencing"),
    (r"dock|seawall|shore|pier", "DockAndShore"),
    (r"hvac|mechanical", "MechanicalHVAC"),
    (r"electric", "Electrical"),
    (r"plumb", "Plumbing"),
    (r"gas", "GasInstallation"),
    (r"irrigation", "LandscapeIrrigation"),
    (r"screen", "ScreenEnclosure"),
    (r"shutter|awning", "ShutterAwning"),
    (r"addition|renovation|remodel|alteration|improv", "BuildingAddition"),
    (r"construct|build", "ResidentialConstruction"),
    (r"window|door|exterior", "ExteriorOpeningsAndFinishes"),
    (r"site|grading|driveway", "SiteDevelopment"),
    (r"well", "WellPermit"),
])


def map_improvement_type(description):
    return first_match(IMPROVEMENT_TYPE_RULES, description, default="GeneralBuilding")


def lot_from_land_lines(lines):
    """Sum acre and square-foot land lines; None when neither is present"""
    total_acres = 0.0
    total_sqft = 0.0
    for line in lines:
        units = line["units"]
        if units is None:
            continue
        if "ac" in line["land_type"].lower():
            total_acres += units
        elif any(unit in line["land_type"].lower() for unit in ("sq", "sf", "square")):
            total_sqft += units
    if not total_acres and not total_sqft:
        return None

    acres = total_acres if total_acres else total_sqft / 43560
    frontage = lines[0]["frontage"] if lines else None
    depth = lines[0]["depth"] if lines else None
    return {
        "lot_type": lot_type_for_acres(acres),
        "lot_size_acre": round(acres, 4),
        "lot_area_sqft": round(acres * 43560),
        "lot_length_feet": round(frontage) if frontage else None,
        "lot_width_feet": round(depth) if depth else None,
        "landscaping_features": None,
        "view": None,
        "fencing_type": None,
        "fence_height": None,
        "fence_length": None,
        "driveway_material": None,
        "driveway_condition": None,
        "lot_condition_issues": None,
        "paving_area_sqft": None,
        "paving_installation_date": None,
        "paving_type": "None",
        "site_lighting_fixture_count": None,
        "site_lighting_installation_date": None,
        "site_lighting_type": "None",
    }


class HillsboroughExtraction:
    def __init__(self, base_dir, strict):
        self.base_dir = base_dir
        self.strict = strict
        self.data_dir = os.path.join(base_dir, "data")
        ensure_directory(self.data_dir)

        self.soup = load_page(os.path.join(base_dir, "input.html"))
        self.unaddr = load_optional_json(os.path.join(base_dir, "unnormalized_address.json")) or {}
        self.seed = load_optional_json(os.path.join(base_dir, "property_seed.json")) or {}
        self.page = parse_property_data(self.soup)
        self.pin = self.page["pin"] or display_strap(self.soup) or None

        sidecars = load_sidecars(base_dir)
        candidates = property_id_candidates(self.pin, display_strap(self.soup), "unknown_id")
        self.entries = {key: resolve_property_entry(value, candidates) for key, value in sidecars.items()}

        self.request_identifier = self.seed.get("request_identifier") or self.seed.get("parcel_id") or ""
        self.source = source_request(self.unaddr, self.seed, APPRAISER_URL)

        self.writer = OutputWriter(self.data_dir)
        self.relationships = RelationshipWriter(self.data_dir)
        self.registry = EntityRegistry(
            self.writer, request_identifier=self.request_identifier, source_http_request=self.source
        )

    def common(self):
        return {"source_http_request": dict(self.source), "request_identifier": self.request_identifier}

    def run(self):
        property_path = self.write_property()
        self.relationships.write(property_path, self.write_address())
        mailing_path = self.write_mailing_address()
        self.write_tax()
        current_owner_paths = self.write_owners(mailing_path)

        buildings, standalone = self.write_layouts()
        self.relationships.write_many(property_path, [b["path"] for b in buildings] or standalone)
        for building in buildings:
            self.relationships.write_many(building["path"], building["child_paths"])
        structures = self.write_sidecar("structures", "structure")
        utilities = self.write_sidecar("utilities", "utility", "utilities")
        link_to_buildings(self.relationships, buildings, structures, property_path)
        link_to_buildings(self.relationships, buildings, utilities, property_path)

        sale_paths = self.write_sales()
        if sale_paths:
            self.relationships.write_many(sale_paths[0], current_owner_paths)

        self.relationships.write_many(property_path, self.write_permits())
        lot_path = self.write_lot()
        if lot_path:
            self.relationships.write(property_path, lot_path)

    def write_property(self):
        raw_use = self.page["property_use"]
        if raw_use not in PROPERTY_USE_MAPPER:
            if self.strict:
                raise UnmappedCodeError(raw_use)
            write_property_type_error(self.writer, raw_use)
        use = map_property_use(raw_use, strict=False)

        record = dict(self.common())
        record.update({
            "parcel_identifier": self.pin,
            "property_type": use["property_type"],
            "property_legal_description_text": parse_legal_description(self.soup) or "",
            "subdivision": self.page["subdivision"],
            "ownership_estate_type": use["ownership_estate_type"],
            "build_status": use["build_status"],
            "structure_form": use["structure_form"],
            "property_usage_type": use["property_usage_type"],
        })
        apply_unit_invariant(record)
        return self.writer.write("property", record)

    def write_address(self):
        full_address = self.page["site_address"] or self.unaddr.get("full_address")
        if not full_address:
            raise AddressNotFoundError("No address found in site address or unnormalized address")
        address = dict(self.common())
        address.update({
            "county_name": self.unaddr.get("county_jurisdiction") or "Hillsborough",
            "latitude": self.unaddr.get("latitude"),
            "longitude": self.unaddr.get("longitude"),
            "unnormalized_address": full_address,
        })
        address.update(section_township_range(self.pin))
        return self.writer.write("address", address)

    def write_mailing_address(self):
        if not self.page["mailing_address"]:
            return None
        mailing = dict(self.common())
        mailing.update({
            "latitude": None,
            "longitude": None,
            "unnormalized_address": self.page["mailing_address"],
        })
        return self.writer.write("mailing_address", mailing)

    def write_tax(self):
        valuation = parse_county_valuation(self.soup)
        if not valuation:
            return None
        tax = dict(self.common())
        tax.update({
            "tax_year": valuation["year"],
            "property_market_value_amount": valuation["market"],
            "property_assessed_value_amount": valuation["assessed"],
            "property_taxable_value_amount": valuation["taxable"],
            "property_land_amount": None,
            "property_building_amount": None,
            "monthly_tax_amount": None,
            "period_end_date": None,
            "period_start_date": None,
            "yearly_tax_amount": None,
        })
        return self.writer.write("tax_1", tax)

    def current_owners(self):
        entry = self.entries["owners"] or {}
        return (entry.get("owners_by_date") or {}).get("current") or []

    def write_owners(self, mailing_path):
        paths = self.registry.owners(self.current_owners())
        if mailing_path:
            for path in paths:
                self.relationships.write(path, mailing_path)
        return paths

    def write_sidecar(self, entry_key, key, plural=None):
        """Structure or utility files; building_number picks the building"""
        written = []
        for item in normalize_sidecar(self.entries[entry_key], key, plural):
            data = dict(self.common())
            data.update(item["data"])
            building_index = item["building_index"] or parse_int_safe(data.pop("building_number", None))
            data.pop(f"{key}_index", None)
            path = self.writer.write_next(key, data)
            written.append({"path": path, "building_index": building_index})
        return written

    def write_layouts(self):
        entry = self.entries["layouts"] or {}
        raw_layouts = entry.get("layouts") if isinstance(entry, dict) else None
        tree = LayoutTree()
        for position, raw in enumerate(raw_layouts or [], start=1):
            overrides = dict(raw or {})
            building_number = parse_int_safe(overrides.pop("building_number", None))
            space_type = overrides.pop("space_type", None)
            overrides.pop("space_type_index", None)
            overrides.pop("space_index", None)
            layout = make_layout(space_type, self.common(), **overrides)
            layout["is_finished"] = bool(layout.get("is_finished"))
            layout["is_exterior"] = bool(layout.get("is_exterior"))
            if space_type == "Building":
                tree.add_building(building_number or position, layout)
            else:
                tree.attach(building_number, layout)
        return tree.write(self.writer)

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
            deed["deed_type"] = map_deed_type(sale["deed_code"])
            for field in ("book", "page", "instrument_number"):
                if sale[field]:
                    deed[field] = str(sale[field])
            deed_path = self.writer.write(f"deed_{position}", deed)
            self.relationships.write(sale_path, deed_path)

            document = dict(self.common())
            document.update({"document_type": "Title", "original_url": sale["url"]})
            self.relationships.write(deed_path, self.writer.write(f"file_{position}", document))
            paths.append(sale_path)
        return paths

    def write_permits(self):
        paths = []
        for permit in parse_permits(self.soup):
            issue_date = to_iso_from_mdy(permit["issue_date"])
            improvement = dict(self.common())
            improvement.update({
                "improvement_type": map_improvement_type(permit["description"]),
                "improvement_status": "Permitted",
                "completion_date": issue_date,
                "contractor_type": "Unknown",
                "permit_required": True,
                "permit_number": permit["permit_number"],
                "permit_issue_date": issue_date,
            })
            paths.append(self.writer.write_next("property_improvement", improvement))
        return paths

    def write_lot(self):
        lot = lot_from_land_lines(parse_land_lines(self.soup))
        if lot is None:
            return None
        record = dict(self.common())
        record.update(lot)
        return self.writer.write("lot", record)


def main(base_dir=".", strict=None):
    strict = resolve_strict(strict, STRICT_CODES)
    extraction = HillsboroughExtraction(base_dir, strict)
    extraction.run()
    print_status(
        f"Hillsborough extraction complete: {len(extraction.relationships.written)} relationships"
    )
    return extraction.data_dir


if __name__ == "__main__":
    main()
