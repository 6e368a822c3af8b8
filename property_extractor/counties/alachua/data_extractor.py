"""Alachua County data extractor.

Reads input.html (qPublic parcel page), unnormalized_address.json,
property_seed.json and the owners/*.json sidecars, and writes the property
graph into data/.
"""

import logging
import os
import re

from ...code_mapper import UnmappedCodeError
from ...owners import is_valid_first_or_last_name, is_valid_middle_name, parse_owners_from_text
from ...records import (
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
    room_layouts,
    structure_record,
    write_property_type_error,
)
from ...relationships import RelationshipWriter
from ...text_utils import (
    money_to_number,
    normalize_id,
    parse_float_safe,
    parse_int_safe,
    to_iso_from_mdy,
)
from ...utils import (
    ensure_directory,
    load_optional_json,
    load_sidecars,
    print_status,
    resolve_strict,
    source_request,
)
from .codes import PROPERTY_USE_MAPPER, map_deed_type, map_property_use
from .layout_extractor import map_sub_area_space_type
from .page import (
    load_page,
    parse_building_summaries,
    parse_owner_mailing_addresses,
    parse_permits,
    parse_property_use_code,
    parse_sales,
    parse_sec_twp_rng,
    parse_summary,
    parse_valuations_certified,
    parse_valuations_working,
    parse_zoning,
)

logger = logging.getLogger(__name__)

STRICT_CODES = False
QPUBLIC_URL = "https://qpublic.schneidercorp.com/Application.aspx"

UNIT_TYPES = {
    "DUPLEX": ("Two", 2),
    "TRI/QUADRAPLEX": ("TwoToFour", 3),
}

EXTERIOR_WALL_MAP = {
    "ABOVE AVERAGE": "Wood Siding",
    "ALUMINUM SIDNG": "Metal Siding",
    "ASBESTOS": "Fiber Cement Siding",
    "AVERAGE": "Wood Siding",
    "BD AND BAT AAV": "Wood Siding",
    "BELOW AVERAGE": "Wood Siding",
    "BOARD & BATTEN": "Wood Siding",
    "CB STUCCO": "Stucco",
    "CEDAR/REDWOOD": "Wood Siding",
    "CEMENT BRICK": "Brick",
    "COMMON BRICK": "Brick",
    "CONCRETE BLOCK": "Concrete Block",
    "CORR ASBESTOS": "Fiber Cement Siding",
    "CORR METAL": "Metal Siding",
    "FACE BRICK": "Brick",
    "GLASS/THERMO.": "Curtain Wall",
    "HARDIBOARD": "Fiber Cement Siding",
    "MINIMUM": "Wood Siding",
    "MODULAR METAL": "Metal Siding",
    "N/A": "Wood Siding",
    "NONE": "Wood Siding",
    "PRECAST PANEL": "Precast Concrete",
    "PRE-FAB PANEL": "Precast Concrete",
    "PRE-FINSH METL": "Metal Siding",
    "REINF CONCRETE": "Precast Concrete",
    "SINGLE SIDING": "Wood Siding",
    "STONE": "Natural Stone",
    "TILE/WD STUCCO": "Stucco",
    "WALL BOARD": "EIFS",
    "WOOD SHEATH": "Wood Siding",
    "WOOD SHINGLE": "Wood Siding",
}

PERMIT_TYPE_RULES = [
    ("ROOF", "Roof"),
    ("POOL", "Pool"),
    ("SCREEN", "ScreenEnclosure"),
    ("FENCE", "Fence"),
    ("REMODEL", "InteriorRenovation"),
    ("RENOV", "InteriorRenovation"),
    ("WINDOW", "WindowsDoors"),
    ("DOOR", "WindowsDoors"),
    ("HVAC", "HVAC"),
    ("A/C", "HVAC"),
    ("AIR", "HVAC"),
    ("ELECTR", "Electrical"),
    ("PLUMB", "Plumbing"),
    ("PAVE", "Paving"),
    ("DOCK", "DockAndShore"),
    ("SHORE", "DockAndShore"),
    ("DECK", "Deck"),
    ("SIGN", "Signage"),
    ("DEMOL", "Demolition"),
    ("IRRIG", "Irrigation"),
    ("SOLAR", "Solar"),
]


def map_permit_type(type_text):
    text = (type_text or "").upper()
    if not text:
        return None
    for needle, improvement_type in PERMIT_TYPE_RULES:
        if needle in text:
            return improvement_type
    return "Other"


def map_permit_status(active_text):
    normalized = (active_text or "").strip().lower()
    if normalized in ("yes", "y"):
        return "Active"
    if normalized in ("no", "n"):
        return "Completed"
    return None


def area_text(value):
    number = parse_int_safe(value)
    if not number:
        return None
    return f"{number:,} sq ft"


def normalize_owner(owner, owners_by_date):
    """Fill a short first name from a matching current owner (same last name)"""
    current = (owners_by_date or {}).get("current")
    if not isinstance(current, list) or not owner.get("first_name") or not owner.get("last_name"):
        return owner
    for candidate in current:
        if candidate.get("type") != "person" or not candidate.get("last_name"):
            continue
        if candidate["last_name"].lower() != owner["last_name"].lower():
            continue
        if (candidate.get("first_name") or "").lower().startswith(owner["first_name"].lower()):
            middle = candidate.get("middle_name")
            return dict(
                owner,
                first_name=candidate["first_name"],
                middle_name=middle if middle is not None else owner.get("middle_name"),
            )
    return owner


def valid_person(owner):
    if not is_valid_first_or_last_name(owner.get("first_name")):
        return None
    if not is_valid_first_or_last_name(owner.get("last_name")):
        return None
    if owner.get("middle_name") and not is_valid_middle_name(owner["middle_name"]):
        owner = dict(owner, middle_name=None)
    return owner


class AlachuaExtraction:
    def __init__(self, base_dir, strict):
        self.base_dir = base_dir
        self.strict = strict
        self.data_dir = os.path.join(base_dir, "data")
        ensure_directory(self.data_dir)

        self.soup = load_page(os.path.join(base_dir, "input.html"))
        self.unaddr = load_optional_json(os.path.join(base_dir, "unnormalized_address.json")) or {}
        self.seed = load_optional_json(os.path.join(base_dir, "property_seed.json")) or {}
        self.summary = parse_summary(self.soup)

        self.parcel_id = self.summary["parcel_id"] or self.seed.get("parcel_id")
        self.prop_id = normalize_id(self.summary["prop_id"]) or normalize_id(
            self.seed.get("prop_id") or self.seed.get("property_id") or self.seed.get("parcel_id")
        )
        candidates = property_id_candidates(self.prop_id, self.parcel_id)
        sidecars = load_sidecars(base_dir)
        self.entries = {key: resolve_property_entry(value, candidates) for key, value in sidecars.items()}

        self.request_identifier = (
            self.unaddr.get("request_identifier") or self.seed.get("request_identifier") or self.parcel_id
        )
        self.source = source_request(self.unaddr, self.seed, QPUBLIC_URL)

        buildings = parse_building_summaries(self.soup)
        first = buildings[0] if buildings else {"left": {}, "right": {}}
        self.building = dict(first["left"], **first["right"])

        self.writer = OutputWriter(self.data_dir)
        self.relationships = RelationshipWriter(self.data_dir)
        self.registry = EntityRegistry(self.writer, request_identifier=self.request_identifier)

    def common(self):
        return {"source_http_request": dict(self.source), "request_identifier": self.request_identifier}

    def run(self):
        property_record = self.write_property()
        property_path = "./property.json"
        structures = self.write_structures()
        utilities = self.write_utilities()
        improvements = self.write_permits()
        buildings, standalone = self.write_layouts(property_record, len(structures))

        if buildings:
            self.relationships.write_many(property_path, [b["path"] for b in buildings])
        else:
            self.relationships.write_many(property_path, standalone)
        self.relationships.write_many(property_path, improvements)
        for building in buildings:
            self.relationships.write_many(building["path"], building["child_paths"])
        link_to_buildings(self.relationships, buildings, structures, property_path)
        link_to_buildings(self.relationships, buildings, utilities, property_path)

        self.relationships.write(property_path, self.write_address())
        self.relationships.write(property_path, self.write_lot())
        current_owners = self.write_owners()
        self.write_taxes()
        self.write_sales(current_owners)

    def write_property(self):
        raw_use = self.summary["property_use"]
        code, _ = parse_property_use_code(raw_use)
        if raw_use and code not in PROPERTY_USE_MAPPER:
            if self.strict:
                raise UnmappedCodeError(code or raw_use)
            write_property_type_error(self.writer, code or raw_use)
        use = map_property_use(code, strict=False)

        building_type = (self.building.get("type") or "").upper()
        units_type, units = UNIT_TYPES.get(building_type, ("One", 1))
        heated = self.building.get("heated area")

        record = {
            "parcel_identifier": self.parcel_id or "",
            "ownership_estate_type": use["ownership_estate_type"],
            "build_status": use["build_status"],
            "structure_form": use["structure_form"],
            "property_usage_type": use["property_usage_type"],
            "property_type": use["property_type"],
            "number_of_units_type": units_type,
            "property_structure_built_year": parse_int_safe(self.building.get("actual year built")),
            "property_effective_built_year": parse_int_safe(self.building.get("effective year built")),
            "livable_floor_area": area_text(heated),
            "total_area": area_text(self.building.get("total area")),
            "area_under_air": area_text(heated),
            "property_legal_description_text": self.summary["legal_description"],
            "subdivision": self.summary["subdivision"],
            "zoning": parse_zoning(self.soup),
            "number_of_units": units,
            "historic_designation": False,
        }
        record.update(self.common())
        apply_unit_invariant(record)
        self.writer.write("property", record)
        return record

    def base_structure(self):
        structure = structure_record()
        roofing = (self.building.get("roofing") or "").upper()
        structure.update({
            "exterior_wall_material_primary": EXTERIOR_WALL_MAP.get(
                (self.building.get("exterior walls") or "").upper()
            ),
            "interior_wall_surface_material_primary": (
                "Drywall" if (self.building.get("interior walls") or "").upper() == "DRYWALL" else None
            ),
            "roof_covering_material": "Architectural Asphalt Shingle" if roofing == "ASPHALT" else None,
            "roof_material_type": "Shingle" if roofing == "ASPHALT" else None,
            "roof_design_type": "Gable" if (self.building.get("roof type") or "").upper() == "GABLE/HIP" else None,
            "number_of_stories": parse_float_safe(self.building.get("stories")),
            "finished_base_area": parse_int_safe(self.building.get("heated area")),
        })
        return structure

    def sidecar_items(self, entry_key, key, plural=None):
        items = []
        for item in normalize_sidecar(self.entries[entry_key], key, plural):
            data = dict(item["data"])
            data["source_http_request"] = data.get("source_http_request") or dict(self.source)
            data["request_identifier"] = data.get("request_identifier") or self.request_identifier
            items.append({"data": data, "building_index": item["building_index"]})
        return items

    def write_structures(self):
        items = self.sidecar_items("structures", "structure") or [{"data": {}, "building_index": None}]
        written = []
        for item in items:
            structure = self.base_structure()
            structure.update(self.common())
            structure.update(item["data"])
            path = self.writer.write_next("structure", structure)
            written.append({"path": path, "building_index": item["building_index"]})
        return written

    def write_utilities(self):
        written = []
        for item in self.sidecar_items("utilities", "utility", plural="utilities"):
            path = self.writer.write_next("utility", item["data"])
            written.append({"path": path, "building_index": item["building_index"]})
        return written

    def write_permits(self):
        paths = []
        base_request_id = self.request_identifier or self.parcel_id or self.prop_id or "permit"
        for position, permit in enumerate(parse_permits(self.soup), start=1):
            number = permit["permit_number"]
            improvement = {
                "improvement_type": map_permit_type(permit["type"]) or "Other",
                "improvement_status": map_permit_status(permit["active"]),
                "improvement_action": permit["type"],
                "permit_number": number,
                "permit_issue_date": to_iso_from_mdy(permit["issue_date"]),
                "completion_date": None,
                "permit_required": True if number else None,
                "estimated_cost_amount": money_to_number(permit["value"]),
                "request_identifier": (
                    f"{base_request_id}-{number}" if number else f"{base_request_id}-permit-{position}"
                ),
            }
            cleaned = {
                key: value.strip() if isinstance(value, str) else value
                for key, value in improvement.items()
                if value is not None and not (isinstance(value, str) and not value.strip())
            }
            paths.append(self.writer.write_next("property_improvement", cleaned))
        return paths

    def fallback_rooms(self):
        """Rooms from the first building's bedroom/bathroom counts, or one living area"""
        rooms = [make_layout("Bedroom", self.common(), floor_level="1st Floor")
                 for _ in range(parse_int_safe(self.building.get("bedrooms")) or 0)]
        bathrooms = parse_float_safe(self.building.get("bathrooms"))
        if bathrooms is not None:
            full = int(bathrooms)
            fraction = bathrooms - full
            half = round(fraction * 2) if fraction >= 0.5 else 0
            rooms.extend(room_layouts(0, full, half, self.common()))
        if not rooms:
            rooms.append(make_layout("Living Area", self.common(), floor_level="1st Floor"))
        return rooms

    def write_layouts(self, property_record, structure_count):
        entry = self.entries["layouts"] or {}
        raw_layouts = entry.get("layouts") if isinstance(entry, dict) else None
        layout_buildings = entry.get("buildings") if isinstance(entry, dict) else None
        raw_layouts = raw_layouts if isinstance(raw_layouts, list) else []
        layout_buildings = layout_buildings if isinstance(layout_buildings, list) else []

        is_land = property_record["property_type"] == "LandParcel"
        total_area = parse_int_safe(self.building.get("total area"))
        heated_area = parse_int_safe(self.building.get("heated area"))
        tree = LayoutTree()

        metas = {}
        if layout_buildings:
            for index, building in enumerate(layout_buildings, start=1):
                building = building or {}
                size = (
                    parse_int_safe(building.get("total_area_sq_ft"))
                    or parse_int_safe(building.get("heated_area_sq_ft"))
                    or total_area
                    or heated_area
                )
                tree.add_building(index, make_layout(
                    "Building", self.common(), size_square_feet=size, floor_level="1st Floor"
                ))
                metas[index] = building
        elif not is_land:
            for index in range(1, max(structure_count, 1) + 1):
                tree.add_building(index, make_layout(
                    "Building", self.common(), size_square_feet=total_area or heated_area,
                    floor_level="1st Floor",
                ))

        for raw in raw_layouts:
            overrides = dict(raw or {})
            parent = parse_int_safe(overrides.pop("parent_building_index", None))
            space_type = overrides.pop("space_type", None) or "Living Area"
            if space_type == "Interior Space":
                space_type = "Living Area"
            layout = make_layout(space_type, self.common(), **overrides)
            layout["floor_level"] = layout["floor_level"] or "1st Floor"
            tree.attach(parent, layout)

        if tree.buildings:
            for building in tree.buildings:
                index = building["index"]
                meta = metas.get(index)
                if tree.child_count(index) or meta is None:
                    continue
                for room in room_layouts(
                    parse_int_safe(meta.get("bedrooms")) or 0,
                    parse_int_safe(meta.get("full_bathrooms")) or 0,
                    parse_int_safe(meta.get("half_bathrooms")) or 0,
                    self.common(),
                ):
                    tree.attach(index, room)
                for sub_area in meta.get("sub_areas") or []:
                    space_type = map_sub_area_space_type(sub_area)
                    if space_type:
                        tree.attach(index, make_layout(
                            space_type, self.common(), floor_level="1st Floor",
                            size_square_feet=parse_int_safe(sub_area.get("square_feet")),
                        ))
            if not tree.has_children():
                for room in self.fallback_rooms():
                    tree.attach(tree.buildings[0]["index"], room)
        elif not tree.standalone and not is_land:
            for room in self.fallback_rooms():
                tree.attach(None, room)

        return tree.write(self.writer)

    def write_address(self):
        lines = [line for line in (self.summary["address_line1"], self.summary["address_line2"]) if line]
        full_address = ", ".join(lines) or (str(self.unaddr.get("full_address") or "").strip() or None)
        latitude = self.unaddr.get("latitude")
        longitude = self.unaddr.get("longitude")
        address = {
            "unnormalized_address": full_address,
            "latitude": latitude if isinstance(latitude, (int, float)) else None,
            "longitude": longitude if isinstance(longitude, (int, float)) else None,
            "county_name": (
                self.unaddr.get("county_jurisdiction") or self.unaddr.get("county_name") or "Alachua"
            ),
            "country_code": "US",
        }
        address.update(parse_sec_twp_rng(self.summary["sec_twp_rng"]))
        address.update(self.common())
        return self.writer.write("address", address)

    def write_lot(self):
        acres = self.summary["acres"]
        lot = {
            "lot_type": lot_type_for_acres(acres),
            "lot_length_feet": None,
            "lot_width_feet": None,
            "lot_area_sqft": round(acres * 43560) if acres else None,
            "lot_size_acre": acres,
            "landscaping_features": None,
            "view": None,
            "fencing_type": None,
            "fence_height": None,
            "fence_length": None,
            "driveway_material": None,
            "driveway_condition": None,
            "lot_condition_issues": None,
        }
        return self.writer.write("lot", lot)

    def owners_by_date(self):
        entry = self.entries["owners"] or {}
        return entry.get("owners_by_date") or {}

    def owner_path(self, owner):
        if owner.get("type") == "company":
            return self.registry.company(owner.get("name") or "")
        if owner.get("type") == "person":
            person = valid_person(normalize_owner(owner, self.owners_by_date()))
            return self.registry.person(person) if person else None
        return None

    def write_owners(self):
        """Current owners with their mailing addresses; returns owner file paths"""
        owners_by_date = self.owners_by_date()
        current = owners_by_date.get("current") if isinstance(owners_by_date.get("current"), list) else []
        if not current:
            dated = sorted(k for k in owners_by_date if re.match(r"^\d{4}-\d{2}-\d{2}$", k))
            if dated and owners_by_date[dated[-1]]:
                current = owners_by_date[dated[-1]]

        raw_addresses, unique_addresses = parse_owner_mailing_addresses(self.soup)
        mailing_paths = []
        if current:
            for position, address in enumerate(unique_addresses, start=1):
                mailing = {"unnormalized_address": address, "latitude": None, "longitude": None}
                mailing.update(self.common())
                mailing_paths.append(self.writer.write(f"mailing_address_{position}", mailing))

        owner_paths = []
        for position, owner in enumerate(current):
            if not owner or not owner.get("type"):
                continue
            path = self.owner_path(owner)
            if not path:
                continue
            owner_paths.append(path)
            if not mailing_paths:
                continue
            mailing_index = None
            if position < len(raw_addresses):
                mailing_index = unique_addresses.index(raw_addresses[position])
            if mailing_index is None:
                mailing_index = min(position, len(mailing_paths) - 1)
            self.relationships.write(path, mailing_paths[mailing_index])
        return owner_paths

    def write_taxes(self):
        years = []
        working = parse_valuations_working(self.soup)
        if working:
            years.append(working)
        years.extend(parse_valuations_certified(self.soup))
        for valuation in years:
            tax = {
                "tax_year": valuation["year"],
                "property_assessed_value_amount": valuation["assessed"] or None,
                "property_market_value_amount": valuation["just_market"] or None,
                "property_building_amount": valuation["improvement"] or None,
                "property_land_amount": valuation["land"] or None,
                "property_taxable_value_amount": valuation["taxable"] or 0.0,
                "monthly_tax_amount": None,
                "period_end_date": None,
                "period_start_date": None,
                "yearly_tax_amount": None,
                "first_year_on_tax_roll": None,
                "first_year_building_on_tax_roll": None,
            }
            self.writer.write(f"tax_{valuation['year']}", tax)

    def write_sales(self, current_owner_paths):
        sales = sorted(parse_sales(self.soup), key=lambda s: to_iso_from_mdy(s["date"]) or "", reverse=True)
        sale_refs = []
        has_buyer = {}

        for position, sale in enumerate(sales, start=1):
            iso_date = to_iso_from_mdy(sale["date"])
            sale_path = self.writer.write(f"sales_history_{position}", {
                "ownership_transfer_date": iso_date,
                "purchase_price_amount": sale["price"] or 0,
            })
            has_buyer[sale_path] = False

            if any(sale.get(k) for k in ("instrument", "book", "page", "instrument_number", "clerk_url")):
                deed = {"deed_type": map_deed_type(sale["instrument"])}
                if sale["book"]:
                    deed["book"] = sale["book"]
                if sale["page"]:
                    deed["page"] = sale["page"]
                if sale["instrument_number"]:
                    deed["instrument_number"] = sale["instrument_number"]
                deed_path = self.writer.write(f"deed_{position}", deed)
                if sale["clerk_url"]:
                    file_path = self.writer.write(f"file_{position}", {
                        "file_format": "txt",
                        "name": f"{(iso_date or '')[:4]} Clerk Link",
                        "original_url": sale["clerk_url"],
                        "ipfs_url": None,
                        "document_type": "Title",
                    })
                    self.relationships.write(deed_path, file_path)
                self.relationships.write(sale_path, deed_path)

            for owner in parse_owners_from_text(sale["grantee"] or "")["owners"]:
                path = self.owner_path(owner)
                if path:
                    self.relationships.write(sale_path, path)
                    has_buyer[sale_path] = True
            sale_refs.append((iso_date, sale_path))

        owners_by_date = self.owners_by_date()
        by_date = {iso_date: path for iso_date, path in sale_refs if iso_date}
        for date_key, owners in owners_by_date.items():
            sale_path = by_date.get(date_key)
            if not sale_path or has_buyer[sale_path]:
                continue
            for owner in owners or []:
                path = self.owner_path(owner) if owner else None
                if path:
                    self.relationships.write(sale_path, path)
                    has_buyer[sale_path] = True

        if sale_refs and not has_buyer[sale_refs[0][1]]:
            self.relationships.write_many(sale_refs[0][1], current_owner_paths)


def main(base_dir=".", strict=None):
    strict = resolve_strict(strict, STRICT_CODES)
    extraction = AlachuaExtraction(base_dir, strict)
    extraction.run()
    print_status(
        f"Alachua extraction complete: {len(extraction.relationships.written)} relationships in {extraction.data_dir}"
    )
    return extraction.data_dir


if __name__ == "__main__":
    main()
