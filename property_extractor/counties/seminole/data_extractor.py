"""Seminole County data extractor.

input.html wraps the appraiser's parcel JSON in a <pre>. Unknown DOR codes
abort the run unless soft mode is forced through EXTRACTOR_STRICT_CODES.
"""

import logging
import os

from ...code_mapper import UnmappedCodeError
from ...records import (
    EntityRegistry,
    LayoutTree,
    OutputWriter,
    apply_unit_invariant,
    link_to_buildings,
    make_layout,
    normalize_sidecar,
    property_id_candidates,
    resolve_property_entry,
    write_property_type_error,
)
from ...relationships import RelationshipWriter
from ...text_utils import parse_int_safe
from ...utils import (
    ensure_directory,
    load_optional_json,
    load_sidecars,
    print_status,
    resolve_strict,
    source_request,
)
from .codes import (
    PROPERTY_USE_MAPPER,
    map_deed_type,
    map_file_document_type,
    map_improvement_action,
    map_improvement_status,
    map_improvement_type,
    map_lot_type,
    map_property_use,
    map_public_utility_type,
    map_sale_type,
    normalize_floor_level,
    normalize_space_type,
)
from .page import (
    basename_from_url,
    building_number_of,
    file_format_from_url,
    load_input,
    normalize_address_string,
    parse_address_components,
    parse_year_tokens,
    pick_first_string,
    to_currency,
    to_iso_date,
    to_number,
)
from .structure_extractor import build_structure_data

logger = logging.getLogger(__name__)

STRICT_CODES = True
APPRAISER_URL = "https://parcelviewer.scpafl.org/"

BOOK_KEYS = ("book", "deedBook", "recordBook", "documentBook", "platBook")
PAGE_KEYS = ("page", "deedPage", "recordPage", "documentPage", "platPage")
VOLUME_KEYS = ("volume", "deedVolume", "recordVolume", "documentVolume")
INSTRUMENT_KEYS = (
    "instrumentNumber", "instrumentNo", "instrument", "recordingNumber",
    "recordingNo", "recordNumber", "docNumber", "documentNumber",
)
EXTERIOR_WALL_SECONDARY = {
    "Brick Accent", "Decorative Block", "Metal Trim", "Stone Accent",
    "Stucco Accent", "Vinyl Accent", "Wood Trim",
}
NO_FLOOD_INSURANCE_ZONES = {"NO", "NONE", "X"}


def links_to_current_owners(sale):
    """Vacant-land and qualification code 18 sales do not convey to the current owners"""
    if str(sale.get("vacImp") or "").upper() == "V":
        return False
    if str(sale.get("vacImpDesc") or "").upper() == "VACANT":
        return False
    return str(sale.get("qualificationCode") or "").strip() != "18"


def sale_sort_key(sale):
    return to_iso_date(sale.get("saleDate")) or ""


def flood_insurance_required(zone):
    if not zone:
        return None
    return zone.upper() not in NO_FLOOD_INSURANCE_ZONES


class SeminoleExtraction:
    def __init__(self, base_dir, strict):
        self.base_dir = base_dir
        self.strict = strict
        self.data_dir = os.path.join(base_dir, "data")
        ensure_directory(self.data_dir)

        self.input = load_input(os.path.join(base_dir, "input.html"))
        self.unaddr = load_optional_json(os.path.join(base_dir, "unnormalized_address.json")) or {}
        self.seed = load_optional_json(os.path.join(base_dir, "property_seed.json")) or {}

        self.parcel_id = self.seed.get("parcel_id")
        self.request_identifier = (
            self.seed.get("request_identifier")
            or (str(self.parcel_id).strip() if self.parcel_id else None)
            or (str(self.input["apprId"]) if self.input.get("apprId") else None)
            or (str(self.input["masterId"]) if self.input.get("masterId") else None)
            or "unknown"
        )
        candidates = property_id_candidates(self.input.get("apprId"), self.parcel_id)
        sidecars = load_sidecars(base_dir)
        self.entries = {key: resolve_property_entry(value, candidates) for key, value in sidecars.items()}
        self.source = source_request(self.unaddr, self.seed, APPRAISER_URL)

        self.writer = OutputWriter(self.data_dir)
        self.relationships = RelationshipWriter(self.data_dir)
        self.registry = EntityRegistry(
            self.writer, request_identifier=self.request_identifier, source_http_request=self.source
        )

    def common(self):
        return {"source_http_request": dict(self.source), "request_identifier": self.request_identifier}

    def primary_building(self):
        buildings = self.input.get("buildingDetails") or []
        return buildings[0] if buildings and isinstance(buildings[0], dict) else {}

    def run(self):
        property_path = self.write_property()
        self.relationships.write_many(property_path, self.write_permits())
        self.relationships.write(property_path, self.write_address())
        mailing_path = self.write_mailing_address()
        self.relationships.write(property_path, self.write_lot())
        self.write_taxes()

        sales = self.write_sales()
        owner_paths = self.registry.owners(self.current_owners())
        buyer_sale = next((s for s in reversed(sales) if links_to_current_owners(s["sale"])), None)
        if buyer_sale is None and sales:
            buyer_sale = sales[-1]
        if buyer_sale:
            self.relationships.write_many(buyer_sale["path"], owner_paths)
        if mailing_path:
            for path in owner_paths:
                self.relationships.write(path, mailing_path)

        buildings, standalone = self.write_layouts()
        self.relationships.write_many(property_path, [b["path"] for b in buildings] or standalone)
        for building in buildings:
            self.relationships.write_many(building["path"], building["child_paths"])
        link_to_buildings(self.relationships, buildings, self.write_structures(), property_path)
        link_to_buildings(self.relationships, buildings, self.write_utilities(), property_path)

        self.relationships.write(property_path, self.write_flood())
        self.write_files()

    def write_property(self):
        raw_use = self.input.get("dor")
        if raw_use not in PROPERTY_USE_MAPPER:
            if self.strict:
                raise UnmappedCodeError(raw_use)
            write_property_type_error(self.writer, raw_use)
        use = map_property_use(raw_use, strict=False)

        building = self.primary_building()
        living = to_number(building.get("livingArea") or building.get("baseArea") or self.input.get("livingAreaCalc"))
        gross = to_number(building.get("grossArea") or self.input.get("grossAreaCalc"))
        built, effective = parse_year_tokens(building.get("yearBlt"))

        record = dict(self.common())
        record.update({
            "parcel_identifier": self.parcel_id,
            "property_legal_description_text": self.input.get("legal") or None,
            "property_structure_built_year": built,
            "property_effective_built_year": effective,
            "livable_floor_area": str(living) if living is not None else None,
            "area_under_air": str(living) if living is not None else None,
            "total_area": str(gross) if gross is not None else None,
            "property_type": use["property_type"],
            "ownership_estate_type": use["ownership_estate_type"],
            "build_status": use["build_status"],
            "structure_form": use["structure_form"],
            "property_usage_type": use["property_usage_type"],
            "number_of_units_type": "One",
            "number_of_units": 1,
            "zoning": self.input.get("zoning") or None,
            "subdivision": self.input.get("subName") or self.input.get("platName") or None,
        })
        apply_unit_invariant(record)
        return self.writer.write("property", record)

    def write_permits(self):
        paths = []
        for position, permit in enumerate(p for p in self.input.get("permitDetails") or [] if p):
            number = pick_first_string(permit, ("permitKey", "permitNo", "permitId"))
            improvement = dict(self.common())
            improvement.update({
                "application_received_date": to_iso_date(permit.get("dateAdded")),
                "completion_date": to_iso_date(permit.get("coDate")),
                "contractor_type": None,
                "final_inspection_date": None,
                "improvement_action": map_improvement_action(permit.get("permitDesc")),
                "improvement_status": map_improvement_status(permit.get("statusCode")),
                "improvement_type": map_improvement_type(permit.get("permitDesc"), permit.get("permitCode")),
                "is_disaster_recovery": None,
                "is_owner_builder": None,
                "permit_close_date": to_iso_date(permit.get("coDate")),
                "permit_issue_date": to_iso_date(permit.get("permitDate")),
                "permit_number": number,
                "permit_required": True,
                "private_provider_inspections": None,
                "private_provider_plan_review": None,
                "request_identifier": number or f"{self.request_identifier}-permit-{position + 1}",
            })
            paths.append(self.writer.write_next("property_improvement", improvement))
        return paths

    def write_address(self):
        raw = self.unaddr.get("full_address") or self.input.get("situsAddress") or ""
        parts = parse_address_components(raw, self.input.get("mailingAddress")) or {}
        latitude = self.unaddr.get("latitude")
        longitude = self.unaddr.get("longitude")
        address = dict(self.common())
        address.update({
            "street_number": parts.get("street_number"),
            "street_pre_directional_text": parts.get("street_pre_directional_text"),
            "street_name": parts.get("street_name"),
            "street_suffix_type": parts.get("street_suffix_type"),
            "street_post_directional_text": parts.get("street_post_directional_text"),
            "unit_identifier": None,
            "city_name": parts.get("city_name"),
            "municipality_name": None,
            "state_code": parts.get("state_code"),
            "postal_code": parts.get("postal_code"),
            "plus_four_postal_code": parts.get("plus_four_postal_code"),
            "county_name": "Seminole",
            "country_code": "US",
            "latitude": latitude if isinstance(latitude, (int, float)) else None,
            "longitude": longitude if isinstance(longitude, (int, float)) else None,
            "route_number": None,
            "township": None,
            "range": None,
            "section": None,
            "block": None,
            "lot": None,
        })
        return self.writer.write("address", address)

    def write_mailing_address(self):
        raw = self.input.get("mailingAddress") or ""
        parts = parse_address_components(raw, raw)
        keys = ("street_number", "street_name", "city_name", "state_code", "postal_code")
        if not parts or not any(parts[key] for key in keys):
            return None
        mailing = dict(self.common())
        mailing.update({
            "unnormalized_address": normalize_address_string(raw) or None,
            "latitude": None,
            "longitude": None,
        })
        return self.writer.write("mailing_address", mailing)

    def write_lot(self):
        land = (self.input.get("landDetails") or [{}])[0] or {}
        acres = self.input.get("gisAcres")
        acres = acres if isinstance(acres, (int, float)) and not isinstance(acres, bool) else None
        square_feet = to_number(self.input.get("parcelSquareFt"))
        if square_feet is None and acres is not None:
            square_feet = round(acres * 43560)

        lot = dict(self.common())
        lot.update({
            "lot_type": map_lot_type(land.get("method"), acres),
            "lot_length_feet": to_number(land.get("landDepth")),
            "lot_width_feet": to_number(land.get("landFrontage")),
            "lot_area_sqft": square_feet,
            "landscaping_features": None,
            "view": None,
            "fencing_type": None,
            "fence_height": None,
            "fence_length": None,
            "driveway_material": None,
            "driveway_condition": None,
            "lot_condition_issues": None,
            "lot_size_acre": acres,
        })
        return self.writer.write("lot", lot)

    def write_taxes(self):
        paths = []
        for position, row in enumerate(self.input.get("parcelValueHistory") or [], start=1):
            year = parse_int_safe(row.get("taxYear"))
            assessed = (to_number(row.get("taxableValue")) or 0) + (to_number(row.get("exemptValue")) or 0)
            tax = dict(self.common())
            tax.update({
                "tax_year": year,
                "property_assessed_value_amount": to_currency(assessed),
                "property_market_value_amount": to_currency(row.get("totalJustValue")),
                "property_building_amount": to_currency(row.get("apprBldg")),
                "property_land_amount": to_currency(row.get("apprLand")),
                "property_taxable_value_amount": to_currency(row.get("taxableValue")),
                "monthly_tax_amount": None,
                "yearly_tax_amount": to_currency(row.get("taxBillAmt")),
                "period_start_date": None,
                "period_end_date": None,
            })
            paths.append(self.writer.write(f"tax_{year if year else position}", tax))
        return paths

    def write_sales(self):
        """Sales oldest first, each with its deed; returns [{"path", "sale"}]"""
        written = []
        sales = sorted((s for s in self.input.get("saleDetails") or [] if isinstance(s, dict)), key=sale_sort_key)
        for position, sale in enumerate(sales, start=1):
            sale_record = dict(self.common())
            sale_record.update({
                "ownership_transfer_date": to_iso_date(sale.get("saleDate")),
                "purchase_price_amount": to_currency(sale.get("saleAmt")),
                "sale_type": map_sale_type(sale.get("saleCode")),
            })
            if sale.get("saleKeyId"):
                sale_record["request_identifier"] = str(sale["saleKeyId"])
            sale_path = self.writer.write(f"sales_history_{position}", sale_record)

            deed = {"request_identifier": sale_record["request_identifier"]}
            deed_type = map_deed_type(sale)
            if deed_type:
                deed["deed_type"] = deed_type
            for field, keys in (
                ("book", BOOK_KEYS), ("page", PAGE_KEYS),
                ("volume", VOLUME_KEYS), ("instrument_number", INSTRUMENT_KEYS),
            ):
                value = pick_first_string(sale, keys)
                if value:
                    deed[field] = value
            self.relationships.write(sale_path, self.writer.write(f"deed_{position}", deed))
            written.append({"path": sale_path, "sale": sale})
        return written

    def current_owners(self):
        entry = self.entries["owners"] or {}
        return (entry.get("owners_by_date") or {}).get("current") or []

    def write_layouts(self):
        entry = self.entries["layouts"] or {}
        raw_layouts = entry.get("layouts") if isinstance(entry, dict) else None
        tree = LayoutTree()
        for position, raw in enumerate(raw_layouts or [], start=1):
            overrides = dict(raw or {})
            overrides.pop("id", None)
            building_number = parse_int_safe(overrides.pop("building_number", None))
            space_type = normalize_space_type(overrides.pop("space_type", None))
            if not space_type:
                continue
            overrides["floor_level"] = normalize_floor_level(overrides.get("floor_level"))
            overrides["is_exterior"] = bool(overrides.get("is_exterior"))
            overrides["is_finished"] = bool(overrides.get("is_finished"))
            layout = make_layout(space_type, self.common(), **overrides)
            if space_type == "Building":
                tree.add_building(building_number or position, layout)
            else:
                tree.attach(building_number, layout)
        return tree.write(self.writer)

    def write_structures(self):
        """Structure sidecar when present, else one structure per building from the page"""
        items = normalize_sidecar(self.entries["structures"], "structure")
        if not items:
            items = normalize_sidecar(build_structure_data(self.input), "structure")
        written = []
        for item in items:
            record = dict(self.common())
            record.update(item["data"])
            if record.get("exterior_wall_material_secondary") not in EXTERIOR_WALL_SECONDARY:
                record["exterior_wall_material_secondary"] = None
            building_index = item["building_index"] or building_number_of(item["data"])
            written.append({"path": self.writer.write_next("structure", record), "building_index": building_index})
        return written

    def write_utilities(self):
        written = []
        for item in normalize_sidecar(self.entries["utilities"], "utility", "utilities"):
            record = dict(self.common())
            record.update(item["data"])
            record["public_utility_type"] = map_public_utility_type(record.get("public_utility_type"))
            record["solar_panel_present"] = record.get("solar_panel_present") is True
            record["solar_inverter_visible"] = record.get("solar_inverter_visible") is True
            building_index = item["building_index"] or building_number_of(item["data"])
            written.append({"path": self.writer.write_next("utility", record), "building_index": building_index})
        return written

    def write_flood(self):
        zone = str(self.input.get("floodZone") or "").strip()
        flood = dict(self.common())
        flood.update({
            "community_id": None,
            "panel_number": None,
            "map_version": None,
            "effective_date": None,
            "evacuation_zone": None,
            "flood_zone": zone or None,
            "flood_insurance_required": flood_insurance_required(zone),
            "fema_search_url": None,
        })
        return self.writer.write("flood_storm_information", flood)

    def write_files(self):
        urls = [fp["downloadURL"] for fp in self.input.get("footPrintImages") or [] if fp and fp.get("downloadURL")]
        urls.extend(self.input[key] for key in ("primaryParcelImageUrl", "mapImageUrl") if self.input.get(key))
        paths = []
        for url in urls:
            document = dict(self.common())
            document.update({
                "document_type": map_file_document_type("PropertyImage"),
                "file_format": file_format_from_url(url),
                "ipfs_url": None,
                "name": basename_from_url(url),
                "original_url": url,
            })
            paths.append(self.writer.write_next("file", document))
        return paths


def main(base_dir=".", strict=None):
    strict = resolve_strict(strict, STRICT_CODES)
    extraction = SeminoleExtraction(base_dir, strict)
    extraction.run()
    print_status(f"Seminole extraction complete: {len(extraction.relationships.written)} relationships")
    return extraction.data_dir


if __name__ == "__main__":
    main()
