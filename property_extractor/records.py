"""Output entities: numbered JSON files, person/company registry, sidecar shapes."""

import logging
import os
from collections import defaultdict

from .owners import owner_key
from .text_utils import clean_text, parse_int_safe
from .utils import write_json

logger = logging.getLogger(__name__)

QUARTER_ACRE = 0.25


def lot_type_for_acres(acres):
    if acres is not None and acres > QUARTER_ACRE:
        return "GreaterThanOneQuarterAcre"
    return "LessThanOrEqualToOneQuarterAcre"


def apply_unit_invariant(property_record):
    """Land parcels carry no unit count"""
    if property_record.get("property_type") == "LandParcel":
        property_record["number_of_units"] = None
        property_record["number_of_units_type"] = None
    return property_record


def resolve_property_entry(data, candidates):
    """Pick data['property_<id>'] for the first candidate id that is present"""
    if not isinstance(data, dict):
        return None
    for candidate in candidates:
        if candidate is None:
            continue
        key = f"property_{candidate}"
        if key in data:
            return data[key]
    return None


def property_id_candidates(*values):
    """Distinct normalized ids, each followed by its digits-only form"""
    out = []
    for value in values:
        normalized = clean_text(value) if value is not None else ""
        if not normalized:
            continue
        for candidate in (normalized, parse_int_safe(normalized)):
            if candidate is None:
                continue
            candidate = str(candidate)
            if candidate not in out:
                out.append(candidate)
    return out


def normalize_sidecar(value, key, plural=None):
    """Reduce the shapes a structure/utility/layout sidecar comes in to a list.

    Accepted shapes:
      None, {} or []                    -> []
      [record, ...]                     -> one item per dict record
      {"buildings": [{key: {...}, "building_index": n}, ...]}
                                        -> one item per building
      {plural: [record, ...]}           -> one item per record ("<key>s" by default)
      {...} (a bare record)             -> [record]

    Each item is {"data": dict, "building_index": int or None}.
    """
    if not value:
        return []

    if isinstance(value, list):
        return [{"data": item, "building_index": None} for item in value if isinstance(item, dict)]

    if not isinstance(value, dict):
        logger.warning(f"Ignoring {key} sidecar of type {type(value).__name__}")
        return []

    buildings = value.get("buildings")
    if isinstance(buildings, list) and buildings:
        items = []
        for building in buildings:
            if not isinstance(building, dict):
                continue
            record = building.get(key) if isinstance(building.get(key), dict) else building
            items.append({
                "data": record,
                "building_index": parse_int_safe(building.get("building_index")),
            })
        return items

    records = value.get(plural or f"{key}s")
    if isinstance(records, list):
        return [{"data": item, "building_index": None} for item in records if isinstance(item, dict)]

    return [{"data": value, "building_index": None}]


class OutputWriter:
    """Writes one JSON file per entity into the data directory"""

    def __init__(self, data_dir):
        self.data_dir = data_dir
        self.counters = defaultdict(int)
        os.makedirs(data_dir, exist_ok=True)

    def next_name(self, prefix):
        self.counters[prefix] += 1
        return f"{prefix}_{self.counters[prefix]}"

    def write(self, name, obj):
        filename = name if name.endswith(".json") else f"{name}.json"
        write_json(os.path.join(self.data_dir, filename), obj)
        return f"./{filename}"

    def write_next(self, prefix, obj):
        return self.write(self.next_name(prefix), obj)


class EntityRegistry:
    """Creates person/company files at most once per identity"""

    def __init__(self, writer, request_identifier=None, source_http_request=None):
        self.writer = writer
        self.request_identifier = request_identifier
        self.source_http_request = source_http_request
        self.paths = {}

    def _common(self):
        common = {}
        if self.source_http_request:
            common["source_http_request"] = self.source_http_request
        if self.request_identifier:
            common["request_identifier"] = self.request_identifier
        return common

    def person(self, record):
        key = owner_key(dict(record, type="person"))
        if not key:
            return None
        if key in self.paths:
            return self.paths[key]
        person = {
            "birth_date": record.get("birth_date"),
            "first_name": record.get("first_name") or "",
            "last_name": record.get("last_name") or "",
            "middle_name": record.get("middle_name") or None,
            "prefix_name": record.get("prefix_name"),
            "suffix_name": record.get("suffix_name"),
            "us_citizenship_status": record.get("us_citizenship_status"),
            "veteran_status": record.get("veteran_status"),
        }
        person.update(self._common())
        path = self.writer.write_next("person", person)
        self.paths[key] = path
        return path

    def company(self, name):
        key = owner_key({"type": "company", "name": name})
        if not key:
            return None
        if key in self.paths:
            return self.paths[key]
        company = {"name": clean_text(name)}
        company.update(self._common())
        path = self.writer.write_next("company", company)
        self.paths[key] = path
        return path

    def owner(self, owner):
        if not owner:
            return None
        if owner.get("type") == "company":
            return self.company(owner.get("name"))
        return self.person(owner)

    def owners(self, owners):
        paths = []
        for owner in owners or []:
            path = self.owner(owner)
            if path and path not in paths:
                paths.append(path)
        return paths


LAYOUT_DEFAULTS = {
    "space_index": None,
    "space_type_index": None,
    "flooring_material_type": None,
    "size_square_feet": None,
    "floor_level": None,
    "has_windows": None,
    "window_design_type": None,
    "window_material_type": None,
    "window_treatment_type": None,
    "is_finished": True,
    "furnished": None,
    "paint_condition": None,
    "flooring_wear": None,
    "clutter_level": None,
    "visible_damage": None,
    "countertop_material": None,
    "cabinet_style": None,
    "fixture_finish_quality": None,
    "design_style": None,
    "natural_light_quality": None,
    "decor_elements": None,
    "pool_type": None,
    "pool_equipment": None,
    "spa_type": None,
    "safety_features": None,
    "view_type": None,
    "lighting_features": None,
    "condition_issues": None,
    "is_exterior": False,
    "pool_condition": None,
    "pool_surface_type": None,
    "pool_water_quality": None,
}


def make_layout(space_type, common=None, **overrides):
    layout = {"space_type": space_type}
    layout.update(LAYOUT_DEFAULTS)
    layout.update(common or {})
    layout.update(overrides)
    return layout


STRUCTURE_FIELDS = (
    "architectural_style_type", "attachment_type", "ceiling_condition", "ceiling_height_average",
    "ceiling_insulation_type", "ceiling_structure_material", "ceiling_surface_material",
    "exterior_door_installation_date", "exterior_door_material", "exterior_wall_condition",
    "exterior_wall_condition_primary", "exterior_wall_condition_secondary",
    "exterior_wall_insulation_type", "exterior_wall_insulation_type_primary",
    "exterior_wall_insulation_type_secondary", "exterior_wall_material_primary",
    "exterior_wall_material_secondary", "finished_base_area", "finished_basement_area",
    "finished_upper_story_area", "flooring_condition", "flooring_material_primary",
    "flooring_material_secondary", "foundation_condition", "foundation_material",
    "foundation_repair_date", "foundation_type", "foundation_waterproofing", "gutters_condition",
    "gutters_material", "interior_door_material", "interior_wall_condition",
    "interior_wall_finish_primary", "interior_wall_finish_secondary",
    "interior_wall_structure_material", "interior_wall_structure_material_primary",
    "interior_wall_structure_material_secondary", "interior_wall_surface_material_primary",
    "interior_wall_surface_material_secondary", "number_of_stories", "primary_framing_material",
    "roof_age_years", "roof_condition", "roof_covering_material", "roof_date", "roof_design_type",
    "roof_material_type", "roof_structure_material", "roof_underlayment_type",
    "secondary_framing_material", "siding_installation_date", "structural_damage_indicators",
    "subfloor_material", "unfinished_base_area", "unfinished_basement_area",
    "unfinished_upper_story_area", "window_frame_material", "window_glazing_type",
    "window_installation_date", "window_operation_type", "window_screen_material",
)

UTILITY_FIELDS = (
    "cooling_system_type", "electrical_panel_capacity", "electrical_panel_installation_date",
    "electrical_rewire_date", "electrical_wiring_type", "electrical_wiring_type_other_description",
    "heating_fuel_type", "heating_system_type", "hvac_capacity_kw", "hvac_capacity_tons",
    "hvac_condensing_unit_present", "hvac_equipment_component", "hvac_equipment_manufacturer",
    "hvac_equipment_model", "hvac_installation_date", "hvac_seer_rating",
    "hvac_system_configuration", "hvac_unit_condition", "hvac_unit_issues",
    "plumbing_fixture_count", "plumbing_fixture_quality", "plumbing_fixture_type_primary",
    "plumbing_system_installation_date", "plumbing_system_type",
    "plumbing_system_type_other_description", "public_utility_type", "sewer_connection_date",
    "sewer_type", "smart_home_features", "smart_home_features_other_description",
    "solar_installation_date", "solar_inverter_installation_date", "solar_inverter_manufacturer",
    "solar_inverter_model", "solar_inverter_visible", "solar_panel_present", "solar_panel_type",
    "solar_panel_type_other_description", "water_connection_date",
    "water_heater_installation_date", "water_heater_manufacturer", "water_heater_model",
    "water_source_type", "well_installation_date",
)


def structure_record(**values):
    """Every structure field, None unless given"""
    record = dict.fromkeys(STRUCTURE_FIELDS)
    record.update(values)
    return record


def utility_record(**values):
    record = dict.fromkeys(UTILITY_FIELDS)
    record.update(values)
    return record


def room_layouts(bedrooms=0, full_baths=0, half_baths=0, common=None):
    """Bedroom and bathroom layouts for one building, all on the first floor"""
    rooms = []
    for space_type, count in (
        ("Bedroom", bedrooms),
        ("Full Bathroom", full_baths),
        ("Half Bathroom / Powder Room", half_baths),
    ):
        for _ in range(count or 0):
            rooms.append(make_layout(space_type, common, floor_level="1st Floor"))
    return rooms


class LayoutTree:
    """Building layouts with their child rooms.

    Buildings are numbered from 1. A room attached to an unknown building goes
    to the first building; with no buildings at all it is kept standalone.
    Child rooms get space_index 1..n within their building and a
    "<building>.<n>" space_type_index counted per space type.
    """

    def __init__(self):
        self.buildings = []
        self.children = {}
        self.standalone = []

    def add_building(self, index, layout):
        layout["space_index"] = index
        layout["space_type_index"] = str(index)
        self.buildings.append({"index": index, "layout": layout, "path": None, "child_paths": []})
        self.children.setdefault(index, [])

    def has_building(self, index):
        return index in self.children

    def attach(self, building_index, layout):
        if building_index is not None and self.has_building(building_index):
            self.children[building_index].append(layout)
        elif self.buildings:
            self.children[self.buildings[0]["index"]].append(layout)
        else:
            self.standalone.append(layout)

    def add_standalone(self, layout):
        self.standalone.append(layout)

    def child_count(self, building_index):
        return len(self.children.get(building_index, []))

    def has_children(self):
        return any(self.children.values())

    def write(self, writer):
        """Write every layout file; returns (building infos, standalone paths)"""
        for building in self.buildings:
            building["path"] = writer.write_next("layout", building["layout"])

        for building in self.buildings:
            per_type = defaultdict(int)
            for position, layout in enumerate(self.children[building["index"]], start=1):
                per_type[layout.get("space_type") or "Unknown"] += 1
                layout["space_index"] = position
                layout["space_type_index"] = f"{building['index']}.{per_type[layout.get('space_type') or 'Unknown']}"
                layout["floor_level"] = layout.get("floor_level") or "1st Floor"
                building["child_paths"].append(writer.write_next("layout", layout))

        standalone_paths = []
        per_type = defaultdict(int)
        for position, layout in enumerate(self.standalone, start=1):
            per_type[layout.get("space_type") or "Unknown"] += 1
            layout["space_index"] = position
            layout["space_type_index"] = f"{position}.{per_type[layout.get('space_type') or 'Unknown']}"
            layout["floor_level"] = layout.get("floor_level") or "1st Floor"
            standalone_paths.append(writer.write_next("layout", layout))
        return self.buildings, standalone_paths


def link_to_buildings(relationships, buildings, items, fallback_path):
    """Link structure/utility files to building layouts.

    items are {"path", "building_index"} dicts. Exact building_index matches
    come first, then leftovers fill buildings that still have none, in
    order; anything left links to fallback_path (the property).
    """
    matched = set()
    for building in buildings:
        for position, item in enumerate(items):
            if item.get("building_index") == building["index"]:
                relationships.write(building["path"], item["path"])
                matched.add(position)

    leftovers = [position for position in range(len(items)) if position not in matched]
    if buildings and leftovers:
        covered = {items[position].get("building_index") for position in matched}
        for building in buildings:
            if not leftovers:
                break
            if building["index"] in covered:
                continue
            position = leftovers.pop(0)
            relationships.write(building["path"], items[position]["path"])

    for position in leftovers:
        relationships.write(fallback_path, items[position]["path"])


PROPERTY_TYPE_ERROR = {
    "type": "error",
    "message": "Unable to map property type from property use code.",
    "path": "property.property_type",
}


def write_property_type_error(writer, code):
    logger.warning(f"Unmapped property use code {code!r}; writing error_property_type.json")
    return writer.write("error_property_type", dict(PROPERTY_TYPE_ERROR))


class AddressNotFoundError(ValueError):
    """Neither the page nor unnormalized_address.json carries a site address"""
