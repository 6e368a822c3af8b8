"""Building, floor and room layouts from Seminole buildingDetails.

Writes owners/layout_data.json as a flat list; every layout carries the
building_number it belongs to and "Building" layouts open each group.
Vacant parcels (no buildings and a vacant DOR code) get no layouts.
"""

import logging
import os

from ...code_mapper import compile_rules, first_match
from ...utils import print_status, write_json
from .codes import normalize_floor_level, normalize_space_type
from .page import appraiser_id, load_input, parse_year_tokens, to_number

logger = logging.getLogger(__name__)

VACANT_DOR_CODES = {"00", "10", "80", "90", "93", "94", "96", "97"}

# apdgCode -> (space_type, is_exterior, is_finished)
SUB_AREA_CODES = {
    "GAR": ("Attached Garage", False, False),
    "GAF": ("Attached Garage", False, True),
    "OPF": ("Porch", True, False),
    "EPF": ("Enclosed Porch", False, True),
    "FOP": ("Porch", True, False),
    "UTL": ("Storage Room", False, True),
    "UTF": ("Storage Room", False, True),
    "CAR": ("Carport", True, False),
    "PAT": ("Patio", True, False),
}

SUB_AREA_RULES = compile_rules([
    (lambda d: "GARAGE" in d, lambda d: ("Attached Garage", False, "FIN" in d)),
    (lambda d: "PORCH" in d and "ENCLOSED" in d, lambda d: ("Enclosed Porch", False, "FIN" in d)),
    (lambda d: "PORCH" in d, lambda d: ("Porch", True, "FIN" in d)),
    (lambda d: "UTILITY" in d, lambda d: ("Storage Room", False, True)),
    (lambda d: "PATIO" in d, lambda d: ("Patio", True, False)),
    (lambda d: "CARPORT" in d, lambda d: ("Carport", True, False)),
])


def infer_sub_area(description):
    """Free-text sub area description -> (space_type, is_exterior, is_finished) or None"""
    text = str(description or "").upper()
    build = first_match(SUB_AREA_RULES, text)
    return build(text) if build else None


def is_land_only(data):
    if data.get("buildingDetails"):
        return False
    return str(data.get("dor") or "").zfill(2) in VACANT_DOR_CODES


def fallback_building(data):
    return {
        "bldgNo": 1,
        "livingArea": data.get("livingAreaCalc"),
        "grossArea": data.get("grossAreaCalc"),
        "baseFloors": data.get("baseFloors"),
        "bedrooms": data.get("bedrooms"),
        "bathrooms": data.get("bathrooms"),
        "yearBlt": data.get("yearBuilt"),
        "buildingSubAreas": [],
    }


def layout(space_type, building_number, is_exterior=False, is_finished=True, **fields):
    record = {
        "space_type": normalize_space_type(space_type),
        "building_number": building_number,
        "is_exterior": is_exterior,
        "is_finished": is_finished,
    }
    record.update(fields)
    if "floor_level" in record:
        record["floor_level"] = normalize_floor_level(record["floor_level"])
    return record


def building_layouts(building, data, position):
    number = to_number(building.get("bldgNo")) or position
    living = to_number(building.get("livingArea")) or to_number(data.get("livingAreaCalc")) or to_number(
        building.get("baseArea")
    )
    gross = to_number(building.get("grossArea")) or to_number(data.get("grossAreaCalc")) or to_number(
        building.get("baseArea")
    )
    built, _ = parse_year_tokens(building.get("yearBlt"))

    layouts = [layout(
        "Building", number,
        total_area_sq_ft=gross, livable_area_sq_ft=living, size_square_feet=gross, built_year=built,
    )]

    floors = int(to_number(building.get("baseFloors")) or 0)
    for floor in range(1, floors + 1):
        layouts.append(layout(
            "Floor", number,
            size_square_feet=round(gross / floors) if gross else None, floor_level=floor,
        ))

    bedrooms = int(to_number(building.get("bedrooms")) or to_number(data.get("bedrooms")) or 0)
    bathrooms = to_number(building.get("bathrooms")) or to_number(data.get("bathrooms")) or 0
    bedroom_size = max(round(living * 0.4 / bedrooms), 80) if bedrooms and living else None
    for _ in range(bedrooms):
        layouts.append(layout("Bedroom", number, size_square_feet=bedroom_size, floor_level=1, has_windows=True))
    for _ in range(int(bathrooms)):
        layouts.append(layout("Full Bathroom", number, floor_level=1))
    if bathrooms - int(bathrooms) >= 0.5:
        layouts.append(layout("Half Bathroom / Powder Room", number, floor_level=1))
    if living:
        layouts.append(layout("Living Room", number, floor_level=1, has_windows=True))
        layouts.append(layout("Kitchen", number, floor_level=1, has_windows=True))

    for sub_area in building.get("buildingSubAreas") or []:
        code = str(sub_area.get("apdgCode") or "").strip().upper()
        config = SUB_AREA_CODES.get(code) or infer_sub_area(sub_area.get("areaDescription"))
        if not config:
            continue
        space_type, exterior, finished = config
        layouts.append(layout(
            space_type, number, exterior, finished,
            size_square_feet=to_number(sub_area.get("apdgActualArea")),
            floor_level=None if exterior else 1,
        ))

    for feature in data.get("extraFeatureDetails") or []:
        if not isinstance(feature, dict) or feature.get("exftBldg") != building.get("bldgNo"):
            continue
        config = infer_sub_area(feature.get("exFtDescription") or feature.get("exftNotes"))
        if not config:
            continue
        space_type, exterior, finished = config
        layouts.append(layout(space_type, number, exterior, finished, floor_level=None if exterior else 1))

    return [record for record in layouts if record["space_type"]]


def build_layout_data(data):
    if is_land_only(data):
        return {"layouts": []}
    buildings = [b for b in data.get("buildingDetails") or [] if isinstance(b, dict)] or [fallback_building(data)]
    layouts = []
    for position, building in enumerate(buildings, start=1):
        layouts.extend(building_layouts(building, data, position))
    return {"layouts": layouts}


def main(base_dir=".", strict=None):
    data = load_input(os.path.join(base_dir, "input.html"))
    pid = appraiser_id(data)
    layout_data = build_layout_data(data)

    out_path = os.path.join(base_dir, "owners", "layout_data.json")
    write_json(out_path, {f"property_{pid}": layout_data})
    logger.info(f"Layout data: {len(layout_data['layouts'])} layouts for property_{pid}")
    print_status(f"Wrote {out_path} for property_{pid}")
    return out_path


if __name__ == "__main__":
    main()
