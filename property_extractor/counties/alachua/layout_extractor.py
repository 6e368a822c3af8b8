"""Building summaries and room layouts from the Alachua Building Information
and Sub Area modules; writes owners/layout_data.json."""

import logging
import os
import re

from ...code_mapper import compile_rules, first_match
from ...text_utils import parse_float_safe, parse_int_safe, title_case
from ...utils import print_status, write_json
from .page import load_page, parse_building_summaries, parse_sub_areas, property_id

logger = logging.getLogger(__name__)

BEDROOM_LABELS = ("bedrooms", "bedroom", "bed rooms", "bed room")
BATH_LABELS = ("bathrooms", "baths", "bath rooms", "bath room")
FULL_BATH_LABELS = ("full bathrooms", "full baths", "full bath")
HALF_BATH_LABELS = ("half bathrooms", "half baths", "half bath")

SUB_AREA_RULES = compile_rules([
    (lambda area: area[0] == "BAS" or "BASE AREA" in area[1], "Living Area"),
    (lambda area: area[0] == "FOP" or "OPEN PORCH" in area[1], "Open Porch"),
    (lambda area: "SCREEN" in area[1] and "PORCH" in area[1], "Screened Porch"),
    (lambda area: "PORCH" in area[1], "Porch"),
    (lambda area: "BALCONY" in area[1], "Balcony"),
    (lambda area: "DECK" in area[1], "Deck"),
    (lambda area: "PATIO" in area[1], "Patio"),
    (lambda area: "GAZEBO" in area[1], "Gazebo"),
    (lambda area: "STORAGE" in area[1], "Storage Room"),
    (lambda area: "GARAGE" in area[1] and "DET" in area[1], "Detached Garage"),
    (lambda area: "GARAGE" in area[1], "Attached Garage"),
    (lambda area: "CARPORT" in area[1], "Carport"),
    (lambda area: "POOL" in area[1], "Pool Area"),
    (lambda area: "LANAI" in area[1], "Lanai"),
    (lambda area: "SUN ROOM" in area[1] or "SUNROOM" in area[1], "Sunroom"),
    (lambda area: "PAVILION" in area[1], "Gazebo"),
    (lambda area: "CABANA" in area[1], "Enclosed Cabana"),
    (lambda area: "BARN" in area[1], "Barn"),
])


def first_value(mapping, labels):
    for label in labels:
        if mapping.get(label):
            return mapping[label]
    return None


def parse_bathroom_counts(value):
    """'2/1', '2.1', '2 full 1 half' or '2' -> (full, half)"""
    if not value:
        return 0, 0
    raw = str(value)

    match = re.search(r"(\d+)\s*/\s*(\d+)", raw) or re.search(r"(\d+)[.,](\d+)", raw)
    if match:
        return int(match.group(1)), int(match.group(2))

    full = re.search(r"(\d+)\s*(?:full\b|f\b)", raw, re.I)
    half = re.search(r"(\d+)\s*(?:half\b|h\b)", raw, re.I)
    if full or half:
        return (int(full.group(1)) if full else 0), (int(half.group(1)) if half else 0)

    numbers = re.findall(r"\d+", raw)
    if not numbers:
        return 0, 0
    return int(numbers[0]), (int(numbers[1]) if len(numbers) > 1 else 0)


def map_sub_area_space_type(sub_area):
    if not sub_area:
        return None
    area = ((sub_area.get("type") or "").upper(), (sub_area.get("description") or "").upper())
    if "STAIR" in area[1]:
        return None
    return first_match(SUB_AREA_RULES, area)


def summarize_building(building):
    left, right = building["left"], building["right"]
    full_raw = first_value(right, FULL_BATH_LABELS)
    half_raw = first_value(right, HALF_BATH_LABELS)
    if full_raw is not None or half_raw is not None:
        full, half = parse_int_safe(full_raw) or 0, parse_int_safe(half_raw) or 0
    else:
        full, half = parse_bathroom_counts(first_value(right, BATH_LABELS))

    return {
        "building_index": building["building_index"],
        "building_identifier": building["building_identifier"],
        "building_type": title_case(left["type"]) if left.get("type") else None,
        "total_area_sq_ft": parse_int_safe(left.get("total area")),
        "heated_area_sq_ft": parse_int_safe(left.get("heated area")),
        "bedrooms": parse_int_safe(first_value(right, BEDROOM_LABELS)) or 0,
        "full_bathrooms": full,
        "half_bathrooms": half,
        "stories": parse_float_safe(right.get("stories")),
        "sub_areas": [],
    }


def sub_area_layouts(sub_areas):
    layouts = []
    for sub_area in sub_areas:
        space_type = map_sub_area_space_type(sub_area)
        if space_type:
            layouts.append({
                "space_type": space_type,
                "floor_level": "1st Floor",
                "size_square_feet": sub_area.get("square_feet"),
            })
    return layouts


def build_layout_data(soup):
    buildings = [summarize_building(b) for b in parse_building_summaries(soup)]
    sub_area_sets = parse_sub_areas(soup)
    for position, building in enumerate(buildings):
        if position < len(sub_area_sets):
            building["sub_areas"] = sub_area_sets[position]

    layouts = []
    for building in buildings:
        index = building["building_index"]
        for space_type, count in (
            ("Bedroom", building["bedrooms"]),
            ("Full Bathroom", building["full_bathrooms"]),
            ("Half Bathroom / Powder Room", building["half_bathrooms"]),
        ):
            for _ in range(count):
                layouts.append({"space_type": space_type, "floor_level": "1st Floor",
                                "parent_building_index": index})
        for layout in sub_area_layouts(building["sub_areas"]):
            layout["parent_building_index"] = index
            layouts.append(layout)

    return {"buildings": buildings, "layouts": layouts}


def main(base_dir=".", strict=None):
    soup = load_page(os.path.join(base_dir, "input.html"))
    parcel_id = property_id(soup, label_text="parcel id")
    layout_data = build_layout_data(soup)

    out_path = os.path.join(base_dir, "owners", "layout_data.json")
    write_json(out_path, {f"property_{parcel_id}": layout_data})
    logger.info(
        f"Layout data: {len(layout_data['buildings'])} buildings, "
        f"{len(layout_data['layouts'])} layouts for property_{parcel_id}"
    )
    print_status(f"Wrote {out_path} for property_{parcel_id}")
    return out_path


if __name__ == "__main__":
    main()
