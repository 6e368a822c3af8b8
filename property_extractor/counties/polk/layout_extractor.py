"""Building, room, floor and subarea layouts from the Polk building sections.

Subareas belong to their building; extra features carry no building number
and link to the property.
"""

import logging
import os
import re

from ...text_utils import parse_float_safe
from ...utils import print_status, write_json
from .page import element_information, element_units, extra_features, load_page, parse_buildings, property_id

logger = logging.getLogger(__name__)

# Checked in order against the upper-cased subarea or feature description
SPACE_TYPE_RULES = (
    (("POOL", "HOUSE"), "Pool House"),
    (("POOL",), "Outdoor Pool"),
    (("GARAGE",), "Attached Garage"),
    ((" SHED",), "Shed"),
    (("GREENHOUSE",), "Greenhouse"),
    (("PORCH", "ENCLOSED"), "Enclosed Porch"),
    (("PORCH", "SCREEN"), "Screened Porch"),
    (("PORCH",), "Porch"),
    (("SPA",), "Hot Tub / Spa Area"),
    (("SUMMER KITCHEN",), "Outdoor Kitchen"),
)

UNFINISHED_MARKERS = ("UNFINISHED", "SEMIFINISHED", "SEMI-FINISHED")


def space_type_for(description):
    code = (description or "").strip().upper()
    for needles, space_type in SPACE_TYPE_RULES:
        if all(needle in code for needle in needles):
            return space_type
    return None


def is_finished(description):
    code = (description or "").upper()
    return not any(marker in code for marker in UNFINISHED_MARKERS)


def to_int(value):
    number = parse_float_safe(value)
    return round(number) if number is not None else None


def count(value):
    return int(parse_float_safe(value) or 0)


def floor_count(building):
    """Leading number of STORY HEIGHT INFO ONLY, e.g. '2 STORY'"""
    match = re.match(r"^\d+", (element_information(building, "STORY HEIGHT INFO ONLY") or "").strip())
    return int(match.group(0)) if match else 0


def layout(space_type, building_number, **fields):
    record = {
        "space_type": space_type,
        "building_number": building_number,
        "size_square_feet": None,
        "is_finished": True,
        "is_exterior": False,
        "heated_area_sq_ft": None,
        "livable_area_sq_ft": None,
        "total_area_sq_ft": None,
    }
    record.update(fields)
    return record


def building_layouts(building):
    number = building["building_number"]
    characteristics = building["characteristics"]
    layouts = [layout(
        "Building",
        number,
        livable_area_sq_ft=to_int(characteristics.get("living_area")),
        total_area_sq_ft=to_int(characteristics.get("total_under_roof")),
    )]
    for space_type, label in (
        ("Bedroom", "BEDROOM"),
        ("Full Bathroom", "FULL BATH"),
        ("Half Bathroom / Powder Room", "HALF BATH"),
    ):
        layouts.extend(layout(space_type, number) for _ in range(count(element_units(building, label))))
    layouts.extend(layout("Floor", number) for _ in range(floor_count(building)))

    for subarea in building["subareas"]:
        description = subarea.get("code_description")
        space_type = space_type_for(description)
        total = to_int(subarea.get("total"))
        if space_type is None or total is None:
            continue
        layouts.append(layout(space_type, number, total_area_sq_ft=total, is_finished=is_finished(description)))
    return layouts


def feature_layouts(features):
    layouts = []
    for feature in features:
        description = feature.get("description")
        space_type = space_type_for(description)
        if space_type:
            layouts.append(layout(space_type, None, is_finished=is_finished(description)))
    return layouts


def build_layout_data(soup):
    layouts = []
    for building in parse_buildings(soup):
        layouts.extend(building_layouts(building))
    layouts.extend(feature_layouts(extra_features(soup)))
    return {"layouts": layouts}


def main(base_dir=".", strict=None):
    soup = load_page(os.path.join(base_dir, "input.html"))
    pid = property_id(soup)
    layout_data = build_layout_data(soup)

    out_path = os.path.join(base_dir, "owners", "layout_data.json")
    write_json(out_path, {f"property_{pid}": layout_data})
    logger.info(f"Layout data: {len(layout_data['layouts'])} layouts for property_{pid}")
    print_status(f"Wrote {out_path} for property_{pid}")
    return out_path


if __name__ == "__main__":
    main()
