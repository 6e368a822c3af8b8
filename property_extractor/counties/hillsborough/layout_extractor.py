"""Building and room layouts from the Hillsborough building characteristics."""

import logging
import math
import os

from ...utils import print_status, write_json
from .page import characteristic_number, display_strap, load_page, parse_buildings

logger = logging.getLogger(__name__)


def layout(space_type, building_number, **fields):
    record = {
        "space_type": space_type,
        "building_number": building_number,
        "size_square_feet": None,
        "floor_level": None,
        "is_finished": True,
        "is_exterior": False,
    }
    record.update(fields)
    return record


def building_layouts(building):
    number = building["building_number"]
    gross = building["gross_area"]
    heated = building["heated_area"] or characteristic_number(building, "Heated Area")
    layouts = [layout(
        "Building",
        number,
        size_square_feet=gross,
        total_area_sq_ft=gross,
        heated_area_sq_ft=heated,
        area_under_air_sq_ft=heated,
    )]

    bedrooms = int(characteristic_number(building, "Bedrooms") or 0)
    bathrooms = characteristic_number(building, "Bathrooms") or 0
    full_baths = math.floor(bathrooms)
    layouts.extend(layout("Bedroom", number) for _ in range(bedrooms))
    layouts.extend(layout("Full Bathroom", number) for _ in range(full_baths))
    # 2.5 baths means one half bath
    if bathrooms - full_baths >= 0.5:
        layouts.append(layout("Half Bathroom / Powder Room", number))
    return layouts


def build_layout_data(soup):
    layouts = []
    for building in parse_buildings(soup):
        layouts.extend(building_layouts(building))
    return {"layouts": layouts}


def main(base_dir=".", strict=None):
    soup = load_page(os.path.join(base_dir, "input.html"))
    pin = display_strap(soup) or "unknown_id"
    layout_data = build_layout_data(soup)

    out_path = os.path.join(base_dir, "owners", "layout_data.json")
    write_json(out_path, {f"property_{pin}": layout_data})
    logger.info(f"Layout data: {len(layout_data['layouts'])} layouts for property_{pin}")
    print_status(f"Wrote {out_path} for property_{pin}")
    return out_path


if __name__ == "__main__":
    main()
