"""Per-building structure records from the Alachua Building Information module.

Writes owners/structure_data.json:

    {"property_<prop id>": {"buildings": [
        {"building_index": 1, "building_identifier": "ctl00", "structure": {...}}
    ]}}
"""

import logging
import os
import re

from ...code_mapper import compile_rules, first_match
from ...text_utils import parse_float_safe, parse_int_safe
from ...utils import print_status, write_json
from .page import load_page, parse_building_summaries, property_id

logger = logging.getLogger(__name__)

QPUBLIC_REQUEST = {"method": "GET", "url": "https://qpublic.schneidercorp.com/Application.aspx"}

EXTERIOR_MATERIALS = {
    "Brick", "Natural Stone", "Manufactured Stone", "Stucco", "Vinyl Siding",
    "Wood Siding", "Fiber Cement Siding", "Metal Siding", "Concrete Block", "EIFS",
    "Log", "Adobe", "Precast Concrete", "Curtain Wall",
}
FLOOR_PRIMARY = {
    "Solid Hardwood", "Engineered Hardwood", "Laminate", "Luxury Vinyl Plank",
    "Sheet Vinyl", "Ceramic Tile", "Porcelain Tile", "Natural Stone Tile", "Carpet",
    "Area Rugs", "Polished Concrete", "Bamboo", "Cork", "Linoleum", "Terrazzo",
    "Epoxy Coating",
}
FLOOR_SECONDARY = {
    "Solid Hardwood", "Engineered Hardwood", "Laminate", "Luxury Vinyl Plank",
    "Ceramic Tile", "Carpet", "Area Rugs", "Transition Strips",
}

# Ordered: the first pattern found in the upper-cased token wins.
EXTERIOR_RULES = compile_rules([
    (r"BRICK", "Brick"),
    (r"MANUF|VENEER|CULTURED", "Manufactured Stone"),
    (r"STONE", "Natural Stone"),
    (r"STUCCO", "Stucco"),
    (r"VINYL", "Vinyl Siding"),
    (r"HARDI|FIBER", "Fiber Cement Siding"),
    (r"ALUMIN|METAL|STEEL", "Metal Siding"),
    (r"CONCRETE BLOCK|CONC BLOCK|^CB|CMU|MASONRY", "Concrete Block"),
    (r"EIFS", "EIFS"),
    (r"WOOD|T-?111", "Wood Siding"),
    (r"PRECAST", "Precast Concrete"),
    (r"CURTAIN", "Curtain Wall"),
    (r"LOG", "Log"),
    (r"ADOBE", "Adobe"),
])

INTERIOR_RULES = compile_rules([
    (r"DRYWALL", "Drywall"),
    (r"PLASTER", "Plaster"),
    (r"MASON", "Masonry"),
])

FLOOR_RULES = compile_rules([
    (r"CARPET", "Carpet"),
    (r"LUXURY|LVP|VINYL PLANK", "Luxury Vinyl Plank"),
    (r"VINYL", "Sheet Vinyl"),
    (r"ENGINEER", "Engineered Hardwood"),
    (r"HARDWOOD|SOFT WOOD|PINE", "Solid Hardwood"),
    (r"LAMINATE", "Laminate"),
    (r"PORCELAIN", "Porcelain Tile"),
    (r"STONE", "Natural Stone Tile"),
    (r"CERAMIC|CLAY TILE", "Ceramic Tile"),
    (r"TERRAZZO", "Terrazzo"),
    (r"POLISHED|CONCRETE", "Polished Concrete"),
    (r"BAMBOO", "Bamboo"),
    (r"CORK", "Cork"),
    (r"LINO", "Linoleum"),
    (r"EPOXY", "Epoxy Coating"),
    (r"RUG", "Area Rugs"),
    (r"TRANSITION", "Transition Strips"),
])

FRAME_RULES = compile_rules([
    (r"WOOD", "Wood Frame"),
    (r"MASONRY", "Masonry"),
    (r"REINFORCED", "Reinforced Concrete"),
    (r"PRECAST", "Precast Concrete"),
])

ROOF_COVER_RULES = compile_rules([
    (r"ASPHALT", "Architectural Asphalt Shingle"),
    (lambda text: "TAR" in text and "GRAVEL" in text, "Built-Up"),
])

ROOF_MATERIAL_TYPES = {
    "Architectural Asphalt Shingle": "Shingle",
    "Built-Up": "Built-Up",
}

ROOF_DESIGN_RULES = compile_rules([
    (r"FLAT", "Flat"),
    (lambda text: "GABLE" in text and "HIP" in text, "Combination"),
    (r"GABLE", "Gable"),
    (r"HIP", "Hip"),
    (r"REINF", "Flat"),
    (r"RIGID", "Other"),
])


def split_tokens(raw):
    if not raw:
        return []
    return [part.strip() for part in re.split(r"[;/]", raw) if part.strip()]


def map_tokens(raw, rules, allowed=None):
    """Distinct mapped values for each ;/-separated token, in order"""
    values = []
    for token in split_tokens(raw):
        value = first_match(rules, token.upper())
        if value is None or (allowed is not None and value not in allowed):
            continue
        if value not in values:
            values.append(value)
    return values


def build_structure(building, request_identifier=None):
    left, right = building["left"], building["right"]

    exterior = map_tokens(left.get("exterior walls"), EXTERIOR_RULES, EXTERIOR_MATERIALS)
    interior = map_tokens(left.get("interior walls"), INTERIOR_RULES)
    floors = map_tokens(left.get("floor cover"), FLOOR_RULES, FLOOR_PRIMARY | FLOOR_SECONDARY)
    frames = map_tokens(left.get("frame"), FRAME_RULES)

    floor_primary = next((f for f in floors if f in FLOOR_PRIMARY), None)
    floor_secondary = next((f for f in floors if f != floor_primary and f in FLOOR_SECONDARY), None)

    roof_cover = first_match(ROOF_COVER_RULES, (left.get("roofing") or "").upper())
    roof_design = first_match(ROOF_DESIGN_RULES, (left.get("roof type") or "").upper())

    return {
        "exterior_wall_material_primary": exterior[0] if exterior else None,
        "exterior_wall_material_secondary": exterior[1] if len(exterior) > 1 else None,
        "interior_wall_surface_material_primary": interior[0] if interior else None,
        "interior_wall_surface_material_secondary": interior[1] if len(interior) > 1 else None,
        "flooring_material_primary": floor_primary,
        "flooring_material_secondary": floor_secondary,
        "roof_covering_material": roof_cover,
        "roof_material_type": ROOF_MATERIAL_TYPES.get(roof_cover),
        "roof_design_type": roof_design,
        "primary_framing_material": frames[0] if frames else None,
        "secondary_framing_material": frames[1] if len(frames) > 1 else None,
        "number_of_stories": parse_float_safe(right.get("stories")),
        "finished_base_area": parse_int_safe(left.get("heated area")),
        "source_http_request": dict(QPUBLIC_REQUEST),
        "request_identifier": request_identifier,
    }


def build_structure_data(soup, request_identifier=None):
    return [
        {
            "building_index": building["building_index"],
            "building_identifier": building["building_identifier"],
            "structure": build_structure(building, request_identifier),
        }
        for building in parse_building_summaries(soup)
    ]


def main(base_dir=".", strict=None):
    soup = load_page(os.path.join(base_dir, "input.html"))
    prop_id = property_id(soup)
    buildings = build_structure_data(soup, prop_id)

    out_path = os.path.join(base_dir, "owners", "structure_data.json")
    write_json(out_path, {f"property_{prop_id}": {"buildings": buildings}})
    logger.info(f"Structure data: {len(buildings)} buildings for property_{prop_id}")
    print_status(f"Wrote {out_path}")
    return out_path


if __name__ == "__main__":
    main()
