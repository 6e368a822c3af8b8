"""Per-building structure records from the Polk building elements table.

Writes owners/structure_data.json keyed by building number:
{"property_<strap>": {"1": {...}, "2": {...}}}.
"""

import logging
import os

from ...code_mapper import compile_rules, first_match
from ...records import structure_record
from ...utils import print_status, write_json
from .page import element_information, load_page, parse_buildings, property_id

logger = logging.getLogger(__name__)

EXTERIOR_WALL_RULES = compile_rules([
    (r"HARDY|HARDIE|FIBER", "Fiber Cement Siding"),
    (r"WOOD", "Wood Siding"),
    (r"BRICK", "Brick"),
    (r"STUCCO", "Stucco"),
    (r"VINYL", "Vinyl Siding"),
    (r"STONE", "Manufactured Stone"),
    (r"METAL", "Metal Siding"),
])

FRAME_RULES = compile_rules([
    (r"MASONRY|BLOCK", "Concrete Block"),
    (r"WOOD", "Wood Frame"),
    (r"STEEL", "Steel Frame"),
])

ROOF_DESIGN_RULES = compile_rules([
    (r"GABLE", "Gable"),
    (r"HIP", "Hip"),
    (r"FLAT", "Flat"),
    (r"SHED", "Shed"),
])

ROOF_MATERIAL_RULES = compile_rules([
    (r"METAL", "Metal"),
    (r"SHINGLE", "Shingle"),
    (r"TILE", "Tile"),
    (r"CONCRETE", "PouredConcrete"),
    (r"WOOD", "Wood"),
])

ROOF_COVERING_RULES = compile_rules([
    (r"SHINGLE", "Architectural Asphalt Shingle"),
    (r"METAL", "Metal Standing Seam"),
    (r"TILE", "Clay Tile"),
])

FOUNDATION_RULES = compile_rules([
    (r"CONTINUOUS WALL", "Stem Wall"),
])


def building_structure(building):
    roof = element_information(building, "ROOF STRUCTURE")
    return structure_record(
        exterior_wall_material_primary=first_match(
            EXTERIOR_WALL_RULES, element_information(building, "EXTERIOR WALL")
        ),
        primary_framing_material=first_match(FRAME_RULES, element_information(building, "FRAME / CONST TYPE")),
        foundation_type=first_match(FOUNDATION_RULES, element_information(building, "SUBSTRUCT")),
        roof_design_type=first_match(ROOF_DESIGN_RULES, roof),
        roof_material_type=first_match(ROOF_MATERIAL_RULES, roof),
        roof_covering_material=first_match(ROOF_COVERING_RULES, roof),
    )


def build_structure_data(soup):
    return {str(building["building_number"]): building_structure(building) for building in parse_buildings(soup)}


def main(base_dir=".", strict=None):
    soup = load_page(os.path.join(base_dir, "input.html"))
    pid = property_id(soup)
    structure_data = build_structure_data(soup)

    out_path = os.path.join(base_dir, "owners", "structure_data.json")
    write_json(out_path, {f"property_{pid}": structure_data})
    logger.info(f"Structure data: {len(structure_data)} buildings for property_{pid}")
    print_status(f"Wrote {out_path} for property_{pid}")
    return out_path


if __name__ == "__main__":
    main()
