"""Per-building structure records from Seminole buildingDetails.

Writes owners/structure_data.json in the buildings shape:

    {"property_<apprId>": {"buildings": [{"building_index": 1, "structure": {...}}]}}
"""

import logging
import os
import re

from ...code_mapper import compile_rules, first_match
from ...utils import print_status, write_json
from .page import appraiser_id, building_number_of, load_input, to_number

logger = logging.getLogger(__name__)

# Ordered: CONCRETE BLOCK before CONCRETE.
EXTERIOR_RULES = compile_rules([
    (r"STUCCO", "Stucco"),
    (r"BRICK|BRK", "Brick"),
    (r"STONE", "Natural Stone"),
    (r"VINYL", "Vinyl Siding"),
    (r"WOOD|WD", "Wood Siding"),
    (r"EIFS", "EIFS"),
    (r"CONCRETE BLOCK|\bCB\b", "Concrete Block"),
    (r"CONCRETE", "Concrete"),
])

SECONDARY_ACCENTS = {
    "Brick": "Brick Accent",
    "Natural Stone": "Stone Accent",
    "Stucco": "Stucco Accent",
    "Vinyl Siding": "Vinyl Accent",
    "Wood Siding": "Wood Trim",
    "Concrete Block": "Decorative Block",
}

FRAMING_RULES = compile_rules([
    (r"\bCB\b|CONCRETE BLOCK", "Concrete Block"),
    (r"MASONRY", "Masonry"),
    (r"STEEL", "Steel Frame"),
    (r"WOOD|\bWD\b", "Wood Frame"),
])

UNKNOWN_FIELDS = (
    "exterior_wall_insulation_type",
    "roof_underlayment_type",
    "foundation_waterproofing",
    "foundation_condition",
    "ceiling_insulation_type",
    "exterior_wall_insulation_type_primary",
    "exterior_wall_insulation_type_secondary",
)

NULL_FIELDS = (
    "architectural_style_type", "exterior_wall_condition", "flooring_material_primary",
    "flooring_material_secondary", "subfloor_material", "flooring_condition",
    "interior_wall_structure_material", "interior_wall_surface_material_primary",
    "interior_wall_surface_material_secondary", "interior_wall_finish_primary",
    "interior_wall_finish_secondary", "interior_wall_condition", "roof_covering_material",
    "roof_structure_material", "roof_design_type", "roof_condition", "roof_age_years",
    "gutters_material", "gutters_condition", "roof_material_type", "foundation_type",
    "foundation_material", "ceiling_structure_material", "ceiling_surface_material",
    "ceiling_height_average", "ceiling_condition", "exterior_door_material",
    "interior_door_material", "window_frame_material", "window_glazing_type",
    "window_operation_type", "window_screen_material", "secondary_framing_material",
    "structural_damage_indicators", "finished_basement_area", "finished_upper_story_area",
    "unfinished_basement_area", "unfinished_upper_story_area",
    "exterior_wall_condition_primary", "exterior_wall_condition_secondary",
    "siding_installation_date", "roof_date", "window_installation_date",
    "exterior_door_installation_date", "foundation_repair_date",
)


def exterior_materials(ext_wall):
    """'CB STUCCO/BRICK' -> ('Stucco', 'Brick Accent')"""
    value = str(ext_wall or "").upper()
    if not value:
        return None, None
    tokens = [t.strip() for t in re.split(r"[/,|-]", re.sub(r"[^A-Z0-9/ ]+", " ", value)) if t.strip()]
    found = []
    for token in tokens:
        material = first_match(EXTERIOR_RULES, token)
        if material and material not in found:
            found.append(material)
    primary = found[0] if found else None
    secondary = SECONDARY_ACCENTS.get(found[1]) if len(found) > 1 else None
    return primary, secondary


def building_structure(building, data):
    ext_wall = building.get("extWall")
    primary, secondary = exterior_materials(ext_wall)
    living = to_number(building.get("livingArea")) or to_number(building.get("baseArea")) or to_number(
        data.get("livingAreaCalc")
    )
    gross = to_number(building.get("grossArea")) or to_number(data.get("grossAreaCalc"))
    bldg_type = str(building.get("bldgType") or "").upper()

    structure = dict.fromkeys(NULL_FIELDS)
    structure.update(dict.fromkeys(UNKNOWN_FIELDS, "Unknown"))
    structure.update({
        "attachment_type": "Detached" if "SINGLE FAMILY" in bldg_type or not bldg_type else None,
        "exterior_wall_material_primary": primary,
        "exterior_wall_material_secondary": secondary,
        "primary_framing_material": first_match(FRAMING_RULES, str(ext_wall or "").upper()),
        "number_of_stories": to_number(building.get("baseFloors")) or to_number(data.get("baseFloors")),
        "finished_base_area": living,
        "unfinished_base_area": max(gross - living, 0) if gross and living else None,
    })
    return structure


def build_structure_data(data):
    buildings = [b for b in data.get("buildingDetails") or [] if isinstance(b, dict)] or [{}]
    return {
        "buildings": [
            {
                "building_index": building_number_of(building, position),
                "structure": building_structure(building, data),
            }
            for position, building in enumerate(buildings, start=1)
        ]
    }


def main(base_dir=".", strict=None):
    data = load_input(os.path.join(base_dir, "input.html"))
    pid = appraiser_id(data)
    structure_data = build_structure_data(data)

    out_path = os.path.join(base_dir, "owners", "structure_data.json")
    write_json(out_path, {f"property_{pid}": structure_data})
    logger.info(f"Structure data: {len(structure_data['buildings'])} buildings for property_{pid}")
    print_status(f"Wrote {out_path} for property_{pid}")
    return out_path


if __name__ == "__main__":
    main()
