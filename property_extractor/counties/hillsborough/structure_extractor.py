"""Per-building structure records from the Hillsborough building characteristics.

Writes owners/structure_data.json as
{"property_<display strap>": {"structures": [{"building_number": 1, ...}]}}.
"""

import logging
import os

from ...code_mapper import compile_rules, first_match
from ...records import structure_record
from ...utils import print_status, write_json
from .page import (
    characteristic_number,
    characteristic_text,
    display_strap,
    load_page,
    parse_buildings,
)

logger = logging.getLogger(__name__)

ARCHITECTURAL_STYLE_RULES = compile_rules([
    (r"mid\s*-?\s*century|mcmod", "MidCenturyModern"),
    (r"contemporary|modern|current", "Contemporary"),
    (r"victorian", "Victorian"),
    (r"ranch", "Ranch"),
    (r"craftsman", "Craftsman"),
    (r"tudor", "Tudor"),
    (r"minimal", "Minimalist"),
    (r"colonial", "Colonial"),
    (r"farm\s*house", "Farmhouse"),
])

ATTACHMENT_RULES = compile_rules([
    (r"\btown\s*(house|home)|\brow\s*(house|home)", "Attached"),
    (r"\bduplex\b|\bsemi[- ]?detached\b", "SemiDetached"),
    (r"\bquad\b|\bfourplex\b|\btriplex\b|\bcondo\b|\bapartment\b|\bmulti\b|\bmfr\b", "Attached"),
])

CONDITION_RULES = compile_rules([
    (r"new", "New"),
    (r"excellent", "Excellent"),
    (r"good|average|typical", "Good"),
    (r"fair", "Fair"),
    (r"poor", "Poor"),
    (r"damag", "Damaged"),
])

# Ordered: specific materials before the block/masonry catch-all.
EXTERIOR_WALL_RULES = compile_rules([
    (r"stucco", "Stucco"),
    (r"brick", "Brick"),
    (r"stone", "Natural Stone"),
    (r"vinyl", "Vinyl Siding"),
    (r"wood", "Wood Siding"),
    (r"fiber cement|hardie", "Fiber Cement Siding"),
    (r"metal", "Metal Siding"),
    (r"concrete block|masonry|\bcb\b", "Concrete Block"),
    (r"eifs", "EIFS"),
    (r"\blog\b", "Log"),
    (r"adobe", "Adobe"),
    (r"precast", "Precast Concrete"),
    (r"curtain", "Curtain Wall"),
])

INTERIOR_WALL_RULES = compile_rules([
    (r"drywall|gypsum", "Drywall"),
    (r"plaster", "Plaster"),
    (r"panel", "Wood Paneling"),
    (r"brick", "Exposed Brick"),
    (r"block", "Exposed Block"),
    (r"wainscot", "Wainscoting"),
    (r"shiplap", "Shiplap"),
    (r"board.*batten", "Board and Batten"),
    (r"tile", "Tile"),
    (r"stone", "Stone Veneer"),
    (r"metal", "Metal Panels"),
    (r"glass", "Glass Panels"),
    (r"concrete", "Concrete"),
])

FLOORING_RULES = compile_rules([
    (r"ceramic.*tile|tile.*ceramic", "Ceramic Tile"),
    (r"porcelain", "Porcelain Tile"),
    (r"stone.*tile|tile.*stone|marble", "Natural Stone Tile"),
    (r"tile", "Ceramic Tile"),
    (r"carpet", "Carpet"),
    (r"vinyl plank", "Luxury Vinyl Plank"),
    (r"vinyl", "Sheet Vinyl"),
    (r"laminate", "Laminate"),
    (r"hardwood", "Solid Hardwood"),
    (r"engineered", "Engineered Hardwood"),
    (r"bamboo", "Bamboo"),
    (r"cork", "Cork"),
    (r"linoleum", "Linoleum"),
    (r"terrazzo", "Terrazzo"),
    (r"concrete", "Polished Concrete"),
    (r"epoxy", "Epoxy Coating"),
])

SECONDARY_FLOORING = {
    "Solid Hardwood", "Engineered Hardwood", "Laminate", "Luxury Vinyl Plank",
    "Ceramic Tile", "Carpet", "Area Rugs", "Transition Strips",
}

ROOF_COVERING_RULES = compile_rules([
    (r"architectural|asphalt|comp shingle", "Architectural Asphalt Shingle"),
    (r"3-tab", "3-Tab Asphalt Shingle"),
    (r"metal.*standing|standing.*metal", "Metal Standing Seam"),
    (r"metal", "Metal Corrugated"),
    (r"clay", "Clay Tile"),
    (r"concrete", "Concrete Tile"),
    (r"synthetic.*slate|slate.*synthetic", "Synthetic Slate"),
    (r"slate", "Natural Slate"),
    (r"wood shake", "Wood Shake"),
    (r"wood shingle", "Wood Shingle"),
    (r"\btpo\b", "TPO Membrane"),
    (r"epdm", "EPDM Membrane"),
    (r"modified bitumen", "Modified Bitumen"),
    (r"built-up", "Built-Up Roof"),
    (r"green roof", "Green Roof System"),
    (r"solar", "Solar Integrated Tiles"),
])

ROOF_MATERIAL_RULES = compile_rules([
    (r"shingle", "Shingle"),
    (r"metal", "Metal"),
    (r"tile", "CeramicTile"),
    (r"slate", "Stone"),
    (r"wood", "Wood"),
    (r"membrane|tpo|epdm|bitumen|built-up", "Composition"),
    (r"green roof", "Manufactured"),
    (r"solar", "Glass"),
    (r"concrete", "Concrete"),
])

ROOF_DESIGN_RULES = compile_rules([
    (lambda text: "gable" in text and "hip" in text, "Combination"),
    (r"gable", "Gable"),
    (r"hip", "Hip"),
    (r"flat", "Flat"),
    (r"mansard", "Mansard"),
    (r"gambrel", "Gambrel"),
    (r"shed", "Shed"),
    (r"saltbox", "Saltbox"),
    (r"butterfly", "Butterfly"),
    (r"bonnet", "Bonnet"),
    (r"clerestory", "Clerestory"),
    (r"dome", "Dome"),
    (r"barrel", "Barrel"),
])

FRAMING_RULES = compile_rules([
    (r"post\s*[- ]*and\s*[- ]*beam", "Post and Beam"),
    (r"\blog\b", "Log Construction"),
    (r"engineered|\blvl\b", "Engineered Lumber"),
    (r"poured|cast-in-place", "Poured Concrete"),
    (r"concrete block|\bcmu\b|\bblock\b", "Concrete Block"),
    (r"masonry|brick|stone", "Masonry"),
    (r"steel", "Steel Frame"),
    (r"wood", "Wood Frame"),
])


def flooring_materials(building):
    """Primary and secondary flooring from the Interior Flooring rows, in page order"""
    found = []
    for entry in building["characteristics"].get("interior_flooring") or []:
        material = first_match(FLOORING_RULES, (entry["description"] or entry["code"]).lower())
        if material and material not in found:
            found.append(material)
    primary = found[0] if found else None
    secondary = None
    for material in found[1:]:
        if material == "Porcelain Tile":
            material = "Ceramic Tile"
        if material in SECONDARY_FLOORING and material != primary:
            secondary = material
            break
    return primary, secondary


def attachment_type(building):
    text = f"{characteristic_text(building, 'Type')} {building['title'].lower()}"
    return first_match(ATTACHMENT_RULES, text, default="Detached")


def building_structure(building):
    condition = first_match(CONDITION_RULES, characteristic_text(building, "Condition"))
    roof_covering = first_match(ROOF_COVERING_RULES, characteristic_text(building, "Roof Cover"))
    flooring_primary, flooring_secondary = flooring_materials(building)
    finished_area = building["heated_area"] or characteristic_number(building, "Heated Area")
    return structure_record(
        building_number=building["building_number"],
        architectural_style_type=first_match(
            ARCHITECTURAL_STYLE_RULES, characteristic_text(building, "Architectural Style")
        ),
        attachment_type=attachment_type(building),
        exterior_wall_condition=condition,
        exterior_wall_condition_primary=condition,
        exterior_wall_material_primary=first_match(
            EXTERIOR_WALL_RULES, characteristic_text(building, "Exterior Wall")
        ),
        finished_base_area=int(finished_area) if finished_area else None,
        flooring_condition=condition,
        flooring_material_primary=flooring_primary,
        flooring_material_secondary=flooring_secondary,
        interior_wall_condition=condition,
        interior_wall_surface_material_primary=first_match(
            INTERIOR_WALL_RULES, characteristic_text(building, "Interior Walls")
        ),
        number_of_stories=characteristic_number(building, "Stories"),
        primary_framing_material=first_match(FRAMING_RULES, characteristic_text(building, "Class")),
        roof_condition=condition,
        roof_covering_material=roof_covering,
        roof_design_type=first_match(ROOF_DESIGN_RULES, characteristic_text(building, "Roof Structure")),
        roof_material_type=first_match(ROOF_MATERIAL_RULES, (roof_covering or "").lower()),
    )


def build_structure_data(soup):
    return {"structures": [building_structure(building) for building in parse_buildings(soup)]}


def main(base_dir=".", strict=None):
    soup = load_page(os.path.join(base_dir, "input.html"))
    pin = display_strap(soup) or "unknown_id"
    structure_data = build_structure_data(soup)

    out_path = os.path.join(base_dir, "owners", "structure_data.json")
    write_json(out_path, {f"property_{pin}": structure_data})
    logger.info(f"Structure data: {len(structure_data['structures'])} buildings for property_{pin}")
    print_status(f"Wrote {out_path} for property_{pin}")
    return out_path


if __name__ == "__main__":
    main()
