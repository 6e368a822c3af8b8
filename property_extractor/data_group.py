import logging
import os
import re

from .utils import write_json

logger = logging.getLogger(__name__)

RELATIONSHIP_RE = re.compile(r"^relationship_(?P<from>.+?)_has_(?P<to>.+)\.json$")


def relationship_type(filename):
    """'relationship_sales_history_2_has_person_1.json' -> 'sales_history_has_person'"""
    match = RELATIONSHIP_RE.match(filename)
    if not match:
        return None
    from_type = re.sub(r"_\d+$", "", match.group("from"))
    to_type = re.sub(r"_\d+$", "", match.group("to"))
    return f"{from_type}_has_{to_type}"


def build_county_data_group(data_dir, output_name="county_data_group.json"):
    """Index every relationship file in data_dir under its relationship type"""
    grouped = {}
    for filename in sorted(os.listdir(data_dir)):
        rel_type = relationship_type(filename)
        if not rel_type:
            continue
        grouped.setdefault(rel_type, []).append({"/": f"./{filename}"})

    relationships = {}
    for rel_type, links in grouped.items():
        relationships[rel_type] = links[0] if len(links) == 1 else links

    county_data = {"label": "County", "relationships": relationships}
    write_json(os.path.join(data_dir, output_name), county_data)
    logger.info(f"Wrote {output_name} with {len(relationships)} relationship types")
    return county_data
