"""HVAC per building from the Polk CNTRL HEATING / AC element."""

import logging
import os

from ...records import utility_record
from ...utils import print_status, write_json
from .page import element_units, load_page, parse_buildings, property_id

logger = logging.getLogger(__name__)


def building_utility(building):
    central = (element_units(building, "CNTRL HEATING / AC") or "").upper() == "Y"
    return utility_record(
        heating_system_type="Central" if central else None,
        cooling_system_type="CentralAir" if central else None,
        solar_panel_present=False,
        solar_inverter_visible=False,
    )


def build_utility_data(soup):
    return {str(building["building_number"]): building_utility(building) for building in parse_buildings(soup)}


def main(base_dir=".", strict=None):
    soup = load_page(os.path.join(base_dir, "input.html"))
    pid = property_id(soup)

    out_path = os.path.join(base_dir, "owners", "utilities_data.json")
    write_json(out_path, {f"property_{pid}": build_utility_data(soup)})
    print_status(f"Wrote {out_path} for property_{pid}")
    return out_path


if __name__ == "__main__":
    main()
