"""Public utility availability inferred from the Seminole service areas."""

import logging
import os

from ...utils import print_status, write_json
from .page import appraiser_id, load_input

logger = logging.getLogger(__name__)

NULL_FIELDS = (
    "cooling_system_type", "heating_system_type", "plumbing_system_type",
    "plumbing_system_type_other_description", "electrical_panel_capacity",
    "electrical_wiring_type", "hvac_condensing_unit_present",
    "electrical_wiring_type_other_description", "solar_panel_type",
    "solar_panel_type_other_description", "smart_home_features",
    "smart_home_features_other_description", "hvac_unit_condition", "hvac_unit_issues",
    "electrical_panel_installation_date", "electrical_rewire_date", "hvac_capacity_kw",
    "hvac_capacity_tons", "hvac_equipment_component", "hvac_equipment_manufacturer",
    "hvac_equipment_model", "hvac_installation_date", "hvac_seer_rating",
    "hvac_system_configuration", "plumbing_system_installation_date", "sewer_connection_date",
    "solar_installation_date", "solar_inverter_installation_date", "solar_inverter_manufacturer",
    "solar_inverter_model", "water_connection_date", "water_heater_installation_date",
    "water_heater_manufacturer", "water_heater_model", "well_installation_date",
)


def public_utility_type(water, sewer, power):
    if water:
        return "WaterAvailable"
    if sewer:
        return "SewerAvailable"
    if power:
        return "ElectricityAvailable"
    return None


def build_utility(data):
    water = (data.get("waterServiceArea") or "").strip()
    sewer = (data.get("sewerServiceArea") or "").strip()
    power = (data.get("powerCompanyName") or "").strip()

    utility = dict.fromkeys(NULL_FIELDS)
    utility.update({
        "public_utility_type": public_utility_type(water, sewer, power),
        "sewer_type": "Public" if sewer else None,
        "water_source_type": "Public" if water else None,
        "solar_panel_present": False,
        "solar_inverter_visible": False,
    })
    return utility


def main(base_dir=".", strict=None):
    data = load_input(os.path.join(base_dir, "input.html"))
    pid = appraiser_id(data)

    out_path = os.path.join(base_dir, "owners", "utilities_data.json")
    write_json(out_path, {f"property_{pid}": build_utility(data)})
    print_status(f"Wrote {out_path} for property_{pid}")
    return out_path


if __name__ == "__main__":
    main()
