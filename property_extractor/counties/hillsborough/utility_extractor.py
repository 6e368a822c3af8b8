"""Per-building utility records from the Hillsborough building section.

The Heat/Ac characteristic drives the HVAC fields; everything else is read
from free text in the building block. Writes owners/utilities_data.json as
{"property_<display strap>": {"utilities": [{"building_number": 1, ...}]}}.
"""

import logging
import os
import re

from ...code_mapper import compile_rules, first_match
from ...records import utility_record
from ...utils import print_status, write_json
from .page import characteristic, display_strap, load_page, parse_buildings

logger = logging.getLogger(__name__)

COOLING_RULES = compile_rules([
    (r"\bmini\s*split\b|\bductless\b", "Ductless"),
    (r"\bzoned\b", "Zoned"),
    (r"\bgeothermal\b", "GeothermalCooling"),
    (r"\bhybrid\b", "Hybrid"),
    (r"\bwhole\s*house\s*fan\b", "WholeHouseFan"),
    (r"\bceiling fans\b", "CeilingFans"),
    (r"\bceiling fan\b", "CeilingFan"),
    (r"\bwindow\b|\bwall unit\b", "WindowAirConditioner"),
    (r"\bcentral\b", "CentralAir"),
    (r"\belectric\b", "Electric"),
])

HEATING_RULES = compile_rules([
    (r"\bheat pump\b", "HeatPump"),
    (r"\bductless\b|\bmini\s*split\b", "Ductless"),
    (r"\bradiant\b|\bradiator\b", "Radiant"),
    (r"\bbaseboard\b", "Baseboard"),
    (r"\bgas furnace\b", "GasFurnace"),
    (r"\belectric furnace\b", "ElectricFurnace"),
    (lambda text: "furnace" in text and "gas" in text, "GasFurnace"),
    (lambda text: "furnace" in text and "electric" in text, "ElectricFurnace"),
    (r"\bgas\b", "Gas"),
    (r"\belectric\b", "Electric"),
    (r"\bsolar\b", "Solar"),
    (r"\bcentral\b", "Central"),
])

FUEL_RULES = compile_rules([
    (r"\bpropane\b", "Propane"),
    (r"\bnatural\s*gas\b|\bcity gas\b|\bgas\b", "NaturalGas"),
    (r"\boil\b", "Oil"),
    (r"\bkerosene\b", "Kerosene"),
    (r"\bwood pellet\b", "WoodPellet"),
    (r"\bwood\b", "Wood"),
    (r"\bgeothermal\b", "Geothermal"),
    (r"\bsolar\b", "Solar"),
    (r"\bdistrict\s*steam\b|\bsteam heat\b", "DistrictSteam"),
    (r"\belectric\b", "Electric"),
])

CONFIGURATION_RULES = compile_rules([
    (r"\bvrf\b|\bvariable refrigerant\b", "VRF"),
    (lambda text: "heat pump" in text and "split" in text, "HeatPumpSplit"),
    (r"\bmini\s*split\b|\bductless\b", "MiniSplit"),
    (r"\bpackaged\b|\bpackage unit\b", "PackagedUnit"),
    (r"\bsplit\b", "SplitSystem"),
])

WIRING_RULES = compile_rules([
    (r"\bknob and tube\b", "KnobAndTube"),
    (r"\baluminum\b", "Aluminum"),
    (r"\bcopper\b|\bromex\b", "Copper"),
])

PLUMBING_RULES = compile_rules([
    (r"\bpex\b", "PEX"),
    (r"\bpvc\b", "PVC"),
    (r"\bcopper pip", "Copper"),
    (r"\bgalvanized\b", "GalvanizedSteel"),
    (r"\bcast\s*iron\b", "CastIron"),
])

PUBLIC_UTILITY_RULES = compile_rules([
    (r"\bunderground util", "UndergroundUtilities"),
    (r"\bcable\b", "CableAvailable"),
    (r"\bnatural\s*gas\b|\bgas service\b", "NaturalGasAvailable"),
    (r"\bsewer\b", "SewerAvailable"),
    (r"\bwater\b", "WaterAvailable"),
    (r"\belectric\b", "ElectricityAvailable"),
])

SEWER_RULES = compile_rules([
    (r"\bseptic\b", "Septic"),
    (r"\bcombined sewer\b", "Combined"),
    (r"\bsanitary sewer\b", "Sanitary"),
    (r"\bpublic sewer\b|\bcity sewer\b", "Public"),
])

WATER_SOURCE_RULES = compile_rules([
    (r"\baquifer\b", "Aquifer"),
    (r"\bwell\b", "Well"),
    (r"\bpublic water\b|\bcity water\b", "Public"),
])

SOLAR_PANEL_RULES = compile_rules([
    (r"\bphotovoltaic\b|\bpv\b", "Photovoltaic"),
    (r"\bsolar thermal\b|\bthermal panel\b", "SolarThermal"),
])

CONDENSING_UNIT = {
    "CentralAir": "Yes", "Ductless": "Yes", "Hybrid": "Yes", "GeothermalCooling": "Yes", "Zoned": "Yes",
    "WindowAirConditioner": "No", "CeilingFans": "No", "CeilingFan": "No", "WholeHouseFan": "No",
}

# Heat/Ac codes that name the system outright
COOLING_BY_CODE = {"2": "CentralAir", "3": "WindowAirConditioner"}
HEATING_BY_CODE = {"2": "Central"}

YEAR_PATTERNS = {
    "electrical_rewire_date": r"rewire[ds]? (?:in )?(\d{4})",
    "plumbing_system_installation_date": r"plumbing installed(?: in)? (\d{4})",
    "sewer_connection_date": r"sewer connected(?: in)? (\d{4})",
    "water_connection_date": r"water connected(?: in)? (\d{4})",
    "well_installation_date": r"well installed(?: in)? (\d{4})",
    "solar_installation_date": r"solar (?:system )?installed(?: in)? (\d{4})",
    "hvac_installation_date": r"hvac installed(?: in)? (\d{4})",
}

NUMBER_PATTERNS = {
    "hvac_capacity_kw": r"(\d+(?:\.\d+)?)\s*kw\b",
    "hvac_capacity_tons": r"(\d+(?:\.\d+)?)\s*tons?\b",
    "hvac_seer_rating": r"(\d+(?:\.\d+)?)\s*seer\b",
}


def year_date(pattern, text):
    match = re.search(pattern, text)
    return f"{match.group(1)}-01-01" if match else None


def number(pattern, text):
    match = re.search(pattern, text)
    return float(match.group(1)) if match else None


def solar_panel_present(text):
    if re.search(r"\bno solar\b|\bwithout solar\b", text):
        return False
    if re.search(r"\bsolar panel\b|\bphotovoltaic\b", text):
        return True
    return None


def building_utility(building):
    text = building["text"]
    heat_ac = characteristic(building, "Heat/Ac")
    code = heat_ac["code"].strip() if heat_ac else ""
    hvac_text = f"{text} {heat_ac['description'].lower()} {code}" if heat_ac else text

    cooling = COOLING_BY_CODE.get(code) or first_match(COOLING_RULES, hvac_text)
    configuration = first_match(CONFIGURATION_RULES, hvac_text)
    if configuration is None and heat_ac and (heat_ac["description"] or code):
        configuration = "Other"
    panel = re.search(r"(\d{2,3})\s*amp", text)

    record = utility_record(
        building_number=building["building_number"],
        cooling_system_type=cooling,
        heating_system_type=HEATING_BY_CODE.get(code) or first_match(HEATING_RULES, hvac_text),
        heating_fuel_type=first_match(FUEL_RULES, hvac_text),
        hvac_system_configuration=configuration,
        hvac_condensing_unit_present=CONDENSING_UNIT.get(cooling),
        electrical_panel_capacity=f"{panel.group(1)} Amp" if panel else None,
        electrical_wiring_type=first_match(WIRING_RULES, text),
        plumbing_system_type=first_match(PLUMBING_RULES, text),
        public_utility_type=first_match(PUBLIC_UTILITY_RULES, text),
        sewer_type=first_match(SEWER_RULES, text),
        water_source_type=first_match(WATER_SOURCE_RULES, text),
        solar_panel_present=solar_panel_present(text),
        solar_panel_type=first_match(SOLAR_PANEL_RULES, text),
        solar_inverter_visible=bool(re.search(r"\binverter\b", text)) and "not visible" not in text,
    )
    for field, pattern in YEAR_PATTERNS.items():
        record[field] = year_date(pattern, text)
    for field, pattern in NUMBER_PATTERNS.items():
        record[field] = number(pattern, text)
    return record


def build_utility_data(soup):
    return {"utilities": [building_utility(building) for building in parse_buildings(soup)]}


def main(base_dir=".", strict=None):
    soup = load_page(os.path.join(base_dir, "input.html"))
    pin = display_strap(soup) or "unknown_id"
    utility_data = build_utility_data(soup)

    out_path = os.path.join(base_dir, "owners", "utilities_data.json")
    write_json(out_path, {f"property_{pin}": utility_data})
    logger.info(f"Utility data: {len(utility_data['utilities'])} buildings for property_{pin}")
    print_status(f"Wrote {out_path} for property_{pin}")
    return out_path


if __name__ == "__main__":
    main()
