"""Alachua County code tables: property use codes and deed instruments."""

from ...code_mapper import CodeMapper, property_use_record

# Every code the appraiser publishes; each must have a row in PROPERTY_USE_CODE_MAP.
PROPERTY_USE_CODES = (
    "00000", "00100", "00101", "00102", "00200", "00201", "00202", "00300", "00400", "00600",
    "00700", "00800", "00802", "00900", "01000", "01100", "01200", "01300", "01400", "01600",
    "01601", "01700", "01701", "01800", "01900", "01901", "02000", "02100", "02200", "02300",
    "02400", "02500", "02600", "02700", "02800", "02900", "03000", "03200", "03300", "03400",
    "03500", "03600", "03700", "03800", "03900", "04000", "04100", "04200", "04300", "04500",
    "04600", "04700", "04800", "04801", "04803", "04900", "05000", "05100", "05200", "05300",
    "05400", "05500", "05600", "05700", "05900", "06000", "06100", "06200", "06500", "06600",
    "06700", "06800", "06900", "07000", "07100", "07200", "07300", "07400", "07500", "07600",
    "07700", "07800", "07900", "08000", "08010", "08011", "08020", "08030", "08040", "08050",
    "08090", "08200", "08300", "08400", "08500", "08600", "08700", "08701", "08710", "08800",
    "08900", "09000", "09100", "09110", "09200", "09300", "09400", "09500", "09600", "09601",
    "09700", "09800", "09900",
)

PROPERTY_USE_DEFAULTS = ("FeeSimple", "Improved", None, "Unknown", "Building")

# code: (ownership_estate_type, build_status, structure_form, property_usage_type, property_type)
PROPERTY_USE_CODE_MAP = {
    "00000": ("FeeSimple", "VacantLand", None, "Unknown", "LandParcel"),
    "00100": ("FeeSimple", "Improved", "SingleFamilyDetached", "Residential", "Building"),
    "00101": ("FeeSimple", "Improved", "SingleFamilyDetached", "Residential", "Building"),
    "00102": ("FeeSimple", "Improved", "SingleFamilyDetached", "Residential", "Building"),
    "00200": ("FeeSimple", "Improved", "ManufacturedHousing", "Residential", "ManufacturedHome"),
    "00201": ("FeeSimple", "Improved", "ManufacturedHousing", "Residential", "ManufacturedHome"),
    "00202": ("FeeSimple", "Improved", "ManufacturedHousing", "Residential", "ManufacturedHome"),
    "00300": ("FeeSimple", "Improved", "MultiFamily5Plus", "Residential", "Building"),
    "00400": ("Condominium", "Improved", "ApartmentUnit", "Residential", "Unit"),
    "00600": ("FeeSimple", "Improved", "MultiFamily5Plus", "Retirement", "Building"),
    "00700": ("FeeSimple", "Improved", "SingleFamilyDetached", "Residential", "Building"),
    "00800": ("FeeSimple", "Improved", "MultiFamilyLessThan10", "Residential", "Building"),
    "00802": ("FeeSimple", "Improved", "MultiFamilyLessThan10", "Residential", "Building"),
    "00900": ("FeeSimple", "VacantLand", None, "ResidentialCommonElementsAreas", "LandParcel"),
    "01000": ("FeeSimple", "VacantLand", None, "Commercial", "LandParcel"),
    "01100": ("FeeSimple", "Improved", None, "RetailStore", "Building"),
    "01200": ("FeeSimple", "Improved", None, "RetailStore", "Building"),
    "01300": ("FeeSimple", "Improved", None, "DepartmentStore", "Building"),
    "01400": ("FeeSimple", "Improved", None, "Supermarket", "Building"),
    "01600": ("FeeSimple", "Improved", None, "ShoppingCenterCommunity", "Building"),
    "01601": ("FeeSimple", "Improved", None, "ShoppingCenterCommunity", "Building"),
    "01700": ("FeeSimple", "Improved", None, "OfficeBuilding", "Building"),
    "01701": ("FeeSimple", "Improved", None, "GovernmentProperty", "Building"),
    "01800": ("FeeSimple", "Improved", None, "OfficeBuilding", "Building"),
    "01900": ("FeeSimple", "Improved", None, "OfficeBuilding", "Building"),
    "01901": ("FeeSimple", "Improved", None, "MedicalOffice", "Building"),
    "02000": ("FeeSimple", "Improved", None, "TransportationTerminal", "Building"),
    "02100": ("FeeSimple", "Improved", None, "Restaurant", "Building"),
    "02200": ("FeeSimple", "Improved", None, "Restaurant", "Building"),
    "02300": ("FeeSimple", "Improved", None, "FinancialInstitution", "Building"),
    "02400": ("FeeSimple", "Improved", None, "FinancialInstitution", "Building"),
    "02500": ("FeeSimple", "Improved", None, "RetailStore", "Building"),
    "02600": ("FeeSimple", "Improved", None, "ServiceStation", "Building"),
    "02700": ("FeeSimple", "Improved", None, "AutoSalesRepair", "Building"),
    "02800": ("FeeSimple", "Improved", None, "TransportationTerminal", "LandParcel"),
    "02900": ("FeeSimple", "Improved", None, "WholesaleOutlet", "Building"),
    "03000": ("FeeSimple", "Improved", None, "RetailStore", "Building"),
    "03200": ("FeeSimple", "Improved", None, "Theater", "Building"),
    "03300": ("FeeSimple", "Improved", None, "Entertainment", "Building"),
    "03400": ("FeeSimple", "Improved", None, "Entertainment", "Building"),
    "03500": ("FeeSimple", "Improved", None, "Entertainment", "Building"),
    "03600": ("FeeSimple", "Improved", None, "Recreational", "Building"),
    "03700": ("FeeSimple", "Improved", None, "RaceTrack", "Building"),
    "03800": ("FeeSimple", "Improved", None, "GolfCourse", "LandParcel"),
    "03900": ("FeeSimple", "Improved", None, "Hotel", "Building"),
    "04000": ("FeeSimple", "VacantLand", None, "Industrial", "LandParcel"),
    "04100": ("FeeSimple", "Improved", None, "LightManufacturing", "Building"),
    "04200": ("FeeSimple", "Improved", None, "HeavyManufacturing", "Building"),
    "04300": ("FeeSimple", "Improved", None, "LumberYard", "Building"),
    "04500": ("FeeSimple", "Improved", None, "Cannery", "Building"),
    "04600": ("FeeSimple", "Improved", None, "PackingPlant", "Building"),
    "04700": ("FeeSimple", "Improved", None, "MineralProcessing", "Building"),
    "04800": ("FeeSimple", "Improved", None, "Warehouse", "Building"),
    "04801": ("FeeSimple", "Improved", None, "Warehouse", "Building"),
    "04803": ("FeeSimple", "Improved", None, "Warehouse", "Building"),
    "04900": ("FeeSimple", "Improved", None, "OpenStorage", "LandParcel"),
    "05000": ("FeeSimple", "Improved", None, "Agricultural", "LandParcel"),
    "05100": ("FeeSimple", "Improved", None, "DrylandCropland", "LandParcel"),
    "05200": ("FeeSimple", "Improved", None, "CroplandClass2", "LandParcel"),
    "05300": ("FeeSimple", "Improved", None, "CroplandClass3", "LandParcel"),
    "05400": ("FeeSimple", "Improved", None, "TimberLand", "LandParcel"),
    "05500": ("FeeSimple", "Improved", None, "TimberLand", "LandParcel"),
    "05600": ("FeeSimple", "Improved", None, "TimberLand", "LandParcel"),
    "05700": ("FeeSimple", "Improved", None, "TimberLand", "LandParcel"),
    "05900": ("FeeSimple", "Improved", None, "TimberLand", "LandParcel"),
    "06000": ("FeeSimple", "Improved", None, "GrazingLand", "LandParcel"),
    "06100": ("FeeSimple", "Improved", None, "GrazingLand", "LandParcel"),
    "06200": ("FeeSimple", "Improved", None, "GrazingLand", "LandParcel"),
    "06500": ("FeeSimple", "Improved", None, "GrazingLand", "LandParcel"),
    "06600": ("FeeSimple", "Improved", None, "OrchardGroves", "LandParcel"),
    "06700": ("FeeSimple", "Improved", None, "LivestockFacility", "LandParcel"),
    "06800": ("FeeSimple", "Improved", None, "LivestockFacility", "LandParcel"),
    "06900": ("FeeSimple", "Improved", None, "Ornamentals", "LandParcel"),
    "07000": ("FeeSimple", "VacantLand", None, "GovernmentProperty", "LandParcel"),
    "07100": ("FeeSimple", "Improved", None, "Church", "Building"),
    "07200": ("FeeSimple", "Improved", None, "PrivateSchool", "Building"),
    "07300": ("FeeSimple", "Improved", None, "PrivateHospital", "Building"),
    "07400": ("FeeSimple", "Improved", "MultiFamily5Plus", "HomesForAged", "Building"),
    "07500": ("FeeSimple", "Improved", None, "NonProfitCharity", "Building"),
    "07600": ("FeeSimple", "Improved", None, "MortuaryCemetery", "LandParcel"),
    "07700": ("FeeSimple", "Improved", None, "ClubsLodges", "Building"),
    "07800": ("FeeSimple", "Improved", None, "SanitariumConvalescentHome", "Building"),
    "07900": ("FeeSimple", "Improved", None, "CulturalOrganization", "Building"),
    "08000": ("FeeSimple", "VacantLand", None, "Conservation", "LandParcel"),
    "08010": ("FeeSimple", "VacantLand", None, "GovernmentProperty", "LandParcel"),
    "08011": ("FeeSimple", "VacantLand", None, "GovernmentProperty", "LandParcel"),
    "08020": ("FeeSimple", "VacantLand", None, "GovernmentProperty", "LandParcel"),
    "08030": ("FeeSimple", "VacantLand", None, "GovernmentProperty", "LandParcel"),
    "08040": ("FeeSimple", "VacantLand", None, "GovernmentProperty", "LandParcel"),
    "08050": ("FeeSimple", "VacantLand", None, "GovernmentProperty", "LandParcel"),
    "08090": ("FeeSimple", "VacantLand", None, "GovernmentProperty", "LandParcel"),
    "08200": ("FeeSimple", "Improved", None, "ForestParkRecreation", "LandParcel"),
    "08300": ("FeeSimple", "Improved", None, "PublicSchool", "Building"),
    "08400": ("FeeSimple", "Improved", None, "GovernmentProperty", "Building"),
    "08500": ("FeeSimple", "Improved", None, "PublicHospital", "Building"),
    "08600": ("FeeSimple", "Improved", None, "GovernmentProperty", "Building"),
    "08700": ("FeeSimple", "Improved", None, "GovernmentProperty", "Building"),
    "08701": ("FeeSimple", "Improved", None, "GovernmentProperty", "Building"),
    "08710": ("FeeSimple", "Improved", None, "Conservation", "LandParcel"),
    "08800": ("FeeSimple", "Improved", None, "GovernmentProperty", "Building"),
    "08900": ("FeeSimple", "Improved", None, "GovernmentProperty", "Building"),
    "09000": ("Leasehold", "Improved", None, "Unknown", "LandParcel"),
    "09100": ("FeeSimple", "Improved", None, "Utility", "Building"),
    "09110": ("FeeSimple", "Improved", None, "Railroad", "LandParcel"),
    "09200": ("FeeSimple", "Improved", None, "MineralProcessing", "LandParcel"),
    "09300": ("SubsurfaceRights", "VacantLand", None, "ReferenceParcel", "LandParcel"),
    "09400": ("RightOfWay", "VacantLand", None, "ReferenceParcel", "LandParcel"),
    "09500": ("FeeSimple", "VacantLand", None, "RiversLakes", "LandParcel"),
    "09600": ("FeeSimple", "Improved", None, "SewageDisposal", "LandParcel"),
    "09601": ("FeeSimple", "Improved", None, "SewageDisposal", "LandParcel"),
    "09700": ("FeeSimple", "Improved", None, "Recreational", "LandParcel"),
    "09800": ("FeeSimple", "VacantLand", None, "ReferenceParcel", "LandParcel"),
    "09900": ("FeeSimple", "VacantLand", None, "TransitionalProperty", "LandParcel"),
}

DEED_TYPE_MAP = {
    "WD": "Warranty Deed",
    "WARRANTY_DEED": "Warranty Deed",
    "WARRANTY": "Warranty Deed",
    "QD": "Quitclaim Deed",
    "QUIT_CLAIM_DEED": "Quitclaim Deed",
    "QUITCLAIM_DEED": "Quitclaim Deed",
    "SWD": "Special Warranty Deed",
    "SPECIAL_WARRANTY_DEED": "Special Warranty Deed",
    "PRD": "Personal Representative Deed",
    "PERSONAL_REPRESENTATIVE_DEED": "Personal Representative Deed",
    "TD": "Trustee's Deed",
    "TRUST_DEED": "Trustee's Deed",
    "TRUSTEES_DEED": "Trustee's Deed",
    "SHD": "Sheriff's Deed",
    "SHERIFF_DEED": "Sheriff's Deed",
    "TAX": "Tax Deed",
    "TAX_DEED": "Tax Deed",
    "GR": "Grant Deed",
    "GRANT_DEED": "Grant Deed",
    "BSD": "Bargain and Sale Deed",
    "BARGAIN_AND_SALE_DEED": "Bargain and Sale Deed",
    "LADY_BIRD": "Lady Bird Deed",
    "LBD": "Lady Bird Deed",
    "TOD": "Transfer on Death Deed",
    "TRANSFER_ON_DEATH_DEED": "Transfer on Death Deed",
    "DEED_IN_LIEU": "Deed in Lieu of Foreclosure",
    "DIL": "Deed in Lieu of Foreclosure",
    "LIFE_ESTATE_DEED": "Life Estate Deed",
    "LED": "Life Estate Deed",
}


def deed_key(value):
    return "_".join(str(value).upper().split()) or None


def deed_candidates(key):
    return [key.replace("_", "")]


PROPERTY_USE_MAPPER = CodeMapper(
    PROPERTY_USE_CODE_MAP,
    normalize=lambda v: str(v).strip() or None,
    default=PROPERTY_USE_DEFAULTS,
    name="Alachua property use code",
)

DEED_TYPE_MAPPER = CodeMapper(
    DEED_TYPE_MAP,
    normalize=deed_key,
    candidates=deed_candidates,
    default="Miscellaneous",
    name="Alachua deed instrument",
)


def map_property_use(code, strict=False):
    return property_use_record(PROPERTY_USE_MAPPER.map(code, strict=strict))


def map_deed_type(instrument):
    if not instrument:
        return "Miscellaneous"
    return DEED_TYPE_MAPPER.map(instrument)
