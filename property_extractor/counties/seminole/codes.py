"""Seminole County code tables.

The appraiser JSON carries the DOR use code as digits ("0100", "01"). A code
is looked up as given, then by shorter leading prefixes down to two digits;
a single digit is zero padded. Deeds are matched on their description first
and on the short deed code second.
"""

import re

from ...code_mapper import CodeMapper, compile_rules, digits_key, first_match, property_use_record, upper_key
from ...records import lot_type_for_acres

# DOR code: (ownership_estate_type, build_status, structure_form, property_usage_type, property_type)
PROPERTY_USE_CODE_MAP = {
    "00": ("FeeSimple", "VacantLand", None, "Residential", "LandParcel"),
    "0030": ("FeeSimple", "VacantLand", None, "ResidentialWaterfront", "LandParcel"),
    "0003": ("FeeSimple", "VacantLand", "TownhouseRowhouse", "Residential", "LandParcel"),
    "0004": ("FeeSimple", "VacantLand", "ApartmentUnit", "Residential", "LandParcel"),
    "0005": ("FeeSimple", "VacantLand", None, "PlannedUnitDevelopment", "LandParcel"),
    "0011": ("FeeSimple", "Improved", None, "Residential", "Other"),
    "0040": ("FeeSimple", "VacantLand", None, "Residential", "LandParcel"),
    "01": ("FeeSimple", "Improved", "SingleFamilyDetached", "Residential", "Building"),
    "0102": ("FeeSimple", "Improved", "SingleFamilyDetached", "Residential", "Building"),
    "0103": ("FeeSimple", "Improved", "TownhouseRowhouse", "Residential", "Building"),
    "0107": ("FeeSimple", "Improved", "SingleFamilyDetached", "Residential", "Building"),
    "0108": ("FeeSimple", "Improved", "Duplex", "Residential", "Building"),
    "0112": ("FeeSimple", "Improved", "SingleFamilyDetached", "Residential", "Building"),
    "0130": ("FeeSimple", "Improved", "SingleFamilyDetached", "ResidentialWaterfront", "Building"),
    "0135": ("FeeSimple", "Improved", "SingleFamilyDetached", "ResidentialWaterfront", "Building"),
    "0140": ("FeeSimple", "Improved", "SingleFamilyDetached", "Residential", "Building"),
    "0150": ("FeeSimple", "Improved", "SingleFamilyDetached", "AgriculturalResidential", "Building"),
    "0160": ("FeeSimple", "Improved", "SingleFamilyDetached", "ResidentialGolfCourse", "Building"),
    "0161": ("FeeSimple", "Improved", "SingleFamilyDetached", "ResidentialGolfCourse", "Building"),
    "02": ("FeeSimple", "Improved", "ManufacturedHomeOnLand", "Residential", "ManufacturedHome"),
    "0230": ("FeeSimple", "Improved", "ManufacturedHomeOnLand", "ResidentialWaterfront", "ManufacturedHome"),
    "0250": ("FeeSimple", "Improved", "ManufacturedHomeOnLand", "AgriculturalResidential", "ManufacturedHome"),
    "03": ("FeeSimple", "Improved", "MultiFamilyMoreThan10", "Residential", "Building"),
    "0304": ("FeeSimple", "Improved", "MultiFamilyMoreThan10", "Residential", "Building"),
    "04": ("Condominium", "Improved", "ApartmentUnit", "Residential", "Unit"),
    "0403": ("Condominium", "Improved", "ApartmentUnit", "Residential", "Unit"),
    "05": ("Cooperative", "Improved", "ApartmentUnit", "Residential", "Unit"),
    "06": ("FeeSimple", "Improved", None, "Retirement", "Building"),
    "07": ("FeeSimple", "Improved", None, "Residential", "Building"),
    "0730": ("FeeSimple", "Improved", None, "ResidentialWaterfront", "Building"),
    "0740": ("FeeSimple", "Improved", None, "Residential", "Building"),
    "0802": ("FeeSimple", "Improved", "Duplex", "Residential", "Building"),
    "0803": ("FeeSimple", "Improved", "Triplex", "Residential", "Building"),
    "0804": ("FeeSimple", "Improved", "Quadplex", "Residential", "Building"),
    "0805": ("FeeSimple", "Improved", "MultiFamilyLessThan10", "Residential", "Building"),
    "0806": ("FeeSimple", "Improved", "MultiFamilyLessThan10", "Residential", "Building"),
    "0807": ("FeeSimple", "Improved", "MultiFamilyLessThan10", "Residential", "Building"),
    "0808": ("FeeSimple", "Improved", "MultiFamilyLessThan10", "Residential", "Building"),
    "0809": ("FeeSimple", "Improved", "MultiFamilyLessThan10", "Residential", "Building"),
    "09": ("FeeSimple", "Improved", None, "ResidentialCommonElementsAreas", "LandParcel"),
    "10": ("FeeSimple", "VacantLand", None, "Commercial", "LandParcel"),
    "1001": ("FeeSimple", "VacantLand", None, "Office", "LandParcel"),
    "1002": ("FeeSimple", "VacantLand", None, "Commercial", "LandParcel"),
    "1003": ("FeeSimple", "VacantLand", None, "Commercial", "LandParcel"),
    "1004": ("Condominium", "VacantLand", None, "Office", "LandParcel"),
    "1005": ("FeeSimple", "VacantLand", None, "Commercial", "LandParcel"),
    "1010": ("FeeSimple", "VacantLand", None, "MultiFamily", "LandParcel"),
    "1011": ("FeeSimple", "Improved", None, "Commercial", "Other"),
    "1012": ("FeeSimple", "Improved", None, "Commercial", "Other"),
    "1013": ("FeeSimple", "VacantLand", None, "Commercial", "LandParcel"),
    "1015": ("FeeSimple", "VacantLand", None, "PlannedUnitDevelopment", "LandParcel"),
    "1020": ("FeeSimple", "VacantLand", None, "Commercial", "LandParcel"),
    "11": ("FeeSimple", "Improved", None, "RetailStore", "Building"),
    "1100": ("FeeSimple", "Improved", None, "RetailStore", "Building"),
    "1101": ("FeeSimple", "Improved", None, "RetailStore", "Building"),
    "1102": ("FeeSimple", "Improved", None, "RetailStore", "Building"),
    "1103": ("FeeSimple", "Improved", None, "ConvenienceStore", "Building"),
    "1104": ("FeeSimple", "Improved", None, "ConvenienceStoreWithGas", "Building"),
    "1105": ("Condominium", "Improved", None, "RetailStore", "Unit"),
    "12": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "13": ("FeeSimple", "Improved", None, "DepartmentStore", "Building"),
    "1301": ("FeeSimple", "Improved", None, "DepartmentStore", "Building"),
    "1302": ("FeeSimple", "Improved", None, "DiscountStore", "Building"),
    "14": ("FeeSimple", "Improved", None, "Supermarket", "Building"),
    "15": ("FeeSimple", "Improved", None, "ShoppingCenterRegional", "Building"),
    "1501": ("FeeSimple", "Improved", None, "ShoppingCenterRegional", "Building"),
    "16": ("FeeSimple", "Improved", None, "ShoppingCenterCommunity", "Building"),
    "1601": ("FeeSimple", "Improved", None, "ShoppingCenterCommunity", "Building"),
    "1602": ("FeeSimple", "Improved", None, "ShoppingCenterPower", "Building"),
    "1603": ("FeeSimple", "Improved", None, "ShoppingCenterTown", "Building"),
    "1612": ("FeeSimple", "Improved", None, "MixedUse", "Building"),
    "17": ("FeeSimple", "Improved", None, "OfficeBuilding", "Building"),
    "1701": ("FeeSimple", "Improved", None, "OfficeBuilding", "Building"),
    "1702": ("FeeSimple", "Improved", None, "FlexSpace", "Building"),
    "18": ("FeeSimple", "Improved", None, "OfficeBuilding", "Building"),
    "1802": ("FeeSimple", "Improved", None, "OfficeBuilding", "Building"),
    "1803": ("FeeSimple", "Improved", None, "OfficeBuilding", "Building"),
    "1804": ("FeeSimple", "Improved", None, "OfficeBuilding", "Building"),
    "1805": ("FeeSimple", "Improved", None, "OfficeBuilding", "Building"),
    "1806": ("FeeSimple", "Improved", None, "OfficeBuilding", "Building"),
    "1807": ("FeeSimple", "Improved", None, "OfficeBuilding", "Building"),
    "19": ("FeeSimple", "Improved", None, "MedicalOffice", "Building"),
    "1900": ("FeeSimple", "Improved", None, "MedicalOffice", "Building"),
    "1901": ("FeeSimple", "Improved", None, "MedicalOffice", "Building"),
    "1902": ("FeeSimple", "Improved", None, "VeterinaryClinic", "Building"),
    "1903": ("FeeSimple", "Improved", None, "CommunicationFacility", "Building"),
    "1905": ("Condominium", "Improved", None, "Office", "Unit"),
    "1906": ("Condominium", "Improved", None, "Office", "Unit"),
    "20": ("FeeSimple", "Improved", None, "TransportationTerminal", "Building"),
    "21": ("FeeSimple", "Improved", None, "Restaurant", "Building"),
    "2101": ("FeeSimple", "Improved", None, "Restaurant", "Building"),
    "22": ("FeeSimple", "Improved", None, "FastFoodRestaurant", "Building"),
    "23": ("FeeSimple", "Improved", None, "FinancialInstitution", "Building"),
    "2301": ("FeeSimple", "Improved", None, "FinancialInstitution", "Building"),
    "24": ("FeeSimple", "Improved", None, "FinancialInstitution", "Building"),
    "25": ("FeeSimple", "Improved", None, "RepairServiceShop", "Building"),
    "2502": ("FeeSimple", "Improved", None, "DryCleanerLaundromat", "Building"),
    "26": ("FeeSimple", "Improved", None, "ServiceStation", "Building"),
    "2601": ("FeeSimple", "Improved", None, "ConvenienceStoreWithGas", "Building"),
    "2602": ("FeeSimple", "Improved", None, "AutoService", "Building"),
    "2603": ("FeeSimple", "Improved", None, "CarWash", "Building"),
    "2605": ("FeeSimple", "Improved", None, "CarWash", "Building"),
    "27": ("FeeSimple", "Improved", None, "AutoSalesRepair", "Building"),
    "2701": ("FeeSimple", "Improved", None, "AutoSalesRepair", "Building"),
    "2702": ("FeeSimple", "Improved", None, "AutoDealership", "Building"),
    "2703": ("FeeSimple", "Improved", None, "MarineSalesRepair", "Building"),
    "2704": ("FeeSimple", "Improved", None, "VehicleSales", "Building"),
    "2705": ("FeeSimple", "Improved", None, "VehicleRental", "Building"),
    "28": ("FeeSimple", "Improved", None, "MobileHomePark", "LandParcel"),
    "2801": ("FeeSimple", "Improved", None, "ParkingLot", "LandParcel"),
    "29": ("FeeSimple", "Improved", None, "WholesaleOutlet", "Building"),
    "30": ("FeeSimple", "Improved", None, "NurseryGreenhouse", "Building"),
    "3005": ("FeeSimple", "Improved", None, "NurseryGreenhouse", "Building"),
    "31": ("FeeSimple", "Improved", None, "Theater", "Building"),
    "32": ("FeeSimple", "Improved", None, "Theater", "Building"),
    "33": ("FeeSimple", "Improved", None, "NightclubBar", "Building"),
    "3301": ("FeeSimple", "Improved", None, "NightclubBar", "Building"),
    "34": ("FeeSimple", "Improved", None, "RecreationalFacility", "Building"),
    "3401": ("FeeSimple", "Improved", None, "HealthFitnessClub", "Building"),
    "35": ("FeeSimple", "Improved", None, "Entertainment", "Building"),
    "36": ("FeeSimple", "Improved", None, "Camp", "Building"),
    "37": ("FeeSimple", "Improved", None, "RaceTrack", "Building"),
    "38": ("FeeSimple", "Improved", None, "GolfCourse", "Building"),
    "3801": ("FeeSimple", "Improved", None, "GolfCourse", "Building"),
    "39": ("FeeSimple", "Improved", None, "Hotel", "Building"),
    "3901": ("FeeSimple", "Improved", None, "Motel", "Building"),
    "3902": ("FeeSimple", "Improved", None, "Hotel", "Building"),
    "3903": ("FeeSimple", "Improved", None, "LuxuryHotel", "Building"),
    "3905": ("FeeSimple", "Improved", None, "ExtendedStayHotel", "Building"),
    "3910": ("FeeSimple", "Improved", None, "BedAndBreakfast", "Building"),
    "40": ("FeeSimple", "VacantLand", None, "Industrial", "LandParcel"),
    "4001": ("FeeSimple", "VacantLand", None, "Industrial", "LandParcel"),
    "4005": ("FeeSimple", "VacantLand", None, "Industrial", "LandParcel"),
    "4011": ("FeeSimple", "Improved", None, "Industrial", "Other"),
    "4012": ("FeeSimple", "Improved", None, "Industrial", "Other"),
    "4013": ("FeeSimple", "VacantLand", None, "Industrial", "LandParcel"),
    "4020": ("FeeSimple", "VacantLand", None, "Industrial", "LandParcel"),
    "41": ("FeeSimple", "Improved", None, "LightManufacturing", "Building"),
    "4102": ("FeeSimple", "Improved", None, "LightManufacturing", "Building"),
    "4105": ("Condominium", "Improved", None, "LightManufacturing", "Unit"),
    "42": ("FeeSimple", "Improved", None, "HeavyManufacturing", "Building"),
    "43": ("FeeSimple", "Improved", None, "LumberYard", "Building"),
    "44": ("FeeSimple", "Improved", None, "PackingPlant", "Building"),
    "45": ("FeeSimple", "Improved", None, "Cannery", "Building"),
    "46": ("FeeSimple", "Improved", None, "FoodProcessing", "Building"),
    "47": ("FeeSimple", "Improved", None, "MineralProcessing", "Building"),
    "48": ("FeeSimple", "Improved", None, "Warehouse", "Building"),
    "4802": ("FeeSimple", "Improved", None, "MiniWarehouse", "Building"),
    "4805": ("Condominium", "Improved", None, "Warehouse", "Unit"),
    "49": ("FeeSimple", "Improved", None, "OpenStorage", "LandParcel"),
    "50": ("FeeSimple", "Improved", None, "Agricultural", "LandParcel"),
    "5001": ("FeeSimple", "Improved", None, "Agricultural", "LandParcel"),
    "51": ("FeeSimple", "VacantLand", None, "DrylandCropland", "LandParcel"),
    "5101": ("FeeSimple", "VacantLand", None, "DrylandCropland", "LandParcel"),
    "52": ("FeeSimple", "VacantLand", None, "DrylandCropland", "LandParcel"),
    "5201": ("FeeSimple", "VacantLand", None, "DrylandCropland", "LandParcel"),
    "53": ("FeeSimple", "VacantLand", None, "DrylandCropland", "LandParcel"),
    "5301": ("FeeSimple", "VacantLand", None, "DrylandCropland", "LandParcel"),
    "54": ("FeeSimple", "VacantLand", None, "TimberLand", "LandParcel"),
    "5401": ("FeeSimple", "VacantLand", None, "TimberLand", "LandParcel"),
    "55": ("FeeSimple", "VacantLand", None, "TimberLand", "LandParcel"),
    "5501": ("FeeSimple", "VacantLand", None, "TimberLand", "LandParcel"),
    "56": ("FeeSimple", "VacantLand", None, "TimberLand", "LandParcel"),
    "5601": ("FeeSimple", "VacantLand", None, "TimberLand", "LandParcel"),
    "57": ("FeeSimple", "VacantLand", None, "TimberLand", "LandParcel"),
    "5701": ("FeeSimple", "VacantLand", None, "TimberLand", "LandParcel"),
    "58": ("FeeSimple", "VacantLand", None, "TimberLand", "LandParcel"),
    "5801": ("FeeSimple", "VacantLand", None, "TimberLand", "LandParcel"),
    "59": ("FeeSimple", "VacantLand", None, "TimberLand", "LandParcel"),
    "5901": ("FeeSimple", "VacantLand", None, "TimberLand", "LandParcel"),
    "60": ("FeeSimple", "VacantLand", None, "GrazingLand", "LandParcel"),
    "6001": ("FeeSimple", "VacantLand", None, "GrazingLand", "LandParcel"),
    "6010": ("FeeSimple", "Improved", None, "HorseFarm", "LandParcel"),
    "6011": ("FeeSimple", "Improved", None, "HorseFarm", "LandParcel"),
    "6020": ("FeeSimple", "Improved", None, "HorseFarm", "LandParcel"),
    "6021": ("FeeSimple", "Improved", None, "HorseFarm", "LandParcel"),
    "6030": ("FeeSimple", "Improved", None, "HorseFarm", "LandParcel"),
    "6031": ("FeeSimple", "Improved", None, "HorseFarm", "LandParcel"),
    "61": ("FeeSimple", "VacantLand", None, "GrazingLand", "LandParcel"),
    "6101": ("FeeSimple", "VacantLand", None, "GrazingLand", "LandParcel"),
    "62": ("FeeSimple", "VacantLand", None, "GrazingLand", "LandParcel"),
    "6201": ("FeeSimple", "VacantLand", None, "GrazingLand", "LandParcel"),
    "63": ("FeeSimple", "VacantLand", None, "GrazingLand", "LandParcel"),
    "6301": ("FeeSimple", "VacantLand", None, "GrazingLand", "LandParcel"),
    "64": ("FeeSimple", "VacantLand", None, "GrazingLand", "LandParcel"),
    "6401": ("FeeSimple", "VacantLand", None, "GrazingLand", "LandParcel"),
    "65": ("FeeSimple", "VacantLand", None, "GrazingLand", "LandParcel"),
    "6501": ("FeeSimple", "VacantLand", None, "GrazingLand", "LandParcel"),
    "66": ("FeeSimple", "VacantLand", None, "OrchardGroves", "LandParcel"),
    "6601": ("FeeSimple", "VacantLand", None, "OrchardGroves", "LandParcel"),
    "67": ("FeeSimple", "VacantLand", None, "Poultry", "LandParcel"),
    "6701": ("FeeSimple", "VacantLand", None, "Poultry", "LandParcel"),
    "68": ("FeeSimple", "VacantLand", None, "DairyFarm", "LandParcel"),
    "6801": ("FeeSimple", "VacantLand", None, "DairyFarm", "LandParcel"),
    "69": ("FeeSimple", "VacantLand", None, "Ornamentals", "LandParcel"),
    "6901": ("FeeSimple", "VacantLand", None, "Ornamentals", "LandParcel"),
    "6902": ("FeeSimple", "Improved", None, "NurseryGreenhouse", "Building"),
    "70": ("FeeSimple", "VacantLand", None, "Institutional", "LandParcel"),
    "71": ("FeeSimple", "Improved", None, "Church", "Building"),
    "72": ("FeeSimple", "Improved", None, "PrivateSchool", "Building"),
    "7201": ("FeeSimple", "Improved", None, "DaycarePreschool", "Building"),
    "73": ("FeeSimple", "Improved", None, "PrivateHospital", "Building"),
    "74": ("FeeSimple", "Improved", None, "Retirement", "Building"),
    "7401": ("FeeSimple", "Improved", "SingleFamilyDetached", "GroupHome", "Building"),
    "7402": ("FeeSimple", "Improved", None, "Retirement", "Building"),
    "75": ("FeeSimple", "Improved", None, "NonProfitCharity", "Building"),
    "7502": ("FeeSimple", "Improved", None, "RehabilitationFacility", "Building"),
    "76": ("FeeSimple", "Improved", None, "MortuaryCemetery", "Building"),
    "7605": ("FeeSimple", "Improved", None, "Cemetery", "LandParcel"),
    "77": ("FeeSimple", "Improved", None, "ClubLodge", "Building"),
    "78": ("FeeSimple", "Improved", None, "VolunteerFireDepartment", "Building"),
    "79": ("FeeSimple", "Improved", None, "CulturalOrganization", "Building"),
    "80": ("FeeSimple", "VacantLand", None, "GovernmentProperty", "LandParcel"),
    "8001": ("RightOfWay", "VacantLand", None, "GovernmentProperty", "LandParcel"),
    "8002": ("RightOfWay", "VacantLand", None, "TransportationTerminal", "LandParcel"),
    "81": ("FeeSimple", "Improved", None, "Military", "Building"),
    "82": ("FeeSimple", "Improved", None, "ForestParkRecreation", "LandParcel"),
    "8201": ("RightOfWay", "Improved", None, "ForestParkRecreation", "LandParcel"),
    "83": ("FeeSimple", "Improved", None, "PublicSchool", "Building"),
    "84": ("FeeSimple", "Improved", None, "PublicCollege", "Building"),
    "85": ("FeeSimple", "Improved", None, "PublicHospital", "Building"),
    "86": ("FeeSimple", "Improved", None, "GovernmentProperty", "Building"),
    "8605": ("FeeSimple", "Improved", None, "GovernmentProperty", "Other"),
    "87": ("FeeSimple", "Improved", None, "GovernmentProperty", "Building"),
    "8705": ("FeeSimple", "Improved", None, "GovernmentProperty", "Other"),
    "88": ("FeeSimple", "Improved", None, "GovernmentProperty", "Building"),
    "8805": ("FeeSimple", "Improved", None, "GovernmentProperty", "Other"),
    "89": ("FeeSimple", "Improved", None, "GovernmentProperty", "Building"),
    "8901": ("FeeSimple", "Improved", None, "Airport", "Building"),
    "8905": ("FeeSimple", "Improved", None, "GovernmentProperty", "Other"),
    "90": ("Leasehold", None, None, "GovernmentProperty", "LandParcel"),
    "91": ("FeeSimple", "Improved", None, "Utility", "LandParcel"),
    "9105": ("FeeSimple", "Improved", None, "Utility", "Other"),
    "92": ("FeeSimple", "Improved", None, "MineralProcessing", "LandParcel"),
    "93": ("SubsurfaceRights", "VacantLand", None, "Unknown", "LandParcel"),
    "94": ("RightOfWay", "VacantLand", None, "TransportationTerminal", "LandParcel"),
    "95": ("FeeSimple", "VacantLand", None, "RiversLakes", "LandParcel"),
    "96": ("FeeSimple", "VacantLand", None, "WasteManagement", "LandParcel"),
    "97": ("FeeSimple", "VacantLand", None, "ForestParkRecreation", "LandParcel"),
    "98": ("FeeSimple", None, None, "CentrallyAssessed", "Other"),
    "99": ("FeeSimple", "VacantLand", None, "Unknown", "LandParcel"),
    "9911": ("FeeSimple", "Improved", None, "Unknown", "Other"),
    "9950": ("FeeSimple", "VacantLand", None, "PlannedUnitDevelopment", "LandParcel"),
    "9999": ("FeeSimple", "VacantLand", None, "Unknown", "LandParcel"),
}

DEED_TYPE_EXACT_MAP = {
    "WARRANTY DEED": "Warranty Deed",
    "GENERAL WARRANTY DEED": "Warranty Deed",
    "LIMITED WARRANTY DEED": "Warranty Deed",
    "SPECIAL WARRANTY DEED": "Special Warranty Deed",
    "QUIT CLAIM DEED": "Quitclaim Deed",
    "QUITCLAIM DEED": "Quitclaim Deed",
    "GRANT DEED": "Grant Deed",
    "BARGAIN AND SALE DEED": "Bargain and Sale Deed",
    "LADY BIRD DEED": "Lady Bird Deed",
    "ENHANCED LIFE ESTATE DEED": "Lady Bird Deed",
    "TRANSFER ON DEATH DEED": "Transfer on Death Deed",
    "SHERIFF'S DEED": "Sheriff's Deed",
    "SHERIFFS DEED": "Sheriff's Deed",
    "TAX DEED": "Tax Deed",
    "TRUSTEE DEED": "Trustee's Deed",
    "TRUSTEE'S DEED": "Trustee's Deed",
    "PERSONAL REPRESENTATIVE DEED": "Personal Representative Deed",
    "CORRECTIVE DEED": "Correction Deed",
    "CORRECTION DEED": "Correction Deed",
    "DEED IN LIEU OF FORECLOSURE": "Deed in Lieu of Foreclosure",
    "LIFE ESTATE DEED": "Life Estate Deed",
    "JOINT TENANCY DEED": "Joint Tenancy Deed",
    "TENANCY IN COMMON DEED": "Tenancy in Common Deed",
    "COMMUNITY PROPERTY DEED": "Community Property Deed",
    "GIFT DEED": "Gift Deed",
    "INTERSPOUSAL TRANSFER DEED": "Interspousal Transfer Deed",
    "WILD DEED": "Wild Deed",
    "SPECIAL MASTER'S DEED": "Special Master’s Deed",
    "SPECIAL MASTERS DEED": "Special Master’s Deed",
    "COURT ORDER DEED": "Court Order Deed",
    "CONTRACT FOR DEED": "Contract for Deed",
    "QUIET TITLE DEED": "Quiet Title Deed",
    "ADMINISTRATOR'S DEED": "Administrator's Deed",
    "ADMINISTRATOR DEED": "Administrator's Deed",
    "ADMINISTRATIVE DEED": "Administrator's Deed",
    "GUARDIAN'S DEED": "Guardian's Deed",
    "GUARDIAN DEED": "Guardian's Deed",
    "RECEIVER'S DEED": "Receiver's Deed",
    "RECEIVER DEED": "Receiver's Deed",
    "RIGHT OF WAY DEED": "Right of Way Deed",
    "VACATION OF PLAT DEED": "Vacation of Plat Deed",
    "ASSIGNMENT OF CONTRACT": "Assignment of Contract",
    "RELEASE OF CONTRACT": "Release of Contract",
    "PROBATE RECORDS": "Personal Representative Deed",
    "MISCELLANEOUS": "Miscellaneous",
}

DEED_TYPE_CODE_MAP = {
    "WD": "Warranty Deed",
    "GWD": "Warranty Deed",
    "LWD": "Warranty Deed",
    "SWD": "Special Warranty Deed",
    "QD": "Quitclaim Deed",
    "QCD": "Quitclaim Deed",
    "GD": "Grant Deed",
    "BSD": "Bargain and Sale Deed",
    "BASD": "Bargain and Sale Deed",
    "LBD": "Lady Bird Deed",
    "TOD": "Transfer on Death Deed",
    "TODD": "Transfer on Death Deed",
    "SD": "Sheriff's Deed",
    "TD": "Trustee's Deed",
    "TRD": "Trustee's Deed",
    "PRD": "Personal Representative Deed",
    "CD": "Correction Deed",
    "COR": "Correction Deed",
    "DIL": "Deed in Lieu of Foreclosure",
    "LED": "Life Estate Deed",
    "JTD": "Joint Tenancy Deed",
    "TIC": "Tenancy in Common Deed",
    "CPD": "Community Property Deed",
    "GFT": "Gift Deed",
    "ITD": "Interspousal Transfer Deed",
    "WLD": "Wild Deed",
    "SMD": "Special Master’s Deed",
    "COD": "Court Order Deed",
    "CFD": "Contract for Deed",
    "QTD": "Quiet Title Deed",
    "ADM": "Administrator's Deed",
    "GUD": "Guardian's Deed",
    "RCD": "Receiver's Deed",
    "RWD": "Right of Way Deed",
    "VPD": "Vacation of Plat Deed",
    "AOC": "Assignment of Contract",
    "ROC": "Release of Contract",
}

# Ordered: SPECIAL WARRANTY must win over WARRANTY.
DEED_TYPE_RULES = [
    (r"QUIT[\s-]*CLAIM", "Quitclaim Deed"),
    (r"SPECIAL\s+WARRANTY", "Special Warranty Deed"),
    (r"WARRANTY", "Warranty Deed"),
    (r"GRANT", "Grant Deed"),
    (r"BARGAIN\s+AND\s+SALE", "Bargain and Sale Deed"),
    (r"LADY\s+BIRD|ENHANCED\s+LIFE\s+ESTATE", "Lady Bird Deed"),
    (r"TRANSFER\s+ON\s+DEATH", "Transfer on Death Deed"),
    (r"SHERIFF", "Sheriff's Deed"),
    (r"TAX\s+DEED", "Tax Deed"),
    (r"TRUSTEE", "Trustee's Deed"),
    (r"PERSONAL\s+REPRESENTATIVE", "Personal Representative Deed"),
    (r"CORRECT(IVE|ION)", "Correction Deed"),
    (r"LIFE\s+ESTATE", "Life Estate Deed"),
    (r"JOINT\s+TENANCY", "Joint Tenancy Deed"),
    (r"TENANCY\s+IN\s+COMMON", "Tenancy in Common Deed"),
    (r"COMMUNITY\s+PROPERTY", "Community Property Deed"),
    (r"GIFT", "Gift Deed"),
    (r"INTERSPOUSAL", "Interspousal Transfer Deed"),
    (r"WILD", "Wild Deed"),
    (r"SPECIAL\s+MASTER", "Special Master’s Deed"),
    (r"COURT\s+ORDER", "Court Order Deed"),
    (r"CONTRACT\s+FOR\s+DEED", "Contract for Deed"),
    (r"QUIET\s+TITLE", "Quiet Title Deed"),
    (r"ADMIN(ISTRATOR|ISTRATIVE)", "Administrator's Deed"),
    (r"GUARDIAN", "Guardian's Deed"),
    (r"RECEIVER", "Receiver's Deed"),
    (r"RIGHT\s+OF\s+WAY", "Right of Way Deed"),
    (r"VACATION\s+OF\s+PLAT", "Vacation of Plat Deed"),
    (r"ASSIGNMENT\s+OF\s+CONTRACT", "Assignment of Contract"),
    (r"RELEASE\s+OF\s+CONTRACT", "Release of Contract"),
]

FILE_DOCUMENT_TYPES = {
    "Title", "ConveyanceDeedQuitClaimDeed", "ConveyanceDeedBargainAndSaleDeed",
    "ConveyanceDeedWarrantyDeed", "ConveyanceDeed", "AssignmentAssignmentOfDeedOfTrust",
    "AssignmentAssignmentOfMortgage", "AssignmentAssignmentOfRents", "Assignment",
    "AssignmentAssignmentOfTrade", "AssignmentBlanketAssignment",
    "AssignmentCooperativeAssignmentOfProprietaryLease", "AffidavitOfDeath",
    "AbstractOfJudgment", "AttorneyInFactAffidavit", "ArticlesOfIncorporation",
    "BuildingPermit", "ComplianceInspectionReport", "ConditionalCommitment",
    "CounselingCertification", "AirportNoisePollutionAgreement", "BreachNotice",
    "BrokerPriceOpinion", "AmendatoryClause", "AssuranceOfCompletion", "Bid",
    "BuildersCertificationBuilderCertificationOfPlansAndSpecifications",
    "BuildersCertificationBuildersCertificate", "BuildersCertificationPropertyInspection",
    "BuildersCertificationTermiteTreatment", "PropertyImage",
}

FILE_DOCUMENT_TYPE_EXACT_MAP = {
    "QUIT CLAIM DEED": "ConveyanceDeedQuitClaimDeed",
    "QUITCLAIM DEED": "ConveyanceDeedQuitClaimDeed",
    "WARRANTY DEED": "ConveyanceDeedWarrantyDeed",
    "GENERAL WARRANTY DEED": "ConveyanceDeedWarrantyDeed",
    "SPECIAL WARRANTY DEED": "ConveyanceDeedWarrantyDeed",
    "BARGAIN AND SALE DEED": "ConveyanceDeedBargainAndSaleDeed",
    "CONVEYANCE DEED": "ConveyanceDeed",
    "DEED": "ConveyanceDeed",
    "ASSIGNMENT OF DEED OF TRUST": "AssignmentAssignmentOfDeedOfTrust",
    "ASSIGNMENT OF MORTGAGE": "AssignmentAssignmentOfMortgage",
    "ASSIGNMENT OF RENTS": "AssignmentAssignmentOfRents",
    "ASSIGNMENT": "Assignment",
    "ASSIGNMENT OF TRADE": "AssignmentAssignmentOfTrade",
    "BLANKET ASSIGNMENT": "AssignmentBlanketAssignment",
    "COOPERATIVE ASSIGNMENT OF PROPRIETARY LEASE": "AssignmentCooperativeAssignmentOfProprietaryLease",
    "AFFIDAVIT OF DEATH": "AffidavitOfDeath",
    "ABSTRACT OF JUDGMENT": "AbstractOfJudgment",
    "ATTORNEY IN FACT AFFIDAVIT": "AttorneyInFactAffidavit",
    "ARTICLES OF INCORPORATION": "ArticlesOfIncorporation",
    "BUILDING PERMIT": "BuildingPermit",
    "COMPLIANCE INSPECTION REPORT": "ComplianceInspectionReport",
    "CONDITIONAL COMMITMENT": "ConditionalCommitment",
    "COUNSELING CERTIFICATION": "CounselingCertification",
    "AIRPORT NOISE POLLUTION AGREEMENT": "AirportNoisePollutionAgreement",
    "BREACH NOTICE": "BreachNotice",
    "BROKER PRICE OPINION": "BrokerPriceOpinion",
    "AMENDATORY CLAUSE": "AmendatoryClause",
    "ASSURANCE OF COMPLETION": "AssuranceOfCompletion",
    "BID": "Bid",
    "BUILDER'S CERTIFICATION OF PLANS AND SPECIFICATIONS":
        "BuildersCertificationBuilderCertificationOfPlansAndSpecifications",
    "BUILDERS CERTIFICATE": "BuildersCertificationBuildersCertificate",
    "BUILDER'S CERTIFICATE": "BuildersCertificationBuildersCertificate",
    "BUILDER'S PROPERTY INSPECTION": "BuildersCertificationPropertyInspection",
    "PROPERTY INSPECTION": "BuildersCertificationPropertyInspection",
    "TERMITE TREATMENT": "BuildersCertificationTermiteTreatment",
    "PROPERTY IMAGE": "PropertyImage",
    "PROPERTY PHOTO": "PropertyImage",
    "PHOTO": "PropertyImage",
    "IMAGE": "PropertyImage",
    "CERTIFICATE OF TITLE": "Title",
    "TITLE": "Title",
}

FILE_DOCUMENT_TYPE_RULES = [
    (r"QUIT[\s-]*CLAIM", "ConveyanceDeedQuitClaimDeed"),
    (r"BARGAIN\s+AND\s+SALE", "ConveyanceDeedBargainAndSaleDeed"),
    (r"WARRANTY", "ConveyanceDeedWarrantyDeed"),
    (r"\bDEED\b", "ConveyanceDeed"),
    (r"ASSIGNMENT\s+OF\s+DEED\s+OF\s+TRUST", "AssignmentAssignmentOfDeedOfTrust"),
    (r"ASSIGNMENT\s+OF\s+MORTGAGE", "AssignmentAssignmentOfMortgage"),
    (r"ASSIGNMENT\s+OF\s+RENTS", "AssignmentAssignmentOfRents"),
    (r"ASSIGNMENT\s+OF\s+TRADE", "AssignmentAssignmentOfTrade"),
    (r"BLANKET\s+ASSIGNMENT", "AssignmentBlanketAssignment"),
    (r"COOPERATIVE.*ASSIGNMENT.*PROPRIETARY\s+LEASE", "AssignmentCooperativeAssignmentOfProprietaryLease"),
    (r"\bASSIGNMENT\b", "Assignment"),
    (r"AFFIDAVIT\s+OF\s+DEATH", "AffidavitOfDeath"),
    (r"ABSTRACT\s+OF\s+JUDGMENT", "AbstractOfJudgment"),
    (r"ATTORNEY\s+IN\s+FACT\s+AFFIDAVIT", "AttorneyInFactAffidavit"),
    (r"ARTICLES\s+OF\s+INCORPORATION", "ArticlesOfIncorporation"),
    (r"BUILDING\s+PERMIT", "BuildingPermit"),
    (r"COMPLIANCE\s+INSPECTION\s+REPORT", "ComplianceInspectionReport"),
    (r"CONDITIONAL\s+COMMITMENT", "ConditionalCommitment"),
    (r"COUNSELING\s+CERTIFICATION", "CounselingCertification"),
    (r"AIRPORT\s+NOISE|NOISE\s+POLLUTION", "AirportNoisePollutionAgreement"),
    (r"BREACH\s+NOTICE", "BreachNotice"),
    (r"BROKER\s+PRICE\s+OPINION", "BrokerPriceOpinion"),
    (r"AMENDATORY\s+CLAUSE", "AmendatoryClause"),
    (r"ASSURANCE\s+OF\s+COMPLETION", "AssuranceOfCompletion"),
    (r"\bBID\b", "Bid"),
    (r"BUILDER'?S\s+CERTIFICATION\s+OF\s+PLANS\s+AND\s+SPECIFICATIONS",
     "BuildersCertificationBuilderCertificationOfPlansAndSpecifications"),
    (r"BUILDER'?S?\s+CERTIFIC(ATE|ATION)", "BuildersCertificationBuildersCertificate"),
    (r"PROPERTY\s+INSPECTION", "BuildersCertificationPropertyInspection"),
    (r"TERMITE", "BuildersCertificationTermiteTreatment"),
    (r"\bTITLE\b", "Title"),
    (r"PHOTO|IMAGE", "PropertyImage"),
]

SALE_TYPE_MAP = {
    "SQ": "TypicallyMotivated",
    "UQ": None,
    "FD": "ReoPostForeclosureSale",
    "PROBATE SALE": "ProbateSale",
    "SHORT SALE": "ShortSale",
    "COURT ORDERED NON-FORECLOSURE SALE": "CourtOrderedNonForeclosureSale",
    "REO POST-FORECLOSURE SALE": "ReoPostForeclosureSale",
    "TRUSTEE NON-JUDICIAL FORECLOSURE SALE": "TrusteeNonJudicialForeclosureSale",
    "RELOCATION SALE": "RelocationSale",
    "TRUSTEE JUDICIAL FORECLOSURE SALE": "TrusteeJudicialForeclosureSale",
    "TYPICALLY MOTIVATED": "TypicallyMotivated",
}

PUBLIC_UTILITY_RULES = compile_rules([
    (r"WATER", "WaterAvailable"),
    (r"ELECTRICITY|POWER", "ElectricityAvailable"),
    (r"SEWER", "SewerAvailable"),
    (r"GAS", "NaturalGasAvailable"),
    (r"CABLE", "CableAvailable"),
    (r"UNDERGROUND UTILITIES", "UndergroundUtilities"),
])

IMPROVEMENT_TYPE_RULES = compile_rules([
    (r"ROOF", "Roofing"),
    (r"POOL|SPA", "PoolSpaInstallation"),
    (r"SCREEN", "ScreenEnclosure"),
    (r"IRRIG", "LandscapeIrrigation"),
    (r"FENCE", "Fencing"),
    (r"SHUTTER|AWNING", "ShutterAwning"),
    (r"WINDOW|DOOR", "ExteriorOpeningsAndFinishes"),
    (r"HVAC|A/C|AIR CONDITIONER|MECHANICAL", "MechanicalHVAC"),
    (r"ELECT", "Electrical"),
    (r"PLUMB", "Plumbing"),
    (r"GAS", "GasInstallation"),
    (r"DEMOL", "Demolition"),
    (r"ADDITION|ADD-ON", "BuildingAddition"),
    (r"SINGLE FAMILY|DWELLING|RESIDENTIAL|NEW HOME", "ResidentialConstruction"),
    (r"COMMERCIAL", "CommercialConstruction"),
    (r"DRIVEWAY|PAVER|SITE", "SiteDevelopment"),
])

IMPROVEMENT_ACTION_RULES = compile_rules([
    (r"\bNEW\b|SINGLE FAMILY|NEW HOME|DWELLING", "New"),
    (r"REROOF|RE-ROOF|REPLACE", "Replacement"),
    (r"REPAIR", "Repair"),
    (r"ADDITION|ADD-ON", "Addition"),
    (r"DEMOL|REMOVE", "Remove"),
])


def shorter_prefixes(key):
    """'0103' -> ['010', '01']; a single digit is zero padded"""
    if len(key) == 1:
        return [key.zfill(2)]
    return [key[:length] for length in range(len(key) - 1, 1, -1)]


PROPERTY_USE_MAPPER = CodeMapper(
    PROPERTY_USE_CODE_MAP,
    normalize=digits_key,
    candidates=shorter_prefixes,
    strict=True,
    name="Seminole DOR code",
)

DEED_EXACT_MAPPER = CodeMapper(DEED_TYPE_EXACT_MAP, rules=DEED_TYPE_RULES, name="Seminole deed description")
DEED_CODE_MAPPER = CodeMapper(DEED_TYPE_CODE_MAP, name="Seminole deed code")
FILE_DOCUMENT_TYPE_MAPPER = CodeMapper(
    FILE_DOCUMENT_TYPE_EXACT_MAP, rules=FILE_DOCUMENT_TYPE_RULES, name="Seminole document type"
)


def map_property_use(raw, strict=True):
    return property_use_record(PROPERTY_USE_MAPPER.map(raw, strict=strict))


def map_deed_type(sale):
    """Description (exact, then pattern), then deed code; unmatched deeds are Miscellaneous"""
    description = sale.get("deedDescription") or sale.get("deed_description")
    code = sale.get("deedType") or sale.get("deed_type") or sale.get("deedTypeCode") or sale.get("deed_code")
    mapped = DEED_EXACT_MAPPER.find(description) or DEED_CODE_MAPPER.find(code)
    if mapped:
        return mapped
    if "DEED" in (upper_key(description) or ""):
        return "Miscellaneous"
    return None


def map_file_document_type(value):
    if value in FILE_DOCUMENT_TYPES:
        return value
    return FILE_DOCUMENT_TYPE_MAPPER.find(value)


def map_sale_type(code):
    key = upper_key(code)
    if not key:
        return None
    return SALE_TYPE_MAP.get(key, "TypicallyMotivated")


def map_public_utility_type(value):
    return first_match(PUBLIC_UTILITY_RULES, upper_key(value))


def map_lot_type(method, acres):
    if acres is not None:
        return lot_type_for_acres(acres)
    if "PAVED ROAD" in (upper_key(method) or ""):
        return "PavedRoad"
    return None


def map_improvement_type(description, code=None):
    mapped = first_match(IMPROVEMENT_TYPE_RULES, upper_key(description))
    if mapped is None and not description and upper_key(code) == "A":
        return "ResidentialConstruction"
    return mapped


def map_improvement_status(status_code):
    return "Completed" if str(status_code or "").strip() == "07" else None


def map_improvement_action(description):
    return first_match(IMPROVEMENT_ACTION_RULES, upper_key(description))


FLOOR_LEVELS = ("1st Floor", "2nd Floor", "3rd Floor", "4th Floor")
FLOOR_LEVEL_ALIASES = {
    "first floor": "1st Floor",
    "second floor": "2nd Floor",
    "third floor": "3rd Floor",
    "fourth floor": "4th Floor",
}


def normalize_floor_level(value):
    """1..4, '2nd floor', 'LEVEL 3' -> '<n>th Floor'; anything else -> None"""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = round(value)
        return FLOOR_LEVELS[number - 1] if 1 <= number <= 4 else None
    raw = str(value).strip()
    if raw in FLOOR_LEVELS:
        return raw
    if raw.lower() in FLOOR_LEVEL_ALIASES:
        return FLOOR_LEVEL_ALIASES[raw.lower()]
    match = re.match(r"^(\d)(?:ST|ND|RD|TH)?\s*FLOOR$", raw.upper()) or re.match(r"^LEVEL\s*(\d)$", raw.upper())
    if match:
        return normalize_floor_level(int(match.group(1)))
    return None


SPACE_TYPES = {
    "Attached Garage", "Bedroom", "Building", "Carport", "Enclosed Porch", "Floor",
    "Full Bathroom", "Half Bathroom / Powder Room", "Kitchen", "Living Room", "Patio",
    "Porch", "Storage Room", "Utility Closet",
}
SPACE_TYPE_ALIASES = {
    "garage": "Attached Garage",
    "half bathroom": "Half Bathroom / Powder Room",
    "utility room": "Utility Closet",
}


def normalize_space_type(value):
    raw = str(value or "").strip()
    if not raw:
        return None
    lowered = raw.lower()
    for space_type in SPACE_TYPES:
        if space_type.lower() == lowered:
            return space_type
    return SPACE_TYPE_ALIASES.get(lowered)
