"""Hillsborough County code tables.

Use codes are keyed by the full text the appraiser shows ("0100 SINGLE
FAMILY R"). Lookups drop separators and case, then fall back to the
leading four-digit code.
"""

import re

from ...code_mapper import CodeMapper, property_use_record

# use code text: (ownership_estate_type, build_status, structure_form, property_usage_type, property_type)
PROPERTY_USE_CODE_MAP = {
    "0000 VACANT RESIDENTIAL < 20 AC": ("FeeSimple", "VacantLand", None, "Residential", "LandParcel"),
    "0006 VACANT TOWNHOME": ("FeeSimple", "VacantLand", None, "Residential", "LandParcel"),
    "0008 VACANT MH/CONDO COOP": ("Condominium", "VacantLand", None, "Residential", "LandParcel"),
    "0029 PUBLIC LANDS": ("FeeSimple", "VacantLand", None, "GovernmentProperty", "LandParcel"),
    "0040 VACANT CONDO": ("Condominium", "VacantLand", None, "Residential", "LandParcel"),
    "0044 CONDO GARAGE": ("Condominium", "Improved", "ApartmentUnit", "Residential", "Unit"),
    "0045 CONDO CABANA": ("Condominium", "Improved", "ApartmentUnit", "Residential", "Unit"),
    "0100 SINGLE FAMILY R": ("FeeSimple", "Improved", "SingleFamilyDetached", "Residential", "Building"),
    "0102 SFR BLD ARND MH": ("FeeSimple", "Improved", "SingleFamilyDetached", "Residential", "ManufacturedHome"),
    "0106 TOWNHOUSE/VILLA": ("FeeSimple", "Improved", "TownhouseRowhouse", "Residential", "Building"),
    "0111 NEW RES PERMIT": ("FeeSimple", "UnderConstruction", None, "Residential", "Building"),
    "0200 MH": ("FeeSimple", "Improved", "ManufacturedHousing", "Residential", "ManufacturedHome"),
    "0300 MFR >9 UNITS": ("FeeSimple", "Improved", "MultiFamilyMoreThan10", "Residential", "Building"),
    "0309 MFR- Live Local Act": ("FeeSimple", "Improved", "MultiFamily5Plus", "Residential", "Building"),
    "0310 MFR CLASS A": ("FeeSimple", "Improved", "MultiFamilyMoreThan10", "Residential", "Building"),
    "0320 MFR CLASS B": ("FeeSimple", "Improved", "MultiFamilyMoreThan10", "Residential", "Building"),
    "0330 MFR CLASS C": ("FeeSimple", "Improved", "MultiFamilyMoreThan10", "Residential", "Building"),
    "0340 MFR CLASS D": ("FeeSimple", "Improved", "MultiFamilyMoreThan10", "Residential", "Building"),
    "0350 MFR CLASS E": ("FeeSimple", "Improved", "MultiFamilyMoreThan10", "Residential", "Building"),
    "0396 STUDENT HOUSING": ("FeeSimple", "Improved", "MultiFamilyMoreThan10", "Residential", "Building"),
    "0397 RURAL DEVELOPMENT": ("FeeSimple", "Improved", "MultiFamily5Plus", "Residential", "Building"),
    "0398 HUD": ("FeeSimple", "Improved", "MultiFamily5Plus", "Residential", "Building"),
    "0399 LIHTC": ("FeeSimple", "Improved", "MultiFamily5Plus", "Residential", "Building"),
    "0400 CONDOMINIUM": ("Condominium", "Improved", "ApartmentUnit", "Residential", "Unit"),
    "0403 CONDO APARTMENT": ("Condominium", "Improved", "MultiFamily5Plus", "Residential", "Unit"),
    "0408 MH CONDOMINIUM": ("Condominium", "Improved", "ManufacturedHousing", "Residential", "Unit"),
    "0500 COOPERATIVE": ("Cooperative", "Improved", "ApartmentUnit", "Residential", "Unit"),
    "0501 FLORIDA'S LIGHT AND LIFE PARK": ("FeeSimple", "Improved", None, "Residential", "Building"),
    "0508 MH CO-OP": ("Cooperative", "Improved", "ManufacturedHousing", "Residential", "Unit"),
    "0600 RETIREMENT": ("FeeSimple", "Improved", "MultiFamilyMoreThan10", "HomesForAged", "Building"),
    "0610 ALF A": ("FeeSimple", "Improved", "MultiFamilyMoreThan10", "HomesForAged", "Building"),
    "0611 ILF A": ("FeeSimple", "Improved", "MultiFamilyMoreThan10", "HomesForAged", "Building"),
    "0620 ALF B": ("FeeSimple", "Improved", "MultiFamilyMoreThan10", "HomesForAged", "Building"),
    "0621 ILF B": ("FeeSimple", "Improved", "MultiFamilyMoreThan10", "HomesForAged", "Building"),
    "0630 ALF C": ("FeeSimple", "Improved", "MultiFamilyMoreThan10", "HomesForAged", "Building"),
    "0631 ILF C": ("FeeSimple", "Improved", "MultiFamilyMoreThan10", "HomesForAged", "Building"),
    "0640 ALF D": ("FeeSimple", "Improved", "MultiFamilyMoreThan10", "HomesForAged", "Building"),
    "0641 ILF D": ("FeeSimple", "Improved", "MultiFamilyMoreThan10", "HomesForAged", "Building"),
    "0650 NURSING A": ("FeeSimple", "Improved", "MultiFamilyMoreThan10", "HomesForAged", "Building"),
    "0660 NURSING B": ("FeeSimple", "Improved", "MultiFamilyMoreThan10", "HomesForAged", "Building"),
    "0670 NURSING C": ("FeeSimple", "Improved", "MultiFamilyMoreThan10", "HomesForAged", "Building"),
    "0680 NURSING D": ("FeeSimple", "Improved", "MultiFamilyMoreThan10", "HomesForAged", "Building"),
    "0700 MISC RESIDENTIA": ("FeeSimple", "Improved", None, "Residential", "Building"),
    "0800 MFR <10 UNITS": ("FeeSimple", "Improved", "MultiFamilyLessThan10", "Residential", "Building"),
    "0801 MULTI RES DWELLINGS": ("FeeSimple", "Improved", "MultiFamily5Plus", "Residential", "Building"),
    "0901 RESIDENTIAL HOA": ("FeeSimple", "Improved", None, "ResidentialCommonElementsAreas", "Building"),
    "0902 CONDO HOA": ("Condominium", "Improved", "ApartmentUnit", "ResidentialCommonElementsAreas", "Unit"),
    "0903 TOWNHOUSE HOA": ("FeeSimple", "Improved", "TownhouseRowhouse", "ResidentialCommonElementsAreas", "Building"),
    "0910 HOA ROW": ("RightOfWay", "VacantLand", None, "ResidentialCommonElementsAreas", "LandParcel"),
    "1000 VACANT COMM": ("FeeSimple", "VacantLand", None, "Commercial", "LandParcel"),
    "1003 VACANT MULTI FAMILY": ("FeeSimple", "VacantLand", None, "Unknown", "LandParcel"),
    "1005 Vacant ProPark Pad": ("FeeSimple", "VacantLand", None, "Unknown", "LandParcel"),
    "1040 VACANT COMM HOA": ("FeeSimple", "VacantLand", None, "ResidentialCommonElementsAreas", "LandParcel"),
    "1050 VACANT PRO-PARK COMMON AREA": ("FeeSimple", "VacantLand", None, "OfficeBuilding", "LandParcel"),
    "1099 VACANT COMM CONDO": ("Condominium", "VacantLand", None, "Commercial", "LandParcel"),
    "1100 STORE, 1 STORY": ("FeeSimple", "Improved", None, "RetailStore", "Building"),
    "1105 DRUGSTORE": ("FeeSimple", "Improved", None, "RetailStore", "Building"),
    "1110 1 STY STORE A": ("FeeSimple", "Improved", None, "RetailStore", "Building"),
    "1120 1STY STORE B": ("FeeSimple", "Improved", None, "RetailStore", "Building"),
    "1130 1 STY STORE C": ("FeeSimple", "Improved", None, "RetailStore", "Building"),
    "1140 RETAIL SERVICES": ("FeeSimple", "Improved", None, "RetailStore", "Building"),
    "1199 1 STY RETAIL CONDO": ("Condominium", "Improved", "ApartmentUnit", "RetailStore", "Unit"),
    "1200 MIXED USE": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1201 MIXED USE RES": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1203 MIXED USE MULTI FAM": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1211 MIXED USE RETAIL": ("FeeSimple", "Improved", None, "RetailStore", "Building"),
    "1217 MIXED USE OFFICE": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1227 MIXED USE AUTO": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1228 MIXED USE MH PARK": ("FeeSimple", "Improved", None, "Commercial", "ManufacturedHome"),
    "1239 MIXED USE MOTEL": ("FeeSimple", "Improved", None, "Hotel", "Building"),
    "1248 MIXED USE WAREHSE": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1300 DEPT STORE": ("FeeSimple", "Improved", None, "DepartmentStore", "Building"),
    "1305 MALL ANCHORS": ("FeeSimple", "Improved", None, "ShoppingCenterCommunity", "Building"),
    "1310 BIG-BOX STORE": ("FeeSimple", "Improved", None, "RetailStore", "Building"),
    "1320 WAREHSE DEPT STORE": ("FeeSimple", "Improved", None, "DepartmentStore", "Building"),
    "1400 SUPERMARKET": ("FeeSimple", "Improved", None, "Supermarket", "Building"),
    "1410 CONV STORE": ("FeeSimple", "Improved", None, "RetailStore", "Building"),
    "1420 CONV STORE/GAS A": ("FeeSimple", "Improved", None, "RetailStore", "Building"),
    "1421 Conv Store /Gas B": ("FeeSimple", "Improved", None, "RetailStore", "Building"),
    "1422 Conv Store /Gas C": ("FeeSimple", "Improved", None, "RetailStore", "Building"),
    "1423 Conv Store /Gas D": ("FeeSimple", "Improved", None, "RetailStore", "Building"),
    "1510 REGIONAL MALL": ("FeeSimple", "Improved", None, "ShoppingCenterRegional", "Building"),
    "1600 SH CTR CMMITY": ("FeeSimple", "Improved", None, "ShoppingCenterCommunity", "Building"),
    "1610 SH CTR CMMITY A": ("FeeSimple", "Improved", None, "ShoppingCenterCommunity", "Building"),
    "1620 SH CTR CMMITY B": ("FeeSimple", "Improved", None, "ShoppingCenterCommunity", "Building"),
    "1630 STRIP CENTER": ("FeeSimple", "Improved", None, "ShoppingCenterCommunity", "Building"),
    "1700 OFFICE 1 STORY": ("FeeSimple", "Improved", None, "OfficeBuilding", "Building"),
    "1710 OFFICE 1 STY A": ("FeeSimple", "Improved", None, "OfficeBuilding", "Building"),
    "1720 OFFICE 1 STY B": ("FeeSimple", "Improved", None, "OfficeBuilding", "Building"),
    "1730 OFFICE 1 STY C": ("FeeSimple", "Improved", None, "OfficeBuilding", "Building"),
    "1740 OFFICE 1 STY D": ("FeeSimple", "Improved", None, "OfficeBuilding", "Building"),
    "1750 PRO-PARK OFFICE": ("FeeSimple", "Improved", None, "OfficeBuilding", "Building"),
    "1751 PRO-PARK MEDICAL OFFICE": ("FeeSimple", "Improved", None, "MedicalOffice", "Building"),
    "1799 OFFICE 1 STY CONDO": ("Condominium", "Improved", "ApartmentUnit", "OfficeBuilding", "Unit"),
    "1800 OFF MULTISTORY": ("FeeSimple", "Improved", None, "OfficeBuilding", "Building"),
    "1810 OFF MULT-STY A": ("FeeSimple", "Improved", None, "OfficeBuilding", "Building"),
    "1820 OFF MULT-STY B": ("FeeSimple", "Improved", None, "OfficeBuilding", "Building"),
    "1830 OFF MULT-STY C": ("FeeSimple", "Improved", None, "OfficeBuilding", "Building"),
    "1840 OFF MULT-STY D": ("FeeSimple", "Improved", None, "OfficeBuilding", "Building"),
    "1850 BROADCASTING FACILITY": ("FeeSimple", "Improved", None, "TelecommunicationsFacility", "Building"),
    "1851 ProPark Off Multistory": ("FeeSimple", "Improved", None, "OfficeBuilding", "Building"),
    "1899 OFF MULTI-STY CONDO": ("Condominium", "Improved", "ApartmentUnit", "OfficeBuilding", "Unit"),
    "1900 MEDICAL OFFICE": ("FeeSimple", "Improved", None, "MedicalOffice", "Building"),
    "1910 MEDICAL OFF A": ("FeeSimple", "Improved", None, "MedicalOffice", "Building"),
    "1920 MEDICAL OFF B": ("FeeSimple", "Improved", None, "MedicalOffice", "Building"),
    "1930 MEDICAL OFF C": ("FeeSimple", "Improved", None, "MedicalOffice", "Building"),
    "1940 MEDICAL OFF D": ("FeeSimple", "Improved", None, "MedicalOffice", "Building"),
    "1999 MEDICAL OFF CONDO": ("Condominium", "Improved", "ApartmentUnit", "MedicalOffice", "Unit"),
    "2000 TRANSIT TERMINALS": ("FeeSimple", "Improved", None, "TransportationTerminal", "Building"),
    "2010 MARINAS": ("FeeSimple", "Improved", None, "Recreational", "Building"),
    "2020 BOAT SLIPS": ("FeeSimple", "Improved", None, "Recreational", "Building"),
    "2100 RESTAURANT": ("FeeSimple", "Improved", None, "Restaurant", "Building"),
    "2101 RESTAURANT A": ("FeeSimple", "Improved", None, "Restaurant", "Building"),
    "2102 RESTAURANT B": ("FeeSimple", "Improved", None, "Restaurant", "Building"),
    "2103 RESTAURANT C": ("FeeSimple", "Improved", None, "Restaurant", "Building"),
    "2104 RESTAURANT D": ("FeeSimple", "Improved", None, "Restaurant", "Building"),
    "2200 Quick Service Restaurant": ("FeeSimple", "Improved", None, "Restaurant", "Building"),
    "2201 Quick Service Restaurant A": ("FeeSimple", "Improved", None, "Restaurant", "Building"),
    "2202 Quick Service Restaurant B": ("FeeSimple", "Improved", None, "Restaurant", "Building"),
    "2203 Quick Service Restaurant C": ("FeeSimple", "Improved", None, "Restaurant", "Building"),
    "2300 FINANCIAL": ("FeeSimple", "Improved", None, "FinancialInstitution", "Building"),
    "2500 REPAIR SER SHOP": ("FeeSimple", "Improved", None, "RetailStore", "Building"),
    "2501 SERV SHOP A": ("FeeSimple", "Improved", None, "RetailStore", "Building"),
    "2502 SERV SHOP B": ("FeeSimple", "Improved", None, "RetailStore", "Building"),
    "2503 SERV SHOP C": ("FeeSimple", "Improved", None, "RetailStore", "Building"),
    "2504 SERV SHOP D": ("FeeSimple", "Improved", None, "RetailStore", "Building"),
    "2700 AUTOMOTIVE": ("FeeSimple", "Improved", None, "AutoSalesRepair", "Building"),
    "2701 AUTO DEALERSHIP": ("FeeSimple", "Improved", None, "AutoSalesRepair", "Building"),
    "2702 AUTO SALES B": ("FeeSimple", "Improved", None, "AutoSalesRepair", "Building"),
    "2703 AUTO SALES C": ("FeeSimple", "Improved", None, "AutoSalesRepair", "Building"),
    "2704 AUTO SALES D": ("FeeSimple", "Improved", None, "AutoSalesRepair", "Building"),
    "2710 FULL SERVICE CAR WASH": ("FeeSimple", "Improved", None, "Hotel", "Building"),
    "2720 SELF SERVICE CAR WASH": ("FeeSimple", "Improved", None, "ServiceStation", "Building"),
    "2751 AUTO REPAIR A": ("FeeSimple", "Improved", None, "AutoSalesRepair", "Building"),
    "2752 AUTO REPAIR B": ("FeeSimple", "Improved", None, "AutoSalesRepair", "Building"),
    "2753 AUTO REPAIR C": ("FeeSimple", "Improved", None, "AutoSalesRepair", "Building"),
    "2754 AUTO REPAIR D": ("FeeSimple", "Improved", None, "AutoSalesRepair", "Building"),
    "2755 VEHICLE SALVAGE/STORAGE": ("FeeSimple", "Improved", None, "AutoSalesRepair", "Building"),
    "2756 FUELING STATION": ("FeeSimple", "Improved", None, "ServiceStation", "Building"),
    "2757 MINI-LUBE GARAGE": ("FeeSimple", "Improved", None, "AutoSalesRepair", "Building"),
    "2799 Garage Condo": ("Condominium", "Improved", "ApartmentUnit", "Residential", "Unit"),
    "2800 Parking Lot (surface lot)": ("FeeSimple", "Improved", None, "OpenStorage", "Building"),
    "2805 Parking Garage": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "2810 MOBILE HOME PARK": ("FeeSimple", "Improved", None, "MobileHomePark", "LandParcel"),
    "2811 MHP A": ("FeeSimple", "Improved", None, "MobileHomePark", "LandParcel"),
    "2812 MHP B": ("FeeSimple", "Improved", None, "MobileHomePark", "LandParcel"),
    "2813 MHP C": ("FeeSimple", "Improved", None, "MobileHomePark", "LandParcel"),
    "2814 MHP D": ("FeeSimple", "Improved", None, "MobileHomePark", "LandParcel"),
    "2815 MIGRANT HOUSING > 9 UNITS": ("FeeSimple", "Improved", "MultiFamilyMoreThan10", "Residential", "Building"),
    "2820 RV PARK": ("FeeSimple", "Improved", None, "MobileHomePark", "LandParcel"),
    "2899 COMMERCIAL CONDO PARKING": ("Condominium", "Improved", "ApartmentUnit", "Residential", "Unit"),
    "3100 DRV-IN THEATER": ("FeeSimple", "Improved", None, "Entertainment", "Building"),
    "3200 THEATER": ("FeeSimple", "Improved", None, "Entertainment", "Building"),
    "3300 NIGHT CLUBS": ("FeeSimple", "Improved", None, "ClubsLodges", "Building"),
    "3400 BOWLING ALLEY/SKATE RINK": ("FeeSimple", "Improved", None, "Entertainment", "Building"),
    "3500 TOURIST ATTRAC": ("FeeSimple", "Improved", None, "Entertainment", "Building"),
    "3700 RACETRACK": ("FeeSimple", "Improved", None, "RaceTrack", "Building"),
    "3800 REG GOLF COURSE": ("FeeSimple", "Improved", None, "GolfCourse", "Building"),
    "3810 PRIVATE GOLF COURSE": ("FeeSimple", "Improved", None, "GolfCourse", "Building"),
    "3820 SEMI-PRIVATE GOLF COURSE": ("FeeSimple", "Improved", None, "GolfCourse", "Building"),
    "3830 DAILY FEE/MUNI GOLF COURSE": ("FeeSimple", "Improved", None, "GolfCourse", "Building"),
    "3840 EXEC/PRACTICE GOLF COURSE": ("FeeSimple", "Improved", None, "GolfCourse", "Building"),
    "3900 HOTELS/MOTELS": ("FeeSimple", "Improved", None, "Hotel", "Building"),
    "3911 FULL SERV A": ("FeeSimple", "Improved", None, "Hotel", "Building"),
    "3912 FULL SERV B": ("FeeSimple", "Improved", None, "Hotel", "Building"),
    "3913 FULL SERV C": ("FeeSimple", "Improved", None, "Hotel", "Building"),
    "3914 FULL SERV D": ("FeeSimple", "Improved", None, "Hotel", "Building"),
    "3921 LMTD SERV A": ("FeeSimple", "Improved", None, "Hotel", "Building"),
    "3922 LMTD SERV B": ("FeeSimple", "Improved", None, "Hotel", "Building"),
    "3923 LMTD SERV C": ("FeeSimple", "Improved", None, "Hotel", "Building"),
    "3924 LMTD SERV D": ("FeeSimple", "Improved", None, "Hotel", "Building"),
    "3931 EXTEND STAY A": ("FeeSimple", "Improved", None, "Hotel", "Building"),
    "3932 EXTEND STAY B": ("FeeSimple", "Improved", None, "Hotel", "Building"),
    "3933 EXTEND STAY C": ("FeeSimple", "Improved", None, "Hotel", "Building"),
    "3934 EXTEND STAY D": ("FeeSimple", "Improved", None, "Hotel", "Building"),
    "4000 VACANT INDUS": ("FeeSimple", "VacantLand", None, "Industrial", "LandParcel"),
    "4100 LIGHT MFG": ("FeeSimple", "Improved", None, "LightManufacturing", "Building"),
    "4101 LIGHT MFG A": ("FeeSimple", "Improved", None, "LightManufacturing", "Building"),
    "4102 LIGHT MFG B": ("FeeSimple", "Improved", None, "LightManufacturing", "Building"),
    "4103 LIGHT MFG C": ("FeeSimple", "Improved", None, "LightManufacturing", "Building"),
    "4104 LIGHT MFG D": ("FeeSimple", "Improved", None, "LightManufacturing", "Building"),
    "4300 LUMBER YD/MILL": ("FeeSimple", "Improved", None, "LumberYard", "Building"),
    "4400 PACKING PLANTS": ("FeeSimple", "Improved", None, "PackingPlant", "Building"),
    "4500 BOTTLER/CANNERY": ("FeeSimple", "Improved", None, "Cannery", "Building"),
    "4600 FOOD PROCESSING": ("FeeSimple", "Improved", None, "Cannery", "Building"),
    "4700 MIN PROCESSING": ("FeeSimple", "Improved", None, "MineralProcessing", "Building"),
    "4800 WAREH/DIST TERM": ("FeeSimple", "Improved", None, "Warehouse", "Building"),
    "4801 Storage Warehouse A": ("FeeSimple", "Improved", None, "Warehouse", "Building"),
    "4802 Storage Warehouse B": ("FeeSimple", "Improved", None, "Warehouse", "Building"),
    "4803 Storage Warehouse C": ("FeeSimple", "Improved", None, "Warehouse", "Building"),
    "4804 Storage Warehouse D": ("FeeSimple", "Improved", None, "Warehouse", "Building"),
    "4810 WAREHOUSE A": ("FeeSimple", "Improved", None, "Warehouse", "Building"),
    "4811 TRKG TERM A": ("FeeSimple", "Improved", None, "TransportationTerminal", "Building"),
    "4812 TRKG TERM B": ("FeeSimple", "Improved", None, "TransportationTerminal", "Building"),
    "4813 TRKG TERM C": ("FeeSimple", "Improved", None, "TransportationTerminal", "Building"),
    "4814 TRKG TERM D": ("FeeSimple", "Improved", None, "TransportationTerminal", "Building"),
    "4820 WAREHOUSE B": ("FeeSimple", "Improved", None, "Warehouse", "Building"),
    "4830 WAREHOUSE C": ("FeeSimple", "Improved", None, "Warehouse", "Building"),
    "4840 WAREHOUSE D": ("FeeSimple", "Improved", None, "Warehouse", "Building"),
    "4850 FLEX SERV A": ("FeeSimple", "Improved", None, "Warehouse", "Building"),
    "4860 FLEX SERV B": ("FeeSimple", "Improved", None, "Warehouse", "Building"),
    "4870 FLEX SERV C": ("FeeSimple", "Improved", None, "Warehouse", "Building"),
    "4880 FLEX SERV D": ("FeeSimple", "Improved", None, "Warehouse", "Building"),
    "4891 MINI WARE A": ("FeeSimple", "Improved", None, "Warehouse", "Building"),
    "4892 MINI WARE B": ("FeeSimple", "Improved", None, "Warehouse", "Building"),
    "4893 MINI WARE C": ("FeeSimple", "Improved", None, "Warehouse", "Building"),
    "4894 MINI WARE D": ("FeeSimple", "Improved", None, "Warehouse", "Building"),
    "4899 INDUSTRIAL CONDO": ("Condominium", "Improved", "ApartmentUnit", "Residential", "Unit"),
    "4900 OPEN STORAGE": ("FeeSimple", "Improved", None, "OpenStorage", "Building"),
    "4901 BUILDING MATERIALS STORAGE - NEW AND USED": ("FeeSimple", "Improved", None, "OpenStorage", "Building"),
    "4902 GAS & OIL STORAGE AND DISTRIBUTION": ("FeeSimple", "Improved", None, "ServiceStation", "Building"),
    "4903 SCRAP METAL/MATERIALS RECYCLING": ("FeeSimple", "Improved", None, "OpenStorage", "Building"),
    "4904 OUTDOOR PUBLIC STORAGE": ("FeeSimple", "Improved", None, "OpenStorage", "Building"),
    "4905 EQUIPMENT STORAGE": ("FeeSimple", "Improved", None, "OpenStorage", "Building"),
    "5100 CROPS": ("FeeSimple", "VacantLand", None, "DrylandCropland", "LandParcel"),
    "5900 TIMBER": ("FeeSimple", "VacantLand", None, "TimberLand", "LandParcel"),
    "6000 PASTURE": ("FeeSimple", "VacantLand", None, "GrazingLand", "LandParcel"),
    "6600 ORCHARD/CITRUS": ("FeeSimple", "VacantLand", None, "OrchardGroves", "LandParcel"),
    "6700 POUL/BEES/FISH": ("FeeSimple", "VacantLand", None, "LivestockFacility", "LandParcel"),
    "6800 DAIRIES/FEEDLTS": ("FeeSimple", "VacantLand", None, "LivestockFacility", "LandParcel"),
    "6900 PLANT NURSERY": ("FeeSimple", "VacantLand", None, "NurseryGreenhouse", "LandParcel"),
    "6910 MISC AG": ("FeeSimple", "VacantLand", None, "Agricultural", "LandParcel"),
    "7100 CHURCHES": ("FeeSimple", "Improved", None, "Church", "Building"),
    "7101 CHURCH PARSONAGE": ("FeeSimple", "Improved", None, "Church", "Building"),
    "7150 Church ProPark Office": ("FeeSimple", "Improved", None, "Church", "Building"),
    "7200 PRIVATE SCHOOL": ("FeeSimple", "Improved", None, "PrivateSchool", "Building"),
    "7210 DAY CARE CENTER A": ("FeeSimple", "Improved", None, "PrivateSchool", "Building"),
    "7220 DAY CARE CENTER B": ("FeeSimple", "Improved", None, "PrivateSchool", "Building"),
    "7230 DAY CARE CENTER C": ("FeeSimple", "Improved", None, "PrivateSchool", "Building"),
    "7240 DAYCARE CENTER D": ("FeeSimple", "Improved", None, "PrivateSchool", "Building"),
    "7250 PRIVATE COLLEGE": ("FeeSimple", "Improved", None, "PrivateSchool", "Building"),
    "7300 HOSPITAL/PRIVATE": ("FeeSimple", "Improved", None, "PrivateHospital", "Building"),
    "7301 Emergency Only Hospital": ("FeeSimple", "Improved", None, "PrivateHospital", "Building"),
    "7302 Surgery Center": ("FeeSimple", "Improved", None, "MedicalOffice", "Building"),
    "7310 REHAB HOSPITAL": ("FeeSimple", "Improved", None, "PrivateHospital", "Building"),
    "7400 HOME FOR AGED": ("FeeSimple", "Improved", "MultiFamilyMoreThan10", "HomesForAged", "Building"),
    "7406 HOME FOR AGED UNIT": ("FeeSimple", "Improved", "MultiFamilyMoreThan10", "HomesForAged", "Building"),
    "7408 CCRC UNIT": ("FeeSimple", "Improved", "MultiFamilyMoreThan10", "HomesForAged", "Building"),
    "7500 NON-PROFIT SERV": ("FeeSimple", "Improved", None, "NonProfitCharity", "Building"),
    "7501 Non-Profit Residential": ("FeeSimple", "Improved", None, "NonProfitCharity", "Building"),
    "7503 NON-PROFIT APTS.": ("FeeSimple", "Improved", "MultiFamily5Plus", "NonProfitCharity", "Building"),
    "7506 NON-PROFIT RETIREMENT": ("FeeSimple", "Improved", "MultiFamilyMoreThan10", "HomesForAged", "Building"),
    "7517 NON-PROFIT OFFICE": ("FeeSimple", "Improved", None, "NonProfitCharity", "Building"),
    "7519 NON-PROFIT MEDICAL OFFICE": ("FeeSimple", "Improved", None, "MedicalOffice", "Building"),
    "7525 NON-PROFIT SERVICE SHOP": ("FeeSimple", "Improved", None, "NonProfitCharity", "Building"),
    "7548 NON-PROFIT WAREHOUSE": ("FeeSimple", "Improved", None, "NonProfitCharity", "Building"),
    "7550 Non-Profit ProPark": ("FeeSimple", "Improved", None, "NonProfitCharity", "Building"),
    "7600 FUNERAL HOME": ("FeeSimple", "Improved", None, "MortuaryCemetery", "Building"),
    "7610 CEMETERY": ("FeeSimple", "Improved", None, "MortuaryCemetery", "Building"),
    "7700 CLB/LDG/UN HALL": ("FeeSimple", "Improved", None, "ClubsLodges", "Building"),
    "7704 HOA COMMERCIAL CLUBHOUSE": ("FeeSimple", "Improved", None, "ClubsLodges", "Building"),
    "7710 FITNESS CENTER - A": ("FeeSimple", "Improved", None, "Entertainment", "Building"),
    "7720 FITNESS CENTER - B": ("FeeSimple", "Improved", None, "Entertainment", "Building"),
    "7730 FITNESS CENTER - C": ("FeeSimple", "Improved", None, "Entertainment", "Building"),
    "8000 VACANT GOVERNMENTAL": ("FeeSimple", "VacantLand", None, "GovernmentProperty", "LandParcel"),
    "8100 MILITARY": ("FeeSimple", "Improved", None, "Military", "Building"),
    "8200 PARKS AND RECREATION": ("FeeSimple", "VacantLand", None, "ForestParkRecreation", "LandParcel"),
    "8300 PUBLIC SCHOOL": ("FeeSimple", "Improved", None, "PublicSchool", "Building"),
    "8400 COLLEGE": ("FeeSimple", "Improved", None, "PrivateSchool", "Building"),
    "8510 HOSPITAL GOVT OWNED": ("FeeSimple", "Improved", None, "PublicHospital", "Building"),
    "8600 COUNTY OWNED": ("FeeSimple", "Improved", None, "GovernmentProperty", "Building"),
    "8610 COUNTY ROW": ("RightOfWay", "VacantLand", None, "GovernmentProperty", "LandParcel"),
    "8660 TRANSIT AUTHORITY": ("FeeSimple", "Improved", None, "TransportationTerminal", "Building"),
    "8670 PORT AUTHORITY": ("FeeSimple", "Improved", None, "TransportationTerminal", "Building"),
    "8680 AVIATION AUTH": ("FeeSimple", "Improved", None, "TransportationTerminal", "Building"),
    "8690 SPORTS AUTH": ("FeeSimple", "Improved", None, "GovernmentProperty", "Building"),
    "8700 STATE": ("FeeSimple", "Improved", None, "GovernmentProperty", "Building"),
    "8703 STATE - APTS": ("FeeSimple", "Improved", "MultiFamily5Plus", "GovernmentProperty", "Building"),
    "8710 STATE ROW": ("RightOfWay", "VacantLand", None, "GovernmentProperty", "LandParcel"),
    "8717 STATE - OFFICE 1 STY": ("FeeSimple", "Improved", None, "OfficeBuilding", "Building"),
    "8718 STATE - OFFICE MULTISTORY": ("FeeSimple", "Improved", None, "OfficeBuilding", "Building"),
    "8739 STATE  - HOTEL": ("FeeSimple", "Improved", None, "Hotel", "Building"),
    "8748 STATE - WAREHOUSE": ("FeeSimple", "Improved", None, "Warehouse", "Building"),
    "8800 FEDERAL": ("FeeSimple", "Improved", None, "GovernmentProperty", "Building"),
    "8810 FEDERAL ROW": ("RightOfWay", "VacantLand", None, "GovernmentProperty", "LandParcel"),
    "8900 MUNICIPAL": ("FeeSimple", "Improved", None, "GovernmentProperty", "Building"),
    "8910 MUNICPAL ROW": ("RightOfWay", "VacantLand", None, "GovernmentProperty", "LandParcel"),
    "9011 LEASEHOLD - RETAIL": ("Leasehold", "Improved", None, "RetailStore", "Building"),
    "9013 LEASEHOLD - DEPT STORE": ("Leasehold", "Improved", None, "DepartmentStore", "Building"),
    "9015 LEASEHOLD - REGIONAL MALL": ("Leasehold", "Improved", None, "ShoppingCenterRegional", "Building"),
    "9016 Leasehold - Multi-tenant Retail": ("Leasehold", "Improved", None, "RetailStore", "Building"),
    "9018 LEASEHOLD - OFFICE MULTISTORY": ("Leasehold", "Improved", None, "OfficeBuilding", "Building"),
    "9020 LEASED/STATE": ("Leasehold", "Improved", None, "GovernmentProperty", "Building"),
    "9021 LEASEHOLD - RESTAURANT": ("Leasehold", "Improved", None, "Restaurant", "Building"),
    "9025 LEASED/FAIR AUTHORITY": ("Leasehold", "Improved", None, "GovernmentProperty", "Building"),
    "9030 LEASED/COUNTY": ("Leasehold", "Improved", None, "GovernmentProperty", "Building"),
    "9039 LEASEHOLD - HOTEL": ("Leasehold", "Improved", None, "Hotel", "Building"),
    "9040 LEASED/TPA": ("Leasehold", "Improved", None, "TransportationTerminal", "Building"),
    "9048 LEASEHOLD - WAREHOUSE": ("Leasehold", "Improved", None, "Warehouse", "Building"),
    "9050 LEASED/PC": ("Leasehold", "Improved", None, "GovernmentProperty", "Building"),
    "9060 LEASED/TT": ("Leasehold", "Improved", None, "TransportationTerminal", "Building"),
    "9070 LEASED/PORT": ("Leasehold", "Improved", None, "TransportationTerminal", "Building"),
    "9080 LEASED/AVIATION": ("Leasehold", "Improved", None, "TransportationTerminal", "Building"),
    "9085 LEASEHOLD - HOSPITAL": ("Leasehold", "Improved", None, "PrivateHospital", "Building"),
    "9090 LEASED/SPORTS": ("Leasehold", "Improved", None, "Entertainment", "Building"),
    "9100 UTILITY": ("FeeSimple", "VacantLand", None, "Utility", "LandParcel"),
    "9200 MING/PET/GASLND": ("FeeSimple", "Improved", None, "ServiceStation", "Building"),
    "9300 SUBSURF RIGHTS": ("SubsurfaceRights", "VacantLand", None, "MineralProcessing", "LandParcel"),
    "9400 RIGHT-OF-WAY": ("RightOfWay", "VacantLand", None, "GovernmentProperty", "LandParcel"),
    "9600 WETLANDS/LOWLANDS": ("FeeSimple", "VacantLand", None, "Conservation", "LandParcel"),
    "9800 CENTRALLY ASSD": ("FeeSimple", "Improved", None, "Utility", "Building"),
    "9900 VACANT ACREAGE > 20 AC": ("FeeSimple", "VacantLand", None, "Unknown", "LandParcel"),
    "9929 PUBLIC LANDS > 20 AC": ("FeeSimple", "VacantLand", None, "GovernmentProperty", "LandParcel"),
}

DEED_CODE_MAP = {
    "AA": "Assignment of Contract",
    "AD": "Administrator's Deed",
    "AG": "Contract for Deed",
    "CD": "Correction Deed",
    "CT": "Court Order Deed",
    "DD": "Miscellaneous",
    "FD": "Warranty Deed",
    "GD": "Guardian's Deed",
    "MD": "Special Master’s Deed",
    "PR": "Personal Representative Deed",
    "QC": "Quitclaim Deed",
    "SD": "Sheriff's Deed",
    "TD": "Tax Deed",
    "TR": "Trustee's Deed",
    "WD": "Warranty Deed",
}


def use_code_key(value):
    key = re.sub(r"[-\s:()]+", "", str(value)).upper()
    return key or None


PROPERTY_USE_MAPPER = CodeMapper(
    PROPERTY_USE_CODE_MAP,
    normalize=use_code_key,
    prefix_lengths=(4,),
    name="Hillsborough property use code",
)

DEED_TYPE_MAPPER = CodeMapper(
    DEED_CODE_MAP,
    default="Miscellaneous",
    name="Hillsborough deed code",
)


def map_property_use(raw, strict=False):
    return property_use_record(PROPERTY_USE_MAPPER.map(raw, strict=strict))


def map_deed_type(code):
    if not code:
        return "Miscellaneous"
    return DEED_TYPE_MAPPER.map(code)
