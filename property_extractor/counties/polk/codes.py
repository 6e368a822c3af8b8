"""Polk County code tables.

Use codes are keyed "NNNN - DESCRIPTION"; only the four-digit DOR code
takes part in the lookup. An unknown code is fatal for Polk.
"""

import re

from ...code_mapper import CodeMapper, property_use_record

# use code: (ownership_estate_type, build_status, structure_form, property_usage_type, property_type)
PROPERTY_USE_CODE_MAP = {
    "0001 - VAC.RES": ("FeeSimple", "VacantLand", None, "Residential", "LandParcel"),
    "0002 - VAC. MH - PLATTED": ("FeeSimple", "VacantLand", None, "Residential", "LandParcel"),
    "0003 - VAC. CONDO SITE - PLATTED": ("Condominium", "VacantLand", None, "Residential", "LandParcel"),
    "0004 - VAC. RES. W/MISC IMPR @ ZERO VALUE": ("FeeSimple", "VacantLand", None, "Residential", "LandParcel"),
    "0006 - RESIDENTIAL IMPROVEMENTS CARRIED ON OTHER PCL'S": ("FeeSimple", "Improved", None, "Residential", "Building"),
    "0007 - RES. OR MH LOT W/ MISC IMPR OF SOME VALUE": ("FeeSimple", "Improved", "ManufacturedHomeOnLand", "Residential", "ManufacturedHome"),
    "0008 - LOT W/ MH ON TPP": ("FeeSimple", "Improved", "ManufacturedHomeOnLand", "Residential", "LandParcel"),
    "0009 - VACANT RV LOT": ("FeeSimple", "VacantLand", None, "Residential", "LandParcel"),
    "0024 - VAC. MH LOT W/ MISC IMPR @ 0 VALUE": ("FeeSimple", "VacantLand", None, "Residential", "LandParcel"),
    "0028 - VAC. MH WATERFRONT LOT": ("FeeSimple", "VacantLand", None, "Residential", "LandParcel"),
    "0044 - VAC. CONDO/RV LOT": ("Condominium", "VacantLand", None, "Residential", "LandParcel"),
    "0064 - VAC. RESIDENTIAL, UNBUILDABLE": ("FeeSimple", "VacantLand", None, "Residential", "LandParcel"),
    "0080 - VAC. LAKEFRONT.": ("FeeSimple", "VacantLand", None, "Residential", "LandParcel"),
    "0082 - VAC. OTHER WATERFRONT": ("FeeSimple", "VacantLand", None, "Residential", "LandParcel"),
    "0084 - VAC. LAKEFRONT W/ MISC IMPR @ ZERO VALUE": ("FeeSimple", "VacantLand", None, "Residential", "LandParcel"),
    "0085 - VAC. LAKEFRONT W/MISC IMPR OF SOME VALUE": ("FeeSimple", "VacantLand", None, "Residential", "LandParcel"),
    "0086 - VAC. GOLF COURSE FRONT": ("FeeSimple", "VacantLand", None, "GolfCourse", "LandParcel"),
    "0088 - VAC. AIRSTRIP FRONT": ("FeeSimple", "VacantLand", None, "Residential", "LandParcel"),
    "0100 - SFR UP TO 2.49 AC": ("FeeSimple", "Improved", "SingleFamilyDetached", "Residential", "Building"),
    "0101 - SFR 2.5 TO 9.99AC": ("FeeSimple", "Improved", "SingleFamilyDetached", "Residential", "Building"),
    "0102 - SFR 10+ AC": ("FeeSimple", "Improved", "SingleFamilyDetached", "Residential", "Building"),
    "0140 - ATTACHED HOUSING": ("FeeSimple", "Improved", "TownhouseRowhouse", "Residential", "Building"),
    "0150 - MODULAR HOME UP TO 2.49 ACRES": ("FeeSimple", "Improved", "Modular", "Residential", "Building"),
    "0151 - MODULAR HOME 2.50 - 9.99 ACRES": ("FeeSimple", "Improved", "Modular", "Residential", "Building"),
    "0152 - MODULAR HOME 10+ ACRES": ("FeeSimple", "Improved", "Modular", "Residential", "Building"),
    "0160 - SFR - RENTAL": ("FeeSimple", "Improved", "SingleFamilyDetached", "Residential", "Building"),
    "0180 - RES. LAKEFRONT": ("FeeSimple", "Improved", None, "Residential", "Building"),
    "0182 - SFR OTHER WATERFRONT": ("FeeSimple", "Improved", "SingleFamilyDetached", "Residential", "Building"),
    "0183 - MODULAR HOME LAKEFRONT": ("FeeSimple", "Improved", "Modular", "Residential", "Building"),
    "0185 - MODULAR HOME OTHER WATERFRONT": ("FeeSimple", "Improved", "Modular", "Residential", "Building"),
    "0186 - SFR GOLF COURSE FRONT": ("FeeSimple", "Improved", "SingleFamilyDetached", "GolfCourse", "LandParcel"),
    "0188 - SFR AIRSTRIP FRONT": ("FeeSimple", "Improved", "SingleFamilyDetached", "Residential", "Building"),
    "0200 - M.H. (RP) UP TO 2.49 ACRES": ("FeeSimple", "Improved", "ManufacturedHomeOnLand", "Residential", "ManufacturedHome"),
    "0201 - M.H. (RP) 2.5 - 9.99 ACRES": ("FeeSimple", "Improved", "ManufacturedHomeOnLand", "Residential", "ManufacturedHome"),
    "0202 - M.H. (RP) 10+ ACRES": ("FeeSimple", "Improved", "ManufacturedHomeOnLand", "Residential", "ManufacturedHome"),
    "0280 - M.H. LAKEFRONT (RP TAG)": ("FeeSimple", "Improved", "ManufacturedHomeOnLand", "Residential", "ManufacturedHome"),
    "0282 - M.H. OTHER WATERFRONT W/ VALUE(RP)": ("FeeSimple", "Improved", "ManufacturedHomeOnLand", "Residential", "ManufacturedHome"),
    "0286 - M.H. GOLF COURSE FRONT (RP)": ("FeeSimple", "Improved", "ManufacturedHomeOnLand", "GolfCourse", "ManufacturedHome"),
    "0301 - MULTI-FAMILY 10+ (INDIV UNITS)": ("FeeSimple", "Improved", "MultiFamilyMoreThan10", "Residential", "Building"),
    "0310 - MULTI-FAMILY - 10 - 49 UNITS": ("FeeSimple", "Improved", "MultiFamilyMoreThan10", "Residential", "Building"),
    "0315 - MULTI-FAMILY 50-119 UNITS": ("FeeSimple", "Improved", "MultiFamilyMoreThan10", "Residential", "Building"),
    "0320 - MULTI-FAMILY 120+ UNITS": ("FeeSimple", "Improved", "MultiFamilyMoreThan10", "Residential", "Building"),
    "0330 - MULTI FAMILY - LIHTC": ("FeeSimple", "Improved", "MultiFamilyMoreThan10", "Residential", "Building"),
    "0331 - MULTI-FAMILY LOW INCOME (USDA, SECT. 8, ETC.)": ("FeeSimple", "Improved", "MultiFamilyMoreThan10", "Residential", "Building"),
    "0350 - DUPLEXES, TRI'S, QUAD'S IN THE GREATER LAKELAND AREA 10+ UNITS": ("FeeSimple", "Improved", "MultiFamilyLessThan10", "Residential", "Building"),
    "0351 - DUPLEXES, TRI'S, QUAD'S IN HIGHLANDS CITY, MULBERRY, BARTOW, FORT MEADE, EAGLE LAKE AREA 10+ UNITS": ("FeeSimple", "Improved", "MultiFamilyLessThan10", "Residential", "Building"),
    "0352 - DUPLEXES, TRI'S, QUAD'S IN POLK CITY, AUBURNDALE, LAKE ALFRED, WINTER HAVEN AREA 10+ UNITS": ("FeeSimple", "Improved", "MultiFamilyLessThan10", "Residential", "Building"),
    "0353 - DUPLEXES, TRI'S, QUAD'S ALONG HWY 27, EAST PART OF THE COUNTY FROM DAVENPORT TO FROSTPROOF 10+ UNITS": ("FeeSimple", "Improved", "MultiFamilyLessThan10", "Residential", "Building"),
    "0360 - MIGRANT CAMPS 10+ UNITS": ("FeeSimple", "Improved", "MultiFamilyMoreThan10", "Residential", "Building"),
    "0400 - CONDOMINIUMS": ("Condominium", "Improved", "ApartmentUnit", "Residential", "Unit"),
    "0401 - CONDOMINIUMS - M.H. (INDIV UNIT)": ("Condominium", "Improved", "ManufacturedHomeOnLand", "Residential", "Unit"),
    "0441 - CONDOMINIUMS - R.V. (INDIV UNIT)": ("Condominium", "Improved", "ApartmentUnit", "Residential", "Unit"),
    "0500 - CO-OP APARTMENTS": ("Cooperative", "Improved", "ApartmentUnit", "Residential", "Unit"),
    "0650 - ASSISTED LIVING FACILITY": ("FeeSimple", "Improved", None, "Retirement", "Building"),
    "0651 - SKILLED NURSING HOMES (PRIVATE-MEDICAL)": ("FeeSimple", "Improved", None, "SanitariumConvalescentHome", "Building"),
    "0652 - RETIREMENT FACILITY (MIXED)": ("FeeSimple", "Improved", None, "Retirement", "Building"),
    "0801 - MULTIPLE SFR RESIDENCES": ("FeeSimple", "Improved", "SingleFamilyDetached", "Residential", "Building"),
    "0802 - MULTIPLE MH RESIDENCES": ("FeeSimple", "Improved", "ManufacturedHomeOnLand", "Residential", "ManufacturedHome"),
    "0803 - MULTIPLE RESIDENCES SFR & MH": ("FeeSimple", "Improved", "SingleFamilyDetached", "Residential", "ManufacturedHome"),
    "0811 - MULTI-FAMILY W/SFR": ("FeeSimple", "Improved", "SingleFamilyDetached", "Residential", "Building"),
    "0850 - DUPLEXES, TRI'S, QUAD'S IN THE GREATER LAKELAND AREA 9 UNITS OR LESS": ("FeeSimple", "Improved", "MultiFamilyLessThan10", "Residential", "Building"),
    "0851 - DUPLEXES, TRI'S, QUAD'S IN HIGHLANDS CITY, MULBERRY, BARTOW, FORT MEADE, EAGLE LAKE AREA 9 UNITS OR": ("FeeSimple", "Improved", "MultiFamilyLessThan10", "Residential", "Building"),
    "0852 - DUPLEXES, TRI'S, QUAD'S IN POLK CITY, AUBURNDALE, LAKE ALFRED, WINTER HAVEN AREA 9 UNITS OR LESS": ("FeeSimple", "Improved", "MultiFamilyLessThan10", "Residential", "Building"),
    "0853 - DUPLEXES, TRI'S, QUAD'S ALONG HWY 27, EAST PART OF THE COUNTY FROM DAVENPORT TO FROSTPROOF 9 UNITS O": ("FeeSimple", "Improved", "MultiFamilyLessThan10", "Residential", "Building"),
    "0860 - MIGRANT CAMPS 9 UNITS OR LESS": ("FeeSimple", "Improved", "MultiFamilyMoreThan10", "Residential", "Building"),
    "0900 - VAC. RESIDENTIAL / OR MISC IMP. COMMON ELEMENTS/AREAS": ("FeeSimple", "VacantLand", None, "ResidentialCommonElementsAreas", "LandParcel"),
    "0901 - IMP. RESIDENTIAL COMMON ELEMENTS/AREAS": ("FeeSimple", "Improved", None, "ResidentialCommonElementsAreas", "Building"),
    "0989 - SPLIT AND/OR COMBINE IN PROGRESS": ("FeeSimple", "UnderConstruction", None, "TransitionalProperty", "LandParcel"),
    "1000 - VACANT COMMERCIAL": ("FeeSimple", "VacantLand", None, "Commercial", "LandParcel"),
    "1004 - VAC COMM MISC IMPR @ ZERO VALUE": ("FeeSimple", "VacantLand", None, "Commercial", "LandParcel"),
    "1005 - VAC. COM./IMPS ON TPP": ("FeeSimple", "VacantLand", None, "Commercial", "LandParcel"),
    "1006 - COMM. IMPROVEMENTS CARRIED ON OTHER PCL'S": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1007 - COMM. MISC IMPS OF SOME VALUE": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1038 - VAC. COMMERCIAL GOLF COURSE LAND": ("FeeSimple", "VacantLand", None, "GolfCourse", "LandParcel"),
    "1040 - COMM. COMMON ELEMENTS/AREAS": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1064 - VACANT COMMERCIAL, UNBUILDABLE": ("FeeSimple", "VacantLand", None, "Commercial", "LandParcel"),
    "1100 - COM. MISC.": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1104 - STRUCTURE(S) OF SOME VALUE": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1110 - RETAIL UP TO 4999 SF": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1120 - RETAIL 5000SF TO 20000SF": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1130 - RETAIL OVER 20000 SF": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1140 - DRUG STORE": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1150 - DISCOUNT STORES": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1160 - POST OFFICE (NOT GOV. OWNED)": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1170 - HOME IMPROVEMENT CENTER": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1171 - FURNITURE STORES": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1172 - DOLLAR STORES": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1174 - CONVENIENCE STORES W/GAS": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1175 - CONVENIENCE STORES ONLY": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1179 - BEAUTY SHOPS": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1180 - DRY CLEANERS-LAUNDROMAT": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1190 - DAY CARE CENTER": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1203 - COM. LAND & NON-CONFORMING STRUCTURE": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1204 - STORE/OFFICE W/RESIDENCE": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1211 - DOWNTOWN CORE AREA MISC": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1300 - DEPARTMENT STORES": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1400 - SUPERMARKETS": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1500 - REGIONAL SHOPPING CENTER": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1600 - MINI PLAZA": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1610 - NEIGHBORHOOD PLAZA": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1620 - NEIGHBORHOOD SHOPPING CNTR": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1671 - COMMUNITY SHOPPING CNTR": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1711 - ONE-STORY, CLASS A OFFICE, 10,000 & LARGER SQFT": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1721 - ONE-STORY, CLASS B OFFICE 10,000 & LARGER SQFT": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1730 - ONE-STORY, CLASS C, OFFICE, 1 - 9,999 SQFT": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1731 - ONE-STORY, CLASS C, OFFICE, 10,000 & LARGER SQFT": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1740 - ONE-STORY, CLASS D OFFICE, 1 - 9,999 SQFT": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1741 - ONE-STORY, CLASS D OFFICE, 10,000 & LARGER SQFT": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1811 - MULTI-STORY, CLASS A OFFICE, 10,000 & LARGER SQFT": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1821 - MULTI-STORY, CLASS B OFFICE, 10,000 & LARGER SQFT": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1830 - MULTI-STORY, CLASS C OFFICE, 1 - 9999 SQFT": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1831 - MULTI-STORY, CLASS C OFFICE, 10,000 & LARGER": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1840 - MULTI-STORY, CLASS D OFFICE, 1 - 9999 SQFT": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1841 - MULTI-STORY, CLASS D OFFICE, 10,000 & LARGER SQFT": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1906 - COMMERCIAL CONDO": ("Condominium", "Improved", "ApartmentUnit", "Commercial", "Unit"),
    "1940 - HOSPITALS (TAXABLE)": ("FeeSimple", "Improved", None, "PrivateHospital", "Building"),
    "1942 - PROFESSIONAL BLDGS": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1943 - MEDICAL COMPLEX/DRS. OFFICES": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1944 - ANIMAL CLINICS": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1945 - FUNERAL HOMES": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "1946 - SCHOOLS AND COLLEGES (TAXABLE)": ("FeeSimple", "Improved", None, "PrivateSchool", "Building"),
    "2000 - AIRPORTS (PRIVATE)": ("FeeSimple", "Improved", None, "TransportationTerminal", "LandParcel"),
    "2020 - MARINAS": ("FeeSimple", "Improved", None, "TransportationTerminal", "LandParcel"),
    "2101 - LOCAL RESTAURANTS/EATERIES UPSCALE DINING, HIGH LEVEL OF DECOR.": ("FeeSimple", "Improved", None, "Restaurant", "Building"),
    "2102 - LOCAL RESTAURANTS/EATERIES CASUAL DINING.": ("FeeSimple", "Improved", None, "Restaurant", "Building"),
    "2103 - LOCAL RESTAURANTS/EATERIES FAST CASUAL, MINIMUM DECOR.": ("FeeSimple", "Improved", None, "Restaurant", "Building"),
    "2104 - LOCAL RESTAURANTS/EATERIES MINIMUM TYPE STRUCTURES.": ("FeeSimple", "Improved", None, "Restaurant", "Building"),
    "2150 - NATIONAL/CHAIN RESTAURANTS CASUAL DINING": ("FeeSimple", "Improved", None, "Restaurant", "Building"),
    "2151 - NATIONAL/CHAIN RESTAURANTS FAST CASUAL DINING": ("FeeSimple", "Improved", None, "Restaurant", "Building"),
    "2201 - LOCAL FAST FOOD RESTAURANTS": ("FeeSimple", "Improved", None, "Restaurant", "Building"),
    "2250 - NATIONAL/CHAIN FAST FOOD RESTAURANTS": ("FeeSimple", "Improved", None, "Restaurant", "Building"),
    "2300 - BANKS (S&L, FINANCIAL INSTS.)": ("FeeSimple", "Improved", None, "FinancialInstitution", "Building"),
    "2310 - BANK BRANCH OFFICE": ("FeeSimple", "Improved", None, "FinancialInstitution", "Building"),
    "2400 - INSURANCE CO. (NATIONAL & REGIONAL)": ("FeeSimple", "Improved", None, "FinancialInstitution", "Building"),
    "2500 - SVC & REPAIR SHOPS": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "2600 - SERVICE STATIONS": ("FeeSimple", "Improved", None, "ServiceStation", "Building"),
    "2610 - TRUCK STOPS": ("FeeSimple", "Improved", None, "ServiceStation", "Building"),
    "2700 - AUTO SALES/SVC (DEALERSHIPS)": ("FeeSimple", "Improved", None, "AutoSalesRepair", "Building"),
    "2701 - RV SALES/SERVICE": ("FeeSimple", "Improved", None, "AutoSalesRepair", "Building"),
    "2702 - MOTORCYCLE/REC. VEHICLES SALES/SERVICE": ("FeeSimple", "Improved", None, "AutoSalesRepair", "Building"),
    "2710 - FARM MACHINERY SALES/SVC": ("FeeSimple", "Improved", None, "AutoSalesRepair", "Building"),
    "2720 - MARINE SALES/SVC": ("FeeSimple", "Improved", None, "AutoSalesRepair", "Building"),
    "2730 - MOBILE HOME SALES/SVC": ("FeeSimple", "Improved", "ManufacturedHomeOnLand", "Commercial", "ManufacturedHome"),
    "2740 - AUTO PARTS SALES": ("FeeSimple", "Improved", None, "AutoSalesRepair", "Building"),
    "2750 - AUTO REPAIR / COMMERCIAL SERVICE GARAGE": ("FeeSimple", "Improved", None, "AutoSalesRepair", "Building"),
    "2760 - USED SALES & RENTAL/LEASING": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "2770 - QUICK LUBE": ("FeeSimple", "Improved", None, "ServiceStation", "Building"),
    "2780 - CAR WASH": ("FeeSimple", "Improved", None, "ServiceStation", "Building"),
    "2805 - COMMERCIAL PARKING LOTS": ("FeeSimple", "VacantLand", None, "Commercial", "LandParcel"),
    "2850 - MHP - 55+ PARK; LOT ONLY": ("FeeSimple", "Improved", None, "MobileHomePark", "LandParcel"),
    "2851 - MHP - 55+ PARK; MH LOT AND UNIT": ("FeeSimple", "Improved", None, "MobileHomePark", "LandParcel"),
    "2852 - MHP - 55+ PARK; MH LOT AND RECREATIONAL VEHICLE (RV)": ("FeeSimple", "Improved", None, "MobileHomePark", "LandParcel"),
    "2853 - RVP - 55+ PARK; RECREATIONAL VEHICLE (RV)": ("FeeSimple", "Improved", None, "Recreational", "LandParcel"),
    "2854 - MHP - FAMILY PARK; LOT ONLY": ("FeeSimple", "Improved", None, "MobileHomePark", "LandParcel"),
    "2855 - MHP - FAMILY PARK; MH LOT AND UNIT": ("FeeSimple", "Improved", None, "MobileHomePark", "LandParcel"),
    "2856 - MHP - FAMILY PARK; MH LOT AND RECREATIONAL VEHICLE (RV)": ("FeeSimple", "Improved", None, "MobileHomePark", "LandParcel"),
    "2857 - RVP - FAMILY PARK; RECREATIONAL VEHICLE (RV)": ("FeeSimple", "Improved", None, "Recreational", "LandParcel"),
    "2900 - WHOLESALE OUTLETS": ("FeeSimple", "Improved", None, "WholesaleOutlet", "Building"),
    "3000 - FLORISTS & GREENHOUSES": ("FeeSimple", "Improved", None, "NurseryGreenhouse", "Building"),
    "3100 - THEATERS (DRIVE-INS)": ("FeeSimple", "Improved", None, "Theater", "Building"),
    "3200 - THEATERS (ENCLOSED)": ("FeeSimple", "Improved", None, "Theater", "Building"),
    "3300 - BARS & LOUNGES": ("FeeSimple", "Improved", None, "Entertainment", "Building"),
    "3400 - BOWLINGALLEYS,SKATING RINKS&POOL HAL": ("FeeSimple", "Improved", None, "Entertainment", "Building"),
    "3410 - FITNESS CENTER": ("FeeSimple", "Improved", None, "Recreational", "LandParcel"),
    "3420 - RADIO/TV STATION": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "3536 - TOURIST ATTRACTIONS": ("FeeSimple", "Improved", None, "Entertainment", "Building"),
    "3537 - ENTERT FACIL.( GOLF, GO CARTS, EVENT VENUES)": ("FeeSimple", "Improved", None, "Entertainment", "Building"),
    "3538 - CLUBHOUSE/COUNTRY CLUB/CULTURAL ORG. (TAXABLE)": ("FeeSimple", "Improved", None, "ClubsLodges", "Building"),
    "3600 - FISH CAMPS": ("FeeSimple", "Improved", None, "Recreational", "LandParcel"),
    "3700 - RACE TRACKS": ("FeeSimple", "Improved", None, "RaceTrack", "LandParcel"),
    "3800 - GOLF COURSES & DR. RANGES": ("FeeSimple", "Improved", None, "GolfCourse", "LandParcel"),
    "3900 - FRANCHISE OR CHAIN HOTELS": ("FeeSimple", "Improved", None, "Hotel", "Building"),
    "3901 - INDEPENDENTLY OWNED MOTELS": ("FeeSimple", "Improved", None, "Hotel", "Building"),
    "3910 - BED & BREAKFAST": ("FeeSimple", "Improved", None, "Hotel", "Building"),
    "3950 - TIMESHARE PROPERTIES": ("Timeshare", "Improved", None, "Hotel", "Unit"),
    "4001 - VACANT INDUSTRIAL": ("FeeSimple", "VacantLand", None, "Industrial", "LandParcel"),
    "4004 - VAC INDUST W/MISC IMP@ 0 VALUE": ("FeeSimple", "VacantLand", None, "Industrial", "LandParcel"),
    "4005 - VAC IND/IMPS ON TPP": ("FeeSimple", "VacantLand", None, "Industrial", "LandParcel"),
    "4006 - INDUSTRIAL IMPROVEMENTS CARRIED ON OTHER PARCELS": ("FeeSimple", "Improved", "MultiFamilyLessThan10", "Industrial", "Building"),
    "4007 - INDUSTRIAL W/ IMPR OF SOME VALUE (XFOB)": ("FeeSimple", "Improved", "MultiFamilyLessThan10", "Industrial", "Building"),
    "4040 - IND. COMMON ELEMENTS/AREAS": ("FeeSimple", "Improved", None, "Commercial", "Building"),
    "4064 - VACANT INDUSTRIAL, UNBUILDABLE": ("FeeSimple", "VacantLand", None, "Industrial", "LandParcel"),
    "4100 - LIGHT MANUFACTURING": ("FeeSimple", "Improved", None, "Industrial", "Building"),
    "4105 - MISC. INDUSTRIAL FACILITY": ("FeeSimple", "Improved", "MultiFamilyLessThan10", "Industrial", "Building"),
    "4202 - HEAVY INDUSTRIAL": ("FeeSimple", "Improved", "MultiFamilyLessThan10", "Industrial", "Building"),
    "4216 - HEAVY IND-POLLUTION CONT.": ("FeeSimple", "Improved", None, "Industrial", "Building"),
    "4300 - LUMBER YDS, SAWMILLS, PLAINING": ("FeeSimple", "Improved", None, "LumberYard", "Building"),
    "4400 - CITRUS PACKING PLANTS": ("FeeSimple", "Improved", None, "PackingPlant", "Building"),
    "4500 - CITRUS CANNING, BOTTLERS, BREWERS, DISTILLERIES AND WINERIES": ("FeeSimple", "Improved", None, "Cannery", "Building"),
    "4600 - OTHER FOOD PROCESSING, BAKERIES, CANDY FACTORIES, POTATO CHIP FACTORIES": ("FeeSimple", "Improved", None, "Industrial", "Building"),
    "4800 - ALL WH, DISTRIB, TERM, STORAGE UNDER 19,999 SF": ("FeeSimple", "Improved", "MultiFamilyLessThan10", "Warehouse", "Building"),
    "4801 - ALL WH, DISTRIB, TERM, STORAGE 20,000 TO 99,999 SF": ("FeeSimple", "Improved", "MultiFamilyLessThan10", "Warehouse", "Building"),
    "4805 - WH, DISTRIB, TERM, STORAGE STEEL CONSTR 100,000 TO 399,999 SF": ("FeeSimple", "Improved", "MultiFamilyLessThan10", "Warehouse", "Building"),
    "4806 - WH, DISTRIB, TERM, STORAGE CONCRETE CONSTR 100,000 TO 399,999 SF": ("FeeSimple", "Improved", "MultiFamilyLessThan10", "Warehouse", "Building"),
    "4810 - ALL WH, DISTRIB, TERM, STORAGE OVER 400,000 SF": ("FeeSimple", "Improved", "MultiFamilyLessThan10", "Warehouse", "Building"),
    "4814 - INDUSTRIAL SELF STORAGE": ("FeeSimple", "Improved", "MultiFamilyLessThan10", "Warehouse", "Building"),
    "4815 - SELF STORAGE": ("FeeSimple", "Improved", None, "Warehouse", "Building"),
    "4816 - FLEX BUILDINGS": ("FeeSimple", "Improved", None, "Industrial", "Building"),
    "4830 - COLD STORAGE": ("FeeSimple", "Improved", None, "Warehouse", "Building"),
    "4915 - OPEN STORAGE-NEW&USED BLDG SUPPLIES": ("FeeSimple", "Improved", None, "Warehouse", "Building"),
    "4924 - GAS & OIL STORAGE & DISTRIBUTION": ("FeeSimple", "Improved", "MultiFamilyLessThan10", "Warehouse", "Building"),
    "4925 - AUTO WRECKING & JUNKYARDS": ("FeeSimple", "Improved", None, "AutoSalesRepair", "Building"),
    "5100 - CROPLAND": ("FeeSimple", "Improved", None, "DrylandCropland", "LandParcel"),
    "5101 - CROPLAND W/MISC. IMP.": ("FeeSimple", "Improved", None, "DrylandCropland", "LandParcel"),
    "5102 - CROPLAND W/RES.": ("FeeSimple", "Improved", None, "DrylandCropland", "LandParcel"),
    "5103 - CROPLAND W/M.H.": ("FeeSimple", "Improved", "ManufacturedHomeOnLand", "DrylandCropland", "LandParcel"),
    "5104 - CROPLAND W/MH ON TPP": ("FeeSimple", "Improved", "ManufacturedHomeOnLand", "DrylandCropland", "LandParcel"),
    "5110 - CROPLAND W/UNDEV. LND.": ("FeeSimple", "VacantLand", None, "DrylandCropland", "LandParcel"),
    "5111 - CROPLAND W/UNDEV. W/MISC. IMP.": ("FeeSimple", "VacantLand", None, "DrylandCropland", "LandParcel"),
    "5112 - CROPLAND W/UNDEV. W/RES.": ("FeeSimple", "VacantLand", None, "DrylandCropland", "LandParcel"),
    "5113 - CROPLAND W/UNDEV. W/M.H.": ("FeeSimple", "VacantLand", None, "DrylandCropland", "LandParcel"),
    "5120 - CROPLAND W/COM. LAND": ("FeeSimple", "Improved", None, "DrylandCropland", "LandParcel"),
    "5121 - CROPLAND W/COM. BLDG.": ("FeeSimple", "Improved", None, "DrylandCropland", "LandParcel"),
    "5150 - CROPLAND W/CITRUS": ("FeeSimple", "Improved", None, "DrylandCropland", "LandParcel"),
    "5151 - CROPLAND W/CITRUS/MISC. IMP.": ("FeeSimple", "Improved", None, "DrylandCropland", "LandParcel"),
    "5152 - CROPLAND W/CITRUS/RES.": ("FeeSimple", "Improved", None, "DrylandCropland", "LandParcel"),
    "5160 - CROPLAND W/PASTURE": ("FeeSimple", "Improved", None, "DrylandCropland", "LandParcel"),
    "5161 - CROPLAND W/PASTURE/MISC. IMP.": ("FeeSimple", "Improved", None, "DrylandCropland", "LandParcel"),
    "5162 - CROPLAND W/PASTURE/RES.": ("FeeSimple", "Improved", None, "DrylandCropland", "LandParcel"),
    "5163 - CROPLAND W/PASTURE/M.H.": ("FeeSimple", "Improved", "ManufacturedHomeOnLand", "DrylandCropland", "LandParcel"),
    "5164 - CROPLAND W/PASTURE W/MH ON TPP": ("FeeSimple", "Improved", "ManufacturedHomeOnLand", "DrylandCropland", "LandParcel"),
    "5170 - CROPLAND W/FARMLAND": ("FeeSimple", "Improved", None, "DrylandCropland", "LandParcel"),
    "5171 - CROPLAND W/FARMLAND/MISC. IMP.": ("FeeSimple", "Improved", None, "DrylandCropland", "LandParcel"),
    "5400 - TIMBER": ("FeeSimple", "Improved", None, "TimberLand", "LandParcel"),
    "5401 - TIMBER W/MISC.IMP.": ("FeeSimple", "Improved", None, "TimberLand", "LandParcel"),
    "5402 - TIMBER W/RES.": ("FeeSimple", "Improved", None, "TimberLand", "LandParcel"),
    "5403 - TIMBER W/M.H.": ("FeeSimple", "Improved", "ManufacturedHomeOnLand", "TimberLand", "LandParcel"),
    "5410 - TIMBER W/UNDEV. LND.": ("FeeSimple", "VacantLand", None, "TimberLand", "LandParcel"),
    "5411 - TIMBER W/UNDEV. W/MISC. IMP.": ("FeeSimple", "VacantLand", None, "TimberLand", "LandParcel"),
    "5412 - TIMBER W/UNDEV. W/RES.": ("FeeSimple", "VacantLand", None, "TimberLand", "LandParcel"),
    "5413 - TIMBER W/UNDEV. W/M.H.": ("FeeSimple", "VacantLand", None, "TimberLand", "LandParcel"),
    "5420 - TIMBER W/COM. LAND": ("FeeSimple", "Improved", None, "TimberLand", "LandParcel"),
    "5421 - TIMBER W/COM. BLDG.": ("FeeSimple", "Improved", None, "TimberLand", "LandParcel"),
    "5450 - TIMBER W/CITRUS": ("FeeSimple", "Improved", None, "TimberLand", "LandParcel"),
    "5460 - TIMBER W/PASTURE": ("FeeSimple", "Improved", None, "TimberLand", "LandParcel"),
    "5461 - TIMBER W/PASTURE/MISC. IMP.": ("FeeSimple", "Improved", None, "TimberLand", "LandParcel"),
    "5462 - TIMBER W/PASTURE/RES.": ("FeeSimple", "Improved", None, "TimberLand", "LandParcel"),
    "5470 - TIMBER W/FARMLAND": ("FeeSimple", "Improved", None, "TimberLand", "LandParcel"),
    "5471 - TIMBER W/FARMLAND/MISC. IMP.": ("FeeSimple", "Improved", None, "TimberLand", "LandParcel"),
    "5472 - TIMBER W/FARMLAND/RES.": ("FeeSimple", "Improved", None, "TimberLand", "LandParcel"),
    "6000 - PASTURE": ("FeeSimple", "Improved", None, "GrazingLand", "LandParcel"),
    "6001 - PASTURE W/MISC. IMP.": ("FeeSimple", "Improved", None, "GrazingLand", "LandParcel"),
    "6002 - PASTURE W/RES.": ("FeeSimple", "Improved", None, "GrazingLand", "LandParcel"),
    "6003 - PASTURE W/M.H.": ("FeeSimple", "Improved", "ManufacturedHomeOnLand", "GrazingLand", "LandParcel"),
    "6004 - PASTURE W/MH ON TPP": ("FeeSimple", "Improved", "ManufacturedHomeOnLand", "GrazingLand", "LandParcel"),
    "6010 - PASTURE W/UNDEV. LND.": ("FeeSimple", "VacantLand", None, "GrazingLand", "LandParcel"),
    "6011 - PASTURE W/UNDEV. W/MISC. IMP.": ("FeeSimple", "VacantLand", None, "GrazingLand", "LandParcel"),
    "6012 - PASTURE W/UNDEV. W/RES.": ("FeeSimple", "VacantLand", None, "GrazingLand", "LandParcel"),
    "6013 - PASTURE W/UNDEV. W/M.H.": ("FeeSimple", "VacantLand", None, "GrazingLand", "LandParcel"),
    "6014 - PASTURE W/UNDEV. W/MH ON TPP": ("FeeSimple", "VacantLand", None, "GrazingLand", "LandParcel"),
    "6020 - PASTURE W/COM. LAND": ("FeeSimple", "Improved", None, "GrazingLand", "LandParcel"),
    "6021 - PASTURE W/COM. BLDG.": ("FeeSimple", "Improved", None, "GrazingLand", "LandParcel"),
    "6022 - PASTURE W/M.H. PARK": ("FeeSimple", "Improved", "ManufacturedHomeOnLand", "GrazingLand", "LandParcel"),
    "6023 - PASTURE W/GOLF COURSE": ("FeeSimple", "Improved", None, "GrazingLand", "LandParcel"),
    "6050 - PASTURE W/CITRUS": ("FeeSimple", "Improved", None, "GrazingLand", "LandParcel"),
    "6051 - PASTURE W/CITRUS/MISC. IMP.": ("FeeSimple", "Improved", None, "GrazingLand", "LandParcel"),
    "6052 - PASTURE W/CITRUS/RES.": ("FeeSimple", "Improved", None, "GrazingLand", "LandParcel"),
    "6053 - PASTURE W/CITRUS/M.H.": ("FeeSimple", "Improved", "ManufacturedHomeOnLand", "GrazingLand", "LandParcel"),
    "6070 - PASTURE W/FARMLAND": ("FeeSimple", "Improved", None, "GrazingLand", "LandParcel"),
    "6071 - PASTURE W/FARMLAND/MISC. IMP.": ("FeeSimple", "Improved", None, "GrazingLand", "LandParcel"),
    "6072 - PASTURE W/FARMLAND/RES.": ("FeeSimple", "Improved", None, "GrazingLand", "LandParcel"),
    "6073 - PASTURE W/FARMLAND/M.H.": ("FeeSimple", "Improved", "ManufacturedHomeOnLand", "GrazingLand", "LandParcel"),
    "6600 - CITRUS": ("FeeSimple", "Improved", None, "OrchardGroves", "LandParcel"),
    "6601 - CITRUS W/MISC. IMP.": ("FeeSimple", "Improved", None, "OrchardGroves", "LandParcel"),
    "6602 - CITRUS W/RES.": ("FeeSimple", "Improved", None, "OrchardGroves", "LandParcel"),
    "6603 - CITRUS W/M.H.": ("FeeSimple", "Improved", "ManufacturedHomeOnLand", "OrchardGroves", "LandParcel"),
    "6610 - CITRUS W/UNDEV. LND.": ("FeeSimple", "VacantLand", None, "OrchardGroves", "LandParcel"),
    "6611 - CITRUS W/UNDEV. W/MISC. IMP.": ("FeeSimple", "VacantLand", None, "OrchardGroves", "LandParcel"),
    "6612 - CITRUS W/UNDEV. W/RES.": ("FeeSimple", "VacantLand", None, "OrchardGroves", "LandParcel"),
    "6613 - CITRUS W/UNDEV. W/M.H.": ("FeeSimple", "VacantLand", None, "OrchardGroves", "LandParcel"),
    "6620 - CITRUS W/COM. LAND": ("FeeSimple", "Improved", None, "OrchardGroves", "LandParcel"),
    "6621 - CITRUS W/COM. BLDG.": ("FeeSimple", "Improved", None, "OrchardGroves", "LandParcel"),
    "6660 - CITRUS W/PASTURE": ("FeeSimple", "Improved", None, "GrazingLand", "LandParcel"),
    "6661 - CITRUS W/PASTURE/MISC. IMP.": ("FeeSimple", "Improved", None, "GrazingLand", "LandParcel"),
    "6662 - CITRUS W/PASTURE/RES.": ("FeeSimple", "Improved", None, "GrazingLand", "LandParcel"),
    "6670 - CITRUS W/FARMLAND": ("FeeSimple", "Improved", None, "OrchardGroves", "LandParcel"),
    "6671 - CITRUS W/FARMLAND/MISC. IMP.": ("FeeSimple", "Improved", None, "OrchardGroves", "LandParcel"),
    "6672 - CITRUS W/FARMLAND/RES.": ("FeeSimple", "Improved", None, "OrchardGroves", "LandParcel"),
    "6700 - POULTRY, BEES, FISH, RABBITS...": ("FeeSimple", "Improved", None, "Poultry", "LandParcel"),
    "6701 - POULTRY, BEES, FISH, RABBITS... W/MISC. IMP.": ("FeeSimple", "Improved", None, "Poultry", "LandParcel"),
    "6702 - POULTRY, BEES, FISH, RABBITS... W/RES.": ("FeeSimple", "Improved", None, "Poultry", "LandParcel"),
    "6703 - POULTRY, BEES, FISH, RABBITS... W/M.H.": ("FeeSimple", "Improved", "ManufacturedHomeOnLand", "Poultry", "LandParcel"),
    "6704 - POULTRY, BEES, FISH, RABBITS...W/MH ON TPP": ("FeeSimple", "Improved", "ManufacturedHomeOnLand", "Poultry", "LandParcel"),
    "6712 - POULTRY, BEES, FISH, RABBITS... W/UNDEV. W/RES.": ("FeeSimple", "VacantLand", None, "Poultry", "LandParcel"),
    "6721 - POULTRY, BEES, FISH, RABBITS... W/COM. BLDG.": ("FeeSimple", "Improved", None, "Poultry", "LandParcel"),
    "6761 - POULTRY, BEES, FISH, & RABBITS...W/PASTURE/MISC. IMP.": ("FeeSimple", "Improved", None, "GrazingLand", "LandParcel"),
    "6800 - DAIRY": ("FeeSimple", "Improved", None, "LivestockFacility", "LandParcel"),
    "6801 - DAIRY W/MISC. IMP.": ("FeeSimple", "Improved", None, "LivestockFacility", "LandParcel"),
    "6802 - DAIRY W/RES.": ("FeeSimple", "Improved", None, "LivestockFacility", "LandParcel"),
    "6810 - DAIRY W/UNDEV. LND.": ("FeeSimple", "VacantLand", None, "LivestockFacility", "LandParcel"),
    "6900 - NURSERY": ("FeeSimple", "Improved", None, "NurseryGreenhouse", "LandParcel"),
    "6901 - NURSERY W/MISC. IMP.": ("FeeSimple", "Improved", None, "NurseryGreenhouse", "LandParcel"),
    "6902 - NURSERY W/RES.": ("FeeSimple", "Improved", None, "NurseryGreenhouse", "LandParcel"),
    "6903 - NURSERY W/M.H.": ("FeeSimple", "Improved", "ManufacturedHomeOnLand", "NurseryGreenhouse", "LandParcel"),
    "6904 - NURSERY W/MH ON TPP": ("FeeSimple", "Improved", "ManufacturedHomeOnLand", "NurseryGreenhouse", "LandParcel"),
    "6910 - NURSERY W/UNDEV. LND.": ("FeeSimple", "VacantLand", None, "NurseryGreenhouse", "LandParcel"),
    "6911 - NURSERY W/UNDEV. W/MISC. IMP.": ("FeeSimple", "VacantLand", None, "NurseryGreenhouse", "LandParcel"),
    "6912 - NURSERY W/UNDEV. W/RES.": ("FeeSimple", "VacantLand", None, "NurseryGreenhouse", "LandParcel"),
    "6913 - NURSERY W/UNDEV. W/M.H.": ("FeeSimple", "VacantLand", None, "NurseryGreenhouse", "LandParcel"),
    "6921 - NURSERY W/COM. BLDG.": ("FeeSimple", "Improved", None, "NurseryGreenhouse", "LandParcel"),
    "6961 - NURSERY W/PASTURE/MISC. IMP.": ("FeeSimple", "Improved", None, "GrazingLand", "LandParcel"),
    "6963 - NURSERY W/PASTURE/M.H.": ("FeeSimple", "Improved", "ManufacturedHomeOnLand", "GrazingLand", "LandParcel"),
    "7000 - VACANT INSTITUTIONAL - VAC LAND OR MISC IMPR OF SOME VALUE": ("FeeSimple", "VacantLand", None, "GovernmentProperty", "LandParcel"),
    "7050 - VACANT NON-APPURTENANT COMMON ELEMENTS": ("FeeSimple", "VacantLand", None, "ResidentialCommonElementsAreas", "LandParcel"),
    "7070 - VACANT CDD PARCEL - VAC LAND OR MISC IMPR OF SOME VALUE": ("FeeSimple", "VacantLand", None, "GovernmentProperty", "LandParcel"),
    "7071 - CHURCHES- VACANT LAND OR MISC IMPR OF SOME VALUE": ("FeeSimple", "VacantLand", None, "Church", "LandParcel"),
    "7072 - SCHOOLS & COLLEGES (PRIVATE) - VAC LAND OR MISC IMPR OF SOME VALUE": ("FeeSimple", "VacantLand", None, "PrivateSchool", "LandParcel"),
    "7073 - HOSPITALS (PRIVATELY OWNED) - VAC LAND OR MISC IMPR OF SOME VALUE": ("FeeSimple", "VacantLand", None, "PrivateHospital", "LandParcel"),
    "7074 - HOMES FOR THE AGED - VAC LAND OR MISC IMPR OF SOME VALUE": ("FeeSimple", "VacantLand", None, "HomesForAged", "LandParcel"),
    "7075 - CHARITABLE INCLUDING ORPHANAGES - VAC LAND OR MISC IMPR OF SOME VALUE": ("FeeSimple", "VacantLand", None, "NonProfitCharity", "LandParcel"),
    "7076 - CEMETERIES - VAC LAND OR MISC IMPR OF SOME VALUE": ("FeeSimple", "VacantLand", None, "MortuaryCemetery", "LandParcel"),
    "7077 - CLUBS & LODGES - VAC LAND OR MISC IMPR OF SOME VALUE": ("FeeSimple", "VacantLand", None, "ClubsLodges", "LandParcel"),
    "7078 - NURSING HOMES (MEDICAL FACILITIES) - VAC LAND OR MISC IMPR OF SOME VALUE": ("FeeSimple", "VacantLand", None, "SanitariumConvalescentHome", "LandParcel"),
    "7079 - CULTURAL ORGANIZATIONS - VAC LAND OR MISC IMPR OF SOME VALUE": ("FeeSimple", "VacantLand", None, "CulturalOrganization", "LandParcel"),
    "7100 - CHURCHES": ("FeeSimple", "Improved", None, "Church", "Building"),
    "7101 - CHURCHES (TAXABLE)": ("FeeSimple", "Improved", None, "Church", "Building"),
    "7200 - SCHOOLS & COLLEGES (PRIVATE)": ("FeeSimple", "Improved", None, "PrivateSchool", "Building"),
    "7300 - HOSPITALS (PRIVATELY OWNED) & MEDICAL FACILITIES": ("FeeSimple", "Improved", None, "PrivateHospital", "Building"),
    "7400 - HOMES FOR THE AGED": ("FeeSimple", "Improved", None, "HomesForAged", "Building"),
    "7500 - CHARITABLE INCLUDING ORPHANAGES-IMPROVED": ("FeeSimple", "Improved", None, "NonProfitCharity", "Building"),
    "7600 - CEMETERIES": ("FeeSimple", "Improved", None, "MortuaryCemetery", "Building"),
    "7728 - CLUBS & LODGES": ("FeeSimple", "Improved", None, "ClubsLodges", "Building"),
    "7750 - NON-APPURTENANT COMMON ELEMENTS": ("FeeSimple", "Improved", None, "ResidentialCommonElementsAreas", "Building"),
    "7770 - CDD PARCEL IMPROVED": ("FeeSimple", "Improved", None, "GovernmentProperty", "LandParcel"),
    "7800 - NURSING HOMES (MEDICAL FACILITIES)": ("FeeSimple", "Improved", None, "SanitariumConvalescentHome", "Building"),
    "7900 - CULTURAL ORGANIZATIONS": ("FeeSimple", "Improved", None, "CulturalOrganization", "Building"),
    "8050 - VACANT MINERAL RIGHTS (100% GOV EX)": ("SubsurfaceRights", "VacantLand", None, "MineralProcessing", "LandParcel"),
    "8076 - VACANT CEMETERY (100% GOV EX)": ("FeeSimple", "VacantLand", None, "MortuaryCemetery", "LandParcel"),
    "8081 - VACANT MILITARY - VAC LAND OR MISC IMPR OF SOME VALUE": ("FeeSimple", "VacantLand", None, "Military", "LandParcel"),
    "8082 - VACANT FOREST, PARKS - VAC LAND OR MISC IMPR OF SOME VALUE": ("FeeSimple", "VacantLand", None, "ForestParkRecreation", "LandParcel"),
    "8083 - VACANT PUBLIC COUNTY SCHOOLS - VAC LAND OR MISC IMPR OF SOME VALUE": ("FeeSimple", "VacantLand", None, "PublicSchool", "LandParcel"),
    "8084 - VACANT COLLEGES - VAC LAND OR MISC IMPR OF SOME VALUE": ("FeeSimple", "VacantLand", None, "PrivateSchool", "LandParcel"),
    "8086 - VACANT COUNTY - VAC LAND OR MISC IMPR OF SOME VALUE": ("FeeSimple", "VacantLand", None, "GovernmentProperty", "LandParcel"),
    "8087 - VACANT STATE - VAC LAND OR MISC IMPR OF SOME VALUE": ("FeeSimple", "VacantLand", None, "GovernmentProperty", "LandParcel"),
    "8088 - VACANT FEDERAL - VAC LAND OR MISC IMPR OF SOME VALUE": ("FeeSimple", "VacantLand", None, "GovernmentProperty", "LandParcel"),
    "8089 - VACANT MUNICIPAL - VAC LAND OR MISC IMPR OF SOME VALUE": ("FeeSimple", "VacantLand", None, "GovernmentProperty", "LandParcel"),
    "8095 - VACANT SUBMRGD LAND (100% GOV EX)": ("FeeSimple", "VacantLand", None, "RiversLakes", "LandParcel"),
    "8200 - FORESTS, PARKS, REC. AREAS": ("FeeSimple", "Improved", None, "ForestParkRecreation", "LandParcel"),
    "8300 - SCHOOLS,PUBLIC-COUNTY (OWNED BY SCH BRD": ("FeeSimple", "Improved", None, "PublicSchool", "Building"),
    "8400 - COLLEGES": ("FeeSimple", "Improved", None, "PrivateSchool", "Building"),
    "8600 - COUNTIES (OTHER THAN PUB SCHOOLS,COLLEGES)": ("FeeSimple", "Improved", None, "GovernmentProperty", "Building"),
    "8700 - STATE (OTHER THAN MILITARY,FORESTS,P": ("FeeSimple", "Improved", None, "GovernmentProperty", "LandParcel"),
    "8800 - FEDERAL (OTHER THAN MILITARY, FORESTS,P": ("FeeSimple", "Improved", None, "GovernmentProperty", "LandParcel"),
    "8900 - MUNICIPAL (OTHER THAN COLLEGES,PARKS&RE": ("FeeSimple", "Improved", None, "GovernmentProperty", "Building"),
    "8930 - MUNICIPAL GOLF COURSE": ("FeeSimple", "Improved", None, "GovernmentProperty", "LandParcel"),
    "9130 - RAILROAD LAND": ("FeeSimple", "Improved", None, "Railroad", "LandParcel"),
    "9140 - RAILROAD LAND W/MISC. IMP": ("FeeSimple", "Improved", None, "Railroad", "LandParcel"),
    "9190 - UTILITIES (GAS, ELECTRIC, PHONE)": ("FeeSimple", "Improved", "MultiFamilyLessThan10", "Industrial", "Building"),
    "9200 - PHOSPHATE LAND": ("FeeSimple", "Improved", None, "MineralProcessing", "Building"),
    "9207 - PHOSPHATE PLANTS": ("FeeSimple", "Improved", None, "MineralProcessing", "Building"),
    "9208 - SAND MINES": ("FeeSimple", "Improved", None, "MineralProcessing", "Building"),
    "9209 - SAND MINES WITH IMPROVEMENTS": ("FeeSimple", "Improved", None, "MineralProcessing", "Building"),
    "9210 - PHOSPHATE LAND WITH IMPROVEMENTS": ("FeeSimple", "Improved", None, "MineralProcessing", "Building"),
    "9350 - MINERAL RIGHTS (NOT PHOS.)": ("SubsurfaceRights", "Improved", None, "MineralProcessing", "Building"),
    "9360 - PHOS. MINERAL RIGHTS": ("SubsurfaceRights", "Improved", None, "MineralProcessing", "Building"),
    "9400 - STREETS, R/W & RETENTION (PRIVATE)": ("RightOfWay", "Improved", None, "ReferenceParcel", "LandParcel"),
    "9500 - SUBMRGD LAND/LK BOTTOM/PERC POND)": ("FeeSimple", "Improved", None, "RiversLakes", "LandParcel"),
    "9670 - SEWAGE/BORROW PITS/SPRAY FIELDS": ("FeeSimple", "Improved", None, "SewageDisposal", "LandParcel"),
    "9681 - WASTE LAND": ("FeeSimple", "Improved", None, "TransitionalProperty", "LandParcel"),
    "9741 - RECREATION LAND (COVENANT)": ("FeeSimple", "Improved", None, "Recreational", "LandParcel"),
    "9744 - RECREATION LAND W/MISC.IMP.(COVENANT)": ("FeeSimple", "Improved", None, "Recreational", "LandParcel"),
    "9800 - CENTRALLY ASSESSED RAILROAD LAND": ("FeeSimple", "Improved", None, "Railroad", "LandParcel"),
    "9801 - CENTRALLY ASSESSED RAILROAD VALUE": ("FeeSimple", "Improved", None, "Railroad", "LandParcel"),
    "9900 - UNPLATTED UP TO 10 ACRES": ("FeeSimple", "Improved", None, "Residential", "Building"),
    "9904 - UNPLATTED UP TO 10AC W/ IMPR @ ZERO VAL": ("FeeSimple", "Improved", None, "Residential", "Building"),
    "9905 - UNPLATTED UP TO 10AC W/IMPR OF SOME VALUE": ("FeeSimple", "Improved", None, "Residential", "Building"),
    "9910 - INACCESSIBLE TRACTS": ("FeeSimple", "Improved", None, "TransitionalProperty", "LandParcel"),
    "9920 - UNPLATTED TRACTS 10 - 29.99 ACRES": ("FeeSimple", "Improved", None, "Residential", "Building"),
    "9924 - TRACTS 10AC+ W/MISC.IMP. @ 0": ("FeeSimple", "Improved", None, "Residential", "Building"),
    "9925 - UNPLATTED TRACTS 30 TO 59.99 ACRES": ("FeeSimple", "Improved", None, "Residential", "Building"),
    "9930 - UNPLATTED TRACTS 60 - 99.99 ACRES": ("FeeSimple", "Improved", None, "Residential", "Building"),
    "9935 - UNPLATTED TRACTS 100+ ACRES": ("FeeSimple", "Improved", None, "Residential", "Building"),
    "9940 - RECREATIONAL LAND (PRIVATE)": ("FeeSimple", "Improved", None, "Residential", "Building"),
    "9980 - UNPLATTED TRACTS W/ LAKE FRONTAGE": ("FeeSimple", "Improved", None, "Residential", "Building"),
}

INSTRUMENT_DEED_MAP = {
    "A": "Miscellaneous",
    "AS": "Assignment of Contract",
    "C": "Correction Deed",
    "CT": "Miscellaneous",
    "F": "Miscellaneous",
    "L": "Life Estate Deed",
    "M": "Miscellaneous",
    "Q": "Quitclaim Deed",
    "R": "Miscellaneous",
    "RF": "Miscellaneous",
    "T": "Tax Deed",
    "TQ": "Trustee's Deed",
    "W": "Warranty Deed",
    "X": "Miscellaneous",
}


def dor_code_key(value):
    match = re.search(r"\d{4}", str(value))
    return match.group(0) if match else None


PROPERTY_USE_MAPPER = CodeMapper(
    PROPERTY_USE_CODE_MAP,
    normalize=dor_code_key,
    strict=True,
    name="Polk DOR use code",
)

DEED_TYPE_MAPPER = CodeMapper(
    INSTRUMENT_DEED_MAP,
    default="Miscellaneous",
    name="Polk instrument type",
)


def map_property_use(raw, strict=True):
    return property_use_record(PROPERTY_USE_MAPPER.map(raw, strict=strict))


def map_deed_type(instrument):
    if not instrument:
        return "Miscellaneous"
    return DEED_TYPE_MAPPER.map(instrument)
