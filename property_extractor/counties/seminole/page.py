"""The Seminole appraiser page is a JSON document wrapped in the first <pre>."""

import json
import math
import os
import re
from urllib.parse import urlparse

from bs4 import BeautifulSoup

from ...text_utils import clean_text

DIRECTIONALS = ("N", "S", "E", "W", "NE", "NW", "SE", "SW")

BUILDING_NUMBER_KEYS = (
    "building_number", "buildingNumber", "building_no", "buildingNo",
    "building_index", "buildingIndex", "bldg_number", "bldgNumber", "bldg_no",
    "bldgNo", "structure_number", "structureNumber",
)

# Street suffix spellings -> USPS abbreviation
USPS_SUFFIXES = {
    "ALLEY": "Aly", "ALY": "Aly", "ANEX": "Anx", "ANNEX": "Anx", "ANX": "Anx",
    "ARCADE": "Arc", "ARC": "Arc", "AVENUE": "Ave", "AV": "Ave", "AVE": "Ave",
    "BAYOU": "Byu", "BYU": "Byu", "BEACH": "Bch", "BCH": "Bch", "BEND": "Bnd", "BND": "Bnd",
    "BLUFF": "Blf", "BLF": "Blf", "BLUFFS": "Blfs", "BLFS": "Blfs", "BOTTOM": "Btm", "BTM": "Btm",
    "BOULEVARD": "Blvd", "BLVD": "Blvd", "BRANCH": "Br", "BR": "Br", "BRIDGE": "Brg", "BRG": "Brg",
    "BROOK": "Brk", "BRK": "Brk", "BROOKS": "Brks", "BRKS": "Brks", "BURG": "Bg", "BG": "Bg",
    "BYPASS": "Byp", "BYP": "Byp", "CAMP": "Cp", "CP": "Cp", "CANYON": "Cyn", "CYN": "Cyn",
    "CAPE": "Cpe", "CPE": "Cpe", "CAUSEWAY": "Cswy", "CSWY": "Cswy", "CENTER": "Ctr", "CTR": "Ctr",
    "CENTERS": "Ctrs", "CTRS": "Ctrs", "CIRCLE": "Cir", "CIR": "Cir", "CIRCLES": "Cirs", "CIRS": "Cirs",
    "CLIFF": "Clf", "CLF": "Clf", "CLIFFS": "Clfs", "CLFS": "Clfs", "CLUB": "Clb", "CLB": "Clb",
    "COMMON": "Cmn", "CMN": "Cmn", "COMMONS": "Cmns", "CMNS": "Cmns", "CORNER": "Cor", "COR": "Cor",
    "CORNERS": "Cors", "CORS": "Cors", "COURSE": "Crse", "CRSE": "Crse", "COURT": "Ct", "CT": "Ct",
    "COURTS": "Cts", "CTS": "Cts", "COVE": "Cv", "CV": "Cv", "COVES": "Cvs", "CVS": "Cvs",
    "CREEK": "Crk", "CRK": "Crk", "CRESCENT": "Cres", "CRES": "Cres", "CREST": "Crst", "CRST": "Crst",
    "CROSSING": "Xing", "XING": "Xing", "CROSSROAD": "Xrd", "XRD": "Xrd", "CROSSROADS": "Xrds",
    "XRDS": "Xrds", "CURVE": "Curv", "CURV": "Curv", "DALE": "Dl", "DL": "Dl", "DAM": "Dm", "DM": "Dm",
    "DIVIDE": "Dv", "DV": "Dv", "DRIVE": "Dr", "DR": "Dr", "DRIVES": "Drs", "DRS": "Drs",
    "ESTATE": "Est", "EST": "Est", "ESTATES": "Ests", "ESTS": "Ests", "EXPRESSWAY": "Expy",
    "EXPY": "Expy", "EXTENSION": "Ext", "EXT": "Ext", "EXTENSIONS": "Exts", "EXTS": "Exts",
    "FALL": "Fall", "FALLS": "Fls", "FLS": "Fls", "FERRY": "Fry", "FRY": "Fry", "FIELD": "Fld",
    "FLD": "Fld", "FIELDS": "Flds", "FLDS": "Flds", "FLAT": "Flt", "FLT": "Flt", "FLATS": "Flts",
    "FLTS": "Flts", "FORD": "Frd", "FRD": "Frd", "FORDS": "Frds", "FRDS": "Frds", "FOREST": "Frst",
    "FRST": "Frst", "FORGE": "Frg", "FRG": "Frg", "FORGES": "Frgs", "FRGS": "Frgs", "FORK": "Frk",
    "FRK": "Frk", "FORKS": "Frks", "FRKS": "Frks", "FORT": "Ft", "FT": "Ft", "FREEWAY": "Fwy",
    "FWY": "Fwy", "GARDEN": "Gdn", "GDN": "Gdn", "GARDENS": "Gdns", "GDNS": "Gdns", "GATEWAY": "Gtwy",
    "GTWY": "Gtwy", "GLEN": "Gln", "GLN": "Gln", "GLENS": "Glns", "GLNS": "Glns", "GREEN": "Grn",
    "GRN": "Grn", "GREENS": "Grns", "GRNS": "Grns", "GROVE": "Grv", "GRV": "Grv", "GROVES": "Grvs",
    "GRVS": "Grvs", "HARBOR": "Hbr", "HBR": "Hbr", "HARBORS": "Hbrs", "HBRS": "Hbrs", "HAVEN": "Hvn",
    "HVN": "Hvn", "HEIGHTS": "Hts", "HTS": "Hts", "HIGHWAY": "Hwy", "HWY": "Hwy", "HILL": "Hl",
    "HL": "Hl", "HILLS": "Hls", "HLS": "Hls", "HOLLOW": "Holw", "HOLW": "Holw", "INLET": "Inlt",
    "INLT": "Inlt", "ISLAND": "Is", "IS": "Is", "ISLANDS": "Iss", "ISS": "Iss", "ISLE": "Isle",
    "JUNCTION": "Jct", "JCT": "Jct", "JUNCTIONS": "Jcts", "JCTS": "Jcts", "KEY": "Ky", "KY": "Ky",
    "KEYS": "Kys", "KYS": "Kys", "KNOLL": "Knl", "KNL": "Knl", "KNOLLS": "Knls", "KNLS": "Knls",
    "LAKE": "Lk", "LK": "Lk", "LAKES": "Lks", "LKS": "Lks", "LAND": "Land", "LANDING": "Lndg",
    "LNDG": "Lndg", "LANE": "Ln", "LN": "Ln", "LIGHT": "Lgt", "LGT": "Lgt", "LIGHTS": "Lgts",
    "LGTS": "Lgts", "LOCK": "Lck", "LCK": "Lck", "LOCKS": "Lcks", "LCKS": "Lcks", "LODGE": "Ldg",
    "LDG": "Ldg", "LOOP": "Loop", "MALL": "Mall", "MANOR": "Mnr", "MNR": "Mnr", "MANORS": "Mnrs",
    "MNRS": "Mnrs", "MEADOW": "Mdw", "MDW": "Mdw", "MEADOWS": "Mdws", "MDWS": "Mdws", "MEWS": "Mews",
    "MILL": "Ml", "ML": "Ml", "MILLS": "Mls", "MLS": "Mls", "MISSION": "Msn", "MSN": "Msn",
    "MOTORWAY": "Mtwy", "MTWY": "Mtwy", "MOUNT": "Mt", "MT": "Mt", "MOUNTAIN": "Mtn", "MTN": "Mtn",
    "MOUNTAINS": "Mtns", "MTNS": "Mtns", "NECK": "Nck", "NCK": "Nck", "ORCHARD": "Orch", "ORCH": "Orch",
    "OVAL": "Oval", "OVERPASS": "Opas", "OPAS": "Opas", "PARK": "Park", "PARKS": "Prk", "PRK": "Prk",
    "PARKWAY": "Pkwy", "PKWY": "Pkwy", "PASS": "Pass", "PASSAGE": "Psge", "PSGE": "Psge",
    "PATH": "Path", "PIKE": "Pike", "PINE": "Pne", "PNE": "Pne", "PINES": "Pnes", "PNES": "Pnes",
    "PLACE": "Pl", "PL": "Pl", "PLAIN": "Pln", "PLN": "Pln", "PLAINS": "Plns", "PLNS": "Plns",
    "PLAZA": "Plz", "PLZ": "Plz", "POINT": "Pt", "PT": "Pt", "POINTS": "Pts", "PTS": "Pts",
    "PORT": "Prt", "PRT": "Prt", "PORTS": "Prts", "PRTS": "Prts", "PRAIRIE": "Pr", "PR": "Pr",
    "RADIAL": "Radl", "RADL": "Radl", "RAMP": "Ramp", "RANCH": "Rnch", "RNCH": "Rnch", "RAPID": "Rpd",
    "RPD": "Rpd", "RAPIDS": "Rpds", "RPDS": "Rpds", "REST": "Rst", "RST": "Rst", "RIDGE": "Rdg",
    "RDG": "Rdg", "RIDGES": "Rdgs", "RDGS": "Rdgs", "RIVER": "Riv", "RIV": "Riv", "ROAD": "Rd",
    "RD": "Rd", "ROADS": "Rds", "RDS": "Rds", "ROUTE": "Rte", "RTE": "Rte", "ROW": "Row", "RUE": "Rue",
    "RUN": "Run", "SHOAL": "Shl", "SHL": "Shl", "SHOALS": "Shls", "SHLS": "Shls", "SHORE": "Shr",
    "SHR": "Shr", "SHORES": "Shrs", "SHRS": "Shrs", "SKYWAY": "Skwy", "SKWY": "Skwy", "SPRING": "Spg",
    "SPG": "Spg", "SPRINGS": "Spgs", "SPGS": "Spgs", "SPUR": "Spur", "SQUARE": "Sq", "SQ": "Sq",
    "SQUARES": "Sqs", "SQS": "Sqs", "STATION": "Sta", "STA": "Sta", "STRAVENUE": "Stra", "STRA": "Stra",
    "STREAM": "Strm", "STRM": "Strm", "STREET": "St", "ST": "St", "STREETS": "Sts", "STS": "Sts",
    "SUMMIT": "Smt", "SMT": "Smt", "TERRACE": "Ter", "TER": "Ter", "THROUGHWAY": "Trwy", "TRWY": "Trwy",
    "TRACE": "Trce", "TRCE": "Trce", "TRACK": "Trak", "TRAK": "Trak", "TRAFFICWAY": "Trfy",
    "TRFY": "Trfy", "TRAIL": "Trl", "TRL": "Trl", "TRAILER": "Trlr", "TRLR": "Trlr", "TUNNEL": "Tunl",
    "TUNL": "Tunl", "TURNPIKE": "Tpke", "TPKE": "Tpke", "UNDERPASS": "Upas", "UPAS": "Upas",
    "UNION": "Un", "UN": "Un", "UNIONS": "Uns", "UNS": "Uns", "VALLEY": "Vly", "VLY": "Vly",
    "VALLEYS": "Vlys", "VLYS": "Vlys", "VIADUCT": "Via", "VIA": "Via", "VIEW": "Vw", "VW": "Vw",
    "VIEWS": "Vws", "VWS": "Vws", "VILLAGE": "Vlg", "VLG": "Vlg", "VILLAGES": "Vlgs", "VLGS": "Vlgs",
    "VILLE": "Vl", "VL": "Vl", "VISTA": "Vis", "VIS": "Vis", "WALK": "Walk", "WALL": "Wall",
    "WAY": "Way", "WAYS": "Ways", "WELL": "Wl", "WL": "Wl", "WELLS": "Wls", "WLS": "Wls",
}

STREET_LINE_RE = re.compile(
    r"^(?:(\d+)\s+)?(?:(N|S|E|W|NE|NW|SE|SW)\s+)?(.+?)\s+("
    + "|".join(sorted(USPS_SUFFIXES, key=len, reverse=True))
    + r")\s*(?:(N|S|E|W|NE|NW|SE|SW)\s*)?$",
    re.IGNORECASE,
)


def load_input(path):
    """Parse the JSON payload of the first <pre> in input.html"""
    with open(path, "r", encoding="utf-8") as f:
        soup = BeautifulSoup(f.read(), "html.parser")
    pre = soup.find("pre")
    text = pre.get_text().strip() if pre is not None else ""
    if not text:
        raise ValueError(f"No JSON found in <pre> tag of {os.path.basename(path)}")
    return json.loads(text)


def to_number(value):
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return int(number) if number.is_integer() else number


def to_iso_date(value):
    """'2019-05-03T00:00:00' -> '2019-05-03'"""
    if not value:
        return None
    head = str(value)[:10]
    return head if re.match(r"^\d{4}-\d{2}-\d{2}$", head) else None


def to_currency(value):
    number = to_number(value)
    return None if number is None else round(number, 2)


def pick_first_string(source, keys):
    for key in keys:
        value = source.get(key)
        if value is None:
            continue
        text = str(value).strip()
        if text:
            return text
    return None


def building_number_of(source, default=None):
    if not isinstance(source, dict):
        return default
    for key in BUILDING_NUMBER_KEYS:
        raw = source.get(key)
        if raw is None or raw == "":
            continue
        number = to_number(raw)
        if number is not None:
            return number
        match = re.search(r"\d+", str(raw))
        if match:
            return int(match.group(0))
    return default


def parse_year_tokens(value):
    """'1985 1999' -> (1985, 1999): built year and effective year"""
    years = re.findall(r"\d{4}", str(value or ""))
    built = int(years[0]) if years else None
    effective = int(years[1]) if len(years) > 1 else None
    return built, effective


def normalize_address_string(raw):
    if not raw:
        return ""
    text = re.sub(r"\r?\n", ", ", str(raw))
    text = re.sub(r"\s+", " ", text)
    text = re.sub(r",\s*,", ", ", text)
    return re.sub(r",\s*$", "", text).strip()


def split_street_line(line):
    match = STREET_LINE_RE.match(line)
    if match:
        number, pre, name, suffix, post = match.groups()
        name = clean_text(re.sub(r"\b(N|S|E|W|NE|NW|SE|SW)\b", "", name, flags=re.I))
        return number, (pre or "").upper() or None, name or None, suffix.upper(), (post or "").upper() or None

    tokens = line.split()
    if len(tokens) < 2:
        return None, None, (tokens[0] if tokens else None), None, None
    number = tokens[0]
    post = None
    if tokens[-1].upper() in DIRECTIONALS:
        post = tokens[-1].upper()
        suffix = tokens[-2].upper()
        name = " ".join(tokens[1:-2])
    else:
        suffix = tokens[-1].upper()
        name = " ".join(tokens[1:-1])
    pre = None
    first = name.split(" ")[0].upper() if name else ""
    if first in DIRECTIONALS:
        pre = first
        name = name[len(first):].strip()
    return number, pre, name or None, suffix, post


def parse_address_components(full_address, plus4_source=None):
    """'123 N MAIN ST, SANFORD FL 32771-1234' -> street/city/state/zip parts"""
    normalized = normalize_address_string(full_address)
    if not normalized:
        return None

    parts = [p.strip() for p in normalized.split(",") if p.strip()]
    city = parts[1] if len(parts) >= 2 else ""
    state_zip = " ".join(parts[2:]) if len(parts) >= 3 else ""
    if not state_zip and city:
        match = re.match(r"^(.*)\s+([A-Z]{2})\s+(\d{5}(?:-\d{4})?)$", city, re.I)
        if match:
            city = match.group(1)
            state_zip = f"{match.group(2)} {match.group(3)}"

    number, pre, name, suffix, post = split_street_line(parts[0] if parts else "")

    state = postal_code = plus4 = None
    if state_zip:
        tokens = state_zip.split()
        state = tokens[0] if tokens else None
        postal_code = tokens[1] if len(tokens) > 1 else None

    plus4_match = re.search(r"\b(\d{5})-(\d{4})\b", str(plus4_source or normalized))
    if plus4_match:
        plus4 = plus4_match.group(2)
        postal_code = postal_code or plus4_match.group(1)
    elif not postal_code:
        zip_match = re.search(r"\b(\d{5})(?:-(\d{4}))?\b", normalized)
        if zip_match:
            postal_code = zip_match.group(1)
            plus4 = zip_match.group(2)

    if postal_code:
        zip_match = re.match(r"^(\d{5})(?:-(\d{4}))?$", postal_code)
        if zip_match:
            postal_code = zip_match.group(1)
            plus4 = plus4 or zip_match.group(2)

    return {
        "street_number": number or None,
        "street_pre_directional_text": pre,
        "street_name": name,
        "street_suffix_type": USPS_SUFFIXES.get(suffix) if suffix else None,
        "street_post_directional_text": post,
        "city_name": city.upper() or None,
        "state_code": state,
        "postal_code": postal_code,
        "plus_four_postal_code": plus4,
        "normalized": normalized,
    }


def file_format_from_url(url):
    path = urlparse(url or "").path.lower()
    if path.endswith((".jpg", ".jpeg")):
        return "jpeg"
    if path.endswith(".png"):
        return "png"
    if path.endswith(".txt"):
        return "txt"
    return None


def basename_from_url(url):
    segments = urlparse(str(url)).path.split("/")
    return segments[-1] or str(url)


def appraiser_id(data):
    for key in ("apprId", "parcelNumber", "masterId", "parcelNumberFormatted"):
        if data.get(key):
            return str(data[key]).strip()
    return "unknown"
