"""Owner name parsing.

Every county produces the same target shapes:

    {"type": "person", "first_name", "middle_name", "last_name", ...}
    {"type": "company", "name"}

but each appraiser formats its owner roll differently, so each county has
its own named strategy. Alachua hands us one free-text string per parcel
("SMITH JOHN & MARY, ACME HOLDINGS LLC") and needs the full heuristic
parser; the others get one name per line or structured owner objects.

A strategy returns {"owners": [...], "invalids": [...]} and never raises;
fragments it cannot make sense of end up in "invalids" with a reason.
"""

import re

from .text_utils import clean_text, title_case

# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

FIRST_OR_LAST_NAME_RE = re.compile(r"^[A-Z][a-z]*([ \-',.][A-Za-z][a-z]*)*$")
MIDDLE_NAME_RE = re.compile(r"^[A-Z][a-zA-Z\s\-',.]*$")


def is_valid_first_or_last_name(name):
    if not name or not isinstance(name, str):
        return False
    return bool(FIRST_OR_LAST_NAME_RE.match(name.strip()))


def is_valid_middle_name(name):
    if not name or not isinstance(name, str):
        return False
    return bool(MIDDLE_NAME_RE.match(name.strip()))


def make_person(first_name, last_name, middle_name=None, prefix_name=None, suffix_name=None):
    return {
        "type": "person",
        "first_name": first_name,
        "last_name": last_name,
        "middle_name": middle_name or None,
        "prefix_name": prefix_name,
        "suffix_name": suffix_name,
    }


def make_company(name):
    return {"type": "company", "name": name}


def owner_key(owner):
    """Identity key used for deduplication.

    Companies match on the lower-cased, whitespace-collapsed name; people on
    the lower-cased first|middle|last tuple.
    """
    if not owner:
        return None
    if owner.get("type") == "company":
        name = clean_text(owner.get("name")).lower()
        return f"c:{name}" if name else None
    parts = [
        clean_text(owner.get("first_name")).lower(),
        clean_text(owner.get("middle_name")).lower(),
        clean_text(owner.get("last_name")).lower(),
    ]
    if not any(parts):
        return None
    return "p:" + "|".join(parts)


def dedupe_owners(owners):
    """Drop repeated owners, keeping the first one seen"""
    seen = set()
    unique = []
    for owner in owners:
        key = owner_key(owner)
        if not key or key in seen:
            continue
        seen.add(key)
        unique.append(owner)
    return unique


# ---------------------------------------------------------------------------
# Alachua: free-text owner roll
# ---------------------------------------------------------------------------

COMPANY_KEYWORDS = re.compile(
    r"(\b|\s)(inc\.?|l\.l\.c\.|llc|ltd\.?|foundation|alliance|solutions|corp\.?|co\.?"
    r"|services|trust\b|trustee\b|trustees\b|tr\b|associates|partners|partnership"
    r"|investment|investments|lp\b|llp\b|bank\b|n\.a\.|na\b|pllc\b|company"
    r"|enterprises|properties|holdings|estate)(\b|\s)",
    re.IGNORECASE,
)
SUFFIXES_IGNORE = re.compile(r"^(jr|sr|ii|iii|iv|v|vi|vii|viii|ix|x|md|phd|esq|esquire)$", re.IGNORECASE)
MAX_MIDDLE_TOKENS = 2


def is_company_name(text):
    if not text:
        return False
    return bool(COMPANY_KEYWORDS.search(text))


def is_suffix_token(token):
    return bool(SUFFIXES_IGNORE.match(token.rstrip(".")))


def tokenize_name_part(part):
    text = clean_text(part)
    text = re.sub(r"^\*+", "", text)
    text = re.sub(r"[^A-Za-z&'\-\s.]", " ", text)
    return [t for t in re.sub(r"\s+", " ", text).strip().split(" ") if t]


def build_person_from_tokens(tokens, fallback_last_name=None):
    """LAST FIRST [MIDDLE...] -> person, or None when the tokens don't form a name.

    With a fallback surname from an earlier owner in the same group, a short
    upper-case fragment is read as FIRST [MIDDLE] of that family
    ("SMITH JOHN & MARY A" gives Mary A Smith for the second part).
    """
    if not tokens:
        return None

    if len(tokens) == 1:
        if not fallback_last_name:
            return None
        first, middle, last = tokens[0], None, fallback_last_name
    else:
        last = tokens[0]
        first = tokens[1]
        middle = " ".join(tokens[2:]) if len(tokens) > 2 else None
        if fallback_last_name and len(tokens) <= 2 and tokens[0] == tokens[0].upper():
            first = tokens[0]
            middle = tokens[1]
            last = fallback_last_name

    if middle:
        kept = [t for t in middle.split(" ") if not is_suffix_token(t)]
        # more than two middle names is two people run together
        if len(kept) > MAX_MIDDLE_TOKENS:
            return None
        middle = " ".join(kept) or None

    first_name = title_case(first or "")
    last_name = title_case(last or "")
    if not is_valid_first_or_last_name(first_name) or not is_valid_first_or_last_name(last_name):
        return None

    middle_name = title_case(middle) if middle else None
    if middle_name and not is_valid_middle_name(middle_name):
        middle_name = None

    return make_person(first_name, last_name, middle_name)


def split_multiple_persons_with_shared_last(tokens):
    """SMITH JOHN ROBERT MARY -> John Robert Smith, Mary Smith"""
    owners = []
    if not tokens or len(tokens) < 4:
        return owners
    last_token = tokens[0]
    rest = [t for t in tokens[1:] if not is_suffix_token(t)]
    i = 0
    while i < len(rest):
        first = rest[i]
        possible_middle = rest[i + 1] if i + 1 < len(rest) else None
        if possible_middle:
            person = build_person_from_tokens([last_token, first, possible_middle])
            i += 2
        else:
            person = build_person_from_tokens([last_token, first])
            i += 1
        if person:
            owners.append(person)
    return owners


def parse_owners_from_text(raw_text):
    """Parse an Alachua owner roll string into owners and invalid fragments"""
    owners = []
    invalids = []
    if not raw_text:
        return {"owners": owners, "invalids": invalids}

    text = re.sub(r"^\*", "", clean_text(raw_text)).strip()
    segments = [s for s in re.split(r"\s*,\s*", text) if s]
    last_surname = None

    for segment in segments:
        seg = re.sub(r"^\*", "", clean_text(segment)).strip()
        if not seg:
            continue

        if is_company_name(seg):
            owners.append(make_company(title_case(seg)))
            continue

        and_parts = [p for p in re.split(r"\s*(?:&|\band\b)\s*", seg, flags=re.IGNORECASE) if p]
        local_last_surname = None

        for idx, part in enumerate(and_parts):
            tokens = tokenize_name_part(part)
            if not tokens:
                if part.strip():
                    invalids.append({"raw": part, "reason": "ambiguous_or_incomplete_person_name"})
                continue

            if len(and_parts) == 1 and len(tokens) >= 4:
                multi = split_multiple_persons_with_shared_last(tokens)
                if len(multi) >= 2:
                    owners.extend(multi)
                    last_surname = tokens[0].upper()
                    continue

            if idx == 0:
                local_last_surname = tokens[0]

            fallback = (local_last_surname or last_surname) if idx > 0 else None
            person = build_person_from_tokens(tokens, fallback)

            if not person and len(tokens) >= 4:
                first_person = build_person_from_tokens(tokens[:3])
                second_person = build_person_from_tokens(tokens[3:], tokens[0])
                if first_person and second_person:
                    owners.append(first_person)
                    owners.append(second_person)
                    last_surname = tokens[0].upper()
                    continue

            if person:
                owners.append(person)
                last_surname = person["last_name"].upper()
            else:
                invalids.append({"raw": part, "reason": "ambiguous_or_incomplete_person_name"})

    return {"owners": dedupe_owners(owners), "invalids": invalids}


# ---------------------------------------------------------------------------
# Hillsborough: one owner per line, prefixes and professional suffixes
# ---------------------------------------------------------------------------

HILLSBOROUGH_COMPANY_RE = re.compile(
    r"\b(inc\.?|incorporated|llc\.?|l\.l\.c\.?|ltd\.?|limited|corp\.?|corporation|co\.?\b"
    r"|company|companies|trust\b|trustee|trusts|tr\b|foundation|foundations|fdn\.?"
    r"|alliance|solutions|services|svc\.?|svcs\.?|assn\.?|association|associations"
    r"|partners\b|partnership|ptnrs\.?|holdings\b|hldgs\.?|group\b|groups|bank\b|banking"
    r"|church\b|churches|ministries\b|ministry|management\b|mgmt\.?|properties\b|property"
    r"|enterprises?|investments?|advisors?|consultants?|contractors?|developers?|builders?"
    r"|realty|real\s+estate|estates?|ventures?|systems?|technologies|technology"
    r"|networks?|communications?|industries|industry|manufacturing|mfg\.?|capital"
    r"|financial|finance|insurance|medical|healthcare|retail|wholesale|trading|logistics"
    r"|construction|engineering|architects?|marketing|media|publishing|entertainment"
    r"|hospitality|restaurants?|hotels?|resorts?|clubs?|organizations?|nonprofits?"
    r"|charities|charity|schools?|universities|university|colleges?|institutes?"
    r"|academies|academy|centers?|facilities|facility|clinics?|hospitals?|laboratories"
    r"|laboratory|labs?)\b",
    re.IGNORECASE,
)

PREFIX_MAPPING = {
    "mr": "Mr.", "mrs": "Mrs.", "ms": "Ms.", "miss": "Miss", "mx": "Mx.",
    "dr": "Dr.", "prof": "Prof.", "rev": "Rev.", "fr": "Fr.", "sr": "Sr.",
    "br": "Br.", "capt": "Capt.", "col": "Col.", "maj": "Maj.", "lt": "Lt.",
    "sgt": "Sgt.", "hon": "Hon.", "judge": "Judge", "rabbi": "Rabbi",
    "imam": "Imam", "sheikh": "Sheikh", "sir": "Sir", "dame": "Dame",
}

SUFFIX_MAPPING = {
    "jr": "Jr.", "sr": "Sr.", "ii": "II", "iii": "III", "iv": "IV",
    "phd": "PhD", "md": "MD", "esq": "Esq.", "jd": "JD", "llm": "LLM",
    "mba": "MBA", "rn": "RN", "dds": "DDS", "dvm": "DVM", "cfa": "CFA",
    "cpa": "CPA", "pe": "PE", "pmp": "PMP", "emeritus": "Emeritus", "ret": "Ret.",
}

SUFFIX_RE = re.compile(
    r"^(jr\.?|sr\.?|ii|iii|iv|v|vi|phd|md|esq\.?|jd|llm|mba|rn|dds|dvm|cfa|cpa|pe|pmp|emeritus|ret\.?)$",
    re.IGNORECASE,
)


def clean_name(raw):
    s = re.sub(r"\s+", " ", (raw or "").replace("\xa0", " ").replace("\t", " ")).strip()
    return re.sub(r"^[;:,]+|[;:,]+$", "", s).strip()


def split_candidates(raw):
    """Owner header text -> one candidate string per owner line"""
    parts = [clean_name(p) for p in re.split(r"[;\n\r|]+", raw or "")]
    parts = [p for p in parts if p]
    if len(parts) > 1:
        return parts
    return [clean_name(raw)] if raw and clean_name(raw) else []


def is_all_caps(text):
    letters = re.sub(r"[^A-Za-z]", "", text)
    if not letters:
        return False
    caps = len(re.sub(r"[^A-Z]", "", letters))
    return caps / len(letters) > 0.9


def parse_prefixed_person(name):
    s = re.sub(r"\s+", " ", clean_name(name).replace("&", " ")).strip()
    tokens = [t for t in s.split(" ") if t]
    prefix_name = None
    suffix_name = None

    if tokens and tokens[0].lower().rstrip(".") in PREFIX_MAPPING:
        prefix_name = PREFIX_MAPPING[tokens.pop(0).lower().rstrip(".")]

    while tokens and SUFFIX_RE.match(tokens[-1]):
        suffix_name = SUFFIX_MAPPING.get(tokens.pop().lower().rstrip("."))

    if len(tokens) < 2:
        return None

    if "," in s:
        left, _, right = s.partition(",")
        right_tokens = [t for t in right.strip().split(" ") if t]
        right_tokens = [t for t in right_tokens if not SUFFIX_RE.match(t)]
        last = left.strip()
        first = right_tokens[0] if right_tokens else ""
        middle = " ".join(right_tokens[1:])
    elif is_all_caps(s):
        last = tokens[0]
        first = tokens[1]
        middle = " ".join(tokens[2:])
    else:
        first = tokens[0]
        last = tokens[-1]
        middle = " ".join(tokens[1:-1])

    if not first.strip() or not last.strip():
        return None

    return make_person(
        title_case(first.strip()),
        title_case(last.strip()),
        title_case(middle.strip()) if middle.strip() else None,
        prefix_name,
        suffix_name,
    )


def classify_owner_line(raw):
    """Hillsborough owner line -> {"owners", "invalids"}"""
    s = clean_name(raw)
    if not s:
        return {"owners": [], "invalids": [{"raw": raw, "reason": "empty_string"}]}

    if HILLSBOROUGH_COMPANY_RE.search(s):
        return {"owners": [make_company(s)], "invalids": []}

    if "&" in s:
        owners = []
        invalids = []
        for part in [p.strip() for p in s.split("&") if p.strip()]:
            person = parse_prefixed_person(part)
            if person:
                owners.append(person)
            else:
                invalids.append({"raw": part, "reason": "unparseable_person_with_ampersand"})
        if owners:
            return {"owners": owners, "invalids": invalids}
        return {"owners": [], "invalids": [{"raw": s, "reason": "unparseable_ampersand_name"}]}

    person = parse_prefixed_person(s)
    if person:
        return {"owners": [person], "invalids": []}
    return {"owners": [], "invalids": [{"raw": s, "reason": "unclassified_name"}]}


def parse_owner_lines(raw_text):
    owners = []
    invalids = []
    for candidate in split_candidates(raw_text):
        result = classify_owner_line(candidate)
        owners.extend(result["owners"])
        invalids.extend(result["invalids"])
    return {"owners": dedupe_owners(owners), "invalids": invalids}


# ---------------------------------------------------------------------------
# Polk: owner table rows, "LAST, FIRST" or all-caps LAST FIRST
# ---------------------------------------------------------------------------

POLK_COMPANY_KEYWORDS = [
    "inc", "llc", "ltd", "corp", "co", "lp", "pllc", "plc", "pc",
    "foundation", "alliance", "solutions", "services", "trust", "associates",
    "association", "partners", "group", "holdings", "management", "properties",
    "realty", "development", "partnership", "syndicate", "capital", "investments",
    "enterprises", "ventures", "systems", "technologies", "global", "national",
    "international", "estate", "fund", "bank", "credit union", "church", "parish",
    "district", "county", "city", "town", "village", "board", "authority",
    "commission", "department", "agency", "bureau", "office", "school", "hospital",
    "medical center", "clinic", "charity", "non-profit", "club", "society",
    "union", "guild", "coalition", "consortium", "network", "council", "committee",
    "p.a.", "p.c.", "l.l.p.", "l.l.c.", "p.l.l.c.",
    "tr", "trustee", "executor", "administrator", "guardian", "conservator",
    "receiver", "nominee", "attorney", "law firm",
]

POLK_SUFFIXES = {"JR": "Jr.", "SR": "Sr.", "II": "II", "III": "III", "IV": "IV",
                 "ESQ": "Esq.", "MD": "MD", "PHD": "PhD"}
POLK_SUFFIX_RE = re.compile(r"\b(" + "|".join(POLK_SUFFIXES) + r")\b", re.IGNORECASE)


def is_company_polk(raw):
    name = f" {raw.lower()} "
    for kw in POLK_COMPANY_KEYWORDS:
        if f" {kw} " in name or f" {kw}. " in name:
            return True
    return bool(re.search(r"\bdba\b", raw, re.I) or re.search(r"\bet al\b", raw, re.I))


def title_case_keep_delimiters(text):
    """Capitalize each piece between space, hyphen, apostrophe, comma and period"""
    if not text:
        return ""
    pieces = re.split(r"([ \-',.])", text)
    out = []
    for index, piece in enumerate(pieces):
        if index % 2 == 1 or not piece:
            out.append(piece)
        else:
            out.append(piece[0].upper() + piece[1:].lower())
    return "".join(out)


def clean_person_text(text):
    if not text:
        return None
    cleaned = re.sub(r"[^A-Za-z', .\-]", "", text.replace("\xa0", " ")).strip()
    cleaned = re.sub(r"[-',.]+\s*$", "", cleaned)
    cleaned = re.sub(r"\s+", " ", cleaned).strip()
    return cleaned or None


def parse_person_polk(raw):
    s = re.sub(r"\s+", " ", clean_text(raw).replace(".", ""))
    if not s:
        return None, "empty"
    if re.search(r"\d", s):
        return None, "name contains digits"

    suffix_name = None
    match = POLK_SUFFIX_RE.search(s)
    if match:
        suffix_name = POLK_SUFFIXES[match.group(1).upper()]
        s = clean_text(s[: match.start()] + s[match.end():])

    if "," in s:
        left, _, right = s.partition(",")
        rest = [t for t in right.split(" ") if t]
        if not rest:
            return None, "no first name after comma"
        last = title_case_keep_delimiters(clean_text(left))
        first = title_case_keep_delimiters(rest[0])
        middle = " ".join(title_case_keep_delimiters(t) for t in rest[1:]) or None
    else:
        tokens = [t for t in s.split(" ") if t]
        if len(tokens) < 2:
            return None, "not enough tokens"
        if all(t == t.upper() for t in tokens):
            last = title_case_keep_delimiters(tokens[0])
            first = title_case_keep_delimiters(tokens[1])
            middle = " ".join(title_case_keep_delimiters(t) for t in tokens[2:]) or None
        else:
            first = title_case_keep_delimiters(tokens[0])
            last = title_case_keep_delimiters(tokens[-1])
            middle = " ".join(title_case_keep_delimiters(t) for t in tokens[1:-1]) or None

    first = clean_person_text(first)
    last = clean_person_text(last)
    if not first or not last:
        return None, "could not parse first or last name"
    return make_person(first, last, clean_person_text(middle), suffix_name=suffix_name), None


def classify_owner_polk(raw):
    name = clean_text(raw)
    owners = []
    invalids = []
    if not name:
        return {"owners": owners, "invalids": [{"raw": raw, "reason": "empty"}]}
    for part in [clean_text(p) for p in name.split("&")]:
        if not part:
            continue
        if is_company_polk(part):
            owners.append(make_company(part))
            continue
        person, reason = parse_person_polk(part)
        if person:
            owners.append(person)
        else:
            invalids.append({"raw": part, "reason": reason})
    return {"owners": owners, "invalids": invalids}


# ---------------------------------------------------------------------------
# Seminole: structured owner objects plus FIRST MIDDLE LAST strings
# ---------------------------------------------------------------------------

SEMINOLE_COMPANY_RE = re.compile(
    r"inc|l\.?l\.?c|ltd|foundation|alliance|solutions|corp|\bco\b|company|services"
    r"|trust|\btr\b|assn|association|partners|\blp\b|\bllp\b|\bpllc\b|\bpc\b|bank"
    r"|credit union|mortgage|holdings|properties|management|realty|hoa|condo|church"
    r"|ministries|university|school|dept|department",
    re.IGNORECASE,
)


def proper_case_name(value):
    """JOHN -> John; Mc/O' prefixes are left to the source data"""
    text = clean_text(value)
    if not text:
        return None
    return text[0].upper() + text[1:].lower()


def parse_first_last(raw, inferred_last_name=None):
    s = clean_text(raw)
    if not s:
        return None
    if "," in s:
        last, _, rest = s.partition(",")
        tokens = [t for t in rest.strip().split(" ") if t]
        if not tokens:
            return None
        middle = " ".join(tokens[1:]) or None
        if middle:
            middle = clean_text(re.sub(r"\b(jr|sr|ii|iii|iv|v)\.?$", "", middle, flags=re.I)) or None
        return make_person(tokens[0], clean_text(last), middle)
    tokens = [t for t in s.split(" ") if t]
    if len(tokens) == 1:
        if inferred_last_name:
            return make_person(tokens[0], inferred_last_name)
        return None
    return make_person(tokens[0], tokens[-1], " ".join(tokens[1:-1]) or None)


def parse_owner_string_seminole(raw):
    s = clean_text(raw)
    if not s:
        return {"owners": [], "invalids": [{"raw": str(raw), "reason": "empty_or_null"}]}
    if SEMINOLE_COMPANY_RE.search(s):
        return {"owners": [make_company(s)], "invalids": []}
    if "&" in s:
        parts = [clean_text(p) for p in s.split("&")]
        shared_last = None
        for p in parts:
            if "," in p:
                shared_last = clean_text(p.split(",")[0]) or shared_last
            else:
                tokens = [t for t in p.split(" ") if t]
                if len(tokens) >= 2:
                    shared_last = tokens[-1]
        owners = []
        invalids = []
        for p in parts:
            person = parse_first_last(p, shared_last)
            if person:
                owners.append(person)
            else:
                invalids.append({"raw": p, "reason": "unparsable_person_with_ampersand"})
        return {"owners": owners, "invalids": invalids}
    person = parse_first_last(s)
    if person:
        return {"owners": [person], "invalids": []}
    return {"owners": [], "invalids": [{"raw": s, "reason": "unclassified_owner"}]}


def parse_owner_object_seminole(obj):
    first = obj.get("firstName") or obj.get("first")
    last = obj.get("lastName") or obj.get("last")
    middle = obj.get("mi") or obj.get("middleName") or obj.get("middle")
    entity = obj.get("entityName") or obj.get("name")
    suffix = obj.get("nameSuffix") or obj.get("suffix")

    if entity and SEMINOLE_COMPANY_RE.search(entity):
        return {"owners": [make_company(clean_text(entity))], "invalids": []}
    if first and last:
        return {
            "owners": [make_person(clean_text(first), clean_text(last),
                                   clean_text(middle) or None, suffix_name=clean_text(suffix) or None)],
            "invalids": [],
        }
    if entity:
        return parse_owner_string_seminole(entity)
    return {"owners": [], "invalids": [{"raw": str(obj), "reason": "unrecognized_owner_object"}]}


def parse_owner_records_seminole(records):
    """Owner strings or owner objects -> proper-cased owners"""
    owners = []
    invalids = []
    for record in records or []:
        if isinstance(record, dict):
            result = parse_owner_object_seminole(record)
        else:
            result = parse_owner_string_seminole(record)
        owners.extend(result["owners"])
        invalids.extend(result["invalids"])
    for owner in owners:
        if owner["type"] == "person":
            owner["first_name"] = proper_case_name(owner["first_name"])
            owner["last_name"] = proper_case_name(owner["last_name"])
            if owner.get("middle_name"):
                owner["middle_name"] = proper_case_name(owner["middle_name"])
    return {"owners": dedupe_owners(owners), "invalids": invalids}


OWNER_STRATEGIES = {
    "alachua": parse_owners_from_text,
    "hillsborough": parse_owner_lines,
    "polk": classify_owner_polk,
    "seminole": parse_owner_records_seminole,
}


def get_owner_strategy(county):
    return OWNER_STRATEGIES[county.lower()]
