"""Text, number and date cleanup shared by the county extractors."""

import re


def clean_text(text):
    if text is None:
        return ""
    return re.sub(r"\s+", " ", str(text).replace("\xa0", " ")).strip()


def title_case(text):
    """Capitalize every whitespace-delimited word, lower-casing the rest"""
    return re.sub(
        r"\w\S*", lambda m: m.group(0)[0].upper() + m.group(0)[1:].lower(), text or ""
    )


def money_to_number(value):
    if value is None:
        return None
    cleaned = re.sub(r"[^0-9.\-]", "", str(value))
    if cleaned in ("", ".", "-"):
        return None
    try:
        return float(cleaned)
    except ValueError:
        return None


def parse_currency(value):
    """Dollar amount as a non-negative number rounded to cents"""
    if value is None:
        return None
    if isinstance(value, (int, float)):
        return round(abs(float(value)), 2)
    cleaned = re.sub(r"[^0-9.]", "", str(value))
    if not cleaned or cleaned == ".":
        return None
    try:
        return round(abs(float(cleaned)), 2)
    except ValueError:
        return None


def parse_int_safe(value):
    if value is None:
        return None
    if isinstance(value, int):
        return value
    digits = re.sub(r"[^0-9]", "", str(value))
    if not digits:
        return None
    return int(digits)


def parse_float_safe(value):
    if value is None:
        return None
    if isinstance(value, (int, float)):
        return float(value)
    cleaned = re.sub(r"[^0-9.]", "", str(value))
    if not cleaned:
        return None
    try:
        return float(cleaned)
    except ValueError:
        return None


def normalize_id(value):
    if value is None:
        return None
    normalized = clean_text(value)
    return normalized or None


def to_iso_from_mdy(value):
    """MM/DD/YYYY -> YYYY-MM-DD"""
    if not value:
        return None
    m = re.match(r"^(\d{1,2})/(\d{1,2})/(\d{4})$", str(value).strip())
    if not m:
        return None
    return f"{m.group(3)}-{m.group(1).zfill(2)}-{m.group(2).zfill(2)}"


def month_year_to_iso(value):
    """MM/YYYY -> YYYY-MM-01, also accepting a full MM/DD/YYYY date"""
    if not value:
        return None
    text = str(value).strip()
    full = to_iso_from_mdy(text)
    if full:
        return full
    m = re.match(r"^(\d{1,2})/(\d{4})$", text)
    if not m:
        return None
    return f"{m.group(2)}-{m.group(1).zfill(2)}-01"
