"""Owners from the Seminole appraiser JSON.

Owner candidates are the ``owners`` and ``ownerDetails`` lists plus any
owner-ish value found while walking the document (ownerName, grantee,
coOwner, ...). Objects that pair an owner-ish key with a date become dated
owner groups.
"""

import logging
import os
import re

from ...owners import dedupe_owners, owner_key, parse_owner_records_seminole
from ...text_utils import to_iso_from_mdy
from ...utils import print_status, write_json
from .page import appraiser_id, load_input

logger = logging.getLogger(__name__)

OWNERISH_KEY_RE = re.compile(
    r"(\bowners?\b|ownername|owner_name|owner\d+|co[-_]?owner|primaryowner|secondaryowner"
    r"|grantee|grantor|deed.*(holder|grantee|grantor)|titleholder|beneficiary)",
    re.IGNORECASE,
)


def is_ownerish_key(key):
    lowered = str(key).lower()
    if not lowered or "ownership" in lowered:
        return False
    return bool(OWNERISH_KEY_RE.search(lowered))


def collect_owner_candidates(node):
    """Strings under owner-ish keys and dicts stored at owner-ish keys"""
    candidates = []
    if isinstance(node, list):
        for item in node:
            candidates.extend(collect_owner_candidates(item))
    elif isinstance(node, dict):
        for key, value in node.items():
            ownerish = is_ownerish_key(key)
            if isinstance(value, str):
                if ownerish:
                    candidates.append(value)
            elif isinstance(value, list):
                candidates.extend(collect_owner_candidates(value))
            elif isinstance(value, dict):
                if ownerish:
                    candidates.append(value)
                candidates.extend(collect_owner_candidates(value))
    return candidates


def normalize_group_date(value):
    text = str(value or "").strip()
    match = re.match(r"^(\d{4})-(\d{2})-(\d{2})", text)
    if match:
        return "-".join(match.groups())
    if re.match(r"^\d{4}$", text):
        return f"{text}-01-01"
    return to_iso_from_mdy(text)


def dated_owner_groups(node, groups=None):
    if groups is None:
        groups = []
    if isinstance(node, list):
        for item in node:
            dated_owner_groups(item, groups)
    elif isinstance(node, dict):
        date_key = next((k for k in node if "date" in str(k).lower()), None)
        if date_key and any(is_ownerish_key(k) for k in node) and str(node[date_key] or "").strip():
            groups.append((str(node[date_key]).strip(), node))
        for value in node.values():
            dated_owner_groups(value, groups)
    return groups


def ownership_attributes(details, current):
    """Ownership percentage/code per current owner, from ownerDetails"""
    attributes = {}
    current_keys = {owner_key(o) for o in current}
    for detail in details:
        if not isinstance(detail, dict):
            continue
        for owner in parse_owner_records_seminole([detail])["owners"]:
            key = owner_key(owner)
            if key not in current_keys:
                continue
            attributes[key] = {
                "ownership_percentage": detail.get("ownershipPercentage"),
                "ownership_code": detail.get("ownershipCodeDescription") or detail.get("ownershipCode"),
            }
    return attributes


def build_owners_by_date(data):
    records = list(data.get("owners") or []) + list(data.get("ownerDetails") or [])
    records.extend(collect_owner_candidates(data))
    current = parse_owner_records_seminole(records)
    invalids = list(current["invalids"])

    dated = []
    unknown = 0
    for raw_date, node in dated_owner_groups(data):
        owners = parse_owner_records_seminole(collect_owner_candidates(node))["owners"]
        if not owners:
            continue
        date_key = normalize_group_date(raw_date)
        if not date_key:
            unknown += 1
            date_key = f"unknown_date_{unknown}"
        dated.append((date_key, owners))

    # real dates ascending, unknown dates after them in document order
    dated.sort(key=lambda group: group[0] if not group[0].startswith("unknown") else "~")
    owners_by_date = {}
    for date_key, owners in dated:
        owners_by_date[date_key] = dedupe_owners(owners_by_date.get(date_key, []) + owners)
    owners_by_date["current"] = current["owners"]
    return owners_by_date, invalids


def main(base_dir=".", strict=None):
    data = load_input(os.path.join(base_dir, "input.html"))
    pid = appraiser_id(data)
    owners_by_date, invalids = build_owners_by_date(data)
    if invalids:
        logger.warning(f"{len(invalids)} owner names could not be parsed for property_{pid}")

    out_path = os.path.join(base_dir, "owners", "owner_data.json")
    write_json(out_path, {
        f"property_{pid}": {
            "owners_by_date": owners_by_date,
            "owner_attributes": ownership_attributes(data.get("ownerDetails") or [], owners_by_date["current"]),
            "invalid_owners": invalids,
        }
    })
    print_status(f"Wrote {out_path} ({len(owners_by_date['current'])} current owners)")
    return out_path


if __name__ == "__main__":
    main()
