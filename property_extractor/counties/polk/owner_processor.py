import logging
import os

from ...owners import classify_owner_polk, dedupe_owners, owner_key
from ...utils import print_status, write_json
from .page import load_page, more_info_grantees, owner_rows, property_id, sale_grantees

logger = logging.getLogger(__name__)


def classify_all(names, invalids):
    owners = []
    for name in names:
        result = classify_owner_polk(name)
        owners.extend(result["owners"])
        invalids.extend(result["invalids"])
    return owners


def build_owners_by_date(soup):
    """Dated sale grantees oldest first, undated leftovers, then current owners"""
    invalids = []
    current = dedupe_owners(classify_all(owner_rows(soup), invalids))

    by_date = {}
    undated = []
    for iso_date, grantee in sale_grantees(soup):
        owners = classify_all([grantee], invalids)
        if iso_date:
            by_date.setdefault(iso_date, []).extend(owners)
        else:
            undated.extend(owners)

    dated_keys = {owner_key(o) for owners in by_date.values() for o in owners}
    undated.extend(
        o for o in classify_all(more_info_grantees(soup), invalids) if owner_key(o) not in dated_keys
    )

    owners_by_date = {date: dedupe_owners(by_date[date]) for date in sorted(by_date)}
    undated = dedupe_owners(undated)
    if undated:
        owners_by_date["unknown_date_1"] = undated
    owners_by_date["current"] = current
    return owners_by_date, [{"raw": i.get("raw") or "", "reason": i.get("reason") or "invalid"} for i in invalids]


def main(base_dir=".", strict=None):
    soup = load_page(os.path.join(base_dir, "input.html"))
    pid = property_id(soup)
    owners_by_date, invalids = build_owners_by_date(soup)
    if invalids:
        logger.warning(f"{len(invalids)} owner names could not be parsed for property_{pid}")

    out_path = os.path.join(base_dir, "owners", "owner_data.json")
    write_json(out_path, {f"property_{pid}": {"owners_by_date": owners_by_date, "invalid_owners": invalids}})
    print_status(f"Wrote {out_path} ({len(owners_by_date['current'])} current owners)")
    return out_path


if __name__ == "__main__":
    main()
