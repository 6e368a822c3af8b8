import logging
import os

from ...owners import dedupe_owners, parse_owners_from_text
from ...text_utils import to_iso_from_mdy
from ...utils import print_status, write_json
from .page import load_page, parse_owner_names, parse_sales, property_id

logger = logging.getLogger(__name__)


def build_owners_by_date(soup):
    """Current owners from the owner block, earlier owners from sale grantees"""
    invalids = []

    names = parse_owner_names(soup)
    current = parse_owners_from_text(", ".join(names))
    invalids.extend(current["invalids"])
    owners_by_date = {"current": current["owners"]}

    for sale in parse_sales(soup):
        iso_date = to_iso_from_mdy(sale["date"])
        if not iso_date or not sale.get("grantee"):
            continue
        parsed = parse_owners_from_text(sale["grantee"])
        invalids.extend(parsed["invalids"])
        if parsed["owners"]:
            owners_by_date[iso_date] = dedupe_owners(owners_by_date.get(iso_date, []) + parsed["owners"])

    # Current first, then history newest to oldest
    ordered = {"current": owners_by_date.pop("current")}
    for date in sorted(owners_by_date, reverse=True):
        ordered[date] = owners_by_date[date]
    return ordered, invalids


def main(base_dir=".", strict=None):
    soup = load_page(os.path.join(base_dir, "input.html"))
    prop_id = property_id(soup)
    owners_by_date, invalids = build_owners_by_date(soup)

    if invalids:
        logger.warning(f"{len(invalids)} owner fragments could not be parsed for property_{prop_id}")

    out_path = os.path.join(base_dir, "owners", "owner_data.json")
    write_json(out_path, {
        f"property_{prop_id}": {
            "owners_by_date": owners_by_date,
            "invalid_owners": invalids,
        }
    })
    print_status(f"Wrote {out_path} ({len(owners_by_date['current'])} current owners)")
    return out_path


if __name__ == "__main__":
    main()
