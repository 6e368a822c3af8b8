import logging
import os

from ...owners import parse_owner_lines
from ...utils import print_status, write_json
from .page import display_strap, load_page, owner_text

logger = logging.getLogger(__name__)


def main(base_dir=".", strict=None):
    soup = load_page(os.path.join(base_dir, "input.html"))
    pin = display_strap(soup) or "unknown_id"
    parsed = parse_owner_lines(owner_text(soup))

    if parsed["invalids"]:
        logger.warning(f"{len(parsed['invalids'])} owner lines could not be parsed for property_{pin}")

    out_path = os.path.join(base_dir, "owners", "owner_data.json")
    write_json(out_path, {
        f"property_{pin}": {
            "owners_by_date": {"current": parsed["owners"]},
            "invalid_owners": parsed["invalids"],
        }
    })
    print_status(f"Wrote {out_path} ({len(parsed['owners'])} current owners)")
    return out_path


if __name__ == "__main__":
    main()
