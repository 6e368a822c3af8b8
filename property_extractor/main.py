import logging
import os

from .data_group import build_county_data_group
from .utils import (
    cleanup_output_directories,
    create_output_zip,
    get_base_dir,
    import_county_scripts,
    load_environment,
    print_completed,
    print_running,
    print_status,
    read_county_name,
    setup_logging,
)

logger = logging.getLogger(__name__)

# Producers fill owners/*.json; data_extractor reads them and writes data/
SCRIPT_ORDER = [
    "owner_processor",
    "structure_extractor",
    "utility_extractor",
    "layout_extractor",
    "data_extractor",
]


class TransformError(RuntimeError):
    """The county could not be resolved or its data extractor failed"""


def run_scripts(modules, base_dir, strict=None, extract_only=False):
    """Run the county scripts in order; returns {script_name: success}"""
    results = {}
    for script_name in SCRIPT_ORDER:
        if extract_only and script_name != "data_extractor":
            continue
        module = modules.get(script_name)
        if module is None:
            continue

        print_running(script_name)
        try:
            module.main(base_dir=base_dir, strict=strict)
        except Exception as e:
            logger.exception(f"❌ Script {script_name} failed: {e}")
            print_completed(script_name, success=False)
            if script_name == "data_extractor":
                raise TransformError(f"{script_name} failed: {e}") from e
            results[script_name] = False
            # Continue with next script instead of stopping
            continue

        logger.info(f"✅ Script {script_name} completed successfully")
        print_completed(script_name)
        results[script_name] = True
    return results


def run_transform(base_dir=None, county=None, strict=None, extract_only=False, output_zip=None):
    """Transform one property working directory into data/*.json.

    The county comes from ``county`` or unnormalized_address.json. Returns a
    summary dict with the county package, per-script results and the data
    group written at the end.
    """
    load_environment()
    base_dir = get_base_dir(base_dir)
    log_file_path = setup_logging(base_dir)
    logger.info(f"=== Starting transform in {base_dir} (log: {log_file_path}) ===")

    county_name = county or read_county_name(base_dir)
    if not county_name:
        raise TransformError("County could not be determined; pass --county or set county_jurisdiction")

    county_dir, modules = import_county_scripts(county_name, SCRIPT_ORDER)
    if not county_dir:
        raise TransformError(f"No scripts for county '{county_name}'")
    if "data_extractor" not in modules:
        raise TransformError(f"County '{county_dir}' has no data_extractor")
    print_status(f"County: {county_dir} ({len(modules)} scripts)")

    if extract_only:
        # owners/ sidecars from an earlier run are the input here
        cleanup_output_directories(base_dir, directories=("data",))
    else:
        cleanup_output_directories(base_dir)

    results = run_scripts(modules, base_dir, strict=strict, extract_only=extract_only)
    failed = [name for name, ok in results.items() if not ok]
    if failed:
        print_status(f"Finished with failed producers: {', '.join(failed)}")

    data_group = build_county_data_group(os.path.join(base_dir, "data"))
    print_status(f"County data group: {len(data_group['relationships'])} relationship types")

    if output_zip and not create_output_zip(base_dir, output_zip):
        raise TransformError(f"Could not create {output_zip}")

    return {"county": county_dir, "results": results, "data_group": data_group}
