import logging
import os
import time
import zipfile
import shutil
import json
import sys

from dotenv import load_dotenv

LOCAL_DIR = os.path.dirname(__file__)

logger = logging.getLogger(__name__)


def load_environment():
    """Load .env from the working directory or the home directory"""
    for env_path in [".env", os.path.expanduser("~/.env")]:
        if os.path.exists(env_path):
            load_dotenv(dotenv_path=env_path)
            break
    else:
        load_dotenv()  # fallback to default behavior


def get_base_dir(base_dir=None):
    """Resolve the working directory holding input.html and the sidecar files"""
    if base_dir:
        return os.path.abspath(base_dir)
    return os.path.abspath(os.getenv("EXTRACTOR_BASE_DIR", "."))


def setup_logging(base_dir=None):
    """Send detailed logs to logs/workflow_<epoch>.log, only critical ones to stdout"""
    logs_dir = os.getenv("EXTRACTOR_LOGS_DIR") or os.path.join(get_base_dir(base_dir), "logs")
    os.makedirs(logs_dir, exist_ok=True)

    log_file_path = os.path.join(logs_dir, f"workflow_{int(time.time())}.log")

    file_handler = logging.FileHandler(log_file_path, encoding="utf-8")
    file_handler.setLevel(logging.INFO)
    file_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    file_handler.setFormatter(file_formatter)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.CRITICAL)  # Only show critical messages

    level = getattr(logging, os.getenv("EXTRACTOR_LOG_LEVEL", "INFO").upper(), logging.INFO)
    logging.basicConfig(level=level, handlers=[file_handler, console_handler])
    return log_file_path


def load_json(path):
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_optional_json(path):
    """Read a sidecar file that may be missing; returns None instead of raising"""
    if not os.path.exists(path):
        logger.info(f"Optional file not found: {path}")
        return None
    try:
        return load_json(path)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"⚠️ Could not read {path}: {e}")
        return None


def write_json(path, obj):
    ensure_directory(os.path.dirname(path) or ".")
    with open(path, "w", encoding="utf-8") as f:
        json.dump(obj, f, indent=2, ensure_ascii=False)


def ensure_directory(path):
    """Create directory if it doesn't exist"""
    os.makedirs(path, exist_ok=True)


def print_running(node_name):
    """Print running status"""
    print(f"🔄 RUNNING: {node_name}")
    logger.info(f"RUNNING: {node_name}")


def print_status(message):
    """Print status messages to terminal only"""
    print(f"STATUS: {message}")
    logger.info(f"STATUS: {message}")  # Also log to file


def print_completed(node_name, success=True):
    """Print completion status"""
    status = "✅ COMPLETED" if success else "❌ FAILED"
    print(f"{status}: {node_name}")
    logger.info(f"COMPLETED: {node_name} - Success: {success}")


def cleanup_output_directories(base_dir, directories=("owners", "data")):
    """Clean up the owners and data directories at the start of a run"""
    for dir_name in directories:
        dir_path = os.path.join(base_dir, dir_name)
        if os.path.exists(dir_path):
            shutil.rmtree(dir_path)
            logger.info(f"🗑️ Cleaned up existing {dir_name} directory: {dir_path}")
        else:
            logger.info(
                f"📁 {dir_name.capitalize()} directory does not exist, no cleanup needed"
            )
        os.makedirs(dir_path, exist_ok=True)
        logger.info(f"📁 Created fresh {dir_name} directory: {dir_path}")


def read_county_name(base_dir):
    """Read county_jurisdiction from unnormalized_address.json"""
    address_path = os.path.join(base_dir, "unnormalized_address.json")
    if not os.path.exists(address_path):
        logger.error("❌ unnormalized_address.json not found")
        return None
    try:
        address_data = load_json(address_path)
    except json.JSONDecodeError as e:
        logger.error(f"❌ Error parsing unnormalized_address.json as JSON: {e}")
        return None

    county_name = str(address_data.get("county_jurisdiction") or "").strip()
    if not county_name:
        logger.error(
            "❌ 'county_jurisdiction' field not found in unnormalized_address.json"
        )
        return None
    logger.info(f"📍 Found county_jurisdiction: {county_name}")
    return county_name


def county_name_variations(county_name):
    """Spellings to try when matching a county name to a package directory"""
    variations = [
        county_name.lower(),
        county_name,
        county_name.title(),
        county_name.upper(),
        county_name.replace(" ", ""),
        county_name.lower().replace(" ", ""),
        county_name.lower().replace(" county", "").strip(),
    ]
    seen = []
    for v in variations:
        if v and v not in seen:
            seen.append(v)
    return seen


def import_county_scripts(county_name, script_names):
    """Import the county scripts that exist under counties/<county>/.

    Returns (county_dir_name, {script_name: module}) or (None, None) when no
    county directory matches.
    """
    import importlib

    counties_base = os.path.join(LOCAL_DIR, "counties")

    for variation in county_name_variations(county_name):
        county_path = os.path.join(counties_base, variation)
        if not os.path.isdir(county_path):
            continue
        logger.info(f"✅ Found county directory: {county_path}")

        modules = {}
        for script_name in script_names:
            script_path = os.path.join(county_path, f"{script_name}.py")
            if not os.path.exists(script_path):
                logger.info(f"Script not provided for {variation}: {script_name}.py")
                continue
            modules[script_name] = importlib.import_module(
                f"property_extractor.counties.{variation}.{script_name}"
            )
            logger.info(f"📄 Imported: {script_name}.py")

        logger.info(
            f"✅ Successfully imported {len(modules)} scripts from {variation}/ directory"
        )
        return variation, modules

    logger.error(
        f"❌ Could not find county directory for any variation of '{county_name}'"
    )
    return None, None


def create_output_zip(base_dir, output_name="transformed_output.zip"):
    """Create output ZIP file from the data directory"""
    output_zip_path = os.path.join(base_dir, output_name)
    submit_dir = os.path.join(base_dir, "data")

    if not os.path.exists(submit_dir):
        print("ERROR: No data directory found to zip")
        return False

    with zipfile.ZipFile(output_zip_path, "w", zipfile.ZIP_DEFLATED) as zip_ref:
        for root, dirs, files in os.walk(submit_dir):
            for file in sorted(files):
                file_path = os.path.join(root, file)
                archive_path = os.path.relpath(file_path, submit_dir)
                zip_ref.write(file_path, archive_path)
                logger.info(f"Added to ZIP: {archive_path}")

    with zipfile.ZipFile(output_zip_path, "r") as zip_ref:
        file_count = len(zip_ref.namelist())

    print_status(f"Created output ZIP: {output_name} with {file_count} files")
    logger.info(f"✅ Created output ZIP: {output_zip_path}")
    return True


SIDECAR_FILES = {
    "owners": "owner_data.json",
    "utilities": "utilities_data.json",
    "layouts": "layout_data.json",
    "structures": "structure_data.json",
}


def load_sidecars(base_dir):
    """owners/*.json produced by the county producer scripts; missing ones are None"""
    return {
        key: load_optional_json(os.path.join(base_dir, "owners", filename))
        for key, filename in SIDECAR_FILES.items()
    }


def resolve_strict(strict, county_default):
    """Explicit argument, then EXTRACTOR_STRICT_CODES, then the county's own policy"""
    if strict is not None:
        return bool(strict)
    mode = os.getenv("EXTRACTOR_STRICT_CODES", "county").strip().lower()
    if mode == "strict":
        return True
    if mode == "soft":
        return False
    return county_default


def source_request(unnormalized_address, seed, default_url):
    for source in (unnormalized_address, seed):
        if source and source.get("source_http_request"):
            return dict(source["source_http_request"])
    return {"method": "GET", "url": default_url}
