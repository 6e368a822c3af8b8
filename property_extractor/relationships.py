import logging
import os
import re

from .utils import write_json

logger = logging.getLogger(__name__)


def relationship_base_name(file_path):
    """'./sales_history_1.json' -> 'sales_history_1'"""
    if not file_path:
        return None
    normalized = re.sub(r"^\./+", "", str(file_path)).strip()
    if not normalized:
        return None
    if normalized.lower().endswith(".json"):
        return normalized[:-5]
    return normalized


def make_relationship_filename(from_path, to_path):
    from_base = relationship_base_name(from_path)
    to_base = relationship_base_name(to_path)
    if not from_base or not to_base:
        return None
    return f"relationship_{from_base}_has_{to_base}.json"


def ref(file_path):
    """IPLD-style link to an entity file in the output directory"""
    base = relationship_base_name(file_path)
    return {"/": f"./{base}.json"}


class RelationshipWriter:
    """Writes one relationship file per directed (from, to) pair.

    A pair already written in this run is skipped, so callers can link the
    same entities from several code paths without producing duplicates.
    """

    def __init__(self, data_dir):
        self.data_dir = data_dir
        self.seen = set()
        self.written = []

    def write(self, from_path, to_path):
        filename = make_relationship_filename(from_path, to_path)
        if not filename:
            logger.warning(f"Skipping relationship with empty endpoint: {from_path} -> {to_path}")
            return None
        if filename in self.seen:
            return filename
        self.seen.add(filename)
        write_json(
            os.path.join(self.data_dir, filename),
            {"from": ref(from_path), "to": ref(to_path)},
        )
        self.written.append(filename)
        return filename

    def write_many(self, from_path, to_paths):
        return [self.write(from_path, to_path) for to_path in to_paths]
