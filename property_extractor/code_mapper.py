"""Translate county codes (property use, deed instrument, materials) into the
shared vocabulary.

A CodeMapper tries, in order: exact lookup of the normalized code, explicit
candidate keys (shorter digit prefixes), a startswith scan over the table
keys, and an ordered list of regex rules. When all of them miss it either
returns the default or, for counties that treat unknown codes as fatal,
raises UnmappedCodeError.
"""

import logging
import re

logger = logging.getLogger(__name__)

PROPERTY_USE_FIELDS = (
    "ownership_estate_type",
    "build_status",
    "structure_form",
    "property_usage_type",
    "property_type",
)


class UnmappedCodeError(ValueError):
    """A code with no mapping in a county whose policy is strict"""

    def __init__(self, code, path="property.property_type"):
        self.code = code
        self.path = path
        super().__init__(f"Unknown enum value {code}.")


def property_use_record(values):
    """(estate, build status, structure form, usage, type) tuple -> dict"""
    if values is None:
        return dict.fromkeys(PROPERTY_USE_FIELDS)
    return dict(zip(PROPERTY_USE_FIELDS, values))


def compile_rules(rules, flags=re.IGNORECASE):
    compiled = []
    for pattern, result in rules:
        if isinstance(pattern, str):
            pattern = re.compile(pattern, flags)
        compiled.append((pattern, result))
    return compiled


def first_match(rules, text, default=None):
    """Evaluate (pattern_or_predicate, result) pairs; the first hit wins"""
    if not text:
        return default
    for pattern, result in rules:
        if hasattr(pattern, "search"):
            hit = pattern.search(text)
        elif callable(pattern):
            hit = pattern(text)
        else:
            hit = re.search(pattern, text, re.IGNORECASE)
        if hit:
            return result
    return default


def upper_key(value):
    if value is None:
        return None
    key = re.sub(r"\s+", " ", str(value)).strip().upper()
    return key or None


def digits_key(value):
    if value is None:
        return None
    key = re.sub(r"\D", "", str(value))
    return key or None


class CodeMapper:
    def __init__(
        self,
        table,
        normalize=upper_key,
        candidates=None,
        prefix_lengths=(),
        rules=(),
        default=None,
        strict=False,
        name="code",
    ):
        self.normalize = normalize or (lambda v: v)
        self.table = {}
        for key, value in table.items():
            norm = self.normalize(key)
            if norm is not None and norm not in self.table:
                self.table[norm] = value
        self.candidates = candidates
        self.prefix_lengths = tuple(prefix_lengths)
        self.rules = compile_rules(rules)
        self.default = default
        self.strict = strict
        self.name = name

    def find(self, raw):
        """Return the mapped value or None; never raises"""
        if raw is None or str(raw).strip() == "":
            return None
        key = self.normalize(raw)
        if key is not None:
            if key in self.table:
                return self.table[key]
            if self.candidates:
                for candidate in self.candidates(key):
                    if candidate in self.table:
                        return self.table[candidate]
            digits = re.sub(r"\D", "", key)
            for length in self.prefix_lengths:
                if len(digits) < length:
                    continue
                prefix = digits[:length]
                for table_key, value in self.table.items():
                    if table_key.startswith(prefix):
                        return value
        if self.rules:
            return first_match(self.rules, str(raw).upper())
        return None

    def map(self, raw, strict=None):
        strict = self.strict if strict is None else strict
        value = self.find(raw)
        if value is not None:
            return value
        if strict:
            logger.error(f"Unmapped {self.name}: {raw!r}")
            raise UnmappedCodeError(raw)
        if raw:
            logger.warning(f"Unmapped {self.name} {raw!r}, using default")
        return self.default

    def __contains__(self, raw):
        return self.find(raw) is not None
