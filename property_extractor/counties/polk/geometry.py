"""Parcel geometry from input.csv (latitude, longitude, parcel_polygon).

A MultiPolygon row becomes one geometry per member polygon; only the outer
ring of each polygon is written.
"""

import json
import logging

import pandas as pd

logger = logging.getLogger(__name__)


def to_number(value):
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return None if pd.isna(number) else number


def coordinates_depth(value):
    if not isinstance(value, list) or not value:
        return 0
    return 1 + coordinates_depth(value[0])


def parse_polygon(value):
    """JSON text -> GeoJSON Polygon/MultiPolygon dict, or None"""
    if not value:
        return None
    try:
        parsed = json.loads(value)
    except ValueError:
        logger.warning(f"Unparseable parcel polygon: {str(value)[:60]}")
        return None

    if isinstance(parsed, dict):
        if parsed.get("type") in ("Polygon", "MultiPolygon") and isinstance(parsed.get("coordinates"), list):
            return parsed
        return None

    depth = coordinates_depth(parsed)
    if depth == 4:
        return {"type": "MultiPolygon", "coordinates": parsed}
    if depth == 3:
        return {"type": "Polygon", "coordinates": parsed}
    if depth == 2:
        return {"type": "Polygon", "coordinates": [parsed]}
    return None


def split_geometry(record):
    base = {
        "latitude": to_number(record.get("latitude")),
        "longitude": to_number(record.get("longitude")),
        "polygon": parse_polygon(record.get("parcel_polygon")),
    }
    polygon = base["polygon"]
    if not polygon or polygon["type"] != "MultiPolygon":
        return [base]
    return [
        dict(base, polygon={"type": "Polygon", "coordinates": coordinates})
        for coordinates in polygon["coordinates"]
    ]


def read_geometries(csv_path):
    try:
        df = pd.read_csv(csv_path, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError:
        logger.warning(f"{csv_path} is empty")
        return []
    df.columns = [str(column).strip() for column in df.columns]
    geometries = []
    for _, row in df.iterrows():
        geometries.extend(split_geometry(row.to_dict()))
    return geometries


def geometry_record(geometry):
    record = {"latitude": geometry.get("latitude"), "longitude": geometry.get("longitude")}
    polygon = geometry.get("polygon")
    if polygon and polygon.get("coordinates"):
        record["polygon"] = [
            {"longitude": point[0], "latitude": point[1]} for point in polygon["coordinates"][0]
        ]
    return record
