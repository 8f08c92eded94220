import re
import logging
from typing import Tuple, Union

import numpy as np
import geopandas as gpd
from shapely import wkt
from shapely.geometry import shape
from shapely.geometry.base import BaseGeometry

from mapbook.constants import EARTH_RADIUS_KM, KM_PER_MILE, MILES_PER_KM, STATE_CODES

logger = logging.getLogger(__name__)

# 40° 42' 46.0" N  /  74°0′21.6″W  /  51.5 N
DMS_PATTERN = re.compile(
    r"""^\s*
    (?P<deg>\d+(?:\.\d+)?)\s*°?\s*
    (?:(?P<min>\d+(?:\.\d+)?)\s*['′]\s*)?
    (?:(?P<sec>\d+(?:\.\d+)?)\s*(?:"|″|'')\s*)?
    (?P<hem>[NSEW])
    \s*$""",
    re.VERBOSE | re.IGNORECASE,
)


def haversine_distance_km(lon1, lat1, lon2, lat2):
    """Great-circle distance in kilometres between two lon/lat points.

    Works on scalars or on numpy arrays / pandas Series of equal length, so a whole
    DataFrame of origin/destination pairs can be measured in one call.
    """
    lon1, lat1, lon2, lat2 = map(np.radians, (lon1, lat1, lon2, lat2))
    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = np.sin(dlat / 2) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin(dlon / 2) ** 2
    # Rounding can push a slightly outside [0, 1] for near-antipodal points
    a = np.clip(a, 0.0, 1.0)
    distance = 2 * EARTH_RADIUS_KM * np.arcsin(np.sqrt(a))

    if np.ndim(distance) == 0:
        return float(distance)
    return distance


def haversine_distance_miles(lon1, lat1, lon2, lat2):
    return km_to_miles(haversine_distance_km(lon1, lat1, lon2, lat2))


def km_to_miles(km):
    return km * MILES_PER_KM


def miles_to_km(miles):
    return miles * KM_PER_MILE


def _parse_dms_component(component: str) -> float:
    match = DMS_PATTERN.match(component)
    if not match:
        raise ValueError(f"Could not parse DMS coordinate: {component.strip()!r}")

    degrees = float(match.group("deg"))
    minutes = float(match.group("min") or 0)
    seconds = float(match.group("sec") or 0)
    if minutes >= 60 or seconds >= 60:
        raise ValueError(f"Minutes and seconds must be below 60: {component.strip()!r}")

    value = degrees + minutes / 60 + seconds / 3600
    if match.group("hem").upper() in ("S", "W"):
        value = -value
    return value


def dms_to_decimal(text: str) -> Union[float, Tuple[float, float]]:
    """
    Converts a Degrees-Minutes-Seconds string into decimal degrees.

    A single component ("40° 42' 46.0\\" N") returns a float. Two comma-separated
    components return a (first, second) tuple in the order given, which for the
    usual "lat, lon" notation is (latitude, longitude).
    """
    if not text or not text.strip():
        raise ValueError("Empty DMS string")

    components = text.split(",")
    if len(components) > 2:
        raise ValueError(f"Expected at most two DMS components, got {len(components)}")

    values = [_parse_dms_component(c) for c in components]
    if len(values) == 1:
        return values[0]
    return values[0], values[1]


def decimal_to_dms(value: float, axis: str = "lat", precision: int = 1) -> str:
    """Renders decimal degrees as e.g. 40° 42' 46.0" N."""
    if axis == "lat":
        hemisphere = "N" if value >= 0 else "S"
    elif axis == "lon":
        hemisphere = "E" if value >= 0 else "W"
    else:
        raise ValueError(f"axis must be 'lat' or 'lon', got {axis!r}")

    total = abs(value)
    degrees = int(total)
    remainder = (total - degrees) * 60
    minutes = int(remainder)
    seconds = round((remainder - minutes) * 60, precision)

    # 59.96" rounds to 60.0"
    if seconds >= 60:
        seconds -= 60
        minutes += 1
    if minutes >= 60:
        minutes -= 60
        degrees += 1

    return f"{degrees}° {minutes}' {seconds:.{precision}f}\" {hemisphere}"


def extract_centroid(geometry) -> Tuple[float, float]:
    """
    Returns the (x, y) centre of a shape; (lon, lat) for geographic data.

    Accepts a shapely geometry, a GeoJSON-like dict, a WKT string or a
    GeoSeries/GeoDataFrame (whose shapes are merged first).
    """
    if isinstance(geometry, (gpd.GeoDataFrame, gpd.GeoSeries)):
        logger.debug(f"Merging {len(geometry)} shapes before taking the centroid")
        geometry = geometry.union_all()
    elif isinstance(geometry, dict):
        geometry = shape(geometry)
    elif isinstance(geometry, str):
        geometry = wkt.loads(geometry)

    if not isinstance(geometry, BaseGeometry):
        raise TypeError(f"Unsupported geometry type: {type(geometry).__name__}")
    if geometry.is_empty:
        raise ValueError("Cannot extract the centroid of an empty geometry")

    centroid = geometry.centroid
    return centroid.x, centroid.y


def get_state_code(name: str) -> str:
    lookup = {k.lower(): v for k, v in STATE_CODES.items()}
    try:
        return lookup[name.strip().lower()]
    except KeyError:
        raise KeyError(f"Unknown state name: {name!r}") from None


def get_state_name(code: str) -> str:
    lookup = {v: k for k, v in STATE_CODES.items()}
    try:
        return lookup[code.strip().upper()]
    except KeyError:
        raise KeyError(f"Unknown state code: {code!r}") from None
