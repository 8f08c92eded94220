"""
utils package – small, pure-function helpers.
"""

# Re-export the helpers for a clean import path
from .geo import (  # noqa: F401
    haversine_distance_km,
    haversine_distance_miles,
    km_to_miles,
    miles_to_km,
    dms_to_decimal,
    decimal_to_dms,
    extract_centroid,
    get_state_code,
    get_state_name,
)
from .formatting import (  # noqa: F401
    with_commas,
    percent,
    hard_wrap,
    split_string_into_n_parts,
    format_table_as_text,
)

__all__ = [
    "haversine_distance_km",
    "haversine_distance_miles",
    "km_to_miles",
    "miles_to_km",
    "dms_to_decimal",
    "decimal_to_dms",
    "extract_centroid",
    "get_state_code",
    "get_state_name",
    "with_commas",
    "percent",
    "hard_wrap",
    "split_string_into_n_parts",
    "format_table_as_text",
]
