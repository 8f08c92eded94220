"""
Geospatial Mapping Companion Helpers
------------------------------------
Small, independent helpers used throughout the book's mapping examples.

Module Hierarchy:
- `utils`: Geographic maths (haversine distance, DMS conversion, centroids,
  state codes) and text/number formatting for labels and reports.
- `features`: Margin totals for report tables.
- `models`: Distribution shape heuristics that pick a choropleth binning scheme.
- `exploration`: Colour scheme, distribution and choropleth plotting helpers.
- `constants`: Earth radius, unit conversion, CRS identifiers, palettes.
- `config`: Environment-driven settings and logging setup.
"""
from .utils import (  # noqa: F401
    haversine_distance_km,
    haversine_distance_miles,
    dms_to_decimal,
    decimal_to_dms,
    extract_centroid,
    with_commas,
    percent,
    hard_wrap,
    split_string_into_n_parts,
    format_table_as_text,
)
from .features import add_row_totals, add_col_totals, add_totals  # noqa: F401

__version__ = "0.1.0"
