import numpy as np
import pandas as pd
import geopandas as gpd
from shapely.geometry import box

from mapbook.config import Config, setup_logging
from mapbook.constants import CRS_WGS84


def main():
    setup_logging()

    print("=" * 80)
    print("  GEOSPATIAL MAPPING COMPANION: HELPER WALK-THROUGH")
    print("=" * 80)

    # --- CHAPTER 1: COORDINATES & DISTANCE ---
    print("\n" + "=" * 80)
    print("CHAPTER 1: COORDINATES & DISTANCE")
    print("=" * 80)

    from mapbook.utils import (
        dms_to_decimal, decimal_to_dms, haversine_distance_km,
        haversine_distance_miles, extract_centroid, get_state_code,
    )

    nyc_lat, nyc_lon = dms_to_decimal("40° 42' 46.0\" N, 74° 0' 21.6\" W")
    la_lat, la_lon = dms_to_decimal("34° 3' 8.0\" N, 118° 14' 37.3\" W")
    print(f"\n→ New York: {nyc_lat:.4f}, {nyc_lon:.4f}  ({decimal_to_dms(nyc_lat)}, {decimal_to_dms(nyc_lon, 'lon')})")
    print(f"→ Los Angeles: {la_lat:.4f}, {la_lon:.4f}")

    km = haversine_distance_km(nyc_lon, nyc_lat, la_lon, la_lat)
    miles = haversine_distance_miles(nyc_lon, nyc_lat, la_lon, la_lat)
    print(f"→ Great-circle distance: {km:,.1f} km ({miles:,.1f} mi)")

    grid = gpd.GeoDataFrame(
        {"name": ["A", "B", "C", "D"],
         "population": [1200, 56000, 3400, 980000]},
        geometry=[box(0, 0, 1, 1), box(1, 0, 2, 1), box(0, 1, 1, 2), box(1, 1, 2, 2)],
        crs=CRS_WGS84,
    )
    print(f"→ Centroid of the demo grid: {extract_centroid(grid)}")
    print(f"→ USPS code for New York: {get_state_code('New York')}")

    # --- CHAPTER 2: TABLES & FORMATTING ---
    print("\n" + "=" * 80)
    print("CHAPTER 2: TABLES & FORMATTING")
    print("=" * 80)

    from mapbook.features import add_totals
    from mapbook.utils import with_commas, percent, hard_wrap, split_string_into_n_parts, format_table_as_text

    trips = pd.DataFrame({
        "borough": ["Manhattan", "Brooklyn", "Queens"],
        "weekday": [125000, 64000, 21000],
        "weekend": [48000, 39000, 9000],
    })
    table = add_totals(trips, ["weekday", "weekend"])
    rows = [[r.borough, with_commas(r.weekday), with_commas(r.weekend), with_commas(r.Total)]
            for r in table.itertuples()]
    print("\n" + format_table_as_text(["Borough", "Weekday", "Weekend", "Total"], rows))

    share = trips["weekend"].sum() / (trips["weekday"].sum() + trips["weekend"].sum())
    print(f"\n→ Weekend share of trips: {percent(share)}")

    title = "Share of weekend bike trips by borough, summer season, all stations"
    print("→ Wrapped title:\n" + hard_wrap(title, 30))
    print(f"→ Title in 3 lines: {split_string_into_n_parts(title, 3)}")

    # --- CHAPTER 3: CHOOSING A CLASSIFICATION ---
    print("\n" + "=" * 80)
    print("CHAPTER 3: CHOOSING A CLASSIFICATION")
    print("=" * 80)

    from mapbook.models import describe_shape, compute_breaks

    rng = np.random.default_rng(42)
    incomes = pd.Series(rng.lognormal(mean=10.5, sigma=0.6, size=500), name="median_income")
    summary = describe_shape(incomes)
    for key, value in summary.items():
        print(f"  • {key}: {value:,.2f}" if isinstance(value, float) else f"  • {key}: {value}")
    print(f"→ Class breaks: {[with_commas(b) for b in compute_breaks(incomes)]}")

    # --- CHAPTER 4: COLOUR & MAPS ---
    print("\n" + "=" * 80)
    print("CHAPTER 4: COLOUR & MAPS")
    print("=" * 80)

    from mapbook.exploration.maps import plot_color_schemes, plot_distribution, plot_choropleth

    plot_color_schemes(filename="color_schemes")
    plot_distribution(incomes, filename="income_distribution")
    plot_choropleth(grid, "population", scheme="Quantiles", k=4, filename="demo_choropleth")

    print("\n" + "=" * 80)
    print("  WALK-THROUGH COMPLETE")
    print(f"  Figures saved to: {Config.OUTPUT_DIR_FIGURES}")
    print("=" * 80)


if __name__ == "__main__":
    main()
