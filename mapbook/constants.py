"""
Read-only reference values used across the book's examples.
"""

# --- Earth & units ---
EARTH_RADIUS_KM = 6371.0
KM_PER_MILE = 1.609344
MILES_PER_KM = 1 / KM_PER_MILE
EARTH_RADIUS_MILES = EARTH_RADIUS_KM * MILES_PER_KM

# --- Coordinate reference systems ---
EPSG_WGS84 = 4326          # lon/lat degrees (GPS, GeoJSON)
EPSG_WEB_MERCATOR = 3857   # web tiles / contextily basemaps
EPSG_US_ALBERS = 5070      # NAD83 Conus Albers, equal-area for US choropleths

CRS_WGS84 = f"EPSG:{EPSG_WGS84}"
CRS_WEB_MERCATOR = f"EPSG:{EPSG_WEB_MERCATOR}"
CRS_US_ALBERS = f"EPSG:{EPSG_US_ALBERS}"

# --- US states (USPS codes) ---
STATE_CODES = {
    "Alabama": "AL", "Alaska": "AK", "Arizona": "AZ", "Arkansas": "AR",
    "California": "CA", "Colorado": "CO", "Connecticut": "CT", "Delaware": "DE",
    "District of Columbia": "DC", "Florida": "FL", "Georgia": "GA", "Hawaii": "HI",
    "Idaho": "ID", "Illinois": "IL", "Indiana": "IN", "Iowa": "IA",
    "Kansas": "KS", "Kentucky": "KY", "Louisiana": "LA", "Maine": "ME",
    "Maryland": "MD", "Massachusetts": "MA", "Michigan": "MI", "Minnesota": "MN",
    "Mississippi": "MS", "Missouri": "MO", "Montana": "MT", "Nebraska": "NE",
    "Nevada": "NV", "New Hampshire": "NH", "New Jersey": "NJ", "New Mexico": "NM",
    "New York": "NY", "North Carolina": "NC", "North Dakota": "ND", "Ohio": "OH",
    "Oklahoma": "OK", "Oregon": "OR", "Pennsylvania": "PA", "Puerto Rico": "PR",
    "Rhode Island": "RI", "South Carolina": "SC", "South Dakota": "SD", "Tennessee": "TN",
    "Texas": "TX", "Utah": "UT", "Vermont": "VT", "Virginia": "VA",
    "Washington": "WA", "West Virginia": "WV", "Wisconsin": "WI", "Wyoming": "WY",
}

# --- Named palettes (hex) ---
PALETTES = {
    # Colour-blind safe qualitative set (Okabe & Ito)
    "okabe_ito": ["#E69F00", "#56B4E9", "#009E73", "#F0E442",
                  "#0072B2", "#D55E00", "#CC79A7", "#000000"],
    "tableau": ["#4E79A7", "#F28E2B", "#E15759", "#76B7B2", "#59A14F",
                "#EDC948", "#B07AA1", "#FF9DA7", "#9C755F", "#BAB0AC"],
    # Sequential, light to dark
    "heat": ["#FFFFB2", "#FED976", "#FEB24C", "#FD8D3C", "#F03B20", "#BD0026"],
    "ocean": ["#F7FBFF", "#C6DBEF", "#6BAED6", "#2171B5", "#08306B"],
    # Diverging, low / neutral / high
    "red_blue": ["#B2182B", "#EF8A62", "#FDDBC7", "#F7F7F7", "#D1E5F0", "#67A9CF", "#2166AC"],
    "dark_map": ["#0B0B0B", "#00F5FF", "#FFFFFF"],
}
