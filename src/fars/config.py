"""
Configuration constants for the FARS reporting toolkit.

Package Location: src/fars/config.py
"""

import re
from typing import Dict, List, Pattern

# ======================================================
#  DATA FILES
# ======================================================
FILENAME_TEMPLATE: str = "accident_{year}.csv.bz2"

# Matches names produced by FILENAME_TEMPLATE (used for year discovery)
FILENAME_PATTERN: Pattern[str] = re.compile(r"^accident_(\d{4})\.csv\.bz2$")

# ======================================================
#  COLUMNS
# ======================================================
MONTH_COL: str = "MONTH"
STATE_COL: str = "STATE"
LON_COL: str = "LONGITUD"
LAT_COL: str = "LATITUDE"

# Injected by the yearly loader; not present in the raw files
YEAR_COL: str = "year"

TAGGED_COLUMNS: List[str] = [MONTH_COL, YEAR_COL]

# ======================================================
#  COORDINATE SENTINELS
# ======================================================
# Values above these thresholds encode "unknown" in the source data
LON_SENTINEL: float = 900.0
LAT_SENTINEL: float = 90.0

# ======================================================
#  MAP STYLE
# ======================================================
MAP_PAD_DEGREES: float = 0.5
MAP_MARKER: Dict[str, object] = {"size": 3, "color": "black", "opacity": 0.7}
MAP_WIDTH: int = 900
MAP_HEIGHT: int = 700
