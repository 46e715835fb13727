"""
FARS Coordinate Handling (Functional Core)

Pure transformations on accident tables for mapping.  Nothing here
mutates its input; every function returns a new DataFrame or value.

Package Location: src/fars/analysis/coordinates.py

Sentinel Rule:
    The source files encode an unknown position as an out-of-range
    number rather than a blank cell.  ``LONGITUD > 900`` and
    ``LATITUDE > 90`` are treated as missing (NaN) and never plotted or
    used for the map extent.
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import pandas as pd

from ..config import LAT_COL, LAT_SENTINEL, LON_COL, LON_SENTINEL, STATE_COL
from .schema import require_columns

# ((lon_min, lon_max), (lat_min, lat_max))
Bounds = Tuple[Tuple[float, float], Tuple[float, float]]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def state_ids(df: pd.DataFrame) -> set[int]:
    """Distinct ``STATE`` values present in *df*."""
    require_columns(df, [STATE_COL])
    return {int(s) for s in df[STATE_COL].dropna().unique()}


def filter_state(df: pd.DataFrame, state_id: int) -> pd.DataFrame:
    """
    Return the rows of *df* whose ``STATE`` equals *state_id*.

    Raises:
        SchemaError: If ``STATE`` is absent.
    """
    require_columns(df, [STATE_COL])
    return df.loc[df[STATE_COL] == state_id].reset_index(drop=True)


def sanitize_coordinates(df: pd.DataFrame) -> pd.DataFrame:
    """
    Replace sentinel coordinates with NaN.

    Each axis is handled independently: a row with a valid latitude but a
    sentinel longitude keeps its latitude.  Applying the function twice
    gives the same result as applying it once.

    Args:
        df: Table with ``LONGITUD`` and ``LATITUDE`` columns.

    Returns:
        New DataFrame with both columns cast to float and sentinels masked.

    Raises:
        SchemaError: If either coordinate column is absent.
    """
    require_columns(df, [LON_COL, LAT_COL])

    lon = pd.to_numeric(df[LON_COL], errors="coerce").astype(float)
    lat = pd.to_numeric(df[LAT_COL], errors="coerce").astype(float)

    return df.assign(**{
        LON_COL: lon.mask(lon > LON_SENTINEL),
        LAT_COL: lat.mask(lat > LAT_SENTINEL),
    })


def plottable_points(df: pd.DataFrame) -> pd.DataFrame:
    """Rows of a sanitized table where both coordinates are present."""
    require_columns(df, [LON_COL, LAT_COL])
    return df.dropna(subset=[LON_COL, LAT_COL]).reset_index(drop=True)


def coordinate_bounds(df: pd.DataFrame) -> Optional[Bounds]:
    """
    Compute the longitude and latitude range of a sanitized table.

    Each axis ignores its own missing values, so the extent may include a
    coordinate from a row whose other coordinate is missing.

    Returns:
        ``((lon_min, lon_max), (lat_min, lat_max))``, or ``None`` when either
        axis has no valid value.
    """
    require_columns(df, [LON_COL, LAT_COL])

    lon = df[LON_COL].dropna()
    lat = df[LAT_COL].dropna()
    if lon.empty or lat.empty:
        return None

    return (
        (float(np.min(lon)), float(np.max(lon))),
        (float(np.min(lat)), float(np.max(lat))),
    )
