"""
FARS State Accident Map (Functional Core)

Pure function – no file I/O, no side effects.
Input: sanitized accident points for one state + their coordinate bounds.
Output: plotly.graph_objects.Figure.

Package Location: src/fars/plotting/state_map.py

Map extent:
    The base map draws US state outlines (``showsubunits``) on a Mercator
    projection clipped to the accident bounds, padded by
    ``MAP_PAD_DEGREES`` on every side so single-point or collinear extents
    still render.
"""

from __future__ import annotations

from typing import Optional

import pandas as pd
import plotly.graph_objects as go

from ..analysis.coordinates import Bounds, coordinate_bounds
from ..analysis.schema import require_columns
from ..config import (
    LAT_COL,
    LON_COL,
    MAP_HEIGHT,
    MAP_MARKER,
    MAP_PAD_DEGREES,
    MAP_WIDTH,
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def plot_state_map(
    points: pd.DataFrame,
    state_id: int,
    year: int,
    bounds: Optional[Bounds] = None,
) -> go.Figure:
    """
    Build a point map of accident locations for one state and year.

    Args:
        points: Sanitized table with ``LONGITUD`` / ``LATITUDE`` columns.
            Rows with a missing coordinate are skipped.
        state_id: FARS state number (used for the title only).
        year: Reporting year (used for the title only).
        bounds: ``((lon_min, lon_max), (lat_min, lat_max))``.  Computed from
            *points* when omitted.

    Returns:
        ``plotly.graph_objects.Figure`` ready for ``fig.show()`` or
        ``fig.write_html()``.

    Raises:
        ValueError: If *points* has no usable coordinates and no *bounds*
            were given.
    """
    require_columns(points, [LON_COL, LAT_COL])

    if bounds is None:
        bounds = coordinate_bounds(points)
    if bounds is None:
        raise ValueError("no valid coordinates to derive map bounds from")

    (lon_min, lon_max), (lat_min, lat_max) = bounds
    visible = points.dropna(subset=[LON_COL, LAT_COL])

    fig = go.Figure(
        go.Scattergeo(
            lon=visible[LON_COL],
            lat=visible[LAT_COL],
            mode="markers",
            marker=dict(MAP_MARKER),
            name="Accident",
            hovertemplate="Lon: %{lon:.4f}<br>Lat: %{lat:.4f}<extra></extra>",
        )
    )

    fig.update_geos(
        projection_type="mercator",
        showsubunits=True,
        subunitcolor="#444444",
        showcountries=True,
        countrycolor="#444444",
        showland=True,
        landcolor="#f5f7fb",
        lonaxis_range=[lon_min - MAP_PAD_DEGREES, lon_max + MAP_PAD_DEGREES],
        lataxis_range=[lat_min - MAP_PAD_DEGREES, lat_max + MAP_PAD_DEGREES],
    )

    fig.update_layout(
        title=f"FARS Accidents – State {state_id}, {year} ({len(visible):,} located)",
        width=MAP_WIDTH,
        height=MAP_HEIGHT,
        showlegend=False,
        margin=dict(t=60, l=10, r=10, b=10),
    )

    return fig
