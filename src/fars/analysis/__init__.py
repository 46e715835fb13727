"""
FARS Analysis Package (Functional Core)

This package contains pure transformation functions with no I/O.
All functions accept DataFrames and return new DataFrames or values.

Modules:
- schema:      column validation and integer coercion
- summary:     year tagging and month-by-year counts
- coordinates: state filtering and sentinel-coordinate sanitization
"""

from .schema import (
    as_int,
    require_columns,
)

from .summary import (
    count_by_month,
    tag_year,
)

from .coordinates import (
    coordinate_bounds,
    filter_state,
    plottable_points,
    sanitize_coordinates,
    state_ids,
)

__all__ = [
    # Schema
    'as_int',
    'require_columns',
    # Summary
    'count_by_month',
    'tag_year',
    # Coordinates
    'coordinate_bounds',
    'filter_state',
    'plottable_points',
    'sanitize_coordinates',
    'state_ids',
]
