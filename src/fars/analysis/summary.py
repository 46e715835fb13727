"""
FARS Month/Year Counts (Functional Core)

Pure functions only. No I/O, no side effects.
Input/output is DataFrames.

Package Location: src/fars/analysis/summary.py

Reshape Policy:
    ``count_by_month`` pivots grouped counts into a MONTH x year matrix.
    Combinations that never occur in the input are left as ``<NA>`` in a
    nullable ``Int64`` table unless a ``fill_value`` is supplied, in which
    case the matrix keeps a plain integer dtype.

    Rows whose MONTH is missing are counted under a NaN month, sorted
    last, rather than dropped.
"""

from __future__ import annotations

from typing import Iterable, Optional

import pandas as pd

from ..config import MONTH_COL, TAGGED_COLUMNS, YEAR_COL
from ..exceptions import EmptyInputError
from .schema import require_columns


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def tag_year(df: pd.DataFrame, year: int) -> pd.DataFrame:
    """
    Stamp every row with its source year and keep only ``(MONTH, year)``.

    Args:
        df: Raw accident table; must contain ``MONTH``.
        year: Reporting year the table was loaded for.

    Returns:
        New DataFrame with exactly the columns ``['MONTH', 'year']``.

    Raises:
        SchemaError: If ``MONTH`` is absent.
    """
    require_columns(df, [MONTH_COL])
    return df.assign(**{YEAR_COL: int(year)})[TAGGED_COLUMNS].reset_index(drop=True)


def count_by_month(
    tables: Iterable[pd.DataFrame],
    fill_value: Optional[int] = None,
) -> pd.DataFrame:
    """
    Count rows per (year, month) and reshape into a month-by-year matrix.

    Args:
        tables: Tagged tables as produced by :func:`tag_year`.
        fill_value: Value for (month, year) cells with no rows.  ``None``
            (default) leaves them as ``<NA>``.

    Returns:
        DataFrame indexed by ``MONTH`` (ascending) with one column per
        distinct year (ascending); the column axis is named ``year``.

    Raises:
        EmptyInputError: If *tables* is empty.
        SchemaError: If a table lacks ``MONTH`` or ``year``.
    """
    frames = list(tables)
    if not frames:
        raise EmptyInputError("no yearly tables to summarize")

    for frame in frames:
        require_columns(frame, TAGGED_COLUMNS)

    combined = pd.concat(frames, ignore_index=True)

    counts = combined.groupby([YEAR_COL, MONTH_COL], dropna=False).size()

    if fill_value is None:
        matrix = counts.unstack(YEAR_COL).astype("Int64")
    else:
        matrix = counts.unstack(YEAR_COL, fill_value=fill_value).astype("int64")

    return matrix.sort_index().sort_index(axis=1)
