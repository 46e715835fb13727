"""
Schema and scalar validation helpers (Functional Core).

Package Location: src/fars/analysis/schema.py
"""

from __future__ import annotations

from typing import Any, Iterable

import pandas as pd

from ..exceptions import CoercionError, SchemaError


def require_columns(df: pd.DataFrame, required: Iterable[str]) -> None:
    """
    Raise SchemaError if any required columns are absent.

    Args:
        df: DataFrame to check.
        required: Column names that must be present.

    Raises:
        SchemaError: Listing the missing columns.
    """
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise SchemaError(f"table is missing required columns: {missing}")


def as_int(value: Any, name: str = "value") -> int:
    """
    Coerce *value* to a plain ``int``.

    Floats are truncated and numeric strings are parsed, matching ``int()``.

    Raises:
        CoercionError: If the value is not numeric-coercible.
    """
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise CoercionError(
            f"{name} must be coercible to an integer, got {value!r}"
        ) from exc
