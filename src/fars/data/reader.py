"""
FARS Data Reader (Imperative Shell)

This module resolves yearly accident file names, reads the bz2-compressed
CSV files into DataFrames, and loads batches of years for summarization.

Package Location: src/fars/data/reader.py

Batch loading:
   ``load_years`` never raises for a year whose file is missing or
   unreadable.  Each slot of its result is either ``Loaded`` (carrying the
   tagged ``(MONTH, year)`` table) or ``Failed`` (carrying the reason), in
   the same order as the requested years.  Duplicate years are loaded
   again, not cached.
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Union

import pandas as pd

from ..analysis.schema import as_int
from ..analysis.summary import tag_year
from ..config import FILENAME_PATTERN, FILENAME_TEMPLATE

log = logging.getLogger(__name__)

PathLike = Union[str, Path]


# ---------------------------------------------------------------------------
# Batch result types
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class Loaded:
    """A year whose file was read and tagged."""
    year: int
    table: pd.DataFrame

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failed:
    """A year whose file could not be read; ``table`` is always ``None``."""
    year: int
    reason: str

    @property
    def table(self) -> None:
        return None

    @property
    def ok(self) -> bool:
        return False


YearLoad = Union[Loaded, Failed]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def build_filename(year) -> str:
    """
    Return the canonical data file name for *year*.

    Args:
        year: Reporting year; anything ``int()`` accepts.

    Returns:
        ``"accident_<year>.csv.bz2"``.

    Raises:
        CoercionError: If *year* is not numeric-coercible.

    Example:
        >>> build_filename(2013)
        'accident_2013.csv.bz2'
    """
    return FILENAME_TEMPLATE.format(year=as_int(year, "year"))


def load_table(path: PathLike) -> pd.DataFrame:
    """
    Read one accident file into a DataFrame.

    Compression is inferred from the file suffix.  Parser warnings (mixed
    dtypes and the like) are suppressed; parse errors propagate.

    Args:
        path: Path to an ``accident_<year>.csv.bz2`` file.

    Returns:
        The file's rows and columns, unmodified.

    Raises:
        FileNotFoundError: If *path* does not exist.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"file '{path}' does not exist")

    with warnings.catch_warnings():
        warnings.simplefilter("ignore", category=pd.errors.DtypeWarning)
        warnings.simplefilter("ignore", category=pd.errors.ParserWarning)
        df = pd.read_csv(path, low_memory=False)

    log.debug("Loaded %s (%d rows)", path, len(df), extra={"path": str(path)})
    return df


def load_years(
    years: Iterable,
    data_dir: Optional[PathLike] = None,
) -> List[YearLoad]:
    """
    Load and tag each requested year, tolerating per-year failures.

    Args:
        years: Years to load, in the order the results should appear.
        data_dir: Directory holding the accident files.  Defaults to the
            current working directory at call time.

    Returns:
        One ``Loaded`` or ``Failed`` per input year, same order and length.

    Raises:
        CoercionError: If a year is not numeric-coercible.
    """
    base = resolve_data_dir(data_dir)
    results: List[YearLoad] = []

    for raw_year in years:
        filename = build_filename(raw_year)
        year = as_int(raw_year, "year")
        try:
            tagged = tag_year(load_table(base / filename), year)
        except (OSError, EOFError, ValueError) as exc:
            log.warning(
                "invalid year: %s",
                year,
                extra={"year": year, "reason": str(exc)},
            )
            results.append(Failed(year=year, reason=str(exc)))
            continue
        results.append(Loaded(year=year, table=tagged))

    return results


def available_years(data_dir: Optional[PathLike] = None) -> List[int]:
    """
    List the years that have an accident file in *data_dir*.

    Args:
        data_dir: Directory to scan.  Defaults to the current working
            directory.

    Returns:
        Sorted list of years.  Empty if the directory has no matching files
        or does not exist.
    """
    base = resolve_data_dir(data_dir)
    if not base.is_dir():
        return []

    years = []
    for entry in base.iterdir():
        match = FILENAME_PATTERN.match(entry.name)
        if match and entry.is_file():
            years.append(int(match.group(1)))
    return sorted(years)


def resolve_data_dir(data_dir: Optional[PathLike] = None) -> Path:
    """Directory holding the accident files; the cwd at call time if unset."""
    return Path(data_dir) if data_dir is not None else Path.cwd()
