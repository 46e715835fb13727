"""
FARS Report Generator (Imperative Shell)

Thin orchestration layer: resolves years → file names, calls reader.py to
fetch DataFrames, calls the functional core to aggregate and sanitize,
calls plotting to build figures, and optionally writes CSV / HTML.

Package Location: src/fars/reports/generators.py

Usage::

    from pathlib import Path
    from fars.reports.generators import ReportGenerator

    gen = ReportGenerator(
        data_dir=Path("data/fars"),
        output_dir=Path("reports"),
    )
    gen.generate_summary([2013, 2014, 2015])
    gen.generate_state_map(1, 2013)
    # Writes:
    #   reports/summary_2013-2015.csv
    #   reports/state_1_2013.html
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

import pandas as pd
import plotly.graph_objects as go

from ..analysis.coordinates import (
    coordinate_bounds,
    filter_state,
    plottable_points,
    sanitize_coordinates,
    state_ids,
)
from ..analysis.schema import as_int
from ..analysis.summary import count_by_month
from ..data import reader
from ..exceptions import EmptyInputError, InvalidStateError
from ..plotting.state_map import plot_state_map

log = logging.getLogger(__name__)

PathLike = Union[str, Path]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def summarize_years(
    years: Iterable,
    data_dir: Optional[PathLike] = None,
    fill_value: Optional[int] = None,
) -> pd.DataFrame:
    """
    Count accidents per month for each requested year.

    Years that fail to load are skipped (``load_years`` logs a warning for
    each).  A repeated year is loaded again and adds to the counts each
    time it appears.

    Args:
        years: Reporting years.
        data_dir: Directory holding the accident files (default: cwd).
        fill_value: Count used for months with no accidents in a year.
            ``None`` (default) leaves those cells as ``<NA>``.

    Returns:
        DataFrame indexed by ``MONTH`` with one column per loaded year.

    Raises:
        CoercionError: If a year is not numeric-coercible.
        EmptyInputError: If no requested year could be loaded.

    Example::

        >>> summarize_years([2013, 2014], data_dir="data")   # doctest: +SKIP
        year   2013  2014
        MONTH
        1      2230  2168
        2      1952  1893
        ...
    """
    requested = list(years)
    loads = reader.load_years(requested, data_dir=data_dir)
    tables = [item.table for item in loads if item.ok]

    if not tables:
        raise EmptyInputError(
            f"none of the requested years could be loaded: {requested}"
        )

    return count_by_month(tables, fill_value=fill_value)


def map_state(
    state_id,
    year,
    data_dir: Optional[PathLike] = None,
    output_path: Optional[PathLike] = None,
) -> Optional[go.Figure]:
    """
    Map accident locations for one state in one year.

    Args:
        state_id: FARS state number; anything ``int()`` accepts.
        year: Reporting year.
        data_dir: Directory holding the accident files (default: cwd).
        output_path: When given, the figure is also written to this HTML
            file.

    Returns:
        The rendered figure, or ``None`` when the state has no accidents with
        a usable location in that year.

    Raises:
        CoercionError: If *year* or *state_id* is not numeric-coercible.
        FileNotFoundError: If the year's file is missing.
        InvalidStateError: If *state_id* does not occur in the year's data.
    """
    filename = reader.build_filename(year)
    data = reader.load_table(reader.resolve_data_dir(data_dir) / filename)

    state_id = as_int(state_id, "state_id")
    year = as_int(year, "year")

    if state_id not in state_ids(data):
        raise InvalidStateError(state_id)

    subset = filter_state(data, state_id)
    if subset.empty:
        log.info("no accidents to plot", extra={"state": state_id, "year": year})
        return None

    sanitized = sanitize_coordinates(subset)
    bounds = coordinate_bounds(sanitized)
    if bounds is None:
        log.info(
            "no accidents with a known location to plot",
            extra={"state": state_id, "year": year},
        )
        return None

    fig = plot_state_map(plottable_points(sanitized), state_id, year, bounds)

    if output_path is not None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.write_html(str(output_path))
        log.info("State map saved → %s", output_path)

    return fig


class ReportGenerator:
    """
    Generates and saves FARS summary tables and state maps.

    Responsibilities
    ----------------
    - Delegate all file access to ``reader.py``.
    - Call the summary / mapping orchestration functions.
    - Write the results to ``output_dir`` with predictable names.

    Args:
        data_dir: Directory holding the ``accident_<year>.csv.bz2`` files.
        output_dir: Directory for generated reports (created on demand).
    """

    def __init__(self, data_dir: PathLike, output_dir: PathLike) -> None:
        self.data_dir = Path(data_dir)
        self.output_dir = Path(output_dir)

    def generate_summary(
        self,
        years: Iterable,
        fill_value: Optional[int] = None,
    ) -> Path:
        """
        Summarize *years* and write the table to CSV.

        The file is named ``summary_<year>.csv`` for a single loaded year,
        or ``summary_<first>-<last>.csv`` otherwise.

        Returns:
            Path of the written CSV.

        Raises:
            EmptyInputError: If no requested year could be loaded.
        """
        summary = summarize_years(years, data_dir=self.data_dir, fill_value=fill_value)

        loaded = [int(y) for y in summary.columns]
        if len(loaded) == 1:
            name = f"summary_{loaded[0]}.csv"
        else:
            name = f"summary_{loaded[0]}-{loaded[-1]}.csv"

        self.output_dir.mkdir(parents=True, exist_ok=True)
        out_path = self.output_dir / name
        summary.to_csv(out_path)
        log.info("Summary saved → %s", out_path)
        return out_path

    def generate_state_map(self, state_id, year) -> Optional[Path]:
        """
        Render the accident map for one state and year to HTML.

        Returns:
            Path of the written ``state_<id>_<year>.html``, or ``None`` if
            there was nothing to plot.
        """
        out_path = (
            self.output_dir
            / f"state_{as_int(state_id, 'state_id')}_{as_int(year, 'year')}.html"
        )
        fig = map_state(state_id, year, data_dir=self.data_dir, output_path=out_path)
        return out_path if fig is not None else None

