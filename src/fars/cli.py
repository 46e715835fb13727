"""
FARS Command-Line Interface

Exposes three subcommands:

    fars years     [--data-dir DIR]                       List years with data files
    fars summarize --years Y [Y ...] [...]                Monthly accident counts
    fars map       --state N --year Y [...]               State accident map (HTML)

The package must be installed (``pip install -e .``) for the ``fars`` entry
point to be available.

Package Location: src/fars/cli.py
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .data.reader import available_years, resolve_data_dir
from .exceptions import FarsError
from .reports.generators import ReportGenerator, summarize_years
from .utils.logging import configure_logging


# ===========================================================================
# Shared helpers
# ===========================================================================

def _die(message: str) -> None:
    """Print an error message and exit with status 1.

    Args:
        message: Human-readable error text.
    """
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def _data_dir(args: argparse.Namespace) -> Path:
    return resolve_data_dir(args.data_dir or None)


# ===========================================================================
# Subcommand handlers
# ===========================================================================

def handle_years(args: argparse.Namespace) -> None:
    """Print every year that has an accident file in the data directory."""
    data_dir = _data_dir(args)
    years = available_years(data_dir)
    if not years:
        _die(f"no accident_<year>.csv.bz2 files found in {data_dir}")
    for year in years:
        print(year)


def handle_summarize(args: argparse.Namespace) -> None:
    """Print monthly counts; also write them to CSV when --output-dir is set.

    Args:
        args: Parsed CLI arguments.  Required field: ``args.years``.
    """
    fill_value = 0 if args.fill_zero else None

    if args.output_dir:
        gen = ReportGenerator(_data_dir(args), args.output_dir)
        out_path = gen.generate_summary(args.years, fill_value=fill_value)
        print(f"Summary saved → {out_path}")
        return

    summary = summarize_years(args.years, data_dir=_data_dir(args), fill_value=fill_value)
    print(summary.to_string())


def handle_map(args: argparse.Namespace) -> None:
    """Write the accident map for one state and year to HTML.

    Args:
        args: Parsed CLI arguments.  Required fields: ``args.state``,
              ``args.year``.
    """
    output_dir = Path(args.output_dir) if args.output_dir else Path.cwd()
    gen = ReportGenerator(_data_dir(args), output_dir)
    out_path = gen.generate_state_map(args.state, args.year)
    if out_path is None:
        print(f"No accidents to plot for state {args.state} in {args.year}.")
        return
    print(f"State map saved → {out_path}")


# ===========================================================================
# Argument parser construction
# ===========================================================================

def _build_parser() -> argparse.ArgumentParser:
    """Construct and return the top-level argument parser.

    Returns:
        Configured ``ArgumentParser`` with ``years``, ``summarize``, and
        ``map`` subcommands attached.
    """
    parser = argparse.ArgumentParser(
        prog="fars",
        description=(
            "FARS – Fatality Analysis Reporting System toolkit\n"
            "Summarize yearly accident files and map accidents by state."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING).",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        default=False,
        help="Emit log records as single-line JSON.",
    )

    # Shared by every subcommand
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--data-dir",
        default=None,
        metavar="DIR",
        help="Directory holding accident_<year>.csv.bz2 files (default: cwd).",
    )

    subs = parser.add_subparsers(dest="command", metavar="<command>")
    subs.required = True

    # ------------------------------------------------------------------
    # years
    # ------------------------------------------------------------------
    p_years = subs.add_parser(
        "years",
        parents=[common],
        help="List the years that have an accident file.",
    )
    p_years.set_defaults(func=handle_years)

    # ------------------------------------------------------------------
    # summarize
    # ------------------------------------------------------------------
    p_sum = subs.add_parser(
        "summarize",
        parents=[common],
        help="Count accidents per month for one or more years.",
        description=(
            "Count accidents per month for each requested year.\n\n"
            "Years whose file is missing or unreadable are skipped with a\n"
            "warning; the command fails only if no year can be loaded."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p_sum.add_argument(
        "--years",
        required=True,
        nargs="+",
        type=int,
        metavar="YYYY",
        help="One or more reporting years, e.g. --years 2013 2014 2015",
    )
    p_sum.add_argument(
        "--output-dir",
        default=None,
        metavar="DIR",
        help="Also write the table to DIR/summary_<years>.csv.",
    )
    p_sum.add_argument(
        "--fill-zero",
        action="store_true",
        default=False,
        help="Show months without accidents as 0 instead of <NA>.",
    )
    p_sum.set_defaults(func=handle_summarize)

    # ------------------------------------------------------------------
    # map
    # ------------------------------------------------------------------
    p_map = subs.add_parser(
        "map",
        parents=[common],
        help="Map accident locations for one state and year.",
        description=(
            "Render accident locations for one state and year to\n"
            "  <output-dir>/state_<N>_<YYYY>.html"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p_map.add_argument(
        "--state",
        required=True,
        type=int,
        metavar="N",
        help="FARS state number (e.g. 1 for Alabama).",
    )
    p_map.add_argument(
        "--year",
        required=True,
        type=int,
        metavar="YYYY",
        help="Reporting year.",
    )
    p_map.add_argument(
        "--output-dir",
        default=None,
        metavar="DIR",
        help="Directory for the HTML map (default: cwd).",
    )
    p_map.set_defaults(func=handle_map)

    return parser


# ===========================================================================
# Entry point
# ===========================================================================

def main(argv: Optional[List[str]] = None) -> None:
    """Parse CLI arguments and dispatch to the appropriate handler.

    This function is registered as the ``fars`` console script entry point
    in ``pyproject.toml``.
    """
    parser = _build_parser()
    args   = parser.parse_args(argv)
    configure_logging(args.log_level, json_format=args.log_json)

    try:
        args.func(args)
    except (FarsError, OSError, EOFError, ValueError) as exc:
        # missing or corrupt year files surface here from map_state
        _die(str(exc))


if __name__ == "__main__":
    main()
