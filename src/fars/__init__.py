"""
FARS - Fatality Analysis Reporting System toolkit

Reads yearly ``accident_<year>.csv.bz2`` files, summarizes accident
counts by month and year, and maps accident locations for one state.

Structure:
- data/     : Imperative Shell (file naming and reading)
- analysis/ : Functional Core (pure transformations)
- plotting/ : (plotting functions)
- reports/  : orchestration (summaries, maps, file output)
"""

from .data.reader import (
    Failed,
    Loaded,
    available_years,
    build_filename,
    load_table,
    load_years,
)
from .exceptions import (
    CoercionError,
    EmptyInputError,
    FarsError,
    InvalidStateError,
    SchemaError,
)
from .reports.generators import ReportGenerator, map_state, summarize_years

__version__ = "0.1.0"

__all__ = [
    'build_filename',
    'load_table',
    'load_years',
    'available_years',
    'Loaded',
    'Failed',
    'summarize_years',
    'map_state',
    'ReportGenerator',
    'FarsError',
    'CoercionError',
    'SchemaError',
    'InvalidStateError',
    'EmptyInputError',
]
