"""
FARS Data Package (Imperative Shell)

This package handles all file I/O for the FARS toolkit.

Modules:
- reader: file naming, single-file reads, tolerant multi-year loading
"""

from .reader import (
    Failed,
    Loaded,
    YearLoad,
    available_years,
    build_filename,
    load_table,
    load_years,
    resolve_data_dir,
)

__all__ = [
    'Failed',
    'Loaded',
    'YearLoad',
    'available_years',
    'build_filename',
    'load_table',
    'load_years',
    'resolve_data_dir',
]
