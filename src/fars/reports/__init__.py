"""
FARS Reports Package (Imperative Shell)

Orchestrates file loading, aggregation, plot generation, and output.
No analysis logic lives here; this package calls the functional core
(src/fars/analysis/) and plotting (src/fars/plotting/) via the data
reader (src/fars/data/reader.py).

Modules:
    generators: summarize_years(), map_state() and the ReportGenerator
                class for writing CSV / HTML reports.
"""

from .generators import (
    ReportGenerator,
    map_state,
    summarize_years,
)

__all__ = [
    'ReportGenerator',
    'map_state',
    'summarize_years',
]
