"""Shared fixtures: small FARS-style accident files written to a temp dir."""

from pathlib import Path

import pandas as pd
import pytest

# 2013: three accidents in January, two in March.
# State 1 has one all-sentinel row; state 6 has one sentinel latitude.
ACCIDENTS_2013 = pd.DataFrame(
    {
        "ST_CASE":  [10001, 10002, 60001, 10003, 60002],
        "MONTH":    [1, 1, 1, 3, 3],
        "STATE":    [1, 1, 6, 1, 6],
        "LONGITUD": [-86.5, -87.0, -118.2, 999.9999, -121.5],
        "LATITUDE": [32.5, 33.0, 34.0, 99.9999, 99.9999],
        "FATALS":   [1, 2, 1, 1, 3],
    }
)

# 2014: one accident in January, two in February, all in state 1.
ACCIDENTS_2014 = pd.DataFrame(
    {
        "ST_CASE":  [10001, 10002, 10003],
        "MONTH":    [1, 2, 2],
        "STATE":    [1, 1, 1],
        "LONGITUD": [-86.1, -85.9, -88.0],
        "LATITUDE": [31.9, 34.1, 30.7],
        "FATALS":   [1, 1, 1],
    }
)

# 2015: a single state whose only accident has no known location.
ACCIDENTS_2015 = pd.DataFrame(
    {
        "ST_CASE":  [20001],
        "MONTH":    [7],
        "STATE":    [2],
        "LONGITUD": [999.9999],
        "LATITUDE": [99.9999],
        "FATALS":   [1],
    }
)


def write_accidents(directory: Path, year: int, df: pd.DataFrame) -> Path:
    path = directory / f"accident_{year}.csv.bz2"
    df.to_csv(path, index=False, compression="bz2")
    return path


@pytest.fixture
def fars_dir(tmp_path: Path) -> Path:
    """Directory holding accident files for 2013, 2014 and 2015."""
    write_accidents(tmp_path, 2013, ACCIDENTS_2013)
    write_accidents(tmp_path, 2014, ACCIDENTS_2014)
    write_accidents(tmp_path, 2015, ACCIDENTS_2015)
    return tmp_path
