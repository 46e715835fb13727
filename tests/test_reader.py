import logging

import pandas as pd
import pytest

from fars.data.reader import (
    Failed,
    Loaded,
    available_years,
    build_filename,
    load_table,
    load_years,
)
from fars.exceptions import CoercionError

from conftest import ACCIDENTS_2013, write_accidents


# ---------------------------------------------------------------------------
# build_filename
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("year", [1975, 2013, 2014, 2015, 2099])
def test_build_filename_formats_year(year):
    assert build_filename(year) == f"accident_{year}.csv.bz2"


def test_build_filename_coerces_numeric_input():
    assert build_filename("2013") == "accident_2013.csv.bz2"
    assert build_filename(2013.0) == "accident_2013.csv.bz2"


@pytest.mark.parametrize("bad", [None, "yyyy", object()])
def test_build_filename_rejects_non_numeric(bad):
    with pytest.raises(CoercionError, match="year"):
        build_filename(bad)


def test_coercion_error_is_a_type_error():
    with pytest.raises(TypeError):
        build_filename("coursera")


# ---------------------------------------------------------------------------
# load_table
# ---------------------------------------------------------------------------

def test_load_table_missing_file_names_path(tmp_path):
    missing = tmp_path / "accident_1900.csv.bz2"
    with pytest.raises(FileNotFoundError, match="accident_1900.csv.bz2"):
        load_table(missing)


def test_load_table_returns_table_unchanged(fars_dir):
    df = load_table(fars_dir / "accident_2013.csv.bz2")
    pd.testing.assert_frame_equal(df, ACCIDENTS_2013)


def test_load_table_accepts_str_path(fars_dir):
    df = load_table(str(fars_dir / "accident_2014.csv.bz2"))
    assert len(df) == 3


# ---------------------------------------------------------------------------
# load_years
# ---------------------------------------------------------------------------

def test_load_years_tags_and_projects(fars_dir):
    [result] = load_years([2013], data_dir=fars_dir)

    assert isinstance(result, Loaded)
    assert result.ok
    assert result.year == 2013
    assert list(result.table.columns) == ["MONTH", "year"]
    assert (result.table["year"] == 2013).all()
    assert result.table["MONTH"].tolist() == [1, 1, 1, 3, 3]


def test_load_years_missing_year_becomes_failed_slot(fars_dir, caplog):
    caplog.set_level(logging.WARNING, logger="fars")

    results = load_years([2013, 1900], data_dir=fars_dir)

    assert len(results) == 2
    assert isinstance(results[0], Loaded)
    assert isinstance(results[1], Failed)
    assert results[1].year == 1900
    assert results[1].table is None
    assert not results[1].ok
    assert "accident_1900.csv.bz2" in results[1].reason
    assert "invalid year: 1900" in caplog.text


def test_load_years_preserves_order_and_duplicates(fars_dir):
    results = load_years([2014, 2013, 2014], data_dir=fars_dir)

    assert [r.year for r in results] == [2014, 2013, 2014]
    assert all(r.ok for r in results)
    assert results[0].table is not results[2].table


def test_load_years_unreadable_file_is_failed(fars_dir):
    (fars_dir / "accident_2016.csv.bz2").write_bytes(b"not a bz2 stream")

    [result] = load_years([2016], data_dir=fars_dir)

    assert isinstance(result, Failed)


def test_load_years_file_without_month_is_failed(fars_dir):
    write_accidents(fars_dir, 2017, ACCIDENTS_2013.drop(columns=["MONTH"]))

    [result] = load_years([2017], data_dir=fars_dir)

    assert isinstance(result, Failed)
    assert "MONTH" in result.reason


def test_load_years_defaults_to_cwd(fars_dir, monkeypatch):
    monkeypatch.chdir(fars_dir)

    [result] = load_years([2014])

    assert result.ok


def test_load_years_bad_year_propagates(fars_dir):
    with pytest.raises(CoercionError):
        load_years([2013, "yyyy"], data_dir=fars_dir)


# ---------------------------------------------------------------------------
# available_years
# ---------------------------------------------------------------------------

def test_available_years_sorted_and_filtered(fars_dir):
    (fars_dir / "accident_2013.csv").write_text("MONTH\n1\n")
    (fars_dir / "person_2013.csv.bz2").write_bytes(b"")
    (fars_dir / "notes.txt").write_text("hello")

    assert available_years(fars_dir) == [2013, 2014, 2015]


def test_available_years_missing_dir(tmp_path):
    assert available_years(tmp_path / "nope") == []
