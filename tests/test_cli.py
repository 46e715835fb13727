import logging

import pytest

from fars.cli import main
from fars.utils.logging import PACKAGE_LOGGER


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def test_years_lists_files(fars_dir, capsys):
    main(["years", "--data-dir", str(fars_dir)])

    assert capsys.readouterr().out.split() == ["2013", "2014", "2015"]


def test_years_empty_dir_fails(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["years", "--data-dir", str(tmp_path)])

    assert exc.value.code == 1
    assert "Error:" in capsys.readouterr().err


def test_summarize_prints_table(fars_dir, capsys):
    main(["summarize", "--years", "2013", "2014", "--data-dir", str(fars_dir)])

    out = capsys.readouterr().out
    assert "2013" in out
    assert "2014" in out
    assert "MONTH" in out


def test_summarize_fill_zero_writes_csv(fars_dir, tmp_path, capsys):
    out_dir = tmp_path / "out"

    main([
        "summarize", "--years", "2013", "2014",
        "--data-dir", str(fars_dir),
        "--output-dir", str(out_dir),
        "--fill-zero",
    ])

    assert (out_dir / "summary_2013-2014.csv").exists()
    assert "Summary saved" in capsys.readouterr().out


def test_summarize_warns_for_missing_year(fars_dir, capsys):
    main(["summarize", "--years", "2013", "1900", "--data-dir", str(fars_dir)])

    assert "invalid year: 1900" in capsys.readouterr().err


def test_summarize_all_missing_exits_1(fars_dir, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["summarize", "--years", "1900", "--data-dir", str(fars_dir)])

    assert exc.value.code == 1


def test_map_writes_html(fars_dir, tmp_path, capsys):
    main([
        "map", "--state", "1", "--year", "2013",
        "--data-dir", str(fars_dir),
        "--output-dir", str(tmp_path),
    ])

    assert (tmp_path / "state_1_2013.html").exists()
    assert "State map saved" in capsys.readouterr().out


def test_map_nothing_to_plot(fars_dir, tmp_path, capsys):
    main([
        "map", "--state", "2", "--year", "2015",
        "--data-dir", str(fars_dir),
        "--output-dir", str(tmp_path),
    ])

    assert "No accidents to plot" in capsys.readouterr().out


def test_map_invalid_state_exits_1(fars_dir, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["map", "--state", "99", "--year", "2013", "--data-dir", str(fars_dir)])

    assert exc.value.code == 1
    assert "invalid STATE number: 99" in capsys.readouterr().err


def test_map_missing_year_exits_1(fars_dir, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["map", "--state", "1", "--year", "1900", "--data-dir", str(fars_dir)])

    assert exc.value.code == 1
    assert "does not exist" in capsys.readouterr().err


def test_log_json_flag(fars_dir, capsys):
    main([
        "--log-json", "--log-level", "INFO",
        "summarize", "--years", "1900", "2013", "--data-dir", str(fars_dir),
    ])

    err = capsys.readouterr().err
    assert '"level": "WARNING"' in err
    assert '"year": 1900' in err


def test_map_corrupt_year_file_exits_1(fars_dir, capsys):
    (fars_dir / "accident_2016.csv.bz2").write_bytes(b"not a bz2 stream")

    with pytest.raises(SystemExit) as exc:
        main(["map", "--state", "1", "--year", "2016", "--data-dir", str(fars_dir)])

    assert exc.value.code == 1
    assert capsys.readouterr().err.startswith("Error:")
