# tests/test_diagnostics.py

import csv
import sys
from datetime import datetime, timezone

import pytest

from solarspa import SpaParams, calculate
from solarspa.diagnostics import benchmark, cities, plot_day, validate_csv


_ROW_INPUTS = [2003, 10, 17, 12, 30, 30, 0, 67, -7, -105.1786, 39.742476,
               1830.14, 820, 11, 30, -10, 0.5667]


def _write_dataset(path, rows):
    with path.open("w", newline="") as f:
        w = csv.writer(f)
        w.writerow([f"in{i}" for i in range(validate_csv.N_INPUTS)] + list(validate_csv.OUTPUT_COLUMNS))
        for r in rows:
            w.writerow([repr(float(x)) for x in r])


def _reference_row(inputs):
    res = calculate(SpaParams.from_sequence(inputs))
    return list(inputs) + [getattr(res, c) for c in validate_csv.OUTPUT_COLUMNS]


def test_validate_csv_clean(tmp_path):
    path = tmp_path / "ref.csv"
    _write_dataset(path, [_reference_row(_ROW_INPUTS)])

    n, bad = validate_csv.check_file(path)
    assert n == 1
    assert bad == []
    assert validate_csv.main([str(path)]) == 0


def test_validate_csv_reports_mismatch(tmp_path, capsys):
    row = _reference_row(_ROW_INPUTS)
    zenith_col = validate_csv.N_INPUTS + validate_csv.OUTPUT_COLUMNS.index("zenith")
    row[zenith_col] += 0.01

    path = tmp_path / "ref.csv"
    _write_dataset(path, [_reference_row(_ROW_INPUTS), row])

    n, bad = validate_csv.check_file(path)
    assert n == 2
    assert len(bad) == 1
    assert bad[0].line == 3
    assert bad[0].column == "zenith"

    assert validate_csv.main([str(path)]) == 1
    assert "1 mismatches" in capsys.readouterr().out


def test_validate_csv_missing_file(tmp_path):
    with pytest.raises(SystemExit):
        validate_csv.main([str(tmp_path / "nope.csv")])


def test_benchmark_round_is_deterministic():
    us1, c1 = benchmark.run_round(4)
    us2, c2 = benchmark.run_round(4)
    assert us1 > 0.0 and us2 > 0.0
    assert c1 == c2
    assert 0 <= c1 < 65536


def test_day_track_samples_whole_day():
    base = SpaParams(year=2003, month=10, day=17, timezone=-7.0,
                     longitude=-105.1786, latitude=39.742476, slope=30.0)
    hours, zen, az, inc = plot_day.day_track(base, step_minutes=60)
    assert len(hours) == len(zen) == len(az) == len(inc) == 24
    assert hours[0] == 0.0 and hours[-1] == 23.0
    # noon is daylight, midnight is not
    assert zen[12] < 90.0 < zen[0]


def test_missing_optional_libraries(monkeypatch):
    monkeypatch.setitem(sys.modules, "pytz", None)
    with pytest.raises(RuntimeError, match="pytz"):
        cities._need_pytz()

    monkeypatch.setitem(sys.modules, "matplotlib.pyplot", None)
    with pytest.raises(RuntimeError, match="matplotlib"):
        plot_day._need_matplotlib()


def test_city_line():
    pytest.importorskip("pytz")
    when = datetime(2019, 7, 3, 2, 0, tzinfo=timezone.utc)
    line = cities.city_line("Detroit", "America/Detroit", 42.331429, -83.045753, when)
    assert line.startswith("Detroit")
    assert "22:00" in line
    assert "Sunrise:" in line and "Sunset:" in line


def test_fmt_hhmm():
    assert cities._fmt_hhmm(None) == "  --:--"
    assert cities._fmt_hhmm(-99999.0) == "  --:--"
    assert cities._fmt_hhmm(6.5) == "   6:30"
