import csv
import sys
from pathlib import Path

# Add project root to sys.path
sys.path.append(str(Path(__file__).resolve().parent.parent))

import pytest

from modules.gpsconv import get_converter, wgs84_to_gcj02
from scripts import convert_csv
from scripts.convert_csv import convert_rows


def _write_csv(path, rows, fieldnames=("name", "lng", "lat")):
    with path.open("w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=list(fieldnames))
        writer.writeheader()
        writer.writerows(rows)


def test_convert_rows_rewrites_lng_lat_and_skips_bad_rows():
    rows = [
        {"name": "a", "lng": "116.308016", "lat": "40.035937"},
        {"name": "b", "lng": "", "lat": "40.0"},
    ]
    out = list(convert_rows(rows, get_converter("wgs84", "gcj02"), "lng", "lat"))

    exp_lng, exp_lat = wgs84_to_gcj02(116.308016, 40.035937)
    assert out[0]["name"] == "a"
    assert out[0]["lng"] == f"{exp_lng:.8f}"
    assert out[0]["lat"] == f"{exp_lat:.8f}"
    assert out[1] == {"name": "b", "lng": "", "lat": "40.0"}


def test_convert_rows_keeps_rows_with_non_finite_result():
    rows = [
        {"name": "inf", "lng": "inf", "lat": "0"},
        {"name": "huge", "lng": "1e308", "lat": "0"},
    ]
    out = list(convert_rows(rows, get_converter("gcj02", "bd09"), "lng", "lat"))
    assert out[0] == {"name": "inf", "lng": "inf", "lat": "0"}
    assert out[1] == {"name": "huge", "lng": "1e308", "lat": "0"}


def test_main_converts_csv_file(tmp_path, monkeypatch):
    src = tmp_path / "in.csv"
    dst = tmp_path / "out.csv"
    _write_csv(src, [
        {"name": "beijing", "lng": "116.308016", "lat": "40.035937"},
        {"name": "london", "lng": "-0.1276", "lat": "51.5072"},
    ])
    monkeypatch.setattr(sys, "argv", ["convert_csv.py", str(src), str(dst), "--from", "wgs84", "--to", "gcj02"])

    convert_csv.main()

    with dst.open("r", encoding="utf-8", newline="") as f:
        rows = list(csv.DictReader(f))
    exp_lng, exp_lat = wgs84_to_gcj02(116.308016, 40.035937)
    assert [r["name"] for r in rows] == ["beijing", "london"]
    assert rows[0]["lng"] == f"{exp_lng:.8f}"
    assert rows[0]["lat"] == f"{exp_lat:.8f}"
    assert rows[1]["lng"] == f"{-0.1276:.8f}"
    assert rows[1]["lat"] == f"{51.5072:.8f}"


def test_main_rejects_missing_column(tmp_path, monkeypatch):
    src = tmp_path / "in.csv"
    _write_csv(src, [{"name": "a", "x": "116.3", "y": "40.0"}], fieldnames=("name", "x", "y"))
    monkeypatch.setattr(sys, "argv", ["convert_csv.py", str(src), str(tmp_path / "out.csv"), "--from", "wgs84", "--to", "bd09"])

    with pytest.raises(SystemExit) as exc_info:
        convert_csv.main()
    assert exc_info.value.code == 2
