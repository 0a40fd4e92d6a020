"""Tests for the command line interface."""

import json

from src.presentation.cli.main import main


def test_zones_command(capsys):
    """Classify a single temperature."""
    assert main(["zones", "-10"]) == 0
    out = capsys.readouterr().out
    assert "USDA 8a" in out
    assert "RHS H4" in out


def test_zones_command_json(capsys):
    """Test JSON output of the zones command."""
    assert main(["--json", "zones", "25"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["usda_zone"] == "13b"
    assert data["rhs_zone"] == "H1a"
    assert data["hardiness_category"] == "Tender"


def test_analyze_command(tmp_path, capsys):
    """Analyze a local CSV file."""
    path = tmp_path / "weather.csv"
    lines = ["date,temp_min,temp_max,precipitation"]
    for day in range(1, 32):
        lines.append(f"2023-01-{day:02d},{-12.0 if day == 15 else 1.0},8.0,2.0")
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")

    assert main(["--json", "analyze", str(path), "--latitude", "52.0"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["usda_zone"] == "8a"
    assert data["absolute_min_temp"] == -12.0
    assert data["data_range"]["total_days"] == 31


def test_analyze_text_output(tmp_path, capsys):
    """The text report names the file and the zones."""
    path = tmp_path / "weather.csv"
    path.write_text("date,temp_min,temp_max\n2023-07-01,18.0,31.0\n", encoding="utf-8")

    assert main(["analyze", str(path)]) == 0
    out = capsys.readouterr().out
    assert "CLIMATE REPORT" in out
    assert "USDA zone:        13a" in out
    assert "frost-free" in out


def _two_location_csv(tmp_path):
    path = tmp_path / "weather.csv"
    path.write_text(
        "location,date,temp_min,temp_max\n"
        "Bristol,2023-01-01,-2.0,6.0\n"
        "Bristol,2023-01-02,1.0,7.0\n"
        "Leeds,2023-01-01,-14.0,2.0\n",
        encoding="utf-8",
    )
    return path


def test_analyze_selects_location(tmp_path, capsys):
    """--location restricts a multi-location file to one place."""
    path = _two_location_csv(tmp_path)

    assert main(["--json", "analyze", str(path), "--location", "Bristol"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["absolute_min_temp"] == -2.0
    assert data["usda_zone"] == "9b"
    assert data["data_range"]["total_days"] == 2


def test_analyze_multi_location_file_without_location(tmp_path, capsys):
    """Several locations without --location is an error, not a mixed report."""
    path = _two_location_csv(tmp_path)

    assert main(["--json", "analyze", str(path)]) == 1
    assert capsys.readouterr().out == ""


def test_analyze_missing_file(tmp_path):
    """A missing file exits with status 1."""
    assert main(["analyze", str(tmp_path / "missing.csv")]) == 1
