# tests/test_cli.py

from sunlight import cli


def test_julian(capsys):
    assert cli.main(["julian", "2010-01-02"]) == 0
    out = capsys.readouterr().out
    assert "JD = 2455198.50000000" in out


def test_julian_with_hours(capsys):
    assert cli.main(["julian", "2010-01-01", "--hours", "48"]) == 0
    assert "JD = 2455199.50000000" in capsys.readouterr().out


def test_position_meeus_25a(capsys):
    assert cli.main(["position", "--jd", "2448908.5"]) == 0
    out = capsys.readouterr().out
    assert "L0     = 201.80" in out
    assert "Declination        = -7.785" in out


def test_times_with_timezone_and_twilight(capsys):
    argv = [
        "times", "--lat", "35.7833", "--lon", "-78.65", "--date", "2015-07-12",
        "--tz", "America/New_York", "--twilight", "civil", "--angle", "-36",
    ]
    assert cli.main(argv) == 0
    out = capsys.readouterr().out
    assert "Sunrise    : 2015-07-12 06:07" in out
    assert "Sunset     : 2015-07-12 20:32" in out
    assert "Civil twilight (-6 deg):" in out
    # -36 deg is never reached
    assert "After noon : --:--:--" in out


def test_times_polar_night(capsys):
    assert cli.main(["times", "--lat", "78.22", "--lon", "15.65", "--date", "2015-12-21"]) == 1
    assert "does not rise or set" in capsys.readouterr().out
