# tests/test_cli.py

from datetime import date
from unittest.mock import patch

from calsaka import cli

def test_day_shortcut(capsys):
    assert cli.main(["2011-03-17"]) == 0
    assert capsys.readouterr().out.strip() == "26, Phalguna 1932"

def test_day_with_attributes(capsys):
    assert cli.main(["day", "1947-08-15", "--attr", "weekday"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "24, Sravana 1869"
    assert "weekday_name = Sukravara" in out

def test_gregorian(capsys):
    assert cli.main(["gregorian", "1932", "12", "26"]) == 0
    assert capsys.readouterr().out.strip() == "2011-03-17"

def test_today(capsys):
    with patch("calsaka.api.date") as mock_date:
        mock_date.today.return_value = date(2011, 3, 22)
        assert cli.main(["today"]) == 0
    assert capsys.readouterr().out.strip() == "01, Chaitra 1933"

def test_month(capsys):
    assert cli.main(["month", "1932", "12"]) == 0
    out = capsys.readouterr().out
    assert "\tPhalguna [1932]" in out
    assert " 30  " in out

def test_invalid_input_exits_2(capsys):
    assert cli.main(["gregorian", "1932", "13", "1"]) == 2
    assert "Invalid month number [13]" in capsys.readouterr().err
    assert cli.main(["day", "2011-02-30"]) == 2
    assert cli.main(["day", "2011-03-17", "--attr", "nope"]) == 2

def test_new_years(capsys):
    assert cli.main(["new-years", "--from-year", "1933", "--to-year", "1934"]) == 0
    out = capsys.readouterr().out
    assert "2011-03-22" in out
    assert "2012-03-21" in out

def test_round_trip_diagnostic(capsys):
    with patch("calsaka.cli.configure_logging") as cfg:
        assert cli.main(["-v", "diag", "round-trip", "--N", "300"]) == 0
    cfg.assert_called_once()
    assert "All round-trip tests passed." in capsys.readouterr().out

def test_day_before_four_digit_saka_years(capsys):
    assert cli.main(["day", "0500-06-01"]) == 0
    assert capsys.readouterr().out.strip() == "11, Jyaistha 0422"
