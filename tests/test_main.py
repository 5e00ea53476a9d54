import calendar

import pytest

import main as entrypoint
from models import ValidationError


def test_parse_args_collects_flags() -> None:
    flags, show_version, show_help, past_only = entrypoint.parse_args(["-p", "-f", "1", "-m", "2"])

    assert flags == {"first_weekday": 1, "month": 2}
    assert (show_version, show_help, past_only) == (False, False, True)


@pytest.mark.parametrize(
    "argv",
    [["--bogus"], ["-f"], ["-f", "9"], ["-f", "monday"], ["-m"], ["-m", "x"]],
)
def test_parse_args_rejects_bad_input(argv) -> None:
    with pytest.raises(ValidationError):
        entrypoint.parse_args(argv)


def test_main_prints_version(capsys) -> None:
    assert entrypoint.main(["-v"]) == 0
    assert capsys.readouterr().out.strip() == entrypoint.__version__


def test_main_reports_bad_flags(capsys) -> None:
    assert entrypoint.main(["-f", "0"]) == 1
    assert "-f" in capsys.readouterr().out


def test_main_prints_a_month(tmp_path, monkeypatch, capsys) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))

    assert entrypoint.main(["-m", "0", "-f", "2"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) >= 6
    assert lines[1].split()[0] == calendar.day_abbr[0][:2]


def test_main_survives_undecodable_config(tmp_path, monkeypatch, capsys) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    path = tmp_path / "config" / "rangecal" / "config.json"
    path.parent.mkdir(parents=True)
    path.write_bytes(b"\xff\xfe\x00")

    assert entrypoint.main(["-m", "0"]) == 0
    assert capsys.readouterr().out.strip()
