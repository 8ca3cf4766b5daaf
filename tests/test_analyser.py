from datetime import datetime

import pytest

from logkeeper.analyser import build_parser, main
from logkeeper.levels import Level
from logkeeper.message import LogMessage
from logkeeper.sinks import FileSink


@pytest.fixture
def log_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    directory = tmp_path / "logs"
    directory.mkdir()
    return directory


def write(directory, records):
    with FileSink("log", directory=directory) as sink:
        for record in records:
            sink.log(record)


def test_parser_defaults():
    parser = build_parser()
    parser.parse(["-r"])
    assert parser.get_option_value("n") == "30"
    assert parser.get_option_value("level") == "INFO"
    assert parser.get_option_value("reverse") == "false"
    assert parser.get_option_value("date") == ""


def test_missing_reverse_is_error(log_dir, capsys):
    assert main([]) == 1
    captured = capsys.readouterr()
    assert "parse error: Missing required option: --reverse" in captured.err
    assert captured.out.startswith("Usage: Analyser [option]")


def test_bad_level_is_error(log_dir, capsys):
    assert main(["-r", "true", "-l", "LOUD"]) == 1
    assert "parse error:" in capsys.readouterr().err


def test_help_exits(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0
    assert "Log analyser tool" in capsys.readouterr().out


def test_no_logs(log_dir, capsys):
    assert main(["-r", "true"]) == 0
    assert capsys.readouterr().out == "NO logs to print.\n"


def test_level_filter(log_dir, capsys):
    write(
        log_dir,
        [
            LogMessage(Level.INFO, "informative", datetime(2025, 1, 1, 9, 0, 0), "a.py", 1),
            LogMessage(Level.ERROR, "broken", datetime(2025, 1, 1, 9, 0, 1), "a.py", 2),
        ],
    )
    assert main(["-r", "true", "-l", "ERROR"]) == 0
    out = capsys.readouterr().out
    assert "broken" in out
    assert "informative" not in out
    assert out.endswith("Total:\nERROR:1\n")


def test_number_and_date(log_dir, capsys):
    write(
        log_dir,
        [
            LogMessage(Level.INFO, "old", datetime(2020, 1, 1, 9, 0, 0), "a.py", 1),
            LogMessage(Level.INFO, "new", datetime(2022, 1, 1, 9, 0, 0), "a.py", 2),
            LogMessage(Level.INFO, "newer", datetime(2022, 2, 1, 9, 0, 0), "a.py", 3),
        ],
    )
    assert main(["-r", "true", "-d", "2021-01-01", "-n", "2"]) == 0
    out = capsys.readouterr().out
    assert "| new " in out
    assert "old" not in out
    assert "newer" not in out


def test_missing_directory(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["-r", "true"]) == 1
    assert capsys.readouterr().err