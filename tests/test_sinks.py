import io
from datetime import datetime

import pytest

from logkeeper.levels import Level
from logkeeper.message import LogMessage
from logkeeper.sinks import ConsoleSink, FileSink, Sink


def _msg(text, level=Level.INFO):
    return LogMessage(level, text, datetime(2025, 6, 12, 18, 56, 45), "demo.py", 3)


def test_sink_is_abstract():
    with pytest.raises(TypeError):
        Sink()


def test_console_sink_prints_formatted_line(capsys):
    msg = _msg("hello")
    ConsoleSink().log(msg)
    assert capsys.readouterr().out == msg.format() + "\n"


def test_console_sink_custom_stream():
    buf = io.StringIO()
    msg = _msg("to buffer", Level.WARNING)
    ConsoleSink(buf).log(msg)
    assert buf.getvalue() == msg.format() + "\n"


def test_file_sink_writes_to_numbered_file(tmp_path):
    msg = _msg("first")
    with FileSink("app", directory=tmp_path / "logs") as sink:
        sink.log(msg)
        assert sink.path == tmp_path / "logs" / "app_0.log"
    assert (tmp_path / "logs" / "app_0.log").read_text(encoding="utf-8") == msg.format() + "\n"


def test_file_sink_appends_to_existing_file(tmp_path):
    first, second = _msg("one"), _msg("two")
    with FileSink("app", directory=tmp_path) as sink:
        sink.log(first)
    with FileSink("app", directory=tmp_path) as sink:
        sink.log(second)
    lines = (tmp_path / "app_0.log").read_text(encoding="utf-8").splitlines()
    assert lines == [first.format(), second.format()]


def test_file_sink_rotates_when_too_large(tmp_path):
    first, second, third = _msg("a"), _msg("b"), _msg("c")
    with FileSink("app", directory=tmp_path, max_size=10) as sink:
        sink.log(first)
        sink.log(second)
        sink.log(third)
        assert sink.suffix == 2
    assert (tmp_path / "app_0.log").read_text(encoding="utf-8") == first.format() + "\n"
    assert (tmp_path / "app_1.log").read_text(encoding="utf-8") == second.format() + "\n"
    assert (tmp_path / "app_2.log").read_text(encoding="utf-8") == third.format() + "\n"


def test_file_sink_no_rotation_under_limit(tmp_path):
    with FileSink("app", directory=tmp_path) as sink:
        for i in range(5):
            sink.log(_msg(str(i)))
        assert sink.suffix == 0
    assert len((tmp_path / "app_0.log").read_text(encoding="utf-8").splitlines()) == 5
    assert not (tmp_path / "app_1.log").exists()