import io

import pytest

from spkg.spinner_frames import SpinnerName
from spkg.spinners import SimpleSpinner, Spinner, Stream, truncate_text


def test_stream_write_without_timer(capsys):
    Stream.STDOUT.write("⠋", "loading")
    assert capsys.readouterr().out == "\r⠋ loading"


def test_stream_write_with_duration(capsys):
    Stream.STDOUT.write("⠋", "msg", 10.0, 11.5)
    assert capsys.readouterr().out == "\r⠋     1.500 s\tmsg"


def test_stream_stderr_target(capsys):
    Stream.STDERR.write("x", "y")
    captured = capsys.readouterr()
    assert captured.err == "\rx y"
    assert captured.out == ""


def test_stream_stop_variants(capsys):
    Stream.STDOUT.stop("done", "✔")
    assert capsys.readouterr().out == "\x1b[2K\r✔ done\n"
    Stream.STDOUT.stop("done", None)
    assert capsys.readouterr().out == "\x1b[2K\rdone\n"
    Stream.STDOUT.stop(None, "✔")
    assert capsys.readouterr().out == "\n"


def test_spinner_stop_with_message(capsys):
    sp = Spinner(SpinnerName.DOTS, "loading", stream=Stream.STDOUT)
    sp.stop_with_message("done")
    out = capsys.readouterr().out
    assert "\r⠋ loading" in out
    assert out.endswith("\x1b[2K\rdone\n")
    assert not sp.running


def test_spinner_stop_with_symbol(capsys):
    sp = Spinner("Dots", "loading", stream=Stream.STDOUT)
    sp.stop_with_symbol("✔")
    out = capsys.readouterr().out
    assert out.endswith("\r✔ loading\n")


def test_spinner_stop_and_persist(capsys):
    sp = Spinner(SpinnerName.LINE, "work")
    sp.stop_and_persist("✔", "finished")
    assert capsys.readouterr().err.endswith("\x1b[2K\r✔ finished\n")


def test_spinner_timer_shows_seconds(capsys):
    sp = Spinner(SpinnerName.DOTS, "timed", timer=True, stream=Stream.STDOUT)
    sp.stop_with_newline()
    out = capsys.readouterr().out
    assert " s\ttimed" in out
    assert out.endswith("\n")


def test_spinner_stop_twice_raises():
    sp = Spinner(SpinnerName.DOTS, "x")
    sp.stop()
    with pytest.raises(RuntimeError):
        sp.stop()


def test_spinner_unknown_name():
    with pytest.raises(ValueError):
        Spinner("NoSuchSpinner", "x")


def test_spinner_context_manager_stops():
    with Spinner(SpinnerName.DOTS, "ctx") as sp:
        assert sp.running
    assert not sp.running


def test_truncate_text_short_is_unchanged():
    assert truncate_text("hello", 80) == "hello"


def test_truncate_text_long():
    assert truncate_text("abcdefghij", 8) == "abcde \x1b[0m(...)"


def test_simple_spinner_output():
    out = io.StringIO()
    sp = SimpleSpinner(out)
    sp.start("hello")
    sp.stop()
    value = out.getvalue()
    assert value.startswith("\r\x1b[32m\x1b[1m  - \x1b[0m hello")
    assert value.endswith("\r ")
    assert not sp.running


def test_simple_spinner_stop_with_message():
    out = io.StringIO()
    sp = SimpleSpinner(out)
    sp.start("hello")
    sp.stop_with_message("done")
    assert out.getvalue().endswith("\r done\n")


def test_simple_spinner_truncates_to_terminal(monkeypatch):
    monkeypatch.setenv("COLUMNS", "20")
    out = io.StringIO()
    sp = SimpleSpinner(out)
    text = "x" * 40
    sp.start(text)
    sp.stop()
    value = out.getvalue()
    assert "(...)" in value
    assert text not in value