import io

import pytest

from stacklab.notepad import Notepad, StackFullError, main


def test_add_keeps_order():
    pad = Notepad()
    pad.add("first")
    pad.add("second")
    assert pad.entries() == ["first", "second"]


def test_undo_returns_latest():
    pad = Notepad()
    pad.add("first")
    pad.add("second")
    assert pad.undo() == "second"
    assert pad.entries() == ["first"]


def test_undo_then_redo_round_trip():
    pad = Notepad()
    for text in ["a", "b", "c"]:
        pad.add(text)
    before = pad.entries()
    assert pad.undo() == "c"
    assert pad.undo() == "b"
    assert pad.redo() == "b"
    assert pad.redo() == "c"
    assert pad.entries() == before


def test_undo_on_empty_returns_none():
    assert Notepad().undo() is None


def test_redo_on_empty_returns_none():
    assert Notepad().redo() is None


def test_add_clears_redo():
    pad = Notepad()
    pad.add("a")
    pad.add("b")
    pad.undo()
    pad.add("c")
    assert pad.redo() is None
    assert pad.entries() == ["a", "c"]


def test_full_pad_raises():
    pad = Notepad(capacity=2)
    pad.add("a")
    pad.add("b")
    with pytest.raises(StackFullError):
        pad.add("c")
    assert pad.entries() == ["a", "b"]


def test_entries_is_a_copy():
    pad = Notepad()
    pad.add("a")
    pad.entries().append("x")
    assert pad.entries() == ["a"]


def test_main_session(monkeypatch, capsys):
    script = "add hello\nadd world\nundo\nview\nredo\nbogus\nexit\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(script))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Undo: world" in out
    assert "Redo: world" in out
    assert "==== Current notes ====\nhello\n====" in out
    assert "Unknown command" in out