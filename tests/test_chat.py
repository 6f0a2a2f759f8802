import io

import pytest

from stacklab.chat import MAX_MESSAGES, MessageQueue, main


def test_messages_keep_arrival_order():
    queue = MessageQueue()
    for text in ["hi", "there", "you"]:
        assert queue.send(text) is None
    assert queue.messages() == ["hi", "there", "you"]


def test_overflow_drops_oldest():
    queue = MessageQueue()
    sent = [f"m{n}" for n in range(MAX_MESSAGES)]
    for text in sent:
        queue.send(text)
    assert queue.send("extra") == "m0"
    assert queue.messages() == sent[1:] + ["extra"]
    assert len(queue) == MAX_MESSAGES


def test_delete_removes_oldest():
    queue = MessageQueue()
    queue.send("first")
    queue.send("second")
    assert queue.delete() == "first"
    assert queue.messages() == ["second"]


def test_delete_on_empty_returns_none():
    queue = MessageQueue()
    assert queue.delete() is None
    assert queue.messages() == []


def test_invalid_capacity():
    with pytest.raises(ValueError):
        MessageQueue(capacity=0)


def test_main_sends_and_views(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("send\nhello world\nview\ndelete\ndelete\nexit\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "1: hello world" in out
    assert "[Deleted] hello world" in out
    assert "No message to delete." in out