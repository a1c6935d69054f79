import pytest

from falcorules.outputs import AbstractOutput, Message, OutputConfig
from falcorules.rule import Priority


class _Collecting(AbstractOutput):
    def __init__(self, *args):
        super().__init__(*args)
        self.received = []
        self.reopened = 0

    def output(self, msg):
        self.received.append(msg)

    def reopen(self):
        self.reopened += 1


def test_abstract_output_cannot_be_instantiated():
    with pytest.raises(TypeError):
        AbstractOutput(OutputConfig("stdout"), False, "host", False)


def test_name_comes_from_config():
    out = _Collecting(OutputConfig("file", {"filename": "out.txt"}), True, "h", True)
    assert out.name == "file"
    assert out.config.options == {"filename": "out.txt"}
    assert out.buffered is True
    assert out.hostname == "h"
    assert out.json_output is True


def test_output_receives_messages():
    out = _Collecting(OutputConfig("stdout"), False, "host", False)
    msg = Message(ts=5, priority=Priority.ERROR, msg="hello", rule="r", source="syscall")
    out.output(msg)
    assert out.received == [msg]
    assert out.received[0].priority == Priority.ERROR


def test_overridden_reopen_is_called():
    out = _Collecting(OutputConfig("stdout"), False, "host", False)
    out.reopen()
    assert out.reopened == 1


def test_message_collections_independent():
    a = Message()
    b = Message()
    a.fields["k"] = "v"
    a.tags.add("t")
    assert b.fields == {}
    assert b.tags == set()