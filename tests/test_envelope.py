"""Tests for envelope matching."""
from lwcp.parsing.envelope import Envelope, match_envelope


def test_operation_and_object_only():
    assert match_envelope("get studio") == Envelope("get", "studio")


def test_sub_object_and_id():
    env = match_envelope("set studio.line#3 cmd=DROP")
    assert env == Envelope("set", "studio", "line", "3", "cmd=DROP")


def test_sub_object_without_id():
    env = match_envelope("indi cc.call")
    assert env.sub_object == "call"
    assert env.sub_object_id is None
    assert env.tail is None


def test_underscored_names():
    env = match_envelope("busy_all studio_x.line_list id=1")
    assert env.operation == "busy_all"
    assert env.object == "studio_x"
    assert env.sub_object == "line_list"


def test_tail_is_everything_after_whitespace():
    env = match_envelope("indi studio   id=1,  name=\"a b\"")
    assert env.tail == 'id=1,  name="a b"'


def test_trailing_whitespace_means_no_tail():
    assert match_envelope("indi studio ").tail is None


def test_newlines_are_dropped():
    env = match_envelope("indi studio id=1,\r\nname=\"x\"\n")
    assert env.tail == 'id=1,name="x"'


def test_non_matching_inputs():
    for raw in ('"hello world"', "Hello World", "indi", "", "12 studio", "indi studio#3", "indi studio.line#"):
        assert match_envelope(raw) is None, raw
