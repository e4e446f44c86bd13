"""Tests for the conversion model and the convert pass."""
import copy

import pytest
from pydantic import ValidationError

from lwcp.domain import DEFAULT_MODEL, ConversionRule, convert, load_model
from lwcp.parsing.message import Message

LINE_ROW = ["IDLE", "IDLE", "Main-Studio", "10", None, 0, None, "", "NONE"]


def _message(**props) -> Message:
    return Message(operation="indi", object="studio", properties=props)


def test_simple_renames():
    result = convert(_message(busy_all=False, mute=False))
    assert result.properties == {"allBusy": False, "muted": False}


def test_unknown_properties_pass_through():
    result = convert(_message(next=0, pnext=3, future_prop="x"))
    assert result.properties == {"next": 0, "producerNext": 3, "future_prop": "x"}


def test_line_list_rows_become_records():
    result = convert(_message(line_list=[LINE_ROW]))
    assert result.properties == {
        "lineList": [
            {
                "state": "IDLE",
                "callstate": "IDLE",
                "name": "Main-Studio",
                "local": "10",
                "remote": None,
                "hybrid": 0,
                "time": None,
                "comment": "",
                "direction": "NONE",
            }
        ]
    }


def test_extra_columns_get_index_labels():
    result = convert(_message(show_list=[[1, "Show 1", "extra", True]]))
    assert result.properties["showList"] == [
        {"showId": 1, "showName": "Show 1", "index2": "extra", "index3": True}
    ]


def test_non_array_rows_left_alone():
    result = convert(_message(studio_list=[[1, "A"], None, "loose"]))
    assert result.properties["studioList"] == [{"studioId": 1, "studioName": "A"}, None, "loose"]


def test_field_rule_on_scalar_value_copies():
    result = convert(_message(line_list="NONE"))
    assert result.properties == {"lineList": "NONE"}


def test_flat_array_without_field_names_copied():
    hybrids = ["Fixed 1", "Fixed 2"]
    result = convert(_message(hybrid_list=hybrids))
    assert result.properties == {"hybridList": hybrids}


def test_same_name_rule_keeps_key():
    result = convert(_message(list=[[7, "Joe", "555"]]))
    assert result.properties == {"list": [{"id": 7, "name": "Joe", "number": "555"}]}


def test_override_takes_precedence():
    model = {"id": {"name": "studioIdentifier"}, "num_lines": ConversionRule(name="availableLines")}
    result = convert(_message(id=1, name="S", num_lines=12), model)
    assert result.properties == {"studioIdentifier": 1, "studioName": "S", "availableLines": 12}


def test_override_replaces_whole_rule():
    # No field names in the override, so rows stay as arrays.
    result = convert(_message(line_list=[LINE_ROW]), {"line_list": {"name": "lines"}})
    assert result.properties == {"lines": [LINE_ROW]}


def test_override_with_custom_fields():
    fields = ["lineState", "lineCallstate", "lineName"]
    result = convert(_message(line_list=[LINE_ROW[:3]]), {"line_list": {"name": "listOfLines", "each": fields}})
    assert result.properties == {
        "listOfLines": [{"lineState": "IDLE", "lineCallstate": "IDLE", "lineName": "Main-Studio"}]
    }


def test_rule_without_name_keeps_raw_key():
    result = convert(_message(rows=[[1, 2]]), {"rows": {"each": ["a"]}})
    assert result.properties == {"rows": [{"a": 1, "index1": 2}]}


def test_empty_field_names_use_index_labels():
    result = convert(_message(rows=[[1, 2]]), {"rows": ConversionRule(field_names=())})
    assert result.properties == {"rows": [{"index0": 1, "index1": 2}]}


def test_renamed_value_wins_collision():
    assert convert(_message(id=1, studioId=5)).properties == {"studioId": 1}
    assert convert(_message(studioId=5, id=1)).properties == {"studioId": 1}


def test_input_not_mutated():
    original = _message(line_list=[list(LINE_ROW)], busy_all=True)
    snapshot = copy.deepcopy(original.properties)
    convert(original)
    assert original.properties == snapshot


def test_envelope_fields_copied():
    msg = Message("indi", "studio", "line", "4", {"mute": True})
    result = convert(msg)
    assert (result.operation, result.object, result.sub_object, result.sub_object_id) == (
        "indi",
        "studio",
        "line",
        "4",
    )
    assert result is not msg


def test_message_without_properties():
    msg = Message("get", "studio")
    result = convert(msg)
    assert result == msg
    assert result.properties is None


def test_convert_twice_is_stable():
    once = convert(_message(id=1, busy_all=False, line_list=[LINE_ROW], next=0))
    twice = convert(once)
    assert twice.properties == once.properties


def test_default_model_is_read_only():
    with pytest.raises(TypeError):
        DEFAULT_MODEL["id"] = ConversionRule(name="other")


def test_default_model_table():
    assert DEFAULT_MODEL["server_caps"].name == "serverCapabilites"
    assert DEFAULT_MODEL["line_list"].field_names == (
        "state", "callstate", "name", "local", "remote", "hybrid", "time", "comment", "direction",
    )
    assert DEFAULT_MODEL["studio_list"].field_names == ("studioId", "studioName")
    assert DEFAULT_MODEL["caller_id"].name == "callerId"
    assert len(DEFAULT_MODEL) == 22


def test_override_does_not_touch_default_model():
    convert(_message(id=1), {"id": {"name": "other"}})
    assert DEFAULT_MODEL["id"].name == "studioId"


def test_load_model_accepts_both_spellings():
    model = load_model({"a": {"name": "x", "each": ["p"]}, "b": {"field_names": ["q"]}})
    assert model["a"] == ConversionRule(name="x", field_names=("p",))
    assert model["b"].name is None
    assert model["b"].field_names == ("q",)


def test_load_model_empty():
    assert load_model(None) == {}
    assert load_model({}) == {}


def test_load_model_rejects_bad_rules():
    with pytest.raises(ValidationError):
        load_model({"a": {"name": 5}})
    with pytest.raises(ValidationError):
        load_model({"a": {"rename": "x"}})


def test_rules_are_frozen():
    rule = ConversionRule(name="x")
    with pytest.raises(ValidationError):
        rule.name = "y"
