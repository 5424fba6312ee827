"""
Tests for event values and the runtime payload codec
"""

import json

import pytest

from wirekit.utils.errors import EventDecodeError
from wirekit.utils.event import Change, Event, Keydown, Undefined, Update


class TestEventValues:
    """Events are immutable values"""

    def test_structural_equality(self):
        assert Change("cb1", "v") == Change("cb1", "v")
        assert Change("cb1", "v") != Change("cb2", "v")
        assert Update() == Update()

    def test_variants_never_equal_each_other(self):
        assert Update() != Undefined()

    def test_change_value_defaults_to_empty(self):
        assert Change("cb1").value == ""

    def test_events_are_frozen(self):
        event = Change("cb1", "v")
        with pytest.raises(AttributeError):
            event.source = "other"

    def test_events_are_hashable(self):
        assert len({Change("a", ""), Change("a", ""), Update()}) == 2

    def test_all_variants_are_events(self):
        for event in (Update(), Change("a"), Keydown("Enter"), Undefined()):
            assert isinstance(event, Event)


class TestFromDict:
    """Decoding runtime payloads"""

    def test_update(self):
        assert Event.from_dict({"type": "update"}) == Update()

    def test_change(self):
        event = Event.from_dict({"type": "change", "source": "cb1", "value": "x"})
        assert event == Change(source="cb1", value="x")

    def test_type_is_case_insensitive(self):
        assert Event.from_dict({"type": "Change", "source": "cb1"}) == Change("cb1", "")

    def test_change_without_source_fails(self):
        with pytest.raises(EventDecodeError):
            Event.from_dict({"type": "change", "value": "x"})

    def test_keydown(self):
        assert Event.from_dict({"type": "keydown", "key": "Enter"}) == Keydown("Enter")

    def test_keydown_without_key_fails(self):
        with pytest.raises(EventDecodeError):
            Event.from_dict({"type": "keydown"})

    def test_unknown_type_is_undefined(self):
        assert Event.from_dict({"type": "scroll", "delta": 3}) == Undefined()

    def test_missing_type_is_undefined(self):
        assert Event.from_dict({}) == Undefined()

    def test_non_mapping_payload_fails(self):
        with pytest.raises(EventDecodeError):
            Event.from_dict(["change", "cb1"])

    def test_null_value_becomes_empty(self):
        event = Event.from_dict({"type": "change", "source": "cb1", "value": None})
        assert event == Change("cb1", "")

    @pytest.mark.parametrize("payload", [
        {"type": "change", "source": None},
        {"type": "change", "source": 7},
        {"type": "change", "source": "cb1", "value": 3},
        {"type": "change", "source": "cb1", "value": ["x"]},
        {"type": "keydown", "key": None},
    ])
    def test_non_string_fields_fail(self, payload):
        with pytest.raises(EventDecodeError):
            Event.from_dict(payload)


class TestChangeJs:
    """JavaScript emitted into markup"""

    def test_shape(self):
        js = Event.change_js("cb1", "")
        assert js == 'emit({"type": "change", "source": "cb1", "value": ""})'

    def test_decodes_back_to_change(self):
        js = Event.change_js('we"ird', "it's")
        payload = json.loads(js[len("emit("):-1])
        assert Event.from_dict(payload) == Change('we"ird', "it's")
