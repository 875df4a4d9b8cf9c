from sfmsession.channel import ControlValue
from sfmsession.dmx import Serializer, serialize_text
from sfmsession.preset import Preset


def test_create_control_value():
    preset = Preset("er")
    value = preset.create_control_value("dimpler", 0.14)
    assert value.name == "dimpler"
    assert value.value == 0.14
    assert preset.control_values == [value]


def test_add_control_value_keeps_order():
    preset = Preset("er")
    first = ControlValue("jawOpen", 0.23)
    preset.add_control_value(first)
    second = preset.create_control_value("tongueUp", 0.8)
    assert preset.control_values == [first, second]


def test_serialize():
    preset = Preset("er", description="URn : rhotacized schwa")
    preset.create_control_value("dimpler", 0.14)
    preset.create_control_value("lipPuckerer", 0.48)
    dm = Serializer().serialize(preset)
    assert dm.type == "DmePreset"
    assert dm.name == "er"
    assert dm["description"] == "URn : rhotacized schwa"
    values = dm["controlValues"]
    assert [v.name for v in values] == ["dimpler", "lipPuckerer"]
    assert [v["value"] for v in values] == [0.14, 0.48]
    assert all(v.type == "DmElement" for v in values)


def test_shared_control_value_is_one_element():
    preset = Preset("p")
    shared = ControlValue("jaw", 0.5)
    preset.add_control_value(shared)
    preset.add_control_value(shared)
    dm = Serializer().serialize(preset)
    first, second = dm["controlValues"]
    assert first is second


def test_text_output_mentions_values():
    preset = Preset("er", description="desc")
    preset.create_control_value("dimpler", 0.5)
    text = serialize_text(Serializer().serialize(preset))
    assert '"DmePreset"' in text
    assert '"name" "string" "dimpler"' in text
    assert '"description" "string" "desc"' in text