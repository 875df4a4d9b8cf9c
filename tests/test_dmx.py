from dataclasses import dataclass, field

import pytest

from sfmsession.dmx import (
    Attribute,
    AttributeType,
    DmElement,
    Element,
    Serializer,
    serialize_text,
)


@dataclass(eq=False)
class Leaf(Element):
    name: str
    value: float = 0.0
    visible: bool = True
    shutter: float = 0.0

    def _create_dm_element(self, serializer):
        return DmElement(self.name, "DmeLeaf")

    def _to_dm_element(self, serializer, dm):
        dm.set_attribute("value", AttributeType.FLOAT, self.value)
        dm.set_attribute("visible", AttributeType.BOOL, self.visible)
        dm.set_attribute("shutter", AttributeType.TIME, self.shutter)


@dataclass(eq=False)
class Holder(Element):
    name: str
    children: list = field(default_factory=list)
    partner: Element | None = None
    exportable: bool = True

    def _create_dm_element(self, serializer):
        return DmElement(self.name, "DmeHolder")

    def _to_dm_element(self, serializer, dm):
        children = dm.create_array("children", AttributeType.ELEMENT_ARRAY)
        for child in self.children:
            children.push(serializer.get_element(child))
        dm.set_attribute("partner", AttributeType.ELEMENT, serializer.get_element(self.partner))

    def _is_exportable(self):
        return self.exportable


def test_serialize_builds_attributes():
    leaf = Leaf("leaf", value=2.5, visible=False)
    dm = Serializer().serialize(leaf)
    assert dm.name == "leaf"
    assert dm.type == "DmeLeaf"
    assert dm["value"] == 2.5
    assert dm["visible"] is False


def test_shared_child_gives_one_element():
    leaf = Leaf("leaf")
    root = Holder("root", children=[leaf, leaf])
    dm = Serializer().serialize(root)
    first, second = dm["children"]
    assert first is second
    assert first["value"] == 0.0


def test_unexportable_and_none_give_none():
    serializer = Serializer()
    assert serializer.get_element(None) is None
    assert serializer.get_element(Holder("hidden", exportable=False)) is None
    dm = serializer.serialize(Holder("root", children=[Holder("hidden", exportable=False)]))
    assert dm["children"] == [None]


def test_cycle_is_resolved():
    a = Holder("a")
    b = Holder("b", partner=a)
    a.partner = b
    dm = Serializer().serialize(a)
    assert dm["partner"]["partner"] is dm


def test_get_element_is_cached():
    serializer = Serializer()
    leaf = Leaf("leaf")
    first = serializer.get_element(leaf)
    second = serializer.get_element(leaf)
    assert first.name == "leaf"
    assert first.type == "DmeLeaf"
    assert second.id == first.id
    other = serializer.get_element(Leaf("leaf"))
    assert other.id != first.id


def test_element_ids_are_unique():
    ids = {DmElement("x", "DmElement").id for _ in range(20)}
    assert len(ids) == 20


def test_push_on_scalar_raises():
    attribute = Attribute(AttributeType.FLOAT, 1.0)
    with pytest.raises(TypeError):
        attribute.push(2.0)


def test_create_array_rejects_scalar_type():
    with pytest.raises(ValueError):
        DmElement("x", "DmElement").create_array("values", AttributeType.FLOAT)


def test_element_attribute_rejects_non_element():
    with pytest.raises(TypeError):
        DmElement("x", "DmElement").set_attribute("child", AttributeType.ELEMENT, "nope")


def test_missing_attribute_raises_key_error():
    dm = DmElement("x", "DmElement")
    assert "missing" not in dm
    with pytest.raises(KeyError):
        dm["missing"]


def test_array_push_roundtrip():
    dm = DmElement("x", "DmElement")
    times = dm.create_array("times", AttributeType.TIME_ARRAY)
    times.push(0.5)
    times.push(1.5)
    assert dm["times"] == [0.5, 1.5]


def test_text_writes_shared_element_once():
    leaf = Leaf("leaf", shutter=0.0208)
    root = Holder("root", children=[leaf, leaf])
    dm = Serializer().serialize(root)
    text = serialize_text(dm)
    leaf_dm = dm["children"][0]
    assert text.splitlines()[0].startswith("<!-- dmx encoding keyvalues2")
    assert text.count('"DmeLeaf"') == 1
    assert f'"element" "{leaf_dm.id}"' in text
    assert '"shutter" "time" "0.0208"' in text
    assert '"visible" "bool" "1"' in text
    assert '"partner" "element" ""' in text
    assert '"name" "string" "root"' in text


def test_text_escapes_quotes():
    dm = DmElement('say "hi"', "DmElement")
    text = serialize_text(dm)
    assert '"name" "string" "say \\"hi\\""' in text