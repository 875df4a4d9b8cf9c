from sfmsession.animationgroups import load_animation_groups
from sfmsession.channel import Control, TransformControl
from sfmsession.controlgroup import ControlGroup
from sfmsession.dmx import Serializer


def test_defaults():
    group = ControlGroup("Face")
    assert group.group_color == (200, 200, 200, 255)
    assert group.control_color == (200, 200, 200, 255)
    assert group.visible and group.selectable and group.snappable


def test_create_child_reuses_existing():
    root = ControlGroup()
    first = root.create_child("Arms")
    assert root.create_child("Arms") is first
    assert list(root.children) == ["Arms"]
    assert first.name == "Arms"


def test_create_controls():
    group = ControlGroup("g")
    control = group.create_control("jaw")
    transform = group.create_transform_control("pelvis")
    assert isinstance(control, Control) and control.name == "jaw"
    assert isinstance(transform, TransformControl) and transform.name == "pelvis"
    assert group.controls == [control, transform]


def test_add_control_is_a_set():
    group = ControlGroup("g")
    control = Control("c")
    group.add_control(control)
    group.add_control(control)
    assert group.controls == [control]


def test_sub_group_for_unknown_control():
    root = ControlGroup()
    sub = root.get_sub_group("cgTest_unlisted")
    assert sub is root.children["Unknown"]
    assert sub.group_color == (0, 128, 255, 255)


def test_sub_group_for_registered_control():
    load_animation_groups(
        '"groupFile" { "Body" { "Arms" { "control" "cgTest_arm" } } }'
    )
    root = ControlGroup()
    sub = root.get_sub_group("cgTest_arm")
    body = root.children["Body"]
    assert sub is body.children["Arms"]
    assert body.group_color == (64, 200, 64, 255)
    assert sub.group_color == (255, 255, 255, 255)
    assert root.get_sub_group("cgTest_arm") is sub


def test_serialize():
    root = ControlGroup("root")
    child = root.create_child("child")
    control = child.create_control("jaw")
    dm = Serializer().serialize(root)
    assert dm.type == "DmeControlGroup"
    assert dm.name == "root"
    assert [c.name for c in dm["children"]] == ["child"]
    assert dm["controls"] == []
    assert dm["groupColor"] == root.group_color
    assert dm["visible"] is True
    child_dm = dm["children"][0]
    assert [c.name for c in child_dm["controls"]] == [control.name]


def test_unexportable_control_serializes_as_none():
    group = ControlGroup("g")
    transform = group.create_transform_control("hidden")
    transform.exportable = False
    dm = Serializer().serialize(group)
    assert dm["controls"] == [None]