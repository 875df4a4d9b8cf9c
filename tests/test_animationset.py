import pytest

from sfmsession.animationset import (
    AnimationSet,
    create_animation_set_for_model,
    create_animation_set_for_particle_system,
)
from sfmsession.channel import ControlValue
from sfmsession.dmx import Serializer
from sfmsession.types import ROOT_TRANSFORM


def test_root_transform_control_is_created():
    animation_set = AnimationSet("set")
    control = animation_set.get_transform_control(ROOT_TRANSFORM)
    assert control is animation_set.root_transform_control
    assert animation_set.get_control(ROOT_TRANSFORM) is None
    assert "vector3 log" in control.position_channel.log.layers
    assert "quaternion log" in control.orientation_channel.log.layers
    assert control.position_channel.to_attribute == "position"
    assert control.orientation_channel.to_attribute == "orientation"


def test_create_control_registers_it():
    animation_set = AnimationSet("set")
    control = animation_set.create_control("zzNoSuchControl")
    assert animation_set.get_control("zzNoSuchControl") is control
    assert animation_set.get_transform_control("zzNoSuchControl") is None
    assert animation_set.get_control("missing") is None


def test_control_lands_in_unknown_group():
    animation_set = AnimationSet("set")
    control = animation_set.create_control("zzAnotherControl")
    group = animation_set.root_control_group.children["Unknown"]
    assert control in group.controls


def test_channels_lists_every_control_channel():
    animation_set = AnimationSet("set")
    assert len(animation_set.channels()) == 2
    control = animation_set.create_control("zzFlex")
    channels = animation_set.channels()
    assert len(channels) == 3
    assert control.channel in channels
    assert animation_set.root_transform_control.position_channel in channels


def test_channels_rejects_unknown_control_type():
    animation_set = AnimationSet("set")
    animation_set.add_control("odd", ControlValue("odd", 1.0))
    with pytest.raises(TypeError):
        animation_set.channels()


def test_model_set_targets_model_transform():
    animation_set = create_animation_set_for_model("hero", "models/hero.vmdl")
    model = animation_set.game_model
    assert model.model_name == "models/hero.vmdl"
    assert animation_set.particle_system is None
    root = animation_set.root_transform_control
    assert root.position_channel.to_element is model.transform
    assert root.orientation_channel.to_element is model.transform


def test_particle_set_targets_system_transform():
    animation_set = create_animation_set_for_particle_system("fx", "particles/fx.vpcf")
    system = animation_set.particle_system
    assert system.system_name == "particles/fx.vpcf"
    assert animation_set.game_model is None
    assert animation_set.root_transform_control.position_channel.to_element is system.transform


def test_serialize_model_set():
    animation_set = create_animation_set_for_model("hero", "models/hero.vmdl")
    dm = Serializer().serialize(animation_set)
    assert dm.type == "DmeAnimationSet"
    assert dm.name == "hero"
    assert dm["gameModel"].type == "DmeGameModel"
    assert "particle system" not in dm
    assert dm["rootControlGroup"].type == "DmeControlGroup"
    root_dm = dm["controls"][0]
    assert root_dm.type == "DmeTransformControl"
    assert root_dm["positionChannel"].type == "DmeChannel"


def test_unbound_root_channels_are_not_exported():
    animation_set = AnimationSet("set")
    dm = Serializer().serialize(animation_set)
    root_dm = dm["controls"][0]
    assert root_dm.name == ROOT_TRANSFORM
    assert root_dm["positionChannel"] is None
    assert "gameModel" not in dm


def test_operators_are_exported():
    animation_set = AnimationSet("set")
    operator = ControlValue("op", 0.5)
    animation_set.add_operator(operator)
    dm = Serializer().serialize(animation_set)
    assert [element.name for element in dm["operators"]] == ["op"]