"""Animation sets: the controls, channels and scene object animated together."""

from __future__ import annotations

from .channel import Channel, Control, TransformControl
from .controlgroup import ControlGroup
from .dmx import AttributeType, DmElement, Element, Serializer
from .gamemodel import GameModel
from .particles import GameParticleSystem
from .types import ROOT_TRANSFORM


class AnimationSet(Element):
    """Controls by name, grouped in a control group tree, driving one model or particle system."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.controls: dict[str, Element] = {}
        self.preset_groups: list[Element] = []
        self.operators: list[Element] = []
        self.root_control_group = ControlGroup("")
        self._game_model: GameModel | None = None
        self._particle_system: GameParticleSystem | None = None

        self.root_transform_control = self.create_transform_control(ROOT_TRANSFORM)
        self.root_transform_control.position_channel.log.get_layer("vector3 log")
        self.root_transform_control.orientation_channel.log.get_layer("quaternion log")

    def __repr__(self) -> str:
        return f"AnimationSet({self.name!r})"

    @property
    def game_model(self) -> GameModel | None:
        """The model this set animates, if any."""
        return self._game_model

    @game_model.setter
    def game_model(self, model: GameModel) -> None:
        self._game_model = model
        self.root_transform_control.position_channel.to_element = model.transform
        self.root_transform_control.orientation_channel.to_element = model.transform

    @property
    def particle_system(self) -> GameParticleSystem | None:
        """The particle system this set animates, if any."""
        return self._particle_system

    @particle_system.setter
    def particle_system(self, system: GameParticleSystem) -> None:
        self._particle_system = system
        self.root_transform_control.position_channel.to_element = system.transform
        self.root_transform_control.orientation_channel.to_element = system.transform

    def add_operator(self, operator: Element) -> None:
        """Append an operator to the set."""
        self.operators.append(operator)

    def add_control(self, name: str, control: Element) -> None:
        """Register ``control`` under ``name``, replacing any control of that name."""
        self.controls[name] = control

    def create_control(self, name: str) -> Control:
        """Create a scalar control in its default group and register it."""
        control = self.root_control_group.get_sub_group(name).create_control(name)
        self.add_control(name, control)
        return control

    def create_transform_control(self, name: str) -> TransformControl:
        """Create a transform control in its default group and register it."""
        control = self.root_control_group.get_sub_group(name).create_transform_control(name)
        control.position_channel.to_attribute = "position"
        control.orientation_channel.to_attribute = "orientation"
        self.add_control(name, control)
        return control

    def get_control(self, name: str) -> Control | None:
        """Return the scalar control called ``name``, or None."""
        control = self.controls.get(name)
        return control if isinstance(control, Control) else None

    def get_transform_control(self, name: str) -> TransformControl | None:
        """Return the transform control called ``name``, or None."""
        control = self.controls.get(name)
        return control if isinstance(control, TransformControl) else None

    def channels(self) -> list[Channel]:
        """Return the channels of every control of the set."""
        result: list[Channel] = []
        for control in self.controls.values():
            if isinstance(control, TransformControl):
                result.extend((control.position_channel, control.orientation_channel))
            elif isinstance(control, Control):
                result.append(control.channel)
            else:
                raise TypeError(f"unknown control type {type(control).__name__}")
        return result

    def _create_dm_element(self, serializer: Serializer) -> DmElement:
        return DmElement(self.name, "DmeAnimationSet")

    def _to_dm_element(self, serializer: Serializer, dm: DmElement) -> None:
        controls = dm.create_array("controls", AttributeType.ELEMENT_ARRAY)
        for control in self.controls.values():
            controls.push(serializer.get_element(control))

        preset_groups = dm.create_array("presetGroups", AttributeType.ELEMENT_ARRAY)
        for preset_group in self.preset_groups:
            preset_groups.push(serializer.get_element(preset_group))

        operators = dm.create_array("operators", AttributeType.ELEMENT_ARRAY)
        for operator in self.operators:
            operators.push(serializer.get_element(operator))

        dm.set_attribute(
            "rootControlGroup", AttributeType.ELEMENT, serializer.get_element(self.root_control_group)
        )
        if self._game_model is not None:
            dm.set_attribute("gameModel", AttributeType.ELEMENT, serializer.get_element(self._game_model))
        if self._particle_system is not None:
            dm.set_attribute(
                "particle system", AttributeType.ELEMENT, serializer.get_element(self._particle_system)
            )


def create_animation_set_for_model(name: str, filename: str) -> AnimationSet:
    """Create an animation set driving a new game model of ``filename``."""
    animation_set = AnimationSet(name)
    animation_set.game_model = GameModel(name, filename)
    return animation_set


def create_animation_set_for_particle_system(name: str, system_name: str) -> AnimationSet:
    """Create an animation set driving a new particle system ``system_name``."""
    animation_set = AnimationSet(name)
    animation_set.particle_system = GameParticleSystem(name, system_name)
    return animation_set