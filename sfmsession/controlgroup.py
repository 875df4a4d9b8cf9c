"""Hierarchical groups of controls shown in the animation set editor."""

from __future__ import annotations

from dataclasses import dataclass, field

from .animationgroups import get_animation_group
from .channel import Control, TransformControl
from .dmx import AttributeType, DmElement, Element, Serializer
from .types import Color

DEFAULT_CONTROL_GROUP_COLOR: Color = (200, 200, 200, 255)
_INTERMEDIATE_GROUP_COLOR: Color = (64, 200, 64, 255)


@dataclass(eq=False)
class ControlGroup(Element):
    """A named group holding child groups by name and a set of controls."""

    name: str = ""
    group_color: Color = DEFAULT_CONTROL_GROUP_COLOR
    control_color: Color = DEFAULT_CONTROL_GROUP_COLOR
    visible: bool = True
    selectable: bool = True
    snappable: bool = True
    children: dict[str, ControlGroup] = field(default_factory=dict, repr=False)
    _controls: dict[Element, None] = field(default_factory=dict, init=False, repr=False)

    @property
    def controls(self) -> list[Element]:
        """The controls of this group, in the order they were added."""
        return list(self._controls)

    def create_child(self, name: str) -> ControlGroup:
        """Return the child group called ``name``, creating it if needed."""
        child = self.children.get(name)
        if child is None:
            child = ControlGroup(name)
            self.children[name] = child
        return child

    def add_control(self, control: Element) -> None:
        """Add ``control`` to this group; adding it again has no effect."""
        self._controls[control] = None

    def create_control(self, name: str) -> Control:
        """Create a scalar control in this group."""
        control = Control(name)
        self.add_control(control)
        return control

    def create_transform_control(self, name: str) -> TransformControl:
        """Create a transform control in this group."""
        control = TransformControl(name)
        self.add_control(control)
        return control

    def get_sub_group(self, control_name: str) -> ControlGroup:
        """Return the nested group a control belongs to, creating the path as needed."""
        group = get_animation_group(control_name)
        current = self
        for part in group.root:
            current = current.create_child(part)
            current.group_color = _INTERMEDIATE_GROUP_COLOR
        current.group_color = group.color
        return current

    def _create_dm_element(self, serializer: Serializer) -> DmElement:
        return DmElement(self.name, "DmeControlGroup")

    def _to_dm_element(self, serializer: Serializer, dm: DmElement) -> None:
        children = dm.create_array("children", AttributeType.ELEMENT_ARRAY)
        for child in self.children.values():
            children.push(serializer.get_element(child))
        controls = dm.create_array("controls", AttributeType.ELEMENT_ARRAY)
        for control in self._controls:
            controls.push(serializer.get_element(control))
        dm.set_attribute("groupColor", AttributeType.COLOR, self.group_color)
        dm.set_attribute("controlColor", AttributeType.COLOR, self.control_color)
        dm.set_attribute("visible", AttributeType.BOOL, self.visible)
        dm.set_attribute("selectable", AttributeType.BOOL, self.selectable)
        dm.set_attribute("snappable", AttributeType.BOOL, self.snappable)