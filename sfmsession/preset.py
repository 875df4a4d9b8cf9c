"""Presets: named sets of control values."""

from __future__ import annotations

from dataclasses import dataclass, field

from .channel import ControlValue
from .dmx import AttributeType, DmElement, Element, Serializer


@dataclass(eq=False)
class Preset(Element):
    """A named preset with a description and the control values it sets."""

    name: str
    description: str = ""
    control_values: list[ControlValue] = field(default_factory=list)

    def add_control_value(self, control_value: ControlValue) -> None:
        """Append an existing control value."""
        self.control_values.append(control_value)

    def create_control_value(self, name: str, value: float) -> ControlValue:
        """Create a control value, append it and return it."""
        control_value = ControlValue(name, value)
        self.control_values.append(control_value)
        return control_value

    def _create_dm_element(self, serializer: Serializer) -> DmElement:
        return DmElement(self.name, "DmePreset")

    def _to_dm_element(self, serializer: Serializer, dm: DmElement) -> None:
        dm.set_attribute("description", AttributeType.STRING, self.description)
        values = dm.create_array("controlValues", AttributeType.ELEMENT_ARRAY)
        for control_value in self.control_values:
            values.push(serializer.get_element(control_value))