"""Channels that drive attributes, and the controls they read from."""

from __future__ import annotations

from dataclasses import dataclass, field

from .dmx import AttributeType, DmElement, Element, Serializer
from .logs import Log, LogValueKind
from .types import IDENTITY_QUATERNION, ZERO_VECTOR3, Quaternion, Vector3


class Channel(Element):
    """Copies an attribute of one element to another, recording it in a log.

    A channel is exported only when both ends are set and exportable.
    """

    def __init__(self, name: str, kind: LogValueKind | None = None) -> None:
        self.name = name
        self.from_element: Element | None = None
        self.from_attribute = ""
        self.from_index = 0
        self.to_element: Element | None = None
        self.to_attribute = ""
        self.to_index = 0
        self.mode = 0
        self.log: Log | None = Log(kind) if kind is not None else None

    def __repr__(self) -> str:
        return f"Channel({self.name!r})"

    def _create_dm_element(self, serializer: Serializer) -> DmElement:
        return DmElement(self.name, "DmeChannel")

    def _is_exportable(self) -> bool:
        if self.from_element is None or self.to_element is None:
            return False
        return self.from_element._is_exportable() and self.to_element._is_exportable()

    def _to_dm_element(self, serializer: Serializer, dm: DmElement) -> None:
        if self.from_element is not None:
            dm.set_attribute("fromElement", AttributeType.ELEMENT, serializer.get_element(self.from_element))
        dm.set_attribute("fromAttribute", AttributeType.STRING, self.from_attribute)
        dm.set_attribute("fromIndex", AttributeType.INT, self.from_index)
        if self.to_element is not None:
            dm.set_attribute("toElement", AttributeType.ELEMENT, serializer.get_element(self.to_element))
        dm.set_attribute("toAttribute", AttributeType.STRING, self.to_attribute)
        dm.set_attribute("toIndex", AttributeType.INT, self.to_index)
        dm.set_attribute("mode", AttributeType.INT, self.mode)
        if self.log is not None:
            dm.set_attribute("log", AttributeType.ELEMENT, serializer.get_element(self.log))


@dataclass(eq=False)
class Control(Element):
    """A scalar control with a float channel reading its value."""

    name: str
    value: float = 0.0
    default_value: float = 0.0
    channel: Channel = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.channel = Channel(self.name + "_flex_channel", LogValueKind.FLOAT)
        self.channel.from_element = self
        self.channel.from_attribute = "value"
        self.channel.mode = 3

    def _create_dm_element(self, serializer: Serializer) -> DmElement:
        return DmElement(self.name, "DmElement")

    def _to_dm_element(self, serializer: Serializer, dm: DmElement) -> None:
        dm.set_attribute("value", AttributeType.FLOAT, self.value)
        dm.set_attribute("defaultValue", AttributeType.FLOAT, self.default_value)
        dm.set_attribute("channel", AttributeType.ELEMENT, serializer.get_element(self.channel))


@dataclass(eq=False)
class TransformControl(Element):
    """A position and orientation control with one channel for each."""

    name: str
    value_position: Vector3 = ZERO_VECTOR3
    value_orientation: Quaternion = IDENTITY_QUATERNION
    exportable: bool = True
    position_channel: Channel = field(init=False, repr=False)
    orientation_channel: Channel = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.position_channel = Channel(self.name + "_p", LogValueKind.VECTOR3)
        self.position_channel.from_element = self
        self.position_channel.from_attribute = "valuePosition"
        self.position_channel.mode = 3

        self.orientation_channel = Channel(self.name + "_o", LogValueKind.QUATERNION)
        self.orientation_channel.from_element = self
        self.orientation_channel.from_attribute = "valueOrientation"
        self.orientation_channel.mode = 3

    def _create_dm_element(self, serializer: Serializer) -> DmElement:
        return DmElement(self.name, "DmeTransformControl")

    def _is_exportable(self) -> bool:
        return self.exportable

    def _to_dm_element(self, serializer: Serializer, dm: DmElement) -> None:
        dm.set_attribute("valuePosition", AttributeType.VECTOR3, self.value_position)
        dm.set_attribute("valueOrientation", AttributeType.QUATERNION, self.value_orientation)
        dm.set_attribute("positionChannel", AttributeType.ELEMENT, serializer.get_element(self.position_channel))
        dm.set_attribute(
            "orientationChannel", AttributeType.ELEMENT, serializer.get_element(self.orientation_channel)
        )


@dataclass(eq=False)
class ControlValue(Element):
    """A named value stored in a preset."""

    name: str
    value: float = 0.0

    def _create_dm_element(self, serializer: Serializer) -> DmElement:
        return DmElement(self.name, "DmElement")

    def _to_dm_element(self, serializer: Serializer, dm: DmElement) -> None:
        dm.set_attribute("value", AttributeType.FLOAT, self.value)