"""Transforms and time frames."""

from __future__ import annotations

from dataclasses import dataclass

from .dmx import AttributeType, DmElement, Element, Serializer
from .types import IDENTITY_QUATERNION, ZERO_VECTOR3, Quaternion, Time, Vector3


@dataclass(eq=False)
class Transform(Element):
    """Position, orientation and scale; an identity transform exports as neutral values."""

    name: str = ""
    position: Vector3 = ZERO_VECTOR3
    orientation: Quaternion = IDENTITY_QUATERNION
    scale: float = 1.0
    identity: bool = False

    def _create_dm_element(self, serializer: Serializer) -> DmElement:
        return DmElement(self.name, "DmeTransform")

    def _to_dm_element(self, serializer: Serializer, dm: DmElement) -> None:
        if self.identity:
            dm.set_attribute("position", AttributeType.VECTOR3, ZERO_VECTOR3)
            dm.set_attribute("orientation", AttributeType.QUATERNION, IDENTITY_QUATERNION)
            dm.set_attribute("scale", AttributeType.FLOAT, 1.0)
        else:
            dm.set_attribute("position", AttributeType.VECTOR3, self.position)
            dm.set_attribute("orientation", AttributeType.QUATERNION, self.orientation)
            dm.set_attribute("scale", AttributeType.FLOAT, self.scale)


@dataclass(eq=False)
class TimeFrame(Element):
    """Start, duration, offset and scale of a clip."""

    start: Time = 0.0
    duration: Time = 60.0
    offset: Time = 0.0
    scale: float = 1.0

    def _create_dm_element(self, serializer: Serializer) -> DmElement:
        return DmElement("", "DmeTimeFrame")

    def _to_dm_element(self, serializer: Serializer, dm: DmElement) -> None:
        dm.set_attribute("start", AttributeType.TIME, self.start)
        dm.set_attribute("duration", AttributeType.TIME, self.duration)
        dm.set_attribute("offset", AttributeType.TIME, self.offset)
        dm.set_attribute("scale", AttributeType.FLOAT, self.scale)