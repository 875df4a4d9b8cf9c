"""Scene graph nodes: plain dag nodes, skeleton bones and particle control points."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .dmx import AttributeType, DmElement, Element, Serializer
from .transform import Transform

if TYPE_CHECKING:
    from .channel import TransformControl
    from .gamemodel import GameModel


class Node(Element):
    """A dag node with a transform, a visibility flag and child nodes.

    A node may be attached to another node through ``override_parent``.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._label = name
        self.transform = Transform(name)
        self.visible = True
        self.children: list[Node] = []
        self.override_parent: Node | None = None
        self.override_pos = True
        self.override_rot = True

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    def add_child(self, child: Node) -> None:
        """Append ``child`` to the children of this node."""
        self.children.append(child)

    def _create_dm_element(self, serializer: Serializer) -> DmElement:
        return DmElement(self._label, "DmeDag")

    def _to_dm_element(self, serializer: Serializer, dm: DmElement) -> None:
        dm.set_attribute("transform", AttributeType.ELEMENT, serializer.get_element(self.transform))
        dm.set_attribute("visible", AttributeType.BOOL, self.visible)
        children = dm.create_array("children", AttributeType.ELEMENT_ARRAY)
        for child in self.children:
            children.push(serializer.get_element(child))
        if self.override_parent is not None:
            dm.set_attribute(
                "overrideParent", AttributeType.ELEMENT, serializer.get_element(self.override_parent)
            )
            dm.set_attribute("overridePos", AttributeType.BOOL, self.override_pos)
            dm.set_attribute("overrideRot", AttributeType.BOOL, self.override_rot)


class Bone(Node):
    """A skeleton bone; its dag node is labelled with its index and name."""

    def __init__(self, name: str, bone_id: int) -> None:
        super().__init__(f"bone {bone_id} ({name})")
        self.name = name
        self.bone_id = bone_id
        self.transform_control: TransformControl | None = None


class ControlPoint(Node):
    """A control point of a particle system, optionally tied to a model attachment."""

    def __init__(self, point_id: int) -> None:
        super().__init__(f"controlPoint{point_id}")
        self.point_id = point_id
        self.transform_control: TransformControl | None = None
        self.control_model: GameModel | None = None
        self.attach_type = ""
        self.attachment_name = ""
        self.entity_name = ""