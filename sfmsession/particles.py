"""Particle systems placed in the scene and their control points."""

from __future__ import annotations

from .dmx import AttributeType, DmElement, Serializer
from .gamemodel import GameModel, TransformControlFactory
from .nodes import ControlPoint, Node


class GameParticleSystem(Node):
    """A particle system node; its control points may follow attachments of a model."""

    def __init__(self, name: str, system_name: str) -> None:
        super().__init__(name)
        self.system_name = system_name
        self.control_points: list[ControlPoint] = []
        self.parent_model: GameModel | None = None

    def create_control_point(
        self,
        animation_set: TransformControlFactory,
        point_id: int,
        control_model: GameModel | None,
    ) -> ControlPoint:
        """Return control point ``point_id``, creating it and every missing lower point.

        Each new point gets a transform control in ``animation_set``.
        """
        if point_id < 0:
            raise ValueError(f"control point id must not be negative, got {point_id}")
        for index in range(len(self.control_points), point_id + 1):
            point = ControlPoint(index)
            self.children.append(point)
            self.control_points.append(point)

            control = animation_set.create_transform_control(f"controlPoint{index}")
            control.position_channel.to_element = point.transform
            control.orientation_channel.to_element = point.transform
            point.transform_control = control

            control.position_channel.log.get_layer("vector3 log")
            control.orientation_channel.log.get_layer("quaternion log")

        point = self.control_points[point_id]
        point.control_model = control_model
        return point

    def get_control_point(self, point_id: int) -> ControlPoint:
        """Return control point ``point_id``; raises IndexError if it does not exist."""
        if point_id < 0:
            raise IndexError(f"control point {point_id} does not exist")
        return self.control_points[point_id]

    def set_parent_model(self, parent: GameModel | None) -> None:
        """Tie control points to ``parent`` and, through attachments, to its bones.

        A point whose entity is ``"parent"`` moves the lookup to the parent's own
        parent model, for that point and the points after it. None does nothing.
        """
        if parent is None:
            return
        self.parent_model = parent
        for point in self.control_points:
            if point.entity_name == "parent" and parent.parent_model is not None:
                parent = parent.parent_model
            point.control_model = parent

            attachment = parent.get_attachment_by_name(point.attachment_name)
            if attachment is not None:
                parent_bone = parent.get_bone_by_name(attachment.parent_bone)
                if parent_bone is not None:
                    point.override_parent = parent_bone
                    if point.transform_control is not None:
                        point.transform_control.exportable = False
                    point.transform.position = attachment.position
                    point.transform.orientation = attachment.orientation
                    continue

            point.override_parent = None
            if point.transform_control is not None:
                point.transform_control.exportable = True
            point.transform.identity = False

    def _create_dm_element(self, serializer: Serializer) -> DmElement:
        return DmElement(self.name, "DmeGameParticleSystem")

    def _to_dm_element(self, serializer: Serializer, dm: DmElement) -> None:
        dm.set_attribute("particleSystemType", AttributeType.STRING, self.system_name)
        dm.set_attribute("transform", AttributeType.ELEMENT, serializer.get_element(self.transform))
        dm.set_attribute("visible", AttributeType.BOOL, self.visible)
        dm.set_attribute("simulating", AttributeType.BOOL, True)
        dm.set_attribute("emitting", AttributeType.BOOL, True)
        dm.set_attribute("inEndCap", AttributeType.BOOL, False)
        dm.set_attribute("randomSeed", AttributeType.INT, 0)
        dm.set_attribute("simulationTimeScale", AttributeType.FLOAT, 1.0)
        dm.set_attribute("depthSortBias", AttributeType.FLOAT, 0.0)

        children = dm.create_array("children", AttributeType.ELEMENT_ARRAY)
        for child in self.children:
            children.push(serializer.get_element(child))

        points = dm.create_array("controlPoints", AttributeType.ELEMENT_ARRAY)
        models = dm.create_array("controlModels", AttributeType.ELEMENT_ARRAY)
        for point in self.control_points:
            points.push(serializer.get_element(point.transform))
            if point.control_model is not None:
                models.push(serializer.get_element(point.control_model))

        if self.parent_model is not None:
            dm.set_attribute("overrideParent", AttributeType.ELEMENT, serializer.get_element(self.parent_model))