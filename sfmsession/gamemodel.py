"""Game models with their bones, attachments and flex controller operators."""

from __future__ import annotations

from typing import Protocol

from .channel import TransformControl
from .dmx import AttributeType, DmElement, Element, Serializer
from .nodes import Bone, Node
from .types import ZERO_QUATERNION, ZERO_VECTOR3, Attachment, Quaternion, Vector3

ALL_MESH_GROUPS = 0xFFFFFFFFFFFFFFFF


class TransformControlFactory(Protocol):
    """Anything that creates and registers transform controls by name."""

    def create_transform_control(self, name: str) -> TransformControl: ...


class GlobalFlexControllerOperator(Element):
    """Drives one flex weight of a game model."""

    def __init__(self, name: str, flex_weight: float, game_model: GameModel | None) -> None:
        self.name = name
        self.flex_weight = flex_weight
        self.game_model = game_model

    def __repr__(self) -> str:
        return f"GlobalFlexControllerOperator({self.name!r}, {self.flex_weight!r})"

    def _create_dm_element(self, serializer: Serializer) -> DmElement:
        return DmElement(self.name, "DmeGlobalFlexControllerOperator")

    def _to_dm_element(self, serializer: Serializer, dm: DmElement) -> None:
        dm.set_attribute("flexWeight", AttributeType.FLOAT, self.flex_weight)
        dm.set_attribute("gameModel", AttributeType.ELEMENT, serializer.get_element(self.game_model))


class GameModel(Node):
    """A model placed in the scene, with a skeleton that may follow a parent model."""

    def __init__(self, name: str, model_name: str) -> None:
        super().__init__(name)
        self.model_name = model_name
        self.skin = 0
        self.flex_weights: list[float] = []
        self.mesh_group_mask = ALL_MESH_GROUPS
        self.bones: list[Bone] = []
        self.attachments: dict[str, Attachment] = {}
        self.global_flex_controllers: list[GlobalFlexControllerOperator] = []
        self.compute_bounds = True
        self.evaluate_procedural_bones = True
        self.parent_model: GameModel | None = None

    def create_bone(
        self,
        animation_set: TransformControlFactory,
        name: str,
        bone_id: int,
        position: Vector3,
        orientation: Quaternion,
    ) -> Bone:
        """Create a bone and the transform control in ``animation_set`` that animates it."""
        bone = Bone(name, bone_id)
        self.bones.append(bone)
        bone.transform.position = position
        bone.transform.orientation = orientation

        control = animation_set.create_transform_control(name)
        control.position_channel.to_element = bone.transform
        control.orientation_channel.to_element = bone.transform
        control.value_position = position
        control.value_orientation = orientation
        bone.transform_control = control

        control.position_channel.log.get_layer("vector3 log").default_value = position
        control.orientation_channel.log.get_layer("quaternion log").default_value = orientation
        return bone

    def create_attachment(
        self,
        name: str,
        parent_bone: str = "",
        position: Vector3 = ZERO_VECTOR3,
        orientation: Quaternion = ZERO_QUATERNION,
    ) -> Attachment:
        """Create an attachment, replacing any attachment with the same name."""
        attachment = Attachment(name, parent_bone, position, orientation)
        self.attachments[name] = attachment
        return attachment

    def create_global_flex_controller_operator(
        self, name: str, flex_weight: float
    ) -> GlobalFlexControllerOperator:
        """Create a flex controller operator and record its weight."""
        operator = GlobalFlexControllerOperator(name, flex_weight, self)
        self.global_flex_controllers.append(operator)
        self.flex_weights.append(flex_weight)
        return operator

    def get_bone_by_name(self, name: str) -> Bone | None:
        """Return the first bone whose name matches ``name`` ignoring case."""
        wanted = name.lower()
        return next((bone for bone in self.bones if bone.name.lower() == wanted), None)

    def get_attachment_by_name(self, name: str) -> Attachment | None:
        """Return the attachment called ``name``, or None."""
        return self.attachments.get(name)

    def set_parent_model(self, parent: GameModel | None) -> None:
        """Make bones shared with ``parent`` follow the parent's bones.

        Followed bones export an identity transform and no transform control.
        """
        self.parent_model = parent
        for bone in self.bones:
            if parent is None:
                bone.override_parent = None
                continue
            parent_bone = parent.get_bone_by_name(bone.name)
            following = parent_bone is not None
            bone.override_parent = parent_bone
            if bone.transform_control is not None:
                bone.transform_control.exportable = not following
            bone.transform.identity = following

    def _create_dm_element(self, serializer: Serializer) -> DmElement:
        return DmElement(self.name, "DmeGameModel")

    def _to_dm_element(self, serializer: Serializer, dm: DmElement) -> None:
        dm.set_attribute("modelName", AttributeType.STRING, self.model_name)
        dm.set_attribute("skin", AttributeType.INT, self.skin)
        dm.set_attribute("transform", AttributeType.ELEMENT, serializer.get_element(self.transform))
        dm.set_attribute("visible", AttributeType.BOOL, self.visible)
        dm.set_attribute("meshGroupMask", AttributeType.UINT64, self.mesh_group_mask)
        dm.set_attribute("computeBounds", AttributeType.BOOL, self.compute_bounds)
        dm.set_attribute("evaluateProceduralBones", AttributeType.BOOL, self.evaluate_procedural_bones)

        children = dm.create_array("children", AttributeType.ELEMENT_ARRAY)
        for child in self.children:
            children.push(serializer.get_element(child))

        dm.set_attribute("flexWeights", AttributeType.FLOAT_ARRAY, self.flex_weights)

        bones = dm.create_array("bones", AttributeType.ELEMENT_ARRAY)
        for bone in self.bones:
            bones.push(serializer.get_element(bone.transform))

        controllers = dm.create_array("globalFlexControllers", AttributeType.ELEMENT_ARRAY)
        for controller in self.global_flex_controllers:
            controllers.push(serializer.get_element(controller))

        if self.parent_model is not None:
            dm.set_attribute("overrideParent", AttributeType.ELEMENT, serializer.get_element(self.parent_model))