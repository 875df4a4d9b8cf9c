from sfmsession.channel import TransformControl
from sfmsession.dmx import Serializer
from sfmsession.gamemodel import ALL_MESH_GROUPS, GameModel, GlobalFlexControllerOperator
from sfmsession.nodes import Node


class _ControlRegistry:
    def __init__(self):
        self.transform_controls = {}

    def create_transform_control(self, name):
        control = TransformControl(name)
        self.transform_controls[name] = control
        return control


POSITION = (1.0, 2.0, 3.0)
ORIENTATION = (0.0, 0.0, 0.5, 0.5)


def _model_with_bone(name, bone_name):
    registry = _ControlRegistry()
    model = GameModel(name, f"models/{name}.vmdl")
    bone = model.create_bone(registry, bone_name, 0, POSITION, ORIENTATION)
    return model, bone, registry


def test_defaults():
    model = GameModel("hero", "models/hero.vmdl")
    assert model.model_name == "models/hero.vmdl"
    assert model.skin == 0
    assert model.mesh_group_mask == 0xFFFFFFFFFFFFFFFF
    assert model.compute_bounds and model.evaluate_procedural_bones
    assert model.parent_model is None


def test_create_bone_wires_transform_control():
    model, bone, registry = _model_with_bone("hero", "spine")
    control = registry.transform_controls["spine"]
    assert model.bones == [bone]
    assert bone.transform.position == POSITION
    assert bone.transform.orientation == ORIENTATION
    assert bone.transform_control is control
    assert control.position_channel.to_element is bone.transform
    assert control.orientation_channel.to_element is bone.transform
    assert control.value_position == POSITION
    assert control.value_orientation == ORIENTATION
    assert control.position_channel.log.get_layer("vector3 log").default_value == POSITION
    assert control.orientation_channel.log.get_layer("quaternion log").default_value == ORIENTATION


def test_get_bone_by_name_ignores_case():
    model, bone, _ = _model_with_bone("hero", "Spine_Upper")
    assert model.get_bone_by_name("spine_upper") is bone
    assert model.get_bone_by_name("SPINE_UPPER") is bone
    assert model.get_bone_by_name("head") is None


def test_attachments():
    model = GameModel("hero", "m")
    attachment = model.create_attachment("attach_hand", "hand_R", POSITION, ORIENTATION)
    assert model.get_attachment_by_name("attach_hand") is attachment
    assert attachment.parent_bone == "hand_R"
    assert attachment.position == POSITION
    assert model.get_attachment_by_name("Attach_Hand") is None


def test_flex_controller_operator_records_weight():
    model = GameModel("hero", "m")
    first = model.create_global_flex_controller_operator("jawOpen", 0.25)
    second = model.create_global_flex_controller_operator("blink", 0.5)
    assert model.global_flex_controllers == [first, second]
    assert model.flex_weights == [0.25, 0.5]
    assert first.game_model is model


def test_set_parent_model_follows_matching_bones():
    parent, parent_bone, _ = _model_with_bone("hero", "Spine")
    child, child_bone, _ = _model_with_bone("item", "spine")
    lonely = child.create_bone(_ControlRegistry(), "cape", 1, POSITION, ORIENTATION)
    child.set_parent_model(parent)
    assert child.parent_model is parent
    assert child_bone.override_parent is parent_bone
    assert child_bone.transform_control.exportable is False
    assert child_bone.transform.identity is True
    assert lonely.override_parent is None
    assert lonely.transform_control.exportable is True
    assert lonely.transform.identity is False


def test_set_parent_model_none_clears_override():
    parent, _, _ = _model_with_bone("hero", "spine")
    child, child_bone, _ = _model_with_bone("item", "spine")
    child.set_parent_model(parent)
    child.set_parent_model(None)
    assert child.parent_model is None
    assert child_bone.override_parent is None


def test_followed_bone_control_is_not_serialized():
    parent, _, _ = _model_with_bone("hero", "spine")
    child, child_bone, _ = _model_with_bone("item", "spine")
    child.set_parent_model(parent)
    serializer = Serializer()
    assert serializer.get_element(child_bone.transform_control) is None
    dm = serializer.serialize(child_bone.transform)
    assert dm["position"] == (0.0, 0.0, 0.0)


def test_serialize_game_model():
    parent = GameModel("hero", "m")
    model, bone, _ = _model_with_bone("item", "spine")
    child = Node("child")
    model.add_child(child)
    operator = model.create_global_flex_controller_operator("jawOpen", 0.25)
    model.set_parent_model(parent)
    model.skin = 2
    serializer = Serializer()
    dm = serializer.serialize(model)
    assert dm.type == "DmeGameModel"
    assert dm.name == "item"
    assert dm["modelName"] == "models/item.vmdl"
    assert dm["skin"] == 2
    assert dm["meshGroupMask"] == ALL_MESH_GROUPS
    assert dm["bones"] == [serializer.get_element(bone.transform)]
    assert dm["children"] == [serializer.get_element(child)]
    assert dm["flexWeights"] == [0.25]
    assert dm["globalFlexControllers"] == [serializer.get_element(operator)]
    assert dm["overrideParent"] is serializer.get_element(parent)


def test_serialize_flex_controller_operator():
    model = GameModel("hero", "m")
    operator = GlobalFlexControllerOperator("blink", 0.75, model)
    serializer = Serializer()
    dm = serializer.serialize(operator)
    assert dm.type == "DmeGlobalFlexControllerOperator"
    assert dm.name == "blink"
    assert dm["flexWeight"] == 0.75
    assert dm["gameModel"] is serializer.get_element(model)